"""Helpers to normalize stored character payloads before building a record."""

from __future__ import annotations

from copy import deepcopy

# Sheets exported by the browser version of the tool use camelCase keys.
LEGACY_KEYS = {
    "willpowerCurrent": "willpower_current",
    "quintessenceMax": "quintessence_max",
    "experienceTotal": "experience_total",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


def normalize_stored_payload(payload: dict) -> dict:
    """Return a payload copy keyed the way :meth:`CharacterRecord.from_dict` expects.

    Legacy camelCase keys are mirrored onto their snake_case names unless the
    snake_case key is already present. Raises ``ValueError`` for non-mapping
    payloads so callers can treat them like any other malformed row.
    """

    if not isinstance(payload, dict):
        raise ValueError(f"Character payload must be an object, got {type(payload).__name__}.")

    normalized = deepcopy(payload)
    for legacy_key, key in LEGACY_KEYS.items():
        if legacy_key in normalized:
            value = normalized.pop(legacy_key)
            normalized.setdefault(key, value)
    if not normalized.get("id"):
        raise ValueError("Character payload has no id.")
    return normalized
