"""Free-form sheet edits: any field may change as long as it stays in its domain."""

from __future__ import annotations

from typing import Iterable

from modules.helpers.logging_helper import log_debug, log_module_import
from modules.pcs.constants import (
    DEMEANORS,
    ESSENCES,
    GROUPED_KINDS,
    HEALTH_LEVELS,
    NATURES,
    SCALAR_KINDS,
    STAT_DOMAINS,
    STAT_GROUPS,
    TRADITIONS,
)
from modules.pcs.models import CharacterRecord
from modules.pcs.results import CharacterRulesError, RuleResult

log_module_import(__name__)

TEXT_FIELDS = ("name", "player", "chronicle", "concept", "cabal", "notes")
CHOICE_FIELDS = {
    "tradition": TRADITIONS,
    "nature": NATURES,
    "demeanor": DEMEANORS,
}
LIST_FIELDS = ("merits", "flaws", "equipment")
SCALAR_FIELDS = ("arete", "willpower", "willpower_current", "quintessence_max", "quintessence", "paradox")


def require_stat(group: str, name: str) -> None:
    if group not in STAT_GROUPS:
        raise CharacterRulesError(f"Unknown stat group: {group}")
    if name not in STAT_GROUPS[group]:
        raise CharacterRulesError(f"Unknown {group[:-1]}: {name}")


def scalar_bounds(record: CharacterRecord, field_name: str) -> tuple[int, int]:
    """Return the inclusive domain of a scalar advantage on ``record``."""
    if field_name == "willpower_current":
        return 0, record.willpower
    if field_name == "quintessence":
        return 0, record.quintessence_max
    if field_name in STAT_DOMAINS:
        return STAT_DOMAINS[field_name]
    raise CharacterRulesError(f"Unknown advantage: {field_name}")


def set_text(record: CharacterRecord, field_name: str, value: str) -> RuleResult:
    if field_name in CHOICE_FIELDS:
        if value and value not in CHOICE_FIELDS[field_name]:
            return RuleResult.rejected(record, f"'{value}' is not a valid {field_name}.")
    elif field_name == "essence":
        if value not in ESSENCES:
            return RuleResult.rejected(record, f"'{value}' is not a valid essence.")
    elif field_name not in TEXT_FIELDS:
        raise CharacterRulesError(f"Unknown text field: {field_name}")
    return RuleResult.ok(record.copy(**{field_name: value}))


def set_stat(record: CharacterRecord, group: str, name: str, value: int) -> RuleResult:
    require_stat(group, name)
    low, high = STAT_DOMAINS[group]
    if not low <= value <= high:
        log_debug(f"Rejected {group}.{name}={value}: outside {low}-{high}")
        return RuleResult.rejected(record, f"{name} must stay between {low} and {high}.")
    return RuleResult.ok(record.with_stat(group, name, value))


def set_scalar(record: CharacterRecord, field_name: str, value: int) -> RuleResult:
    """Set an advantage; lowering a maximum pulls its current pool down with it."""
    if field_name not in SCALAR_FIELDS:
        raise CharacterRulesError(f"Unknown advantage: {field_name}")
    low, high = scalar_bounds(record, field_name)
    if not low <= value <= high:
        log_debug(f"Rejected {field_name}={value}: outside {low}-{high}")
        return RuleResult.rejected(record, f"{field_name} must stay between {low} and {high}.")

    changes = {field_name: value}
    if field_name == "willpower":
        changes["willpower_current"] = min(record.willpower_current, value)
    elif field_name == "quintessence_max":
        changes["quintessence"] = min(record.quintessence, value)
    return RuleResult.ok(record.copy(**changes))


def set_health(record: CharacterRecord, level: str, marked: bool) -> RuleResult:
    if level not in HEALTH_LEVELS:
        raise CharacterRulesError(f"Unknown health level: {level}")
    health = dict(record.health)
    health[level] = bool(marked)
    return RuleResult.ok(record.copy(health=health))


def set_list(record: CharacterRecord, field_name: str, items: Iterable[str]) -> RuleResult:
    if field_name not in LIST_FIELDS:
        raise CharacterRulesError(f"Unknown list field: {field_name}")
    cleaned = [str(item).strip() for item in items if str(item).strip()]
    return RuleResult.ok(record.copy(**{field_name: cleaned}))


def require_target(kind: str, key: str | None = None) -> None:
    """Validate a purchasable ``kind``/``key`` pair (``key`` is ignored for scalars)."""
    if kind in GROUPED_KINDS:
        if key is None:
            raise CharacterRulesError(f"A {kind} name is required.")
        require_stat(GROUPED_KINDS[kind], key)
    elif kind not in SCALAR_KINDS:
        raise CharacterRulesError(f"Unknown purchase kind: {kind}")


def current_rating(record: CharacterRecord, kind: str, key: str | None = None) -> int:
    require_target(kind, key)
    if kind in GROUPED_KINDS:
        return record.stat_group(GROUPED_KINDS[kind])[key]
    return getattr(record, kind)


def raise_rating(record: CharacterRecord, kind: str, key: str | None = None) -> CharacterRecord:
    """Return a copy with the target one dot higher.

    Buying permanent willpower also refills the current willpower pool.
    """
    new_value = current_rating(record, kind, key) + 1
    if kind in GROUPED_KINDS:
        return record.with_stat(GROUPED_KINDS[kind], key, new_value)
    if kind == "willpower":
        return record.copy(willpower=new_value, willpower_current=new_value)
    return record.copy(**{kind: new_value})
