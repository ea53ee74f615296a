"""Character sheet record for Mage: The Ascension player characters."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from modules.helpers.logging_helper import log_module_import
from modules.pcs.constants import (
    DEFAULT_ESSENCE,
    HEALTH_LEVELS,
    STARTING_ARETE,
    STARTING_WILLPOWER,
    SPHERE_NAMES,
    STAT_BASES,
    STAT_DOMAINS,
    STAT_GROUPS,
)

log_module_import(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_character_id() -> str:
    return str(uuid.uuid4())


def base_stats(group: str) -> Dict[str, int]:
    """Return a fresh mapping with every stat of ``group`` at its base rating."""
    base = STAT_BASES[group]
    return {name: base for name in STAT_GROUPS[group]}


def clean_health_track() -> Dict[str, bool]:
    return {level: False for level in HEALTH_LEVELS}


def parse_timestamp(value: Any) -> datetime:
    """Parse a stored timestamp back into an aware ``datetime``.

    Raises ``ValueError`` when the value is not a recognizable date-time.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Invalid timestamp: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _check_range(label: str, value: int, low: int, high: Optional[int] = None) -> int:
    if value < low or (high is not None and value > high):
        upper = "" if high is None else f"..{high}"
        raise ValueError(f"{label}={value} outside {low}{upper}")
    return value


def _read_stats(group: str, raw: Any) -> Dict[str, int]:
    stats = base_stats(group)
    low, high = STAT_DOMAINS[group]
    for name, value in (raw or {}).items():
        if name in stats:
            stats[name] = _check_range(f"{group}.{name}", int(value), low, high)
    return stats


def _read_scalar(data: Dict[str, Any], name: str, default: int) -> int:
    low, high = STAT_DOMAINS[name]
    return _check_range(name, int(data.get(name, default)), low, high)


def _read_affinity(raw: Any) -> Optional[str]:
    if not raw:
        return None
    if raw not in SPHERE_NAMES:
        raise ValueError(f"Unknown affinity sphere: {raw!r}")
    return str(raw)


@dataclass
class CharacterRecord:
    id: str = field(default_factory=new_character_id)
    name: str = ""
    player: str = ""
    chronicle: str = ""
    concept: str = ""
    cabal: str = ""
    tradition: str = ""
    nature: str = ""
    demeanor: str = ""
    essence: str = DEFAULT_ESSENCE
    attributes: Dict[str, int] = field(default_factory=lambda: base_stats("attributes"))
    abilities: Dict[str, int] = field(default_factory=lambda: base_stats("abilities"))
    spheres: Dict[str, int] = field(default_factory=lambda: base_stats("spheres"))
    affinity: Optional[str] = None
    backgrounds: Dict[str, int] = field(default_factory=lambda: base_stats("backgrounds"))
    arete: int = STARTING_ARETE
    willpower: int = STARTING_WILLPOWER
    willpower_current: int = STARTING_WILLPOWER
    quintessence: int = 0
    quintessence_max: int = 0
    paradox: int = 0
    health: Dict[str, bool] = field(default_factory=clean_health_track)
    experience: int = 0
    experience_total: int = 0
    merits: List[str] = field(default_factory=list)
    flaws: List[str] = field(default_factory=list)
    equipment: List[str] = field(default_factory=list)
    notes: str = ""
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def copy(self, **changes: Any) -> "CharacterRecord":
        """Return a copy that shares no mutable containers with ``self``."""
        detached = replace(
            self,
            attributes=dict(self.attributes),
            abilities=dict(self.abilities),
            spheres=dict(self.spheres),
            backgrounds=dict(self.backgrounds),
            health=dict(self.health),
            merits=list(self.merits),
            flaws=list(self.flaws),
            equipment=list(self.equipment),
        )
        return replace(detached, **changes) if changes else detached

    def stat_group(self, group: str) -> Dict[str, int]:
        if group not in STAT_GROUPS:
            raise KeyError(group)
        return getattr(self, group)

    def with_stat(self, group: str, name: str, value: int) -> "CharacterRecord":
        updated = dict(self.stat_group(group))
        updated[name] = value
        return self.copy(**{group: updated})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CharacterRecord":
        """Build a record from stored data.

        Raises ``ValueError`` when a rating falls outside its domain, a pool
        exceeds its maximum, or the affinity is not a sphere.
        """
        now = utc_now()
        willpower = _read_scalar(data, "willpower", STARTING_WILLPOWER)
        quintessence_max = _read_scalar(data, "quintessence_max", 0)
        created_at = data.get("created_at")
        updated_at = data.get("updated_at")
        health = clean_health_track()
        for level, marked in (data.get("health") or {}).items():
            if level in health:
                health[level] = bool(marked)
        return cls(
            id=str(data.get("id") or new_character_id()),
            name=str(data.get("name", "")),
            player=str(data.get("player", "")),
            chronicle=str(data.get("chronicle", "")),
            concept=str(data.get("concept", "")),
            cabal=str(data.get("cabal", "")),
            tradition=str(data.get("tradition", "")),
            nature=str(data.get("nature", "")),
            demeanor=str(data.get("demeanor", "")),
            essence=str(data.get("essence") or DEFAULT_ESSENCE),
            attributes=_read_stats("attributes", data.get("attributes")),
            abilities=_read_stats("abilities", data.get("abilities")),
            spheres=_read_stats("spheres", data.get("spheres")),
            affinity=_read_affinity(data.get("affinity")),
            backgrounds=_read_stats("backgrounds", data.get("backgrounds")),
            arete=_read_scalar(data, "arete", STARTING_ARETE),
            willpower=willpower,
            willpower_current=_check_range(
                "willpower_current", int(data.get("willpower_current", willpower)), 0, willpower
            ),
            quintessence=_check_range("quintessence", int(data.get("quintessence", 0)), 0, quintessence_max),
            quintessence_max=quintessence_max,
            paradox=_read_scalar(data, "paradox", 0),
            health=health,
            experience=_check_range("experience", int(data.get("experience", 0)), 0),
            experience_total=_check_range("experience_total", int(data.get("experience_total", 0)), 0),
            merits=[str(value) for value in (data.get("merits") or [])],
            flaws=[str(value) for value in (data.get("flaws") or [])],
            equipment=[str(value) for value in (data.get("equipment") or [])],
            notes=str(data.get("notes", "")),
            created_at=parse_timestamp(created_at) if created_at else now,
            updated_at=parse_timestamp(updated_at) if updated_at else now,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "player": self.player,
            "chronicle": self.chronicle,
            "concept": self.concept,
            "cabal": self.cabal,
            "tradition": self.tradition,
            "nature": self.nature,
            "demeanor": self.demeanor,
            "essence": self.essence,
            "attributes": dict(self.attributes),
            "abilities": dict(self.abilities),
            "spheres": dict(self.spheres),
            "affinity": self.affinity,
            "backgrounds": dict(self.backgrounds),
            "arete": self.arete,
            "willpower": self.willpower,
            "willpower_current": self.willpower_current,
            "quintessence": self.quintessence,
            "quintessence_max": self.quintessence_max,
            "paradox": self.paradox,
            "health": dict(self.health),
            "experience": self.experience,
            "experience_total": self.experience_total,
            "merits": list(self.merits),
            "flaws": list(self.flaws),
            "equipment": list(self.equipment),
            "notes": self.notes,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


def create_default() -> CharacterRecord:
    """Return an empty sheet: every stat at base, fresh id, timestamps set to now."""
    now = utc_now()
    return CharacterRecord(created_at=now, updated_at=now)
