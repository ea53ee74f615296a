"""Rules engine for traditional Mage character creation.

Every function takes the current sheet (and the transient budget context) and
returns a :class:`RuleResult`; the input record is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from modules.helpers.logging_helper import log_debug, log_module_import
from modules.pcs.constants import (
    ABILITY_CATEGORIES,
    ATTRIBUTE_CATEGORIES,
    SPHERE_NAMES,
    STARTING_ARETE,
    STARTING_WILLPOWER,
    STAT_DOMAINS,
)
from modules.pcs.editing import require_stat
from modules.pcs.models import CharacterRecord
from modules.pcs.results import CharacterRulesError, RuleResult

from .constants import (
    ABILITY_BUDGETS,
    AFFINITY_MINIMUM,
    ATTRIBUTE_BUDGETS,
    BACKGROUND_POINTS,
    FREEBIE_POINTS,
    PRIORITIES,
    SPHERE_CREATION_CAP,
    SPHERE_POINTS,
)

log_module_import(__name__)


def _unassigned(categories: Dict[str, tuple]) -> Dict[str, Optional[str]]:
    return {category: None for category in categories}


@dataclass(frozen=True)
class CreationBudgetContext:
    """Priority picks for both axes plus the remaining freebie pool."""

    attribute_priorities: Dict[str, Optional[str]] = field(default_factory=lambda: _unassigned(ATTRIBUTE_CATEGORIES))
    ability_priorities: Dict[str, Optional[str]] = field(default_factory=lambda: _unassigned(ABILITY_CATEGORIES))
    freebie_points: int = FREEBIE_POINTS

    def __post_init__(self):
        if self.freebie_points < 0:
            raise CharacterRulesError("The freebie pool cannot be negative.")

    @property
    def attributes_prioritized(self) -> bool:
        return all(priority is not None for priority in self.attribute_priorities.values())

    @property
    def abilities_prioritized(self) -> bool:
        return all(priority is not None for priority in self.ability_priorities.values())


def _reassign(priorities: Dict[str, Optional[str]], category: str, priority: str) -> Dict[str, Optional[str]]:
    if priority not in PRIORITIES:
        raise CharacterRulesError(f"Unknown priority: {priority}")
    if category not in priorities:
        raise CharacterRulesError(f"Unknown category: {category}")
    updated = {name: (None if held == priority else held) for name, held in priorities.items()}
    updated[category] = priority
    return updated


def assign_attribute_priority(context: CreationBudgetContext, category: str, priority: str) -> CreationBudgetContext:
    """Give ``priority`` to an attribute category, taking it away from any other holder."""
    return replace(context, attribute_priorities=_reassign(context.attribute_priorities, category, priority))


def assign_ability_priority(context: CreationBudgetContext, category: str, priority: str) -> CreationBudgetContext:
    """Give ``priority`` to an ability category, taking it away from any other holder."""
    return replace(context, ability_priorities=_reassign(context.ability_priorities, category, priority))


def attribute_category_of(name: str) -> str:
    for category, members in ATTRIBUTE_CATEGORIES.items():
        if name in members:
            return category
    raise CharacterRulesError(f"Unknown attribute: {name}")


def ability_category_of(name: str) -> str:
    for category, members in ABILITY_CATEGORIES.items():
        if name in members:
            return category
    raise CharacterRulesError(f"Unknown ability: {name}")


def attribute_budget(context: CreationBudgetContext, category: str) -> int:
    priority = context.attribute_priorities.get(category)
    return ATTRIBUTE_BUDGETS[priority] if priority else 0


def ability_budget(context: CreationBudgetContext, category: str) -> int:
    priority = context.ability_priorities.get(category)
    return ABILITY_BUDGETS[priority] if priority else 0


def attribute_points_spent(record: CharacterRecord, category: str) -> int:
    # Attributes start at one free dot.
    return sum(record.attributes[name] - 1 for name in ATTRIBUTE_CATEGORIES[category])


def ability_points_spent(record: CharacterRecord, category: str) -> int:
    return sum(record.abilities[name] for name in ABILITY_CATEGORIES[category])


def sphere_points_spent(record: CharacterRecord) -> int:
    return sum(record.spheres.values())


def background_points_spent(record: CharacterRecord) -> int:
    return sum(record.backgrounds.values())


def _check_domain(
    record: CharacterRecord,
    group: str,
    name: str,
    value: int,
    high: Optional[int] = None,
    low: Optional[int] = None,
) -> Optional[RuleResult]:
    domain_low, domain_high = STAT_DOMAINS[group]
    low = domain_low if low is None else low
    high = domain_high if high is None else high
    if low <= value <= high:
        return None
    log_debug(f"Rejected {group}.{name}={value}: outside {low}-{high}")
    return RuleResult.rejected(record, f"{name} must stay between {low} and {high}.")


def _check_budget(
    record: CharacterRecord, label: str, spent_before: int, spent_after: int, budget: int
) -> Optional[RuleResult]:
    # Lowering a rating is always allowed, even after a priority swap left the pool overdrawn.
    if spent_after <= budget or spent_after <= spent_before:
        return None
    log_debug(f"Rejected {label}: {spent_after} points for a budget of {budget}")
    return RuleResult.rejected(record, f"Exceeds the {label} budget ({spent_after}/{budget} points).")


def set_attribute(record: CharacterRecord, context: CreationBudgetContext, name: str, value: int) -> RuleResult:
    category = attribute_category_of(name)
    rejection = _check_domain(record, "attributes", name, value)
    if rejection is not None:
        return rejection

    spent_before = attribute_points_spent(record, category)
    spent_after = spent_before - record.attributes[name] + value
    rejection = _check_budget(record, f"{category} attributes", spent_before, spent_after, attribute_budget(context, category))
    if rejection is not None:
        return rejection
    return RuleResult.ok(record.with_stat("attributes", name, value))


def set_ability(record: CharacterRecord, context: CreationBudgetContext, name: str, value: int) -> RuleResult:
    category = ability_category_of(name)
    rejection = _check_domain(record, "abilities", name, value)
    if rejection is not None:
        return rejection

    spent_before = ability_points_spent(record, category)
    spent_after = spent_before - record.abilities[name] + value
    rejection = _check_budget(record, category, spent_before, spent_after, ability_budget(context, category))
    if rejection is not None:
        return rejection
    return RuleResult.ok(record.with_stat("abilities", name, value))


def choose_affinity(record: CharacterRecord, sphere: str) -> RuleResult:
    """Pick the affinity sphere: every sphere resets to 0, the affinity starts at 1."""
    require_stat("spheres", sphere)
    spheres = {name: 0 for name in SPHERE_NAMES}
    spheres[sphere] = AFFINITY_MINIMUM
    return RuleResult.ok(record.copy(affinity=sphere, spheres=spheres))


def set_sphere(record: CharacterRecord, name: str, value: int) -> RuleResult:
    require_stat("spheres", name)
    if not record.affinity:
        return RuleResult.rejected(record, "Choose an affinity sphere before allocating spheres.")

    minimum = AFFINITY_MINIMUM if name == record.affinity else 0
    rejection = _check_domain(record, "spheres", name, value, high=SPHERE_CREATION_CAP, low=minimum)
    if rejection is not None:
        return rejection

    spent_before = sphere_points_spent(record)
    spent_after = spent_before - record.spheres[name] + value
    rejection = _check_budget(record, "sphere", spent_before, spent_after, SPHERE_POINTS)
    if rejection is not None:
        return rejection
    return RuleResult.ok(record.with_stat("spheres", name, value))


def set_background(record: CharacterRecord, name: str, value: int) -> RuleResult:
    require_stat("backgrounds", name)
    rejection = _check_domain(record, "backgrounds", name, value)
    if rejection is not None:
        return rejection

    spent_before = background_points_spent(record)
    spent_after = spent_before - record.backgrounds[name] + value
    rejection = _check_budget(record, "background", spent_before, spent_after, BACKGROUND_POINTS)
    if rejection is not None:
        return rejection
    return RuleResult.ok(record.with_stat("backgrounds", name, value))


def starting_advantages(record: CharacterRecord) -> Dict[str, int]:
    """Fixed starting values shown for confirmation; nothing here is spent."""
    return {
        "willpower": STARTING_WILLPOWER,
        "arete": STARTING_ARETE,
        "quintessence_max": record.backgrounds["avatar"],
    }


def concept_complete(record: CharacterRecord) -> bool:
    return bool(record.name) and bool(record.tradition)
