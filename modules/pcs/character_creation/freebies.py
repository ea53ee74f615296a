"""Freebie-point spending on top of the priority budgets."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from modules.helpers.logging_helper import log_debug, log_module_import
from modules.pcs.editing import current_rating, raise_rating, require_target
from modules.pcs.models import CharacterRecord
from modules.pcs.results import CharacterRulesError, RuleResult

from .constants import FREEBIE_CEILINGS, FREEBIE_COSTS, FREEBIE_POINTS
from .rules_engine import CreationBudgetContext

log_module_import(__name__)


@dataclass(frozen=True)
class FreebieResult(RuleResult):
    """A :class:`RuleResult` that also carries the budget context after the spend."""

    context: Optional[CreationBudgetContext] = None


def freebie_cost(kind: str) -> int:
    if kind not in FREEBIE_COSTS:
        raise CharacterRulesError(f"Unknown purchase kind: {kind}")
    return FREEBIE_COSTS[kind]


def freebies_spent(context: CreationBudgetContext) -> int:
    return FREEBIE_POINTS - context.freebie_points


def spend_freebie(
    record: CharacterRecord,
    context: CreationBudgetContext,
    kind: str,
    key: Optional[str] = None,
) -> FreebieResult:
    """Buy one dot of ``kind``/``key`` with freebie points.

    On success the pool drops by the listed cost and exactly one rating goes up
    by one. Insufficient points or a rating already at its ceiling leave both
    the record and the context untouched.
    """
    require_target(kind, key)
    cost = FREEBIE_COSTS[kind]
    ceiling = FREEBIE_CEILINGS[kind]
    label = key or kind

    if context.freebie_points < cost:
        log_debug(f"Rejected freebie {kind}:{label}: {cost} needed, {context.freebie_points} left")
        return FreebieResult(
            False,
            record,
            f"Not enough freebie points: {cost} needed, {context.freebie_points} left.",
            cost,
            context.freebie_points,
            context,
        )
    if current_rating(record, kind, key) >= ceiling:
        log_debug(f"Rejected freebie {kind}:{label}: already at {ceiling}")
        return FreebieResult(False, record, f"{label} is already at its maximum ({ceiling}).", context=context)

    updated_context = replace(context, freebie_points=context.freebie_points - cost)
    return FreebieResult(True, raise_rating(record, kind, key), context=updated_context)
