"""Experience ledger: earning XP and spending it on one dot at a time.

Spending is two-phase. :func:`quote_xp_spend` prices the next dot so the
caller can ask for confirmation, then :func:`apply_xp_spend` deducts the cost
and raises the trait together. :func:`spend_xp` does both for callers that
confirm up front.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from modules.helpers.logging_helper import log_debug, log_info, log_module_import
from modules.pcs.editing import current_rating, raise_rating, require_target
from modules.pcs.models import CharacterRecord
from modules.pcs.results import CharacterRulesError, InsufficientExperienceError, RuleResult

from .xp_costs import XP_CEILINGS, calculate_xp_cost

log_module_import(__name__)


@dataclass(frozen=True)
class XPQuote:
    kind: str
    key: Optional[str]
    current_value: int
    cost: int
    description: str
    available: int
    ceiling: int

    @property
    def at_ceiling(self) -> bool:
        return self.current_value >= self.ceiling

    @property
    def affordable(self) -> bool:
        return self.available >= self.cost

    @property
    def shortfall(self) -> int:
        return max(0, self.cost - self.available)


def can_afford(record: CharacterRecord, cost: int) -> bool:
    return record.experience >= cost


def quote_xp_spend(record: CharacterRecord, kind: str, key: Optional[str] = None) -> XPQuote:
    """Price the next dot of ``kind``/``key`` at its current rating."""
    require_target(kind, key)
    current_value = current_rating(record, kind, key)
    calculation = calculate_xp_cost(kind, current_value)
    return XPQuote(
        kind=kind,
        key=key,
        current_value=current_value,
        cost=calculation.cost,
        description=calculation.description,
        available=record.experience,
        ceiling=XP_CEILINGS[kind],
    )


def apply_xp_spend(record: CharacterRecord, quote: XPQuote) -> CharacterRecord:
    """Deduct ``quote.cost`` and raise the quoted trait by one, as one step.

    Raises :class:`InsufficientExperienceError` when the caller skipped the
    affordability check, and :class:`CharacterRulesError` when the quote is
    stale or the trait is already at its ceiling.
    """
    if current_rating(record, quote.kind, quote.key) != quote.current_value:
        raise CharacterRulesError("The quote no longer matches the character; quote the spend again.")
    if quote.at_ceiling:
        raise CharacterRulesError(f"{quote.key or quote.kind} is already at its maximum ({quote.ceiling}).")
    if not can_afford(record, quote.cost):
        raise InsufficientExperienceError(quote.cost, record.experience)

    raised = raise_rating(record, quote.kind, quote.key)
    log_info(f"Spent {quote.cost} XP: {quote.description}")
    return raised.copy(experience=record.experience - quote.cost)


def spend_xp(record: CharacterRecord, kind: str, key: Optional[str] = None) -> RuleResult:
    quote = quote_xp_spend(record, kind, key)
    label = key or kind
    if quote.at_ceiling:
        log_debug(f"Rejected XP spend on {label}: already at {quote.ceiling}")
        return RuleResult.rejected(record, f"{label} is already at its maximum ({quote.ceiling}).")
    if not quote.affordable:
        log_debug(f"Rejected XP spend on {label}: {quote.cost} needed, {quote.available} available")
        return RuleResult.rejected(
            record,
            f"Not enough XP! You need {quote.cost} XP but only have {quote.available}.",
            required=quote.cost,
            available=quote.available,
        )
    return RuleResult.ok(apply_xp_spend(record, quote))


def add_xp(record: CharacterRecord, amount: int) -> RuleResult:
    """Award ``amount`` XP to both the spendable balance and the lifetime total."""
    if amount <= 0:
        return RuleResult.rejected(record, "Experience awards must be positive.")
    log_info(f"Awarded {amount} XP to '{record.name}'")
    return RuleResult.ok(
        record.copy(
            experience=record.experience + amount,
            experience_total=record.experience_total + amount,
        )
    )
