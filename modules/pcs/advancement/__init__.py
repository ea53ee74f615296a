"""Experience-point advancement for finished characters."""

from .ledger import XPQuote, add_xp, apply_xp_spend, can_afford, quote_xp_spend, spend_xp
from .xp_costs import (
    XP_CEILINGS,
    XPCost,
    calculate_ability_xp_cost,
    calculate_arete_xp_cost,
    calculate_attribute_xp_cost,
    calculate_background_xp_cost,
    calculate_sphere_xp_cost,
    calculate_willpower_xp_cost,
    calculate_xp_cost,
)

__all__ = [
    "XP_CEILINGS",
    "XPCost",
    "XPQuote",
    "add_xp",
    "apply_xp_spend",
    "calculate_ability_xp_cost",
    "calculate_arete_xp_cost",
    "calculate_attribute_xp_cost",
    "calculate_background_xp_cost",
    "calculate_sphere_xp_cost",
    "calculate_willpower_xp_cost",
    "calculate_xp_cost",
    "can_afford",
    "quote_xp_spend",
    "spend_xp",
]
