"""Traditional (point-buy) character creation for Mage: The Ascension."""

from .freebies import FreebieResult, freebie_cost, freebies_spent, spend_freebie
from .points import summarize_point_budgets
from .rules_engine import (
    CreationBudgetContext,
    assign_ability_priority,
    assign_attribute_priority,
    choose_affinity,
    set_ability,
    set_attribute,
    set_background,
    set_sphere,
    starting_advantages,
)
from .wizard import (
    CREATION_MODES,
    CreationMode,
    CreationStep,
    CreationWizard,
    start_freeform_creation,
    start_traditional_creation,
)

__all__ = [
    "CREATION_MODES",
    "CreationBudgetContext",
    "CreationMode",
    "CreationStep",
    "CreationWizard",
    "FreebieResult",
    "assign_ability_priority",
    "assign_attribute_priority",
    "choose_affinity",
    "freebie_cost",
    "freebies_spent",
    "set_ability",
    "set_attribute",
    "set_background",
    "set_sphere",
    "spend_freebie",
    "start_freeform_creation",
    "start_traditional_creation",
    "starting_advantages",
    "summarize_point_budgets",
]
