"""Experience costs for raising a trait by one dot after creation."""

from __future__ import annotations

from dataclasses import dataclass

from modules.pcs.results import CharacterRulesError

ATTRIBUTE_MULTIPLIER = 4
ABILITY_MULTIPLIER = 2
NEW_ABILITY_COST = 3
SPHERE_MULTIPLIER = 7
ARETE_MULTIPLIER = 8
WILLPOWER_COST = 1
BACKGROUND_INCREASE_COST = 3
NEW_BACKGROUND_COST = 5

XP_CEILINGS = {
    "attribute": 5,
    "ability": 5,
    "sphere": 5,
    "background": 5,
    "arete": 10,
    "willpower": 10,
}


@dataclass(frozen=True)
class XPCost:
    cost: int
    description: str


def _multiplied(label: str, current_value: int, multiplier: int) -> XPCost:
    new_value = current_value + 1
    return XPCost(
        cost=new_value * multiplier,
        description=f"Increase {label} from {current_value} to {new_value} ({new_value} × {multiplier})",
    )


def calculate_attribute_xp_cost(current_value: int) -> XPCost:
    return _multiplied("attribute", current_value, ATTRIBUTE_MULTIPLIER)


def calculate_ability_xp_cost(current_value: int) -> XPCost:
    if current_value == 0:
        return XPCost(NEW_ABILITY_COST, f"Learn new ability (flat {NEW_ABILITY_COST} XP)")
    return _multiplied("ability", current_value, ABILITY_MULTIPLIER)


def calculate_sphere_xp_cost(current_value: int) -> XPCost:
    return _multiplied("sphere", current_value, SPHERE_MULTIPLIER)


def calculate_arete_xp_cost(current_value: int) -> XPCost:
    return _multiplied("Arete", current_value, ARETE_MULTIPLIER)


def calculate_willpower_xp_cost(current_value: int = 0) -> XPCost:
    # Permanent willpower is a flat rate whatever the current rating.
    return XPCost(WILLPOWER_COST, f"Increase permanent Willpower (flat {WILLPOWER_COST} XP)")


def calculate_background_xp_cost(current_value: int) -> XPCost:
    if current_value == 0:
        return XPCost(NEW_BACKGROUND_COST, f"Acquire new background (flat {NEW_BACKGROUND_COST} XP)")
    return XPCost(
        BACKGROUND_INCREASE_COST,
        f"Increase background from {current_value} to {current_value + 1} (flat {BACKGROUND_INCREASE_COST} XP)",
    )


COST_FUNCTIONS = {
    "attribute": calculate_attribute_xp_cost,
    "ability": calculate_ability_xp_cost,
    "sphere": calculate_sphere_xp_cost,
    "background": calculate_background_xp_cost,
    "arete": calculate_arete_xp_cost,
    "willpower": calculate_willpower_xp_cost,
}


def calculate_xp_cost(kind: str, current_value: int) -> XPCost:
    try:
        cost_function = COST_FUNCTIONS[kind]
    except KeyError:
        raise CharacterRulesError(f"Unknown purchase kind: {kind}") from None
    return cost_function(current_value)
