"""Helpers for character-creation point accounting."""

from __future__ import annotations

from modules.pcs.constants import ABILITY_CATEGORIES, ATTRIBUTE_CATEGORIES
from modules.pcs.models import CharacterRecord

from .constants import BACKGROUND_POINTS, FREEBIE_POINTS, SPHERE_POINTS
from .rules_engine import (
    CreationBudgetContext,
    ability_budget,
    ability_points_spent,
    attribute_budget,
    attribute_points_spent,
    background_points_spent,
    sphere_points_spent,
)


def _usage(spent: int, available: int) -> dict[str, int]:
    return {"spent": spent, "available": available, "remaining": available - spent}


def summarize_point_budgets(record: CharacterRecord, context: CreationBudgetContext) -> dict[str, dict]:
    """Return current point usage for every creation pool, for display.

    Attribute and ability categories without a priority report an allowance of 0.
    """

    return {
        "attributes": {
            category: _usage(attribute_points_spent(record, category), attribute_budget(context, category))
            for category in ATTRIBUTE_CATEGORIES
        },
        "abilities": {
            category: _usage(ability_points_spent(record, category), ability_budget(context, category))
            for category in ABILITY_CATEGORIES
        },
        "spheres": _usage(sphere_points_spent(record), SPHERE_POINTS),
        "backgrounds": _usage(background_points_spent(record), BACKGROUND_POINTS),
        "freebies": _usage(FREEBIE_POINTS - context.freebie_points, FREEBIE_POINTS),
    }
