import pytest

from modules.pcs.character_creation import (
    CreationBudgetContext,
    assign_ability_priority,
    assign_attribute_priority,
    choose_affinity,
    set_ability,
    set_attribute,
    set_background,
    set_sphere,
    starting_advantages,
    summarize_point_budgets,
)
from modules.pcs.character_creation.rules_engine import attribute_points_spent
from modules.pcs.models import create_default
from modules.pcs.results import CharacterRulesError


def _prioritized_context():
    context = CreationBudgetContext()
    context = assign_attribute_priority(context, "physical", "primary")
    context = assign_attribute_priority(context, "social", "secondary")
    context = assign_attribute_priority(context, "mental", "tertiary")
    context = assign_ability_priority(context, "talents", "primary")
    context = assign_ability_priority(context, "skills", "secondary")
    return assign_ability_priority(context, "knowledges", "tertiary")


def test_reassigning_a_priority_moves_it():
    context = assign_attribute_priority(CreationBudgetContext(), "physical", "primary")
    context = assign_attribute_priority(context, "mental", "primary")

    assert context.attribute_priorities == {"physical": None, "social": None, "mental": "primary"}


def test_priorities_stay_unique_after_any_sequence():
    context = CreationBudgetContext()
    moves = [
        ("physical", "primary"),
        ("social", "primary"),
        ("social", "secondary"),
        ("mental", "secondary"),
        ("physical", "tertiary"),
        ("mental", "primary"),
    ]
    for category, priority in moves:
        context = assign_attribute_priority(context, category, priority)
        held = [value for value in context.attribute_priorities.values() if value is not None]
        assert len(held) == len(set(held))


def test_attribute_and_ability_axes_are_independent():
    context = assign_attribute_priority(CreationBudgetContext(), "physical", "primary")
    context = assign_ability_priority(context, "talents", "primary")

    assert context.attribute_priorities["physical"] == "primary"
    assert context.ability_priorities["talents"] == "primary"


def test_unknown_priority_is_a_caller_error():
    with pytest.raises(CharacterRulesError):
        assign_attribute_priority(CreationBudgetContext(), "physical", "quaternary")


def test_attribute_spend_stays_within_category_budget():
    context = _prioritized_context()
    record = create_default()

    record = set_attribute(record, context, "charisma", 5).unwrap()
    record = set_attribute(record, context, "manipulation", 2).unwrap()
    assert attribute_points_spent(record, "social") == 5

    result = set_attribute(record, context, "appearance", 2)

    assert not result.accepted
    assert "budget" in result.reason
    assert result.record.attributes == record.attributes


def test_attribute_domain_is_one_to_five():
    context = _prioritized_context()
    record = create_default()

    assert not set_attribute(record, context, "strength", 6).accepted
    assert not set_attribute(record, context, "strength", 0).accepted


def test_unprioritized_category_has_no_points():
    result = set_attribute(create_default(), CreationBudgetContext(), "strength", 2)

    assert not result.accepted


def test_lowering_an_attribute_is_always_allowed():
    context = assign_attribute_priority(CreationBudgetContext(), "physical", "primary")
    record = set_attribute(create_default(), context, "strength", 5).unwrap()
    record = set_attribute(record, context, "dexterity", 4).unwrap()
    context = assign_attribute_priority(context, "physical", "tertiary")

    assert set_attribute(record, context, "strength", 4).accepted
    assert not set_attribute(record, context, "stamina", 2).accepted


def test_ability_budget_counts_raw_dots():
    context = _prioritized_context()
    record = create_default()

    for name in ("crafts", "drive", "etiquette"):
        record = set_ability(record, context, name, 3).unwrap()

    assert not set_ability(record, context, "firearms", 1).accepted
    assert set_ability(record, context, "academics", 3).accepted
    assert not set_ability(record, context, "occult", 6).accepted


def test_spheres_locked_until_affinity_chosen():
    result = set_sphere(create_default(), "forces", 1)

    assert not result.accepted
    assert "affinity" in result.reason


def test_choosing_affinity_resets_spheres():
    record = choose_affinity(create_default(), "life").unwrap()
    record = set_sphere(record, "forces", 2).unwrap()

    record = choose_affinity(record, "mind").unwrap()

    assert record.affinity == "mind"
    assert record.spheres["mind"] == 1
    assert sum(record.spheres.values()) == 1


def test_sphere_total_and_caps():
    record = choose_affinity(create_default(), "prime").unwrap()

    assert not set_sphere(record, "prime", 0).accepted
    assert not set_sphere(record, "forces", 4).accepted

    record = set_sphere(record, "prime", 3).unwrap()
    record = set_sphere(record, "forces", 3).unwrap()
    assert sum(record.spheres.values()) == 6

    result = set_sphere(record, "matter", 1)
    assert not result.accepted
    assert sum(result.record.spheres.values()) == 6


def test_background_total_capped_at_seven():
    record = create_default()
    record = set_background(record, "avatar", 5).unwrap()
    record = set_background(record, "resources", 2).unwrap()

    assert not set_background(record, "mentor", 1).accepted
    assert not set_background(record, "allies", 6).accepted
    assert set_background(record, "resources", 1).accepted


def test_starting_advantages_follow_avatar_rating():
    record = set_background(create_default(), "avatar", 3).unwrap()

    assert starting_advantages(record) == {"willpower": 5, "arete": 1, "quintessence_max": 3}


def test_point_summary_reports_every_pool():
    context = _prioritized_context()
    record = set_attribute(create_default(), context, "strength", 3).unwrap()

    summary = summarize_point_budgets(record, context)

    assert summary["attributes"]["physical"] == {"spent": 2, "available": 7, "remaining": 5}
    assert summary["abilities"]["knowledges"]["available"] == 5
    assert summary["spheres"]["available"] == 6
    assert summary["backgrounds"]["available"] == 7
    assert summary["freebies"] == {"spent": 0, "available": 15, "remaining": 15}
