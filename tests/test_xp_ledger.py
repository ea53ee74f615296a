import pytest

from modules.pcs.advancement import add_xp, apply_xp_spend, can_afford, quote_xp_spend, spend_xp
from modules.pcs.models import create_default
from modules.pcs.results import CharacterRulesError, InsufficientExperienceError


def _character(experience, **changes):
    return create_default().copy(experience=experience, experience_total=experience, **changes)


def test_spend_is_rejected_when_unaffordable():
    record = _character(10).with_stat("attributes", "strength", 2)

    result = spend_xp(record, "attribute", "strength")

    assert not result.accepted
    assert result.record is record
    assert result.required == 12
    assert result.available == 10
    assert result.shortfall == 2
    assert record.experience == 10


def test_spend_deducts_and_raises_together():
    record = _character(15).with_stat("attributes", "strength", 2)

    result = spend_xp(record, "attribute", "strength")

    assert result.accepted
    assert result.record.experience == 3
    assert result.record.attributes["strength"] == 3
    assert result.record.experience_total == 15
    assert record.attributes["strength"] == 2


def test_two_phase_quote_then_apply():
    record = _character(20)

    quote = quote_xp_spend(record, "ability", "occult")
    assert quote.cost == 3
    assert quote.affordable

    updated = apply_xp_spend(record, quote)

    assert updated.abilities["occult"] == 1
    assert updated.experience == 17


def test_apply_without_enough_experience_is_a_hard_failure():
    record = _character(2)
    quote = quote_xp_spend(record, "sphere", "forces")

    with pytest.raises(InsufficientExperienceError) as excinfo:
        apply_xp_spend(record, quote)

    assert excinfo.value.required == 7
    assert excinfo.value.available == 2


def test_stale_quote_is_refused():
    record = _character(50)
    quote = quote_xp_spend(record, "sphere", "forces")
    record = spend_xp(record, "sphere", "forces").unwrap()

    with pytest.raises(CharacterRulesError):
        apply_xp_spend(record, quote)


def test_willpower_purchase_refills_current_pool():
    record = _character(5, willpower_current=1)

    updated = spend_xp(record, "willpower").unwrap()

    assert updated.willpower == 6
    assert updated.willpower_current == 6
    assert updated.experience == 4


def test_ceilings_block_advancement():
    rich = _character(500)

    assert not spend_xp(rich.with_stat("abilities", "occult", 5), "ability", "occult").accepted
    assert not spend_xp(rich.with_stat("backgrounds", "node", 5), "background", "node").accepted
    assert not spend_xp(rich.copy(willpower=10, willpower_current=10), "willpower").accepted
    assert not spend_xp(rich.copy(arete=10), "arete").accepted


def test_arete_can_pass_five_with_experience():
    record = _character(100, arete=5)

    updated = spend_xp(record, "arete").unwrap()

    assert updated.arete == 6
    assert updated.experience == 52


def test_add_xp_accumulates_balance_and_total():
    record = _character(4)

    updated = add_xp(add_xp(record, 5).unwrap(), 3).unwrap()

    assert updated.experience == record.experience + 8
    assert updated.experience_total == record.experience_total + 8


@pytest.mark.parametrize("amount", [0, -3])
def test_add_xp_rejects_non_positive_amounts(amount):
    record = _character(4)

    result = add_xp(record, amount)

    assert not result.accepted
    assert result.record.experience == 4


def test_can_afford():
    record = _character(7)

    assert can_afford(record, 7)
    assert not can_afford(record, 8)
