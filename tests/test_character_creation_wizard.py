import pytest

from modules.pcs.character_creation import (
    CREATION_MODES,
    CreationMode,
    CreationStep,
    start_freeform_creation,
    start_traditional_creation,
)
from modules.pcs.results import CharacterRulesError


class _RecordingRepository:
    def __init__(self):
        self.saved = []

    def save(self, record):
        self.saved.append(record)
        return record


def _advance_to(wizard, step):
    while wizard.step is not step:
        assert wizard.next()


def _prepared_wizard(repository=None):
    wizard = start_traditional_creation(repository)
    wizard.set_text("name", "Ayla")
    wizard.set_text("tradition", "Verbena")
    assert wizard.next()
    for category, priority in (("physical", "tertiary"), ("social", "secondary"), ("mental", "primary")):
        wizard.assign_attribute_priority(category, priority)
    assert wizard.next()
    for category, priority in (("talents", "primary"), ("skills", "tertiary"), ("knowledges", "secondary")):
        wizard.assign_ability_priority(category, priority)
    return wizard


def test_concept_guard_needs_name_and_tradition():
    wizard = start_traditional_creation()

    assert not wizard.next()
    wizard.set_text("name", "Ayla")
    assert not wizard.next()
    wizard.set_text("tradition", "Verbena")
    assert wizard.next()
    assert wizard.step is CreationStep.ATTRIBUTES


def test_attribute_step_needs_all_three_priorities():
    wizard = start_traditional_creation()
    wizard.set_text("name", "Ayla")
    wizard.set_text("tradition", "Verbena")
    wizard.next()

    wizard.assign_attribute_priority("physical", "primary")
    wizard.assign_attribute_priority("social", "secondary")
    assert not wizard.can_proceed()
    wizard.assign_attribute_priority("social", "primary")
    assert not wizard.can_proceed()
    wizard.assign_attribute_priority("physical", "secondary")
    wizard.assign_attribute_priority("mental", "tertiary")
    assert wizard.can_proceed()


def test_ability_step_needs_all_three_priorities():
    wizard = start_traditional_creation()
    wizard.set_text("name", "Ayla")
    wizard.set_text("tradition", "Verbena")
    _advance_to(wizard, CreationStep.ATTRIBUTES)
    for category, priority in (("physical", "tertiary"), ("social", "secondary"), ("mental", "primary")):
        wizard.assign_attribute_priority(category, priority)
    assert wizard.next()

    wizard.assign_ability_priority("talents", "primary")
    assert not wizard.next()
    wizard.assign_ability_priority("skills", "secondary")
    assert not wizard.next()
    assert wizard.step is CreationStep.ABILITIES

    wizard.assign_ability_priority("knowledges", "tertiary")
    assert wizard.next()
    assert wizard.step is CreationStep.ADVANTAGES


def test_previous_is_unavailable_from_first_step():
    wizard = start_traditional_creation()

    assert not wizard.previous()
    assert wizard.step is CreationStep.CONCEPT


def test_linear_navigation_back_and_forth():
    wizard = _prepared_wizard()
    _advance_to(wizard, CreationStep.REVIEW)

    assert wizard.previous()
    assert wizard.step is CreationStep.FREEBIES
    assert wizard.next()
    assert wizard.step is CreationStep.REVIEW
    with pytest.raises(CharacterRulesError):
        wizard.next()


def test_edits_are_bound_to_their_step():
    wizard = start_traditional_creation()

    with pytest.raises(CharacterRulesError):
        wizard.set_attribute("strength", 2)
    with pytest.raises(CharacterRulesError):
        wizard.spend_freebie("willpower")


def test_full_build_is_saved_on_completion():
    repository = _RecordingRepository()
    wizard = _prepared_wizard(repository)
    assert wizard.set_ability("occult", 3).accepted
    assert wizard.next()
    assert wizard.choose_affinity("life").accepted
    assert wizard.set_sphere("life", 3).accepted
    assert wizard.set_background("avatar", 3).accepted
    assert wizard.starting_advantages()["quintessence_max"] == 3
    assert wizard.next()
    assert wizard.spend_freebie("willpower").accepted
    assert wizard.spend_freebie("arete").accepted
    assert wizard.context.freebie_points == 10
    assert wizard.next()

    record = wizard.complete()

    assert repository.saved == [record]
    assert record.name == "Ayla"
    assert record.spheres["life"] == 3
    assert record.willpower == 6
    assert record.arete == 2
    assert wizard.finished


def test_complete_only_from_review():
    wizard = start_traditional_creation()

    with pytest.raises(CharacterRulesError):
        wizard.complete()


def test_cancel_persists_nothing_and_closes_session():
    repository = _RecordingRepository()
    wizard = _prepared_wizard(repository)

    wizard.cancel()

    assert repository.saved == []
    with pytest.raises(CharacterRulesError):
        wizard.next()


def test_rejected_edit_keeps_wizard_record():
    wizard = _prepared_wizard()
    before = wizard.record

    result = wizard.set_ability("brawl", 6)

    assert not result.accepted
    assert wizard.record is before


def test_creation_modes():
    assert [mode for mode, _label in CREATION_MODES] == [CreationMode.TRADITIONAL, CreationMode.FREEFORM]
    record = start_freeform_creation()
    assert record.attributes["wits"] == 1
