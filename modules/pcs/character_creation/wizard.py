"""Headless step machine for traditional character creation.

The wizard owns the in-progress sheet and budget context. Edits go through the
rules engine and are only allowed in the step that owns them; navigation is
strictly linear and "next" is refused until the current step's guard holds.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional

from modules.helpers.logging_helper import log_debug, log_info, log_module_import
from modules.pcs import editing
from modules.pcs.models import CharacterRecord, create_default
from modules.pcs.results import CharacterRulesError, RuleResult

from . import rules_engine
from .freebies import FreebieResult, spend_freebie
from .rules_engine import CreationBudgetContext

log_module_import(__name__)


class CreationStep(str, Enum):
    CONCEPT = "concept"
    ATTRIBUTES = "attributes"
    ABILITIES = "abilities"
    ADVANTAGES = "advantages"
    FREEBIES = "freebies"
    REVIEW = "review"


STEP_ORDER = tuple(CreationStep)

STEP_GUARDS: Dict[CreationStep, Callable[[CharacterRecord, CreationBudgetContext], bool]] = {
    CreationStep.CONCEPT: lambda record, context: rules_engine.concept_complete(record),
    CreationStep.ATTRIBUTES: lambda record, context: context.attributes_prioritized,
    CreationStep.ABILITIES: lambda record, context: context.abilities_prioritized,
    CreationStep.ADVANTAGES: lambda record, context: True,
    CreationStep.FREEBIES: lambda record, context: True,
    CreationStep.REVIEW: lambda record, context: True,
}


class CreationMode(str, Enum):
    TRADITIONAL = "traditional"
    FREEFORM = "freeform"


CREATION_MODES = [
    (CreationMode.TRADITIONAL, "Traditional: priorities, point budgets and freebie points"),
    (CreationMode.FREEFORM, "Free-form: edit every field directly within its limits"),
]


class CreationWizard:
    def __init__(self, repository=None, record: Optional[CharacterRecord] = None):
        self.repository = repository
        self.record = record or create_default()
        self.context = CreationBudgetContext()
        self.step = CreationStep.CONCEPT
        self.finished = False
        self.cancelled = False

    # Navigation

    @property
    def step_index(self) -> int:
        return STEP_ORDER.index(self.step)

    def can_proceed(self) -> bool:
        return STEP_GUARDS[self.step](self.record, self.context)

    def can_go_back(self) -> bool:
        return self.step_index > 0 and not self._closed

    def next(self) -> bool:
        self._ensure_open()
        if self.step is CreationStep.REVIEW:
            raise CharacterRulesError("Review is the last step; call complete() instead.")
        if not self.can_proceed():
            log_debug(f"Guard for step '{self.step.value}' not satisfied")
            return False
        self.step = STEP_ORDER[self.step_index + 1]
        log_debug(f"Moved to step '{self.step.value}'")
        return True

    def previous(self) -> bool:
        self._ensure_open()
        if not self.can_go_back():
            return False
        self.step = STEP_ORDER[self.step_index - 1]
        log_debug(f"Moved back to step '{self.step.value}'")
        return True

    def cancel(self) -> None:
        """Abort creation; nothing is persisted."""
        self.cancelled = True
        log_info("Character creation cancelled")

    def complete(self) -> CharacterRecord:
        """Finalize the sheet as-is and hand it to the repository when one is set.

        Unspent freebie points are simply lost.
        """
        self._ensure_open()
        if self.step is not CreationStep.REVIEW:
            raise CharacterRulesError("Characters can only be completed from the review step.")
        if self.repository is not None:
            self.record = self.repository.save(self.record)
        self.finished = True
        log_info(f"Character '{self.record.name}' created ({self.context.freebie_points} freebie points unspent)")
        return self.record

    @property
    def _closed(self) -> bool:
        return self.finished or self.cancelled

    def _ensure_open(self) -> None:
        if self._closed:
            raise CharacterRulesError("This character creation session is closed.")

    def _require_step(self, *steps: CreationStep) -> None:
        self._ensure_open()
        if self.step not in steps:
            allowed = ", ".join(step.value for step in steps)
            raise CharacterRulesError(f"Not available in step '{self.step.value}' (only in: {allowed}).")

    def _keep(self, result: RuleResult) -> RuleResult:
        if result.accepted:
            self.record = result.record
        return result

    # Concept

    def set_text(self, field_name: str, value: str) -> RuleResult:
        self._require_step(CreationStep.CONCEPT)
        return self._keep(editing.set_text(self.record, field_name, value))

    # Attributes and abilities

    def assign_attribute_priority(self, category: str, priority: str) -> None:
        self._require_step(CreationStep.ATTRIBUTES)
        self.context = rules_engine.assign_attribute_priority(self.context, category, priority)

    def set_attribute(self, name: str, value: int) -> RuleResult:
        self._require_step(CreationStep.ATTRIBUTES)
        return self._keep(rules_engine.set_attribute(self.record, self.context, name, value))

    def assign_ability_priority(self, category: str, priority: str) -> None:
        self._require_step(CreationStep.ABILITIES)
        self.context = rules_engine.assign_ability_priority(self.context, category, priority)

    def set_ability(self, name: str, value: int) -> RuleResult:
        self._require_step(CreationStep.ABILITIES)
        return self._keep(rules_engine.set_ability(self.record, self.context, name, value))

    # Advantages

    def choose_affinity(self, sphere: str) -> RuleResult:
        self._require_step(CreationStep.ADVANTAGES)
        return self._keep(rules_engine.choose_affinity(self.record, sphere))

    def set_sphere(self, name: str, value: int) -> RuleResult:
        self._require_step(CreationStep.ADVANTAGES)
        return self._keep(rules_engine.set_sphere(self.record, name, value))

    def set_background(self, name: str, value: int) -> RuleResult:
        self._require_step(CreationStep.ADVANTAGES)
        return self._keep(rules_engine.set_background(self.record, name, value))

    def starting_advantages(self) -> Dict[str, int]:
        return rules_engine.starting_advantages(self.record)

    # Freebies

    def spend_freebie(self, kind: str, key: Optional[str] = None) -> FreebieResult:
        self._require_step(CreationStep.FREEBIES)
        result = spend_freebie(self.record, self.context, kind, key)
        if result.accepted:
            self.record = result.record
            self.context = result.context
        return result


def start_traditional_creation(repository=None) -> CreationWizard:
    return CreationWizard(repository=repository)


def start_freeform_creation() -> CharacterRecord:
    """Free-form mode skips the budgets: the caller edits a default sheet via :mod:`modules.pcs.editing`."""
    return create_default()
