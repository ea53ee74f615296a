"""Outcome type and error taxonomy shared by the character rules engines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from modules.pcs.models import CharacterRecord


class CharacterRulesError(ValueError):
    """Raised when a caller misuses the rules engines (unknown stat, illegal step...)."""


class RuleViolationError(CharacterRulesError):
    """Raised by :meth:`RuleResult.unwrap` on a rejected result."""


class InsufficientExperienceError(CharacterRulesError):
    """Raised when an XP spend is applied without enough experience."""

    def __init__(self, required: int, available: int):
        super().__init__(f"Not enough experience: {required} XP required, {available} XP available.")
        self.required = required
        self.available = available


@dataclass(frozen=True)
class RuleResult:
    """Result of a governed mutation.

    ``record`` is the new sheet when ``accepted`` and the untouched input
    otherwise. Affordability rejections also carry ``required``/``available``.
    """

    accepted: bool
    record: CharacterRecord
    reason: str = ""
    required: Optional[int] = None
    available: Optional[int] = None

    @classmethod
    def ok(cls, record: CharacterRecord) -> "RuleResult":
        return cls(True, record)

    @classmethod
    def rejected(
        cls,
        record: CharacterRecord,
        reason: str,
        *,
        required: Optional[int] = None,
        available: Optional[int] = None,
    ) -> "RuleResult":
        return cls(False, record, reason, required, available)

    @property
    def shortfall(self) -> int:
        if self.required is None or self.available is None:
            return 0
        return max(0, self.required - self.available)

    def __bool__(self) -> bool:
        return self.accepted

    def unwrap(self) -> CharacterRecord:
        if not self.accepted:
            raise RuleViolationError(self.reason)
        return self.record
