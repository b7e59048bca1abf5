# backend/app/features/triage/attacks/base.py
"""Base class for attack patterns."""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from ..models import AnswerSet, DetectedAttack, ReportingContact, Severity


class AttackPattern(ABC):
    """Abstract base class for attack patterns.

    A pattern is a predicate over the answers paired with a static record.
    The record text never depends on the answers beyond whether the pattern
    fired.
    """

    name: str
    severity: Severity
    icon: str
    description: str
    attacker_access: str
    actions: Tuple[str, ...]
    report_to: Tuple[ReportingContact, ...]

    @abstractmethod
    def matches(
        self,
        answers: AnswerSet,
        detected: Sequence[DetectedAttack],
    ) -> bool:
        """
        Decide whether this pattern fires.

        Args:
            answers: The submitted questionnaire answers
            detected: Attacks already emitted by earlier patterns, for
                patterns that stand down when a more specific one fired

        Returns:
            True if the pattern should be reported
        """
        pass

    def to_attack(self) -> DetectedAttack:
        """Build the detected attack record for this pattern."""
        return DetectedAttack(
            name=self.name,
            severity=self.severity,
            icon=self.icon,
            description=self.description,
            attacker_access=self.attacker_access,
            actions=self.actions,
            report_to=self.report_to,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
