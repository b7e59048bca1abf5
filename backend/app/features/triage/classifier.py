# backend/app/features/triage/classifier.py
"""Map questionnaire answers onto known attack patterns."""

from typing import List, Optional, Sequence

from .attacks import ATTACK_PATTERNS, FALLBACK_PATTERN, AttackPattern
from .models import AnswerSet, DetectedAttack


def classify(
    answers: AnswerSet,
    patterns: Optional[Sequence[AttackPattern]] = None,
) -> List[DetectedAttack]:
    """
    Classify an incident.

    Patterns run in order and each contributes at most one record. The
    result keeps evaluation order and is never empty: when nothing matches,
    the suspicious-activity fallback is returned.

    Args:
        answers: The submitted questionnaire answers
        patterns: Override the pattern table (tests and experiments)

    Returns:
        Detected attacks in evaluation order
    """
    detected: List[DetectedAttack] = []

    for pattern in ATTACK_PATTERNS if patterns is None else patterns:
        if pattern.matches(answers, detected):
            detected.append(pattern.to_attack())

    if FALLBACK_PATTERN.matches(answers, detected):
        detected.append(FALLBACK_PATTERN.to_attack())

    return detected
