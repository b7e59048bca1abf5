# backend/app/features/triage/matching.py
"""Fragment predicates shared by the classifier and the action plan.

Every check is a case-insensitive substring test of a fragment against each
label of one answer field, so "My files got encrypted or I see a ransom
message" satisfies the fragment "ransom message".
"""

from typing import Iterable, Sequence

from .models import AnswerSet, DetectedAttack


def contains_fragment(labels: Iterable[str], *fragments: str) -> bool:
    """True if any label contains any of the fragments."""
    lowered = [label.lower() for label in labels]
    return any(fragment.lower() in label for fragment in fragments for label in lowered)


def has_activity(answers: AnswerSet, *fragments: str) -> bool:
    return contains_fragment(answers.suspicious_activities, *fragments)


def has_impact(answers: AnswerSet, *fragments: str) -> bool:
    return contains_fragment(answers.impacts, *fragments)


def shared_info(answers: AnswerSet, *fragments: str) -> bool:
    return contains_fragment(answers.personal_info_shared, *fragments)


def has_permission(answers: AnswerSet, *fragments: str) -> bool:
    return contains_fragment(answers.device_permissions, *fragments)


def credentials_shared(answers: AnswerSet) -> bool:
    """Login or payment secrets were handed over."""
    return shared_info(answers, "username and password", "otp", "card number", "bank account")


def any_financial_info_shared(answers: AnswerSet) -> bool:
    """Payment details were disclosed or money has already gone."""
    return shared_info(answers, "bank account", "card number", "otp") or has_impact(
        answers, "money"
    )


def has_attack(attacks: Sequence[DetectedAttack], *fragments: str) -> bool:
    """True if any detected attack name contains any of the fragments."""
    return contains_fragment((attack.name for attack in attacks), *fragments)


def already_detected(attacks: Sequence[DetectedAttack], *names: str) -> bool:
    """Exact-name membership, used by the mutual exclusivity guards."""
    return any(attack.name in names for attack in attacks)
