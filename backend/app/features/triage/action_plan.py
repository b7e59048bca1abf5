# backend/app/features/triage/action_plan.py
"""Time-boxed remediation checklist derived from answers and detected attacks."""

from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from .matching import (
    any_financial_info_shared,
    has_activity,
    has_attack,
    has_impact,
    shared_info,
)
from .models import ActionItem, ActionPlan, AnswerSet, DetectedAttack, Priority

Condition = Callable[[AnswerSet, Sequence[DetectedAttack]], bool]


def _always(answers: AnswerSet, attacks: Sequence[DetectedAttack]) -> bool:
    return True


@dataclass(frozen=True)
class PlanStep:
    """An action item and the condition under which it is recommended."""

    id: str
    text: str
    applies: Condition = _always

    def to_item(self) -> ActionItem:
        return ActionItem(id=self.id, text=self.text)


NOW_STEPS: Tuple[PlanStep, ...] = (
    PlanStep(
        "now-passwords",
        "Change passwords for all affected accounts immediately",
        lambda a, t: has_attack(t, "account takeover", "phishing", "vishing", "keylogger"),
    ),
    PlanStep(
        "now-bank",
        "Call your bank and block your card/account",
        lambda a, t: (
            has_impact(a, "money") or shared_info(a, "card number") or has_attack(t, "upi", "sim swap")
        ),
    ),
    PlanStep(
        "now-permissions",
        "Revoke suspicious app permissions on your device",
        lambda a, t: len(a.device_permissions) > 0,
    ),
    PlanStep(
        "now-uninstall",
        "Uninstall any unknown or recently installed apps",
        lambda a, t: has_attack(t, "malware", "spyware"),
    ),
    PlanStep(
        "now-disconnect",
        "Disconnect from the internet immediately (Wi-Fi and mobile data)",
        lambda a, t: has_attack(t, "remote access trojan"),
    ),
    PlanStep(
        "now-ransom",
        "Do NOT pay the ransom: there is no guarantee of file recovery",
        lambda a, t: has_attack(t, "ransomware"),
    ),
    PlanStep(
        "now-telecom",
        "Contact your telecom provider immediately about SIM issues",
        lambda a, t: has_attack(t, "sim swap"),
    ),
)

TODAY_STEPS: Tuple[PlanStep, ...] = (
    PlanStep(
        "today-antivirus",
        "Run a full antivirus scan on your device",
        lambda a, t: has_attack(t, "malware", "spyware", "remote access trojan", "keylogger"),
    ),
    PlanStep(
        "today-evidence",
        "Screenshot and save all evidence (messages, URLs, transaction IDs)",
    ),
    PlanStep(
        "today-warn",
        "Warn your contacts: they may receive fake messages from your account",
        lambda a, t: has_activity(a, "messages sent from my account"),
    ),
    PlanStep(
        "today-sessions",
        "Check all your active login sessions and log out unknown devices",
        lambda a, t: has_attack(t, "account takeover", "phishing"),
    ),
    PlanStep(
        "today-complaint",
        "File a complaint on cybercrime.gov.in or call 1930",
    ),
)

WEEK_STEPS: Tuple[PlanStep, ...] = (
    PlanStep(
        "week-2fa",
        "Enable two-factor authentication on all accounts",
    ),
    PlanStep(
        "week-breach",
        "Check if your data was leaked at haveibeenpwned.com",
        lambda a, t: shared_info(a, "username and password", "otp") or a.platform == "email",
    ),
    PlanStep(
        "week-update",
        "Update all your apps, browser, and operating system",
    ),
    PlanStep(
        "week-review",
        "Review all apps that have permissions on your phone",
    ),
    PlanStep(
        "week-monitor",
        "Monitor your bank statements daily for 30 days",
        lambda a, t: any_financial_info_shared(a),
    ),
)

PLAN_STEPS: Dict[Priority, Tuple[PlanStep, ...]] = {
    Priority.NOW: NOW_STEPS,
    Priority.TODAY: TODAY_STEPS,
    Priority.WEEK: WEEK_STEPS,
}


def build_bucket(
    steps: Sequence[PlanStep],
    answers: AnswerSet,
    attacks: Sequence[DetectedAttack],
) -> List[ActionItem]:
    """Items of the steps whose condition holds, in step order."""
    return [step.to_item() for step in steps if step.applies(answers, attacks)]


def build_plan(answers: AnswerSet, attacks: Sequence[DetectedAttack]) -> ActionPlan:
    """
    Build the three-bucket action plan.

    Any bucket may come back empty; "today" and "week" always carry their
    unconditional items.

    Args:
        answers: The submitted questionnaire answers
        attacks: Output of ``classify`` for the same answers

    Returns:
        ActionPlan with now, today and week buckets
    """
    return ActionPlan(
        now=tuple(build_bucket(NOW_STEPS, answers, attacks)),
        today=tuple(build_bucket(TODAY_STEPS, answers, attacks)),
        week=tuple(build_bucket(WEEK_STEPS, answers, attacks)),
    )
