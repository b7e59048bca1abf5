# backend/app/features/triage/attacks/fallback.py
"""Catch-all record for reports no specific pattern explains."""

from typing import Sequence

from ..contacts import CERT_IN, CYBER_CRIME_PORTAL, HELPLINE_1930
from ..models import AnswerSet, DetectedAttack, Severity
from .base import AttackPattern


class SuspiciousActivity(AttackPattern):
    """Fires only when every other pattern stayed silent."""

    name = "Suspicious Activity Detected"
    severity = Severity.MEDIUM
    icon = "AlertTriangle"
    description = (
        "While we couldn't identify a specific attack pattern, the activity you "
        "described is suspicious and warrants caution. Cyber threats can take "
        "many forms, and early action is key."
    )
    attacker_access = (
        "Unknown at this time. The reported activity suggests potential "
        "unauthorized access or social engineering attempts that should be "
        "investigated further."
    )
    actions = (
        "Change your passwords for all important accounts as a precaution",
        "Enable 2-Factor Authentication wherever possible",
        "Run a full antivirus scan on all your devices",
        "Monitor your bank statements and online accounts for unusual activity",
        "Report any financial loss to the Cyber Crime Helpline 1930",
        "Save all evidence (screenshots, messages, transaction records) for future reference",
    )
    report_to = (CYBER_CRIME_PORTAL, HELPLINE_1930, CERT_IN)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return not detected
