# backend/app/features/triage/attacks/fraud.py
"""Patterns for money taken through the victim's bank or phone number."""

from typing import Sequence

from ..contacts import CYBER_CRIME_PORTAL, HELPLINE_1930, LOCAL_POLICE, RBI
from ..matching import already_detected, has_impact
from ..models import AnswerSet, DetectedAttack, Severity
from .base import AttackPattern


class SimSwapFraud(AttackPattern):
    """OTP handed over on a banking channel and money lost."""

    name = "SIM Swap Fraud"
    severity = Severity.CRITICAL
    icon = "Smartphone"
    description = (
        "SIM swap fraud occurs when attackers convince your telecom provider to "
        "transfer your phone number to a new SIM card. This gives them access "
        "to all OTPs and SMS-based verifications."
    )
    attacker_access = (
        "All SMS-based OTPs, two-factor authentication codes, bank transaction "
        "approvals, and any account recoverable via your phone number."
    )
    actions = (
        "Contact your telecom provider IMMEDIATELY to report the SIM swap and block the number",
        "Call your bank's helpline to freeze all accounts linked to that number",
        "File a complaint at cybercrime.gov.in with your transaction details",
        "Call the Cyber Crime Helpline 1930 for financial fraud assistance",
        "Visit your bank branch with an ID to recover your accounts",
        "Switch to app-based 2FA (Google Authenticator) instead of SMS-based",
    )
    report_to = (HELPLINE_1930, CYBER_CRIME_PORTAL, RBI, LOCAL_POLICE)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return (
            answers.platform == "banking"
            and answers.shared_otp == "Yes"
            and has_impact(answers, "money")
        )


class BankingFraud(AttackPattern):
    """Money lost on a banking or UPI channel.

    Stands down when SIM Swap Fraud already covers the same loss, so it must
    be evaluated after that pattern.
    """

    name = "UPI / Banking Fraud"
    severity = Severity.MEDIUM
    icon = "Landmark"
    description = (
        "UPI fraud involves unauthorized transactions through your UPI-linked "
        "bank account, often via fake payment requests, QR codes, or social "
        "engineering."
    )
    attacker_access = (
        "Access to your bank account via UPI. They may have your UPI PIN, "
        "linked bank details, or the ability to initiate transactions."
    )
    actions = (
        "Call your bank's helpline immediately to report the fraud and request a freeze",
        "Call the Cyber Crime Helpline 1930 within 24 hours for fastest resolution",
        "File a complaint at cybercrime.gov.in with transaction IDs and screenshots",
        "Change your UPI PIN and internet banking password",
        "Delink your bank account from UPI temporarily if fraud continues",
        "Keep all SMS transaction alerts as evidence",
    )
    report_to = (HELPLINE_1930, RBI, CYBER_CRIME_PORTAL, LOCAL_POLICE)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return (
            answers.platform == "banking"
            and has_impact(answers, "money")
            and not already_detected(detected, SimSwapFraud.name)
        )
