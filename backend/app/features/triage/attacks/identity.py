# backend/app/features/triage/attacks/identity.py
"""Patterns targeting the victim's identity and accounts."""

from typing import Sequence

from ..contacts import CERT_IN, CYBER_CRIME_PORTAL, HELPLINE_1930, LOCAL_POLICE
from ..matching import already_detected, has_activity, has_impact, shared_info
from ..models import AnswerSet, DetectedAttack, Severity
from .base import AttackPattern
from .phishing import Vishing


class IdentityTheft(AttackPattern):
    """Identity documents shared and then misused or leaked."""

    name = "Identity Theft"
    severity = Severity.HIGH
    icon = "UserX"
    description = (
        "Identity theft occurs when someone uses your personal identification "
        "documents (Aadhaar, PAN, Passport) to impersonate you for fraud, "
        "loans, or criminal activities."
    )
    attacker_access = (
        "Your government-issued identity, which can be used to open bank "
        "accounts, take loans, create fake profiles, or commit crimes in your "
        "name."
    )
    actions = (
        "Lock your Aadhaar biometrics at myaadhaar.uidai.gov.in immediately",
        "File an identity theft complaint at cybercrime.gov.in",
        "Alert your bank and request enhanced verification for all transactions",
        "Check your CIBIL score for any unauthorized loans or credit inquiries",
        "File a police FIR with copies of your ID documents",
        "Monitor for any legal notices or communications from unknown institutions",
    )
    report_to = (CYBER_CRIME_PORTAL, LOCAL_POLICE, HELPLINE_1930)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return shared_info(answers, "aadhaar", "pan", "passport") and has_impact(
            answers, "fake profile", "data was leaked"
        )


class AccountTakeover(AttackPattern):
    """Victim locked out of, or sees strangers in, an account."""

    name = "Account Takeover"
    severity = Severity.HIGH
    icon = "KeyRound"
    description = (
        "Account takeover happens when attackers gain unauthorized access to "
        "your online accounts by stealing or guessing your credentials, then "
        "lock you out."
    )
    attacker_access = (
        "Full control of the compromised account: they can read messages, send "
        "communications as you, access linked services, and change recovery "
        "options."
    )
    actions = (
        "Use the 'Forgot Password' or account recovery option immediately",
        "If recovery email/phone is also compromised, contact the platform's support directly",
        "Enable 2-Factor Authentication on all recovered accounts",
        "Check for and remove unfamiliar connected apps or sessions",
        "Change passwords on all accounts that used the same credentials",
        "Alert your contacts that your account was compromised: they may receive scam messages",
    )
    report_to = (CYBER_CRIME_PORTAL, CERT_IN)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return has_activity(answers, "password stopped working", "unknown logins")


class SocialEngineering(AttackPattern):
    """Personal details talked out of the victim by phone or on social media.

    Vishing is the more specific reading of the same evidence on a phone
    call, so this pattern yields to it.
    """

    name = "Social Engineering"
    severity = Severity.LOW
    icon = "Users"
    description = (
        "Social engineering manipulates people into divulging confidential "
        "information through psychological tactics: building trust, creating "
        "urgency, or impersonating authority figures."
    )
    attacker_access = (
        "Whatever personal information you shared. This can be combined with "
        "other data to perform more sophisticated attacks or identity fraud."
    )
    actions = (
        "Stop all communication with the suspected attacker immediately",
        "Document all interactions: save messages, call logs, and screenshots",
        "Change passwords for any accounts you discussed or revealed",
        "Alert your family and close contacts about the incident",
        "Be wary of follow-up contacts: attackers may try again with different pretexts",
        "Report the incident to the platform where contact was made",
    )
    report_to = (CYBER_CRIME_PORTAL, LOCAL_POLICE)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return (
            len(answers.personal_info_shared) > 0
            and answers.platform in ("phone", "social")
            and not already_detected(detected, Vishing.name)
        )
