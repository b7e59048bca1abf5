# backend/app/features/triage/attacks/phishing.py
"""Patterns where credentials are lured or intercepted over a channel."""

from typing import Sequence

from ..contacts import CERT_IN, CYBER_CRIME_PORTAL, HELPLINE_1930, RBI
from ..matching import credentials_shared, has_impact, shared_info
from ..models import AnswerSet, DetectedAttack, Severity
from .base import AttackPattern


class Vishing(AttackPattern):
    """Payment secrets given away on a phone call."""

    name = "Vishing (Voice Phishing)"
    severity = Severity.HIGH
    icon = "Phone"
    description = (
        "Vishing is a phone-based social engineering attack where scammers "
        "impersonate bank officials, government agencies, or tech support to "
        "trick you into revealing sensitive information."
    )
    attacker_access = (
        "Whatever information you shared, potentially bank account details, "
        "OTPs, card numbers, or personal identifiers that can be used for "
        "financial fraud."
    )
    actions = (
        "Call your bank immediately and report the incident. Request a temporary account freeze",
        "Change your internet banking and UPI passwords from a secure device",
        "Block the caller's number and save it as evidence",
        "File a complaint at cybercrime.gov.in with the caller's number and conversation details",
        "Alert your family members as scammers may try to contact them next",
        "Never share OTP, CVV, or PIN over the phone: banks will never ask for these",
    )
    report_to = (HELPLINE_1930, CYBER_CRIME_PORTAL, RBI)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return answers.platform == "phone" and shared_info(
            answers, "otp", "bank account", "card number"
        )


class Phishing(AttackPattern):
    """Credentials typed into a page reached from an email link."""

    name = "Phishing"
    severity = Severity.HIGH
    icon = "Mail"
    description = (
        "Phishing is a technique where attackers send fraudulent emails "
        "disguised as legitimate communications to steal your login "
        "credentials, financial information, or install malware."
    )
    attacker_access = (
        "Login credentials to your email and linked accounts, personal "
        "information, and potentially financial data if banking details were "
        "entered on the fake site."
    )
    actions = (
        "Change the password for the compromised account immediately from a clean device",
        "Enable 2-Factor Authentication on the affected account",
        "Check for unauthorized email forwarding rules or connected apps in your email settings",
        "Scan your device for malware using reputable antivirus software",
        "Report the phishing email to your email provider (mark as phishing/spam)",
        "Monitor your accounts for suspicious activity over the next 30 days",
    )
    report_to = (CERT_IN, CYBER_CRIME_PORTAL)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return (
            answers.platform == "email"
            and answers.clicked_suspicious_link == "Yes"
            and credentials_shared(answers)
        )


class Smishing(AttackPattern):
    """Link clicked in an SMS or messaging app."""

    name = "Smishing (SMS Phishing)"
    severity = Severity.LOW
    icon = "MessageSquare"
    description = (
        "Smishing uses fraudulent SMS or messaging app messages containing "
        "malicious links to steal personal data or install malware on your "
        "device."
    )
    attacker_access = (
        "Depending on the link's payload, potentially device access, login "
        "credentials, or personal information if you entered data on the "
        "linked site."
    )
    actions = (
        "Do not click any more links from the same sender",
        "Clear your browser history and cookies",
        "Run an antivirus scan on your device",
        "Block the sender's number",
        "If you entered any information, change those credentials immediately",
        "Report the number to your telecom provider for spam blocking",
    )
    report_to = (CYBER_CRIME_PORTAL, CERT_IN)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return answers.platform == "messaging" and answers.clicked_suspicious_link == "Yes"


class ManInTheMiddle(AttackPattern):
    """Traffic intercepted on a public Wi-Fi network."""

    name = "Man-in-the-Middle Attack"
    severity = Severity.MEDIUM
    icon = "Wifi"
    description = (
        "A Man-in-the-Middle attack intercepts your communication over an "
        "unsecured network. Attackers can capture everything you transmit: "
        "passwords, messages, and financial data."
    )
    attacker_access = (
        "All data transmitted over the compromised network: login credentials, "
        "banking details, emails, and any unencrypted communications."
    )
    actions = (
        "Disconnect from the public Wi-Fi immediately",
        "Change all passwords for accounts accessed during that session",
        "Check your bank accounts for unauthorized transactions",
        "Avoid using public Wi-Fi for banking or sensitive activities in the future",
        "Use a trusted VPN when connecting to public networks",
        "Enable HTTPS-only mode in your browser settings",
    )
    report_to = (CERT_IN, CYBER_CRIME_PORTAL)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return answers.platform == "wifi" and (
            has_impact(answers, "money") or credentials_shared(answers)
        )
