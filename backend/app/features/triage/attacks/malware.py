# backend/app/features/triage/attacks/malware.py
"""Patterns for malicious software running on the victim's device."""

from typing import Sequence

from ..contacts import CERT_IN, CYBER_CRIME_PORTAL, HELPLINE_1930, LOCAL_POLICE
from ..matching import (
    already_detected,
    credentials_shared,
    has_activity,
    has_permission,
)
from ..models import AnswerSet, DetectedAttack, Severity
from .base import AttackPattern
from .phishing import ManInTheMiddle, Phishing, Vishing


class Ransomware(AttackPattern):
    """Files encrypted and held for payment."""

    name = "Ransomware"
    severity = Severity.CRITICAL
    icon = "Lock"
    description = (
        "Ransomware is malicious software that encrypts your files and demands "
        "payment for their release. Attackers typically gain access through "
        "phishing emails, malicious downloads, or vulnerable software."
    )
    attacker_access = (
        "Full access to your files, potentially your entire system. They can "
        "encrypt, delete, or exfiltrate your data before locking it."
    )
    actions = (
        "Disconnect the affected device from the internet and all networks immediately",
        "Do NOT pay the ransom: there is no guarantee your files will be restored",
        "Photograph the ransom message with another device for evidence",
        "Report to CERT-In and file a complaint on cybercrime.gov.in",
        "Contact a professional data recovery service if files are critical",
        "After recovery, install reputable antivirus software and update all systems",
    )
    report_to = (CERT_IN, CYBER_CRIME_PORTAL, LOCAL_POLICE)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return has_activity(answers, "files got encrypted", "ransom message")


class RemoteAccessTrojan(AttackPattern):
    """Attacker controls the device remotely."""

    name = "Remote Access Trojan (RAT)"
    severity = Severity.CRITICAL
    icon = "Monitor"
    description = (
        "A Remote Access Trojan gives attackers full control of your device "
        "without your knowledge. They can view your screen, access files, and "
        "use your device as if they were sitting in front of it."
    )
    attacker_access = (
        "Complete control of your device: files, camera, microphone, "
        "keystrokes, passwords, banking apps, and all personal data stored on "
        "the device."
    )
    actions = (
        "Disconnect the device from the internet immediately (Wi-Fi and mobile data)",
        "Uninstall any remote access apps (TeamViewer, AnyDesk, etc.) you recently installed",
        "Change all passwords from a DIFFERENT, clean device",
        "Run a full antivirus scan and consider factory resetting the device",
        "Enable 2-Factor Authentication on all important accounts",
        "Monitor your bank accounts for unauthorized transactions",
    )
    report_to = (CERT_IN, CYBER_CRIME_PORTAL, HELPLINE_1930)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return (
            has_activity(answers, "screen was being controlled remotely")
            or answers.allowed_remote_access == "Yes"
        )


class Spyware(AttackPattern):
    """Covert monitoring through camera, microphone or location."""

    name = "Spyware / Stalkerware"
    severity = Severity.MEDIUM
    icon = "Eye"
    description = (
        "Spyware secretly monitors your device activity, recording calls, "
        "capturing screenshots, tracking location, and accessing your camera "
        "and microphone without consent."
    )
    attacker_access = (
        "Real-time access to your camera, microphone, GPS location, call logs, "
        "messages, browsing history, and potentially all data on your device."
    )
    actions = (
        "Check your installed apps for anything unfamiliar and uninstall suspicious apps",
        "Revoke camera, microphone, and location permissions for apps you don't recognize",
        "Run a reputable anti-spyware scan (Malwarebytes, Norton)",
        "Consider factory resetting the device if spyware persists",
        "Change all passwords from a different, clean device",
        "If you suspect a known person, this may be a criminal offence. Contact the police",
    )
    report_to = (CYBER_CRIME_PORTAL, LOCAL_POLICE)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return has_permission(answers, "camera", "microphone", "location") and has_activity(
            answers, "webcam or mic turned on by itself"
        )


class MalwareInfection(AttackPattern):
    """Unwanted apps installed with broad device permissions."""

    name = "Malware Infection"
    severity = Severity.MEDIUM
    icon = "Bug"
    description = (
        "Malware is malicious software installed on your device, often through "
        "fake apps or downloads. It can steal data, monitor activity, or damage "
        "your system."
    )
    attacker_access = (
        "Depending on permissions granted, potentially full device access "
        "including files, contacts, messages, and the ability to install "
        "additional malicious software."
    )
    actions = (
        "Boot your device in Safe Mode and uninstall recently installed or unrecognized apps",
        "Revoke Storage and Accessibility permissions from suspicious apps",
        "Run a full device scan with reputable antivirus software",
        "Clear your browser cache, cookies, and saved passwords",
        "If issues persist, back up important data and factory reset the device",
        "Only install apps from official stores (Google Play, App Store) going forward",
    )
    report_to = (CERT_IN, CYBER_CRIME_PORTAL)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return has_activity(answers, "unknown apps appeared", "device became slow") and (
            has_permission(answers, "storage", "accessibility")
        )


class Adware(AttackPattern):
    name = "Adware"
    severity = Severity.LOW
    icon = "Megaphone"
    description = (
        "Adware aggressively displays unwanted advertisements, pop-ups, and "
        "redirects. While not always directly harmful, it can lead to malicious "
        "sites and degrade your device's performance."
    )
    attacker_access = (
        "Your browsing habits and activity data. Adware can also serve as a "
        "gateway for more serious malware if you interact with the ads."
    )
    actions = (
        "Identify and uninstall recently installed apps or browser extensions",
        "Clear your browser cache, cookies, and reset browser settings to default",
        "Install an ad blocker extension for your browser",
        "Run an anti-malware scan to remove adware components",
        "Avoid downloading software from unofficial sources",
        "Check your browser's homepage and default search engine settings",
    )
    report_to = (CERT_IN,)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return has_activity(answers, "constant pop-ups", "redirected to a different website")


class Keylogger(AttackPattern):
    """Credentials leaked with no phishing, vishing or interception to explain it."""

    name = "Keylogger"
    severity = Severity.LOW
    icon = "Keyboard"
    description = (
        "A keylogger silently records every keystroke you make, capturing "
        "passwords, messages, and sensitive information without your knowledge."
    )
    attacker_access = (
        "All typed information: passwords, credit card numbers, personal "
        "messages, search queries, and any other text input on the infected "
        "device."
    )
    actions = (
        "Run a full antivirus and anti-malware scan on your device",
        "Change all passwords from a DIFFERENT, clean device",
        "Check for unauthorized browser extensions or background processes",
        "Enable 2-Factor Authentication on all critical accounts",
        "Consider using a password manager with auto-fill (reduces keylogging risk)",
        "If on a shared/public computer, avoid entering sensitive information",
    )
    report_to = (CERT_IN, CYBER_CRIME_PORTAL)

    credential_theft = (Phishing.name, Vishing.name, ManInTheMiddle.name)

    def matches(self, answers: AnswerSet, detected: Sequence[DetectedAttack]) -> bool:
        return (
            credentials_shared(answers)
            and answers.clicked_suspicious_link != "Yes"
            and not already_detected(detected, *self.credential_theft)
        )
