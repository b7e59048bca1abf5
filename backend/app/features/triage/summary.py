# backend/app/features/triage/summary.py
"""Banner and ordering derivations over a list of detected attacks."""

from typing import Dict, List, Optional, Sequence, Tuple

from .contacts import CYBER_CRIME_PORTAL, HELPLINE_1930
from .models import DetectedAttack, EmergencyNotice, Severity, ThreatSummary

# Lower is more severe
SEVERITY_RANK: Dict[Severity, int] = {
    Severity.CRITICAL: 0,
    Severity.HIGH: 1,
    Severity.MEDIUM: 2,
    Severity.LOW: 3,
}

THREAT_LEVEL_TEXT: Dict[Severity, Tuple[str, str]] = {
    Severity.CRITICAL: (
        "Critical Threat Level",
        "Immediate action required. Your data and/or finances are at serious risk.",
    ),
    Severity.HIGH: (
        "High Threat Level",
        "Urgent action recommended. Your accounts or identity may be compromised.",
    ),
    Severity.MEDIUM: (
        "Medium Threat Level",
        "Action needed. There are signs of compromise that require attention.",
    ),
    Severity.LOW: (
        "Low Threat Level",
        "Precautionary action advised. Some suspicious activity was detected.",
    ),
}

FINANCIAL_NAME_MARKERS = ("SIM Swap", "UPI", "Vishing", "Banking")

FINANCIAL_MESSAGE = (
    "If you have lost money or suspect financial fraud, call the Cyber Crime "
    "Helpline immediately. Reporting within 24 hours significantly increases "
    "recovery chances."
)
CRITICAL_MESSAGE = (
    "This is a critical-level threat. Take the recommended actions below "
    "immediately and report the incident to the authorities."
)


def highest_severity(attacks: Sequence[DetectedAttack]) -> Severity:
    """Most severe level present, Low when there are no attacks."""
    highest = Severity.LOW
    for attack in attacks:
        if SEVERITY_RANK[attack.severity] < SEVERITY_RANK[highest]:
            highest = attack.severity
    return highest


def severity_counts(attacks: Sequence[DetectedAttack]) -> Dict[str, int]:
    counts = {severity.value: 0 for severity in Severity}
    for attack in attacks:
        counts[attack.severity.value] += 1
    return counts


def sort_by_severity(attacks: Sequence[DetectedAttack]) -> List[DetectedAttack]:
    """Most severe first; ties keep classification order."""
    return sorted(attacks, key=lambda a: SEVERITY_RANK[a.severity])


def emergency_notice(attacks: Sequence[DetectedAttack]) -> Optional[EmergencyNotice]:
    """Urgent helpline banner for critical or money-related threats."""
    has_critical = any(a.severity == Severity.CRITICAL for a in attacks)
    has_financial = any(
        marker in a.name for a in attacks for marker in FINANCIAL_NAME_MARKERS
    )

    if not has_critical and not has_financial:
        return None

    return EmergencyNotice(
        title="Immediate Action Required",
        message=FINANCIAL_MESSAGE if has_financial else CRITICAL_MESSAGE,
        financial=has_financial,
        helpline=HELPLINE_1930,
        portal=CYBER_CRIME_PORTAL,
    )


def summarize(attacks: Sequence[DetectedAttack]) -> ThreatSummary:
    highest = highest_severity(attacks)
    headline, message = THREAT_LEVEL_TEXT[highest]
    return ThreatSummary(
        highest_severity=highest,
        headline=headline,
        message=message,
        total_threats=len(attacks),
        severity_counts=severity_counts(attacks),
        emergency=emergency_notice(attacks),
    )
