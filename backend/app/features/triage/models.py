# backend/app/features/triage/models.py
"""Data models for incident triage."""

from datetime import datetime
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    """Threat severity levels."""

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Priority(str, Enum):
    """Time horizon of an action plan bucket."""

    NOW = "now"
    TODAY = "today"
    WEEK = "week"


class _Frozen(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class AnswerSet(_Frozen):
    """A user's questionnaire responses for one incident.

    Blank strings and empty tuples mean "unanswered". Labels are matched by
    case-insensitive fragment, so values outside the questionnaire vocabulary
    are accepted and simply never match.
    """

    platform: str = ""
    suspicious_activities: Tuple[str, ...] = ()
    device_permissions: Tuple[str, ...] = ()
    personal_info_shared: Tuple[str, ...] = ()
    account_access_given: Tuple[str, ...] = ()
    impacts: Tuple[str, ...] = ()
    when_happened: str = ""
    clicked_suspicious_link: str = ""
    downloaded_file: str = ""
    shared_otp: str = Field(default="", alias="sharedOTP")
    allowed_remote_access: str = ""
    concern_level: int = 0


class ReportingContact(_Frozen):
    """An official destination an incident can be reported to."""

    name: str
    url: str


class DetectedAttack(_Frozen):
    """A matched attack pattern, fully described for display."""

    name: str
    severity: Severity
    icon: str  # key into the frontend icon registry
    description: str
    attacker_access: str
    actions: Tuple[str, ...]
    report_to: Tuple[ReportingContact, ...]


class ActionItem(_Frozen):
    """A single checklist entry. ``id`` is stable across runs."""

    id: str
    text: str


class ActionPlan(_Frozen):
    """Action items grouped by how soon they should be done."""

    now: Tuple[ActionItem, ...] = ()
    today: Tuple[ActionItem, ...] = ()
    week: Tuple[ActionItem, ...] = ()

    def bucket(self, priority: Priority) -> Tuple[ActionItem, ...]:
        return getattr(self, Priority(priority).value)

    def items(self) -> Iterator[Tuple[Priority, ActionItem]]:
        for priority in Priority:
            for item in self.bucket(priority):
                yield priority, item

    @property
    def total(self) -> int:
        return len(self.now) + len(self.today) + len(self.week)


class EmergencyNotice(_Frozen):
    """Urgent call-to-action shown for critical or financial threats."""

    title: str
    message: str
    financial: bool
    helpline: ReportingContact
    portal: ReportingContact


class ThreatSummary(_Frozen):
    """Banner-level summary derived from the detected attacks."""

    highest_severity: Severity
    headline: str
    message: str
    total_threats: int
    severity_counts: Dict[str, int]
    emergency: Optional[EmergencyNotice] = None


class OfficialResource(_Frozen):
    """A government portal, helpline, or reference for victims."""

    title: str
    description: str
    url: str
    tag: str


class TriageResult(_Frozen):
    """Complete analysis of one submitted report."""

    report_id: str
    timestamp: datetime
    answers: AnswerSet
    attacks: List[DetectedAttack]
    plan: ActionPlan
    summary: ThreatSummary
