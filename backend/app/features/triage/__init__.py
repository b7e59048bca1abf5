# backend/app/features/triage/__init__.py
"""Incident triage feature: attack classification and action planning."""

from .action_plan import build_plan
from .classifier import classify
from .models import (
    ActionItem,
    ActionPlan,
    AnswerSet,
    DetectedAttack,
    Priority,
    ReportingContact,
    Severity,
    TriageResult,
)
from .schemas import ReportCreatedResponse, ReportSubmission
from .services import TriageService

__all__ = [
    "classify",
    "build_plan",
    "ActionItem",
    "ActionPlan",
    "AnswerSet",
    "DetectedAttack",
    "Priority",
    "ReportingContact",
    "Severity",
    "TriageResult",
    "ReportSubmission",
    "ReportCreatedResponse",
    "TriageService",
]
