# backend/app/features/triage/schemas.py
"""API request/response schemas for incident triage."""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .models import AnswerSet

MAX_LABELS_PER_FIELD = 32
MAX_LABEL_LENGTH = 256


class ReportSubmission(BaseModel):
    """Questionnaire answers as posted by the form or a JSON file.

    Accepts both camelCase (form payload) and snake_case keys. Only shape is
    checked here; vocabulary and completeness are checked by the service
    when a strict submission is requested.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    platform: str = Field(default="", max_length=32)
    suspicious_activities: List[str] = Field(default_factory=list)
    device_permissions: List[str] = Field(default_factory=list)
    personal_info_shared: List[str] = Field(default_factory=list)
    account_access_given: List[str] = Field(default_factory=list)
    impacts: List[str] = Field(default_factory=list)
    when_happened: str = Field(default="", max_length=32)
    clicked_suspicious_link: str = Field(default="", max_length=16)
    downloaded_file: str = Field(default="", max_length=16)
    shared_otp: str = Field(default="", max_length=16, alias="sharedOTP")
    allowed_remote_access: str = Field(default="", max_length=16)
    concern_level: int = Field(default=0, ge=0, le=5)

    @field_validator(
        "suspicious_activities",
        "device_permissions",
        "personal_info_shared",
        "account_access_given",
        "impacts",
    )
    @classmethod
    def validate_labels(cls, v: List[str]) -> List[str]:
        """Bound list sizes and drop duplicate selections, keeping order."""
        if len(v) > MAX_LABELS_PER_FIELD:
            raise ValueError(f"Too many selections (max {MAX_LABELS_PER_FIELD})")
        for label in v:
            if len(label) > MAX_LABEL_LENGTH:
                raise ValueError(f"Label too long (max {MAX_LABEL_LENGTH} chars)")
        return list(dict.fromkeys(v))

    def to_answers(self) -> AnswerSet:
        return AnswerSet(**self.model_dump())


class ReportCreatedResponse(BaseModel):
    """Response after storing a report for the results view."""

    report_id: str
    expires_in: int
    message: str = "Report stored"


class QuestionnaireResponse(BaseModel):
    """Steps and option labels of the questionnaire."""

    steps: List[Dict[str, Any]]
    options: Dict[str, List[Any]]


class ErrorResponse(BaseModel):
    error: str
    details: Dict[str, Any] = Field(default_factory=dict)
