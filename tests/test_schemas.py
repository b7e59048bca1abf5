"""Tests for API request schemas."""

import pytest
from pydantic import ValidationError

from backend.app.features.triage.models import AnswerSet
from backend.app.features.triage.schemas import MAX_LABELS_PER_FIELD, ReportSubmission


class TestReportSubmission:
    """Tests for ReportSubmission."""

    def test_camel_case_payload(self, complete_payload: dict) -> None:
        submission = ReportSubmission.model_validate(complete_payload)
        assert submission.shared_otp == "Yes"
        assert submission.suspicious_activities == ["Money was deducted without my action"]
        assert submission.concern_level == 5

    def test_snake_case_payload(self) -> None:
        submission = ReportSubmission.model_validate(
            {"platform": "email", "clicked_suspicious_link": "Yes", "shared_otp": "No"}
        )
        assert submission.clicked_suspicious_link == "Yes"
        assert submission.shared_otp == "No"

    def test_defaults(self) -> None:
        answers = ReportSubmission().to_answers()
        assert answers == AnswerSet()

    def test_unknown_keys_ignored(self) -> None:
        submission = ReportSubmission.model_validate({"platform": "email", "extra": 1})
        assert submission.platform == "email"

    def test_duplicates_dropped_in_order(self) -> None:
        submission = ReportSubmission.model_validate(
            {"impacts": ["Not sure", "Nothing visible yet", "Not sure"]}
        )
        assert submission.impacts == ["Not sure", "Nothing visible yet"]

    def test_too_many_labels(self) -> None:
        with pytest.raises(ValidationError):
            ReportSubmission.model_validate({"impacts": [f"x{i}" for i in range(MAX_LABELS_PER_FIELD + 1)]})

    def test_label_too_long(self) -> None:
        with pytest.raises(ValidationError):
            ReportSubmission.model_validate({"impacts": ["x" * 300]})

    @pytest.mark.parametrize("level", [-1, 6])
    def test_concern_level_bounds(self, level: int) -> None:
        with pytest.raises(ValidationError):
            ReportSubmission.model_validate({"concernLevel": level})

    def test_to_answers(self, complete_payload: dict) -> None:
        answers = ReportSubmission.model_validate(complete_payload).to_answers()
        assert isinstance(answers, AnswerSet)
        assert answers.platform == "banking"
        assert answers.personal_info_shared == ("OTP",)
        assert answers.impacts == ("Lost money or unauthorized transactions",)
        assert answers.shared_otp == "Yes"
