"""Tests for questionnaire steps and vocabulary checks."""

from backend.app.features.triage.models import AnswerSet
from backend.app.features.triage.vocabulary import (
    PLATFORMS,
    STEPS,
    missing_steps,
    questionnaire,
    unknown_labels,
)


class TestMissingSteps:
    """Tests for step completeness."""

    def test_empty_answers(self, empty_answers: AnswerSet) -> None:
        """Test that every required step is reported, in order."""
        assert [step.key for step in missing_steps(empty_answers)] == [
            "platform",
            "activity",
            "impact",
            "timeline",
        ]

    def test_complete_answers(self, complete_answers: AnswerSet) -> None:
        assert missing_steps(complete_answers) == []

    def test_permissions_step_is_optional(self, complete_answers: AnswerSet) -> None:
        answers = complete_answers.model_copy(
            update={"device_permissions": (), "personal_info_shared": (), "account_access_given": ()}
        )
        assert missing_steps(answers) == []

    def test_timeline_needs_concern_level(self, complete_answers: AnswerSet) -> None:
        answers = complete_answers.model_copy(update={"concern_level": 0})
        assert [step.key for step in missing_steps(answers)] == ["timeline"]

    def test_timeline_needs_every_question(self, complete_answers: AnswerSet) -> None:
        answers = complete_answers.model_copy(update={"shared_otp": ""})
        assert [step.key for step in missing_steps(answers)] == ["timeline"]


class TestUnknownLabels:
    """Tests for vocabulary membership checks."""

    def test_clean(self, complete_answers: AnswerSet) -> None:
        assert unknown_labels(complete_answers) == {}

    def test_blank_values_are_not_unknown(self, empty_answers: AnswerSet) -> None:
        assert unknown_labels(empty_answers) == {}

    def test_reports_bad_labels_by_field(self) -> None:
        answers = AnswerSet(
            platform="fax",
            impacts=("Nothing visible yet", "Lost my cat"),
            shared_otp="Maybe",
        )
        assert unknown_labels(answers) == {
            "impacts": ["Lost my cat"],
            "platform": ["fax"],
            "shared_otp": ["Maybe"],
        }

    def test_labels_are_case_sensitive(self) -> None:
        """Test that strict checks need the exact label even though matching ignores case."""
        answers = AnswerSet(suspicious_activities=("unknown logins detected",))
        assert "suspicious_activities" in unknown_labels(answers)

    def test_concern_level_range(self) -> None:
        assert unknown_labels(AnswerSet(concern_level=9)) == {"concern_level": ["9"]}


class TestQuestionnaire:
    """Tests for the serializable questionnaire description."""

    def test_steps(self) -> None:
        data = questionnaire()
        assert [step["key"] for step in data["steps"]] == [step.key for step in STEPS]
        assert data["steps"][2]["fields"] == [
            "device_permissions",
            "personal_info_shared",
            "account_access_given",
        ]

    def test_platform_options(self) -> None:
        options = questionnaire()["options"]["platform"]
        assert len(options) == len(PLATFORMS)
        assert {"value": "banking", "label": "Online Banking / UPI App"} in options

    def test_concern_level_options(self) -> None:
        options = questionnaire()["options"]["concern_level"]
        assert [option["value"] for option in options] == [1, 2, 3, 4, 5]
        assert options[0]["label"] == "Not very concerned"
        assert options[-1]["label"] == "Extremely concerned"

    def test_every_answer_field_has_options(self) -> None:
        options = questionnaire()["options"]
        fields = {field for step in STEPS for field in step.fields}
        assert fields == set(options)
