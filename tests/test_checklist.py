"""Tests for action plan completion tracking."""

import pytest

from backend.app.core import ValidationError
from backend.app.features.triage.action_plan import build_plan
from backend.app.features.triage.checklist import ChecklistProgress
from backend.app.features.triage.classifier import classify
from backend.app.features.triage.models import ActionPlan, AnswerSet, Priority


@pytest.fixture
def plan(sim_swap_answers: AnswerSet) -> ActionPlan:
    return build_plan(sim_swap_answers, classify(sim_swap_answers))


class TestChecklistProgress:
    """Tests for ChecklistProgress."""

    def test_starts_empty(self, plan: ActionPlan) -> None:
        progress = ChecklistProgress(plan)
        assert progress.total_completed == 0
        assert progress.ratio == 0.0
        assert progress.by_bucket() == {"now": "0/2", "today": "0/2", "week": "0/4"}

    def test_toggle_on_and_off(self, plan: ActionPlan) -> None:
        progress = ChecklistProgress(plan)
        assert progress.toggle("now-bank") is True
        assert progress.is_checked("now-bank") is True
        assert progress.toggle("now-bank") is False
        assert progress.is_checked("now-bank") is False

    def test_check_is_idempotent(self, plan: ActionPlan) -> None:
        """Test that checking an item twice leaves it checked."""
        progress = ChecklistProgress(plan)
        progress.check("today-evidence")
        progress.check("today-evidence")
        assert progress.is_checked("today-evidence") is True
        assert progress.completed(Priority.TODAY) == 1

    def test_check_unknown_item(self, plan: ActionPlan) -> None:
        with pytest.raises(ValidationError):
            ChecklistProgress(plan).check("week-nothing")

    def test_counts_per_bucket(self, plan: ActionPlan) -> None:
        progress = ChecklistProgress(plan)
        progress.toggle("now-bank")
        progress.toggle("now-telecom")
        progress.toggle("week-2fa")
        assert progress.completed(Priority.NOW) == 2
        assert progress.completed(Priority.TODAY) == 0
        assert progress.by_bucket() == {"now": "2/2", "today": "0/2", "week": "1/4"}
        assert progress.ratio == pytest.approx(3 / 8)

    def test_unknown_item(self, plan: ActionPlan) -> None:
        """Test that ids outside the plan are rejected."""
        progress = ChecklistProgress(plan)
        with pytest.raises(ValidationError) as exc_info:
            progress.toggle("now-ransom")
        assert exc_info.value.details == {"item_id": "now-ransom"}

    def test_plan_is_untouched(self, plan: ActionPlan) -> None:
        before = plan.model_copy()
        ChecklistProgress(plan).toggle("today-evidence")
        assert plan == before

    def test_empty_plan_ratio(self) -> None:
        assert ChecklistProgress(ActionPlan()).ratio == 0.0
