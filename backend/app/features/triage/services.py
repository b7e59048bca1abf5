# backend/app/features/triage/services.py
"""Triage service - runs classification and planning for one report."""

import time
import uuid
from datetime import datetime, timezone
from typing import Optional

from backend.app.core import IncompleteReportError, ValidationError, logs
from .action_plan import build_plan
from .classifier import classify
from .models import AnswerSet, TriageResult
from .summary import summarize
from .vocabulary import missing_steps, unknown_labels


class TriageService:
    """Orchestrates incident classification and action planning."""

    def check_submission(self, answers: AnswerSet) -> None:
        """
        Apply the questionnaire's own rules to a submission.

        Raises:
            IncompleteReportError: If a required step is unanswered
            ValidationError: If a value is outside the questionnaire vocabulary
        """
        missing = missing_steps(answers)
        if missing:
            raise IncompleteReportError([step.label for step in missing])

        unknown = unknown_labels(answers)
        if unknown:
            raise ValidationError(
                "Answers contain values outside the questionnaire",
                details={"unknown": unknown},
            )

    def analyze(
        self,
        answers: AnswerSet,
        strict: bool = False,
        report_id: Optional[str] = None,
    ) -> TriageResult:
        """
        Analyze one incident report.

        Args:
            answers: The questionnaire answers
            strict: Reject incomplete or out-of-vocabulary submissions
            report_id: Id of a stored report, a fresh id otherwise

        Returns:
            TriageResult with attacks, action plan and summary
        """
        if strict:
            self.check_submission(answers)

        report_id = report_id or str(uuid.uuid4())
        started = time.perf_counter()

        logs.debug(
            f"Analyzing report {report_id}",
            "triage",
            {"platform": answers.platform or "-", "strict": strict},
        )

        attacks = classify(answers)
        plan = build_plan(answers, attacks)
        summary = summarize(attacks)

        logs.info(
            f"Analyzed report {report_id}",
            "triage",
            {
                "attacks": [a.name for a in attacks],
                "highest_severity": summary.highest_severity.value,
                "plan_items": plan.total,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )

        return TriageResult(
            report_id=report_id,
            timestamp=datetime.now(timezone.utc),
            answers=answers,
            attacks=attacks,
            plan=plan,
            summary=summary,
        )
