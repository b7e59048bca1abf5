# backend/app/features/triage/store.py
"""In-memory, TTL-bounded handoff of submitted answers to the results view."""

import time
import uuid
from typing import Callable, Dict, Optional, Tuple

from backend.app.core import ReportNotFoundError, logs, settings
from .models import AnswerSet


class ReportStore:
    """Process-local report storage. Nothing is written to disk."""

    def __init__(
        self,
        ttl_seconds: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = settings.REPORT_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._reports: Dict[str, Tuple[float, AnswerSet]] = {}

    def put(self, answers: AnswerSet) -> str:
        report_id = str(uuid.uuid4())
        self._reports[report_id] = (self._clock(), answers)
        return report_id

    def get(self, report_id: str) -> AnswerSet:
        """
        Fetch a stored report.

        Raises:
            ReportNotFoundError: If the id is unknown or the report expired
        """
        entry = self._reports.get(report_id)
        if entry is None or self._expired(entry[0]):
            self._reports.pop(report_id, None)
            raise ReportNotFoundError(report_id)
        return entry[1]

    def purge_expired(self) -> int:
        """Drop expired reports and return how many were removed."""
        expired = [rid for rid, (created, _) in self._reports.items() if self._expired(created)]
        for report_id in expired:
            del self._reports[report_id]
        if expired:
            logs.info(f"Cleaned up {len(expired)} expired reports", "cleanup")
        return len(expired)

    def _expired(self, created_at: float) -> bool:
        return self._clock() - created_at > self.ttl_seconds

    def __len__(self) -> int:
        return len(self._reports)

    def __contains__(self, report_id: object) -> bool:
        return report_id in self._reports
