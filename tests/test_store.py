"""Tests for the in-memory report store."""

import pytest

from backend.app.core import ReportNotFoundError
from backend.app.features.triage.models import AnswerSet
from backend.app.features.triage.store import ReportStore


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> ReportStore:
    return ReportStore(ttl_seconds=60, clock=clock)


class TestReportStore:
    """Tests for ReportStore."""

    def test_put_and_get(self, store: ReportStore, phishing_answers: AnswerSet) -> None:
        report_id = store.put(phishing_answers)
        assert report_id in store
        assert store.get(report_id) == phishing_answers

    def test_ids_are_unique(self, store: ReportStore) -> None:
        assert store.put(AnswerSet()) != store.put(AnswerSet())
        assert len(store) == 2

    def test_unknown_id(self, store: ReportStore) -> None:
        with pytest.raises(ReportNotFoundError) as exc_info:
            store.get("missing")
        assert exc_info.value.status_code == 404

    def test_get_is_repeatable(self, store: ReportStore) -> None:
        """Test that a report can be viewed more than once before expiry."""
        report_id = store.put(AnswerSet())
        store.get(report_id)
        store.get(report_id)
        assert report_id in store

    def test_expired_report(self, store: ReportStore, clock: FakeClock) -> None:
        report_id = store.put(AnswerSet())
        clock.now += 61
        with pytest.raises(ReportNotFoundError):
            store.get(report_id)
        assert report_id not in store

    def test_not_expired_at_ttl(self, store: ReportStore, clock: FakeClock) -> None:
        report_id = store.put(AnswerSet())
        clock.now += 60
        assert store.get(report_id) == AnswerSet()

    def test_purge_expired(self, store: ReportStore, clock: FakeClock) -> None:
        old = store.put(AnswerSet())
        clock.now += 30
        fresh = store.put(AnswerSet())
        clock.now += 31

        assert store.purge_expired() == 1
        assert old not in store
        assert fresh in store

    def test_purge_nothing(self, store: ReportStore) -> None:
        store.put(AnswerSet())
        assert store.purge_expired() == 0

    def test_default_ttl_from_settings(self) -> None:
        from backend.app.core import settings

        assert ReportStore().ttl_seconds == settings.REPORT_TTL_SECONDS
