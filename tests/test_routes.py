"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from backend.app.core import settings
from backend.app.features.triage import routes
from backend.app.main import create_app

PREFIX = f"{settings.API_PREFIX}/triage"


@pytest.fixture(autouse=True)
def reset_state():
    """Isolate the module-level rate limiter and report store."""
    routes.rate_limit_store.clear()
    routes.report_store._reports.clear()
    yield
    routes.rate_limit_store.clear()
    routes.report_store._reports.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": settings.APP_VERSION}


class TestReferenceEndpoints:
    """Tests for questionnaire and resources endpoints."""

    def test_questionnaire(self, client: TestClient) -> None:
        response = client.get(f"{PREFIX}/questionnaire")
        assert response.status_code == 200
        data = response.json()
        assert [step["key"] for step in data["steps"]] == [
            "platform",
            "activity",
            "permissions",
            "impact",
            "timeline",
        ]
        assert "Yes" in data["options"]["shared_otp"]

    def test_resources(self, client: TestClient) -> None:
        response = client.get(f"{PREFIX}/resources")
        assert response.status_code == 200
        tags = [resource["tag"] for resource in response.json()]
        assert "Emergency" in tags


class TestAnalyze:
    """Tests for the stateless analyze endpoint."""

    def test_sim_swap(self, client: TestClient) -> None:
        response = client.post(
            f"{PREFIX}/analyze",
            json={
                "platform": "banking",
                "sharedOTP": "Yes",
                "impacts": ["Lost money or unauthorized transactions"],
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["attacks"][0]["name"] == "SIM Swap Fraud"
        assert data["attacks"][0]["severity"] == "Critical"
        assert [item["id"] for item in data["plan"]["now"]] == ["now-bank", "now-telecom"]
        assert data["summary"]["highest_severity"] == "Critical"
        assert data["answers"]["shared_otp"] == "Yes"

    def test_empty_body(self, client: TestClient) -> None:
        response = client.post(f"{PREFIX}/analyze", json={})
        assert response.status_code == 200
        assert [a["name"] for a in response.json()["attacks"]] == ["Suspicious Activity Detected"]

    def test_strict_incomplete(self, client: TestClient) -> None:
        response = client.post(f"{PREFIX}/analyze?strict=true", json={"platform": "email"})
        assert response.status_code == 400
        body = response.json()
        assert body["error"].startswith("Questionnaire incomplete")
        assert body["details"]["missing_steps"] == ["Activity", "Impact", "Timeline"]

    def test_malformed_body(self, client: TestClient) -> None:
        response = client.post(f"{PREFIX}/analyze", json={"concernLevel": 42})
        assert response.status_code == 422


class TestReports:
    """Tests for the submit-then-view flow."""

    def test_submit_and_view(self, client: TestClient, complete_payload: dict) -> None:
        created = client.post(f"{PREFIX}/reports", json=complete_payload)
        assert created.status_code == 201
        body = created.json()
        assert body["expires_in"] == settings.REPORT_TTL_SECONDS
        report_id = body["report_id"]

        result = client.get(f"{PREFIX}/reports/{report_id}/result")
        assert result.status_code == 200
        data = result.json()
        assert data["report_id"] == report_id
        assert data["attacks"][0]["name"] == "SIM Swap Fraud"

        html = client.get(f"{PREFIX}/reports/{report_id}/html")
        assert html.status_code == 200
        assert html.headers["content-type"].startswith("text/html")
        assert "SIM Swap Fraud" in html.text

    def test_incomplete_submission_rejected(self, client: TestClient) -> None:
        response = client.post(f"{PREFIX}/reports", json={"platform": "email"})
        assert response.status_code == 400
        assert "missing_steps" in response.json()["details"]
        assert len(routes.report_store) == 0

    def test_out_of_vocabulary_rejected(self, client: TestClient, complete_payload: dict) -> None:
        payload = dict(complete_payload, platform="fax")
        response = client.post(f"{PREFIX}/reports", json=payload)
        assert response.status_code == 400
        assert response.json()["details"]["unknown"] == {"platform": ["fax"]}

    def test_unknown_report(self, client: TestClient) -> None:
        response = client.get(f"{PREFIX}/reports/does-not-exist/result")
        assert response.status_code == 404
        assert response.json()["error"] == "Report not found or expired"

    def test_rate_limit(self, client: TestClient, complete_payload: dict) -> None:
        for _ in range(settings.RATE_LIMIT_REQUESTS):
            assert client.post(f"{PREFIX}/reports", json=complete_payload).status_code == 201
        response = client.post(f"{PREFIX}/reports", json=complete_payload)
        assert response.status_code == 429

    def test_rate_limit_per_forwarded_ip(self, client: TestClient, complete_payload: dict) -> None:
        for _ in range(settings.RATE_LIMIT_REQUESTS):
            client.post(f"{PREFIX}/reports", json=complete_payload, headers={"X-Forwarded-For": "10.0.0.1"})
        response = client.post(
            f"{PREFIX}/reports",
            json=complete_payload,
            headers={"X-Forwarded-For": "10.0.0.2, 172.16.0.1"},
        )
        assert response.status_code == 201


class TestClientIp:
    def test_real_ip_header(self) -> None:
        from starlette.requests import Request

        request = Request(
            {
                "type": "http",
                "headers": [(b"x-real-ip", b" 192.168.1.5 ")],
                "client": ("127.0.0.1", 1234),
            }
        )
        assert routes.get_client_ip(request) == "192.168.1.5"


class TestRateLimitCleanup:
    """Tests for dropping idle rate limit entries."""

    def test_idle_clients_removed(self) -> None:
        now = 10_000.0
        routes.rate_limit_store["10.0.0.1"] = [now - settings.RATE_LIMIT_WINDOW - 1]
        routes.rate_limit_store["10.0.0.2"] = []
        routes.rate_limit_store["10.0.0.3"] = [now - 1]

        assert routes.purge_rate_limits(now) == 2
        assert list(routes.rate_limit_store) == ["10.0.0.3"]

    def test_nothing_to_remove(self) -> None:
        assert routes.purge_rate_limits() == 0
