# backend/app/features/triage/routes.py
"""FastAPI routes for the triage API."""

import asyncio
import time
from collections import defaultdict
from typing import Dict, List, Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from backend.app.core import RateLimitError, logs, settings
from .contacts import OFFICIAL_RESOURCES
from .models import OfficialResource, TriageResult
from .reporting import render_html_report
from .schemas import QuestionnaireResponse, ReportCreatedResponse, ReportSubmission
from .services import TriageService
from .store import ReportStore
from .vocabulary import questionnaire

router = APIRouter(prefix="/triage", tags=["triage"])

# In-memory rate limiting (per IP)
rate_limit_store: Dict[str, list] = defaultdict(list)

# Session handoff between submission and the results view
report_store = ReportStore()

service = TriageService()


def purge_rate_limits(now: Optional[float] = None) -> int:
    """Drop clients with no requests inside the current window."""
    window_start = (time.time() if now is None else now) - settings.RATE_LIMIT_WINDOW
    idle = [
        ip for ip, stamps in rate_limit_store.items()
        if not any(ts > window_start for ts in stamps)
    ]
    for ip in idle:
        del rate_limit_store[ip]
    return len(idle)


async def cleanup_old_reports() -> None:
    """Remove reports older than TTL and idle rate limit entries. Run as background task."""
    while True:
        await asyncio.sleep(settings.REPORT_CLEANUP_INTERVAL)
        report_store.purge_expired()
        purge_rate_limits()


def get_client_ip(request: Request) -> str:
    """Get real client IP, handling reverse proxies."""
    # Check X-Forwarded-For (take first IP - original client)
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    # Check X-Real-IP
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    # Fallback to direct connection
    return request.client.host if request.client else "unknown"


def check_rate_limit(client_ip: str) -> None:
    """
    Check if client has exceeded rate limit.

    Raises:
        RateLimitError: If rate limit exceeded
    """
    now = time.time()
    window_start = now - settings.RATE_LIMIT_WINDOW

    # Clean old requests
    rate_limit_store[client_ip] = [
        ts for ts in rate_limit_store[client_ip] if ts > window_start
    ]

    if len(rate_limit_store[client_ip]) >= settings.RATE_LIMIT_REQUESTS:
        logs.security(
            "Rate limit exceeded",
            "rate_limit",
            {"ip": client_ip, "requests": len(rate_limit_store[client_ip])},
        )
        raise RateLimitError(
            f"Rate limit exceeded. Please wait {settings.RATE_LIMIT_WINDOW} seconds."
        )

    rate_limit_store[client_ip].append(now)


@router.get("/questionnaire", response_model=QuestionnaireResponse)
async def get_questionnaire() -> QuestionnaireResponse:
    """Steps of the questionnaire and the options offered at each."""
    return QuestionnaireResponse(**questionnaire())


@router.get("/resources", response_model=List[OfficialResource])
async def get_resources() -> List[OfficialResource]:
    """Official portals and helplines for reporting cyber crime."""
    return OFFICIAL_RESOURCES


@router.post("/analyze", response_model=TriageResult, response_model_by_alias=False)
async def analyze(submission: ReportSubmission, strict: bool = False) -> TriageResult:
    """
    Classify an incident and build its action plan without storing it.

    With ``strict=true`` the submission must complete every required step
    and use only questionnaire labels.
    """
    return service.analyze(submission.to_answers(), strict=strict)


@router.post("/reports", response_model=ReportCreatedResponse, status_code=201)
async def submit_report(
    submission: ReportSubmission,
    http_request: Request,
) -> ReportCreatedResponse:
    """
    Store a completed questionnaire for the results view.

    This endpoint:
    1. Checks rate limits
    2. Rejects incomplete or out-of-vocabulary answers
    3. Stores the answers in memory for REPORT_TTL_SECONDS
    4. Returns a report_id for fetching results
    """
    client_ip = get_client_ip(http_request)
    check_rate_limit(client_ip)

    answers = submission.to_answers()
    service.check_submission(answers)

    report_id = report_store.put(answers)
    logs.info("Report stored", "api", {"report_id": report_id, "client_ip": client_ip})

    return ReportCreatedResponse(report_id=report_id, expires_in=report_store.ttl_seconds)


@router.get(
    "/reports/{report_id}/result",
    response_model=TriageResult,
    response_model_by_alias=False,
)
async def get_report_result(report_id: str) -> TriageResult:
    """Analysis of a stored report."""
    answers = report_store.get(report_id)
    return service.analyze(answers, report_id=report_id)


@router.get("/reports/{report_id}/html", response_class=HTMLResponse)
async def get_report_html(report_id: str) -> HTMLResponse:
    """Printable incident report for a stored report."""
    answers = report_store.get(report_id)
    result = service.analyze(answers, report_id=report_id)
    return HTMLResponse(render_html_report(result))
