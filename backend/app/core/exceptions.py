# backend/app/core/exceptions.py
"""Custom exception hierarchy for CyberGuard."""

from typing import Any, Dict, List, Optional


class AppException(Exception):
    """Base exception for application errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(AppException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, status_code=400, details=details)


class IncompleteReportError(ValidationError):
    """Raised when a submitted questionnaire skips required steps."""

    def __init__(self, missing_steps: List[str]) -> None:
        super().__init__(
            f"Questionnaire incomplete: {', '.join(missing_steps)}",
            details={"missing_steps": missing_steps},
        )
        self.missing_steps = missing_steps


class ReportNotFoundError(AppException):
    """Raised when a report id is unknown or has expired."""

    def __init__(self, report_id: str) -> None:
        super().__init__(
            "Report not found or expired",
            status_code=404,
            details={"report_id": report_id},
        )


class RateLimitError(AppException):
    """Raised when rate limit is exceeded."""

    def __init__(self, message: str = "Rate limit exceeded") -> None:
        super().__init__(message, status_code=429)
