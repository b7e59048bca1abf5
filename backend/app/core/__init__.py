# backend/app/core/__init__.py
"""Core utilities for CyberGuard."""

from .config import settings
from .exceptions import (
    AppException,
    IncompleteReportError,
    RateLimitError,
    ReportNotFoundError,
    ValidationError,
)
from .observability import logs, setup_logging

__all__ = [
    "settings",
    "logs",
    "setup_logging",
    "AppException",
    "ValidationError",
    "IncompleteReportError",
    "ReportNotFoundError",
    "RateLimitError",
]
