# backend/app/core/observability.py
"""Structured logging facade used across the application."""

import logging
import sys
from typing import Any, Dict, Optional

import structlog

from .config import settings


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """Configure structlog on top of the standard library root logger."""
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    if json_output is None:
        json_output = settings.LOG_JSON or settings.is_production

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer()
                if json_output
                else structlog.dev.ConsoleRenderer(colors=False),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class Logs:
    """Thin wrapper keeping log calls uniform: message, source, data."""

    def __init__(self, name: str = "cyberguard") -> None:
        self._logger = structlog.get_logger(name)

    def _emit(
        self,
        level: str,
        message: str,
        source: str,
        data: Optional[Dict[str, Any]] = None,
        exception: Optional[BaseException] = None,
    ) -> None:
        fields: Dict[str, Any] = {"source": source}
        if data:
            fields.update(data)
        if exception is not None:
            fields["error"] = str(exception)
            fields["error_type"] = type(exception).__name__
        getattr(self._logger, level)(message, **fields)

    def debug(self, message: str, source: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._emit("debug", message, source, data)

    def info(self, message: str, source: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._emit("info", message, source, data)

    def warning(self, message: str, source: str, data: Optional[Dict[str, Any]] = None) -> None:
        self._emit("warning", message, source, data)

    def error(
        self,
        message: str,
        source: str,
        data: Optional[Dict[str, Any]] = None,
        exception: Optional[BaseException] = None,
    ) -> None:
        self._emit("error", message, source, data, exception)

    def security(self, message: str, source: str, data: Optional[Dict[str, Any]] = None) -> None:
        """Security-relevant events (rate limiting, abuse) at warning level."""
        self._emit("warning", message, source, {"security": True, **(data or {})})


logs = Logs()
