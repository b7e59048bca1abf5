# backend/app/features/triage/reporting/__init__.py
"""Reporting modules for triage results."""

from .html import generate_html_report, open_report, render_html_report
from .console import (
    console,
    show_action_plan,
    show_attack_details,
    show_attack_table,
    show_error,
    show_resources,
    show_summary,
)

__all__ = [
    "generate_html_report",
    "render_html_report",
    "open_report",
    "console",
    "show_action_plan",
    "show_attack_details",
    "show_attack_table",
    "show_error",
    "show_resources",
    "show_summary",
]
