# backend/app/features/triage/reporting/html.py
"""HTML incident report generator using Jinja2 templates."""

import webbrowser
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from backend.app.core import logs
from backend.app.core.config import settings
from ..contacts import OFFICIAL_RESOURCES
from ..models import Priority, TriageResult
from ..summary import sort_by_severity
from ..vocabulary import PLATFORMS

# backend/templates/
TEMPLATE_DIR = Path(__file__).parent.parent.parent.parent.parent / "templates"

BUCKET_TITLES = {
    Priority.NOW: "Do Right Now",
    Priority.TODAY: "Do Today",
    Priority.WEEK: "Do This Week",
}


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html"]),
    )


def render_html_report(result: TriageResult) -> str:
    """Render the incident report for a triage result as an HTML string."""
    template = _environment().get_template("incident_report.html")

    answers = result.answers
    sections = [
        {
            "priority": priority.value,
            "title": BUCKET_TITLES[priority],
            "items": result.plan.bucket(priority),
        }
        for priority in Priority
        if result.plan.bucket(priority)
    ]

    return template.render(
        # Metadata
        app_name=settings.APP_NAME,
        app_version=settings.APP_VERSION,
        report_id=result.report_id,
        timestamp=result.timestamp,

        # Incident details
        answers=answers,
        platform_label=PLATFORMS.get(answers.platform, answers.platform or "Not specified"),

        # Banner
        summary=result.summary,
        emergency=result.summary.emergency,

        # Threats, most severe first
        attacks=sort_by_severity(result.attacks),

        # Action plan
        sections=sections,
        total_items=result.plan.total,

        resources=OFFICIAL_RESOURCES,
    )


def generate_html_report(
    result: TriageResult,
    output_path: str = "incident_report.html",
) -> str:
    """
    Generate HTML report from a triage result.

    Args:
        result: TriageResult to render
        output_path: Path to save the HTML report

    Returns:
        Absolute path to the generated report file
    """
    logs.info("Generating HTML report", "reporting", {"output": output_path})

    html = render_html_report(result)

    output_file = Path(output_path).absolute()
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(html)

    logs.info("Report generated", "reporting", {"path": str(output_file)})
    return str(output_file)


def open_report(path: str) -> None:
    """
    Open the HTML report in the default web browser.

    Args:
        path: Path to the HTML report file
    """
    file_url = f"file://{Path(path).absolute()}"
    logs.debug("Opening report in browser", "reporting", {"url": file_url})
    webbrowser.open(file_url)
