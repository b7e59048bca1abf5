# backend/app/cli.py
"""Typer CLI application for CyberGuard."""

import json
from pathlib import Path
from typing import List, Optional, Sequence

import pydantic
import typer

from backend.app.core import AppException, ValidationError, settings, setup_logging
from backend.app.features.triage.checklist import ChecklistProgress
from backend.app.features.triage.contacts import OFFICIAL_RESOURCES
from backend.app.features.triage.models import AnswerSet, Severity, TriageResult
from backend.app.features.triage.reporting import (
    console,
    generate_html_report,
    open_report,
    show_action_plan,
    show_attack_details,
    show_attack_table,
    show_error,
    show_resources,
    show_summary,
)
from backend.app.features.triage.schemas import ReportSubmission
from backend.app.features.triage.services import TriageService
from backend.app.features.triage import vocabulary

app = typer.Typer(
    name="cyberguard",
    help="CyberGuard - Work out what kind of cyber attack hit you and what to do next",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Log level for diagnostic output on stderr",
    ),
) -> None:
    setup_logging(level=log_level)


def load_answers(path: Path) -> AnswerSet:
    """
    Read questionnaire answers from a JSON file.

    Raises:
        ValidationError: If the file is unreadable or not a valid submission
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValidationError(f"Cannot read {path}: {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"{path} is not valid JSON: {e.msg} (line {e.lineno})") from e

    try:
        return ReportSubmission.model_validate(data).to_answers()
    except pydantic.ValidationError as e:
        raise ValidationError(
            f"{path} is not a valid answers file",
            details={"errors": e.errors(include_url=False)},
        ) from e


def _render(
    result: TriageResult,
    details: bool,
    done: Optional[List[str]],
) -> None:
    show_summary(result)
    show_attack_table(result.attacks)
    if details:
        show_attack_details(result.attacks)

    progress = ChecklistProgress(result.plan)
    for item_id in done or []:
        progress.check(item_id)
    show_action_plan(result.plan, progress)


@app.command()
def analyze(
    answers_file: Path = typer.Argument(
        ...,
        help="JSON file with questionnaire answers (camelCase or snake_case keys)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write an HTML incident report to this path",
    ),
    details: bool = typer.Option(
        False,
        "--details",
        "-d",
        help="Show description, attacker reach and steps for each threat",
    ),
    done: Optional[List[str]] = typer.Option(
        None,
        "--done",
        help="Mark an action item id as completed (repeatable)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject incomplete answers or labels outside the questionnaire",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the full result as JSON instead of tables",
    ),
    no_open: bool = typer.Option(
        False,
        "--no-open",
        help="Don't automatically open the HTML report in browser",
    ),
    fail_on_critical: bool = typer.Option(
        False,
        "--fail-on-critical",
        help="Exit with code 1 when a Critical threat is detected",
    ),
) -> None:
    """
    Analyze an incident described in an answers file.

    Example usage:

        cyberguard analyze answers.json

        cyberguard analyze answers.json --details -o report.html

        cyberguard analyze answers.json --done now-bank --done today-evidence
    """
    try:
        answers = load_answers(answers_file)
        result = TriageService().analyze(answers, strict=strict)

        if json_output:
            typer.echo(result.model_dump_json(indent=2))
        else:
            _render(result, details, done)

        if output:
            report_path = generate_html_report(result, output)
            if not json_output:
                console.print()
                console.print(f"[dim]Report saved to: {report_path}[/dim]")
            if not no_open:
                open_report(report_path)

        if fail_on_critical and result.summary.highest_severity == Severity.CRITICAL:
            raise typer.Exit(1)

    except typer.Exit:
        raise
    except AppException as e:
        show_error(e.message)
        raise typer.Exit(1)


def _prompt_number(text: str, low: int, high: int) -> int:
    while True:
        value = typer.prompt(text, type=int)
        if low <= value <= high:
            return value
        console.print(f"[red]Choose a number between {low} and {high}[/red]")


def _choose_one(title: str, options: Sequence[str], labels: Optional[Sequence[str]] = None) -> str:
    """Numbered single choice prompt; returns the chosen option value."""
    shown = labels or options
    console.print()
    console.print(f"[bold]{title}[/bold]")
    for i, label in enumerate(shown, 1):
        console.print(f"  {i:>2}. {label}")
    choice = _prompt_number("Choose", 1, len(options))
    return options[choice - 1]


def _choose_many(title: str, options: Sequence[str]) -> List[str]:
    """Numbered multi-choice prompt; blank input selects nothing."""
    console.print()
    console.print(f"[bold]{title}[/bold] [dim](comma-separated numbers, blank for none)[/dim]")
    for i, label in enumerate(options, 1):
        console.print(f"  {i:>2}. {label}")

    while True:
        raw = typer.prompt("Select", default="", show_default=False)
        try:
            picks = [int(part) for part in raw.replace(" ", "").split(",") if part]
        except ValueError:
            console.print("[red]Enter numbers separated by commas[/red]")
            continue
        if all(1 <= p <= len(options) for p in picks):
            return [options[p - 1] for p in dict.fromkeys(picks)]
        console.print(f"[red]Choose numbers between 1 and {len(options)}[/red]")


def _choose_concern() -> int:
    console.print()
    console.print("[bold]How concerned are you?[/bold]")
    for level, label in vocabulary.CONCERN_LEVELS.items():
        console.print(f"  {level:>2}. {label}")
    return _prompt_number("Choose", min(vocabulary.CONCERN_LEVELS), max(vocabulary.CONCERN_LEVELS))


@app.command()
def questionnaire(
    save: Optional[Path] = typer.Option(
        None,
        "--save",
        help="Save the answers as JSON for later `analyze` runs",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write an HTML incident report to this path",
    ),
    no_open: bool = typer.Option(
        False,
        "--no-open",
        help="Don't automatically open the HTML report in browser",
    ),
) -> None:
    """Answer the incident questionnaire step by step, then see the analysis."""
    steps = {step.key: step for step in vocabulary.STEPS}

    def header(key: str) -> None:
        step = steps[key]
        console.print()
        console.print(f"[bold cyan]Step {list(steps).index(key) + 1}: {step.title}[/bold cyan]")
        console.print(f"[dim]{step.description}[/dim]")

    header("platform")
    codes = list(vocabulary.PLATFORMS)
    platform = _choose_one("Platform", codes, list(vocabulary.PLATFORMS.values()))

    header("activity")
    activities: List[str] = []
    while not activities:
        activities = _choose_many("Suspicious activity", vocabulary.SUSPICIOUS_ACTIVITIES)
        if not activities:
            console.print("[yellow]Select at least one activity[/yellow]")

    header("permissions")
    permissions = _choose_many("Device permissions", vocabulary.DEVICE_PERMISSIONS)
    personal_info = _choose_many("Personal info shared", vocabulary.PERSONAL_INFO)
    account_access = _choose_many("Account access given", vocabulary.ACCOUNT_ACCESS)

    header("impact")
    impacts: List[str] = []
    while not impacts:
        impacts = _choose_many("Impact", vocabulary.IMPACTS)
        if not impacts:
            console.print("[yellow]Select at least one impact[/yellow]")

    header("timeline")
    answers = AnswerSet(
        platform=platform,
        suspicious_activities=activities,
        device_permissions=permissions,
        personal_info_shared=personal_info,
        account_access_given=account_access,
        impacts=impacts,
        when_happened=_choose_one("When did it happen?", vocabulary.WHEN_OPTIONS),
        clicked_suspicious_link=_choose_one(
            "Did you click a suspicious link?", vocabulary.YES_NO_NOT_SURE
        ),
        downloaded_file=_choose_one("Did you download a file?", vocabulary.YES_NO_NOT_SURE),
        shared_otp=_choose_one("Did you share an OTP?", vocabulary.YES_NO),
        allowed_remote_access=_choose_one(
            "Did you allow remote access to your device?", vocabulary.YES_NO
        ),
        concern_level=_choose_concern(),
    )

    if save:
        save.write_text(answers.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        console.print(f"[dim]Answers saved to: {save}[/dim]")

    result = TriageService().analyze(answers, strict=True)
    _render(result, details=True, done=None)

    if output:
        report_path = generate_html_report(result, output)
        console.print()
        console.print(f"[dim]Report saved to: {report_path}[/dim]")
        if not no_open:
            open_report(report_path)


@app.command()
def resources() -> None:
    """List official portals and helplines for reporting cyber crime."""
    show_resources(OFFICIAL_RESOURCES)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run(
        "backend.app.main:app",
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"CyberGuard v{settings.APP_VERSION}")


@app.command()
def info() -> None:
    """Show configuration information."""
    console.print()
    console.print("[bold]Configuration[/bold]")
    console.print()
    console.print(f"  App Name:      {settings.APP_NAME}")
    console.print(f"  Version:       {settings.APP_VERSION}")
    console.print(f"  Environment:   {settings.ENVIRONMENT}")
    console.print(f"  API Prefix:    {settings.API_PREFIX}")
    console.print(f"  Report TTL:    {settings.REPORT_TTL_SECONDS}s")
    console.print()


if __name__ == "__main__":
    app()
