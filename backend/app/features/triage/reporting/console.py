# backend/app/features/triage/reporting/console.py
"""Rich terminal UI for CLI output."""

from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..checklist import ChecklistProgress
from ..models import ActionPlan, DetectedAttack, OfficialResource, Priority, TriageResult
from ..summary import sort_by_severity

# Global console instance
console = Console()

SEVERITY_COLORS = {
    "Critical": "red",
    "High": "orange1",
    "Medium": "yellow",
    "Low": "green",
}

BUCKET_TITLES: Dict[Priority, str] = {
    Priority.NOW: "Do Right Now",
    Priority.TODAY: "Do Today",
    Priority.WEEK: "Do This Week",
}
BUCKET_COLORS: Dict[Priority, str] = {
    Priority.NOW: "red",
    Priority.TODAY: "yellow",
    Priority.WEEK: "green",
}


def _severity(value: str) -> str:
    color = SEVERITY_COLORS.get(value, "white")
    return f"[{color}]{value}[/{color}]"


def show_summary(result: TriageResult) -> None:
    """Show the threat-level banner with per-severity counts."""
    summary = result.summary
    color = SEVERITY_COLORS.get(summary.highest_severity.value, "white")

    counts = "  ".join(
        f"[{SEVERITY_COLORS[sev]}]{sev}: {count}[/{SEVERITY_COLORS[sev]}]"
        for sev, count in summary.severity_counts.items()
        if count
    )
    plural = "s" if summary.total_threats != 1 else ""

    content = (
        f"{summary.message}\n\n"
        f"{summary.total_threats} threat{plural} identified   {counts}\n\n"
        f"Report ID: {result.report_id[:8]}"
    )

    console.print()
    console.print(
        Panel(
            content,
            border_style=color,
            title=f"[bold {color}]{summary.headline}[/bold {color}]",
            title_align="left",
        )
    )

    if summary.emergency:
        notice = summary.emergency
        console.print(
            Panel(
                f"{notice.message}\n\n"
                f"[bold]Call {notice.helpline.url.replace('tel:', '')} now[/bold]"
                f"   {notice.portal.url}",
                border_style="red",
                title=f"[bold red]{notice.title}[/bold red]",
                title_align="left",
            )
        )


def show_attack_table(attacks: Sequence[DetectedAttack]) -> None:
    """Display detected attacks, most severe first."""
    table = Table(
        title="Detected Threats",
        show_header=True,
        header_style="bold cyan",
        title_style="bold cyan",
    )
    table.add_column("#", justify="right", width=3)
    table.add_column("Threat", style="bold white", width=30)
    table.add_column("Severity", justify="center", width=10)
    table.add_column("Report To")

    for i, attack in enumerate(sort_by_severity(attacks), 1):
        table.add_row(
            str(i),
            attack.name,
            _severity(attack.severity.value),
            ", ".join(contact.name for contact in attack.report_to),
        )

    console.print()
    console.print(table)


def show_attack_details(attacks: Sequence[DetectedAttack]) -> None:
    """Show description, attacker reach and steps for each threat."""
    for i, attack in enumerate(sort_by_severity(attacks), 1):
        console.print()
        console.print(f"[bold]{i}. {attack.name}[/bold]  {_severity(attack.severity.value)}")
        console.print(f"   {attack.description}")
        console.print(f"   [bold]What the attacker can access:[/bold] {attack.attacker_access}")
        for n, action in enumerate(attack.actions, 1):
            console.print(f"   {n}. {action}")
        for contact in attack.report_to:
            console.print(f"   [cyan]→ {contact.name}: {contact.url}[/cyan]")


def show_action_plan(plan: ActionPlan, progress: Optional[ChecklistProgress] = None) -> None:
    """Print the checklist grouped by priority. Empty buckets are skipped."""
    done = progress.total_completed if progress else 0
    console.print()
    console.print(f"[bold cyan]Your Action Plan[/bold cyan]  [dim]{done}/{plan.total} completed[/dim]")

    for priority in Priority:
        items = plan.bucket(priority)
        if not items:
            continue
        color = BUCKET_COLORS[priority]
        count = progress.by_bucket()[priority.value] if progress else f"0/{len(items)}"
        console.print()
        console.print(f"[bold {color}]{BUCKET_TITLES[priority].upper()}[/bold {color}]  [dim]{count}[/dim]")
        for item in items:
            if progress and progress.is_checked(item.id):
                console.print(f"  [dim]\\[x] [strike]{item.text}[/strike][/dim]")
            else:
                console.print(f"  [ ] {item.text}  [dim]({item.id})[/dim]")


def show_resources(resources: List[OfficialResource]) -> None:
    """Display official reporting resources."""
    table = Table(title="Official Resources", show_header=True, header_style="bold cyan")
    table.add_column("Resource", style="bold white")
    table.add_column("Type", justify="center", width=10)
    table.add_column("Link", style="cyan")

    for resource in resources:
        table.add_row(
            f"{resource.title}\n[dim]{resource.description}[/dim]",
            resource.tag,
            resource.url,
        )

    console.print()
    console.print(table)


def show_error(message: str) -> None:
    """Display an error message without stack trace."""
    console.print(f"\n[bold red]\\[ERROR][/bold red] {message}\n")
