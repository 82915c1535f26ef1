"""
Console presentation of a camp summary using rich.

This is a presentation collaborator: it only reads a Summary, it never
evaluates readings itself.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from camp_vitals.domain.models import Status, Summary

STATUS_STYLES = {
    Status.LOW: "bold yellow",
    Status.NORMAL: "bold green",
    Status.BORDERLINE: "bold dark_orange",
    Status.HIGH: "bold red",
}

ATTENTION_MESSAGE = (
    "Some of your readings are outside the usual reference ranges. "
    "Please consult with a doctor and share this information for proper medical advice."
)
ALL_CLEAR_MESSAGE = (
    "Your key readings appear within the usual reference ranges. "
    "This is only an approximate guide – regular check-ups with your doctor are still important."
)


def advisory_message(summary: Summary) -> str:
    return ATTENTION_MESSAGE if summary.has_issues else ALL_CLEAR_MESSAGE


def build_summary_table(summary: Summary, title: str = "Readings") -> Table:
    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Status")
    table.add_column("Note")

    for metric in summary.metrics:
        value = f"{metric.value} {metric.unit}".strip()
        badge = Text(metric.status_text, style=STATUS_STYLES[metric.status])
        table.add_row(metric.label, value, badge, metric.note)

    return table


def render_summary(
    summary: Summary, console: Console | None = None, title: str = "Booking Done"
) -> None:
    """Print the readings table (if any) followed by the advisory panel."""
    console = console or Console()

    if summary.metrics:
        console.print(build_summary_table(summary, title=title))
    else:
        console.print(f"[bold]{title}[/bold]")

    if summary.has_issues:
        console.print(Panel(advisory_message(summary), title="⚠️  Attention", style="red"))
    else:
        console.print(Panel(advisory_message(summary), title="✅ Within range", style="green"))
