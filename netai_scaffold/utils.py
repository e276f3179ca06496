"""Shared console helpers for netai-scaffold.

All user-facing output goes through the single Rich ``console`` defined
here, so tests can capture it and the CLI stays consistent.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from netai_scaffold.scaffolder.models import EntryStatus, ScaffoldReport

console = Console()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.0042) -> "4ms"
        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0ms"
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------

STATUS_STYLES: dict[EntryStatus, str] = {
    EntryStatus.CREATED: "green",
    EntryStatus.ALREADY_PRESENT: "dim",
    EntryStatus.OVERWRITTEN: "yellow",
    EntryStatus.FAILED: "bold red",
    EntryStatus.SKIPPED: "magenta",
}


def print_header(title: str) -> None:
    """Print a full-width rule with *title*."""
    console.print()
    console.print(Rule(f"[bold bright_green] {title} [/bold bright_green]", style="bright_green"))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_report_table(report: ScaffoldReport) -> None:
    """Print one row per manifest entry with its outcome."""
    table = Table(title=f"Scaffold results: {report.root}", header_style="bold cyan")
    table.add_column("Status", no_wrap=True)
    table.add_column("Kind", style="dim", no_wrap=True)
    table.add_column("Path")
    table.add_column("Error", style="red")

    for result in report.results:
        style = STATUS_STYLES[result.status]
        table.add_row(
            f"[{style}]{result.status.value}[/{style}]",
            result.entry.kind.value,
            escape(result.path),
            escape(result.error.message) if result.error else "",
        )

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
