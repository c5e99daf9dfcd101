"""Rich display functions for filter run reports.

Provides the per-entry table and the one-line summary printed after a run.
"""

from rich.markup import escape
from rich.table import Table

from srdfilter.filtering.models import EntryAction, FilterReport
from srdfilter.utils.formatting import console

_ACTION_STYLES: dict[EntryAction, str] = {
    EntryAction.FILTERED: "kept",
    EntryAction.COPIED: "muted",
    EntryAction.FALLBACK: "fallback",
    EntryAction.SKIPPED: "removed",
}


def create_report_table(report: FilterReport) -> Table:
    """Create a Rich table listing every visited entry.

    Builds a table with Action, Path and Removed columns. Skipped
    directories get a trailing slash.

    Args:
        report: Report of a completed run.

    Returns:
        Rich Table configured for report display.
    """
    table = Table(
        title="Filtered Entries",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Action", width=9)
    table.add_column("Path", no_wrap=True)
    table.add_column("Removed", justify="right", width=8)

    for result in report.results:
        style = _ACTION_STYLES[result.action]
        path = f"{result.path}/" if result.is_dir else result.path
        removed = str(result.removed_entries) if result.action == EntryAction.FILTERED else ""
        table.add_row(
            f"[{style}]{result.action.value}[/{style}]",
            escape(path),
            f"[muted]{removed}[/muted]",
        )

    return table


def print_report_summary(report: FilterReport) -> None:
    """Print a summary of a filter run.

    Shows counts per action and the number of removed JSON entries. Actions
    with a zero count are left out.

    Args:
        report: Report of a completed run.
    """
    parts: list[str] = []
    if report.filtered_count:
        parts.append(f"[kept]{report.filtered_count} filtered[/kept]")
    if report.copied_count:
        parts.append(f"[muted]{report.copied_count} copied[/muted]")
    if report.fallback_count:
        parts.append(f"[fallback]{report.fallback_count} copied verbatim[/fallback]")
    if report.skipped_count:
        parts.append(f"[removed]{report.skipped_count} skipped[/removed]")

    summary = ", ".join(parts) if parts else "no entries"
    console.print(f"Summary: {summary}; {report.removed_entries} JSON entries removed")
