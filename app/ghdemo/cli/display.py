"""Rich display functions for hydration and cleanup reports."""

from rich.markup import escape
from rich.table import Table

from ghdemo.models.content import ContentType
from ghdemo.models.summary import CleanupSummary, HydrationReport
from ghdemo.utils.formatting import console, err_console

_TYPE_NAMES = {
    ContentType.ISSUE: "Issues",
    ContentType.DISCUSSION: "Discussions",
    ContentType.PULL_REQUEST: "Pull Requests",
    ContentType.LABEL: "Labels",
}


def create_hydration_table(report: HydrationReport, dry_run: bool = False) -> Table:
    """Create a table with one row per hydration section.

    Args:
        report: Hydration report to display.
        dry_run: Whether this was a dry-run (changes table title).

    Returns:
        Rich Table with Section, Total, Created and Failed columns.
    """
    title = "Hydration Summary (Dry Run)" if dry_run else "Hydration Summary"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Section", no_wrap=True)
    table.add_column("Total", justify="right")
    table.add_column("Created", justify="right")
    table.add_column("Failed", justify="right")

    for summary in report.sections:
        failed = f"[error]{summary.failed}[/error]" if summary.failed else "[muted]0[/muted]"
        table.add_row(
            summary.name,
            str(summary.total),
            f"[created]{summary.succeeded}[/created]",
            failed,
        )
    return table


def create_cleanup_table(summary: CleanupSummary, dry_run: bool = False) -> Table:
    """Create a table of deleted and preserved counts per content type."""
    title = "Cleanup Summary (Dry Run)" if dry_run else "Cleanup Summary"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Type", no_wrap=True)
    table.add_column("Deleted", justify="right")
    table.add_column("Preserved", justify="right")

    for content_type, name in _TYPE_NAMES.items():
        deleted = summary.deleted.get(content_type, 0)
        preserved = summary.preserved.get(content_type, 0)
        if not deleted and not preserved:
            continue
        table.add_row(
            name,
            f"[deleted]{deleted}[/deleted]",
            f"[preserved]{preserved}[/preserved]",
        )
    return table


def print_failures(title: str, messages: list[str]) -> None:
    """Print failure messages to stderr, one bullet per message."""
    if not messages:
        return
    err_console.print(f"\n[warning]{title}:[/warning]")
    for message in messages:
        err_console.print(f"  [error]-[/error] {escape(message)}", highlight=False)


def print_hydration_report(report: HydrationReport, dry_run: bool = False) -> None:
    """Print the hydration table, any project board and all failures."""
    if report.sections:
        console.print(create_hydration_table(report, dry_run=dry_run))
    if report.project is not None:
        console.print(f"\nProject: [info]{report.project.title}[/info] {report.project.url}")
    for summary in report.sections:
        print_failures(f"{summary.name} failures", summary.errors)
    print_failures("Project board failures", report.project_errors)


def print_cleanup_report(summary: CleanupSummary, dry_run: bool = False) -> None:
    """Print the cleanup table and its failures."""
    if summary.total_deleted or summary.total_preserved:
        console.print(create_cleanup_table(summary, dry_run=dry_run))
    else:
        console.print("[muted]Nothing to clean up.[/muted]")
    print_failures("Cleanup failures", summary.errors)
