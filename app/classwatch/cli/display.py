"""Shared Rich display functions for scan reports.

Provides table builders and JSON serialization used by the scan and
watch commands.
"""

import json
from pathlib import Path

from rich.table import Table

from classwatch.detection.models import ScanReport

# Change kind -> (label, style)
_KINDS: tuple[tuple[str, str, str], ...] = (
    ("added", "+added", "added"),
    ("modified", "~modified", "changed"),
    ("removed", "-removed", "removed"),
)


def create_report_table(report: ScanReport, title: str = "Changed Files") -> Table:
    """Create a Rich table listing every path in a scan report.

    Rows are grouped by change kind (added, modified, removed) and sorted
    by path within each group.

    Args:
        report: The report to display.
        title: Table title.

    Returns:
        Rich Table configured for report display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Change", width=10, justify="center")
    table.add_column("Path", no_wrap=True)

    for attr, label, style in _KINDS:
        for path in sorted(getattr(report, attr)):
            table.add_row(f"[{style}]{label}[/{style}]", f"[{style}]{path}[/{style}]")

    return table


def report_to_dict(report: ScanReport) -> dict[str, object]:
    """Convert a scan report to a JSON-serializable dictionary."""
    return {
        "added": _sorted_strings(report.added),
        "modified": _sorted_strings(report.modified),
        "removed": _sorted_strings(report.removed),
        "files_were_removed": report.files_were_removed,
        "tracked": report.tracked,
    }


def report_to_json(report: ScanReport) -> str:
    """Serialize a scan report as a compact JSON document."""
    return json.dumps(report_to_dict(report))


def format_summary(report: ScanReport) -> str:
    """One-line summary of a report with Rich markup."""
    return (
        f"[added]{len(report.added)} added[/added], "
        f"[changed]{len(report.modified)} modified[/changed], "
        f"[removed]{len(report.removed)} removed[/removed] "
        f"[muted]({report.tracked} tracked)[/muted]"
    )


def _sorted_strings(paths: frozenset[Path]) -> list[str]:
    return sorted(str(p) for p in paths)
