"""Scan command for a one-shot inventory of the watched directories.

This module provides the `classwatch scan` command, which runs a single
detector pass. With a fresh baseline every file found is reported as new,
so the output is the full list of tracked files.
"""

from pathlib import Path
from typing import Annotated

import typer

from classwatch.cli.display import create_report_table, report_to_json
from classwatch.cli.types import OutputFormat, build_detector, get_config
from classwatch.utils.formatting import console, print_info


def scan(
    ctx: typer.Context,
    roots: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Root directories to scan (default: roots from the config file).",
            show_default=False,
        ),
    ] = None,
    suffixes: Annotated[
        list[str] | None,
        typer.Option(
            "--suffix",
            "-s",
            help="Only track files with this suffix (repeatable), e.g. .class",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List every file currently present under the root directories.

    Examples:
        classwatch scan build/classes
        classwatch scan build/classes -s .class --format json
    """
    config = get_config(ctx)
    detector = build_detector(config, roots, suffixes)
    report = detector.scan()

    if output_format == OutputFormat.JSON:
        console.print_json(report_to_json(report))
        return

    if not report.added:
        print_info("No files found under the root directories.")
        return

    console.print(create_report_table(report, title="Tracked Files"))
    console.print(f"\n[muted]Found {len(report.added)} file(s)[/muted]")
