"""Watch command for polling the watched directories for changes.

This module provides the `classwatch watch` command. It takes a baseline
pass, then repeatedly sleeps and rescans, printing every pass that saw
files added, modified or removed.
"""

import logging
import time
from pathlib import Path
from typing import Annotated

import typer

from classwatch.cli.display import create_report_table, format_summary, report_to_json
from classwatch.cli.types import OutputFormat, build_detector, get_config
from classwatch.detection.models import ScanReport
from classwatch.utils.formatting import console, print_info

logger = logging.getLogger(__name__)


def watch(
    ctx: typer.Context,
    roots: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Root directories to watch (default: roots from the config file).",
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
    interval: Annotated[
        float | None,
        typer.Option(
            "--interval",
            "-i",
            min=0.0,
            help="Seconds between polls (default: interval_seconds from the config file).",
        ),
    ] = None,
    iterations: Annotated[
        int | None,
        typer.Option(
            "--iterations",
            "-n",
            min=1,
            help="Stop after this many polls (default: run until interrupted).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format. JSON prints one document per changed pass.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Poll the root directories and report changes as they happen.

    The first pass only establishes the baseline. Each later pass prints
    the files added, modified or removed since the pass before it.

    Examples:
        classwatch watch build/classes
        classwatch watch build/classes -i 0.5 -n 10 --format json
    """
    config = get_config(ctx)
    detector = build_detector(config, roots, suffixes)
    delay = interval if interval is not None else config.interval_seconds

    baseline = detector.scan()
    if output_format == OutputFormat.TABLE:
        print_info(f"Tracking {baseline.tracked} file(s). Polling every {delay:g}s.")

    polls = 0
    try:
        while iterations is None or polls < iterations:
            time.sleep(delay)
            report = detector.scan()
            polls += 1
            if report.is_empty:
                continue
            _print_report(report, output_format)
    except KeyboardInterrupt:
        logger.debug("Watch interrupted after %d poll(s)", polls)

    if output_format == OutputFormat.TABLE:
        print_info(f"Stopped after {polls} poll(s).")


def _print_report(report: ScanReport, output_format: OutputFormat) -> None:
    """Display one non-empty pass."""
    if output_format == OutputFormat.JSON:
        console.print_json(report_to_json(report))
        return
    console.print(create_report_table(report))
    console.print(format_summary(report))
