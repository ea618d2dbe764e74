"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from classwatch.core.config import WatchConfig, WatchConfigError, load_watch_config_or_default
from classwatch.detection.detector import FileChangeDetector
from classwatch.roots.provider import ClasspathRootProvider
from classwatch.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for scan reports."""

    TABLE = "table"
    JSON = "json"


def get_config(ctx: typer.Context) -> WatchConfig:
    """Load the configuration selected by the global ``--config`` option.

    A missing config file yields defaults; an invalid one aborts the command.

    Raises:
        typer.Exit: With code 1 if the config file cannot be used.
    """
    obj = ctx.find_root().obj or {}
    config_path: Path | None = obj.get("config_path")
    try:
        return load_watch_config_or_default(config_path)
    except WatchConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def build_detector(
    config: WatchConfig,
    roots: list[Path] | None,
    suffixes: list[str] | None,
) -> FileChangeDetector:
    """Create a detector from configuration and command-line overrides.

    Command-line roots replace the configured roots and classpath;
    command-line suffixes replace the configured suffixes.

    Args:
        config: Loaded watch configuration.
        roots: Root directories given on the command line, if any.
        suffixes: Suffixes given on the command line, if any.

    Returns:
        A fresh detector with an empty baseline.

    Raises:
        typer.Exit: With code 1 if no root directory is configured anywhere.
    """
    provider = ClasspathRootProvider("", roots) if roots else config.root_provider()
    if not provider.root_directories():
        print_error("No root directories given. Pass ROOTS or set 'roots' in the config file.")
        raise typer.Exit(code=1)

    suffix_filter = tuple(suffixes) if suffixes else config.suffix_filter
    return FileChangeDetector(provider, suffixes=suffix_filter)
