"""CLI commands for classwatch.

This package contains all subcommand implementations.
"""

from classwatch.cli.commands import config, scan, watch

__all__ = ["config", "scan", "watch"]
