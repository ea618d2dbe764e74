"""CLI package for classwatch.

This package contains the Typer application and all subcommands.
"""

from classwatch.cli.main import app

__all__ = ["app"]
