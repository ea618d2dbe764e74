"""Configuration commands.

Provides commands to inspect and create the classwatch config file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from classwatch.cli.types import get_config
from classwatch.core.config import WatchConfig, WatchConfigError, save_watch_config
from classwatch.core.paths import get_config_path
from classwatch.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Inspect and create the configuration file.",
    no_args_is_help=True,
)


def _selected_path(ctx: typer.Context) -> Path:
    obj = ctx.find_root().obj or {}
    return obj.get("config_path") or get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration and the roots it resolves to."""
    config_path = _selected_path(ctx)
    config = get_config(ctx)

    if not config_path.exists():
        print_warning(f"No config file at {config_path}; showing defaults.")

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Setting", style="muted")
    table.add_column("Value")

    table.add_row("file", str(config_path))
    table.add_row("classpath", config.classpath or "-")
    table.add_row("suffixes", ", ".join(config.suffixes) or "(all files)")
    table.add_row("interval_seconds", f"{config.interval_seconds:g}")

    directories = config.root_provider().root_directories()
    if directories:
        for index, directory in enumerate(directories):
            exists = "" if directory.is_dir() else " [warning](missing)[/warning]"
            table.add_row("roots" if index == 0 else "", f"{directory}{exists}")
    else:
        table.add_row("roots", "-")

    console.print(table)


@app.command()
def init(
    ctx: typer.Context,
    roots: Annotated[
        list[Path] | None,
        typer.Argument(help="Root directories to watch.", show_default=False),
    ] = None,
    suffixes: Annotated[
        list[str] | None,
        typer.Option("--suffix", "-s", help="Tracked file suffix (repeatable)."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a new config file."""
    config_path = _selected_path(ctx)

    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        config = WatchConfig(
            roots=[root.absolute() for root in roots or []],
            suffixes=suffixes or [],
        )
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        saved = save_watch_config(config, config_path)
    except WatchConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
