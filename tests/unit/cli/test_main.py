"""Unit tests for the main CLI application."""

import logging

from classwatch import __version__
from classwatch.cli.main import app, configure_logging
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"classwatch version {__version__}" in result.stdout

    def test_help_lists_commands(self) -> None:
        """All commands are registered."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("scan", "watch", "config"):
            assert command in result.stdout


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_verbose_enables_debug(self) -> None:
        """Verbose mode sets the root logger to DEBUG."""
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_default_is_warning(self) -> None:
        """Without verbose only warnings and above are logged."""
        configure_logging(verbose=False)
        assert logging.getLogger().level == logging.WARNING
