"""Unit tests for the config commands."""

from pathlib import Path

from classwatch.cli.main import app
from classwatch.core.config import load_watch_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigInit:
    """Tests for classwatch config init."""

    def test_writes_config(self, tmp_path: Path, class_dir: Path) -> None:
        """init writes roots and suffixes to the selected file."""
        config_file = tmp_path / "config.toml"

        result = runner.invoke(
            app,
            ["--config", str(config_file), "config", "init", str(class_dir), "-s", ".class"],
        )

        assert result.exit_code == 0
        config = load_watch_config(config_file)
        assert config.roots == [class_dir]
        assert config.suffixes == [".class"]

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """An existing file is kept unless --force is given."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('suffixes = [".class"]\n')

        result = runner.invoke(app, ["--config", str(config_file), "config", "init"])

        assert result.exit_code == 1
        assert load_watch_config(config_file).suffixes == [".class"]

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """--force replaces an existing file."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('suffixes = [".class"]\n')

        result = runner.invoke(
            app, ["--config", str(config_file), "config", "init", "--force"]
        )

        assert result.exit_code == 0
        assert load_watch_config(config_file).suffixes == []

    def test_invalid_suffix(self, tmp_path: Path) -> None:
        """Invalid suffixes are rejected without writing a file."""
        config_file = tmp_path / "config.toml"

        result = runner.invoke(
            app, ["--config", str(config_file), "config", "init", "-s", "class"]
        )

        assert result.exit_code == 1
        assert not config_file.exists()


class TestConfigShow:
    """Tests for classwatch config show."""

    def test_show_defaults_when_missing(self, tmp_path: Path) -> None:
        """A missing file shows defaults."""
        result = runner.invoke(
            app, ["--config", str(tmp_path / "none.toml"), "config", "show"]
        )

        assert result.exit_code == 0
        assert "interval_seconds" in result.stdout
        assert "(all files)" in result.stdout

    def test_show_invalid_config(self, tmp_path: Path) -> None:
        """An invalid file aborts with exit code 1."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("bogus = true\n")

        result = runner.invoke(app, ["--config", str(config_file), "config", "show"])

        assert result.exit_code == 1
