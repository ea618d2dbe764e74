"""Unit tests for the scan command."""

import json
from pathlib import Path

from classwatch.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def _invoke(tmp_path: Path, *args: str):
    """Run the CLI with an isolated (missing) config file."""
    return runner.invoke(app, ["--config", str(tmp_path / "none.toml"), *args])


class TestScan:
    """Tests for classwatch scan."""

    def test_scan_json_lists_all_files(self, tmp_path: Path, class_dir: Path) -> None:
        """Every file under the root is reported as added."""
        (class_dir / "pkg").mkdir()
        (class_dir / "pkg" / "A.class").write_text("")
        (class_dir / "B.class").write_text("")

        result = _invoke(tmp_path, "scan", str(class_dir), "--format", "json")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["added"] == sorted(
            [str(class_dir / "B.class"), str(class_dir / "pkg" / "A.class")]
        )
        assert data["removed"] == []
        assert data["files_were_removed"] is False
        assert data["tracked"] == 2

    def test_scan_suffix_filter(self, tmp_path: Path, class_dir: Path) -> None:
        """--suffix limits the tracked files."""
        (class_dir / "A.class").write_text("")
        (class_dir / "A.java").write_text("")

        result = _invoke(tmp_path, "scan", str(class_dir), "-s", ".class", "-f", "json")

        assert result.exit_code == 0
        assert json.loads(result.stdout)["added"] == [str(class_dir / "A.class")]

    def test_scan_table_summary(self, tmp_path: Path, class_dir: Path) -> None:
        """Table output ends with a file count."""
        (class_dir / "A.class").write_text("")

        result = _invoke(tmp_path, "scan", str(class_dir))

        assert result.exit_code == 0
        assert "Tracked Files" in result.stdout
        assert "Found 1 file(s)" in result.stdout

    def test_scan_empty_root(self, tmp_path: Path, class_dir: Path) -> None:
        """An empty root prints an informational message."""
        result = _invoke(tmp_path, "scan", str(class_dir))

        assert result.exit_code == 0
        assert "No files found" in result.stdout

    def test_scan_missing_root_is_not_an_error(self, tmp_path: Path) -> None:
        """A root that does not exist is scanned as empty."""
        result = _invoke(tmp_path, "scan", str(tmp_path / "gone"))

        assert result.exit_code == 0
        assert "No files found" in result.stdout

    def test_scan_without_roots_fails(self, tmp_path: Path) -> None:
        """With no roots on the command line or in the config, scan exits 1."""
        result = _invoke(tmp_path, "scan")

        assert result.exit_code == 1

    def test_scan_uses_configured_roots(self, tmp_path: Path, class_dir: Path) -> None:
        """Roots from the config file are used when none are given."""
        (class_dir / "A.class").write_text("")
        config_file = tmp_path / "config.toml"
        config_file.write_text(f"roots = [{json.dumps(str(class_dir))}]\n")

        result = runner.invoke(app, ["--config", str(config_file), "scan", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["added"] == [str(class_dir / "A.class")]

    def test_scan_invalid_config(self, tmp_path: Path, class_dir: Path) -> None:
        """An invalid config file aborts with exit code 1."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("interval_seconds = 0\n")

        result = runner.invoke(app, ["--config", str(config_file), "scan", str(class_dir)])

        assert result.exit_code == 1
