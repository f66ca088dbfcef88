"""Tests for the bloodcell config command."""

from pathlib import Path

from click.testing import CliRunner

from bloodcell.cli.main import cli
from bloodcell.core.config import AnalysisConfig
from bloodcell.io.serialization import load_config


class TestConfigCommand:
    def test_writes_defaults(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "thresholds.yaml"
        result = runner.invoke(cli, ["config", "-o", str(path)])
        assert result.exit_code == 0, result.output
        assert load_config(path) == AnalysisConfig()

    def test_refuses_overwrite(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "thresholds.yaml"
        path.write_text("keep: me\n")
        result = runner.invoke(cli, ["config", "-o", str(path)])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert path.read_text() == "keep: me\n"

    def test_force_overwrites(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "thresholds.yaml"
        path.write_text("keep: me\n")
        result = runner.invoke(cli, ["config", "-o", str(path), "--force"])
        assert result.exit_code == 0
        assert load_config(path) == AnalysisConfig()


class TestHelp:
    def test_help_lists_commands(self, runner: CliRunner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "analyze" in result.output
        assert "config" in result.output
