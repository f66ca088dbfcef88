"""Tests for the bloodcell analyze command."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
from click.testing import CliRunner

from bloodcell.cli.main import cli


class TestAnalyzeTable:
    def test_summary_printed(self, runner: CliRunner, hsv_path: Path):
        result = runner.invoke(cli, ["analyze", str(hsv_path)])
        assert result.exit_code == 0, result.output
        assert "Estimated red cells: 1" in result.output
        assert "Estimated white cells: 1" in result.output
        assert "Total clusters: 2" in result.output
        assert "Red Cells" in result.output
        assert "50.0%" in result.output

    def test_rgb_input(self, runner: CliRunner, rgb_path: Path):
        result = runner.invoke(cli, ["analyze", str(rgb_path), "--rgb"])
        assert result.exit_code == 0, result.output
        assert "Total clusters: 2" in result.output


class TestAnalyzeJson:
    def test_counts(self, runner: CliRunner, hsv_path: Path):
        result = runner.invoke(cli, ["analyze", str(hsv_path), "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["red_count"] == 1
        assert data["white_count"] == 1
        assert data["total_clusters"] == 2
        assert data["average_red_size"] == 25.0
        assert [c["type"] for c in data["clusters"]] == ["white", "red"]
        assert data["clusters"][1]["x"] == 8

    def test_prior_average(self, runner: CliRunner, tmp_path: Path, hsv_array_from_blocks):
        from bloodcell.core.models import ClassLabel

        path = tmp_path / "cluster.npy"
        np.save(path, hsv_array_from_blocks(
            12, 12, [(0, 0, 10, 10, ClassLabel.RED_CANDIDATE)],
        ))
        result = runner.invoke(
            cli, ["analyze", str(path), "--prior-average", "25", "--format", "json"],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["clusters"][0]["estimate"] == 4
        assert data["red_count"] == 4

    def test_config_file(self, runner: CliRunner, tmp_path: Path, hsv_path: Path):
        config = tmp_path / "strict.yaml"
        config.write_text("clusters:\n  noise_cutoff: 26\n  red_cluster_min_size: 60\n")
        result = runner.invoke(
            cli, ["analyze", str(hsv_path), "-c", str(config), "--format", "json"],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        # The 25 px red block falls below the raised noise cutoff
        assert data["red_count"] == 0
        assert data["white_count"] == 1


class TestAnalyzeErrors:
    def test_missing_file(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(cli, ["analyze", str(tmp_path / "nope.npy")])
        assert result.exit_code != 0

    def test_bad_shape(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "flat.npy"
        np.save(path, np.zeros((4, 4)))
        result = runner.invoke(cli, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "Invalid grid dimensions" in result.output

    def test_invalid_config(self, runner: CliRunner, tmp_path: Path, hsv_path: Path):
        config = tmp_path / "bad.yaml"
        config.write_text("clusters:\n  noise_cutoff: 0\n")
        result = runner.invoke(cli, ["analyze", str(hsv_path), "-c", str(config)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unreadable_config(self, runner: CliRunner, tmp_path: Path, hsv_path: Path):
        config = tmp_path / "binary.yaml"
        config.write_bytes(b"\xff\xfe\x00bad")
        result = runner.invoke(cli, ["analyze", str(hsv_path), "-c", str(config)])
        assert result.exit_code == 1

    def test_non_integer_estimate_config(self, runner: CliRunner, tmp_path: Path, hsv_path: Path):
        config = tmp_path / "float.yaml"
        config.write_text("clusters:\n  min_cluster_estimate: 2.5\n")
        result = runner.invoke(cli, ["analyze", str(hsv_path), "-c", str(config)])
        assert result.exit_code == 1

    def test_non_positive_prior(self, runner: CliRunner, hsv_path: Path):
        result = runner.invoke(cli, ["analyze", str(hsv_path), "--prior-average", "0"])
        assert result.exit_code == 2
