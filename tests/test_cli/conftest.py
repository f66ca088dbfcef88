"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def hsv_path(tmp_path: Path, hsv_array_from_blocks, red_and_white_blocks) -> Path:
    """A saved HSV array with one white and one red cell."""
    path = tmp_path / "smear.npy"
    np.save(path, hsv_array_from_blocks(*red_and_white_blocks))
    return path


@pytest.fixture
def rgb_path(tmp_path: Path) -> Path:
    """A saved RGB array: 5x5 red block and 5x6 dark blue block on white."""
    rgb = np.full((8, 16, 3), 255, dtype=np.uint8)
    rgb[0:5, 0:5] = (200, 0, 0)
    rgb[0:5, 8:14] = (0, 0, 128)
    path = tmp_path / "smear_rgb.npy"
    np.save(path, rgb)
    return path
