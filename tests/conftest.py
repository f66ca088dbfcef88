"""Shared test fixtures for bloodcell."""

from __future__ import annotations

from typing import Callable

import numpy as np
import pytest

from bloodcell.core.models import ClassifiedGrid, ClassLabel, PixelGrid

RED_HSV = (0.0, 0.8, 0.8)
WHITE_HSV = (240.0, 0.8, 0.5)
BACKGROUND_HSV = (60.0, 0.1, 0.9)

HSV_FOR_LABEL = {
    ClassLabel.RED_CANDIDATE: RED_HSV,
    ClassLabel.WHITE_CANDIDATE: WHITE_HSV,
    ClassLabel.BACKGROUND: BACKGROUND_HSV,
}

_SYMBOLS = {
    "R": ClassLabel.RED_CANDIDATE,
    "W": ClassLabel.WHITE_CANDIDATE,
    ".": ClassLabel.BACKGROUND,
}

# (x, y, w, h, label)
Block = tuple[int, int, int, int, ClassLabel]


def _labels_from_blocks(
    width: int, height: int, blocks: list[Block],
) -> list[ClassLabel]:
    labels = [ClassLabel.BACKGROUND] * (width * height)
    for bx, by, bw, bh, label in blocks:
        for y in range(by, by + bh):
            for x in range(bx, bx + bw):
                labels[y * width + x] = label
    return labels


@pytest.fixture
def classified_from_rows() -> Callable[[list[str]], ClassifiedGrid]:
    """Build a ClassifiedGrid from rows of 'R', 'W' and '.' characters."""

    def build(rows: list[str]) -> ClassifiedGrid:
        width = len(rows[0])
        labels = [_SYMBOLS[ch] for row in rows for ch in row]
        return ClassifiedGrid(width=width, height=len(rows), labels=tuple(labels))

    return build


@pytest.fixture
def classified_from_blocks() -> Callable[[int, int, list[Block]], ClassifiedGrid]:
    """Build a ClassifiedGrid with rectangular blocks on a background."""

    def build(width: int, height: int, blocks: list[Block]) -> ClassifiedGrid:
        labels = _labels_from_blocks(width, height, blocks)
        return ClassifiedGrid(width=width, height=height, labels=tuple(labels))

    return build


@pytest.fixture
def pixel_grid_from_blocks() -> Callable[[int, int, list[Block]], PixelGrid]:
    """Build an HSV PixelGrid whose blocks classify as the given labels."""

    def build(width: int, height: int, blocks: list[Block]) -> PixelGrid:
        labels = _labels_from_blocks(width, height, blocks)
        return PixelGrid.from_samples(
            width, height, [HSV_FOR_LABEL[label] for label in labels],
        )

    return build


@pytest.fixture
def hsv_array_from_blocks() -> Callable[[int, int, list[Block]], np.ndarray]:
    """Build an (H, W, 3) HSV array whose blocks classify as the given labels."""

    def build(width: int, height: int, blocks: list[Block]) -> np.ndarray:
        labels = _labels_from_blocks(width, height, blocks)
        flat = np.array([HSV_FOR_LABEL[label] for label in labels], dtype=np.float64)
        return flat.reshape(height, width, 3)

    return build


@pytest.fixture
def red_and_white_blocks() -> tuple[int, int, list[Block]]:
    """14x6 grid: 6x5 white block at (0, 0), 5x5 red block at (8, 0)."""
    return 14, 6, [
        (0, 0, 6, 5, ClassLabel.WHITE_CANDIDATE),
        (8, 0, 5, 5, ClassLabel.RED_CANDIDATE),
    ]
