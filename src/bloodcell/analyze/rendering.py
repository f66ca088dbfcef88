"""Array helpers for overlays and summary tables."""

from __future__ import annotations

import numpy as np

from bloodcell.core.models import (
    AnalysisResult,
    CellSummary,
    ClassifiedGrid,
    ClassLabel,
    Cluster,
)

TRICOLOR_RGB: dict[ClassLabel, tuple[int, int, int]] = {
    ClassLabel.BACKGROUND: (255, 255, 255),
    ClassLabel.RED_CANDIDATE: (255, 0, 0),
    ClassLabel.WHITE_CANDIDATE: (128, 0, 128),
}


def tricolor_image(grid: ClassifiedGrid) -> np.ndarray:
    """Render a classified grid as a (H, W, 3) uint8 preview.

    Red candidates are red, white candidates purple, background white.
    """
    image = np.empty((grid.height * grid.width, 3), dtype=np.uint8)
    for label, rgb in TRICOLOR_RGB.items():
        mask = np.fromiter(
            (lbl is label for lbl in grid.labels), dtype=bool, count=len(grid),
        )
        image[mask] = rgb
    return image.reshape(grid.height, grid.width, 3)


def label_image(result: AnalysisResult, width: int, height: int) -> np.ndarray:
    """Paint each surviving cluster's display label into a (H, W) int32 image.

    Background and discarded noise stay 0.
    """
    flat = np.zeros(width * height, dtype=np.int32)
    for cluster in result.clusters:
        flat[np.fromiter(cluster.member_indices, dtype=np.int64)] = cluster.label
    return flat.reshape(height, width)


def cluster_at(result: AnalysisResult, x: int, y: int) -> Cluster | None:
    """Return the first cluster whose bounding box contains (x, y)."""
    for cluster in result.clusters:
        if cluster.contains(x, y):
            return cluster
    return None


def summarize(result: AnalysisResult) -> list[CellSummary]:
    """Red and white summary rows with their share of all counted cells."""
    total = result.red_count + result.white_count
    if total == 0:
        return [
            CellSummary(cell_type="Red Cells", count=0, percentage="0%"),
            CellSummary(cell_type="White Cells", count=0, percentage="0%"),
        ]
    return [
        CellSummary(
            cell_type="Red Cells",
            count=result.red_count,
            percentage=f"{100.0 * result.red_count / total:.1f}%",
        ),
        CellSummary(
            cell_type="White Cells",
            count=result.white_count,
            percentage=f"{100.0 * result.white_count / total:.1f}%",
        ),
    ]
