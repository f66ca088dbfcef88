"""PixelClassifier — map HSV samples to pixel classes."""

from __future__ import annotations

import numpy as np

from bloodcell.core.config import ClassifierThresholds
from bloodcell.core.models import ClassifiedGrid, ClassLabel, PixelGrid


class PixelClassifier:
    """Classify pixels as red candidates, white candidates or background.

    Rules are evaluated in order and the first match wins:

    1. hue outside ``[red_hue_max, red_hue_min]`` with saturation and
       brightness above their minimums -> ``RED_CANDIDATE``.
    2. hue strictly inside ``(white_hue_min, white_hue_max)`` with
       saturation above its minimum and brightness below its maximum ->
       ``WHITE_CANDIDATE``.
    3. anything else -> ``BACKGROUND``.

    Args:
        thresholds: Rule thresholds. Defaults to ``ClassifierThresholds()``.
    """

    def __init__(self, thresholds: ClassifierThresholds | None = None) -> None:
        self._t = thresholds or ClassifierThresholds()

    @property
    def thresholds(self) -> ClassifierThresholds:
        return self._t

    def classify(self, hue: float, saturation: float, brightness: float) -> ClassLabel:
        """Classify a single pixel."""
        t = self._t
        if (
            (hue > t.red_hue_min or hue < t.red_hue_max)
            and saturation > t.red_saturation_min
            and brightness > t.red_brightness_min
        ):
            return ClassLabel.RED_CANDIDATE
        if (
            t.white_hue_min < hue < t.white_hue_max
            and saturation > t.white_saturation_min
            and brightness < t.white_brightness_max
        ):
            return ClassLabel.WHITE_CANDIDATE
        return ClassLabel.BACKGROUND

    def classify_arrays(
        self,
        hue: np.ndarray,
        saturation: np.ndarray,
        brightness: np.ndarray,
    ) -> tuple[np.ndarray, np.ndarray]:
        """Vectorised form of ``classify`` over same-shaped arrays.

        Returns:
            ``(red_mask, white_mask)`` boolean arrays; the masks never overlap.
        """
        t = self._t
        red = (
            ((hue > t.red_hue_min) | (hue < t.red_hue_max))
            & (saturation > t.red_saturation_min)
            & (brightness > t.red_brightness_min)
        )
        white = (
            (hue > t.white_hue_min)
            & (hue < t.white_hue_max)
            & (saturation > t.white_saturation_min)
            & (brightness < t.white_brightness_max)
            & ~red
        )
        return red, white

    def classify_grid(self, grid: PixelGrid) -> ClassifiedGrid:
        """Classify every pixel of a grid, preserving row-major order."""
        samples = np.asarray(grid.samples, dtype=np.float64).reshape(-1, 3)
        red, white = self.classify_arrays(samples[:, 0], samples[:, 1], samples[:, 2])

        labels = [ClassLabel.BACKGROUND] * len(grid)
        for idx in np.flatnonzero(red):
            labels[idx] = ClassLabel.RED_CANDIDATE
        for idx in np.flatnonzero(white):
            labels[idx] = ClassLabel.WHITE_CANDIDATE

        return ClassifiedGrid(width=grid.width, height=grid.height, labels=tuple(labels))
