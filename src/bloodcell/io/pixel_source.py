"""Pixel sources — supply HSV samples and grid dimensions to the analysis."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

import numpy as np

from bloodcell.core.exceptions import InvalidGridDimensionsError, PixelIndexError
from bloodcell.core.models import HSV, PixelGrid


@runtime_checkable
class PixelSource(Protocol):
    """Anything that can answer ``color_at(x, y)`` over a fixed grid."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def color_at(self, x: int, y: int) -> HSV: ...


class ArrayPixelSource:
    """PixelSource backed by a (H, W, 3) HSV array.

    Hue is in degrees [0, 360); saturation and brightness in [0, 1].

    Args:
        hsv: Array of shape (height, width, 3).

    Raises:
        InvalidGridDimensionsError: If the array is not (H, W, 3) with H, W > 0.
    """

    def __init__(self, hsv: np.ndarray) -> None:
        hsv = np.asarray(hsv, dtype=np.float64)
        if hsv.ndim != 3 or hsv.shape[2] != 3:
            raise InvalidGridDimensionsError.for_shape(hsv.shape)
        if hsv.shape[0] == 0 or hsv.shape[1] == 0:
            raise InvalidGridDimensionsError(hsv.shape[1], hsv.shape[0])
        self._hsv = hsv

    @classmethod
    def from_rgb(cls, rgb: np.ndarray) -> ArrayPixelSource:
        """Convert an RGB image (uint8 or float in [0, 1]) to an HSV source.

        scikit-image returns hue in [0, 1); it is scaled to degrees here.
        """
        from skimage.color import rgb2hsv

        rgb = np.asarray(rgb)
        if rgb.ndim != 3 or rgb.shape[2] != 3:
            raise InvalidGridDimensionsError.for_shape(rgb.shape)
        hsv = rgb2hsv(rgb)
        hsv[..., 0] *= 360.0
        return cls(hsv)

    @property
    def width(self) -> int:
        return int(self._hsv.shape[1])

    @property
    def height(self) -> int:
        return int(self._hsv.shape[0])

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the underlying HSV array."""
        view = self._hsv.view()
        view.flags.writeable = False
        return view

    def color_at(self, x: int, y: int) -> HSV:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelIndexError(x, y, self.width, self.height)
        h, s, v = self._hsv[y, x]
        return float(h), float(s), float(v)

    def to_grid(self) -> PixelGrid:
        """Sample the whole array in raster order without per-pixel calls."""
        flat = self._hsv.reshape(-1, 3)
        return PixelGrid(
            width=self.width,
            height=self.height,
            samples=tuple(map(tuple, flat.tolist())),
        )


def load_pixel_source(path: Path, rgb: bool = False) -> ArrayPixelSource:
    """Load a ``.npy`` array as a pixel source.

    Args:
        path: Path to a (H, W, 3) numpy array file.
        rgb: Treat the array as RGB and convert it to HSV.

    Returns:
        ArrayPixelSource over the loaded data.
    """
    data = np.load(Path(path), allow_pickle=False)
    return ArrayPixelSource.from_rgb(data) if rgb else ArrayPixelSource(data)
