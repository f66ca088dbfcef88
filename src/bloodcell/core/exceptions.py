"""Exception classes for the bloodcell core module."""

from __future__ import annotations


class BloodCellError(Exception):
    """Base exception for all analysis errors."""


class InvalidGridDimensionsError(BloodCellError):
    """Raised when a pixel grid has non-positive dimensions or a sample count mismatch."""

    def __init__(
        self, width: int, height: int, length: int | None = None,
    ) -> None:
        if length is None:
            msg = f"Invalid grid dimensions: {width}x{height}"
        else:
            msg = (
                f"Invalid grid dimensions: {width}x{height} expects "
                f"{width * height} samples, got {length}"
            )
        super().__init__(msg)
        self.width = width
        self.height = height
        self.length = length

    @classmethod
    def for_shape(cls, shape: tuple[int, ...]) -> InvalidGridDimensionsError:
        """Error for an array that is not (H, W, 3)."""
        height = shape[0] if len(shape) > 0 else 0
        width = shape[1] if len(shape) > 1 else 0
        exc = cls(width, height)
        exc.args = (f"Invalid grid dimensions: expected an (H, W, 3) array, got shape {shape}",)
        return exc


class PixelIndexError(BloodCellError, IndexError):
    """Raised when a pixel source is queried outside its bounds."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Pixel ({x}, {y}) outside {width}x{height} grid"
        )
        self.x = x
        self.y = y


class ConfigError(BloodCellError):
    """Raised for invalid threshold values or an unreadable config file."""
