"""bloodcell IO — pixel sources and config serialization."""

from bloodcell.io.pixel_source import ArrayPixelSource, PixelSource, load_pixel_source
from bloodcell.io.serialization import load_config, save_config

__all__ = [
    "ArrayPixelSource",
    "PixelSource",
    "load_config",
    "load_pixel_source",
    "save_config",
]
