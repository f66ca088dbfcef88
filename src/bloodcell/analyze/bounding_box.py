"""Bounding box of a cluster's row-major pixel indices."""

from __future__ import annotations

from typing import Iterable

from bloodcell.core.models import BoundingBox


def compute_bounding_box(indices: Iterable[int], width: int) -> BoundingBox:
    """Derive the inclusive bounding box of row-major pixel indices.

    Args:
        indices: Pixel indices ``y * width + x``.
        width: Grid width used to build the indices.

    Returns:
        BoundingBox covering every index.

    Raises:
        ValueError: If ``indices`` is empty.
    """
    it = iter(indices)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("Cannot compute a bounding box of an empty cluster") from None

    min_y, min_x = divmod(first, width)
    max_x, max_y = min_x, min_y
    for idx in it:
        y, x = divmod(idx, width)
        if x < min_x:
            min_x = x
        elif x > max_x:
            max_x = x
        if y < min_y:
            min_y = y
        elif y > max_y:
            max_y = y

    return BoundingBox(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)
