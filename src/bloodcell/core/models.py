"""Data models for the bloodcell core module."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from bloodcell.core.exceptions import InvalidGridDimensionsError

if TYPE_CHECKING:
    from bloodcell.io.pixel_source import PixelSource

HSV = tuple[float, float, float]


class ClassLabel(enum.Enum):
    """Per-pixel class produced by the pixel classifier."""

    BACKGROUND = "background"
    RED_CANDIDATE = "red_candidate"
    WHITE_CANDIDATE = "white_candidate"


class CellType(enum.Enum):
    """Cell type assigned to a surviving cluster."""

    RED = "red"
    WHITE = "white"
    RED_CLUSTER = "red-cluster"


def _check_dimensions(width: int, height: int, length: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidGridDimensionsError(width, height)
    if length != width * height:
        raise InvalidGridDimensionsError(width, height, length)


@dataclass(frozen=True)
class PixelGrid:
    """Row-major (hue, saturation, brightness) samples of one image.

    Hue is in degrees [0, 360); saturation and brightness are in [0, 1].
    """

    width: int
    height: int
    samples: tuple[HSV, ...]

    def __post_init__(self) -> None:
        _check_dimensions(self.width, self.height, len(self.samples))

    @classmethod
    def from_samples(
        cls, width: int, height: int, samples: Sequence[Sequence[float]],
    ) -> PixelGrid:
        """Build a grid from any row-major sequence of 3-element samples."""
        return cls(
            width=width,
            height=height,
            samples=tuple((float(h), float(s), float(v)) for h, s, v in samples),
        )

    @classmethod
    def from_source(cls, source: PixelSource) -> PixelGrid:
        """Sample every pixel of a PixelSource in raster order.

        Sources with a bulk ``to_grid`` method are sampled through it
        instead of per-pixel ``color_at`` calls.
        """
        to_grid = getattr(source, "to_grid", None)
        if callable(to_grid):
            return to_grid()
        width, height = source.width, source.height
        if width <= 0 or height <= 0:
            raise InvalidGridDimensionsError(width, height)
        return cls.from_samples(
            width,
            height,
            [source.color_at(x, y) for y in range(height) for x in range(width)],
        )

    def color_at(self, x: int, y: int) -> HSV:
        return self.samples[y * self.width + x]

    def __len__(self) -> int:
        return len(self.samples)


@dataclass(frozen=True)
class ClassifiedGrid:
    """Row-major class labels, one per PixelGrid index."""

    width: int
    height: int
    labels: tuple[ClassLabel, ...]

    def __post_init__(self) -> None:
        _check_dimensions(self.width, self.height, len(self.labels))

    def label_at(self, x: int, y: int) -> ClassLabel:
        return self.labels[y * self.width + x]

    def __len__(self) -> int:
        return len(self.labels)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box with inclusive pixel bounds."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def contains(self, x: int, y: int) -> bool:
        """True if (x, y) lies inside the box, edges included."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


@dataclass(frozen=True)
class Cluster:
    """A classified connected component of same-class pixels.

    Attributes:
        root: Canonical disjoint-set root of the component.
        member_indices: Row-major pixel indices of the component.
        class_label: Pixel class shared by every member.
        bounding_box: Inclusive bounds of the members.
        cell_type: Assigned cell type.
        estimated_count: Estimated number of cells (>= 1).
        label: 1-based display number in processing order.
    """

    root: int
    member_indices: frozenset[int]
    class_label: ClassLabel
    bounding_box: BoundingBox
    cell_type: CellType
    estimated_count: int
    label: int

    @property
    def size(self) -> int:
        return len(self.member_indices)

    def contains(self, x: int, y: int) -> bool:
        return self.bounding_box.contains(x, y)


@dataclass(frozen=True)
class AnalysisCounts:
    """Aggregate counts of one analysis pass."""

    red_count: int
    white_count: int
    total_clusters: int


@dataclass(frozen=True)
class AnalysisResult:
    """Result of one analysis pass.

    Attributes:
        clusters: Surviving clusters in processing order.
        red_count: Estimated red cells, including multi-cell estimates.
        white_count: White cells detected.
        total_clusters: Number of surviving clusters.
        average_red_size: Running average single-red size to carry into the next pass.
    """

    clusters: tuple[Cluster, ...]
    red_count: int
    white_count: int
    total_clusters: int
    average_red_size: float

    @property
    def counts(self) -> AnalysisCounts:
        return AnalysisCounts(
            red_count=self.red_count,
            white_count=self.white_count,
            total_clusters=self.total_clusters,
        )


@dataclass(frozen=True)
class CellSummary:
    """One row of the per-type summary table."""

    cell_type: str
    count: int
    percentage: str
