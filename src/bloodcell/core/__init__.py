"""bloodcell core — models, configuration, exceptions, disjoint-set forest."""

from bloodcell.core.config import AnalysisConfig, ClassifierThresholds, ClusterThresholds
from bloodcell.core.disjoint_set import DisjointSetForest
from bloodcell.core.exceptions import (
    BloodCellError,
    ConfigError,
    InvalidGridDimensionsError,
    PixelIndexError,
)
from bloodcell.core.models import (
    AnalysisCounts,
    AnalysisResult,
    BoundingBox,
    CellSummary,
    CellType,
    ClassifiedGrid,
    ClassLabel,
    Cluster,
    PixelGrid,
)

__all__ = [
    "AnalysisConfig",
    "AnalysisCounts",
    "AnalysisResult",
    "BoundingBox",
    "CellSummary",
    "CellType",
    "ClassifiedGrid",
    "ClassLabel",
    "ClassifierThresholds",
    "Cluster",
    "ClusterThresholds",
    "DisjointSetForest",
    "PixelGrid",
    "BloodCellError",
    "ConfigError",
    "InvalidGridDimensionsError",
    "PixelIndexError",
]
