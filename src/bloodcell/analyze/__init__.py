"""bloodcell analyze — pixel classification, clustering and cell counting."""

from bloodcell.analyze.bounding_box import compute_bounding_box
from bloodcell.analyze.cluster_classifier import (
    ClassificationResult,
    ClusterClassifier,
    round_half_up,
)
from bloodcell.analyze.cluster_extractor import ClusterExtractor, RawClusters
from bloodcell.analyze.pixel_classifier import PixelClassifier
from bloodcell.analyze.rendering import cluster_at, label_image, summarize, tricolor_image
from bloodcell.analyze.session import AnalysisSession, analyze_classified, analyze_grid

__all__ = [
    "AnalysisSession",
    "ClassificationResult",
    "ClusterClassifier",
    "ClusterExtractor",
    "PixelClassifier",
    "RawClusters",
    "analyze_classified",
    "analyze_grid",
    "cluster_at",
    "compute_bounding_box",
    "label_image",
    "round_half_up",
    "summarize",
    "tricolor_image",
]
