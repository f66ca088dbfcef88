"""AnalysisSession — run the full pipeline and carry the running average."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from bloodcell.analyze.cluster_classifier import ClusterClassifier
from bloodcell.analyze.cluster_extractor import ClusterExtractor
from bloodcell.analyze.pixel_classifier import PixelClassifier
from bloodcell.core.config import AnalysisConfig
from bloodcell.core.models import AnalysisResult, ClassifiedGrid, PixelGrid

if TYPE_CHECKING:
    from bloodcell.io.pixel_source import PixelSource

logger = logging.getLogger(__name__)


def analyze_classified(
    grid: ClassifiedGrid,
    config: AnalysisConfig | None = None,
    prior_average_red_size: float | None = None,
) -> AnalysisResult:
    """Extract and classify clusters of an already classified grid.

    Args:
        grid: Classified grid.
        config: Pipeline configuration. Defaults to ``AnalysisConfig()``.
        prior_average_red_size: Running average from a previous pass.
            None uses the configured seed.

    Returns:
        AnalysisResult carrying the updated running average.
    """
    config = config or AnalysisConfig()
    raw = ClusterExtractor().extract(grid)
    classified = ClusterClassifier(config.clusters).classify(
        raw, grid, prior_average_red_size,
    )
    return AnalysisResult(
        clusters=classified.clusters,
        red_count=classified.counts.red_count,
        white_count=classified.counts.white_count,
        total_clusters=classified.counts.total_clusters,
        average_red_size=classified.average_red_size,
    )


def analyze_grid(
    grid: PixelGrid,
    config: AnalysisConfig | None = None,
    prior_average_red_size: float | None = None,
) -> AnalysisResult:
    """Stateless analysis of one pixel grid.

    Raises:
        InvalidGridDimensionsError: Raised by PixelGrid for bad dimensions.
    """
    config = config or AnalysisConfig()
    classified = PixelClassifier(config.pixels).classify_grid(grid)
    return analyze_classified(classified, config, prior_average_red_size)


class AnalysisSession:
    """One stream of analyses sharing a running single-red average.

    Each session owns its own average; analyses of unrelated images should
    use separate sessions.

    Args:
        config: Pipeline configuration. Defaults to ``AnalysisConfig()``.
        average_red_size: Starting average. None uses the configured seed.
    """

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        average_red_size: float | None = None,
    ) -> None:
        self._config = config or AnalysisConfig()
        self._average = (
            self._config.clusters.average_red_size_seed
            if average_red_size is None
            else average_red_size
        )
        self._last: AnalysisResult | None = None

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    @property
    def average_red_size(self) -> float:
        return self._average

    @property
    def last_result(self) -> AnalysisResult | None:
        return self._last

    def classify(self, source: PixelSource | PixelGrid) -> ClassifiedGrid:
        """Classify the pixels of a source without clustering them."""
        grid = source if isinstance(source, PixelGrid) else PixelGrid.from_source(source)
        return PixelClassifier(self._config.pixels).classify_grid(grid)

    def analyze(self, source: PixelSource | PixelGrid) -> AnalysisResult:
        """Analyze one image and update the carried average.

        Args:
            source: A PixelSource or an already sampled PixelGrid.

        Returns:
            AnalysisResult for this image.
        """
        start = time.monotonic()
        classified = self.classify(source)
        result = analyze_classified(classified, self._config, self._average)
        elapsed = time.monotonic() - start

        self._average = result.average_red_size
        self._last = result
        logger.info(
            "Analyzed %dx%d grid: %d clusters, %d red, %d white (%.3fs)",
            classified.width, classified.height, result.total_clusters,
            result.red_count, result.white_count, elapsed,
        )
        return result

    def reset(self) -> None:
        """Forget the last result and restore the seed average."""
        self._average = self._config.clusters.average_red_size_seed
        self._last = None
