"""ClusterClassifier — noise filtering, cell typing and multi-cell estimation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from bloodcell.analyze.bounding_box import compute_bounding_box
from bloodcell.analyze.cluster_extractor import RawClusters
from bloodcell.core.config import ClusterThresholds
from bloodcell.core.models import (
    AnalysisCounts,
    BoundingBox,
    CellType,
    ClassifiedGrid,
    ClassLabel,
    Cluster,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class ClassificationResult:
    """Output of ``ClusterClassifier.classify``.

    Attributes:
        clusters: Surviving clusters ordered by bounding-box top-left.
        average_red_size: Updated running average of single-red sizes.
        counts: Aggregate red/white/cluster counts.
    """

    clusters: tuple[Cluster, ...]
    average_red_size: float
    counts: AnalysisCounts


class ClusterClassifier:
    """Assign a cell type and a cell estimate to each raw cluster.

    Clusters are processed in ascending order of ``min_y * width + min_x``
    (ties broken by root) so labels and estimates are reproducible.
    For each cluster:

    - smaller than ``noise_cutoff`` -> dropped.
    - white candidates -> ``WHITE``, one white cell.
    - smaller than ``red_cluster_min_size`` -> ``RED``, one red cell; its
      size feeds the running average.
    - otherwise -> ``RED_CLUSTER`` with
      ``max(min_cluster_estimate, round(size / average))`` red cells, where
      ``average`` is the mean single-red size seen so far in this pass, or
      the prior average before any single red cell has been seen.

    The estimate therefore depends on processing order: a red cluster
    sorted before every single red cell uses the prior average.

    Args:
        thresholds: Size rules. Defaults to ``ClusterThresholds()``.
    """

    def __init__(self, thresholds: ClusterThresholds | None = None) -> None:
        self._t = thresholds or ClusterThresholds()

    @property
    def thresholds(self) -> ClusterThresholds:
        return self._t

    def classify(
        self,
        raw_clusters: RawClusters,
        grid: ClassifiedGrid,
        prior_average_red_size: float | None = None,
    ) -> ClassificationResult:
        """Classify raw clusters from one extraction pass.

        Args:
            raw_clusters: ``{root: member indices}`` from ClusterExtractor.
            grid: The classified grid the clusters were extracted from.
            prior_average_red_size: Average carried over from the previous
                pass. None uses ``average_red_size_seed``.

        Returns:
            ClassificationResult with ordered clusters, the new average,
            and aggregate counts.
        """
        t = self._t
        prior = (
            t.average_red_size_seed
            if prior_average_red_size is None
            else prior_average_red_size
        )
        if not math.isfinite(prior) or prior <= 0:
            raise ValueError(
                f"prior_average_red_size must be a finite number > 0, got {prior}"
            )

        width = grid.width
        boxed: list[tuple[int, int, BoundingBox, frozenset[int]]] = []
        for root, members in raw_clusters.items():
            if len(members) < t.noise_cutoff:
                logger.debug(
                    "Discarding noise cluster at root %d (%d px)", root, len(members),
                )
                continue
            box = compute_bounding_box(members, width)
            boxed.append((box.min_y * width + box.min_x, root, box, members))
        boxed.sort(key=lambda item: (item[0], item[1]))

        red_count = 0
        white_count = 0
        red_total_size = 0
        red_seen = 0
        clusters: list[Cluster] = []

        for label, (_, root, box, members) in enumerate(boxed, start=1):
            size = len(members)
            class_label = grid.labels[next(iter(members))]

            if class_label is ClassLabel.WHITE_CANDIDATE:
                cell_type = CellType.WHITE
                estimate = 1
                white_count += 1
            elif size < t.red_cluster_min_size:
                cell_type = CellType.RED
                estimate = 1
                red_count += 1
                red_total_size += size
                red_seen += 1
            else:
                cell_type = CellType.RED_CLUSTER
                average = red_total_size / red_seen if red_seen else prior
                estimate = max(t.min_cluster_estimate, round_half_up(size / average))
                red_count += estimate

            clusters.append(
                Cluster(
                    root=root,
                    member_indices=members,
                    class_label=class_label,
                    bounding_box=box,
                    cell_type=cell_type,
                    estimated_count=estimate,
                    label=label,
                )
            )

        new_average = red_total_size / red_seen if red_seen else prior

        return ClassificationResult(
            clusters=tuple(clusters),
            average_red_size=new_average,
            counts=AnalysisCounts(
                red_count=red_count,
                white_count=white_count,
                total_clusters=len(clusters),
            ),
        )
