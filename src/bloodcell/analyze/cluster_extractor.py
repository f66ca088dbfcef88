"""ClusterExtractor — 4-connected component labeling over a classified grid."""

from __future__ import annotations

from bloodcell.core.disjoint_set import DisjointSetForest
from bloodcell.core.models import ClassifiedGrid, ClassLabel

RawClusters = dict[int, frozenset[int]]


class ClusterExtractor:
    """Group 4-adjacent pixels of identical non-background class.

    A single raster pass (rows outer, columns inner) unions each
    foreground pixel with its right and bottom neighbours when their
    labels match exactly. Left and top neighbours were already linked
    when they were the current pixel, which gives full 4-connectivity.
    Red and white candidates never merge.
    """

    def build_forest(self, grid: ClassifiedGrid) -> DisjointSetForest:
        """Run the union pass and return the populated forest."""
        width, height = grid.width, grid.height
        labels = grid.labels
        forest = DisjointSetForest(width * height)

        for y in range(height):
            row = y * width
            for x in range(width):
                idx = row + x
                label = labels[idx]
                if label is ClassLabel.BACKGROUND:
                    continue
                if x + 1 < width and labels[idx + 1] is label:
                    forest.union(idx, idx + 1)
                if y + 1 < height and labels[idx + width] is label:
                    forest.union(idx, idx + width)

        return forest

    def extract(self, grid: ClassifiedGrid) -> RawClusters:
        """Return ``{root: member indices}`` for every connected component.

        Background pixels never appear in the result.
        """
        forest = self.build_forest(grid)

        groups: dict[int, list[int]] = {}
        for idx, label in enumerate(grid.labels):
            if label is ClassLabel.BACKGROUND:
                continue
            groups.setdefault(forest.find(idx), []).append(idx)

        return {root: frozenset(members) for root, members in groups.items()}
