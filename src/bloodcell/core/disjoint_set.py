"""Disjoint-set forest (union-find) with path compression and union by size."""

from __future__ import annotations


class DisjointSetForest:
    """Dynamic partition of ``n`` elements ``0..n-1`` into disjoint sets.

    ``find`` compresses paths iteratively so long chains never hit the
    recursion limit. ``union`` attaches the root of the smaller set under
    the root of the larger one. On a size tie the root of ``y`` goes under
    the root of ``x``, so the first argument's root stays canonical.

    Args:
        n: Number of elements. Each starts as its own singleton set.

    Raises:
        ValueError: If ``n`` is negative.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, x: int) -> int:
        """Return the root of ``x``'s set, re-pointing the path at the root."""
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> None:
        """Merge the sets containing ``x`` and ``y``."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return
        size = self._size
        if size[root_x] < size[root_y]:
            self._parent[root_x] = root_y
            size[root_y] += size[root_x]
        else:
            self._parent[root_y] = root_x
            size[root_x] += size[root_y]

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def set_size(self, x: int) -> int:
        """Number of elements in ``x``'s set."""
        return self._size[self.find(x)]

    @property
    def parent(self) -> tuple[int, ...]:
        """Snapshot of the parent pointers."""
        return tuple(self._parent)

    @property
    def size(self) -> tuple[int, ...]:
        """Snapshot of the per-node sizes (meaningful at roots only)."""
        return tuple(self._size)

    def roots(self) -> list[int]:
        """All current roots in ascending order."""
        return [i for i, p in enumerate(self._parent) if p == i]

    def __len__(self) -> int:
        return len(self._parent)
