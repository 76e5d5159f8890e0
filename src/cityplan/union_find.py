"""Disjoint-set forest over city indices."""

from __future__ import annotations

from typing import Sequence

import numpy as np


class UnionFind:
    """Union by size with path halving.

    ``preferred`` marks elements whose root should survive a tie in size.
    The planner passes the port mask so the port hub stays the representative.
    """

    def __init__(self, size: int, preferred: Sequence[bool] | np.ndarray | None = None) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.parent = np.arange(size, dtype=np.int64)
        self.size = np.ones(size, dtype=np.int64)
        if preferred is None:
            self.preferred = np.zeros(size, dtype=bool)
        else:
            self.preferred = np.asarray(preferred, dtype=bool).copy()
            if self.preferred.shape != (size,):
                raise ValueError("preferred must have one entry per element")
        self.n_components = int(size)

    def __len__(self) -> int:
        return int(self.parent.shape[0])

    def find(self, x: int) -> int:
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return int(x)

    def union(self, a: int, b: int) -> bool:
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False
        size = self.size
        if size[ra] < size[rb]:
            ra, rb = rb, ra
        elif size[ra] == size[rb] and self.preferred[rb] and not self.preferred[ra]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        size[ra] += size[rb]
        self.preferred[ra] = self.preferred[ra] or self.preferred[rb]
        self.n_components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def component_size(self, x: int) -> int:
        return int(self.size[self.find(x)])

    def roots(self) -> np.ndarray:
        """Root of every element, fully compressing each path on the way."""
        out = np.empty_like(self.parent)
        for i in range(self.parent.shape[0]):
            root = self.find(i)
            self.parent[i] = root
            out[i] = root
        return out


__all__ = ["UnionFind"]
