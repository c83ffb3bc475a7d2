"""Minimum spanning trees with Kruskal's algorithm and a union-find structure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


class UnionFind:
    """Disjoint sets over ``1..n`` with path compression and union by size."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self._sets = n

    def _check(self, x: int) -> None:
        if not 1 <= x <= self.n:
            raise IndexError(f"element {x} is outside 1..{self.n}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if they were already one."""
        x_root, y_root = self.find(x), self.find(y)
        if x_root == y_root:
            return False
        if self._size[x_root] < self._size[y_root]:
            x_root, y_root = y_root, x_root
        self._parent[y_root] = x_root
        self._size[x_root] += self._size[y_root]
        self._sets -= 1
        return True

    def same_set(self, x: int, y: int) -> bool:
        """Return True when ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def __len__(self) -> int:
        return self._sets


@dataclass(frozen=True)
class WeightedEdge:
    """An undirected edge between ``u`` and ``v``."""

    u: int
    v: int
    weight: int


def kruskal(
    n: int, edges: Iterable[WeightedEdge | tuple[int, int, int]]
) -> tuple[int, list[WeightedEdge]]:
    """Return the total weight and edges of a minimum spanning forest on ``1..n``.

    Edges of equal weight are taken in the order given.
    """
    normalised = [e if isinstance(e, WeightedEdge) else WeightedEdge(*e) for e in edges]
    sets = UnionFind(n)
    chosen = [e for e in sorted(normalised, key=lambda e: e.weight) if sets.union(e.u, e.v)]
    return sum(e.weight for e in chosen), chosen