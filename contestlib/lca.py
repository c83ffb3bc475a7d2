"""Lowest common ancestors in a rooted tree via an Euler tour and a sparse table."""

from __future__ import annotations

from typing import Iterable, Iterator


class LowestCommonAncestor:
    """O(n log n) preprocessing, O(1) ancestor queries on a tree over ``1..n``."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 1) -> None:
        if n < 1:
            raise ValueError("a tree needs at least one vertex")
        self._n = n
        self._check(root)
        self.root = root
        adjacency: list[list[int]] = [[] for _ in range(n + 1)]
        count = 0
        for u, v in edges:
            self._check(u)
            self._check(v)
            adjacency[u].append(v)
            adjacency[v].append(u)
            count += 1
        if count != n - 1:
            raise ValueError(f"a tree on {n} vertices has {n - 1} edges, got {count}")

        parent: list[int | None] = [None] * (n + 1)
        depth = [0] * (n + 1)
        size = [1] * (n + 1)
        first = [-1] * (n + 1)
        euler = [root]
        first[root] = 0
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while stack:
            u, pending = stack[-1]
            for v in pending:
                if first[v] == -1:
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    first[v] = len(euler)
                    euler.append(v)
                    stack.append((v, iter(adjacency[v])))
                    break
                if v != parent[u]:
                    raise ValueError("edges contain a cycle")
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    size[p] += size[u]
                    euler.append(p)
        if any(first[v] == -1 for v in range(1, n + 1)):
            raise ValueError("edges do not connect every vertex")

        self._parent = parent
        self._depth = depth
        self._size = size
        self._first = first
        self._euler = euler
        self._table = self._build_table()

    def _check(self, u: int) -> None:
        if not 1 <= u <= self._n:
            raise IndexError(f"vertex {u} is outside 1..{self._n}")

    def _level(self, position: int) -> int:
        return self._depth[self._euler[position]]

    def _build_table(self) -> list[list[int]]:
        m = len(self._euler)
        table = [list(range(m))]
        span = 2
        while span <= m:
            previous = table[-1]
            half = span // 2
            table.append(
                [min(previous[i], previous[i + half], key=self._level) for i in range(m - span + 1)]
            )
            span <<= 1
        return table

    def _query(self, i: int, j: int) -> int:
        k = (j - i + 1).bit_length() - 1
        a, b = self._table[k][i], self._table[k][j - (1 << k) + 1]
        return a if self._level(a) < self._level(b) else b

    def lca(self, x: int, y: int) -> int:
        """Return the deepest vertex that is an ancestor of both ``x`` and ``y``."""
        self._check(x)
        self._check(y)
        i, j = sorted((self._first[x], self._first[y]))
        return self._euler[self._query(i, j)]

    def path(self, x: int, y: int) -> list[int]:
        """Return the vertices on the tree path from ``x`` to ``y``, both included."""
        meet = self.lca(x, y)
        up: list[int] = []
        while x != meet:
            up.append(x)
            x = self._parent[x]  # type: ignore[assignment]
        down: list[int] = []
        while y != meet:
            down.append(y)
            y = self._parent[y]  # type: ignore[assignment]
        return up + [meet] + down[::-1]

    def parent(self, u: int) -> int | None:
        """Return the parent of ``u``; the root has none."""
        self._check(u)
        return self._parent[u]

    def depth(self, u: int) -> int:
        """Return the number of edges between ``u`` and the root."""
        self._check(u)
        return self._depth[u]

    def subtree_size(self, u: int) -> int:
        """Return the number of vertices in the subtree rooted at ``u``."""
        self._check(u)
        return self._size[u]