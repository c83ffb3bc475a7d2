"""Counting triangles in an undirected graph."""

from __future__ import annotations

from typing import Iterable


def count_triangles(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of triangles in the simple graph on ``1..n`` given by ``edges``.

    Repeated edges count once and self-loops are ignored. Each edge is
    directed towards its end of higher degree, which bounds the work by
    O(m^1.5).
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    neighbours: list[set[int]] = [set() for _ in range(n + 1)]
    for u, v in edges:
        for w in (u, v):
            if not 1 <= w <= n:
                raise IndexError(f"vertex {w} is outside 1..{n}")
        if u != v:
            neighbours[u].add(v)
            neighbours[v].add(u)

    def rank(v: int) -> tuple[int, int]:
        return len(neighbours[v]), v

    forward = [{w for w in adjacent if rank(w) > rank(v)} for v, adjacent in enumerate(neighbours)]
    return sum(len(forward[u] & forward[v]) for u in range(1, n + 1) for v in forward[u])