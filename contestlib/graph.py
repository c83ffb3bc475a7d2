"""Weighted adjacency-list graphs on vertices ``1..n``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """One entry of an adjacency list: the far end and the edge weight."""

    dest: int
    weight: int = 1


class Graph:
    """A graph with vertices ``1..n`` whose adjacency lists keep insertion order.

    In an undirected graph every edge is stored in the lists of both ends.
    """

    def __init__(self, n: int, directed: bool = False) -> None:
        if n < 0:
            raise ValueError("number of vertices must be non-negative")
        self.n = n
        self.directed = directed
        self._adjacency: list[list[Edge]] = [[] for _ in range(n + 1)]
        self._edges: list[tuple[int, int, int]] = []

    @property
    def vertices(self) -> range:
        """The vertex labels, ``1..n``."""
        return range(1, self.n + 1)

    def _check(self, u: int) -> None:
        if not 1 <= u <= self.n:
            raise IndexError(f"vertex {u} is outside 1..{self.n}")

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Add an edge from ``u`` to ``v``; undirected graphs also get ``v`` to ``u``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(Edge(v, weight))
        if not self.directed:
            self._adjacency[v].append(Edge(u, weight))
        self._edges.append((u, v, weight))

    def neighbors(self, u: int) -> tuple[Edge, ...]:
        """Return the edges leaving ``u`` in the order they were added."""
        self._check(u)
        return tuple(self._adjacency[u])

    def edges(self) -> list[tuple[int, int, int]]:
        """Return every edge as ``(u, v, weight)`` in the order it was added."""
        return list(self._edges)

    def format(self) -> str:
        """Render the adjacency lists, one ``u-> v(w) ...`` line per vertex."""
        lines = []
        for u in self.vertices:
            entries = "".join(f"{e.dest}({e.weight}) " for e in self._adjacency[u])
            lines.append(f"{u}-> {entries}\n")
        return "".join(lines) + "\n"