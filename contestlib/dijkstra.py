"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass

from contestlib.graph import Graph


@dataclass
class ShortestPaths:
    """Distances from ``source`` and the predecessor of each vertex on its shortest path.

    Unreachable vertices have distance ``math.inf`` and parent ``None``, as has the source.
    """

    source: int
    distance: dict[int, float]
    parent: dict[int, int | None]


def dijkstra(graph: Graph, source: int = 1) -> ShortestPaths:
    """Return shortest distances from ``source`` over non-negative edge weights.

    Ties in the queue are broken by the smaller vertex label.
    Raises ValueError when a reachable edge has a negative weight.
    """
    if not 1 <= source <= graph.n:
        raise IndexError(f"vertex {source} is outside 1..{graph.n}")
    distance: dict[int, float] = {v: math.inf for v in graph.vertices}
    parent: dict[int, int | None] = {v: None for v in graph.vertices}
    distance[source] = 0
    queue: list[tuple[float, int]] = [(0, source)]
    while queue:
        d, u = heapq.heappop(queue)
        if d != distance[u]:
            continue
        for edge in graph.neighbors(u):
            if edge.weight < 0:
                raise ValueError(f"edge {u}-{edge.dest} has negative weight {edge.weight}")
            candidate = d + edge.weight
            if candidate < distance[edge.dest]:
                distance[edge.dest] = candidate
                parent[edge.dest] = u
                heapq.heappush(queue, (candidate, edge.dest))
    return ShortestPaths(source=source, distance=distance, parent=parent)