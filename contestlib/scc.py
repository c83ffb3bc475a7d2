"""Strongly connected components by Kosaraju's algorithm."""

from __future__ import annotations

from typing import Iterator

from contestlib.graph import Graph
from contestlib.traversal import topological_order


def _transpose(graph: Graph) -> dict[int, list[int]]:
    reverse: dict[int, list[int]] = {v: [] for v in graph.vertices}
    if graph.directed:
        for u, v, _ in graph.edges():
            reverse[v].append(u)
    else:
        for u in graph.vertices:
            reverse[u] = [edge.dest for edge in graph.neighbors(u)]
    return reverse


def strongly_connected_components(graph: Graph) -> list[list[int]]:
    """Return the strongly connected components.

    Components come in topological order of the condensation, and the vertices
    of each are in the order a depth-first search of the reversed graph reaches them.
    """
    reverse = _transpose(graph)
    seen: set[int] = set()
    components: list[list[int]] = []
    for start in topological_order(graph):
        if start in seen:
            continue
        seen.add(start)
        component = [start]
        stack: list[Iterator[int]] = [iter(reverse[start])]
        while stack:
            for v in stack[-1]:
                if v not in seen:
                    seen.add(v)
                    component.append(v)
                    stack.append(iter(reverse[v]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def is_strongly_connected(graph: Graph) -> bool:
    """Return True when the graph forms exactly one strongly connected component."""
    return len(strongly_connected_components(graph)) == 1