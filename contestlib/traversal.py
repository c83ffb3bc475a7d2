"""Breadth-first and depth-first search, cycle detection and topological order."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator

from contestlib.graph import Edge, Graph


@dataclass
class BfsResult:
    """BFS forest: each vertex's parent (None for roots) and its level."""

    parent: dict[int, int | None] = field(default_factory=dict)
    level: dict[int, int] = field(default_factory=dict)
    order: list[int] = field(default_factory=list)


@dataclass
class DfsResult:
    """DFS forest with discovery and finish times from one shared clock."""

    parent: dict[int, int | None] = field(default_factory=dict)
    discovery: dict[int, int] = field(default_factory=dict)
    finish: dict[int, int] = field(default_factory=dict)


def bfs(graph: Graph) -> BfsResult:
    """Search from every unvisited vertex in increasing order."""
    result = BfsResult(parent={v: None for v in graph.vertices})
    for root in graph.vertices:
        if root in result.level:
            continue
        result.level[root] = 0
        queue = deque([root])
        while queue:
            s = queue.popleft()
            result.order.append(s)
            for edge in graph.neighbors(s):
                v = edge.dest
                if v not in result.level:
                    result.level[v] = result.level[s] + 1
                    result.parent[v] = s
                    queue.append(v)
    return result


def dfs(graph: Graph) -> DfsResult:
    """Search from every unvisited vertex in increasing order, timing entry and exit."""
    result = DfsResult(parent={v: None for v in graph.vertices})
    clock = 0
    for root in graph.vertices:
        if root in result.discovery:
            continue
        clock += 1
        result.discovery[root] = clock
        stack: list[tuple[int, Iterator[Edge]]] = [(root, iter(graph.neighbors(root)))]
        while stack:
            u, pending = stack[-1]
            for edge in pending:
                v = edge.dest
                if v not in result.discovery:
                    result.parent[v] = u
                    clock += 1
                    result.discovery[v] = clock
                    stack.append((v, iter(graph.neighbors(v))))
                    break
            else:
                stack.pop()
                clock += 1
                result.finish[u] = clock
    return result


def _undirected_cycle(graph: Graph) -> bool:
    seen: set[int] = set()
    for root in graph.vertices:
        if root in seen:
            continue
        seen.add(root)
        in_queue = {root}
        queue = deque([root])
        while queue:
            s = queue.popleft()
            for edge in graph.neighbors(s):
                v = edge.dest
                if v not in seen:
                    seen.add(v)
                    in_queue.add(v)
                    queue.append(v)
                elif v in in_queue:
                    return True
            in_queue.discard(s)
    return False


def _directed_cycle(graph: Graph) -> bool:
    on_path: set[int] = set()
    done: set[int] = set()
    for root in graph.vertices:
        if root in done:
            continue
        on_path.add(root)
        stack: list[tuple[int, Iterator[Edge]]] = [(root, iter(graph.neighbors(root)))]
        while stack:
            u, pending = stack[-1]
            for edge in pending:
                v = edge.dest
                if v in on_path:
                    return True
                if v not in done:
                    on_path.add(v)
                    stack.append((v, iter(graph.neighbors(v))))
                    break
            else:
                stack.pop()
                on_path.discard(u)
                done.add(u)
    return False


def has_cycle(graph: Graph) -> bool:
    """Return True when the graph contains a cycle (self-loops count)."""
    return _directed_cycle(graph) if graph.directed else _undirected_cycle(graph)


def topological_order(graph: Graph) -> list[int]:
    """Return the vertices in decreasing DFS finish time.

    For a directed acyclic graph every edge then points forward in the list.
    """
    finish = dfs(graph).finish
    return sorted(graph.vertices, key=finish.__getitem__, reverse=True)