import math
import random

import pytest

from contestlib.dijkstra import dijkstra
from contestlib.graph import Graph


def _random_graph(seed: int, n: int, m: int, directed: bool = False) -> Graph:
    rng = random.Random(seed)
    graph = Graph(n, directed=directed)
    for _ in range(m):
        graph.add_edge(rng.randint(1, n), rng.randint(1, n), rng.randint(0, 20))
    return graph


def test_path_graph_distances_are_cumulative_weights():
    weights = [4, 7, 1, 9]
    graph = Graph(len(weights) + 1)
    for i, w in enumerate(weights, start=1):
        graph.add_edge(i, i + 1, w)
    result = dijkstra(graph, 1)
    for v in range(1, len(weights) + 2):
        assert result.distance[v] == sum(weights[: v - 1])
    assert result.parent[1] is None
    assert result.parent[3] == 2


def test_shorter_indirect_route_is_preferred():
    graph = Graph(3)
    graph.add_edge(1, 3, 10)
    graph.add_edge(1, 2, 2)
    graph.add_edge(2, 3, 3)
    result = dijkstra(graph)
    assert result.distance[3] == 2 + 3
    assert result.parent[3] == 2


def test_unreachable_vertex_has_infinite_distance():
    graph = Graph(4)
    graph.add_edge(1, 2, 5)
    result = dijkstra(graph, 1)
    assert result.distance[3] == math.inf
    assert result.parent[4] is None
    assert result.distance[1] == 0


def test_directed_edges_are_one_way():
    graph = Graph(2, directed=True)
    graph.add_edge(2, 1, 3)
    assert dijkstra(graph, 1).distance[2] == math.inf
    assert dijkstra(graph, 2).distance[1] == 3


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("directed", [False, True])
def test_distances_satisfy_edge_relaxation(seed, directed):
    graph = _random_graph(seed, 15, 40, directed)
    result = dijkstra(graph, 1)
    for u in graph.vertices:
        for edge in graph.neighbors(u):
            assert result.distance[edge.dest] <= result.distance[u] + edge.weight


@pytest.mark.parametrize("seed", range(6))
def test_parents_lie_on_tight_edges(seed):
    graph = _random_graph(seed, 12, 30)
    result = dijkstra(graph, 1)
    for v, p in result.parent.items():
        if p is None:
            continue
        assert any(
            e.dest == v and result.distance[p] + e.weight == result.distance[v]
            for e in graph.neighbors(p)
        )


def test_negative_weight_raises():
    graph = Graph(2)
    graph.add_edge(1, 2, -1)
    with pytest.raises(ValueError):
        dijkstra(graph, 1)


def test_source_out_of_range_raises():
    with pytest.raises(IndexError):
        dijkstra(Graph(3), 4)