import pytest

from contestlib.graph import Graph
from contestlib.traversal import bfs, dfs, has_cycle, topological_order


def _graph(n, edges, directed=False):
    g = Graph(n, directed=directed)
    for u, v in edges:
        g.add_edge(u, v)
    return g


FOREST = _graph(7, [(1, 2), (1, 3), (2, 4), (3, 5), (6, 7)])


def test_bfs_levels_on_path():
    result = bfs(_graph(3, [(1, 2), (2, 3)]))
    assert result.level == {1: 0, 2: 1, 3: 2}
    assert result.parent == {1: None, 2: 1, 3: 2}


def test_bfs_parent_level_invariant():
    result = bfs(FOREST)
    for v, p in result.parent.items():
        if p is None:
            assert result.level[v] == 0
        else:
            assert result.level[v] == result.level[p] + 1


def test_bfs_visits_every_vertex_once():
    result = bfs(FOREST)
    assert sorted(result.order) == list(FOREST.vertices)


def test_bfs_roots_are_component_minima():
    result = bfs(FOREST)
    roots = [v for v, p in result.parent.items() if p is None]
    assert roots == [1, 6]


def test_bfs_levels_nondecreasing_in_order():
    result = bfs(FOREST)
    component = [v for v in result.order if v <= 5]
    levels = [result.level[v] for v in component]
    assert levels == sorted(levels)


def test_dfs_times_are_a_permutation():
    result = dfs(FOREST)
    times = list(result.discovery.values()) + list(result.finish.values())
    assert sorted(times) == list(range(1, 2 * FOREST.n + 1))


def test_dfs_parenthesis_property():
    result = dfs(FOREST)
    for v, p in result.parent.items():
        assert result.discovery[v] < result.finish[v]
        if p is not None:
            assert result.discovery[p] < result.discovery[v]
            assert result.finish[v] < result.finish[p]


def test_dfs_follows_insertion_order():
    result = dfs(_graph(3, [(1, 3), (1, 2)]))
    assert result.discovery[3] < result.discovery[2]
    assert result.parent[2] == 1


def test_dfs_deep_path_does_not_overflow():
    n = 5000
    g = _graph(n, [(i, i + 1) for i in range(1, n)])
    result = dfs(g)
    assert result.parent[n] == n - 1
    assert result.finish[1] == 2 * n


@pytest.mark.parametrize(
    "n,edges,expected",
    [
        (3, [(1, 2), (2, 3), (3, 1)], True),
        (5, [(1, 2), (1, 3), (2, 4), (3, 5)], False),
        (4, [(1, 2), (2, 3), (3, 4), (4, 1)], True),
        (2, [(1, 1)], True),
        (3, [], False),
    ],
)
def test_undirected_cycles(n, edges, expected):
    assert has_cycle(_graph(n, edges)) is expected


@pytest.mark.parametrize(
    "edges,expected",
    [
        ([(1, 2), (2, 3), (1, 3)], False),
        ([(1, 2), (2, 3), (3, 1)], True),
        ([(2, 2)], True),
    ],
)
def test_directed_cycles(edges, expected):
    assert has_cycle(_graph(3, edges, directed=True)) is expected


def test_topological_order_respects_edges():
    edges = [(5, 1), (1, 2), (3, 2), (2, 4), (5, 3)]
    g = _graph(5, edges, directed=True)
    order = topological_order(g)
    assert sorted(order) == [1, 2, 3, 4, 5]
    position = {v: i for i, v in enumerate(order)}
    for u, v in edges:
        assert position[u] < position[v]


def test_topological_order_is_reverse_finish():
    g = _graph(4, [(1, 2), (3, 4)], directed=True)
    finish = dfs(g).finish
    order = topological_order(g)
    assert [finish[v] for v in order] == sorted(finish.values(), reverse=True)