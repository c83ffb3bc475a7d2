import random

import pytest

from contestlib.mst import UnionFind, WeightedEdge, kruskal


def _random_edges(seed: int, n: int, m: int) -> list[WeightedEdge]:
    rng = random.Random(seed)
    return [WeightedEdge(rng.randint(1, n), rng.randint(1, n), rng.randint(1, 50)) for _ in range(m)]


def test_union_find_counts_sets():
    sets = UnionFind(5)
    assert len(sets) == 5
    assert sets.union(1, 2) is True
    assert sets.union(3, 4) is True
    assert sets.union(2, 1) is False
    assert len(sets) == 5 - 2
    assert sets.same_set(1, 2)
    assert not sets.same_set(2, 3)


def test_union_find_transitive():
    sets = UnionFind(6)
    sets.union(1, 2)
    sets.union(2, 3)
    sets.union(5, 6)
    assert sets.find(1) == sets.find(3)
    assert sets.same_set(6, 5)
    assert not sets.same_set(3, 5)


def test_union_find_rejects_out_of_range():
    sets = UnionFind(3)
    with pytest.raises(IndexError):
        sets.find(0)
    with pytest.raises(IndexError):
        sets.union(1, 4)


def test_triangle_drops_heaviest_edge():
    edges = [(1, 2, 1), (2, 3, 2), (1, 3, 3)]
    total, chosen = kruskal(3, edges)
    assert total == 3
    assert chosen == [WeightedEdge(1, 2, 1), WeightedEdge(2, 3, 2)]


@pytest.mark.parametrize("seed", range(8))
def test_forest_spans_every_component(seed):
    n = 12
    edges = _random_edges(seed, n, 25)
    total, chosen = kruskal(n, edges)
    assert total == sum(e.weight for e in chosen)
    components = UnionFind(n)
    for e in edges:
        components.union(e.u, e.v)
    assert len(chosen) == n - len(components)
    forest = UnionFind(n)
    for e in chosen:
        assert forest.union(e.u, e.v)
    for e in edges:
        assert forest.same_set(e.u, e.v)


@pytest.mark.parametrize("seed", range(8))
def test_total_weight_independent_of_edge_order(seed):
    edges = _random_edges(seed, 10, 30)
    shuffled = edges[:]
    random.Random(seed + 100).shuffle(shuffled)
    assert kruskal(10, edges)[0] == kruskal(10, shuffled)[0]


@pytest.mark.parametrize("seed", range(5))
def test_unchosen_edges_are_no_lighter_than_cycle_edges(seed):
    n = 9
    edges = _random_edges(seed, n, 20)
    _, chosen = kruskal(n, edges)
    for e in edges:
        if e in chosen or e.u == e.v:
            continue
        lighter = UnionFind(n)
        for c in chosen:
            if c.weight <= e.weight:
                lighter.union(c.u, c.v)
        assert lighter.same_set(e.u, e.v)


def test_edge_out_of_range_raises():
    with pytest.raises(IndexError):
        kruskal(2, [(1, 3, 1)])