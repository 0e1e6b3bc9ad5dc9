"""Tests for UnionFind and PersistentUnionFind."""

import networkx as nx
import pytest

from cplib.structures.union_find import PersistentUnionFind, UnionFind


def _make_chain(cls):
    uf = cls(5)
    uf.unite(0, 1)
    uf.unite(2, 3)
    uf.unite(1, 2)
    return uf


def test_unite_and_same():
    uf = _make_chain(UnionFind)
    assert uf.same(0, 3)
    assert uf.size(0) == 4
    assert uf.size(4) == 1
    assert not uf.same(0, 4)


def test_unite_reports_merge():
    uf = UnionFind(3)
    assert uf.unite(0, 1) is True
    assert uf.unite(1, 0) is False


def test_same_is_an_equivalence():
    uf = UnionFind(6)
    uf.unite(0, 2)
    uf.unite(2, 4)

    assert all(uf.same(i, i) for i in range(6))
    assert uf.same(4, 0) == uf.same(0, 4)
    assert uf.same(0, 2) and uf.same(2, 4) and uf.same(0, 4)


def test_groups():
    uf = _make_chain(UnionFind)
    assert uf.groups() == [[0, 1, 2, 3], [4]]
    assert len(uf) == 5


def test_long_chain_find():
    n = 100_000
    uf = UnionFind(n)
    for i in range(n - 1):
        uf.unite(i, i + 1)
    assert uf.size(n - 1) == n


def test_persistent_matches_plain():
    uf = _make_chain(PersistentUnionFind)
    assert uf.same(0, 3)
    assert uf.size(3) == 4
    assert len(uf) == 5


def test_persistent_rollback():
    uf = PersistentUnionFind(4)
    uf.unite(0, 1)
    version = uf.snapshot()
    uf.unite(2, 3)
    uf.unite(1, 2)
    assert uf.same(0, 3)

    uf.rollback(version)
    assert uf.same(0, 1)
    assert not uf.same(1, 2)
    assert not uf.same(2, 3)
    assert uf.size(0) == 2
    assert uf.snapshot() == version


def test_persistent_undo():
    uf = PersistentUnionFind(3)
    uf.unite(0, 1)
    uf.unite(0, 1)
    uf.undo()
    assert not uf.same(0, 1)
    assert uf.size(1) == 1

    with pytest.raises(IndexError):
        uf.undo()


def test_persistent_bad_version():
    uf = PersistentUnionFind(3)
    uf.unite(0, 1)
    with pytest.raises(ValueError):
        uf.rollback(5)
    with pytest.raises(ValueError):
        uf.rollback(-1)


def _make_random_edges(n, seed):
    graph = nx.gnp_random_graph(n, 0.08, seed=seed)
    return list(graph.edges)


def _assert_matches_components(uf, n, edges):
    """same/size agree with the connected components of the edge set."""
    graph = nx.Graph()
    graph.add_nodes_from(range(n))
    graph.add_edges_from(edges)
    component_of = {}
    for component in nx.connected_components(graph):
        for v in component:
            component_of[v] = component

    for x in range(n):
        assert uf.same(x, x)
        assert uf.size(x) == len(component_of[x])
        for y in range(n):
            expected = y in component_of[x]
            assert uf.same(x, y) is expected
            assert uf.same(y, x) is expected


@pytest.mark.parametrize("cls", [UnionFind, PersistentUnionFind])
@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_unites_match_components(cls, seed):
    n = 30
    edges = _make_random_edges(n, seed)
    uf = cls(n)
    for i, (u, v) in enumerate(edges):
        uf.unite(u, v)
        if i % 7 == 0:
            _assert_matches_components(uf, n, edges[: i + 1])
    _assert_matches_components(uf, n, edges)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_rollback_matches_components(seed):
    n = 30
    edges = _make_random_edges(n, seed)
    half = len(edges) // 2
    uf = PersistentUnionFind(n)
    for u, v in edges[:half]:
        uf.unite(u, v)
    version = uf.snapshot()

    for u, v in edges[half:]:
        uf.unite(u, v)
    _assert_matches_components(uf, n, edges)

    uf.rollback(version)
    _assert_matches_components(uf, n, edges[:half])

    uf.rollback(0)
    _assert_matches_components(uf, n, [])
