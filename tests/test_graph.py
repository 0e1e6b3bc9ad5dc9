"""Tests for Graph — tree DP, SCC decomposition, grid graphs."""

import pytest

from cplib.graph.graph import Graph, GraphKind, Node, gen_grid_graph


def _sum_merge(x, y):
    return x + y


def _add_edge_weight(child, _node, weight):
    return (child or 0) + weight


def _make_weighted_tree():
    """
        1
       / \\
      2   3
     /   / \\
    4   5   6
    Arcs point from parent to child only.
    """
    g = Graph(GraphKind.TREE)
    g.add_edge(1, 2, 5)
    g.add_edge(1, 3, 3)
    g.add_edge(2, 4, 7)
    g.add_edge(3, 5, 2)
    g.add_edge(3, 6, 8)
    return g


def _min_path(child, _node, weight):
    return weight if child is None else weight + child


def test_id_mapping():
    g = Graph()
    g.add_edge("a", "b")
    g.add_weight_to_node("c", 4)

    assert len(g) == 3
    assert g.id_of("a") == 0
    assert g.reverse_map == ["a", "b", "c"]
    assert g.nodes[2] == Node(4)
    assert g.id_of("zzz") is None


def test_tree_dp_total_weight():
    """Undirected tree stored as arcs both ways: sum of reachable edge weights."""
    g = Graph(GraphKind.TREE)
    for u, v, w in [(1, 2, 5), (2, 3, 10), (1, 4, 16), (5, 6, 34)]:
        g.add_edge(u, v, w)
        g.add_edge(v, u, w)

    assert g.dp(1, _sum_merge, _add_edge_weight) == 31
    assert g.dp(6, _sum_merge, _add_edge_weight) == 34


def test_tree_dp_min_path():
    g = _make_weighted_tree()
    assert g.dp(1, min, _min_path) == 5


def test_tree_dp_max_path():
    g = _make_weighted_tree()
    assert g.dp(1, max, _min_path) == 12


def test_tree_dp_min_max_weights():
    g = Graph(GraphKind.TREE)
    g.add_edge(1, 2, 5)
    g.add_edge(2, 3, 10)
    g.add_edge(1, 3, 15)
    g.add_edge(2, 4, 20)

    def merge(a, b):
        return (min(a[0], b[0]), max(a[1], b[1]))

    def add_node(child, _node, weight):
        if child is None:
            return (weight, weight)
        return (min(child[0], weight), max(child[1], weight))

    assert g.dp(1, merge, add_node) == (5, 20)


def test_tree_dp_unknown_start():
    assert _make_weighted_tree().dp(99, _sum_merge, _add_edge_weight) is None


def test_tree_dp_requires_tree():
    g = Graph(GraphKind.DIRECTED)
    g.add_edge(1, 2, 1)
    with pytest.raises(TypeError):
        g.dp(1, _sum_merge, _add_edge_weight)


def test_to_dsu_cycle():
    g = Graph(GraphKind.DIRECTED)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    g.add_edge(3, 1)

    dsu = g.to_dsu()
    assert dsu.same(g.id_of(1), g.id_of(2))
    assert dsu.same(g.id_of(2), g.id_of(3))
    assert dsu.size(0) == 3


def test_to_dsu_separate_components():
    g = Graph(GraphKind.DIRECTED)
    g.add_edge(1, 2)
    g.add_edge(3, 4)
    g.add_edge(4, 3)

    dsu = g.to_dsu()
    assert not dsu.same(g.id_of(1), g.id_of(2))
    assert dsu.same(g.id_of(3), g.id_of(4))
    assert not dsu.same(g.id_of(1), g.id_of(3))


def test_to_dsu_empty():
    assert len(Graph(GraphKind.DIRECTED).to_dsu()) == 0


def test_to_dsu_requires_directed():
    with pytest.raises(TypeError):
        Graph(GraphKind.UNDIRECTED).to_dsu()


def test_grid_graph_connected_cells():
    grid = [
        [1, 0, 0],
        [1, 1, 0],
        [0, 1, 1],
    ]
    g = gen_grid_graph(grid, lambda x: x == 1)

    assert len(g) == 5
    assert g.kind is GraphKind.UNDIRECTED
    neighbours = {g.reverse_map[to] for to, _w in g.adj[g.id_of((1, 1))]}
    assert neighbours == {(1, 0), (2, 1)}
    assert all(w == 1 for arcs in g.adj for _to, w in arcs)


def test_grid_graph_strings():
    grid = ["..#", "#.."]
    g = gen_grid_graph(grid, lambda c: c == ".", GraphKind.DIRECTED)

    assert len(g) == 4
    assert g.nodes[g.id_of((0, 0))].weight == "."
    assert len(g.to_dsu().groups()) == 1
