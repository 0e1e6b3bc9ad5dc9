"""Tests for TopologicalDPSolver — grid DP with boundary values."""

import pytest

from cplib.core.rules import TopologicalRules
from cplib.solver.topological_dp import TopologicalDPSolver


def _reverse_grid_order(h, w):
    return [(i, j) for i in reversed(range(h)) for j in reversed(range(w))]


class HungryWalker(TopologicalRules):
    """
    Walk from (0, 0) to (h-1, w-1) moving right or down, gaining a[i][j]
    and paying p[i + j] on each cell.  Value: coins needed on arrival.
    """

    def __init__(self, a, p):
        self.a = a
        self.p = p
        self.h = len(a)
        self.w = len(a[0])

    def nodes_in_order(self):
        return _reverse_grid_order(self.h, self.w)

    def next_nodes(self, node):
        i, j = node
        return [(i + 1, j), (i, j + 1)]

    def calculate_value(self, node, next_values):
        i, j = node
        gain = self.a[i][j] - self.p[i + j]
        if node == (self.h - 1, self.w - 1):
            return max(0, -gain)
        return max(0, min(next_values) - gain)

    def boundary_value(self):
        return 10**18


class PathCounter(TopologicalRules):
    def __init__(self, h, w):
        self.h = h
        self.w = w

    def nodes_in_order(self):
        return _reverse_grid_order(self.h, self.w)

    def next_nodes(self, node):
        i, j = node
        return [(i + 1, j), (i, j + 1)]

    def calculate_value(self, node, next_values):
        if node == (self.h - 1, self.w - 1):
            return 1
        return next_values[0] + next_values[1]

    def boundary_value(self):
        return 0


def test_hungry_walker():
    problem = HungryWalker(a=[[3, 2], [4, 1]], p=[1, 3, 6])
    table = TopologicalDPSolver().solve(problem)
    assert table[(0, 0)] == 2


def test_path_counting():
    assert TopologicalDPSolver().solve(PathCounter(2, 2))[(0, 0)] == 2
    assert TopologicalDPSolver().solve(PathCounter(3, 3))[(0, 0)] == 6


def test_boundary_nodes_not_stored():
    table = TopologicalDPSolver().solve(PathCounter(2, 3))
    assert len(table) == 6
    assert (2, 0) not in table


def test_repeated_node_rejected():
    class Repeating(PathCounter):
        def nodes_in_order(self):
            order = super().nodes_in_order()
            return order + order[-1:]

    with pytest.raises(KeyError):
        TopologicalDPSolver().solve(Repeating(2, 2))
