"""
TopologicalDPSolver — DP over a caller-supplied evaluation order.

Suited to grid-style DP where the dependency order is known statically
and next nodes may fall outside the table (they read ``boundary_value``).
"""

from __future__ import annotations

import logging

from cplib.core.rules import TopologicalRules
from cplib.core.table import DPTable

logger = logging.getLogger(__name__)


class TopologicalDPSolver:
    """
    Fills a DPTable in the order given by ``nodes_in_order``.

    Complexity is O(N * (D + C)) for N nodes, D next nodes per node and
    C the cost of ``calculate_value``.  Each node must appear once in the
    order; a repeat raises KeyError from the table.
    """

    def solve(self, problem: TopologicalRules) -> DPTable:
        table = DPTable()

        for node in problem.nodes_in_order():
            next_values = [
                table[nxt] if nxt in table else problem.boundary_value()
                for nxt in problem.next_nodes(node)
            ]
            table.set(node, problem.calculate_value(node, next_values))

        logger.debug("Topological DP filled %d nodes", len(table))
        return table
