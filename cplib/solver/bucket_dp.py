"""
BucketEngine — rank-bucketed DAG DP over plain child values.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from cplib.core.rules import DagRules
from cplib.core.table import DPTable
from cplib.solver.discovery import Direction, build_plan
from cplib.solver.interface import EngineInterface
from cplib.solver.pull_dp import evaluate_plan


class BucketEngine(EngineInterface):
    """
    Discovers the states reachable from the roots, groups them by rank,
    and evaluates bucket by bucket in ascending rank order.
    """

    def solve(self, rules: DagRules, roots: Iterable[Hashable]) -> DPTable:
        plan = build_plan(
            roots,
            rules.rank,
            rules.neighbors,
            Direction.PULL,
            check_ranks=self.config.check_ranks,
        )
        return evaluate_plan(
            plan,
            lambda state, children: rules.combine(
                state, [child.value for child in children]
            ),
        )
