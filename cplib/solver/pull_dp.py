"""
PullEngine — pull-style DAG DP with a reusable evaluation plan.

``prepare`` does the expensive part (state discovery and rank ordering)
once; ``solve_with_plan`` can then evaluate that plan against any rules
object that shares the same state graph.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from cplib.core.rules import ChildRef, PullRules
from cplib.core.table import DPTable
from cplib.solver.discovery import Direction, Plan, build_plan
from cplib.solver.interface import EngineInterface

logger = logging.getLogger(__name__)


def evaluate_plan(
    plan: Plan,
    combine: Callable[[Hashable, list[ChildRef]], Any],
    base: Callable[[Hashable], Any | None] | None = None,
) -> DPTable:
    """
    Walk *plan* in rank order and fill a DPTable.

    Each state takes its ``base`` value when one is given; otherwise its
    children's values are looked up (they must already be final) and
    passed to ``combine``.
    """
    table = DPTable()

    for state in plan.order():
        if base is not None:
            fixed = base(state)
            if fixed is not None:
                table.set(state, fixed)
                continue

        children: list[ChildRef] = []
        for child in plan.neighbors(state):
            if child not in table:
                raise KeyError(
                    f"child DP value must exist before parent: "
                    f"{child!r} is needed by {state!r}"
                )
            children.append(ChildRef(child, table[child]))
        table.set(state, combine(state, children))

    logger.debug("Evaluated %d states", len(table))
    return table


class PullEngine(EngineInterface):
    """
    Engine for :class:`PullRules` problems.
    """

    # ── Public API ─────────────────────────────────────────────────

    def prepare(self, rules: PullRules, roots: Iterable[Hashable]) -> Plan:
        """Discover every state reachable from *roots* and order it."""
        return build_plan(
            roots,
            rules.rank,
            rules.neighbors,
            Direction.PULL,
            check_ranks=self.config.check_ranks,
        )

    def solve_with_plan(self, rules: PullRules, plan: Plan) -> DPTable:
        """Evaluate a prepared plan without rediscovering the graph."""
        return evaluate_plan(plan, rules.combine, rules.base)

    def solve(self, rules: PullRules, roots: Iterable[Hashable]) -> DPTable:
        return self.solve_with_plan(rules, self.prepare(rules, roots))
