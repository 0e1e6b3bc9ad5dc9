"""
PushEngine — push-style DP propagation over a rank-ordered state graph.

Every state distributes ``trans(s, t, value)`` to each successor ``t``;
contributions arriving at the same state are folded with the rules'
monoid.  Because a state is only read after every lower-rank state has
pushed, its accumulator is complete by the time it propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import Any

from cplib.core.rules import PushRules
from cplib.core.table import DPTable
from cplib.solver.discovery import Direction, Plan, build_plan
from cplib.solver.interface import EngineInterface

logger = logging.getLogger(__name__)


class PushEngine(EngineInterface):
    """
    Engine for :class:`PushRules` problems.

    Same-rank states are processed in discovery order; that order is not
    part of the contract, so ``op`` must be commutative as well as
    associative.
    """

    # ── Public API ─────────────────────────────────────────────────

    def prepare(self, rules: PushRules, sources: Iterable[Hashable]) -> Plan:
        """Discover every state reachable from *sources* and order it."""
        return build_plan(
            sources,
            rules.rank,
            rules.successors,
            Direction.PUSH,
            check_ranks=self.config.check_ranks,
        )

    def propagate(self, rules: PushRules, sources: Iterable[Hashable]) -> DPTable:
        """
        Seed the sources with ``init`` and push values forward in
        ascending rank order.

        States that are neither seeded nor reached by any contribution
        are absent from the result.
        """
        return self.propagate_plan(rules, self.prepare(rules, sources))

    def propagate_plan(self, rules: PushRules, plan: Plan) -> DPTable:
        """Run the propagation over an already prepared plan."""
        acc: dict[Hashable, Any] = {}

        for state in plan.order():
            seed = rules.init(state)
            if seed is not None:
                acc[state] = seed

        pushes = 0
        for state in plan.order():
            value = acc[state] if state in acc else rules.identity()
            for succ in plan.neighbors(state):
                inc = rules.trans(state, succ, value)
                current = acc[succ] if succ in acc else rules.identity()
                acc[succ] = rules.op(current, inc)
                pushes += 1

        logger.debug(
            "Propagated %d contributions over %d states", pushes, len(plan)
        )

        # Emit in evaluation order so iteration over the table is rank-sorted.
        table = DPTable()
        for state in plan.order():
            if state in acc:
                table.set(state, acc[state])
        return table

    def solve(self, rules: PushRules, roots: Iterable[Hashable]) -> DPTable:
        return self.propagate(rules, roots)
