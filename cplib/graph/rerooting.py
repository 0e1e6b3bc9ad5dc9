"""
AllDirectionTreeDP — re-rooting DP: the tree DP value for every root.

Two passes over a tree rooted at node 0:

1. Bottom-up: ``down[v] = add_root(merge(down[c] for each child c))``.
2. Top-down: each node sees its parent side as one more neighbor value
   (``from_parent``).  Prefix and suffix folds over the neighbor list give
   "all neighbors except i" in O(1), which becomes the ``from_parent`` of
   neighbor i.

Total work is O(n).  ``merge`` must be associative with ``identity`` as its
neutral element.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

logger = logging.getLogger(__name__)


class AllDirectionTreeDP:
    """
    Parameters
    ----------
    n : number of nodes, labelled ``0 .. n-1``
    edges : undirected ``(u, v)`` pairs forming a tree
    identity : neutral element of ``merge``
    merge : associative fold of two neighbor aggregates
    add_root : finishing transform applied once a node's neighbors are merged

    The input must be a connected acyclic graph; this is not checked.
    """

    def __init__(
        self,
        n: int,
        edges: Sequence[tuple[int, int]],
        identity: Any,
        merge: Callable[[Any, Any], Any],
        add_root: Callable[[Any], Any],
    ) -> None:
        self.n = n
        self.identity = identity
        self.merge = merge
        self.add_root = add_root
        self.graph: list[list[int]] = [[] for _ in range(n)]
        for u, v in edges:
            self.graph[u].append(v)
            self.graph[v].append(u)

    # ── Public API ─────────────────────────────────────────────────

    def solve(self) -> list[Any]:
        """Return the DP value of the whole tree rooted at each node."""
        if self.n == 0:
            return []

        order, parent = self._preorder()
        down = self._collect_down(order, parent)
        ans = self._reroot(order, parent, down)

        logger.debug("Re-rooted tree DP over %d nodes", self.n)
        return ans

    # ── Passes ─────────────────────────────────────────────────────

    def _preorder(self) -> tuple[list[int], list[int]]:
        """DFS pre-order from node 0 with each node's parent (-1 at root)."""
        parent = [-1] * self.n
        order: list[int] = []
        stack = [0]
        while stack:
            v = stack.pop()
            order.append(v)
            for to in reversed(self.graph[v]):
                if to != parent[v]:
                    parent[to] = v
                    stack.append(to)
        return order, parent

    def _collect_down(self, order: list[int], parent: list[int]) -> list[Any]:
        down = [self.identity] * self.n
        for v in reversed(order):
            acc = self.identity
            for to in self.graph[v]:
                if to != parent[v]:
                    acc = self.merge(acc, down[to])
            down[v] = self.add_root(acc)
        return down

    def _reroot(
        self, order: list[int], parent: list[int], down: list[Any]
    ) -> list[Any]:
        ans = [self.identity] * self.n
        from_parent = [self.identity] * self.n

        for v in order:
            neighbors = self.graph[v]
            deg = len(neighbors)
            values = [
                from_parent[v] if to == parent[v] else down[to] for to in neighbors
            ]

            prefix = [self.identity] * (deg + 1)
            for i in range(deg):
                prefix[i + 1] = self.merge(prefix[i], values[i])
            suffix = [self.identity] * (deg + 1)
            for i in range(deg - 1, -1, -1):
                suffix[i] = self.merge(values[i], suffix[i + 1])

            ans[v] = self.add_root(prefix[deg])

            for i, to in enumerate(neighbors):
                if to == parent[v]:
                    continue
                without = self.merge(prefix[i], suffix[i + 1])
                from_parent[to] = self.add_root(without)

        return ans
