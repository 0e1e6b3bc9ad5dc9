"""
MemoizedDFS — depth-first search that visits each state at most once.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from cplib.core.rules import BestSearchable, Searchable

logger = logging.getLogger(__name__)


class MemoizedDFS:
    """
    Pre-order DFS over a :class:`Searchable` problem.

    Successors are explored in the order the problem returns them.  The
    traversal keeps an explicit stack, so deep state spaces do not hit the
    interpreter recursion limit.
    """

    @staticmethod
    def _walk(start: Hashable, problem: Searchable):
        """Yield every reachable node once, in DFS pre-order."""
        visited: set[Hashable] = set()
        stack: list[Hashable] = [start]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            yield node
            stack.extend(reversed(list(problem.successors(node))))

    # ── Public API ─────────────────────────────────────────────────

    @classmethod
    def search(
        cls,
        start: Hashable,
        problem: Searchable,
        return_on_first: bool = False,
    ) -> list[Any]:
        """
        Collect the answer of every reachable goal node.

        When *return_on_first* is set the search stops at the first goal
        and the result holds exactly one answer (or none).
        """
        result: list[Any] = []
        for node in cls._walk(start, problem):
            if problem.is_goal(node):
                result.append(problem.collect(node))
                if return_on_first:
                    break
        logger.debug("DFS from %r found %d goals", start, len(result))
        return result

    @classmethod
    def search_with_best(cls, start: Hashable, problem: BestSearchable) -> Any | None:
        """Return the best goal answer by ``is_better``, or None."""
        best: Any | None = None
        found = False
        for node in cls._walk(start, problem):
            if not problem.is_goal(node):
                continue
            answer = problem.collect(node)
            if not found or problem.is_better(answer, best):
                best = answer
                found = True
        return best
