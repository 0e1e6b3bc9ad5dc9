"""
Rules — abstract problem definitions consumed by the DP engines.

Design: Strategy pattern.  A caller describes one DP problem by subclassing
the matching rules class; the engines own discovery, evaluation order and
memoization.  Any problem data the rules need lives on the rules instance
itself, so every method sees it through ``self``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, NamedTuple


class ChildRef(NamedTuple):
    """A dependency state paired with its already-computed value."""

    state: Hashable
    value: Any


# ── Rank-ordered DAG rules ─────────────────────────────────────────

class DagRules(ABC):
    """
    Pull-style DAG DP where ``combine`` sees only the child values.

    Every neighbor returned for a state must have a strictly smaller rank.
    """

    @abstractmethod
    def rank(self, state: Hashable) -> int:
        ...

    @abstractmethod
    def neighbors(self, state: Hashable) -> Sequence[Hashable]:
        """Dependency states of *state*."""
        ...

    @abstractmethod
    def combine(self, state: Hashable, child_values: list[Any]) -> Any:
        """
        Compute the value of *state* from its children's values,
        supplied in the order ``neighbors`` returned them.
        """
        ...


class PullRules(ABC):
    """
    Pull-style DP with optional base values.

    Attributes are the same as :class:`DagRules`, but ``combine`` receives
    ``ChildRef`` pairs so it can inspect the child states too.
    """

    @abstractmethod
    def rank(self, state: Hashable) -> int:
        """Integer rank with ``rank(child) < rank(parent)``."""
        ...

    @abstractmethod
    def neighbors(self, state: Hashable) -> Sequence[Hashable]:
        """Children of *state* (the lower-rank side)."""
        ...

    @abstractmethod
    def combine(self, state: Hashable, children: list[ChildRef]) -> Any:
        ...

    def base(self, state: Hashable) -> Any | None:
        """Return a fixed value for boundary states, or None to combine."""
        return None


class PushRules(ABC):
    """
    Push-style DP: values are distributed forward to higher-rank states
    and folded with a commutative monoid (``identity`` / ``op``).
    """

    @abstractmethod
    def rank(self, state: Hashable) -> int:
        ...

    @abstractmethod
    def successors(self, state: Hashable) -> Sequence[Hashable]:
        """States *state* pushes to; each must have a larger rank."""
        ...

    @abstractmethod
    def identity(self) -> Any:
        ...

    @abstractmethod
    def op(self, acc: Any, add: Any) -> Any:
        ...

    @abstractmethod
    def init(self, state: Hashable) -> Any | None:
        """Starting value for sources; None for every other state."""
        ...

    @abstractmethod
    def trans(self, src: Hashable, dst: Hashable, value: Any) -> Any:
        """Contribution sent along the edge ``src -> dst``."""
        ...


# ── Other engines ──────────────────────────────────────────────────

class DigitRules(ABC):
    """Problem definition for digit DP counting."""

    @abstractmethod
    def init(self) -> Hashable:
        ...

    @abstractmethod
    def transition(
        self, i: int, tight: bool, state: Hashable, lim: int
    ) -> Iterable[tuple[int, Hashable]]:
        """
        Possible ``(digit, next_state)`` pairs at position *i*.

        *lim* is the largest digit allowed at this position (0-9).
        """
        ...

    @abstractmethod
    def is_accept(self, state: Hashable) -> bool:
        ...


class TopologicalRules(ABC):
    """DP whose evaluation order is known up front (e.g. grid DP)."""

    @abstractmethod
    def nodes_in_order(self) -> Iterable[Hashable]:
        """
        All nodes, dependencies first, each exactly once.

        A repeated node makes the solver raise KeyError, since table
        values are final once written.
        """
        ...

    @abstractmethod
    def next_nodes(self, node: Hashable) -> Sequence[Hashable]:
        ...

    @abstractmethod
    def calculate_value(self, node: Hashable, next_values: list[Any]) -> Any:
        ...

    @abstractmethod
    def boundary_value(self) -> Any:
        """Value read for a next node that has no table entry."""
        ...


class Searchable(ABC):
    """State-space search problem for :class:`MemoizedDFS`."""

    @abstractmethod
    def successors(self, node: Hashable) -> Sequence[Hashable]:
        ...

    @abstractmethod
    def is_goal(self, node: Hashable) -> bool:
        ...

    @abstractmethod
    def collect(self, node: Hashable) -> Any:
        """Turn a goal node into an answer."""
        ...


class BestSearchable(Searchable):
    """Search problem that keeps only the best goal answer."""

    @abstractmethod
    def is_better(self, new: Any, old_best: Any) -> bool:
        ...
