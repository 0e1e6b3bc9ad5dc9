"""
State discovery and rank scheduling shared by the DAG engines.

``discover`` walks the state graph lazily from the roots, and
``schedule`` freezes the rank buckets into an evaluation Plan.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Which way neighbor ranks must move relative to their state."""

    PULL = "pull"  # neighbors are dependencies: lower rank
    PUSH = "push"  # neighbors are successors: higher rank


@dataclass(frozen=True)
class Plan:
    """
    Cached result of discovery, reusable across evaluations.

    Attributes
    ----------
    buckets : ((rank, states), ...) in ascending rank order; states keep
        discovery order inside a bucket.
    adjacency : state → neighbor tuple, in the order the rules returned.
    ranks : state → rank.
    """

    buckets: tuple[tuple[int, tuple[Hashable, ...]], ...]
    adjacency: Mapping[Hashable, tuple[Hashable, ...]]
    ranks: Mapping[Hashable, int]

    def order(self) -> Iterator[Hashable]:
        """Iterate states in evaluation order."""
        for _rank, states in self.buckets:
            yield from states

    def neighbors(self, state: Hashable) -> tuple[Hashable, ...]:
        return self.adjacency.get(state, ())

    def __len__(self) -> int:
        return len(self.ranks)


def discover(
    roots: Iterable[Hashable],
    rank: Callable[[Hashable], int],
    neighbors: Callable[[Hashable], Sequence[Hashable]],
    direction: Direction,
    check_ranks: bool = True,
) -> tuple[dict[int, list[Hashable]], dict[Hashable, tuple[Hashable, ...]], dict[Hashable, int]]:
    """
    Explore every state reachable from *roots* with an explicit stack.

    ``rank`` is evaluated once per state and ``neighbors`` once per state.

    Returns
    -------
    (buckets, adjacency, ranks)
        buckets maps rank → states in insertion order.
    """
    buckets: dict[int, list[Hashable]] = {}
    adjacency: dict[Hashable, tuple[Hashable, ...]] = {}
    ranks: dict[Hashable, int] = {}

    stack: list[Hashable] = []
    for state in roots:
        if state not in ranks:
            ranks[state] = rank(state)
            buckets.setdefault(ranks[state], []).append(state)
            stack.append(state)

    if not stack:
        logger.debug("No roots given; the plan is empty")

    while stack:
        state = stack.pop()
        state_rank = ranks[state]
        nexts = tuple(neighbors(state))
        adjacency[state] = nexts

        for nxt in nexts:
            if nxt not in ranks:
                ranks[nxt] = rank(nxt)
                buckets.setdefault(ranks[nxt], []).append(nxt)
                stack.append(nxt)
            if check_ranks:
                if direction is Direction.PULL:
                    assert ranks[nxt] < state_rank, (
                        f"rank({nxt!r})={ranks[nxt]} must be below "
                        f"rank({state!r})={state_rank}"
                    )
                else:
                    assert ranks[nxt] > state_rank, (
                        f"rank({nxt!r})={ranks[nxt]} must be above "
                        f"rank({state!r})={state_rank}"
                    )

    logger.debug(
        "Discovered %d states across %d ranks (%s)",
        len(ranks),
        len(buckets),
        direction.value,
    )
    return buckets, adjacency, ranks


def schedule(
    buckets: dict[int, list[Hashable]],
    adjacency: dict[Hashable, tuple[Hashable, ...]],
    ranks: dict[Hashable, int],
) -> Plan:
    """
    Order the buckets by ascending rank and freeze them into a Plan.

    The adjacency and rank maps are exposed as read-only views.
    """
    ordered = tuple((r, tuple(buckets[r])) for r in sorted(buckets))
    return Plan(
        buckets=ordered,
        adjacency=MappingProxyType(adjacency),
        ranks=MappingProxyType(ranks),
    )


def build_plan(
    roots: Iterable[Hashable],
    rank: Callable[[Hashable], int],
    neighbors: Callable[[Hashable], Sequence[Hashable]],
    direction: Direction,
    check_ranks: bool = True,
) -> Plan:
    """Discover from *roots* and schedule the result."""
    return schedule(*discover(roots, rank, neighbors, direction, check_ranks))
