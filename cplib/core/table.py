"""
DPTable — state → value mapping produced by the DP engines.

Values are written once, in evaluation order, and never overwritten.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from typing import Any


class DPTable(Mapping):
    """
    A read-only mapping for callers, single-assignment for engines.
    """

    def __init__(self, initial: Mapping[Hashable, Any] | None = None) -> None:
        self._values: dict[Hashable, Any] = dict(initial) if initial else {}

    # ── Read / Write ───────────────────────────────────────────────

    def __getitem__(self, state: Hashable) -> Any:
        return self._values[state]

    def set(self, state: Hashable, value: Any) -> None:
        """Store *value* for *state*.  Raises KeyError if already set."""
        if state in self._values:
            raise KeyError(f"DP value for {state!r} is already final.")
        self._values[state] = value

    def has(self, state: Hashable) -> bool:
        return state in self._values

    # ── Bulk operations ────────────────────────────────────────────

    def to_dict(self) -> dict[Hashable, Any]:
        """Return a shallow copy as a plain dict."""
        return dict(self._values)

    # ── Dunder helpers ─────────────────────────────────────────────

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, state: object) -> bool:
        return state in self._values

    def __repr__(self) -> str:
        return f"DPTable({len(self._values)} states)"
