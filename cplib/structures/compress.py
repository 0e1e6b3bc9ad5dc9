"""
Coordinate compression: map sorted distinct values to 0 .. k-1.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any


class Compress:
    """
    >>> c = Compress([100, 200, 100, 300])
    >>> c.get(200)
    1
    >>> c.rev(2)
    300
    """

    def __init__(self, values: Iterable[Any]) -> None:
        self._rev: list[Any] = sorted(set(values))
        self._mapping: dict[Hashable, int] = {v: i for i, v in enumerate(self._rev)}

    def get(self, x: Any) -> int:
        """Compressed index of *x*.  Raises KeyError if *x* was not given."""
        if x not in self._mapping:
            raise KeyError(f"Value {x!r} was not compressed.")
        return self._mapping[x]

    def size(self) -> int:
        """Number of distinct values."""
        return len(self._rev)

    def rev(self, i: int) -> Any:
        """Original value at compressed index *i*."""
        return self._rev[i]

    def __len__(self) -> int:
        return len(self._rev)

    def __contains__(self, x: object) -> bool:
        return x in self._mapping
