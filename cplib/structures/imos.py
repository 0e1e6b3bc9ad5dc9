"""
Imos method: O(1) range additions, one prefix-sum pass to materialize.

The difference arrays hold Python ints (object dtype), so large weights
accumulate exactly instead of wrapping at 64 bits.
"""

from __future__ import annotations

import numpy as np


def _check_endpoints(*endpoints: int) -> None:
    for e in endpoints:
        if e < 0:
            raise IndexError(f"Range endpoint must be non-negative, got {e}.")


class Imos1D:
    """
    Difference array of length n.

    >>> imos = Imos1D(5)
    >>> imos.add(1, 4, 2)
    >>> imos.add(2, 5, 3)
    >>> imos.build()
    [0, 2, 5, 5, 3]
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self._data = np.zeros(n + 1, dtype=object)

    def add(self, l: int, r: int, x: int) -> None:
        """
        Add *x* on ``[l, r)``.  Endpoints past the array are ignored;
        negative endpoints raise IndexError.
        """
        _check_endpoints(l, r)
        if l < len(self._data):
            self._data[l] += x
        if r < len(self._data):
            self._data[r] -= x

    def build(self) -> list[int]:
        """Return the array with every addition applied."""
        return np.cumsum(self._data)[: self.n].tolist()


class Imos2D:
    """
    2D difference array of shape h × w.

    ``add(x1, y1, x2, y2, x)`` adds *x* on rows ``[x1, x2)`` and columns
    ``[y1, y2)``; corners outside the array are ignored and negative
    coordinates raise IndexError.
    """

    def __init__(self, h: int, w: int) -> None:
        self.h = h
        self.w = w
        self._data = np.zeros((h + 1, w + 1), dtype=object)

    def add(self, x1: int, y1: int, x2: int, y2: int, x: int) -> None:
        _check_endpoints(x1, y1, x2, y2)
        for i, j, sign in ((x1, y1, 1), (x2, y1, -1), (x1, y2, -1), (x2, y2, 1)):
            if i <= self.h and j <= self.w:
                self._data[i, j] += sign * x

    def build(self) -> list[list[int]]:
        acc = self._data.cumsum(axis=1).cumsum(axis=0)
        return acc[: self.h, : self.w].tolist()
