"""
Prefix sums over 1D and 2D arrays with O(1) range queries.

Both classes store the prefix table in a NumPy array.  Float inputs keep
their NumPy dtype.  Integer and bool inputs are widened to Python ints
(object dtype) so sums never wrap at 64 bits; other element types (e.g.
Fraction) are kept as Python objects too.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np


def _scalar(value: Any) -> Any:
    """Unwrap NumPy scalars into plain Python numbers."""
    return value.item() if isinstance(value, np.generic) else value


def _as_table_input(values: Sequence[Any] | np.ndarray) -> np.ndarray:
    """Array view of *values* whose cumulative sum cannot overflow."""
    arr = np.asarray(values)
    if arr.dtype.kind in "biu":
        return arr.astype(object)
    return arr


class CumulativeSum:
    """
    1D prefix sums.

    >>> CumulativeSum([1, 2, 3, 4, 5]).sum(1, 3)
    5
    """

    def __init__(self, values: Sequence[Any] | np.ndarray) -> None:
        arr = _as_table_input(values)
        dtype = arr.dtype if arr.size else np.int64
        self._data = np.zeros(arr.size + 1, dtype=dtype)
        if arr.size:
            np.cumsum(arr, out=self._data[1:])

    def __len__(self) -> int:
        return len(self._data) - 1

    def sum(self, l: int, r: int) -> Any:
        """Sum of the half-open range ``[l, r)``."""
        if not 0 <= l <= r < len(self._data):
            raise IndexError(
                f"Range [{l}, {r}) is invalid for length {len(self)}."
            )
        return _scalar(self._data[r] - self._data[l])


class CumulativeSum2D:
    """
    2D prefix sums over an h × w matrix.

    ``sum(x1, y1, x2, y2)`` covers rows ``[x1, x2)`` and columns
    ``[y1, y2)``.
    """

    def __init__(self, matrix: Sequence[Sequence[Any]] | np.ndarray) -> None:
        arr = _as_table_input(matrix)
        if arr.size == 0:
            self.h, self.w = len(arr), 0
            self._data = np.zeros((self.h + 1, 1), dtype=np.int64)
            return

        self.h, self.w = arr.shape
        self._data = np.zeros((self.h + 1, self.w + 1), dtype=arr.dtype)
        self._data[1:, 1:] = arr.cumsum(axis=0).cumsum(axis=1)

    def sum(self, x1: int, y1: int, x2: int, y2: int) -> Any:
        if not (0 <= x1 <= x2 <= self.h and 0 <= y1 <= y2 <= self.w):
            raise IndexError(
                f"Rectangle [{x1}, {x2}) x [{y1}, {y2}) is invalid "
                f"for shape ({self.h}, {self.w})."
            )
        d = self._data
        return _scalar(d[x2, y2] - d[x1, y2] - d[x2, y1] + d[x1, y1])
