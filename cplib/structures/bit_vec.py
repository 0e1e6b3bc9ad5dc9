"""
BitVec — a fixed-length bit string backed by an int.

Bits are indexed from the most significant end: index 0 is the leftmost
character of ``str(bv)``.  Values are immutable and hashable, so they can
serve directly as DP states.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import IO


class BitVec:
    """
    An n-bit vector.  Arithmetic wraps modulo ``2**n``.

    Attributes
    ----------
    n : int
        Bit length.
    """

    __slots__ = ("_data", "n")

    def __init__(self, n: int, data: int = 0) -> None:
        if n < 0:
            raise ValueError(f"Bit length must be non-negative, got {n}.")
        self.n = n
        self._data = data & ((1 << n) - 1)

    # ── Constructors ───────────────────────────────────────────────

    @classmethod
    def from_int(cls, data: int, n: int) -> BitVec:
        """Build an n-bit vector from *data*, dropping higher bits."""
        return cls(n, data)

    @classmethod
    def unit(cls, i: int, n: int) -> BitVec:
        """Vector with only bit *i* set."""
        if not 0 <= i < n:
            raise IndexError(f"Bit {i} out of range for length {n}.")
        return cls(n, 1 << (n - 1 - i))

    @classmethod
    def mask(cls, n: int) -> BitVec:
        """Vector with every bit set."""
        return cls(n, (1 << n) - 1)

    @staticmethod
    def all(n: int) -> BitVecRange:
        """Every n-bit vector in ascending numeric order."""
        return BitVecRange(n)

    # ── Access ─────────────────────────────────────────────────────

    def to_int(self) -> int:
        return self._data

    def get(self, i: int) -> bool:
        if not 0 <= i < self.n:
            raise IndexError(f"Bit {i} out of range for length {self.n}.")
        return (self._data >> (self.n - 1 - i)) & 1 == 1

    def set(self, i: int, value: int) -> BitVec:
        """Return a copy with bit *i* set to *value* (0 or 1)."""
        if not 0 <= i < self.n:
            raise IndexError(f"Bit {i} out of range for length {self.n}.")
        if value not in (0, 1):
            raise ValueError(f"Bit value must be 0 or 1, got {value!r}.")
        bit = 1 << (self.n - 1 - i)
        data = self._data | bit if value else self._data & ~bit
        return BitVec(self.n, data)

    def is_empty(self) -> bool:
        return self.n == 0

    def dump(self, file: IO[str] | None = None) -> None:
        """Write one ``bit i: b`` line per bit."""
        out = file or sys.stdout
        for i, bit in enumerate(self):
            print(f"bit {i:2}: {int(bit)}", file=out)

    # ── Operators ──────────────────────────────────────────────────

    def _check_len(self, other: BitVec) -> None:
        if self.n != other.n:
            raise ValueError(
                f"Bit vectors have different lengths: {self.n} != {other.n}"
            )

    def __add__(self, other: BitVec) -> BitVec:
        self._check_len(other)
        return BitVec(self.n, self._data + other._data)

    def __xor__(self, other: BitVec) -> BitVec:
        self._check_len(other)
        return BitVec(self.n, self._data ^ other._data)

    def __and__(self, other: BitVec) -> BitVec:
        self._check_len(other)
        return BitVec(self.n, self._data & other._data)

    def __or__(self, other: BitVec) -> BitVec:
        self._check_len(other)
        return BitVec(self.n, self._data | other._data)

    # ── Dunder helpers ─────────────────────────────────────────────

    def __iter__(self) -> Iterator[bool]:
        for shift in range(self.n - 1, -1, -1):
            yield (self._data >> shift) & 1 == 1

    def __len__(self) -> int:
        return self.n

    def __int__(self) -> int:
        return self._data

    def __index__(self) -> int:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVec):
            return NotImplemented
        return self.n == other.n and self._data == other._data

    def __hash__(self) -> int:
        return hash((self.n, self._data))

    def __str__(self) -> str:
        return format(self._data, f"0{self.n}b") if self.n else ""

    def __repr__(self) -> str:
        return f"BitVec({str(self)!r})"


class BitVecRange:
    """Iterable over all ``2**n`` vectors of length n, ascending."""

    def __init__(self, n: int) -> None:
        self.n = n

    def __iter__(self) -> Iterator[BitVec]:
        for value in range(1 << self.n):
            yield BitVec(self.n, value)

    def __len__(self) -> int:
        return 1 << self.n
