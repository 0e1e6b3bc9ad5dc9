"""
Small formatting helpers for printing answers.

These return strings; callers print them.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def yesno(flag: bool) -> str:
    return "Yes" if flag else "No"


def fmt_bitvec(bits: Iterable[bool]) -> str:
    """Render a sequence of bits as ``"0101"``."""
    return "".join("1" if b else "0" for b in bits)


def fmt_u2bit(bits: int, width: int = 30) -> str:
    """Low *width* bits of an int, most significant first."""
    return "".join("1" if (bits >> i) & 1 else "0" for i in range(width - 1, -1, -1))


def format_vec(values: Iterable[Any]) -> str:
    """Space-separated values, e.g. ``"1 2 3"``."""
    return " ".join(str(v) for v in values)


def is_palindrome(seq: Sequence[Any]) -> bool:
    return all(seq[i] == seq[-1 - i] for i in range(len(seq) // 2))


def to_base(value: int, base: int) -> str:
    """
    Render *value* in *base* (2-36) with lowercase digits.

    >>> to_base(255, 16)
    'ff'
    """
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"Base must be in 2..{len(_DIGITS)}, got {base}.")
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    value = abs(value)
    out: list[str] = []
    while value:
        value, d = divmod(value, base)
        out.append(_DIGITS[d])
    return sign + "".join(reversed(out))
