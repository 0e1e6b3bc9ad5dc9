"""
Boundary binary search on a monotone predicate.
"""

from __future__ import annotations

from collections.abc import Callable


def binary_search(ng: int, ok: int, pred: Callable[[int], bool]) -> int:
    """
    Find the boundary between *ng* and *ok*.

    ``pred(ok)`` is assumed true and ``pred(ng)`` false, with the predicate
    monotone in between; either end may be the larger one.  Returns the
    value closest to *ng* for which ``pred`` holds.

    >>> binary_search(-1, 100, lambda x: x * x >= 50)
    8
    """
    while abs(ng - ok) > 1:
        mid = (ng + ok) // 2
        if pred(mid):
            ok = mid
        else:
            ng = mid
    return ok
