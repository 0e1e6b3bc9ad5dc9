"""
DigitDP — count numbers up to an upper bound that satisfy a digit rule.

The digits are fixed left to right.  ``tight`` tracks whether the prefix
built so far still equals the prefix of the upper bound; while it does,
the next digit is capped by the bound's digit, otherwise by 9.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from cplib.core.config import DigitDPConfig
from cplib.core.rules import DigitRules

logger = logging.getLogger(__name__)


class DigitDP:
    """
    Memoized digit DP.

    Time is O(N * S * 10) and memory O(N * S) for N digits and S distinct
    caller states.  Numbers are counted as fixed-width digit strings, so
    leading zeros are visible to the rules.
    """

    def __init__(self, config: DigitDPConfig | None = None) -> None:
        self.config = config or DigitDPConfig()

    def solve(self, upper: str, rules: DigitRules) -> int:
        """
        Count accepted digit strings ``0 .. upper`` modulo the configured
        modulus.

        Raises ValueError if *upper* contains a non-digit character.
        """
        if not all(c in "0123456789" for c in upper):
            raise ValueError(f"Upper bound {upper!r} must be a decimal numeral.")

        digits = [int(c) for c in upper]
        n = len(digits)
        mod = self.config.modulus
        memo: dict[tuple[int, bool, Hashable], int] = {}

        def dfs(i: int, tight: bool, state: Hashable) -> int:
            if i == n:
                return 1 if rules.is_accept(state) else 0
            key = (i, tight, state)
            if key in memo:
                return memo[key]

            lim = digits[i] if tight else 9
            res = 0
            for d, next_state in rules.transition(i, tight, state, lim):
                res = (res + dfs(i + 1, tight and d == lim, next_state)) % mod

            memo[key] = res
            return res

        result = dfs(0, True, rules.init())
        logger.debug(
            "Digit DP over %d digits used %d memo entries", n, len(memo)
        )
        return result
