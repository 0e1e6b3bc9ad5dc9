"""Tests for the text helpers and binary_search."""

import pytest

from cplib.structures.bit_vec import BitVec
from cplib.utils.search import binary_search
from cplib.utils.text import (
    fmt_bitvec,
    fmt_u2bit,
    format_vec,
    is_palindrome,
    to_base,
    yesno,
)


def test_yesno():
    assert yesno(True) == "Yes"
    assert yesno(False) == "No"


def test_fmt_bitvec():
    assert fmt_bitvec([True, False, True]) == "101"
    assert fmt_bitvec(BitVec.from_int(0b0110, 4)) == "0110"


def test_fmt_u2bit():
    assert fmt_u2bit(5, 4) == "0101"
    assert fmt_u2bit(5) == "0" * 27 + "101"


def test_format_vec():
    assert format_vec([1, 2, 3]) == "1 2 3"
    assert format_vec([]) == ""


@pytest.mark.parametrize(
    "seq, expected",
    [("abba", True), ("abc", False), ("", True), ([1, 2, 1], True)],
)
def test_is_palindrome(seq, expected):
    assert is_palindrome(seq) is expected


@pytest.mark.parametrize(
    "value, base, expected",
    [(255, 16, "ff"), (5, 2, "101"), (0, 7, "0"), (-10, 3, "-101"), (35, 36, "z")],
)
def test_to_base(value, base, expected):
    assert to_base(value, base) == expected


def test_to_base_invalid():
    with pytest.raises(ValueError):
        to_base(10, 1)


def test_binary_search_lower_boundary():
    assert binary_search(-1, 100, lambda x: x * x >= 50) == 8


def test_binary_search_descending():
    """ok below ng: largest x with x * x <= 50."""
    assert binary_search(100, 0, lambda x: x * x <= 50) == 7
