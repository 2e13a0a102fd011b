from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from fracrank.services.alphabet import DIGITS, RANK_MAX, RANK_MIN
from fracrank.services.compare import equal, greater, less
from fracrank.services.insert import insert

ranks = st.text(alphabet=DIGITS, min_size=1, max_size=8)


@pytest.mark.parametrize(
    "prev, next, expected",
    [
        (RANK_MIN, RANK_MAX, "HI"),
        ("A", "C", "B"),
        ("0", "01", "00I"),
        ("0", "02", "01"),
        ("011", "010", "010I"),
        ("02", "01Y", "01Z"),
        ("7", "B", "9"),
        ("9I", "AI", "A"),
        ("9", "B", "A"),
    ],
)
def test_insert_between(prev, next, expected):
    assert insert(prev, next) == expected


@pytest.mark.parametrize(
    "prev, next, expected",
    [("B", "B", "B"), ("B", "B00", "B"), ("B000", "B", "B"), ("B0", "B00", "B0")],
)
def test_insert_between_equal_ranks_keeps_shorter_spelling(prev, next, expected):
    assert insert(prev, next) == expected


def test_insert_ignores_argument_order():
    assert insert("C", "A") == insert("A", "C")


@given(ranks, ranks)
def test_insert_stays_within_bounds(a, b):
    lo, hi = (a, b) if less(a, b) else (b, a)
    rank = insert(a, b)
    assert set(rank) <= set(DIGITS)
    if equal(a, b):
        assert rank in (a, b)
    else:
        assert greater(rank, lo)
        assert less(rank, hi)


@given(ranks, ranks)
def test_repeated_bisection_never_escapes(a, b):
    lo, hi = (a, b) if less(a, b) else (b, a)
    for _ in range(20):
        mid = insert(lo, hi)
        assert not less(mid, lo)
        assert not greater(mid, hi)
        hi = mid
