from __future__ import annotations

import pytest
from hypothesis import assume, given, strategies as st

from fracrank.services.alphabet import DIGITS, RANK_MAX, RANK_MIN
from fracrank.services.batch import ranks, ranks_between
from fracrank.services.compare import equal, less

bounds = st.text(alphabet=DIGITS, min_size=1, max_size=6)


def test_full_range_seven():
    assert ranks(7) == ["4DI", "8R", "D4I", "HI", "LVI", "Q9", "UMI"]


def test_between_single_digits():
    assert ranks_between("0", "8", 7) == ["1", "2", "3", "4", "5", "6", "7"]


def test_generation_is_deterministic():
    first = ranks(50)
    second = ranks(50)
    assert first == second
    assert len(first) == 50


def test_empty_and_negative_lengths():
    assert ranks(0) == []
    assert ranks_between("1", "2", 0) == []
    with pytest.raises(ValueError):
        ranks(-1)


def test_large_batch_is_strictly_increasing():
    keys = ranks(1000)
    assert len(keys) == 1000
    assert less(RANK_MIN, keys[0])
    assert less(keys[-1], RANK_MAX)
    assert all(less(a, b) for a, b in zip(keys, keys[1:]))
    # canonical ranks also sort natively, e.g. as a database sort column
    assert sorted(keys) == keys


@given(bounds, bounds, st.integers(min_value=1, max_value=40))
def test_between_is_ordered_and_bounded(a, b, length):
    assume(not equal(a, b))
    start, end = (a, b) if less(a, b) else (b, a)
    keys = ranks_between(start, end, length)
    assert len(keys) == length
    assert less(start, keys[0])
    assert less(keys[-1], end)
    assert all(less(x, y) for x, y in zip(keys, keys[1:]))
