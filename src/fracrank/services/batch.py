from __future__ import annotations

from typing import List

from fracrank.services.alphabet import RANK_MAX, RANK_MIN
from fracrank.services.insert import insert


def ranks_between(start: str, end: str, length: int) -> List[str]:
    """Generate ``length`` ascending ranks strictly between ``start`` and ``end``.

    The index range is bisected recursively: the middle index takes the
    midpoint of the bounds and each half is filled against that midpoint.
    Output depends only on the arguments, so every caller derives the same
    keys.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return _bisect(0, length, start, end)


def ranks(length: int) -> List[str]:
    return ranks_between(RANK_MIN, RANK_MAX, length)


def _bisect(left: int, right: int, prev_rank: str, next_rank: str) -> List[str]:
    if left == right:
        return []
    index = (left + right) // 2
    rank = insert(prev_rank, next_rank)
    return [
        *_bisect(left, index, prev_rank, rank),
        rank,
        *_bisect(index + 1, right, rank, next_rank),
    ]
