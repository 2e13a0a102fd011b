from __future__ import annotations

from fracrank.services.alphabet import RANK_MIN, canonicalize
from fracrank.services.compare import equal, greater
from fracrank.services.midpoint import average


def insert(prev: str, next: str) -> str:
    """Return a rank between ``prev`` and ``next`` (argument order is free).

    Canonically equal inputs leave no room to subdivide, so the shorter of the
    two spellings is returned, preferring ``prev`` on a tie.
    """
    if equal(prev, next):
        return next if len(next) < len(prev) else prev
    if greater(prev, next):
        prev, next = next, prev

    for i, (p, n) in enumerate(zip(prev, next)):
        if p != n:
            return prev[:i] + average(prev[i:], next[i:])

    # prev is a prefix of next; the opposite would make them equal or swapped
    return canonicalize(prev + average(RANK_MIN, next[len(prev):]))
