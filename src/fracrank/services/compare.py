from __future__ import annotations

from functools import cmp_to_key

from fracrank.services.alphabet import canonicalize, digit_value


# Comparisons assume validated input; callers check with is_valid_rank first.


def equal(a: str, b: str) -> bool:
    return canonicalize(a) == canonicalize(b)


def less(a: str, b: str) -> bool:
    if equal(a, b):
        return False
    for ca, cb in zip(a, b):
        if ca != cb:
            return digit_value(ca) < digit_value(cb)
    # One is a prefix of the other. They are not equal, so the longer one
    # carries a nonzero digit past the shared prefix.
    return len(a) < len(b)


def greater(a: str, b: str) -> bool:
    return not equal(a, b) and not less(a, b)


def compare(a: str, b: str) -> int:
    if equal(a, b):
        return 0
    return -1 if less(a, b) else 1


sort_key = cmp_to_key(compare)
