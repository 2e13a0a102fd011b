from __future__ import annotations

import logging
from typing import List

from fracrank.core.errors import InvalidRankError, RankOverflowError, RankUnderflowError
from fracrank.services.alphabet import (
    BASE,
    DIGITS,
    RANK_MAX,
    RANK_MIN,
    canonicalize,
    digit_symbol,
    digit_value,
    validate_rank,
)
from fracrank.services.compare import greater, less

logger = logging.getLogger(__name__)


def _checked(curr: str) -> str:
    """Validate ``curr`` against the alphabet and the single-digit bounds.

    The bounds are the one-symbol ranks "0" and "Z", not length-aware
    ceilings: "Z" itself passes while "ZZ" overflows.
    """
    try:
        validate_rank(curr)
    except InvalidRankError:
        logger.debug("rejecting rank %r: invalid symbol", curr)
        raise
    if greater(curr, RANK_MAX):
        logger.debug("rejecting rank %r: above %s", curr, RANK_MAX)
        raise RankOverflowError(f"Rank overflow. Maximum value: {RANK_MAX}")
    if less(curr, RANK_MIN) or curr == "":
        logger.debug("rejecting rank %r: below %s", curr, RANK_MIN)
        raise RankUnderflowError(f"Rank underflow. Minimum value: {RANK_MIN}")
    return canonicalize(curr)


def successor(curr: str, limit: int) -> str:
    """Smallest step above ``curr`` at ``limit`` digits of precision.

    A rank shorter than the limit is extended to ``limit`` digits ending in
    "1" (think "A" -> "A000000001"). A rank already at the limit is
    incremented in place as a base-36 integer.
    """
    curr = _checked(curr)
    if len(curr) < limit:
        return curr.ljust(limit - 1, RANK_MIN) + DIGITS[1]

    digits: List[int] = [digit_value(ch) for ch in curr]
    carry = 1
    for index in range(len(digits) - 1, -1, -1):
        carry, digits[index] = divmod(digits[index] + carry, BASE)
        if not carry:
            break
    if carry:
        # Every digit rolled over: curr is "Z" at a one digit limit
        raise RankOverflowError(f"Rank overflow. Maximum value: {RANK_MAX}")
    return canonicalize("".join(digit_symbol(d) for d in digits))


def predecessor(curr: str, limit: int) -> str:
    """Largest step below ``curr`` at ``limit`` digits of precision.

    The canonical form never ends in "0", so lowering its last digit by one
    never needs a borrow. Shorter ranks are then padded with "Z" up to the
    limit (think "CAD" -> "CACZZZZZZZ").
    """
    curr = _checked(curr)
    if curr == "":
        # All minimum digits, e.g. "000": nothing sorts below it
        raise RankUnderflowError(f"Rank underflow. Minimum value: {RANK_MIN}")

    lowered = curr[:-1] + digit_symbol(digit_value(curr[-1]) - 1)
    if len(curr) < limit:
        return lowered.ljust(limit, RANK_MAX)
    return canonicalize(lowered)
