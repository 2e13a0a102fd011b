from __future__ import annotations

from typing import List

from fracrank.services.alphabet import BASE, canonicalize, digit_symbol, digit_value


def _digit_at(rank: str, index: int) -> int:
    return digit_value(rank[index]) if index < len(rank) else 0


def _carry_back(digits: List[int]) -> None:
    # Add one to the emitted digits, rolling Z over to 0 while moving left.
    for index in range(len(digits) - 1, -1, -1):
        if digits[index] + 1 < BASE:
            digits[index] += 1
            return
        digits[index] = 0


def average(lo: str, hi: str) -> str:
    """Exact base-36 mean of two ranks, computed digit by digit.

    Each position emits ``sum // 2`` where ``sum`` is both digits plus the
    half unit left over from the previous position. An odd sum leaves half a
    unit, worth ``BASE`` at the next position. The emitted digit can exceed
    the base by at most one, in which case the overflow is pushed back into
    the digits already emitted.

    The caller guarantees ``lo <= hi``. The result is strictly between them
    unless they are canonically equal.
    """
    digits: List[int] = []
    remain = 0
    width = max(len(lo), len(hi))
    index = 0
    while index < width or remain != 0:
        total = _digit_at(lo, index) + _digit_at(hi, index) + remain
        curr = total // 2
        if curr >= BASE:
            # total < 3 * BASE, so a single BASE carries over
            _carry_back(digits)
            curr -= BASE
        digits.append(curr)
        remain = (total % 2) * BASE
        index += 1
    return canonicalize("".join(digit_symbol(d) for d in digits))
