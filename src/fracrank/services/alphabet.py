from __future__ import annotations

from typing import Dict

from fracrank.core.errors import InvalidRankError


# Rank digits are 0~9 then A~Z. The alphabet is in ASCII order, so native
# string ordering of canonical ranks agrees with the comparator.
DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE = len(DIGITS)

RANK_MIN = DIGITS[0]
RANK_MAX = DIGITS[-1]

_VALUES: Dict[str, int] = {ch: i for i, ch in enumerate(DIGITS)}


def digit_value(symbol: str) -> int:
    return _VALUES[symbol]


def digit_symbol(value: int) -> str:
    return DIGITS[value]


def is_valid_rank(*ranks: str) -> bool:
    """True if every character of every given rank belongs to the alphabet."""
    return all(ch in _VALUES for rank in ranks for ch in rank)


def validate_rank(rank: str) -> str:
    if not is_valid_rank(rank):
        raise InvalidRankError(f"Invalid digit input. Allowed digits: {DIGITS}")
    return rank


def canonicalize(rank: str) -> str:
    """Strip insignificant trailing minimum digits ("B00" -> "B", "000" -> "")."""
    return rank.rstrip(RANK_MIN)
