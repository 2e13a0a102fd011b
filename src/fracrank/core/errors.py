from __future__ import annotations

from enum import Enum


class RankErrorKind(str, Enum):
    config = "config"
    invalid_rank = "invalid_rank"
    overflow = "overflow"
    underflow = "underflow"


class RankError(Exception):
    """Base error for every rank operation failure.

    Each subclass is pinned to one ``RankErrorKind`` so callers can either
    catch the concrete class or switch on ``exc.kind``.
    """

    kind: RankErrorKind


class ConfigError(RankError):
    """Engine constructed with a precision limit <= 0."""

    kind = RankErrorKind.config


class InvalidRankError(RankError):
    """Rank contains a symbol outside the alphabet."""

    kind = RankErrorKind.invalid_rank


class RankOverflowError(RankError):
    """Rank is already at or beyond the representable maximum."""

    kind = RankErrorKind.overflow


class RankUnderflowError(RankError):
    """Rank is already at or beyond the representable minimum."""

    kind = RankErrorKind.underflow
