from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol, runtime_checkable

from fracrank.core.config import get_settings
from fracrank.core.errors import ConfigError
from fracrank.services import batch, compare, stepper
from fracrank.services.insert import insert as insert_between

logger = logging.getLogger(__name__)


@runtime_checkable
class RankScheme(Protocol):
    """Operations an ordering layer needs from a rank implementation."""

    def new_ranks(self, length: int) -> List[str]: ...

    def new_ranks_between(self, start: str, end: str, length: int) -> List[str]: ...

    def prev(self, curr: str) -> str: ...

    def next(self, curr: str) -> str: ...

    def insert(self, prev: str, next: str) -> str: ...

    def equal(self, a: str, b: str) -> bool: ...

    def less(self, a: str, b: str) -> bool: ...

    def greater(self, a: str, b: str) -> bool: ...


@dataclass(frozen=True)
class RankEngine:
    """Rank arithmetic at a fixed stepping precision.

    ``limit`` is the only state and cannot change after construction, so one
    engine can be shared between threads. ``insert``, the comparisons and the
    batch generators trust their input; only ``next`` and ``prev`` validate.
    """

    limit: int

    def __post_init__(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit <= 0:
            raise ConfigError(f"bad initialization param. limit <= 0 (got {self.limit!r})")
        logger.debug("rank engine ready (limit=%d)", self.limit)

    def new_ranks(self, length: int) -> List[str]:
        return batch.ranks(length)

    def new_ranks_between(self, start: str, end: str, length: int) -> List[str]:
        return batch.ranks_between(start, end, length)

    def prev(self, curr: str) -> str:
        return stepper.predecessor(curr, self.limit)

    def next(self, curr: str) -> str:
        return stepper.successor(curr, self.limit)

    def insert(self, prev: str, next: str) -> str:
        return insert_between(prev, next)

    def equal(self, a: str, b: str) -> bool:
        return compare.equal(a, b)

    def less(self, a: str, b: str) -> bool:
        return compare.less(a, b)

    def greater(self, a: str, b: str) -> bool:
        return compare.greater(a, b)


def new_engine(limit: int) -> RankEngine:
    return RankEngine(limit=limit)


def default_engine() -> RankEngine:
    """Engine built from the RANK_LIMIT setting."""
    return RankEngine(limit=get_settings().rank_limit)
