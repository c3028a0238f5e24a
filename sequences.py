"""Example infinite cursors built on the public cursor contract."""

import logging
from numbers import Number
from typing import Optional

from cursors import Cursor, InfiniteCursor
from models import CursorStatistics
from utils import require_present

logger = logging.getLogger(__name__)


class Fibonacci(InfiniteCursor[int]):
    """1, 1, 2, 3, 5, 8, ..."""

    def __init__(self):
        self._current = 1
        self._next = 1

    @property
    def current(self) -> int:
        """The value the next advance() will return"""
        return self._current

    def advance(self) -> int:
        result = self._current
        self._current, self._next = self._next, self._current + self._next
        return result


class StatisticsCursor(InfiniteCursor[Number]):
    """
    Wraps a cursor of numbers and keeps a running count and sum of every
    value pulled through it.

    It behaves as an infinite cursor, so bound it with limit() or
    reduce_until() before reducing. Pulling past the end of a finite
    upstream raises the upstream's ExhaustedError.
    """

    def __init__(self, upstream: Cursor, label: str, description: str = ""):
        require_present("StatisticsCursor", upstream=upstream, label=label)
        self._upstream = upstream
        self.label = label
        self.description = description
        self.count = 0
        self.total = 0.0

    def advance(self):
        value = self._upstream.advance()
        self.count += 1
        self.total += float(value)
        return value

    @property
    def mean(self) -> Optional[float]:
        if self.count == 0:
            return None
        return self.total / self.count

    def report(self) -> CursorStatistics:
        """Summarize what has been pulled so far and log it"""
        stats = CursorStatistics(
            label=self.label,
            description=self.description,
            count=self.count,
            total=self.total,
            mean=self.mean,
        )
        logger.info(f"{self.label} - {self.description}: count={stats.count} "
                    f"total={stats.total} mean={stats.mean}")
        return stats
