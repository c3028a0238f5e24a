"""
Lazy cursor combinators.

Every factory here validates its arguments up front and returns a new
cursor wrapping its input(s). Nothing is pulled from upstream until the
returned cursor is queried, and each query pulls the minimum it needs.
The returned cursor owns its upstream: advance only the outer cursor once
it has been wrapped.

Finiteness is preserved where it can be: mapping or filtering an
infinite cursor gives an infinite cursor, ``limit`` always gives a finite
one, and zipping is infinite only when both sides are.
"""

import logging
from typing import Callable, Iterable, TypeVar, Union

from cursors import Cursor, FiniteCursor, InfiniteCursor, from_iterable
from models import ExhaustedError, NegativeLimitError
from utils import require_present

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
X = TypeVar("X")
Y = TypeVar("Y")

Source = Union[Cursor[T], Iterable[T]]

_EMPTY = object()


# ---------- map ----------

class MapCursor(FiniteCursor[R]):
    def __init__(self, upstream: FiniteCursor, fn: Callable):
        self._upstream = upstream
        self._fn = fn

    def has_more(self) -> bool:
        return self._upstream.has_more()

    def advance(self):
        return self._fn(self._upstream.advance())


class InfiniteMapCursor(InfiniteCursor[R]):
    def __init__(self, upstream: InfiniteCursor, fn: Callable):
        self._upstream = upstream
        self._fn = fn

    def advance(self):
        return self._fn(self._upstream.advance())


def map_cursor(cursor: Source, fn: Callable[[T], R]) -> Cursor[R]:
    """Apply fn to each element as it is pulled"""
    require_present("map", cursor=cursor, fn=fn)
    cursor = from_iterable(cursor)
    logger.debug(f"map over {type(cursor).__name__}")
    if isinstance(cursor, InfiniteCursor):
        return InfiniteMapCursor(cursor, fn)
    return MapCursor(cursor, fn)


# ---------- filter ----------

class FilterCursor(FiniteCursor[T]):
    """Finite filter with a one-element lookahead slot.

    The slot holds the next matching element. It is filled on demand, by
    whichever of has_more() or advance() runs first after the previous
    element was handed out, and emptied only by advance(). Once filled,
    has_more() just inspects it, so polling it repeatedly never pulls
    from upstream again.
    """

    def __init__(self, upstream: FiniteCursor, predicate: Callable):
        self._upstream = upstream
        self._predicate = predicate
        self._pending = _EMPTY
        self._done = False

    def _find_next(self):
        while self._upstream.has_more():
            value = self._upstream.advance()
            if self._predicate(value):
                return value
        return _EMPTY

    def _fill(self) -> None:
        if self._pending is _EMPTY and not self._done:
            self._pending = self._find_next()
            self._done = self._pending is _EMPTY

    def has_more(self) -> bool:
        self._fill()
        return self._pending is not _EMPTY

    def advance(self):
        self._fill()
        if self._pending is _EMPTY:
            raise ExhaustedError("filter has no more matching elements", "filter")
        current, self._pending = self._pending, _EMPTY
        return current


class InfiniteFilterCursor(InfiniteCursor[T]):
    """Filter over an infinite cursor; advance() scans until a match."""

    def __init__(self, upstream: InfiniteCursor, predicate: Callable):
        self._upstream = upstream
        self._predicate = predicate

    def advance(self):
        while True:
            value = self._upstream.advance()
            if self._predicate(value):
                return value


def filter_cursor(cursor: Source, predicate: Callable[[T], bool]) -> Cursor[T]:
    """Keep only elements for which predicate holds, in upstream order"""
    require_present("filter", cursor=cursor, predicate=predicate)
    cursor = from_iterable(cursor)
    logger.debug(f"filter over {type(cursor).__name__}")
    if isinstance(cursor, InfiniteCursor):
        return InfiniteFilterCursor(cursor, predicate)
    return FilterCursor(cursor, predicate)


# ---------- limit ----------

class LimitCursor(FiniteCursor[T]):
    def __init__(self, upstream: Cursor, max_size: int):
        self._upstream = upstream
        self._max_size = max_size
        self._count = 0

    def _upstream_has_more(self) -> bool:
        if isinstance(self._upstream, InfiniteCursor):
            return True
        return self._upstream.has_more()

    def has_more(self) -> bool:
        return self._count < self._max_size and self._upstream_has_more()

    def advance(self):
        if self._count >= self._max_size:
            raise ExhaustedError(f"limit of {self._max_size} reached", "limit")
        self._count += 1
        return self._upstream.advance()


def limit(cursor: Source, max_size: int) -> FiniteCursor[T]:
    """Bound any cursor to at most max_size elements.

    This is the only way to turn an infinite cursor into a finite one.
    """
    require_present("limit", cursor=cursor, max_size=max_size)
    if isinstance(max_size, bool) or not isinstance(max_size, int):
        raise TypeError(f"limit: max_size must be an int, got {type(max_size).__name__}")
    if max_size < 0:
        raise NegativeLimitError(f"limit: max_size must not be negative (got {max_size})", "limit")
    cursor = from_iterable(cursor)
    logger.debug(f"limit {type(cursor).__name__} to {max_size}")
    return LimitCursor(cursor, max_size)


# ---------- zip ----------

class ZipCursor(FiniteCursor[R]):
    """Pairs two cursors where at least one is finite; the finite side(s) govern."""

    def __init__(self, fn: Callable, left: Cursor, right: Cursor):
        self._fn = fn
        self._left = left
        self._right = right

    @staticmethod
    def _side_has_more(cursor: Cursor) -> bool:
        if isinstance(cursor, InfiniteCursor):
            return True
        return cursor.has_more()

    def has_more(self) -> bool:
        return self._side_has_more(self._left) and self._side_has_more(self._right)

    def advance(self):
        if not self.has_more():
            raise ExhaustedError("zip: one of the cursors is exhausted", "zip")
        left = self._left.advance()
        right = self._right.advance()
        return self._fn(left, right)


class InfiniteZipCursor(InfiniteCursor[R]):
    def __init__(self, fn: Callable, left: InfiniteCursor, right: InfiniteCursor):
        self._fn = fn
        self._left = left
        self._right = right

    def advance(self):
        left = self._left.advance()
        right = self._right.advance()
        return self._fn(left, right)


def zip_cursors(fn: Callable[[X, Y], R], left: Source, right: Source) -> Cursor[R]:
    """Combine elements pairwise, left before right"""
    require_present("zip", fn=fn, left=left, right=right)
    left = from_iterable(left)
    right = from_iterable(right)
    logger.debug(f"zip {type(left).__name__} with {type(right).__name__}")
    if isinstance(left, InfiniteCursor) and isinstance(right, InfiniteCursor):
        return InfiniteZipCursor(fn, left, right)
    return ZipCursor(fn, left, right)


# ---------- generators ----------

class IterateCursor(InfiniteCursor[T]):
    def __init__(self, seed, fn: Callable):
        self._current = seed
        self._fn = fn

    def advance(self):
        old = self._current
        self._current = self._fn(old)
        return old


def iterate(seed: T, fn: Callable[[T], T]) -> InfiniteCursor[T]:
    """Infinite cursor yielding seed, fn(seed), fn(fn(seed)), ...

    fn is applied after a value is handed out, so the n-th advance calls fn
    exactly n times.
    """
    require_present("iterate", seed=seed, fn=fn)
    return IterateCursor(seed, fn)


class GenerateCursor(InfiniteCursor[T]):
    def __init__(self, supplier: Callable):
        self._supplier = supplier

    def advance(self):
        return self._supplier()


def generate(supplier: Callable[[], T]) -> InfiniteCursor[T]:
    """Infinite cursor returning supplier() on every advance"""
    require_present("generate", supplier=supplier)
    return GenerateCursor(supplier)
