"""
Cursor abstraction.

A cursor is a single-pass, pull-based sequence accessor. Finite cursors
answer ``has_more()`` and ``advance()``; infinite cursors only
``advance()`` and are never exhausted. The two are separate base classes
so bounded operations can refuse infinite input with one isinstance check.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, TypeVar

from models import ExhaustedError
from utils import require_present

T = TypeVar("T")

# Marks an empty lookahead slot; None is a legal element
_EMPTY = object()


class Cursor(ABC, Generic[T]):
    """Common base of finite and infinite cursors.

    Cursors are also Python iterators, so they work with ``for`` loops and
    ``itertools``. They cannot be rewound: ``iter(cursor)`` returns the
    cursor itself.
    """

    @abstractmethod
    def advance(self) -> T:
        """Return the next element and move past it"""

    def __iter__(self) -> Iterator[T]:
        return self


class FiniteCursor(Cursor[T]):
    """A cursor guaranteed to run out.

    ``has_more()`` must be side-effect free: calling it any number of
    times between advances returns the same answer and consumes nothing.
    """

    @abstractmethod
    def has_more(self) -> bool:
        """Return True if advance() would produce an element"""

    def __next__(self) -> T:
        if not self.has_more():
            raise StopIteration
        return self.advance()


class InfiniteCursor(Cursor[T]):
    """A cursor with no end: every advance() succeeds."""

    def __next__(self) -> T:
        return self.advance()


def is_infinite(cursor: Cursor) -> bool:
    return isinstance(cursor, InfiniteCursor)


class IterableCursor(FiniteCursor[T]):
    """Finite cursor over any Python iterable.

    The underlying iterator is only touched to fill a one-element lookahead
    slot, which makes has_more() idempotent even for one-shot iterators
    such as generators.
    """

    def __init__(self, values: Iterable[T]):
        self._iterator = iter(values)
        self._pending = _EMPTY
        self._done = False

    def _fill(self) -> None:
        if self._pending is _EMPTY and not self._done:
            try:
                self._pending = next(self._iterator)
            except StopIteration:
                self._done = True

    def has_more(self) -> bool:
        self._fill()
        return self._pending is not _EMPTY

    def advance(self) -> T:
        self._fill()
        if self._pending is _EMPTY:
            raise ExhaustedError("iterable cursor has no more elements", "advance")
        value, self._pending = self._pending, _EMPTY
        return value


def from_iterable(values: Iterable[T]) -> Cursor[T]:
    """Adapt an iterable to a cursor; cursors are returned unchanged"""
    require_present("from_iterable", values=values)
    if isinstance(values, Cursor):
        return values
    return IterableCursor(values)
