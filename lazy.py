import reducers
from combinators import filter_cursor, generate, iterate, limit, map_cursor, zip_cursors
from cursors import Cursor, from_iterable, is_infinite
from ranges import Range


class LazyCursor:
    """
    A chainable wrapper around a cursor. Each transformation wraps the
    current cursor in a combinator and returns a new LazyCursor; nothing is
    pulled until a reducing operation runs or you iterate.

    Cursors are single-pass, so a LazyCursor is too: once a chain has been
    reduced or extended, the earlier LazyCursor shares its cursor and
    should not be used again.
    """
    def __init__(self, cursor):
        self._cursor = from_iterable(cursor)

    # --------- sources ----------
    @classmethod
    def of(cls, source):
        return cls(source)

    @classmethod
    def range(cls, start_or_end, end_exclusive=None):
        return cls(Range(start_or_end, end_exclusive).cursor())

    @classmethod
    def closed_range(cls, start_inclusive, end_inclusive):
        return cls(Range.closed(start_inclusive, end_inclusive).cursor())

    @classmethod
    def iterate(cls, seed, fn):
        return cls(iterate(seed, fn))

    @classmethod
    def generate(cls, supplier):
        return cls(generate(supplier))

    # --------- chainable operators (lazy) ----------
    def map(self, fn):
        return LazyCursor(map_cursor(self._cursor, fn))

    def filter(self, pred):
        return LazyCursor(filter_cursor(self._cursor, pred))

    def limit(self, n):
        return LazyCursor(limit(self._cursor, n))

    def take(self, n):
        """Alias for limit()"""
        return self.limit(n)

    def zip_with(self, other, fn):
        """Pair this cursor with another; other may be a LazyCursor, cursor or iterable"""
        if isinstance(other, LazyCursor):
            other = other.cursor
        return LazyCursor(zip_cursors(fn, self._cursor, other))

    # --------- properties ----------
    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def is_infinite(self) -> bool:
        return is_infinite(self._cursor)

    # --------- reducing operations (force evaluation) ----------
    def to_list(self):
        return reducers.to_list(self._cursor)

    def reduce(self, fn, initial):
        """Fold from the left; infinite chains need limit() or reduce_until()"""
        return reducers.reduce(self._cursor, fn, initial)

    def reduce_until(self, fn, initial, stop):
        return reducers.reduce_until(self._cursor, fn, initial, stop)

    def count(self):
        return reducers.count(self._cursor)

    def join(self, separator=", "):
        return reducers.join_to_string(self._cursor, separator)

    def get(self, index):
        return reducers.get(self._cursor, index)

    def first(self, default=None):
        """Return the first element, or default if there is none"""
        if not self.is_infinite and not self._cursor.has_more():
            return default
        return self._cursor.advance()

    def equals(self, other):
        if isinstance(other, LazyCursor):
            other = other.cursor
        return reducers.equals(self._cursor, other)

    # --------- iterator protocol ----------
    def __iter__(self):
        return iter(self._cursor)
