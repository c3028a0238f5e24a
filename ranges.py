"""
Integer ranges.

``Range`` is an immutable half-open interval over the signed 64-bit
domain that hands out a fresh finite cursor on every request.
"""

from typing import Iterator, Optional

from cursors import FiniteCursor
from models import ExhaustedError, InvalidRangeError
from utils import add_exact, check_int64, require_present, subtract_exact


def _check_bound(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Range: {name} must be an int, got {type(value).__name__}")
    return check_int64(value, f"Range {name}")


class RangeCursor(FiniteCursor[int]):
    """Finite cursor stepping by one from a range's min() up to its end()"""

    def __init__(self, start: int, end: int):
        self._current = start
        self._end = end

    def has_more(self) -> bool:
        return self._current < self._end

    def advance(self) -> int:
        if not self.has_more():
            raise ExhaustedError(f"range cursor reached its end ({self._end})", "Range.cursor")
        value = self._current
        self._current = add_exact(self._current, 1, "Range.cursor")
        return value


class Range:
    """Half-open integer interval ``[start_inclusive, end_exclusive)``.

    ``Range(end)`` starts at 1, ``Range(start, end)`` is half-open and
    ``Range.closed(start, end)`` includes ``end``. The interval must hold at
    least one value.
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start_or_end: int, end_exclusive: Optional[int] = None):
        require_present("Range", start_or_end=start_or_end)
        if end_exclusive is None:
            start_inclusive, end_exclusive = 1, start_or_end
        else:
            start_inclusive = start_or_end
        self._start = _check_bound("start_inclusive", start_inclusive)
        self._end = _check_bound("end_exclusive", end_exclusive)

        if self.max() < self.min():
            raise InvalidRangeError(f"Range: {self.min()} > {self.max()}", "Range")

    @classmethod
    def closed(cls, start_inclusive: int, end_inclusive: int) -> "Range":
        require_present("Range.closed", start_inclusive=start_inclusive, end_inclusive=end_inclusive)
        end = _check_bound("end_inclusive", end_inclusive)
        return cls(start_inclusive, add_exact(end, 1, "Range.closed"))

    def min(self) -> int:
        return self._start

    def max(self) -> int:
        """Last value in the range; overflows when end() is the 64-bit minimum"""
        return subtract_exact(self._end, 1, "Range.max")

    def end(self) -> int:
        return self._end

    def size(self) -> int:
        return subtract_exact(self._end, self._start, "Range.size")

    def cursor(self) -> RangeCursor:
        """Return a new cursor positioned at min()"""
        return RangeCursor(self._start, self._end)

    def __iter__(self) -> Iterator[int]:
        return self.cursor()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return self._start <= value < self._end

    def __eq__(self, other) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return (self._start, self._end) == (other._start, other._end)

    def __hash__(self) -> int:
        return hash((Range, self._start, self._end))

    def __setattr__(self, name, value):
        if hasattr(self, "_end"):
            raise AttributeError("Range is immutable")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"Range({self._start}, {self._end})"
