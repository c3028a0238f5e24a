"""
Reducers: operations that pull a cursor to its end (or to a stop
condition) and return a single value.

Bounded reducers refuse infinite cursors. To consume one, wrap it with
``limit`` first or use ``reduce_until`` with a stop predicate.
"""

import logging
import operator
import sys
from typing import Callable, Iterable, List, Optional, TextIO, TypeVar

from combinators import Source, limit, zip_cursors
from cursors import Cursor, InfiniteCursor, from_iterable, is_infinite
from models import (
    CursorError,
    CursorSettings,
    IndexOutOfRangeError,
    UnsupportedInfiniteSourceError,
)
from utils import require_present

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _reject_infinite(operation: str, cursor: Cursor) -> None:
    if is_infinite(cursor):
        raise UnsupportedInfiniteSourceError(
            f"{operation}: infinite cursors are not supported here; "
            f"wrap the cursor with limit() or use reduce_until()",
            operation
        )


def reduce_iterable(values: Iterable[T], combine: Callable[[R, T], R], init: R) -> R:
    """Fold any Python iterable from the left, starting with init"""
    require_present("reduce", values=values, combine=combine, init=init)
    result = init
    for value in values:
        result = combine(result, value)
    return result


def reduce(cursor: Source, combine: Callable[[R, T], R], init: R) -> R:
    """Fold a finite cursor from the left, starting with init.

    Plain iterables are folded with reduce_iterable. Infinite cursors raise
    UnsupportedInfiniteSourceError.

    Note: only cursors that derive from InfiniteCursor are recognized as
    infinite. A FiniteCursor whose has_more() never turns false will make
    this call loop forever.
    """
    require_present("reduce", cursor=cursor, combine=combine, init=init)
    if not isinstance(cursor, Cursor):
        return reduce_iterable(cursor, combine, init)
    _reject_infinite("reduce", cursor)

    logger.debug(f"reduce over {type(cursor).__name__}")
    result = init
    try:
        while cursor.has_more():
            result = combine(result, cursor.advance())
    except CursorError as e:
        logger.debug(f"reduce failed with {e.kind.value}: {e.message}")
        raise
    return result


def reduce_until(cursor: Source, combine: Callable[[R, T], R], init: R,
                 stop: Callable[[R], bool]) -> R:
    """Fold until stop(result) is true.

    stop is checked after every combination and the first result it
    accepts is returned. A finite cursor also ends the fold when it runs
    out. On an infinite cursor the call only returns once stop holds;
    choosing a predicate that eventually does is up to the caller.
    """
    require_present("reduce_until", cursor=cursor, combine=combine, init=init, stop=stop)
    cursor = from_iterable(cursor)
    bounded = not isinstance(cursor, InfiniteCursor)

    logger.debug(f"reduce_until over {type(cursor).__name__}")
    result = init
    steps = 0
    try:
        while not bounded or cursor.has_more():
            result = combine(result, cursor.advance())
            steps += 1
            if stop(result):
                logger.debug(f"reduce_until stopped after {steps} elements")
                break
    except CursorError as e:
        logger.debug(f"reduce_until failed after {steps} elements with {e.kind.value}: {e.message}")
        raise
    return result


def count(cursor: Source) -> int:
    """Number of elements left in a finite cursor (consumes it)"""
    require_present("count", cursor=cursor)
    return reduce(from_iterable(cursor), lambda acc, _: acc + 1, 0)


def equals(left: Source, right: Source) -> bool:
    """Compare two cursors element by element.

    Both cursors are consumed. They are equal when every pair matched and
    both ran out together; a cursor compared with itself is equal without
    being touched.
    """
    require_present("equals", left=left, right=right)
    if left is right:
        return True
    left = from_iterable(left)
    right = from_iterable(right)
    if is_infinite(left) and is_infinite(right):
        raise UnsupportedInfiniteSourceError(
            "equals: cannot compare two infinite cursors", "equals"
        )

    pairs_equal = reduce(
        zip_cursors(operator.eq, left, right),
        lambda acc, same: acc and same,
        True
    )
    return pairs_equal and _exhausted(left) and _exhausted(right)


def _exhausted(cursor: Cursor) -> bool:
    return not is_infinite(cursor) and not cursor.has_more()


def join_to_string(cursor: Source, separator: str) -> str:
    """Join the textual form of every element with separator"""
    require_present("join_to_string", cursor=cursor, separator=separator)
    cursor = from_iterable(cursor)
    _reject_infinite("join_to_string", cursor)

    if not cursor.has_more():
        return ""
    first = str(cursor.advance())
    return reduce(cursor, lambda acc, element: acc + separator + str(element), first)


def get(cursor: Source, index: int) -> T:
    """Return the element at index, discarding everything before it.

    Reads through limit(cursor, index + 1), so infinite cursors are fine.
    """
    require_present("get", cursor=cursor, index=index)
    if index < 0:
        raise IndexOutOfRangeError(f"get: index must not be negative (got {index})", "get")

    bounded = limit(cursor, index + 1)
    position = -1
    current = None
    while bounded.has_more():
        current = bounded.advance()
        position += 1
    if position != index:
        raise IndexOutOfRangeError(
            f"get: index {index} is past the end (last index {position})", "get"
        )
    return current


def to_list(cursor: Source) -> List[T]:
    """Drain a finite cursor into a list, preserving order"""
    require_present("to_list", cursor=cursor)
    cursor = from_iterable(cursor)
    _reject_infinite("to_list", cursor)

    items = []
    while cursor.has_more():
        items.append(cursor.advance())
    return items


# ---------- output helpers ----------

def print_cursor(cursor: Source, separator: str, file: Optional[TextIO] = None) -> None:
    """Write join_to_string(cursor, separator) to file (stdout by default)"""
    stream = file if file is not None else sys.stdout
    stream.write(join_to_string(cursor, separator))


def println_cursor(cursor: Source, separator: Optional[str] = None, file: Optional[TextIO] = None,
                   settings: Optional[CursorSettings] = None) -> None:
    """Like print_cursor, followed by a newline.

    Without a separator the settings' default_separator (", ") is used.
    """
    if separator is None:
        separator = (settings or CursorSettings()).default_separator
    stream = file if file is not None else sys.stdout
    print_cursor(cursor, separator, stream)
    stream.write("\n")
