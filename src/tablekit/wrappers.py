"""Thin sequence primitives over ``Table``.

These give the positional half of the API a uniform shape. Positions are
1-based and the sequence length is ``Table.border()``.
"""

from __future__ import annotations

from functools import cmp_to_key
from numbers import Real
from typing import Any, Callable

from .errors import InvalidArgument, OutOfRange
from .model import Table, require_position, require_table


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def create(count: int, value: Any = None) -> Table:
    """Create a table sized for *count* elements, filled with *value* if given."""
    count = require_position(count, "count")
    if count < 0:
        raise OutOfRange(f"count must not be negative, got {count}")
    result = Table()
    if value is not None:
        for index in range(1, count + 1):
            result[index] = value
    return result


def pack(*values: Any) -> Table:
    """Collect *values* at ``1..n`` and record the count under ``"n"``."""
    result = Table.of(*values)
    result["n"] = len(values)
    return result


def unpack(table: Table, first: int = 1, last: int | None = None) -> tuple[Any, ...]:
    require_table(table)
    first = require_position(first, "first")
    last = table.border() if last is None else require_position(last, "last")
    return tuple(table[index] for index in range(first, last + 1))


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

def getn(table: Table) -> int:
    """Sequence length by highest index; see ``length()`` for the entry count."""
    return require_table(table).border()


def concat(table: Table, sep: str = "", first: int = 1, last: int | None = None) -> str:
    """Join the strings and numbers at ``first..last`` with *sep*."""
    require_table(table)
    first = require_position(first, "first")
    last = table.border() if last is None else require_position(last, "last")
    parts: list[str] = []
    for index in range(first, last + 1):
        value = table[index]
        if isinstance(value, bool) or not isinstance(value, (str, Real)):
            raise InvalidArgument(f"invalid value (at index {index}) in table for concat")
        parts.append(str(value))
    return sep.join(parts)


def find(haystack: Table, needle: Any, init: int = 1) -> int | None:
    """Return the first index at or after *init* holding *needle*, else ``None``."""
    require_table(haystack, "haystack")
    init = require_position(init, "init")
    if init < 1:
        raise OutOfRange(f"init must be at least 1, got {init}")
    for index in range(init, haystack.border() + 1):
        if haystack[index] == needle:
            return index
    return None


def for_each(table: Table, callback: Callable[[Any, Any], Any]) -> None:
    """Call ``callback(key, value)`` for every entry."""
    for key, value in list(require_table(table).items()):
        callback(key, value)


def for_each_indexed(table: Table, callback: Callable[[int, Any], Any]) -> None:
    """Call ``callback(index, value)`` for ``1..border()``; holes pass ``None``."""
    for index in range(1, require_table(table).border() + 1):
        callback(index, table[index])


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------

def append(table: Table, value: Any) -> None:
    require_table(table)
    table[table.border() + 1] = value


def insert(table: Table, position: int, value: Any) -> None:
    """Insert *value* at *position*, shifting later elements up."""
    size = require_table(table).border()
    position = require_position(position, "position")
    if not 1 <= position <= size + 1:
        raise OutOfRange(f"position {position} out of bounds (1..{size + 1})")
    for index in range(size, position - 1, -1):
        table[index + 1] = table[index]
    table[position] = value


def remove(table: Table, position: int | None = None) -> Any:
    """Remove and return the element at *position* (default: the last one)."""
    size = require_table(table).border()
    if position is None:
        if size == 0:
            return None
        position = size
    position = require_position(position, "position")
    if not 1 <= position <= size + 1:
        raise OutOfRange(f"position {position} out of bounds (1..{size + 1})")
    value = table[position]
    for index in range(position, size):
        table[index] = table[index + 1]
    table[max(position, size)] = None
    return value


def move(
    source: Table,
    first: int,
    last: int,
    dest: int,
    target: Table | None = None,
) -> Table:
    """Copy ``source[first..last]`` into ``target`` starting at *dest*.

    *target* defaults to *source*; overlapping ranges are copied safely.
    Returns the target table.
    """
    require_table(source, "source")
    target = source if target is None else require_table(target, "target")
    first = require_position(first, "first")
    last = require_position(last, "last")
    dest = require_position(dest, "dest")
    if first < 1 or dest < 1:
        raise OutOfRange(f"move positions must be at least 1, got first={first} dest={dest}")
    if last < first:
        return target
    span = last - first
    if dest > last or dest <= first or target is not source:
        offsets = range(0, span + 1)
    else:
        offsets = range(span, -1, -1)
    for offset in offsets:
        target[dest + offset] = source[first + offset]
    return target


def sort(table: Table, less: Callable[[Any, Any], bool] | None = None) -> None:
    """Sort positions ``1..border()`` in place.

    *less(a, b)* returns true when *a* belongs before *b*; the ``<`` operator
    is used when omitted.
    """
    size = require_table(table).border()
    items = [table[index] for index in range(1, size + 1)]
    if any(item is None for item in items):
        raise InvalidArgument("cannot sort a sequence with holes")
    if less is None:
        items.sort()
    else:
        items.sort(key=cmp_to_key(lambda a, b: -1 if less(a, b) else (1 if less(b, a) else 0)))
    for index, item in enumerate(items, start=1):
        table[index] = item
