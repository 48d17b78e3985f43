"""Filtering transforms: each returns a new table and leaves its input alone."""

from __future__ import annotations

from numbers import Real
from typing import Any, Callable

from .errors import InvalidArgument, OutOfRange
from .getters import clone, reverse
from .model import Table, require_position, require_table, sequence_values
from .predicates import is_dictionary


def filter_(table: Table, callback: Callable[[Any, Any], Any]) -> Table:
    """Keep entries for which ``callback(value, key)`` is truthy; keys are not renumbered."""
    results = Table()
    for key, value in require_table(table).items():
        if callback(value, key):
            results[key] = value
    return results


def except_(table: Table, blacklist: Any) -> Table:
    """Deep copy of *table* without the keys listed in *blacklist*."""
    results = clone(table)
    for key in sequence_values(blacklist):
        del results[key]
    return results


def only(table: Table, whitelist: Any) -> Table:
    """Whitelisted entries of *table*.

    Void values are not copied: absent keys, ``False``, numeric zero and
    ``""``. Other values, empty tables included, are kept.
    """
    require_table(table)
    results = Table()
    for key in sequence_values(whitelist):
        value = table[key]
        if not _is_void(value):
            results[key] = value
    return results


def _is_void(value: Any) -> bool:
    if value is None or value is False or (isinstance(value, str) and value == ""):
        return True
    return isinstance(value, Real) and value == 0


def first(table: Table, callback: Callable[[Any], Any]) -> Any:
    """First value, in iteration order, for which *callback* is truthy."""
    for value in require_table(table).values():
        if callback(value):
            return value
    return None


def last(table: Table, callback: Callable[[Any], Any]) -> Any:
    """Last value of the sequence for which *callback* is truthy.

    Dictionaries have no "last" element and are rejected.
    """
    if is_dictionary(table):
        raise InvalidArgument("last() needs an array-like table, got a dictionary")
    return first(reverse(table), callback)


def slice_(table: Table, offset: int | None = None, end: int | None = None) -> Table:
    """Values at positions ``offset..end`` (inclusive) as a new array.

    *end* is a position, not a count. Absent positions are skipped.
    """
    require_table(table)
    offset = 1 if offset is None else require_position(offset, "offset")
    end = table.border() if end is None else require_position(end, "end")
    if offset < 1:
        raise OutOfRange(f"offset must be at least 1, got {offset}")
    results = Table()
    count = 0
    for index in range(offset, end + 1):
        value = table[index]
        if value is not None:
            count += 1
            results[count] = value
    return results
