"""Read-only accessors and copying transforms for tables.

Nothing in this module mutates its arguments; every transform returns a
new ``Table``.
"""

from __future__ import annotations

import random
from typing import Any

from .errors import InvalidArgument
from .model import Table, is_array_key, require_table, sequence_values
from .wrappers import unpack


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def keys(table: Table) -> Table:
    """Return an array of the table's keys, in iteration order."""
    return Table.from_sequence(require_table(table).keys())


def values(table: Table) -> Table:
    """Return an array of the table's values, aligned with :func:`keys`."""
    return Table.from_sequence(require_table(table).values())


def divide(table: Table) -> tuple[Table, Table]:
    return keys(table), values(table)


def length(table: Table) -> int:
    """Number of present entries, dictionaries included."""
    return len(values(table))


def has(table: Table, key: Any) -> bool:
    return key in require_table(table)


def has_any(table: Table, candidates: Any) -> bool:
    """True when any key listed in *candidates* is present in *table*."""
    require_table(table)
    return any(key in table for key in sequence_values(candidates))


def choice(table: Table, rng: random.Random | None = None) -> tuple[Any, Any]:
    """Pick a uniformly random entry and return ``(value, key)``.

    *rng* is any ``random.Random``-compatible source; a fresh one is created
    when omitted.
    """
    key_list = list(require_table(table).keys())
    if not key_list:
        raise InvalidArgument("cannot choose from an empty table")
    if rng is None:
        rng = random.Random()
    key = key_list[rng.randint(1, len(key_list)) - 1]
    return table[key], key


# ---------------------------------------------------------------------------
# Copies
# ---------------------------------------------------------------------------

def clone(table: Table) -> Table:
    """Deep copy *table*; nested tables are copied, other values shared."""
    return _clone(require_table(table), {})


def _clone(table: Table, memo: dict[int, Table]) -> Table:
    # memo keeps shared and cyclic sub-tables shaped like the original
    result = Table()
    memo[id(table)] = result
    for key, value in table.items():
        if isinstance(value, Table):
            value = memo[id(value)] if id(value) in memo else _clone(value, memo)
        result[key] = value
    return result


def merge(*tables: Table | None) -> Table:
    """Merge tables left to right.

    Array keys are appended under fresh indexes; any other key is stored
    as-is, so later tables overwrite earlier ones.
    """
    results = Table()
    next_index = 1
    for position, table in enumerate(tables, start=1):
        if table is None:
            continue
        require_table(table, f"argument {position}")
        for key, value in table.items():
            if is_array_key(key):
                results[next_index] = value
                next_index += 1
            else:
                results[key] = value
    return results


def collapse(table: Table) -> Table:
    """Merge the tables stored at positions ``1..border()``."""
    return merge(*unpack(table))


def reverse(table: Table) -> Table:
    """Return the sequence part of *table* in reverse order."""
    size = require_table(table).border()
    result = Table()
    for index in range(1, size + 1):
        result[index] = table[size - index + 1]
    return result


def shuffle(table: Table, rng: random.Random | None = None) -> Table:
    """Return a shuffled deep copy of *table* (Fisher–Yates over ``1..border()``)."""
    result = clone(table)
    if rng is None:
        rng = random.Random()
    for i in range(result.border(), 1, -1):
        j = rng.randint(1, i)
        result[i], result[j] = result[j], result[i]
    return result
