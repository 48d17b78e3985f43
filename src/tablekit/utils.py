"""General helpers: string rendering and value mapping."""

from __future__ import annotations

from typing import Any, Callable

from .model import Table, require_table


def implode(table: Table, glue: str = ",") -> str:
    """Render every value with ``str()`` joined by *glue*.

    The glue is left out after the entry whose key equals ``border()``. In
    a dictionary that entry may not come last, or may not exist, so the
    output can carry a trailing glue.
    """
    size = require_table(table).border()
    text = ""
    for key, value in table.items():
        text += str(value)
        if key != size:
            text += glue
    return text


def map_(table: Table, callback: Callable[[Any, Any], Any]) -> Table:
    """New table with ``callback(value, key)`` stored under each key.

    A ``None`` result leaves that key absent.
    """
    results = Table()
    for key, value in require_table(table).items():
        results[key] = callback(value, key)
    return results
