"""Shape predicates for tables.

All three predicates accept any value and return ``False`` for non-tables
instead of raising. An empty table is neither an array nor a dictionary.
"""

from __future__ import annotations

from typing import Any

from .model import Table, is_array_key


def is_array(value: Any) -> bool:
    """True when *value* is a non-empty table whose keys are all positive integers."""
    if not isinstance(value, Table) or len(value) == 0:
        return False
    return all(is_array_key(key) for key in value)


def is_dictionary(value: Any) -> bool:
    """True when *value* is a non-empty table with at least one non-array key."""
    return isinstance(value, Table) and not is_empty(value) and not is_array(value)


def is_empty(value: Any) -> bool:
    return isinstance(value, Table) and len(value) == 0
