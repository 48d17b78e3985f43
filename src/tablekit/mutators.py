"""In-place mutators; unlike the rest of tablekit these alter their argument."""

from __future__ import annotations

from typing import Any

from .model import Table, require_table


def add(table: Table, key: Any, value: Any) -> Table:
    """Set ``table[key] = value`` unless the key is already present.

    Returns *table* either way so calls can be chained.
    """
    if require_table(table)[key] is None:
        table[key] = value
    return table


def pull(table: Table, key: Any) -> Any:
    """Remove *key* from *table* and return its previous value (``None`` if absent)."""
    value = require_table(table)[key]
    del table[key]
    return value
