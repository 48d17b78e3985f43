"""Data model for tablekit: the hybrid sequence/map ``Table``."""

from __future__ import annotations

import math
import reprlib
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from numbers import Real
from typing import Any

from .errors import InvalidArgument


# ---------------------------------------------------------------------------
# Key helpers
# ---------------------------------------------------------------------------

def is_array_key(key: Any) -> bool:
    """True for positive integral numbers (``bool`` excluded)."""
    if isinstance(key, bool) or not isinstance(key, Real):
        return False
    return key >= 1 and key % 1 == 0


def _check_key(key: Any) -> None:
    if key is None:
        raise InvalidArgument("table index is None")
    if isinstance(key, float) and math.isnan(key):
        raise InvalidArgument("table index is NaN")


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------

class Table(MutableMapping):
    """Container that acts as a 1-based sequence, a key/value map, or both.

    ``None`` means "absent": reading a missing key returns ``None`` and
    assigning ``None`` deletes the key.

    Iteration visits the positive-integer keys in ascending order, then the
    remaining keys in insertion order.

    Tables compare by value and are therefore unhashable: a table cannot be
    used as a key in another table.

    Usage::

        colors = Table.of("red", "green", "blue")
        colors[1]            # → "red"
        pet = Table.of(name="Spot", species="Dog")
        pet["age"] = None    # no-op, key stays absent
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping | Iterable[tuple[Any, Any]] | None = None) -> None:
        self._entries: dict[Any, Any] = {}
        if entries is None:
            return
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            self[key] = value

    # -- Constructors ---------------------------------------------------

    @classmethod
    def of(cls, *values: Any, **fields: Any) -> Table:
        """Build a table from positional values (1..n) and keyword fields."""
        table = cls()
        for index, value in enumerate(values, start=1):
            table[index] = value
        for key, value in fields.items():
            table[key] = value
        return table

    @classmethod
    def from_sequence(cls, values: Iterable[Any]) -> Table:
        return cls.of(*values)

    # -- Mapping protocol -----------------------------------------------

    def __getitem__(self, key: Any) -> Any:
        return self._entries.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        _check_key(key)
        if value is None:
            self._entries.pop(key, None)
        else:
            self._entries[key] = value

    def __delitem__(self, key: Any) -> None:
        self._entries.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Any]:
        # sequence positions ascending, then other keys in insertion order
        yield from sorted(key for key in self._entries if is_array_key(key))
        for key in self._entries:
            if not is_array_key(key):
                yield key

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Any, default: Any = None) -> Any:
        return self._entries.get(key, default)

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f"Table({self._entries!r})"

    # -- Sequence view --------------------------------------------------

    def border(self) -> int:
        """Highest array key present, or 0 when there is none."""
        highest = 0
        for key in self._entries:
            if is_array_key(key) and key > highest:
                highest = key
        return int(highest)

    def ipairs(self) -> Iterator[tuple[int, Any]]:
        """Yield ``(index, value)`` from 1 up to the first absent index."""
        index = 1
        while index in self._entries:
            yield index, self._entries[index]
            index += 1


# ---------------------------------------------------------------------------
# Argument helpers
# ---------------------------------------------------------------------------

def require_table(value: Any, name: str = "table") -> Table:
    if not isinstance(value, Table):
        raise InvalidArgument(f"{name} must be a Table, got {type(value).__name__}")
    return value


def require_position(value: Any, name: str) -> int:
    """Validate an integral position argument and return it as ``int``."""
    if isinstance(value, bool) or not isinstance(value, Real) or value % 1 != 0:
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    return int(value)


def sequence_values(sequence: Any) -> Iterator[Any]:
    """Iterate the values of a key list: a Table's ipairs, or any iterable."""
    if isinstance(sequence, Table):
        return (value for _, value in sequence.ipairs())
    if isinstance(sequence, (str, bytes)) or not isinstance(sequence, Iterable):
        raise InvalidArgument(f"expected a sequence, got {type(sequence).__name__}")
    return iter(sequence)
