"""Exception types raised by tablekit."""

from __future__ import annotations


class TableError(Exception):
    """Base class for every error raised by tablekit."""


class InvalidArgument(TableError, ValueError):
    """A non-table was given where a table is required, or the table is unusable."""


class OutOfRange(TableError, IndexError):
    """A position lies outside the valid bounds of the sequence."""
