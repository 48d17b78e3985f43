"""tablekit — convenience operations over hybrid sequence/map tables."""

from .errors import InvalidArgument, OutOfRange, TableError
from .filters import except_, filter_, first, last, only, slice_
from .getters import (
    choice,
    clone,
    collapse,
    divide,
    has,
    has_any,
    keys,
    length,
    merge,
    reverse,
    shuffle,
    values,
)
from .model import Table, is_array_key
from .mutators import add, pull
from .predicates import is_array, is_dictionary, is_empty
from .utils import implode, map_
from .wrappers import (
    append,
    concat,
    create,
    find,
    for_each,
    for_each_indexed,
    getn,
    insert,
    move,
    pack,
    remove,
    sort,
    unpack,
)

__all__ = [
    "Table",
    "is_array_key",
    "TableError",
    "InvalidArgument",
    "OutOfRange",
    # predicates
    "is_array",
    "is_dictionary",
    "is_empty",
    # getters
    "keys",
    "values",
    "divide",
    "length",
    "choice",
    "has",
    "has_any",
    "clone",
    "merge",
    "collapse",
    "reverse",
    "shuffle",
    # filters
    "filter_",
    "except_",
    "only",
    "first",
    "last",
    "slice_",
    # mutators
    "add",
    "pull",
    # utils
    "implode",
    "map_",
    # wrappers
    "append",
    "concat",
    "create",
    "find",
    "for_each",
    "for_each_indexed",
    "getn",
    "insert",
    "move",
    "pack",
    "remove",
    "sort",
    "unpack",
]
