r"""
'     ______ ___  ____ ___  __
'    / ___// _ \/ __ `/ / / /
'   (__  )/  __/ /_/ / /_/ /
'  /____/ \___/\__, /\__, /
'                /_//____/
"""

# expose the main classes
from .sequence import Sequence, SortedSequence

# expose the factory functions
from .factories import (
    from_iterable,
    empty,
    absent,
    from_keys,
    from_values,
    new,
    S
)

# expose the pure functions
from .sorting import sort, sort_by, uniq, sorted_uniq, distinct
from .search import index, contains, sorted_index, sorted_contains
from .setops import compare, union, intersect, difference, symmetric_difference, subtract
from .functions import map_, each, filter_, delete_if, reduce, add, first, last, any_
from .mapping import get_keys, get_values, to_list_of

# expose constants and errors
from .types import (
    NOT_FOUND,
    SeqyError,
    CallbackShapeError,
    ElementTypeError
)

# define what `import *` does
__all__ = [
    "Sequence",
    "SortedSequence",
    "from_iterable",
    "empty",
    "absent",
    "from_keys",
    "from_values",
    "new",
    "S",
    "sort",
    "sort_by",
    "uniq",
    "sorted_uniq",
    "distinct",
    "index",
    "contains",
    "sorted_index",
    "sorted_contains",
    "compare",
    "union",
    "intersect",
    "difference",
    "symmetric_difference",
    "subtract",
    "map_",
    "each",
    "filter_",
    "delete_if",
    "reduce",
    "add",
    "first",
    "last",
    "any_",
    "get_keys",
    "get_values",
    "to_list_of",
    "NOT_FOUND",
    "SeqyError",
    "CallbackShapeError",
    "ElementTypeError"
]
