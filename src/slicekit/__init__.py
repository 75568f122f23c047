"""slicekit public interface.

Generic helpers over ordered sequences: filtering, mapping, folding,
uniqueness, association into dicts, interspersion, numeric aggregation and
shuffling. All helpers return new containers except :func:`shuffle`, which
mutates its argument in place.
"""

from slicekit.functional.associate import (
    associate,
    associate_by,
    associate_reverse_by,
)
from slicekit.functional.numeric import average, max_of, min_of, sum_of
from slicekit.functional.separators import (
    intersperse,
    intersperse_by,
    intersperse_by_index,
)
from slicekit.functional.sequences import (
    contains,
    every,
    filter_by,
    index_of,
    reduce,
    remove,
    remove_at,
    some,
    transform,
    unique,
    unique_by,
)
from slicekit.functional.shuffling import shuffle

__all__ = [
    "remove",
    "remove_at",
    "filter_by",
    "transform",
    "contains",
    "index_of",
    "max_of",
    "min_of",
    "sum_of",
    "average",
    "unique",
    "unique_by",
    "reduce",
    "some",
    "every",
    "associate",
    "associate_by",
    "associate_reverse_by",
    "intersperse",
    "intersperse_by",
    "intersperse_by_index",
    "shuffle",
]

__version__ = "0.1.0"
