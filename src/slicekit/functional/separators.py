"""Insert separators between adjacent elements of a sequence.

All three variants return a new list of length ``2 * len(values) - 1`` for
non-empty input, an empty list for empty input, and a one-element copy for a
single element (no separator is generated).

Examples:
    >>> intersperse(["a", "b", "c"], "-")
    ['a', '-', 'b', '-', 'c']
    >>> intersperse_by(["first", "second", "third"], lambda s: "after " + s)
    ['first', 'after first', 'second', 'after second', 'third']
    >>> intersperse_by_index(["first", "second", "third"], lambda i: f"after {i}")
    ['first', 'after 0', 'second', 'after 1', 'third']
"""

import typing as tp

from slicekit.core.types import T

__all__ = [
    "intersperse",
    "intersperse_by",
    "intersperse_by_index",
]


def intersperse(values: tp.Sequence[T], separator: T) -> tp.List[T]:
    """Place ``separator`` between every pair of adjacent elements."""
    if len(values) == 0:
        return []

    result = [values[0]]
    for value in values[1:]:
        result.extend((separator, value))
    return result


def intersperse_by(
    values: tp.Sequence[T], separator_for: tp.Callable[[T], T]
) -> tp.List[T]:
    """Place ``separator_for(previous)`` after every element but the last.

    Args:
        values: Source sequence.
        separator_for: Called with the element that precedes each separator.

    Returns:
        A new list alternating original elements and generated separators.
    """
    if len(values) == 0:
        return []

    result = [values[0]]
    for i in range(1, len(values)):
        result.extend((separator_for(values[i - 1]), values[i]))
    return result


def intersperse_by_index(
    values: tp.Sequence[T], separator_for: tp.Callable[[int], T]
) -> tp.List[T]:
    """Place ``separator_for(i)`` after element ``i`` for all but the last.

    Args:
        values: Source sequence.
        separator_for: Called with the zero-based index of the element that
            precedes each separator.

    Returns:
        A new list alternating original elements and generated separators.
    """
    if len(values) == 0:
        return []

    result = [values[0]]
    for i in range(1, len(values)):
        result.extend((separator_for(i - 1), values[i]))
    return result
