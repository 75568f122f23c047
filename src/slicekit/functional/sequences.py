"""Order-preserving transforms and queries over sequences.

Every function here is pure: it reads the input sequence once (or twice) and
returns a freshly allocated ``list`` or a scalar. The caller's sequence is
never modified or retained.

Equality-based helpers (``remove``, ``contains``, ``index_of``) compare with
``==``. Uniqueness helpers key a ``dict`` and therefore need hashable values
(or hashable keys for ``unique_by``).

Examples:
    >>> from slicekit.functional.sequences import unique, filter_by
    >>> unique([1, 2, 2, 3, 1])
    [1, 2, 3]
    >>> filter_by(range(6), lambda x: x % 2 == 0)
    [0, 2, 4]
"""

import typing as tp

from slicekit.core.types import T, U

__all__ = [
    "remove",
    "remove_at",
    "filter_by",
    "transform",
    "contains",
    "index_of",
    "unique",
    "unique_by",
    "reduce",
    "some",
    "every",
]


def remove(values: tp.Sequence[T], item: T) -> tp.List[T]:
    """Return a copy of ``values`` without the first element equal to ``item``.

    If ``item`` is absent the copy is returned unchanged.
    """
    result = list(values)
    for i, value in enumerate(result):
        if value == item:
            del result[i]
            break
    return result


def remove_at(values: tp.Sequence[T], index: int) -> tp.List[T]:
    """Return a copy of ``values`` without the element at ``index``.

    Args:
        values: Source sequence.
        index: Position to drop. Must lie in ``[0, len(values))``; negative
            positions are not wrapped around.

    Returns:
        A new list one element shorter than ``values``.

    Raises:
        IndexError: If ``index`` is out of range.
    """
    if not 0 <= index < len(values):
        raise IndexError(
            f"Index {index} out of range for sequence of length {len(values)}."
        )
    result = list(values)
    del result[index]
    return result


def filter_by(values: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> tp.List[T]:
    """Return the elements satisfying ``predicate``, in their original order."""
    return [value for value in values if predicate(value)]


def transform(values: tp.Iterable[T], func: tp.Callable[[T], U]) -> tp.List[U]:
    """Return ``[func(v) for v in values]``; same length, same order."""
    return [func(value) for value in values]


def contains(values: tp.Iterable[T], item: T) -> bool:
    for value in values:
        if value == item:
            return True
    return False


def index_of(values: tp.Iterable[T], item: T) -> int:
    """Return the index of the first element equal to ``item``, or -1."""
    for i, value in enumerate(values):
        if value == item:
            return i
    return -1


def unique(values: tp.Iterable[T]) -> tp.List[T]:
    """Return the distinct elements of ``values`` in order of first appearance.

    Each distinct value is mapped to the index it will occupy in the output
    when first seen. The output list is then sized once and filled at those
    indices, so ordering never depends on the mapping's iteration order.

    Args:
        values: Iterable of hashable elements.

    Returns:
        A new list holding the first occurrence of every distinct value.

    Raises:
        TypeError: If an element is unhashable.
    """
    seen: tp.Dict[T, int] = {}
    for value in values:
        if value not in seen:
            seen[value] = len(seen)

    result: tp.List[tp.Any] = [None] * len(seen)
    for value, position in seen.items():
        result[position] = value
    return result


def unique_by(
    values: tp.Iterable[T], key: tp.Callable[[T], tp.Hashable]
) -> tp.List[T]:
    """Return the elements of ``values`` that are first to produce each key.

    Distinctness is decided by ``key(element)``; the element itself (not the
    key) is kept. Output order follows first appearance, rebuilt from the
    recorded positions as in :func:`unique`.

    Args:
        values: Source elements.
        key: Function mapping each element to a hashable identity.

    Returns:
        A new list with one element per distinct key.
    """
    seen: tp.Dict[tp.Hashable, tp.Tuple[int, T]] = {}
    for value in values:
        identity = key(value)
        if identity not in seen:
            seen[identity] = (len(seen), value)

    result: tp.List[tp.Any] = [None] * len(seen)
    for position, value in seen.values():
        result[position] = value
    return result


def reduce(
    values: tp.Iterable[T], initial: U, func: tp.Callable[[U, T], U]
) -> U:
    """Left fold: ``acc = func(acc, v)`` for each ``v``, starting at ``initial``."""
    result = initial
    for value in values:
        result = func(result, value)
    return result


def some(values: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> bool:
    """True if any element satisfies ``predicate``. False for empty input."""
    for value in values:
        if predicate(value):
            return True
    return False


def every(values: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> bool:
    """True if all elements satisfy ``predicate``. True for empty input."""
    for value in values:
        if not predicate(value):
            return False
    return True
