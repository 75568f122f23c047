"""Build mappings from sequences.

Each helper returns a new ``dict``. When two entries produce the same key the
one traversed later wins.
"""

import typing as tp

from slicekit.core.types import K, V

__all__ = [
    "associate",
    "associate_by",
    "associate_reverse_by",
]


def associate(keys: tp.Sequence[K], values: tp.Sequence[V]) -> tp.Dict[K, V]:
    """Map ``keys[i]`` to ``values[i]`` for every index present in both.

    Surplus keys or surplus values are ignored without error.

    Examples:
        >>> associate(["a", "b"], [1, 2, 3])
        {'a': 1, 'b': 2}
        >>> associate(["a", "a"], [1, 2])
        {'a': 2}
    """
    result: tp.Dict[K, V] = {}
    for i, key in enumerate(keys):
        if i >= len(values):
            break
        result[key] = values[i]
    return result


def associate_by(
    keys: tp.Iterable[K], value_for: tp.Callable[[K], V]
) -> tp.Dict[K, V]:
    """Map each key to ``value_for(key)``."""
    return {key: value_for(key) for key in keys}


def associate_reverse_by(
    values: tp.Iterable[V], key_for: tp.Callable[[V], K]
) -> tp.Dict[K, V]:
    """Map ``key_for(value)`` to each value; later values overwrite earlier ones."""
    result: tp.Dict[K, V] = {}
    for value in values:
        result[key_for(value)] = value
    return result
