"""Numeric aggregation over sequences.

This module provides the extremum, sum and mean of a sequence whose elements
belong to the closed numeric set defined in :mod:`slicekit.core.types`
(Python ``int``/``float`` and the sized numpy integer and float scalars).

Arithmetic stays in the elements' own domain:
    - **numpy arrays** use their dtype, so an ``int8`` array sums as ``int8``
      scalars do (wrapping on overflow).
    - **other sequences** use the type of their first element.

Empty input policy:
    - ``max_of``, ``min_of`` and ``sum_of`` return the zero of the domain.
    - ``average`` raises ``ZeroDivisionError``. The mean of nothing is left
      undefined on purpose, unlike the other three.

Examples:
    >>> import numpy as np
    >>> from slicekit.functional.numeric import average
    >>> average([1, 2, 3])
    2
    >>> average([1, 2])
    1
    >>> average(np.array([1.0, 2.0], dtype=np.float32))
    np.float32(1.5)
"""

import typing as tp

import numpy as np

from slicekit.core.types import N, validate_numeric

__all__ = [
    "max_of",
    "min_of",
    "sum_of",
    "average",
]


def _zero(values: tp.Sequence[N]) -> N:
    """Zero value of the domain of ``values``."""
    if isinstance(values, np.ndarray):
        return values.dtype.type(0)
    if len(values) == 0:
        return 0  # type: ignore[return-value]
    return type(values[0])(0)


def max_of(values: tp.Sequence[N]) -> N:
    """Return the largest element of ``values``, or zero if it is empty.

    Args:
        values: Sequence or 1-D array of numeric elements.

    Returns:
        The maximum by natural ordering. The first element seeds the scan
        and is replaced only by a strictly greater one.

    Raises:
        TypeError: If an element is not numeric.
    """
    validate_numeric(values)
    if len(values) == 0:
        return _zero(values)

    largest = values[0]
    for value in values:
        if value > largest:
            largest = value
    return largest


def min_of(values: tp.Sequence[N]) -> N:
    """Return the smallest element of ``values``, or zero if it is empty.

    Raises:
        TypeError: If an element is not numeric.
    """
    validate_numeric(values)
    if len(values) == 0:
        return _zero(values)

    smallest = values[0]
    for value in values:
        if value < smallest:
            smallest = value
    return smallest


def sum_of(values: tp.Sequence[N]) -> N:
    """Return the sum of ``values`` in their own domain; zero if empty.

    Raises:
        TypeError: If an element is not numeric.
    """
    validate_numeric(values)
    total = _zero(values)
    for value in values:
        total = total + value
    return total


def average(values: tp.Sequence[N]) -> N:
    """Return the mean of ``values`` computed in their own domain.

    Integer domains truncate toward zero (``average([-7, 0]) == -3``); float
    domains use true division.

    Args:
        values: Non-empty sequence or 1-D array of numeric elements.

    Returns:
        ``sum_of(values)`` divided by ``len(values)``.

    Raises:
        ZeroDivisionError: If ``values`` is empty.
        TypeError: If an element is not numeric.
    """
    total = sum_of(values)
    count = len(values)
    if count == 0:
        raise ZeroDivisionError("Cannot average an empty sequence.")

    if isinstance(total, (int, np.integer)):
        quotient = abs(int(total)) // count
        return type(total)(quotient if total >= 0 else -quotient)
    return total / type(total)(count)
