"""Reusable type definitions for slicekit.

This module provides the generic type variables shared by the functional
modules and the closed set of numeric types accepted by the aggregation
helpers.

Type Aliases:
    Numeric: Union of every accepted numeric scalar type.
    N: TypeVar constrained to the numeric set, for annotations.

The numeric set mirrors signed and unsigned integers of several widths plus
single and double precision floats. ``bool`` is deliberately absent even
though it subclasses ``int``.
"""

import typing as tp

import numpy as np

from slicekit.logger.logger import logger

__all__ = [
    "T",
    "U",
    "K",
    "V",
    "N",
    "Numeric",
    "NUMERIC_TYPES",
    "NUMERIC_DTYPES",
    "is_numeric",
    "validate_numeric",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
K = tp.TypeVar("K", bound=tp.Hashable)
V = tp.TypeVar("V")

Numeric = tp.Union[
    int,
    float,
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
    np.float32,
    np.float64,
]

NUMERIC_TYPES: tp.Tuple[type, ...] = tp.get_args(Numeric)

# (kind, itemsize) pairs, so platform aliases such as longlong match int64
NUMERIC_DTYPES: tp.FrozenSet[tp.Tuple[str, int]] = frozenset(
    (np.dtype(t).kind, np.dtype(t).itemsize) for t in NUMERIC_TYPES[2:]
)

N = tp.TypeVar(
    "N",
    int,
    float,
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
    np.float32,
    np.float64,
)


def is_numeric(value: tp.Any) -> bool:
    """Return True if ``value`` belongs to the closed numeric set."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, np.generic):
        return (value.dtype.kind, value.dtype.itemsize) in NUMERIC_DTYPES
    return isinstance(value, NUMERIC_TYPES)


def validate_numeric(values: tp.Sequence[tp.Any]) -> tp.Sequence[Numeric]:
    """Validator to ensure every element of ``values`` is numeric.

    Args:
        values: The sequence (or 1-D ``numpy.ndarray``) to validate.

    Returns:
        The original sequence if validation passes.

    Raises:
        TypeError: If an ndarray has a dtype outside the numeric set, or if
            any element is not one of ``NUMERIC_TYPES``.
    """
    if isinstance(values, np.ndarray):
        if (values.dtype.kind, values.dtype.itemsize) not in NUMERIC_DTYPES:
            logger.debug(f"Rejected array with dtype {values.dtype}")
            raise TypeError(f"Unsupported array dtype '{values.dtype}'.")
        return values

    for i, value in enumerate(values):
        if not is_numeric(value):
            logger.debug(f"Rejected non-numeric element at index {i}")
            raise TypeError(
                f"Element {i} ({value!r}) of type '{type(value).__name__}' is not numeric."
            )
    return values
