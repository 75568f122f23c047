"""In-place random permutation of a sequence.

Unlike the rest of :mod:`slicekit.functional`, :func:`shuffle` mutates the
sequence it is given and returns ``None``. Pass a copy if the original order
is still needed.
"""

import random
import typing as tp

import numpy as np

from slicekit.core.config import settings
from slicekit.core.types import T
from slicekit.logger.logger import logger

__all__ = ["shuffle"]

# Dedicated source for reproducible runs; None defers to the global source.
_seeded_rng: tp.Optional[random.Random] = (
    random.Random(settings.SHUFFLE_SEED) if settings.SHUFFLE_SEED is not None else None
)


def shuffle(values: tp.MutableSequence[T], rng: tp.Optional[random.Random] = None) -> None:
    """Shuffle ``values`` in place with the Fisher-Yates algorithm.

    For ``i`` from the last index down to 1, element ``i`` is swapped with an
    element at a uniformly drawn index in ``[0, i]``. Given a uniform source
    every permutation is equally likely.

    Args:
        values: Mutable sequence to permute. It is modified directly.
        rng: Random source to draw from. Defaults to the generator seeded by
            ``SLICEKIT_SHUFFLE_SEED`` when configured, otherwise the
            process-wide ``random`` module source. Not suitable for
            cryptographic use.

    Raises:
        ValueError: If ``values`` is a ``numpy.ndarray`` that is not 1-D.
            Rows of a 2-D array are views, so swapping them would duplicate
            rows instead of permuting them.
    """
    if isinstance(values, np.ndarray) and values.ndim != 1:
        logger.debug(f"Rejected array with {values.ndim} dimensions")
        raise ValueError(f"Only 1-D arrays can be shuffled, got ndim={values.ndim}.")

    if rng is not None:
        randint = rng.randint
    elif _seeded_rng is not None:
        randint = _seeded_rng.randint
    else:
        randint = random.randint

    logger.debug(f"Shuffling {len(values)} elements in place")
    for i in range(len(values) - 1, 0, -1):
        j = randint(0, i)
        values[i], values[j] = values[j], values[i]
