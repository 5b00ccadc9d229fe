"""
Random stream handling.

Every call that draws randomness accepts ``seed``, resolved here once at
the public boundary and then passed down explicitly as a
``numpy.random.Generator``. Nothing in pyposterior touches numpy's
legacy global state.

Accepted seeds:
    None       fresh OS entropy (non-reproducible, still independent)
    int >= 0   reproducible stream
    Generator  used as-is (caller owns its state)
"""

from __future__ import annotations

import numbers
from typing import Union

import numpy as np

from pyposterior.core.exceptions import ValidationError

SeedLike = Union[int, np.random.Generator, None]


def _check_seed(seed: SeedLike) -> None:
    if seed is None or isinstance(seed, np.random.Generator):
        return
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise ValidationError(
            f"seed: expected int, numpy Generator or None, got {type(seed).__name__}"
        )
    if seed < 0:
        raise ValidationError(f"seed: must be non-negative, got {seed}")


def resolve_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Turn a seed argument into a Generator.

    A Generator passed in is returned unchanged so that consecutive calls
    sharing it continue the same stream.
    """
    _check_seed(seed)
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def spawn_generators(seed: SeedLike, k: int) -> list[np.random.Generator]:
    """
    Create k statistically independent child generators from one seed.

    Children are derived with SeedSequence.spawn, so the i-th child is
    the same for a given integer seed no matter how many workers later
    consume the children or in which order.
    """
    _check_seed(seed)
    if isinstance(seed, np.random.Generator):
        return list(seed.spawn(k))
    return [np.random.default_rng(s) for s in np.random.SeedSequence(seed).spawn(k)]
