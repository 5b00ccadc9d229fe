"""
Common transforms for derived posterior quantities.

All functions work on scalars and on numpy arrays, so they can be passed
to apply() with or without ``vectorized=True``.
"""

from __future__ import annotations

import numpy as np


def ratio(x, y):
    """x / y, e.g. the ratio of two Poisson rates."""
    return np.divide(x, y)


def difference(x, y):
    """x - y, e.g. the difference of two proportions."""
    return np.subtract(x, y)


def log_odds(p):
    """log(p / (1 - p)). Non-finite at p = 0 or p = 1."""
    with np.errstate(divide='ignore'):
        return np.log(p) - np.log1p(-np.asarray(p))


def inverse_logit(x):
    """1 / (1 + exp(-x)), the inverse of log_odds."""
    return 1.0 / (1.0 + np.exp(-np.asarray(x)))
