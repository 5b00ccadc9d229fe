"""
Running (cumulative) estimates for convergence inspection.

RunningEstimate is a lazy, restartable view over a sample: every
iteration starts a fresh online accumulator, so iterating twice yields
the same sequence and nothing is cached on the sample.
"""

from __future__ import annotations

import math
from typing import Any, Iterator, NamedTuple

import numpy as np
from numpy.typing import NDArray


class RunningPoint(NamedTuple):
    """Cumulative mean of the first n draws."""
    n: int
    mean: float


class RunningEstimate:
    """
    Cumulative means of draws 1..n for n = 1..S.

    Iteration yields RunningPoint(n, mean) pairs. Means are updated
    with Welford's recurrence, O(1) per step and O(S) overall.
    """

    def __init__(self, values: NDArray[np.floating[Any]]):
        self._values = values

    def __len__(self) -> int:
        return int(self._values.shape[0])

    def __iter__(self) -> Iterator[RunningPoint]:
        mean = 0.0
        for n, x in enumerate(self._values, start=1):
            mean += (float(x) - mean) / n
            yield RunningPoint(n, mean)

    def to_arrays(self) -> tuple[NDArray[np.int64], NDArray[np.float64], NDArray[np.float64]]:
        """
        Materialize (n, mean, standard_error) arrays of length S.

        standard_error[k] = sqrt(s_n^2 / n) with the unbiased variance of
        the first n draws; NaN at n = 1 where it is undefined.
        """
        S = len(self)
        ns = np.arange(1, S + 1, dtype=np.int64)
        means = np.empty(S, dtype=np.float64)
        ses = np.full(S, np.nan, dtype=np.float64)

        mean = 0.0
        m2 = 0.0
        for k, x in enumerate(self._values):
            n = k + 1
            delta = float(x) - mean
            mean += delta / n
            m2 += delta * (float(x) - mean)
            means[k] = mean
            if n > 1:
                ses[k] = math.sqrt(m2 / (n - 1) / n)
        return ns, means, ses

    def final(self) -> RunningPoint:
        """Last point of the sequence (the full-sample mean)."""
        point = None
        for point in self:
            pass
        return point

    def __repr__(self) -> str:
        return f"RunningEstimate(S={len(self)})"
