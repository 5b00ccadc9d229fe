"""
Common data structures for posterior predictive checks.

PredictiveCheckParams is the parameter payload wrapped by Result[P] and
exposed through PredictiveCheckSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

VALID_ALTERNATIVES = ("two.sided", "less", "greater")


@dataclass(frozen=True)
class PredictiveCheckParams:
    """
    Parameter payload for a posterior predictive check.

    - observed_stat: discrepancy statistic on the observed data
    - simulated_stats: statistic on each replicated dataset, shape (S,)
    - p_value: Bayesian p-value for the chosen alternative
    - p_greater: fraction of simulated >= observed
    - p_less: fraction of simulated <= observed
    - percentile: mid-rank position of the observed statistic among the
      simulated ones, in [0, 100]
    - alternative: "two.sided" | "less" | "greater"
    """
    observed_stat: float
    simulated_stats: NDArray[np.floating[Any]]
    p_value: float
    p_greater: float
    p_less: float
    percentile: float
    alternative: str
