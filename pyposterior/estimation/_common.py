"""
Common data structures for Monte Carlo estimators.

EstimateParams is the parameter payload wrapped by Result[P] and exposed
through EstimateSolution.
"""

from __future__ import annotations

from dataclasses import dataclass

from scipy import stats as sp_stats

DEFAULT_CONF_LEVEL = 0.95

# Below this many draws the CLT interval is flagged in Result.warnings
SMALL_SAMPLE_THRESHOLD = 30


@dataclass(frozen=True)
class EstimateParams:
    """
    Parameter payload for a Monte Carlo point estimate.

    - estimate: point estimate (mean, proportion or quantile)
    - standard_error: Monte Carlo standard error of the estimate
    - conf_int: (lower, upper) interval at conf_level
    - n: number of draws used
    - method: "mean" | "tail_probability" | "quantile"
    """
    estimate: float
    standard_error: float
    conf_int: tuple[float, float]
    conf_level: float
    n: int
    method: str


def z_value(conf_level: float) -> float:
    """Two-sided standard normal critical value, 1.959964 at 0.95."""
    return float(sp_stats.norm.ppf(0.5 + conf_level / 2.0))
