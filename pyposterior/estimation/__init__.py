"""
Monte Carlo estimators.

Public API:
    mean(sample)                          - E[X] with standard error
    tail_probability(sample, predicate)   - P(predicate(X)) with standard error
    quantile(sample, p)                   - p-quantile with order-statistic interval
    interval(estimate, se, conf_level)    - normal-approximation interval
    equal_tailed_interval(sample)         - central credible interval
    running_estimate(sample)              - lazy cumulative means
    required_sample_size(pilot, eps)      - draws needed for a target precision
"""

from pyposterior.estimation._common import EstimateParams
from pyposterior.estimation._running import RunningEstimate, RunningPoint
from pyposterior.estimation.solution import EstimateSolution
from pyposterior.estimation.solvers import (
    equal_tailed_interval,
    interval,
    mean,
    quantile,
    required_sample_size,
    running_estimate,
    tail_probability,
)

__all__ = [
    "mean",
    "tail_probability",
    "quantile",
    "interval",
    "equal_tailed_interval",
    "running_estimate",
    "required_sample_size",
    "EstimateParams",
    "EstimateSolution",
    "RunningEstimate",
    "RunningPoint",
]
