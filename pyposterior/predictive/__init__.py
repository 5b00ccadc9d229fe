"""
Posterior predictive checks.

Usage:
    from pyposterior.predictive import posterior_predictive_check

    ppc = posterior_predictive_check(theta, "poisson", counts, np.max, seed=7)
    ppc.p_value
    print(ppc.summary())
"""

from pyposterior.predictive._common import PredictiveCheckParams
from pyposterior.predictive.design import PredictiveCheckDesign
from pyposterior.predictive.solution import PredictiveCheckSolution
from pyposterior.predictive.solvers import posterior_predictive_check

__all__ = [
    "posterior_predictive_check",
    "PredictiveCheckDesign",
    "PredictiveCheckParams",
    "PredictiveCheckSolution",
]
