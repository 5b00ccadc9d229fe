"""
PyPosterior: Monte Carlo inference from posterior draws.

Draw from parametric families, transform the draws, and summarize them
with Monte Carlo estimates, credible regions and posterior predictive
checks.

Submodules:
    distributions: Parametric families with seeded draws
    sampling: Empirical samples, independent streams and transforms
    estimation: Means, tail probabilities, quantiles and their Monte Carlo error
    hdr: Highest-density regions
    predictive: Posterior predictive checks
"""

__version__ = "0.1.0"

from pyposterior import distributions
from pyposterior import sampling
from pyposterior import estimation
from pyposterior import hdr
from pyposterior import predictive

from pyposterior.core.sample import EmpiricalSample
from pyposterior.distributions import Beta, Binomial, Exponential, Gamma, Normal, Poisson
from pyposterior.sampling import apply, sample, sample_independent
from pyposterior.hdr import highest_density_region
from pyposterior.predictive import posterior_predictive_check

__all__ = [
    "__version__",
    "distributions",
    "sampling",
    "estimation",
    "hdr",
    "predictive",
    "EmpiricalSample",
    "Gamma",
    "Beta",
    "Poisson",
    "Normal",
    "Binomial",
    "Exponential",
    "sample",
    "sample_independent",
    "apply",
    "highest_density_region",
    "posterior_predictive_check",
]
