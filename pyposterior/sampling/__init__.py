"""
Sampling and transforms.

Usage:
    from pyposterior.distributions import Gamma
    from pyposterior.sampling import sample, sample_independent, apply
    from pyposterior.sampling.transforms import ratio

    theta = sample(Gamma(68, 45), 10_000, seed=42)
    a, b = sample_independent([Gamma(219, 112), Gamma(68, 45)], 10_000, seed=42)
    rate_ratio = apply(ratio, a, b, vectorized=True)
"""

from pyposterior.core.sample import EmpiricalSample
from pyposterior.sampling.solvers import sample, sample_independent
from pyposterior.sampling.transform import apply
from pyposterior.sampling import transforms

__all__ = [
    "EmpiricalSample",
    "sample",
    "sample_independent",
    "apply",
    "transforms",
]
