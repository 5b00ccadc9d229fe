"""
Distribution families.

Public API:
    make_distribution(family, *params)  - build from a family tag
    resolve_family(family)              - tag -> Distribution subclass
    register_family(name, cls)          - add a user-defined family
    Gamma, Beta, Poisson, Normal, Binomial, Exponential
    Distribution, ScipyDistribution     - base classes for new families
"""

from pyposterior.distributions.base import Distribution, ScipyDistribution
from pyposterior.distributions.families import (
    Beta,
    Binomial,
    Exponential,
    Gamma,
    Normal,
    Poisson,
    make_distribution,
    register_family,
    resolve_family,
)

__all__ = [
    "Distribution",
    "ScipyDistribution",
    "Gamma",
    "Beta",
    "Poisson",
    "Normal",
    "Binomial",
    "Exponential",
    "make_distribution",
    "register_family",
    "resolve_family",
]
