"""
Concrete distribution families and the family registry.

Each family validates its parameters at construction and raises
InvalidParameterError for values outside the family's domain. All
families here are backed by scipy.stats, which supplies the exact
mean/variance/cdf/quantile used to validate Monte Carlo estimates.

Parameterizations follow Bayesian textbook conventions:
    Gamma(shape, rate)      mean = shape / rate
    Beta(a, b)              mean = a / (a + b)
    Poisson(rate)           mean = rate
    Normal(mu, sigma)       sigma is the standard deviation
    Binomial(n, p)          mean = n * p
    Exponential(rate)       mean = 1 / rate

References:
    Gelman, A. et al. (2013). Bayesian Data Analysis (3rd ed.), Appendix A.
"""

from __future__ import annotations

from typing import Any

from scipy import stats as sp_stats

from pyposterior.core.exceptions import ValidationError
from pyposterior.distributions.base import (
    Distribution,
    ScipyDistribution,
    check_count,
    check_positive,
    check_real,
    check_unit_interval,
)


class Gamma(ScipyDistribution):
    """Gamma(shape, rate). Conjugate prior/posterior for a Poisson rate."""

    family = 'gamma'

    def __init__(self, shape: float, rate: float):
        self._set_params(
            shape=check_positive(self.family, 'shape', shape),
            rate=check_positive(self.family, 'rate', rate),
        )

    def _frozen(self):
        return sp_stats.gamma(a=self._params['shape'], scale=1.0 / self._params['rate'])


class Beta(ScipyDistribution):
    """Beta(a, b). Conjugate prior/posterior for a binomial proportion."""

    family = 'beta'

    def __init__(self, a: float, b: float):
        self._set_params(
            a=check_positive(self.family, 'a', a),
            b=check_positive(self.family, 'b', b),
        )

    def _frozen(self):
        return sp_stats.beta(self._params['a'], self._params['b'])


class Poisson(ScipyDistribution):
    """Poisson(rate). Count data model."""

    family = 'poisson'

    def __init__(self, rate: float):
        self._set_params(rate=check_positive(self.family, 'rate', rate))

    def _frozen(self):
        return sp_stats.poisson(self._params['rate'])


class Normal(ScipyDistribution):
    """Normal(mu, sigma) with standard deviation sigma > 0."""

    family = 'normal'

    def __init__(self, mu: float, sigma: float):
        self._set_params(
            mu=check_real(self.family, 'mu', mu),
            sigma=check_positive(self.family, 'sigma', sigma),
        )

    def _frozen(self):
        return sp_stats.norm(loc=self._params['mu'], scale=self._params['sigma'])


class Binomial(ScipyDistribution):
    """Binomial(n, p): successes in n independent trials."""

    family = 'binomial'

    def __init__(self, n: int, p: float):
        self._set_params(
            n=check_count(self.family, 'n', n),
            p=check_unit_interval(self.family, 'p', p),
        )

    def _frozen(self):
        return sp_stats.binom(self._params['n'], self._params['p'])


class Exponential(ScipyDistribution):
    """Exponential(rate), mean 1 / rate."""

    family = 'exponential'

    def __init__(self, rate: float):
        self._set_params(rate=check_positive(self.family, 'rate', rate))

    def _frozen(self):
        return sp_stats.expon(scale=1.0 / self._params['rate'])


# =====================================================================
# Family name -> class mapping + resolver
# =====================================================================

_FAMILY_CLASSES: dict[str, type[Distribution]] = {
    'gamma': Gamma,
    'beta': Beta,
    'poisson': Poisson,
    'normal': Normal,
    'gaussian': Normal,
    'binomial': Binomial,
    'exponential': Exponential,
}


def register_family(name: str, cls: type[Distribution]) -> None:
    """
    Make a user-defined Distribution subclass available by name.

    Raises:
        ValidationError: If name is taken or cls is not a Distribution.
    """
    if not (isinstance(cls, type) and issubclass(cls, Distribution)):
        raise ValidationError(f"register_family: {cls!r} is not a Distribution subclass")
    key = name.lower()
    if key in _FAMILY_CLASSES:
        raise ValidationError(f"register_family: family {name!r} is already registered")
    _FAMILY_CLASSES[key] = cls


def resolve_family(family: str | type[Distribution]) -> type[Distribution]:
    """Resolve a family argument to a Distribution class.

    Args:
        family: Either a registered name ('gamma', 'beta', 'poisson', ...)
                or a Distribution subclass (passed through).

    Returns:
        Distribution subclass.

    Raises:
        ValidationError: If the name is not registered or the argument
            is neither a string nor a Distribution subclass.
    """
    if isinstance(family, type) and issubclass(family, Distribution):
        return family
    if isinstance(family, str):
        cls = _FAMILY_CLASSES.get(family.lower())
        if cls is None:
            valid = ', '.join(sorted(k for k in _FAMILY_CLASSES if k != 'gaussian'))
            raise ValidationError(
                f"Unknown family: {family!r}. Valid families: {valid}"
            )
        return cls
    raise ValidationError(
        f"family must be a string or Distribution subclass, got {type(family).__name__}"
    )


def make_distribution(family: str | type[Distribution], *params: Any, **kwparams: Any) -> Distribution:
    """
    Build a Distribution from a family tag and a parameter vector.

    Examples:
        >>> make_distribution('gamma', 68, 45)
        Gamma(shape=68.0, rate=45.0)
        >>> make_distribution('beta', a=3, b=7)
        Beta(a=3.0, b=7.0)

    Raises:
        ValidationError: Unknown family.
        InvalidParameterError: Parameters outside the family's domain.
    """
    cls = resolve_family(family)
    try:
        return cls(*params, **kwparams)
    except TypeError as e:
        raise ValidationError(
            f"{cls.family}: wrong number or names of parameters: {e}"
        ) from e
