"""
Distribution abstraction.

A Distribution is a fixed, immutable parameterization of a family that
can produce i.i.d. draws. Exact summaries (mean, variance, cdf,
quantile) are optional capabilities used to validate Monte Carlo
estimates; query them with supports() before calling.

Adding a family means subclassing Distribution (or ScipyDistribution),
validating parameters in __init__ and implementing _draw(). Nothing in
the samplers, transforms or estimators needs to change.
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, ClassVar, Mapping

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.capabilities import (
    CAPABILITY_CDF,
    CAPABILITY_MEAN,
    CAPABILITY_QUANTILE,
    CAPABILITY_SAMPLE,
    CAPABILITY_VARIANCE,
)
from pyposterior.core.exceptions import InvalidParameterError, SamplingError
from pyposterior.core.random import SeedLike, resolve_rng
from pyposterior.core.sample import EmpiricalSample
from pyposterior.core.validation import check_positive_int


# =====================================================================
# Parameter checks
# =====================================================================

def _as_real(family: str, name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(
            f"{family}: parameter {name!r} must be a real number, got {value!r}",
            family=family, parameter=name, value=value,
        )
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(
            f"{family}: parameter {name!r} must be finite, got {value}",
            family=family, parameter=name, value=value,
        )
    return value


def check_positive(family: str, name: str, value: Any) -> float:
    """Parameter must be a finite real > 0."""
    value = _as_real(family, name, value)
    if value <= 0:
        raise InvalidParameterError(
            f"{family}: parameter {name!r} must be > 0, got {value}",
            family=family, parameter=name, value=value,
        )
    return value


def check_real(family: str, name: str, value: Any) -> float:
    """Parameter must be a finite real."""
    return _as_real(family, name, value)


def check_unit_interval(family: str, name: str, value: Any) -> float:
    """Parameter must be a finite real in [0, 1]."""
    value = _as_real(family, name, value)
    if not 0.0 <= value <= 1.0:
        raise InvalidParameterError(
            f"{family}: parameter {name!r} must be in [0, 1], got {value}",
            family=family, parameter=name, value=value,
        )
    return value


def check_count(family: str, name: str, value: Any) -> int:
    """Parameter must be a non-negative integer."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
        raise InvalidParameterError(
            f"{family}: parameter {name!r} must be a non-negative integer, got {value!r}",
            family=family, parameter=name, value=value,
        )
    return int(value)


# =====================================================================
# Abstract base
# =====================================================================

class Distribution(ABC):
    """
    Abstract base for every distribution family.

    Subclasses set ``family`` and call ``_set_params`` once from
    ``__init__`` with validated values.
    """

    family: ClassVar[str] = 'distribution'

    _params: Mapping[str, float]

    def _set_params(self, **params: float) -> None:
        object.__setattr__(self, '_params', MappingProxyType(dict(params)))

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, '_params'):
            raise AttributeError(
                f"{type(self).__name__} is immutable; build a new instance instead"
            )
        object.__setattr__(self, name, value)

    @property
    def params(self) -> Mapping[str, float]:
        """Read-only mapping of parameter name to value."""
        return self._params

    # --- Sampling ---

    @abstractmethod
    def _draw(self, n: int, rng: np.random.Generator) -> NDArray:
        """Return n raw draws, shape (n,) or (n, d)."""
        ...

    def draw(self, n: int, rng: SeedLike = None) -> EmpiricalSample:
        """
        Draw n i.i.d. values.

        Args:
            n: Number of draws, >= 1.
            rng: numpy Generator (preferred), integer seed or None.

        Returns:
            EmpiricalSample tagged with this distribution's description.

        Raises:
            ValidationError: If n is not a positive integer.
            SamplingError: If the generator produced non-finite values.
        """
        n = check_positive_int(n, "n")
        raw = np.asarray(self._draw(n, resolve_rng(rng)), dtype=np.float64)
        bad = ~np.isfinite(raw)
        if bad.any():
            raise SamplingError(
                f"{self.describe()}: generator produced {int(bad.sum())} "
                f"non-finite values out of {n}",
                n_nonfinite=int(bad.sum()),
                source=self.describe(),
            )
        return EmpiricalSample.from_array(raw, provenance=(self.describe(),))

    # --- Optional exact oracle ---

    def _capabilities(self) -> frozenset[str]:
        return frozenset({CAPABILITY_SAMPLE})

    def supports(self, capability: str) -> bool:
        """
        Check whether an optional capability is available.

        Unknown capabilities return False, never raise.
        """
        return capability in self._capabilities()

    def mean(self) -> float:
        """Exact mean. Optional; check supports('mean')."""
        raise NotImplementedError(f"{self.family} does not provide an exact mean")

    def var(self) -> float:
        """Exact variance. Optional; check supports('variance')."""
        raise NotImplementedError(f"{self.family} does not provide an exact variance")

    def cdf(self, x: ArrayLike) -> float | NDArray:
        """Exact P(X <= x). Optional; check supports('cdf')."""
        raise NotImplementedError(f"{self.family} does not provide an exact cdf")

    def quantile(self, p: ArrayLike) -> float | NDArray:
        """Exact inverse cdf. Optional; check supports('quantile')."""
        raise NotImplementedError(f"{self.family} does not provide an exact quantile")

    # --- Identity ---

    def describe(self) -> str:
        args = ", ".join(f"{k}={v:g}" for k, v in self._params.items())
        return f"{self.family}({args})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distribution):
            return NotImplemented
        return type(self) is type(other) and dict(self._params) == dict(other._params)

    def __hash__(self) -> int:
        return hash((type(self), tuple(self._params.items())))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._params.items())
        return f"{type(self).__name__}({args})"


class ScipyDistribution(Distribution):
    """
    Distribution backed by a frozen scipy.stats distribution.

    Provides sampling plus the full exact oracle. Subclasses implement
    _frozen() only.
    """

    @abstractmethod
    def _frozen(self):
        """Return the scipy.stats frozen distribution for these parameters."""
        ...

    def _draw(self, n: int, rng: np.random.Generator) -> NDArray:
        return self._frozen().rvs(size=n, random_state=rng)

    def _capabilities(self) -> frozenset[str]:
        return frozenset({
            CAPABILITY_SAMPLE,
            CAPABILITY_MEAN,
            CAPABILITY_VARIANCE,
            CAPABILITY_CDF,
            CAPABILITY_QUANTILE,
        })

    def mean(self) -> float:
        return float(self._frozen().mean())

    def var(self) -> float:
        return float(self._frozen().var())

    def cdf(self, x: ArrayLike) -> float | NDArray:
        out = self._frozen().cdf(x)
        return float(out) if np.ndim(out) == 0 else out

    def quantile(self, p: ArrayLike) -> float | NDArray:
        out = self._frozen().ppf(p)
        return float(out) if np.ndim(out) == 0 else out
