"""
Design for posterior predictive checks.

PredictiveCheckDesign encapsulates all inputs a backend needs to
replicate datasets. Immutable, validated at construction.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.exceptions import ValidationError
from pyposterior.core.random import SeedLike
from pyposterior.core.sample import EmpiricalSample
from pyposterior.core.validation import check_1d, check_array, check_min_samples
from pyposterior.distributions.base import Distribution
from pyposterior.distributions.families import make_distribution, resolve_family
from pyposterior.predictive._common import VALID_ALTERNATIVES


def _family_builder(family) -> tuple[Callable[[NDArray], Distribution], str]:
    """
    Normalize a family argument to (builder, label).

    The builder takes one parameter draw as a 1D array and returns the
    data-generating Distribution for that draw.
    """
    if isinstance(family, str) or (isinstance(family, type) and issubclass(family, Distribution)):
        cls = resolve_family(family)

        def build(theta: NDArray) -> Distribution:
            return make_distribution(cls, *theta.tolist())

        return build, cls.family

    if callable(family):
        label = getattr(family, '__name__', type(family).__name__)

        def build(theta: NDArray) -> Distribution:
            arg = float(theta[0]) if theta.shape[0] == 1 else theta
            dist = family(arg)
            if not isinstance(dist, Distribution):
                raise ValidationError(
                    f"family {label!r} returned {type(dist).__name__}, expected a Distribution"
                )
            return dist

        return build, label

    raise ValidationError(
        f"family: expected a family name, Distribution subclass or callable, "
        f"got {type(family).__name__}"
    )


@dataclass(frozen=True)
class PredictiveCheckDesign:
    """
    Frozen design for a posterior predictive check.

    Attributes:
        parameter_draws: Posterior draws, shape (S, d); row i parameterizes
            replicated dataset i.
        build: Maps one row of parameter_draws to a Distribution.
        family_name: Label of the data-generating family.
        observed: Observed data, shape (m,).
        statistic: fn(data) -> float, the discrepancy statistic.
        alternative: "two.sided", "less" or "greater".
        seed: Seed from which one child stream per replicate is spawned.
        workers: Number of threads replicating datasets.
    """
    parameter_draws: NDArray[np.floating[Any]]
    build: Callable[[NDArray], Distribution]
    family_name: str
    observed: NDArray[np.floating[Any]]
    statistic: Callable
    alternative: str
    seed: SeedLike
    workers: int

    @property
    def n_replicates(self) -> int:
        return int(self.parameter_draws.shape[0])

    @classmethod
    def for_check(
        cls,
        parameter_sample: EmpiricalSample | ArrayLike,
        family,
        observed_data: ArrayLike,
        statistic: Callable,
        *,
        alternative: str = "two.sided",
        seed: SeedLike = None,
        workers: int = 1,
    ) -> PredictiveCheckDesign:
        """
        Create a predictive check design with validation.

        Args:
            parameter_sample: Posterior draws, scalar (S,) or vector (S, d).
            family: Family name, Distribution subclass, or callable
                theta -> Distribution.
            observed_data: Observed dataset, 1D, finite, non-empty.
            statistic: Discrepancy statistic fn(data) -> float.
            alternative: "two.sided" (default), "less" or "greater".
            seed: Integer seed, Generator or None.
            workers: Threads used to replicate datasets, >= 1.

        Returns:
            Validated PredictiveCheckDesign.
        """
        if not isinstance(parameter_sample, EmpiricalSample):
            parameter_sample = EmpiricalSample.from_array(
                parameter_sample, name="parameter_sample",
            )
        draws = parameter_sample.values
        if draws.ndim == 1:
            draws = draws.reshape(-1, 1)

        build, family_name = _family_builder(family)

        observed = check_array(observed_data, "observed_data")
        check_1d(observed, "observed_data")
        check_min_samples(observed, 1, "observed_data")
        if not np.all(np.isfinite(observed)):
            raise ValidationError("observed_data: contains NaN or Inf values")
        observed = observed.astype(np.float64, copy=True)
        observed.setflags(write=False)

        if not callable(statistic):
            raise ValidationError(
                f"statistic: expected a callable, got {type(statistic).__name__}"
            )

        if alternative not in VALID_ALTERNATIVES:
            raise ValidationError(
                f"alternative must be 'two.sided', 'less', or 'greater', "
                f"got {alternative!r}"
            )

        if isinstance(workers, bool) or not isinstance(workers, numbers.Integral) or workers < 1:
            raise ValidationError(f"workers: must be an integer >= 1, got {workers!r}")

        return cls(
            parameter_draws=draws,
            build=build,
            family_name=family_name,
            observed=observed,
            statistic=statistic,
            alternative=alternative,
            seed=seed,
            workers=int(workers),
        )
