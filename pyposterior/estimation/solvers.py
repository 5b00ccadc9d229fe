"""
Monte Carlo estimators.

Provides mean(), tail_probability(), quantile(), interval(),
equal_tailed_interval(), running_estimate() and required_sample_size().

Every interval here is a large-sample approximation. mean() and
tail_probability() use the central limit theorem, so their intervals are
only trustworthy for large S; results with S < 30 carry a warning.
"""

from __future__ import annotations

import math
import warnings
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike

from pyposterior.core.compute.timing import timed
from pyposterior.core.exceptions import DimensionError, ValidationError
from pyposterior.core.result import Result
from pyposterior.core.sample import EmpiricalSample, scalar_values
from pyposterior.core.validation import check_min_samples, check_probability
from pyposterior.estimation._common import (
    DEFAULT_CONF_LEVEL,
    SMALL_SAMPLE_THRESHOLD,
    EstimateParams,
    z_value,
)
from pyposterior.estimation._running import RunningEstimate
from pyposterior.estimation.solution import EstimateSolution

BACKEND_NAME = 'cpu_estimator'


def _build(
    method: str,
    estimate: float,
    se: float,
    conf_level: float,
    n: int,
    conf_int: tuple[float, float] | None = None,
    extra_warnings: tuple[str, ...] = (),
    timing: dict[str, float] | None = None,
    **info: Any,
) -> EstimateSolution:
    if conf_int is None:
        conf_int = interval(estimate, se, conf_level)
    warns = list(extra_warnings)
    if n < SMALL_SAMPLE_THRESHOLD:
        warns.append(
            f"only {n} draws: the normal-approximation interval may be inaccurate"
        )
    params = EstimateParams(
        estimate=float(estimate),
        standard_error=float(se),
        conf_int=(float(conf_int[0]), float(conf_int[1])),
        conf_level=conf_level,
        n=n,
        method=method,
    )
    result = Result(
        params=params,
        info={'method': method, 'n': n, **info},
        timing=timing,
        backend_name=BACKEND_NAME,
        warnings=tuple(warns),
    )
    return EstimateSolution(_result=result)


def interval(
    estimate: float,
    standard_error: float,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> tuple[float, float]:
    """
    Symmetric normal-approximation interval.

    estimate +/- z * standard_error with z = Phi^-1(1 - (1 - conf_level) / 2),
    e.g. z = 1.96 at 0.95. Valid only for large S by the central limit
    theorem; do not treat it as exact for small samples.

    Raises:
        ValidationError: If conf_level is outside (0, 1) or the standard
            error is negative or non-finite.
    """
    conf_level = check_probability(conf_level, "conf_level")
    se = float(standard_error)
    if not math.isfinite(se) or se < 0:
        raise ValidationError(
            f"standard_error: must be finite and >= 0, got {standard_error}"
        )
    half = z_value(conf_level) * se
    return (float(estimate) - half, float(estimate) + half)


def mean(
    sample: EmpiricalSample | ArrayLike,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> EstimateSolution:
    """
    Monte Carlo estimate of E[X].

    Parameters
    ----------
    sample : EmpiricalSample or array-like
        Scalar draws of X.
    conf_level : float
        Level of the normal-approximation interval. Default 0.95.

    Returns
    -------
    EstimateSolution
        estimate = arithmetic mean; standard_error = sqrt(s^2 / S) where
        s^2 divides by S - 1.

    Raises
    ------
    InsufficientSampleError
        If S < 2 (the unbiased variance is undefined).
    """
    conf_level = check_probability(conf_level, "conf_level")
    values = scalar_values(sample)
    check_min_samples(values, 2, "sample")

    S = values.shape[0]
    with timed() as timer:
        est = float(np.mean(values))
        se = math.sqrt(float(np.var(values, ddof=1)) / S)
    return _build('mean', est, se, conf_level, S, timing=timer.result())


def tail_probability(
    sample: EmpiricalSample | ArrayLike,
    predicate: Callable[[Any], Any],
    conf_level: float = DEFAULT_CONF_LEVEL,
    *,
    vectorized: bool = False,
) -> EstimateSolution:
    """
    Monte Carlo estimate of P(predicate(X)).

    The estimate is the fraction of draws satisfying ``predicate``; its
    standard error is the Bernoulli sqrt(p (1 - p) / S).

    Parameters
    ----------
    sample : EmpiricalSample or array-like
        Draws of X.
    predicate : callable
        Called once per draw, or once on the whole array when
        ``vectorized`` is True (it must then return S booleans).
    conf_level : float
        Level of the normal-approximation interval. Default 0.95.

    Example:
        >>> theta = sample(Gamma(68, 45), 10_000, seed=1)
        >>> tail_probability(theta, lambda x: x < 1.75).estimate  # ~0.90
    """
    conf_level = check_probability(conf_level, "conf_level")
    if not callable(predicate):
        raise ValidationError(f"predicate: expected a callable, got {type(predicate).__name__}")
    if not isinstance(sample, EmpiricalSample):
        sample = EmpiricalSample.from_array(sample)
    values = sample.values
    S = sample.size

    with timed() as timer:
        if vectorized:
            hits = np.asarray(predicate(values), dtype=bool)
        else:
            hits = np.fromiter((bool(predicate(v)) for v in values), dtype=bool, count=S)
    if hits.shape != (S,):
        raise DimensionError(
            f"predicate: vectorized call returned shape {hits.shape}, expected ({S},)"
        )

    p = float(np.mean(hits))
    se = math.sqrt(p * (1.0 - p) / S)
    extra = ()
    if p in (0.0, 1.0):
        extra = (f"estimated probability is {p:g}; the Bernoulli standard error is zero",)
    return _build(
        'tail_probability', p, se, conf_level, S,
        extra_warnings=extra, timing=timer.result(), successes=int(hits.sum()),
    )


def quantile(
    sample: EmpiricalSample | ArrayLike,
    p: float,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> EstimateSolution:
    """
    Monte Carlo estimate of the p-quantile of X.

    The point estimate uses linear interpolation between order statistics
    (Hyndman & Fan type 7). The interval is distribution-free: the order
    statistics at ranks S p -/+ z sqrt(S p (1 - p)). The reported standard
    error is the interval half-width divided by z.
    """
    p = check_probability(p, "p")
    conf_level = check_probability(conf_level, "conf_level")
    values = scalar_values(sample)
    S = values.shape[0]
    with timed() as timer:
        ordered = np.sort(values)

    est = float(np.quantile(ordered, p))
    z = z_value(conf_level)
    spread = z * math.sqrt(S * p * (1.0 - p))
    lo_rank = min(max(int(math.floor(S * p - spread)) - 1, 0), S - 1)
    hi_rank = min(max(int(math.ceil(S * p + spread)) - 1, 0), S - 1)
    lower = float(ordered[lo_rank])
    upper = float(ordered[hi_rank])
    se = (upper - lower) / (2.0 * z)
    return _build(
        'quantile', est, se, conf_level, S,
        conf_int=(lower, upper), timing=timer.result(), p=p, ranks=(lo_rank + 1, hi_rank + 1),
    )


def equal_tailed_interval(
    sample: EmpiricalSample | ArrayLike,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> tuple[float, float]:
    """
    Central credible interval from sample quantiles.

    Returns the (1 - conf_level) / 2 and (1 + conf_level) / 2 sample
    quantiles. Compare with highest_density_region() for skewed or
    multimodal posteriors.
    """
    conf_level = check_probability(conf_level, "conf_level")
    values = scalar_values(sample)
    alpha = 1.0 - conf_level
    lo, hi = np.quantile(values, [alpha / 2.0, 1.0 - alpha / 2.0])
    return (float(lo), float(hi))


def running_estimate(sample: EmpiricalSample | ArrayLike) -> RunningEstimate:
    """
    Cumulative mean of the first n draws, for n = 1..S.

    Returns a lazy, restartable iterable of (n, cumulative_mean) pairs;
    use ``.to_arrays()`` to also get running standard errors for a
    convergence plot.
    """
    return RunningEstimate(scalar_values(sample))


def required_sample_size(
    pilot_sample: EmpiricalSample | ArrayLike,
    target_precision: float,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> int:
    """
    Smallest S whose interval half-width meets a target precision.

    Uses the pilot's unbiased variance s^2 and returns the smallest n with
    z * sqrt(s^2 / n) <= target_precision. Advisory only: the variance in
    a larger run may differ, so treat the result as a lower bound.

    Raises
    ------
    InsufficientSampleError
        If the pilot has fewer than 2 draws.
    ValidationError
        If target_precision is not a positive finite number.
    """
    conf_level = check_probability(conf_level, "conf_level")
    values = scalar_values(pilot_sample, "pilot_sample")
    check_min_samples(values, 2, "pilot_sample")
    precision = float(target_precision)
    if not math.isfinite(precision) or precision <= 0:
        raise ValidationError(
            f"target_precision: must be a positive finite number, got {target_precision}"
        )

    S = values.shape[0]
    if S < SMALL_SAMPLE_THRESHOLD:
        warnings.warn(
            f"Pilot sample has only {S} draws; its variance estimate is unreliable "
            f"and the required sample size may be badly off.",
            RuntimeWarning,
            stacklevel=2,
        )

    var_hat = float(np.var(values, ddof=1))
    if var_hat == 0.0:
        return 1

    z = z_value(conf_level)
    n = max(1, math.ceil(z * z * var_hat / (precision * precision)))
    # Guard the closed form against rounding in either direction
    while n > 1 and z * math.sqrt(var_hat / (n - 1)) <= precision:
        n -= 1
    while z * math.sqrt(var_hat / n) > precision:
        n += 1
    return int(n)
