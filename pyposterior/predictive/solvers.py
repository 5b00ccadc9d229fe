"""
Posterior predictive check solver.
"""

from __future__ import annotations

from typing import Callable, Literal

from numpy.typing import ArrayLike

from pyposterior.core.exceptions import ValidationError
from pyposterior.core.random import SeedLike
from pyposterior.core.sample import EmpiricalSample
from pyposterior.predictive.backends.cpu import CPUPredictiveBackend
from pyposterior.predictive.design import PredictiveCheckDesign
from pyposterior.predictive.solution import PredictiveCheckSolution

BackendChoice = Literal['cpu']


def _get_backend(backend: BackendChoice):
    if backend == 'cpu':
        return CPUPredictiveBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def posterior_predictive_check(
    parameter_sample: EmpiricalSample | ArrayLike,
    family,
    observed_data: ArrayLike,
    statistic: Callable,
    *,
    alternative: str = "two.sided",
    seed: SeedLike = None,
    workers: int = 1,
    backend: BackendChoice = 'cpu',
) -> PredictiveCheckSolution:
    """
    Posterior predictive check with a Bayesian p-value.

    For each posterior draw theta_i, a dataset of the observed size is
    drawn from ``family(theta_i)`` and ``statistic`` is applied to it. The
    observed statistic is then located within those S simulated values.

    Parameters
    ----------
    parameter_sample : EmpiricalSample or array-like
        Posterior draws. Shape (S,) for one-parameter families, (S, d) with
        one column per positional family parameter otherwise.
    family : str, Distribution subclass or callable
        Data-generating family: a registered name ("poisson", "normal",
        ...), a Distribution subclass, or ``fn(theta) -> Distribution``.
    observed_data : array-like
        Observed dataset, 1D.
    statistic : callable
        ``fn(data) -> float`` discrepancy statistic.
    alternative : str
        "greater": fraction of simulated >= observed.
        "less": fraction of simulated <= observed.
        "two.sided": twice the smaller of the two, capped at 1 (default).
    seed : int, Generator or None
        One child stream is spawned per replicate, so a fixed seed gives
        the same answer for every ``workers`` value.
    workers : int
        Threads replicating datasets. Default 1.
    backend : str
        'cpu' only.

    Returns
    -------
    PredictiveCheckSolution

    Raises
    ------
    SamplingError
        If the statistic is non-finite on the observed or any replicated
        dataset.
    InvalidParameterError
        If a posterior draw lies outside the family's parameter domain.

    Examples
    --------
    >>> theta = sample(Gamma(68, 45), 2000, seed=1)
    >>> ppc = posterior_predictive_check(theta, "poisson", counts, np.var, seed=2)
    >>> ppc.p_value
    """
    design = PredictiveCheckDesign.for_check(
        parameter_sample, family, observed_data, statistic,
        alternative=alternative, seed=seed, workers=workers,
    )
    be = _get_backend(backend)
    result = be.solve(design)
    return PredictiveCheckSolution(_result=result, _design=design)
