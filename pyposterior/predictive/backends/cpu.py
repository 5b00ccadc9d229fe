"""
CPU backend for posterior predictive checks.

CPUPredictiveBackend: replicates one dataset per posterior draw, applies
the discrepancy statistic and compares against the observed value.
"""

from __future__ import annotations

import math
import warnings
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from pyposterior.core.compute.timing import Timer
from pyposterior.core.exceptions import SamplingError
from pyposterior.core.random import spawn_generators
from pyposterior.core.result import Result
from pyposterior.predictive._common import PredictiveCheckParams
from pyposterior.predictive.design import PredictiveCheckDesign


def _as_statistic(value, source: str) -> float:
    """Coerce a statistic return value to a finite float."""
    arr = np.asarray(value, dtype=np.float64)
    if arr.size != 1:
        raise SamplingError(
            f"statistic must return a scalar, got shape {arr.shape} ({source})",
            source=source,
        )
    out = float(arr.reshape(()))
    if not math.isfinite(out):
        raise SamplingError(
            f"statistic returned {out} ({source})",
            n_nonfinite=1,
            source=source,
        )
    return out


class CPUPredictiveBackend:
    """
    CPU backend for posterior predictive checks.

    Replicate i is drawn from the family at parameter draw i using its own
    child generator, so results depend only on the seed and never on the
    number of workers.
    """

    @property
    def name(self) -> str:
        return 'cpu_predictive'

    def solve(self, design: PredictiveCheckDesign) -> Result[PredictiveCheckParams]:
        """Run the check and return Result[PredictiveCheckParams]."""
        timer = Timer()
        timer.start()

        draws = design.parameter_draws
        observed = design.observed
        statistic = design.statistic
        build = design.build
        S = design.n_replicates
        m = observed.shape[0]

        rngs = spawn_generators(design.seed, S)
        warnings_list: list[str] = []

        with timer.section('observed_stat'):
            t_obs = _as_statistic(statistic(observed), 'observed data')

        def replicate(i: int) -> float:
            dist = build(draws[i])
            data = dist.draw(m, rngs[i]).values
            return _as_statistic(statistic(data), f'replicate {i}')

        simulated = np.empty(S, dtype=np.float64)
        with timer.section('replicates'):
            if design.workers == 1:
                for i in range(S):
                    simulated[i] = replicate(i)
            else:
                with ThreadPoolExecutor(max_workers=design.workers) as pool:
                    for i, value in enumerate(pool.map(replicate, range(S))):
                        simulated[i] = value

        with timer.section('p_value'):
            p_greater = float(np.mean(simulated >= t_obs))
            p_less = float(np.mean(simulated <= t_obs))
            if design.alternative == "two.sided":
                p_value = min(1.0, 2.0 * min(p_greater, p_less))
            elif design.alternative == "greater":
                p_value = p_greater
            elif design.alternative == "less":
                p_value = p_less
            else:
                raise ValueError(f"Unknown alternative: {design.alternative!r}")
            below = float(np.mean(simulated < t_obs))
            ties = float(np.mean(simulated == t_obs))
            percentile = 100.0 * (below + 0.5 * ties)

        if np.all(simulated == simulated[0]):
            msg = (
                f"simulated statistic is constant ({simulated[0]:g}) across all "
                f"{S} replicates; the check has no power"
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=3)
            warnings_list.append(msg)

        timer.stop()

        simulated.setflags(write=False)
        params = PredictiveCheckParams(
            observed_stat=t_obs,
            simulated_stats=simulated,
            p_value=p_value,
            p_greater=p_greater,
            p_less=p_less,
            percentile=percentile,
            alternative=design.alternative,
        )

        return Result(
            params=params,
            info={
                'family': design.family_name,
                'n_replicates': S,
                'n_observed': m,
                'workers': design.workers,
                'alternative': design.alternative,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
