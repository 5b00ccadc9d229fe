"""
Solution wrapper for posterior predictive checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyposterior.core.result import Result
from pyposterior.predictive._common import PredictiveCheckParams

if TYPE_CHECKING:
    from pyposterior.predictive.design import PredictiveCheckDesign


@dataclass
class PredictiveCheckSolution:
    """
    User-facing posterior predictive check.

    A p-value near 0 (or near 1 for a one-sided check) means the observed
    data look unusual under the fitted model for this statistic.
    """
    _result: Result[PredictiveCheckParams]
    _design: 'PredictiveCheckDesign'

    # --- Core fields ---

    @property
    def observed_stat(self) -> float:
        """Statistic on the observed data."""
        return self._result.params.observed_stat

    @property
    def simulated_stats(self) -> NDArray[np.floating[Any]]:
        """Statistic on each replicated dataset, shape (S,)."""
        return self._result.params.simulated_stats

    @property
    def p_value(self) -> float:
        """Bayesian p-value for the chosen alternative."""
        return self._result.params.p_value

    @property
    def p_greater(self) -> float:
        return self._result.params.p_greater

    @property
    def p_less(self) -> float:
        return self._result.params.p_less

    @property
    def percentile(self) -> float:
        """Mid-rank of the observed statistic among the simulated ones (0-100)."""
        return self._result.params.percentile

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def n_replicates(self) -> int:
        return int(self._result.params.simulated_stats.shape[0])

    # --- Metadata ---

    @property
    def observed_data(self) -> NDArray:
        return self._design.observed

    @property
    def family(self) -> str:
        return self._design.family_name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def summary(self) -> str:
        """Predictive check summary."""
        q05, q50, q95 = np.quantile(self.simulated_stats, [0.05, 0.5, 0.95])
        lines = [
            "\nPOSTERIOR PREDICTIVE CHECK",
            "",
            f"Family: {self.family}",
            f"Replicated datasets: {self.n_replicates}"
            f" (n = {self._design.observed.shape[0]} each)",
            f"Observed statistic: {self.observed_stat:.6g}",
            f"Simulated statistic: median {q50:.6g}, 90% range [{q05:.6g}, {q95:.6g}]",
            f"Percentile of observed: {self.percentile:.1f}",
            f"p-value ({self.alternative}): {self.p_value:.4g}",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PredictiveCheckSolution(S={self.n_replicates}, "
            f"observed={self.observed_stat:.4g}, "
            f"p_value={self.p_value:.4g})"
        )
