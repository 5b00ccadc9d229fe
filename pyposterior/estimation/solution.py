"""
Solution wrapper for Monte Carlo estimates.

EstimateSolution wraps Result[EstimateParams] and provides convenient
accessors and a printable summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pyposterior.core.result import Result
from pyposterior.estimation._common import EstimateParams


@dataclass
class EstimateSolution:
    """
    User-facing Monte Carlo estimate.

    Unpacks as ``estimate, standard_error = solution.pair``.
    """
    _result: Result[EstimateParams]

    # --- Core fields ---

    @property
    def estimate(self) -> float:
        """Point estimate."""
        return self._result.params.estimate

    @property
    def standard_error(self) -> float:
        """Monte Carlo standard error."""
        return self._result.params.standard_error

    @property
    def se(self) -> float:
        """Alias for standard_error."""
        return self._result.params.standard_error

    @property
    def pair(self) -> tuple[float, float]:
        """(estimate, standard_error)."""
        return (self.estimate, self.standard_error)

    @property
    def conf_int(self) -> tuple[float, float]:
        """(lower, upper) approximate interval."""
        return self._result.params.conf_int

    @property
    def lower(self) -> float:
        return self._result.params.conf_int[0]

    @property
    def upper(self) -> float:
        return self._result.params.conf_int[1]

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def n(self) -> int:
        """Number of draws used."""
        return self._result.params.n

    @property
    def method(self) -> str:
        return self._result.params.method

    # --- Metadata ---

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

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    # --- Display ---

    def summary(self) -> str:
        """
        Printable estimate.

        Produces:
            MONTE CARLO ESTIMATE (mean)

            Draws: 10000
            Estimate: 1.51102   Std. error: 0.00182
            95% interval: (1.50745, 1.51459)
        """
        conf_pct = round(self.conf_level * 100, 2)
        lines = [
            f"\nMONTE CARLO ESTIMATE ({self.method})",
            "",
            f"Draws: {self.n}",
            f"Estimate: {self.estimate:.6g}   Std. error: {self.standard_error:.6g}",
            f"{conf_pct:g}% interval: ({self.lower:.6g}, {self.upper:.6g})",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EstimateSolution(method={self.method!r}, estimate={self.estimate:.6g}, "
            f"se={self.standard_error:.4g}, n={self.n})"
        )
