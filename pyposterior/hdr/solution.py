"""
Solution wrapper for highest-density regions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyposterior.core.result import Result
from pyposterior.hdr._common import HDRParams


@dataclass
class HDRSolution:
    """
    User-facing highest-density region.

    The region is a union of one or more disjoint ranges; more than one
    range means the density is multimodal at this mass.
    """
    _result: Result[HDRParams]

    # --- Core fields ---

    @property
    def ranges(self) -> tuple[tuple[float, float], ...]:
        """Disjoint (lower, upper) ranges in increasing order."""
        return self._result.params.ranges

    @property
    def n_ranges(self) -> int:
        return len(self._result.params.ranges)

    @property
    def is_disjoint(self) -> bool:
        """True when the region splits into several ranges."""
        return self.n_ranges > 1

    @property
    def cutoff(self) -> float:
        """Normalized grid-probability threshold."""
        return self._result.params.cutoff

    @property
    def density_cutoff(self) -> float:
        """Threshold on the density scale (for drawing on a density plot)."""
        return self._result.params.density_cutoff

    @property
    def target_mass(self) -> float:
        return self._result.params.target_mass

    @property
    def mass(self) -> float:
        """Grid mass covered, at least target_mass."""
        return self._result.params.mass

    @property
    def empirical_mass(self) -> float:
        """Fraction of draws falling inside the region."""
        return self._result.params.empirical_mass

    @property
    def grid(self) -> NDArray[np.floating[Any]]:
        return self._result.params.grid

    @property
    def density(self) -> NDArray[np.floating[Any]]:
        return self._result.params.density

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def total_width(self) -> float:
        """Summed length of all ranges."""
        return float(sum(hi - lo for lo, hi in self.ranges))

    def contains(self, x: float) -> bool:
        """True if x lies in any of the ranges (bounds inclusive)."""
        return any(lo <= x <= hi for lo, hi in self.ranges)

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

    # --- Display ---

    def summary(self) -> str:
        """
        Printable region.

        Produces:
            HIGHEST DENSITY REGION (kde)

            Target mass: 0.95   Covered mass: 0.9503
            Draws inside: 0.9497
            Ranges:
              [1.14213, 1.88752]
        """
        lines = [
            f"\nHIGHEST DENSITY REGION ({self.method})",
            "",
            f"Target mass: {self.target_mass:.4g}   Covered mass: {self.mass:.4g}",
            f"Draws inside: {self.empirical_mass:.4g}",
            "Ranges:",
        ]
        for lo, hi in self.ranges:
            lines.append(f"  [{lo:.6g}, {hi:.6g}]")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        spans = ", ".join(f"({lo:.4g}, {hi:.4g})" for lo, hi in self.ranges)
        return f"HDRSolution(target_mass={self.target_mass:g}, ranges=[{spans}])"
