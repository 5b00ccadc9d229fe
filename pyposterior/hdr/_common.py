"""
Common data structures for highest-density regions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

DEFAULT_TARGET_MASS = 0.95


@dataclass(frozen=True)
class HDRParams:
    """
    Parameter payload for a highest-density region.

    - ranges: disjoint (lower, upper) pairs in increasing order
    - cutoff: normalized grid probability at which accumulation stopped
    - density_cutoff: the same threshold on the estimator's density scale
    - target_mass: requested mass
    - mass: normalized grid mass inside the region (>= target_mass)
    - empirical_mass: fraction of the sample's draws inside the region
    - grid, density: evaluation grid and raw density used (empty for
      the full-support and degenerate shortcuts)
    - method: density estimator name
    """
    ranges: tuple[tuple[float, float], ...]
    cutoff: float
    density_cutoff: float
    target_mass: float
    mass: float
    empirical_mass: float
    grid: NDArray[np.floating[Any]]
    density: NDArray[np.floating[Any]]
    method: str
