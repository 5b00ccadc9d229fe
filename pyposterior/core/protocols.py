"""
Structural interfaces for pluggable pieces.

Backend: executes a frozen design and returns a Result.
DensityEstimator: turns scalar draws into a density grid for HDRs.

Both are Protocols, so user strategies only need the right attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from pyposterior.core.result import Result

D = TypeVar('D')  # frozen design
P = TypeVar('P')  # Result payload


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Executes a frozen design and wraps the outcome in Result[P].

    Backends hold no state between calls; every setting, seed included,
    arrives on the design.
    """

    @property
    def name(self) -> str:
        """Identifier stored in Result.backend_name, e.g. 'cpu_predictive'."""
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Run the design.

        Raises:
            SamplingError: A simulated quantity was not finite.
            ValidationError: The design cannot run on this backend.
        """
        ...


@runtime_checkable
class DensityEstimator(Protocol):
    """
    Strategy that turns a 1D sample into density values on a grid.

    Implementations must be deterministic: the same sample and settings
    always give the same grid, density and cell edges.
    """

    @property
    def name(self) -> str:
        """Short identifier recorded in result metadata, e.g. 'kde'."""
        ...

    def evaluate(
        self, values: NDArray[np.floating[Any]],
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """
        Estimate the density of ``values``.

        Returns:
            (grid, density, edges): grid points of length G, non-negative
            density at each grid point, and G + 1 increasing cell edges
            such that grid point i owns the interval [edges[i], edges[i+1]].
        """
        ...
