"""
Density estimation strategies for highest-density regions.

Both strategies satisfy the DensityEstimator protocol and are
deterministic: the grid depends only on the sample and the settings.

KDEDensity:
    Gaussian kernel density (scipy.stats.gaussian_kde) evaluated on an
    evenly spaced grid that extends ``cut`` kernel widths past the data.
HistogramDensity:
    numpy.histogram counts with equal-width bins; the grid points are the
    bin centres and the cells are the bins themselves, so the region's
    grid mass equals the fraction of draws it contains.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pyposterior.core.exceptions import ValidationError

_BW_RULES = ('scott', 'silverman')
_BIN_RULES = ('auto', 'fd', 'doane', 'scott', 'stone', 'rice', 'sturges', 'sqrt')


def _cell_edges(grid: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Midpoints between neighbouring grid points, padded by half a step."""
    step = grid[1] - grid[0]
    mids = 0.5 * (grid[:-1] + grid[1:])
    return np.concatenate(([grid[0] - 0.5 * step], mids, [grid[-1] + 0.5 * step]))


class KDEDensity:
    """
    Gaussian KDE on a fixed-size grid.

    Args:
        bw_method: 'scott' (default), 'silverman', or a positive float
            used as scipy's bandwidth factor.
        grid_size: Number of evaluation points, >= 2. Default 512.
        cut: Grid extends this many kernel standard deviations beyond
            the sample range. Default 3.
    """

    def __init__(
        self,
        bw_method: str | float = 'scott',
        grid_size: int = 512,
        cut: float = 3.0,
    ):
        if isinstance(bw_method, str):
            if bw_method not in _BW_RULES:
                raise ValidationError(
                    f"bw_method must be 'scott', 'silverman' or a positive float, "
                    f"got {bw_method!r}"
                )
        elif isinstance(bw_method, bool) or not isinstance(bw_method, numbers.Real) or bw_method <= 0:
            raise ValidationError(f"bw_method: must be positive, got {bw_method!r}")
        if isinstance(grid_size, bool) or not isinstance(grid_size, numbers.Integral) or grid_size < 2:
            raise ValidationError(f"grid_size: must be an integer >= 2, got {grid_size!r}")
        if not isinstance(cut, numbers.Real) or cut < 0:
            raise ValidationError(f"cut: must be >= 0, got {cut!r}")

        self.bw_method = bw_method
        self.grid_size = int(grid_size)
        self.cut = float(cut)

    @property
    def name(self) -> str:
        return 'kde'

    def evaluate(self, values: NDArray[np.floating[Any]]):
        kde = sp_stats.gaussian_kde(values, bw_method=self.bw_method)
        h = float(np.sqrt(kde.covariance[0, 0]))
        lo = float(values.min()) - self.cut * h
        hi = float(values.max()) + self.cut * h
        grid = np.linspace(lo, hi, self.grid_size)
        density = kde(grid)
        return grid, density, _cell_edges(grid)

    def __repr__(self) -> str:
        return (
            f"KDEDensity(bw_method={self.bw_method!r}, grid_size={self.grid_size}, "
            f"cut={self.cut})"
        )


class HistogramDensity:
    """
    Equal-width histogram.

    Args:
        bins: Bin count (int >= 1) or a numpy rule name ('fd' default,
            'auto', 'sturges', 'scott', ...).
    """

    def __init__(self, bins: int | str = 'fd'):
        if isinstance(bins, str):
            if bins not in _BIN_RULES:
                raise ValidationError(
                    f"bins: unknown rule {bins!r}. Valid rules: {', '.join(_BIN_RULES)}"
                )
        elif isinstance(bins, bool) or not isinstance(bins, numbers.Integral) or bins < 1:
            raise ValidationError(f"bins: must be a positive integer or rule name, got {bins!r}")
        self.bins = bins

    @property
    def name(self) -> str:
        return 'histogram'

    def evaluate(self, values: NDArray[np.floating[Any]]):
        counts, edges = np.histogram(values, bins=self.bins)
        grid = 0.5 * (edges[:-1] + edges[1:])
        density = counts / (counts.sum() * np.diff(edges))
        return grid, density, edges

    def __repr__(self) -> str:
        return f"HistogramDensity(bins={self.bins!r})"
