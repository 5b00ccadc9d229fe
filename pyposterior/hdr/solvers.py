"""
Highest-density region (HDR) of an empirical sample.

Algorithm (Hyndman 1996, grid version):
    1. Estimate the density on a grid with a pluggable DensityEstimator.
    2. Normalize the grid densities to sum to one.
    3. Sort grid points by density, highest first (stable sort).
    4. Accumulate mass until it first reaches target_mass; the density
       there is the cutoff.
    5. Every grid cell with density >= cutoff belongs to the region,
       merged into maximal runs of adjacent cells.
    6. While the draws inside the region are fewer than target_mass,
       lower the cutoff to the next density level.

The region is the smallest set of density levels holding the target mass
both on the grid and among the draws, so it is minimal up to grid
resolution and may be disjoint.

References:
    Hyndman, R.J. (1996) "Computing and Graphing Highest Density
    Regions", The American Statistician, 50(2), 120-126.
"""

from __future__ import annotations

import numbers
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.compute.timing import Timer
from pyposterior.core.exceptions import InvalidMassError, NumericalError, ValidationError
from pyposterior.core.protocols import DensityEstimator
from pyposterior.core.result import Result
from pyposterior.core.sample import EmpiricalSample, scalar_values
from pyposterior.hdr._common import DEFAULT_TARGET_MASS, HDRParams
from pyposterior.hdr._density import KDEDensity
from pyposterior.hdr.solution import HDRSolution

BACKEND_NAME = 'cpu_hdr'

_EMPTY = np.empty(0, dtype=np.float64)


def _check_mass(target_mass: Any) -> float:
    if isinstance(target_mass, bool) or not isinstance(target_mass, numbers.Real):
        raise InvalidMassError(
            f"target_mass: expected a real number in (0, 1], got {target_mass!r}",
            target_mass=None,
        )
    m = float(target_mass)
    if not 0.0 < m <= 1.0:
        raise InvalidMassError(
            f"target_mass: must be in (0, 1], got {target_mass}",
            target_mass=m,
        )
    return m


def _contiguous_ranges(
    inside: NDArray[np.bool_],
    edges: NDArray[np.floating[Any]],
) -> tuple[tuple[float, float], ...]:
    """Merge runs of selected cells into (lower, upper) ranges."""
    padded = np.concatenate(([0], inside.astype(np.int8), [0]))
    change = np.diff(padded)
    starts = np.flatnonzero(change == 1)
    stops = np.flatnonzero(change == -1)  # one past the last cell of each run
    return tuple((float(edges[i]), float(edges[j])) for i, j in zip(starts, stops))


def _fraction_inside(
    values: NDArray[np.floating[Any]],
    ranges: tuple[tuple[float, float], ...],
) -> float:
    hit = np.zeros(values.shape[0], dtype=bool)
    for lo, hi in ranges:
        hit |= (values >= lo) & (values <= hi)
    return float(hit.mean())


def _check_grid(grid, density, edges, name: str):
    grid = np.asarray(grid, dtype=np.float64)
    density = np.asarray(density, dtype=np.float64)
    edges = np.asarray(edges, dtype=np.float64)
    G = grid.shape[0]
    if grid.ndim != 1 or density.shape != (G,) or edges.shape != (G + 1,):
        raise NumericalError(
            f"{name}: inconsistent output shapes grid={grid.shape}, "
            f"density={density.shape}, edges={edges.shape}"
        )
    if not np.all(np.isfinite(density)) or np.any(density < 0) or density.sum() <= 0:
        raise NumericalError(f"{name}: density must be finite, non-negative and not all zero")
    if np.any(np.diff(edges) <= 0):
        raise NumericalError(f"{name}: cell edges must be strictly increasing")
    return grid, density, edges


def highest_density_region(
    sample: EmpiricalSample | ArrayLike,
    target_mass: float = DEFAULT_TARGET_MASS,
    *,
    density: DensityEstimator | None = None,
) -> HDRSolution:
    """
    Minimal-width credible region holding ``target_mass``.

    Parameters
    ----------
    sample : EmpiricalSample or array-like
        Scalar draws.
    target_mass : float
        Probability mass in (0, 1]. 1 returns the full empirical support
        [min, max] as one range. Default 0.95.
    density : DensityEstimator, optional
        Density strategy. Defaults to ``KDEDensity()`` (Gaussian KDE,
        Scott's rule, 512-point grid); pass ``HistogramDensity(bins)`` for
        a histogram-based region.

    Returns
    -------
    HDRSolution
        One or more disjoint ranges, the cutoff and the mass covered.

    Raises
    ------
    InvalidMassError
        If target_mass is not in (0, 1].
    DimensionError
        If the sample is vector-valued.
    """
    target = _check_mass(target_mass)
    values = scalar_values(sample)
    estimator = density if density is not None else KDEDensity()
    if not isinstance(estimator, DensityEstimator):
        raise ValidationError(
            f"density: {type(estimator).__name__} does not implement DensityEstimator "
            f"(needs .name and .evaluate(values))"
        )

    timer = Timer()
    timer.start()
    warns: list[str] = []
    lo, hi = float(values.min()), float(values.max())

    if target == 1.0:
        ranges = ((lo, hi),)
        cutoff = density_cutoff = 0.0
        mass = empirical = 1.0
        grid = dens = _EMPTY
    elif lo == hi:
        msg = f"all {values.shape[0]} draws equal {lo:g}; region is a single point"
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        warns.append(msg)
        ranges = ((lo, hi),)
        cutoff = density_cutoff = float('inf')
        mass = empirical = 1.0
        grid = dens = _EMPTY
    else:
        with timer.section('density'):
            grid, dens, edges = _check_grid(
                *estimator.evaluate(values), name=estimator.name,
            )

        with timer.section('region'):
            probs = dens / dens.sum()
            order = np.argsort(-probs, kind='stable')
            cum = np.cumsum(probs[order])
            k = min(int(np.searchsorted(cum, target, side='left')), len(order) - 1)
            cutoff = float(probs[order[k]])
            density_cutoff = float(dens[order[k]])
            inside = probs >= cutoff
            ranges = _contiguous_ranges(inside, edges)
            empirical = _fraction_inside(values, ranges)

            # A smoothed density can reach the target on the grid while the
            # draws inside fall short; lower the cutoff level by level.
            j = k
            while empirical < target and j + 1 < len(order):
                j += 1
                level = float(probs[order[j]])
                if level >= cutoff:
                    continue
                cutoff = level
                density_cutoff = float(dens[order[j]])
                inside = probs >= cutoff
                ranges = _contiguous_ranges(inside, edges)
                empirical = _fraction_inside(values, ranges)
            mass = float(probs[inside].sum())

        if empirical < target:
            msg = (
                f"{estimator.name}: cells cover only {empirical:.4f} of the draws, "
                f"below target_mass {target:g}"
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=2)
            warns.append(msg)

    timer.stop()

    params = HDRParams(
        ranges=ranges,
        cutoff=cutoff,
        density_cutoff=density_cutoff,
        target_mass=target,
        mass=mass,
        empirical_mass=empirical,
        grid=grid,
        density=dens,
        method=estimator.name,
    )
    result = Result(
        params=params,
        info={
            'n': int(values.shape[0]),
            'estimator': repr(estimator),
            'grid_size': int(grid.shape[0]),
            'n_ranges': len(ranges),
        },
        timing=timer.result(),
        backend_name=BACKEND_NAME,
        warnings=tuple(warns),
    )
    return HDRSolution(_result=result)
