"""
Highest-density regions.

Usage:
    from pyposterior.hdr import highest_density_region, HistogramDensity

    region = highest_density_region(theta, 0.95)
    region.ranges        # ((1.14, 1.89),)
    highest_density_region(theta, 0.9, density=HistogramDensity(bins=60))
"""

from pyposterior.hdr._common import HDRParams
from pyposterior.hdr._density import HistogramDensity, KDEDensity
from pyposterior.hdr.solution import HDRSolution
from pyposterior.hdr.solvers import highest_density_region

__all__ = [
    "highest_density_region",
    "KDEDensity",
    "HistogramDensity",
    "HDRParams",
    "HDRSolution",
]
