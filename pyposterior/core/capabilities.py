"""
Capability string constants for pyposterior distributions.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pyposterior.core.capabilities import CAPABILITY_CDF

    if dist.supports(CAPABILITY_CDF):
        p_exact = dist.cdf(1.75)
"""

# Can produce i.i.d. draws
CAPABILITY_SAMPLE = 'sample'

# Exact mean available (validation oracle)
CAPABILITY_MEAN = 'mean'

# Exact variance available
CAPABILITY_VARIANCE = 'variance'

# Exact cumulative distribution function available
CAPABILITY_CDF = 'cdf'

# Exact quantile (inverse CDF) available
CAPABILITY_QUANTILE = 'quantile'

ALL_CAPABILITIES = frozenset({
    CAPABILITY_SAMPLE,
    CAPABILITY_MEAN,
    CAPABILITY_VARIANCE,
    CAPABILITY_CDF,
    CAPABILITY_QUANTILE,
})

__all__ = [
    'CAPABILITY_SAMPLE',
    'CAPABILITY_MEAN',
    'CAPABILITY_VARIANCE',
    'CAPABILITY_CDF',
    'CAPABILITY_QUANTILE',
    'ALL_CAPABILITIES',
]
