"""
Core infrastructure for pyposterior.

This module provides shared abstractions and utilities used by all
domain-specific submodules (distributions, sampling, estimation, hdr,
predictive).

Key components:
    protocols: Backend, DensityEstimator protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    random: Seed resolution and independent child streams
    compute: Timing
"""

from pyposterior.core.protocols import Backend, DensityEstimator
from pyposterior.core.result import Result
from pyposterior.core.sample import EmpiricalSample
from pyposterior.core.random import SeedLike, resolve_rng, spawn_generators
from pyposterior.core.exceptions import (
    PyPosteriorError,
    ValidationError,
    DimensionError,
    MisalignedSampleError,
    InvalidParameterError,
    InsufficientSampleError,
    InvalidMassError,
    NumericalError,
    SamplingError,
)

__all__ = [
    # Protocols
    "Backend",
    "DensityEstimator",
    # Result
    "Result",
    # Samples
    "EmpiricalSample",
    # Random streams
    "SeedLike",
    "resolve_rng",
    "spawn_generators",
    # Exceptions
    "PyPosteriorError",
    "ValidationError",
    "DimensionError",
    "MisalignedSampleError",
    "InvalidParameterError",
    "InsufficientSampleError",
    "InvalidMassError",
    "NumericalError",
    "SamplingError",
]
