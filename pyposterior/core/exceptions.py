"""
Exception hierarchy for pyposterior.

Catch PyPosteriorError for anything raised by the library. Input
problems derive from ValidationError; failures during simulation derive
from NumericalError. Domain exceptions expose the values needed to
diagnose them as attributes.
"""

from __future__ import annotations


class PyPosteriorError(Exception):
    """Base exception for all pyposterior errors."""
    pass


class ValidationError(PyPosteriorError):
    """An argument is malformed or out of range."""
    pass


class DimensionError(ValidationError):
    """
    Draws or data have the wrong shape, e.g. vector draws passed where
    scalar draws are required.
    """
    pass


class MisalignedSampleError(DimensionError):
    """
    Samples combined by a transform do not share the same length.

    Element i of every input must come from the same simulation draw,
    which is impossible when lengths differ.

    Attributes:
        lengths: Length of each input sample, in argument order
    """

    def __init__(self, message: str, lengths: tuple[int, ...] = ()):
        super().__init__(message)
        self.lengths = tuple(lengths)


class InvalidParameterError(ValidationError):
    """
    Distribution parameter outside the family's valid domain.

    Attributes:
        family: Family tag of the distribution being constructed
        parameter: Name of the offending parameter
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        family: str | None = None,
        parameter: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.family = family
        self.parameter = parameter
        self.value = value


class InsufficientSampleError(ValidationError):
    """
    Statistic is undefined for the given sample size.

    Example: the unbiased variance needs at least two draws.

    Attributes:
        required: Minimum sample size the operation needs
        actual: Sample size that was supplied
    """

    def __init__(
        self,
        message: str,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.required = required
        self.actual = actual


class InvalidMassError(ValidationError):
    """
    Target probability mass for a credible region is out of range.

    Attributes:
        target_mass: The rejected mass
    """

    def __init__(self, message: str, target_mass: float | None = None):
        super().__init__(message)
        self.target_mass = target_mass


class NumericalError(PyPosteriorError):
    """A computation produced unusable numbers."""
    pass


class SamplingError(NumericalError):
    """
    A draw, transform output or simulated statistic was not finite.

    Downstream estimators assume finite values, so the offending
    sample is rejected as a whole.

    Attributes:
        n_nonfinite: Number of NaN or Inf values found
        source: Description of what produced the values
    """

    def __init__(
        self,
        message: str,
        n_nonfinite: int | None = None,
        source: str | None = None,
    ):
        super().__init__(message)
        self.n_nonfinite = n_nonfinite
        self.source = source
