"""
EmpiricalSample: the value every pyposterior component passes around.

An EmpiricalSample is an ordered, read-only array of S finite draws,
shape (S,) for scalar random variables or (S, d) for vector-valued ones.
Element i is simulation draw i; transforms rely on that ordering to
combine samples of several random variables.

Provenance strings record where the draws came from, e.g.
``('gamma(shape=68, rate=45)',)`` or ``('ratio', 'gamma(...)', ...)``.
They are carried for diagnostics only and never affect computation or
equality.

Usage:
    from pyposterior.core.sample import EmpiricalSample

    s = EmpiricalSample.from_array([0.1, 0.4, 0.3])
    len(s)       # 3
    s.values     # read-only float64 array
    np.mean(s)   # works, EmpiricalSample supports __array__
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.exceptions import DimensionError
from pyposterior.core.validation import (
    check_array,
    check_finite,
    check_min_samples,
)


@dataclass(frozen=True, eq=False)
class EmpiricalSample:
    """
    Immutable sample of S >= 1 finite draws.

    Construct via from_array(), not directly. Two samples are equal when
    their draws are; provenance is ignored.
    """
    _values: NDArray[np.floating[Any]]
    _provenance: tuple[str, ...] = ()

    @classmethod
    def from_array(
        cls,
        values: ArrayLike,
        *,
        provenance: tuple[str, ...] | str = (),
        name: str = "sample",
    ) -> EmpiricalSample:
        """
        Validate and wrap draws.

        Args:
            values: 1D (S,) or 2D (S, d) array-like of draws.
            provenance: Description(s) of what produced the draws.
            name: Parameter name used in error messages.

        Raises:
            DimensionError: If values are not 1D or 2D.
            InsufficientSampleError: If S < 1.
            SamplingError: If any value is NaN or Inf.
        """
        arr = check_array(values, name)
        if arr.ndim not in (1, 2):
            raise DimensionError(
                f"{name}: expected 1D (S,) or 2D (S, d) draws, got shape {arr.shape}"
            )
        check_min_samples(arr, 1, name)
        check_finite(arr, name)

        arr = np.array(arr, dtype=np.float64, copy=True)
        arr.setflags(write=False)

        if isinstance(provenance, str):
            provenance = (provenance,)
        return cls(_values=arr, _provenance=tuple(provenance))

    # === Array access ===

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the draws, shape (S,) or (S, d)."""
        return self._values

    @property
    def size(self) -> int:
        """Number of draws S."""
        return int(self._values.shape[0])

    @property
    def dim(self) -> int:
        """Dimension of each draw (1 for scalar samples)."""
        return 1 if self._values.ndim == 1 else int(self._values.shape[1])

    @property
    def is_scalar(self) -> bool:
        """True when every draw is a single real number."""
        return self._values.ndim == 1

    @property
    def provenance(self) -> tuple[str, ...]:
        """Diagnostic description of the draws' origin."""
        return self._provenance

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index):
        return self._values[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __array__(self, dtype=None, copy=None):
        if copy or dtype is not None:
            return np.array(self._values, dtype=dtype, copy=True)
        return self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmpiricalSample):
            return NotImplemented
        return (
            self._values.shape == other._values.shape
            and bool(np.array_equal(self._values, other._values))
        )

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0, which array_equal treats as equal
        return hash((self._values.shape, (self._values + 0.0).tobytes()))

    def __repr__(self) -> str:
        shape = self.size if self.is_scalar else f"{self.size}x{self.dim}"
        origin = self._provenance[0] if self._provenance else "unknown"
        return f"EmpiricalSample(S={shape}, provenance={origin!r})"


def scalar_values(
    sample: EmpiricalSample | ArrayLike,
    name: str = "sample",
) -> NDArray[np.floating[Any]]:
    """
    Draws of a scalar sample as a read-only 1D array.

    Accepts an EmpiricalSample or any array-like (validated the same way).

    Raises:
        DimensionError: If the draws are vector-valued.
    """
    if not isinstance(sample, EmpiricalSample):
        sample = EmpiricalSample.from_array(sample, name=name)
    if not sample.is_scalar:
        raise DimensionError(
            f"{name}: expected scalar draws, got draws of dimension {sample.dim}; "
            f"apply() a transform to reduce them first"
        )
    return sample.values
