"""
Argument checks shared by every public entry point.

Each check tests one property and raises at once with the offending
value in the message; nothing is repaired or guessed. ``name`` is the
argument name as the caller knows it and prefixes every message.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.exceptions import (
    DimensionError,
    InsufficientSampleError,
    MisalignedSampleError,
    SamplingError,
    ValidationError,
)


def check_array(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert draws or data to a floating-point array.

    Integer and boolean input (e.g. indicator draws) is promoted to
    float64; existing float dtypes are kept.

    Raises:
        ValidationError: If the input is ragged, mixed-type or non-numeric.
    """
    try:
        arr = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if arr.dtype != np.bool_ and not np.issubdtype(arr.dtype, np.number):
        raise ValidationError(f"{name}: non-numeric dtype {arr.dtype}")

    if np.issubdtype(arr.dtype, np.floating):
        return arr
    return arr.astype(np.float64)


def check_finite(values: NDArray[np.floating[Any]], name: str) -> None:
    """
    Reject draws containing NaN or Inf.

    Raises:
        SamplingError: With the number of offending values and ``name``
            as the source.
    """
    finite = np.isfinite(values)
    if finite.all():
        return
    n_nan = int(np.isnan(values).sum())
    n_inf = int(values.size - finite.sum()) - n_nan
    raise SamplingError(
        f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
        n_nonfinite=n_nan + n_inf,
        source=name,
    )


def check_ndim(values: NDArray[Any], ndim: int, name: str) -> None:
    """Raise DimensionError unless ``values.ndim == ndim``."""
    if values.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {values.ndim}D with shape {values.shape}"
        )


def check_1d(values: NDArray[Any], name: str) -> None:
    check_ndim(values, 1, name)


def check_consistent_length(*arrays: NDArray[Any], names: tuple[str, ...]) -> None:
    """
    Require every array to hold the same number of draws (axis 0).

    Raises:
        ValueError: If ``names`` and ``arrays`` differ in count (caller bug).
        MisalignedSampleError: If the lengths differ; ``lengths`` lists
            them in argument order.
    """
    if len(names) != len(arrays):
        raise ValueError(
            f"got {len(arrays)} arrays but {len(names)} names"
        )
    lengths = tuple(int(a.shape[0]) for a in arrays)
    if len(set(lengths)) <= 1:
        return
    listing = ", ".join(f"{nm}={n}" for nm, n in zip(names, lengths))
    raise MisalignedSampleError(f"Inconsistent lengths: {listing}", lengths=lengths)


def check_min_samples(values: NDArray[Any], min_samples: int, name: str) -> None:
    """
    Require at least ``min_samples`` draws along axis 0.

    Raises:
        InsufficientSampleError: Carrying ``required`` and ``actual``.
    """
    n = int(values.shape[0]) if values.ndim else 0
    if n < min_samples:
        raise InsufficientSampleError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            required=min_samples,
            actual=n,
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Accept an integer >= 1 (numpy integers included, bool excluded).

    Raises:
        ValidationError: Otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_probability(value: Any, name: str) -> float:
    """
    Accept a real number strictly between 0 and 1.

    Used for confidence levels and quantile probabilities.

    Raises:
        ValidationError: Otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a real number in (0, 1), got {value!r}")
    p = float(value)
    if not 0.0 < p < 1.0:
        raise ValidationError(f"{name}: must be in (0, 1), got {value}")
    return p
