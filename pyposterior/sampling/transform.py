"""
Transform engine: derived samples of functions of random variables.

If theta_1, ..., theta_k are aligned samples (element i of each comes
from simulation draw i), then g(theta_1[i], ..., theta_k[i]) for
i = 1..S is a sample from the distribution of g(theta_1, ..., theta_k).
Pairing elements any other way would approximate a different random
variable, so the engine refuses inputs of unequal length.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.exceptions import MisalignedSampleError, SamplingError, ValidationError
from pyposterior.core.sample import EmpiricalSample
from pyposterior.core.validation import check_consistent_length


def _as_sample(sample: EmpiricalSample | ArrayLike, name: str) -> EmpiricalSample:
    if isinstance(sample, EmpiricalSample):
        return sample
    return EmpiricalSample.from_array(sample, name=name)


def _transform_name(transform: Callable[..., Any], name: str | None) -> str:
    if name is not None:
        return name
    return getattr(transform, '__name__', type(transform).__name__)


def _float_output(result: Any, label: str) -> NDArray[np.float64]:
    try:
        return np.asarray(result, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(
            f"{label}: transform returned non-numeric or ragged values: {e}"
        ) from e


def apply(
    transform: Callable[..., Any],
    *samples: EmpiricalSample | ArrayLike,
    vectorized: bool = False,
    name: str | None = None,
) -> EmpiricalSample:
    """
    Apply a deterministic function elementwise across aligned samples.

    Parameters
    ----------
    transform : callable
        Function of k arguments, one per input sample. Called once per
        draw with scalars (or rows, for vector samples), unless
        ``vectorized`` is True.
    *samples : EmpiricalSample or array-like
        k >= 1 samples of equal length S.
    vectorized : bool
        If True, call ``transform`` once with the k full arrays; it must
        return S values. Use for numpy-aware functions on large S.
    name : str, optional
        Label recorded in the output provenance. Defaults to the
        function's ``__name__``.

    Returns
    -------
    EmpiricalSample
        Derived sample of length S; element i is
        ``transform(samples[0][i], ..., samples[k-1][i])``.

    Raises
    ------
    ValidationError
        If transform is not callable or no samples are given, or it
        returned values that do not form a numeric array.
    MisalignedSampleError
        If input lengths differ, or a vectorized transform does not
        return S values.
    SamplingError
        If the transform produced NaN or Inf for any draw.
    """
    if not callable(transform):
        raise ValidationError(f"transform: expected a callable, got {type(transform).__name__}")
    if not samples:
        raise ValidationError("apply: need at least one input sample")

    names = tuple(f"samples[{i}]" for i in range(len(samples)))
    inputs = [_as_sample(s, nm) for s, nm in zip(samples, names)]
    arrays = [s.values for s in inputs]
    check_consistent_length(*arrays, names=names)
    S = arrays[0].shape[0]
    label = _transform_name(transform, name)

    if vectorized:
        out = _float_output(transform(*arrays), label)
        got = out.shape[0] if out.ndim > 0 else 1
        if out.ndim == 0 or got != S:
            raise MisalignedSampleError(
                f"{label}: vectorized transform returned shape {out.shape}, "
                f"expected leading length {S}",
                lengths=(S, got),
            )
    else:
        out = _float_output([transform(*draw) for draw in zip(*arrays)], label)

    bad = ~np.isfinite(out)
    if bad.any():
        first = int(np.argmax(bad.reshape(S, -1).any(axis=1)))
        raise SamplingError(
            f"{label}: produced {int(bad.sum())} non-finite values "
            f"(first at draw {first})",
            n_nonfinite=int(bad.sum()),
            source=label,
        )

    origin = ", ".join(s.provenance[0] if s.provenance else "?" for s in inputs)
    return EmpiricalSample.from_array(out, provenance=(f"{label}({origin})",))
