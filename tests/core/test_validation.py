"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, non-numeric rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
    - check_positive_int / check_probability: scalar arguments
"""

import numpy as np
import pytest

from pyposterior.core.exceptions import (
    DimensionError,
    InsufficientSampleError,
    MisalignedSampleError,
    SamplingError,
    ValidationError,
)
from pyposterior.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_ndim,
    check_positive_int,
    check_probability,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a float ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_bool_indicators_accepted(self):
        result = check_array(np.array([True, False, True]), "x")
        np.testing.assert_array_equal(result, [1.0, 0.0, 1.0])

    def test_float_passthrough(self):
        arr = np.array([1.5, 2.5])
        assert check_array(arr, "x").dtype == np.float64

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1.0, "two", None], "x")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:
    """check_finite raises SamplingError with counts."""

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_and_inf_counted(self):
        with pytest.raises(SamplingError) as exc_info:
            check_finite(np.array([1.0, np.nan, np.inf, -np.inf]), "draws")
        assert exc_info.value.n_nonfinite == 3
        assert exc_info.value.source == "draws"
        assert "1 NaN, 2 Inf" in str(exc_info.value)


# ═══════════════════════════════════════════════════════════════════════
# Dimensions
# ═══════════════════════════════════════════════════════════════════════


class TestDimensions:

    def test_check_ndim_ok(self):
        check_ndim(np.zeros((3, 2)), 2, "x")

    def test_check_ndim_wrong(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_ndim(np.zeros(3), 2, "x")

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError):
            check_1d(np.zeros((3, 1)), "x")


class TestConsistentLength:
    """check_consistent_length compares first dimensions."""

    def test_equal_lengths_pass(self):
        check_consistent_length(np.zeros(5), np.zeros((5, 2)), names=("a", "b"))

    def test_single_array_passes(self):
        check_consistent_length(np.zeros(5), names=("a",))

    def test_mismatch_reports_lengths(self):
        with pytest.raises(MisalignedSampleError) as exc_info:
            check_consistent_length(np.zeros(5), np.zeros(4), names=("a", "b"))
        assert exc_info.value.lengths == (5, 4)
        assert "a=5" in str(exc_info.value)
        assert "b=4" in str(exc_info.value)

    def test_name_count_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(5), np.zeros(5), names=("a",))


class TestMinSamples:

    def test_enough(self):
        check_min_samples(np.zeros(2), 2, "x")

    def test_too_few(self):
        with pytest.raises(InsufficientSampleError) as exc_info:
            check_min_samples(np.zeros(1), 2, "x")
        assert exc_info.value.required == 2
        assert exc_info.value.actual == 1

    def test_empty(self):
        with pytest.raises(InsufficientSampleError):
            check_min_samples(np.zeros(0), 1, "x")


# ═══════════════════════════════════════════════════════════════════════
# Scalar arguments
# ═══════════════════════════════════════════════════════════════════════


class TestScalars:

    def test_positive_int(self):
        assert check_positive_int(np.int64(7), "n") == 7
        assert type(check_positive_int(np.int64(7), "n")) is int

    @pytest.mark.parametrize("bad", [0, -3, 2.0, True, "5", None])
    def test_positive_int_rejects(self, bad):
        with pytest.raises(ValidationError):
            check_positive_int(bad, "n")

    def test_probability(self):
        assert check_probability(0.95, "conf_level") == 0.95

    @pytest.mark.parametrize("bad", [0.0, 1.0, -0.1, 1.5, False, "0.5"])
    def test_probability_rejects(self, bad):
        with pytest.raises(ValidationError):
            check_probability(bad, "conf_level")
