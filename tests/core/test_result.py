"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
    - Provenance metadata contains expected version keys
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

import pyposterior
from pyposterior.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=1.5),
            info={"n": 1000},
            timing={"total_seconds": 0.01},
            backend_name="cpu_estimator",
        )
        assert result.params.value == 1.5
        assert result.info["n"] == 1000
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_estimator"

    def test_defaults(self):
        result = Result(params=FakeParams(0.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert result.timing is None

    def test_frozen(self):
        result = Result(params=FakeParams(0.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"


class TestWarnings:

    def test_has_warning_substring(self):
        result = Result(
            params=FakeParams(0.0), info={}, timing=None, backend_name="cpu",
            warnings=("only 12 draws: standard error is unreliable",),
        )
        assert result.has_warning("only 12 draws")
        assert not result.has_warning("constant")


class TestProvenance:

    def test_default_keys(self):
        prov = _default_provenance()
        assert prov["pyposterior_version"] == pyposterior.__version__
        assert prov["numpy_version"] == np.__version__
        assert "scipy_version" in prov

    def test_attached_to_result(self):
        result = Result(params=FakeParams(0.0), info={}, timing=None, backend_name="cpu")
        assert "pyposterior_version" in result.provenance

    def test_independent_per_result(self):
        a = Result(params=FakeParams(0.0), info={}, timing=None, backend_name="cpu")
        b = Result(params=FakeParams(0.0), info={}, timing=None, backend_name="cpu")
        assert a.provenance is not b.provenance
