"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def bimodal_draws(rng):
    """Equal mixture of N(-3, 0.5) and N(3, 0.5), 20000 draws."""
    left = rng.normal(-3.0, 0.5, 10000)
    right = rng.normal(3.0, 0.5, 10000)
    return rng.permutation(np.concatenate([left, right]))
