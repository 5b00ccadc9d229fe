"""
Tests for sample() and sample_independent().
"""

import numpy as np
import pytest

from pyposterior.core.exceptions import ValidationError
from pyposterior.distributions import Beta, Gamma
from pyposterior.sampling import sample, sample_independent


class TestSample:

    def test_exact_length(self):
        assert len(sample(Gamma(68, 45), 1234, seed=1)) == 1234

    def test_seed_reproducible(self):
        a = sample(Beta(3, 7), 500, seed=99)
        b = sample(Beta(3, 7), 500, seed=99)
        np.testing.assert_array_equal(a.values, b.values)

    def test_different_seeds_differ(self):
        a = sample(Beta(3, 7), 500, seed=1)
        b = sample(Beta(3, 7), 500, seed=2)
        assert not np.array_equal(a.values, b.values)

    def test_generator_consumed_in_place(self, rng):
        a = sample(Gamma(2, 1), 10, seed=rng)
        b = sample(Gamma(2, 1), 10, seed=rng)
        assert not np.array_equal(a.values, b.values)

    def test_single_draw(self):
        assert len(sample(Gamma(2, 1), 1, seed=0)) == 1

    @pytest.mark.parametrize("n", [0, -5, 2.5, True])
    def test_bad_n(self, n):
        with pytest.raises(ValidationError):
            sample(Gamma(2, 1), n, seed=0)

    def test_not_a_distribution(self):
        with pytest.raises(ValidationError, match="expected a Distribution"):
            sample("gamma", 10)


class TestSampleIndependent:

    def test_aligned_lengths(self):
        a, b = sample_independent([Gamma(219, 112), Gamma(68, 45)], 1000, seed=5)
        assert len(a) == len(b) == 1000

    def test_reproducible(self):
        first = sample_independent([Gamma(219, 112), Gamma(68, 45)], 200, seed=5)
        second = sample_independent([Gamma(219, 112), Gamma(68, 45)], 200, seed=5)
        for x, y in zip(first, second):
            np.testing.assert_array_equal(x.values, y.values)

    def test_adding_a_variable_keeps_existing_streams(self):
        one = sample_independent([Gamma(219, 112)], 200, seed=5)
        two = sample_independent([Gamma(219, 112), Beta(2, 2)], 200, seed=5)
        np.testing.assert_array_equal(one[0].values, two[0].values)

    def test_streams_uncorrelated(self):
        a, b = sample_independent([Beta(2, 2), Beta(2, 2)], 20000, seed=8)
        r = np.corrcoef(a.values, b.values)[0, 1]
        assert abs(r) < 0.03

    def test_empty(self):
        with pytest.raises(ValidationError, match="at least one"):
            sample_independent([], 10)
