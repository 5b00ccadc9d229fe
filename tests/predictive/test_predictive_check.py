"""
Tests for posterior predictive checks.

Validates:
    - Self-consistency: data simulated from the model give p-values
      centred on 0.5
    - Misfit: a statistic the model cannot reproduce gives an extreme p
    - Reproducibility for a fixed seed, independent of worker count
    - Validation and failure modes
"""

import numpy as np
import pytest

from pyposterior.core.exceptions import (
    InvalidParameterError,
    SamplingError,
    ValidationError,
)
from pyposterior.distributions import Gamma, Normal, Poisson
from pyposterior.predictive import posterior_predictive_check
from pyposterior.sampling import sample


@pytest.fixture
def counts(rng):
    """Overdispersed counts: a Poisson model underestimates their variance."""
    return rng.negative_binomial(2, 0.2, size=60).astype(float)


@pytest.fixture
def rate_draws(counts):
    """Conjugate Gamma posterior for a Poisson rate under a Gamma(1, 0.01) prior."""
    return sample(Gamma(1 + counts.sum(), 0.01 + counts.size), 1000, seed=31)


# ═══════════════════════════════════════════════════════════════════════
# Calibration
# ═══════════════════════════════════════════════════════════════════════


class TestCalibration:

    def test_self_consistent_p_values(self):
        """With the true parameter, one-sided p-values average about 0.5."""
        theta = np.tile([0.0, 1.0], (200, 1))
        p_values = []
        for trial in range(100):
            observed = Normal(0, 1).draw(20, trial).values
            ppc = posterior_predictive_check(
                theta, "normal", observed, np.mean,
                alternative="greater", seed=1000 + trial,
            )
            p_values.append(ppc.p_value)
        p_values = np.array(p_values)
        assert p_values.mean() == pytest.approx(0.5, abs=0.1)
        assert 0.01 <= np.mean(p_values < 0.1) <= 0.22

    def test_variance_misfit_detected(self, counts, rate_draws):
        ppc = posterior_predictive_check(
            rate_draws, "poisson", counts, np.var, alternative="greater", seed=5,
        )
        assert ppc.p_value < 0.01
        assert ppc.percentile > 99

    def test_mean_fits(self, counts, rate_draws):
        ppc = posterior_predictive_check(rate_draws, Poisson, counts, np.mean, seed=5)
        assert 0.05 < ppc.p_value <= 1.0


# ═══════════════════════════════════════════════════════════════════════
# p-value definitions
# ═══════════════════════════════════════════════════════════════════════


class TestPValues:

    def test_alternatives_consistent(self, counts, rate_draws):
        kwargs = dict(seed=9)
        g = posterior_predictive_check(rate_draws, "poisson", counts, np.max,
                                       alternative="greater", **kwargs)
        l = posterior_predictive_check(rate_draws, "poisson", counts, np.max,
                                       alternative="less", **kwargs)
        t = posterior_predictive_check(rate_draws, "poisson", counts, np.max, **kwargs)
        np.testing.assert_array_equal(g.simulated_stats, t.simulated_stats)
        assert g.p_value == g.p_greater
        assert l.p_value == l.p_less
        assert t.p_value == pytest.approx(min(1.0, 2 * min(g.p_greater, l.p_less)))

    def test_fractions_match_definition(self, counts, rate_draws):
        ppc = posterior_predictive_check(rate_draws, "poisson", counts, np.median, seed=3)
        sims = ppc.simulated_stats
        assert ppc.p_greater == pytest.approx(np.mean(sims >= ppc.observed_stat))
        assert ppc.p_less == pytest.approx(np.mean(sims <= ppc.observed_stat))
        assert ppc.n_replicates == 1000

    def test_two_sided_capped(self):
        """With ties everywhere, both one-sided fractions are 1."""
        theta = np.full(50, 3.0)
        with pytest.warns(RuntimeWarning, match="constant"):
            ppc = posterior_predictive_check(
                theta, lambda t: Normal(t, 1.0), [1.0, 2.0], lambda d: 7.0, seed=1,
            )
        assert ppc.p_value == 1.0
        assert ppc.percentile == pytest.approx(50.0)
        assert ppc.warnings


# ═══════════════════════════════════════════════════════════════════════
# Reproducibility
# ═══════════════════════════════════════════════════════════════════════


class TestReproducibility:

    def test_same_seed_same_result(self, counts, rate_draws):
        a = posterior_predictive_check(rate_draws, "poisson", counts, np.var, seed=17)
        b = posterior_predictive_check(rate_draws, "poisson", counts, np.var, seed=17)
        np.testing.assert_array_equal(a.simulated_stats, b.simulated_stats)
        assert a.p_value == b.p_value

    @pytest.mark.parametrize("workers", [2, 4, 7])
    def test_independent_of_workers(self, counts, rate_draws, workers):
        serial = posterior_predictive_check(rate_draws, "poisson", counts, np.var, seed=17)
        threaded = posterior_predictive_check(
            rate_draws, "poisson", counts, np.var, seed=17, workers=workers,
        )
        np.testing.assert_array_equal(serial.simulated_stats, threaded.simulated_stats)
        assert threaded.info["workers"] == workers


# ═══════════════════════════════════════════════════════════════════════
# Families
# ═══════════════════════════════════════════════════════════════════════


class TestFamilies:

    def test_vector_parameters(self):
        theta = np.column_stack([np.full(100, 5.0), np.full(100, 2.0)])
        ppc = posterior_predictive_check(theta, "normal", [4.0, 6.0, 5.5], np.mean, seed=2)
        assert ppc.family == "normal"
        assert ppc.simulated_stats.shape == (100,)

    def test_callable_family(self):
        theta = np.full(100, 2.0)
        ppc = posterior_predictive_check(
            theta, lambda mu: Normal(mu, 0.5), [2.1, 1.9], np.mean, seed=2,
        )
        assert ppc.family == "<lambda>"

    def test_callable_must_return_distribution(self):
        with pytest.raises(ValidationError, match="expected a Distribution"):
            posterior_predictive_check(np.ones(10), lambda t: t, [1.0], np.mean, seed=2)

    def test_invalid_parameter_draw(self):
        theta = np.array([1.0, -1.0, 2.0])
        with pytest.raises(InvalidParameterError):
            posterior_predictive_check(theta, "poisson", [1.0, 2.0], np.mean, seed=2)

    def test_wrong_parameter_count(self):
        with pytest.raises(ValidationError):
            posterior_predictive_check(np.ones(10), "normal", [1.0], np.mean, seed=2)

    def test_unknown_family(self):
        with pytest.raises(ValidationError, match="Unknown family"):
            posterior_predictive_check(np.ones(10), "zipf", [1.0], np.mean)


# ═══════════════════════════════════════════════════════════════════════
# Validation and failures
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    def test_nonfinite_statistic(self):
        def unstable(data):
            return np.inf if data.max() > 3 else data.mean()

        with pytest.raises(SamplingError) as exc_info:
            posterior_predictive_check(np.full(200, 3.0), "poisson", [1.0, 2.0], unstable, seed=4)
        assert exc_info.value.source.startswith("replicate")

    def test_nonfinite_observed_statistic(self):
        with pytest.raises(SamplingError, match="observed"):
            posterior_predictive_check(np.ones(10), "poisson", [1.0], lambda d: np.nan)

    def test_non_scalar_statistic(self):
        with pytest.raises(SamplingError, match="scalar"):
            posterior_predictive_check(np.ones(10), "poisson", [1.0, 2.0], lambda d: d)

    @pytest.mark.parametrize("observed", [[], [1.0, np.nan], [[1.0, 2.0]]])
    def test_bad_observed(self, observed):
        with pytest.raises(ValidationError):
            posterior_predictive_check(np.ones(10), "poisson", observed, np.mean)

    def test_bad_alternative(self):
        with pytest.raises(ValidationError, match="alternative"):
            posterior_predictive_check(np.ones(10), "poisson", [1.0], np.mean,
                                       alternative="two-sided")

    @pytest.mark.parametrize("workers", [0, -1, 1.5, True])
    def test_bad_workers(self, workers):
        with pytest.raises(ValidationError, match="workers"):
            posterior_predictive_check(np.ones(10), "poisson", [1.0], np.mean, workers=workers)

    def test_bad_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            posterior_predictive_check(np.ones(10), "poisson", [1.0], np.mean, backend="gpu")

    def test_summary(self, counts, rate_draws):
        ppc = posterior_predictive_check(rate_draws, "poisson", counts, np.var, seed=1)
        text = ppc.summary()
        assert "POSTERIOR PREDICTIVE CHECK" in text
        assert "Family: poisson" in text
        assert repr(ppc).startswith("PredictiveCheckSolution(S=1000")


class TestBackend:

    def test_cpu_backend_satisfies_protocol(self):
        from pyposterior.core.protocols import Backend
        from pyposterior.predictive.backends.cpu import CPUPredictiveBackend

        backend = CPUPredictiveBackend()
        assert isinstance(backend, Backend)
        assert backend.name == "cpu_predictive"

    def test_timing_sections(self, counts, rate_draws):
        ppc = posterior_predictive_check(rate_draws, "poisson", counts, np.var, seed=1)
        assert {"total_seconds", "observed_stat", "replicates", "p_value"} <= set(ppc.timing)
