"""
End-to-end use of the top-level API.
"""

import numpy as np
import pytest

import pyposterior
from pyposterior import (
    Gamma,
    apply,
    highest_density_region,
    posterior_predictive_check,
    sample_independent,
)
from pyposterior.estimation import mean, tail_probability
from pyposterior.sampling import transforms


class TestWorkflow:
    """Two Poisson rates with conjugate Gamma posteriors."""

    def test_rate_ratio(self):
        theta1, theta2 = sample_independent([Gamma(219, 112), Gamma(68, 45)], 20000, seed=1)
        ratio = apply(transforms.ratio, theta1, theta2, vectorized=True)

        est = mean(ratio)
        assert 1.1 < est.estimate < 1.5
        assert est.provenance["pyposterior_version"] == pyposterior.__version__

        p = tail_probability(ratio, lambda r: r > 1, vectorized=True)
        assert p.estimate > 0.9

        region = highest_density_region(ratio, 0.95)
        assert region.n_ranges == 1
        assert region.contains(est.estimate)

    def test_predictive_check(self):
        rng = np.random.default_rng(3)
        counts = rng.poisson(1.5, size=45).astype(float)
        theta = Gamma(1 + counts.sum(), 1 + counts.size).draw(500, 4)
        ppc = posterior_predictive_check(theta, "poisson", counts, np.mean, seed=5)
        assert 0.0 <= ppc.p_value <= 1.0
        assert ppc.backend_name == "cpu_predictive"


def test_version():
    assert pyposterior.__version__ == "0.1.0"


@pytest.mark.parametrize("name", pyposterior.__all__)
def test_all_exported(name):
    assert hasattr(pyposterior, name)
