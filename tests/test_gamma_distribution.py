"""
Tests for the Gamma density and cumulative distribution.
"""

import numpy as np
import pytest
from scipy import integrate

from gamma_black.analytics.gamma import cdf, pdf

from .utils.gamma_reference import reference_cdf, reference_pdf

SHAPE_RATE_CASES = [
    (1.0, 1.0),  # exponential
    (2.0, 3.0),
    (0.5, 2.0),  # shape below one, density unbounded at zero
    (24.503, 24.503),  # moment-matched to s = 0.2
    (400.0, 400.0),  # tight distribution around one
]


class TestPdf:
    """Test the Gamma probability density."""

    @pytest.mark.parametrize("a,b", SHAPE_RATE_CASES)
    @pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.7, 4.0])
    def test_matches_scipy_stats(self, x, a, b):
        """Test density against scipy.stats.gamma."""
        assert pdf(x, a, b) == pytest.approx(reference_pdf(x, a, b), rel=1e-10, abs=1e-300)

    def test_exponential_closed_form(self):
        """Test that shape one reduces to the exponential density."""
        for x in [0.0, 0.3, 2.0, 10.0]:
            assert pdf(x, 1.0, 2.5) == pytest.approx(2.5 * np.exp(-2.5 * x), rel=1e-12)

    @pytest.mark.parametrize("a,b", [(1.0, 1.0), (2.0, 3.0), (24.503, 24.503), (400.0, 400.0)])
    def test_integrates_to_one(self, a, b):
        """Test that the density integrates to one."""
        mean = a / b
        upper = mean + 40.0 * np.sqrt(a) / b
        total, _ = integrate.quad(pdf, 0.0, upper, args=(a, b), points=[mean], limit=200)
        assert total == pytest.approx(1.0, abs=1e-8)

    def test_large_shape_is_finite(self):
        """Test that shapes beyond Gamma function overflow still evaluate."""
        a = 1e5
        value = pdf(1.0, a, a)
        assert np.isfinite(value)
        # Approximately normal with standard deviation 1/sqrt(a)
        assert value == pytest.approx(np.sqrt(a / (2 * np.pi)), rel=1e-4)

    def test_vectorized(self):
        """Test that array inputs broadcast."""
        xs = np.array([0.5, 1.0, 1.5])
        values = pdf(xs, 2.0, 3.0)
        assert values.shape == (3,)
        for x, value in zip(xs, values):
            assert value == pytest.approx(reference_pdf(x, 2.0, 3.0), rel=1e-10)

    def test_negative_x_does_not_raise(self):
        """Test that invalid points give floating-point special values."""
        value = pdf(-1.0, 2.5, 1.0)
        assert np.isnan(value)


class TestCdf:
    """Test the Gamma cumulative distribution."""

    @pytest.mark.parametrize("a,b", SHAPE_RATE_CASES)
    def test_zero_at_origin(self, a, b):
        """Test that P(X <= 0) is exactly zero."""
        assert cdf(0.0, a, b) == 0.0

    @pytest.mark.parametrize("a,b", SHAPE_RATE_CASES)
    def test_non_decreasing(self, a, b):
        """Test monotonicity in x."""
        xs = np.linspace(0.0, 5.0 * a / b, 500)
        values = cdf(xs, a, b)
        assert np.all(np.diff(values) >= -1e-15)

    @pytest.mark.parametrize("a,b", SHAPE_RATE_CASES)
    def test_approaches_one(self, a, b):
        """Test that the CDF tends to one far in the right tail."""
        assert cdf(100.0 * a / b + 100.0, a, b) == pytest.approx(1.0, abs=1e-12)

    @pytest.mark.parametrize("a,b", SHAPE_RATE_CASES)
    @pytest.mark.parametrize("x", [0.2, 0.9, 1.0, 1.1, 3.0])
    def test_matches_scipy_stats(self, x, a, b):
        """Test CDF against scipy.stats.gamma with scale 1/b."""
        assert cdf(x, a, b) == pytest.approx(reference_cdf(x, a, b), abs=1e-12)

    def test_exponential_closed_form(self):
        """Test that shape one reduces to 1 - exp(-b x)."""
        for x in [0.1, 1.0, 3.0]:
            assert cdf(x, 1.0, 2.0) == pytest.approx(1.0 - np.exp(-2.0 * x), rel=1e-12)

    def test_rate_rescales_argument(self):
        """Test that cdf(x, a, b) == cdf(b x, a, 1)."""
        assert cdf(0.7, 3.0, 4.0) == pytest.approx(cdf(2.8, 3.0, 1.0), rel=1e-14)
