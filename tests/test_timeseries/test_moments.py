"""Tests for mean, sample variance and autocovariance."""

from __future__ import annotations

import numpy as np
import pytest

from tsconduit import InvalidArgumentError, NumericalInstabilityError
from tsconduit.timeseries.moments import (
    acvf,
    default_max_lags,
    mean,
    variance_sample,
)


class TestDefaultMaxLags:
    """Tests for the default lag count."""

    def test_values(self):
        """floor(10 * log10(n))."""
        assert default_max_lags(5) == 6
        assert default_max_lags(100) == 20
        assert default_max_lags(1) == 0
        assert default_max_lags(0) == 0


class TestMoments:
    """Tests for mean() and variance_sample()."""

    def test_mean_and_variance(self):
        """Plain sample statistics over present values."""
        x = [1.0, 2.0, None, 3.0]
        assert mean(x) == 2.0
        assert variance_sample(x) == pytest.approx(1.0)

    def test_variance_too_short(self):
        """A single observation has no sample variance."""
        with pytest.raises(NumericalInstabilityError):
            variance_sample([1.0])


class TestAcvf:
    """Tests for acvf() function."""

    def test_acvf_unbiased(self):
        """Default divisor is n - i."""
        gamma = acvf([1, 2, 3, 4, 5], nlags=4)
        np.testing.assert_allclose(gamma, [2.0, 1.0, -1.0 / 3.0, -2.0, -4.0])

    def test_acvf_biased(self):
        """unbiased=False divides every lag by n."""
        gamma = acvf([1, 2, 3, 4, 5], unbiased=False, nlags=4)
        np.testing.assert_allclose(gamma, [2.0, 0.8, -0.2, -0.8, -0.8])

    def test_acvf_no_demean(self):
        """Without demeaning only the lagged factor is centered."""
        gamma = acvf([1, 2, 3, 4, 5], demean=False, nlags=1)
        np.testing.assert_allclose(gamma, [2.0, -0.5])

    def test_acvf_default_length(self):
        """Default length is floor(10 * log10(n)) + 1."""
        x = np.arange(100.0)
        assert len(acvf(x)) == 21

    def test_acvf_past_end_is_zero(self):
        """Lags without overlapping observations are reported as 0."""
        gamma = acvf([1, 2, 3, 4, 5])
        assert len(gamma) == 7
        np.testing.assert_allclose(gamma[5:], [0.0, 0.0])

    def test_acvf_constant_series(self):
        """A constant series has zero variance after demeaning."""
        gamma = acvf(np.full(20, 3.0))
        assert gamma[0] == 0.0

    def test_acvf_prefix_independent_of_nlags(self):
        """Extending nlags does not change lower lags."""
        x = np.sin(np.arange(50) / 3.0)
        np.testing.assert_allclose(acvf(x, nlags=30)[:17], acvf(x))

    def test_acvf_white_noise(self, rng):
        """White noise has unit variance and little autocovariance."""
        x = rng.normal(size=2000)
        gamma = acvf(x, nlags=3)
        assert abs(gamma[0] - 1.0) < 0.1
        assert np.all(np.abs(gamma[1:]) < 0.1)

    def test_acvf_skips_absent(self):
        """Absent values drop out of the sums."""
        gamma = acvf([None, 1, 2, 3, 4, 5], nlags=0)
        # mean 3, squares 4+1+0+1+4 over n=6
        np.testing.assert_allclose(gamma, [10.0 / 6.0])

    def test_acvf_negative_nlags(self):
        """Negative lag counts are rejected."""
        with pytest.raises(InvalidArgumentError):
            acvf([1.0, 2.0], nlags=-1)
