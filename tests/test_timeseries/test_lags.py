"""Tests for lag and difference transforms."""

from __future__ import annotations

import numpy as np
import pytest

from tsconduit import InvalidArgumentError, Series
from tsconduit.timeseries.lags import diff, lag


class TestLag:
    """Tests for lag() function."""

    def test_lag_basic(self):
        """Lag by one period pads the front with an absent value."""
        assert lag([1, 2, 3, 4, 5], 1).to_list() == [None, 1.0, 2.0, 3.0, 4.0]

    def test_lag_two(self):
        """Lag by k pads k positions."""
        assert lag([1, 2, 3, 4, 5], 2).to_list() == [None, None, 1.0, 2.0, 3.0]

    def test_lag_zero_is_identity(self):
        """lag(s, 0) returns the very same series."""
        s = Series([1.0, 2.0, 3.0])
        assert lag(s, 0) is s

    def test_lag_keeps_length(self):
        """Lagging past the end gives an all-absent series of equal length."""
        result = lag([1, 2, 3], 5)
        assert len(result) == 3
        assert result.n_valid == 0

    def test_lag_does_not_mutate(self):
        """The source series is left untouched."""
        s = Series([1.0, 2.0, 3.0])
        lag(s, 1)
        assert s.to_list() == [1.0, 2.0, 3.0]

    def test_lag_negative(self):
        """Negative lags are rejected."""
        with pytest.raises(InvalidArgumentError, match="k must be >= 0"):
            lag([1.0, 2.0], -1)


class TestDiff:
    """Tests for diff() function."""

    def test_diff_basic(self):
        """First difference of a linear series."""
        assert diff([1, 2, 3, 4, 5], 1).to_list() == [None, 1.0, 1.0, 1.0, 1.0]

    def test_diff_second_order(self):
        """Second difference is the difference of the first difference."""
        assert diff([1, 2, 4, 7, 11], 2).to_list() == [None, None, 1.0, 1.0, 1.0]

    def test_diff_is_not_lag_d(self):
        """diff(s, 2) differs from s - lag(s, 2)."""
        s = Series([1.0, 2.0, 4.0, 7.0, 11.0])
        assert not diff(s, 2).equals(s - lag(s, 2))

    def test_diff_keeps_length(self):
        """Each pass loses one more leading observation, length is fixed."""
        result = diff(np.arange(10.0), 3)
        assert len(result) == 10
        assert result.first_valid_index() == 3

    def test_diff_zero(self):
        """Zero passes return the input."""
        s = Series([1.0, 2.0])
        assert diff(s, 0) is s

    def test_diff_negative(self):
        """Negative difference counts are rejected."""
        with pytest.raises(InvalidArgumentError, match="d must be >= 0"):
            diff([1.0, 2.0], -1)
