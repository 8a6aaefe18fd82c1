"""Tests for the Series container."""

from __future__ import annotations

import numpy as np
import pytest

from tsconduit import (
    InvalidArgumentError,
    NumericalInstabilityError,
    Series,
    as_series,
    to_series,
)


class TestConstruction:
    """Tests for building series."""

    def test_none_becomes_absent(self):
        """None values are stored as absent and read back as None."""
        s = Series([1, None, 3])
        assert len(s) == 3
        assert s[0] == 1.0
        assert s[1] is None
        assert s.n_valid == 2
        assert np.isnan(s.values[1])

    def test_from_numpy_copies(self):
        """Construction copies the input buffer."""
        arr = np.array([1.0, 2.0, 3.0])
        s = Series(arr)
        arr[0] = 99.0
        assert s[0] == 1.0

    def test_buffer_is_read_only(self):
        """The exposed buffer cannot be written through."""
        s = Series([1.0, 2.0])
        with pytest.raises(ValueError):
            s.values[0] = 5.0

    def test_rejects_2d(self):
        """Only 1D data is accepted."""
        with pytest.raises(InvalidArgumentError, match="1D"):
            Series(np.ones((2, 2)))

    def test_rejects_inf(self):
        """Infinite values are rejected."""
        with pytest.raises(InvalidArgumentError, match="Inf"):
            Series([1.0, np.inf])

    def test_as_series_passthrough(self):
        """as_series returns an existing Series unchanged."""
        s = Series([1.0])
        assert as_series(s) is s
        assert isinstance(as_series([1.0, 2.0]), Series)
        assert to_series([1, 2]).to_list() == [1.0, 2.0]

    def test_slice_returns_series(self):
        """Slicing yields a new Series."""
        s = Series([1, 2, 3, 4])
        part = s[1:3]
        assert isinstance(part, Series)
        assert part.to_list() == [2.0, 3.0]

    def test_first_valid_index(self):
        """first_valid_index skips leading absent values."""
        assert Series([None, None, 4.0]).first_valid_index() == 2
        assert Series([None, None]).first_valid_index() is None
        assert Series.absent(3).n_valid == 0


class TestArithmetic:
    """Tests for elementwise arithmetic."""

    def test_absent_propagates(self):
        """Any absent operand makes the result absent."""
        a = Series([1.0, None, 3.0])
        b = Series([1.0, 2.0, None])
        assert (a + b).to_list() == [2.0, None, None]
        assert (a - b).to_list() == [0.0, None, None]
        assert (a * b).to_list() == [1.0, None, None]

    def test_scalar_operands(self):
        """Scalars broadcast on either side."""
        s = Series([1.0, 2.0, None])
        assert (s - 1).to_list() == [0.0, 1.0, None]
        assert (10 - s).to_list() == [9.0, 8.0, None]
        assert (2 * s).to_list() == [2.0, 4.0, None]
        assert (-s).to_list() == [-1.0, -2.0, None]

    def test_numpy_scalar_on_left(self):
        """numpy scalars on the left give a Series, not an elementwise array."""
        s = Series([1.0, None, 3.0])
        diff = np.float64(2.0) - s
        assert isinstance(diff, Series)
        assert diff.to_list() == [1.0, None, -1.0]
        assert (np.float64(1.0) + s).to_list() == [2.0, None, 4.0]
        assert (np.int64(2) * s).to_list() == [2.0, None, 6.0]

    def test_length_mismatch(self):
        """Series of different lengths cannot be combined."""
        with pytest.raises(InvalidArgumentError, match="lengths differ"):
            Series([1.0, 2.0]) + Series([1.0])

    def test_inputs_unchanged(self):
        """Arithmetic never mutates its operands."""
        a = Series([1.0, 2.0])
        _ = a + a
        assert a.to_list() == [1.0, 2.0]


class TestStatistics:
    """Tests for mean and sample variance."""

    def test_mean_skips_absent(self):
        """Mean is taken over present values only."""
        assert Series([1.0, None, 3.0]).mean() == 2.0

    def test_variance_sample(self):
        """Sample variance uses the count - 1 divisor."""
        assert Series([1, 2, 3, 4, 5]).variance_sample() == pytest.approx(2.5)

    def test_mean_empty(self):
        """Mean of nothing is a numerical error."""
        with pytest.raises(NumericalInstabilityError):
            Series([None, None]).mean()

    def test_variance_single_value(self):
        """Sample variance needs two values."""
        with pytest.raises(NumericalInstabilityError, match="at least 2"):
            Series([3.0]).variance_sample()


class TestDisplay:
    """Tests for equality and repr."""

    def test_equals_matches_absent(self):
        """Absent positions compare equal to absent positions."""
        assert Series([None, 1.0]).equals([None, 1.0])
        assert not Series([None, 1.0]).equals([0.0, 1.0])
        assert not Series([1.0]).equals([1.0, 2.0])

    def test_repr(self):
        """Absent values print as nil."""
        assert repr(Series([1.0, None])) == "Series(n=2)[1.0,nil]"
