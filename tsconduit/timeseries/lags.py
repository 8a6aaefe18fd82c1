"""Lag and difference transforms.

Both transforms keep the series length fixed: positions that have no source
observation are filled with absent values so that lagged or differenced
series stay aligned with their parent.
"""

from __future__ import annotations

import numpy as np

from ..exceptions import InvalidArgumentError
from ..series import Series, as_series


def lag(series, k: int = 1) -> Series:
    """Lag a series by k periods.

    Position i of the result holds the observation at i - k in the source;
    the first k positions are absent.

    Args:
        series: Series or array-like of optional reals.
        k: Number of periods to shift. Must be >= 0. ``lag(s, 0)`` returns
            `s` itself.

    Returns:
        Lagged series of the same length.

    Raises:
        InvalidArgumentError: If k < 0.

    Example:
        >>> lag([1, 2, 3, 4, 5]).to_list()
        [None, 1.0, 2.0, 3.0, 4.0]
    """
    series = as_series(series)
    if k < 0:
        raise InvalidArgumentError(f"k must be >= 0, got {k}")
    if k == 0:
        return series

    n = len(series)
    shifted = np.full(n, np.nan)
    if k < n:
        shifted[k:] = series.values[: n - k]
    return Series._wrap(shifted)


def diff(series, d: int = 1) -> Series:
    """Difference a series d times.

    The first difference is x[t] - x[t-1]. Higher orders difference the
    previous difference again, so the second difference is
    (x[t] - x[t-1]) - (x[t-1] - x[t-2]), not x[t] - x[t-2]. Each pass leaves
    one more leading position absent.

    Args:
        series: Series or array-like of optional reals.
        d: Number of differencing passes. Must be >= 0.

    Returns:
        Differenced series of the same length.

    Raises:
        InvalidArgumentError: If d < 0.

    Example:
        >>> diff([1, 2, 4, 7, 11], d=2).to_list()
        [None, None, 1.0, 1.0, 1.0]
    """
    series = as_series(series)
    if d < 0:
        raise InvalidArgumentError(f"d must be >= 0, got {d}")

    result = series
    for _ in range(d):
        result = result - lag(result, 1)
    return result
