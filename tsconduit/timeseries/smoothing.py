"""Smoothing transforms: moving average, exponential moving average, MACD.

All transforms return a series of the input length whose leading positions
are absent until enough history exists to fill the window.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from scipy import signal as sps

from ..config import DEFAULT_EMA_WINDOW, DEFAULT_MA_WINDOW, MACDConfig
from ..exceptions import InvalidArgumentError
from ..logging import get_logger, log_insufficient_data
from ..series import Series, as_series

logger = get_logger(__name__)


def ma(series, n: int = DEFAULT_MA_WINDOW) -> Series:
    """Simple moving average over a trailing window of n observations.

    Positions 0..n-2 are absent; position i >= n-1 holds the mean of
    ``series[i-n+1 : i+1]`` (absent if any value in the window is absent).
    When the window is at least as long as the series, every position holds
    the overall mean.

    Args:
        series: Series or array-like of optional reals.
        n: Window length. Must be >= 1.

    Returns:
        Smoothed series of the same length.

    Example:
        >>> ma([1, 2, 3, 4, 5], 3).to_list()
        [None, None, 2.0, 3.0, 4.0]
    """
    series = as_series(series)
    if n < 1:
        raise InvalidArgumentError(f"n must be >= 1, got {n}")
    size = len(series)

    if n >= size:
        log_insufficient_data(
            logger, "ma", "window %d covers the whole series of %d", n, size
        )
        return Series._wrap(np.full(size, series.mean()))

    out = np.full(size, np.nan)
    out[n - 1 :] = sliding_window_view(series.values, n).mean(axis=1)
    return Series._wrap(out)


def ema(series, n: int = DEFAULT_EMA_WINDOW, wilder: bool = False) -> Series:
    """Exponential moving average.

    The smoothing factor is α = 2 / (n + 1), or α = 1 / n with Wilder's
    smoothing. Counting from the first present observation `start`, the
    first n - 1 positions are absent and position start + n - 1 holds the
    sum of the present values in the first window divided by n. From there
    on::

        y[i] = α x[i] + (1 - α) y[i-1]

    so each output depends on the whole history, never on later values.
    An absent input leaves every later position absent.

    EMAs are unstable on short series; they settle once the series holds
    about 3.45 (n + 1) observations.

    Args:
        series: Series or array-like of optional reals.
        n: Span. Must be >= 1.
        wilder: Use Wilder's 1 / n smoothing factor.

    Returns:
        Smoothed series of the same length.
    """
    series = as_series(series)
    if n < 1:
        raise InvalidArgumentError(f"n must be >= 1, got {n}")
    alpha = 1.0 / n if wilder else 2.0 / (n + 1)
    size = len(series)
    out = np.full(size, np.nan)

    start = series.first_valid_index()
    if start is None or start + n > size:
        log_insufficient_data(
            logger,
            "ema",
            "span %d needs %d observations from index %s, series has %d",
            n,
            n,
            start,
            size,
        )
        return Series._wrap(out)

    x = series.values
    seed = np.nansum(x[start : start + n]) / n
    out[start + n - 1] = seed

    tail = x[start + n :]
    if tail.size:
        out[start + n :], _ = sps.lfilter(
            [alpha], [1.0, alpha - 1.0], tail, zi=[(1.0 - alpha) * seed]
        )
    return Series._wrap(out)


def macd(
    series,
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
    config: Optional[MACDConfig] = None,
) -> Tuple[Series, Series]:
    """Moving average convergence-divergence.

    Args:
        series: Series or array-like of optional reals.
        fast: Span of the fast EMA.
        slow: Span of the slow EMA.
        signal: Span of the EMA applied to the MACD line.
        config: MACDConfig overriding the three spans.

    Returns:
        Tuple (macd_line, signal_line) where
        ``macd_line = ema(series, fast) - ema(series, slow)`` and
        ``signal_line = ema(macd_line, signal)``.
    """
    if config is None:
        config = MACDConfig(fast=fast, slow=slow, signal=signal)
    series = as_series(series)
    macd_line = ema(series, config.fast) - ema(series, config.slow)
    return macd_line, ema(macd_line, config.signal)
