"""Moment estimators: mean, sample variance and autocovariance.

References:
    - Box & Jenkins (1976): Time Series Analysis: Forecasting and Control
    - Brockwell & Davis (1991): Time Series: Theory and Methods
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..exceptions import InvalidArgumentError
from ..logging import get_logger, log_insufficient_data
from ..series import as_series
from .lags import lag

logger = get_logger(__name__)


def default_max_lags(size: int) -> int:
    """Default number of lags for a series of `size` observations.

    Returns ``floor(10 * log10(size))``, or 0 for an empty series.
    """
    if size < 1:
        return 0
    return int(math.floor(10 * math.log10(size)))


def mean(series) -> float:
    """Mean of the present observations."""
    return as_series(series).mean()


def variance_sample(series) -> float:
    """Sample variance (divisor count - 1) of the present observations."""
    return as_series(series).variance_sample()


def acvf(
    series,
    demean: bool = True,
    unbiased: bool = True,
    nlags: Optional[int] = None,
) -> np.ndarray:
    """Compute the autocovariance of a series.

    For each lag i the estimate is::

        γ(i) = Σ_t base[t] * (x[t-i] - x̄) / d[i]

    summed over positions where both factors are present, with
    ``base = x - x̄`` when `demean` is set and ``base = x`` otherwise. The
    divisor is d[i] = n - i when `unbiased` is set and d[i] = n otherwise.

    Args:
        series: Series or array-like of optional reals.
        demean: Whether to center the leading factor on the mean.
        unbiased: Choose the n - i divisor instead of n.
        nlags: Highest lag to compute. Defaults to
            ``floor(10 * log10(n))``.

    Returns:
        Autocovariances [γ(0), ..., γ(nlags)], shape (nlags + 1,).

    Raises:
        InvalidArgumentError: If nlags < 0.
        NumericalInstabilityError: If the series has no present value.

    Example:
        >>> acvf([1.0, 2.0, 3.0, 4.0, 5.0], nlags=1)
        array([2., 1.])
    """
    series = as_series(series)
    size = len(series)
    if nlags is None:
        nlags = default_max_lags(size)
    if nlags < 0:
        raise InvalidArgumentError(f"nlags must be >= 0, got {nlags}")

    m = series.mean()
    base = series - m if demean else series

    gamma = np.zeros(nlags + 1)
    for i in range(nlags + 1):
        if i >= size:
            log_insufficient_data(
                logger,
                "acvf",
                "lags %d..%d exceed series length %d, set to 0",
                i,
                nlags,
                size,
            )
            break
        divisor = size - i if unbiased else size
        gamma[i] = (base * (lag(series, i) - m)).sum() / divisor

    logger.debug("acvf: %d lags, demean=%s, unbiased=%s", nlags, demean, unbiased)
    return gamma
