"""Autocorrelation function (ACF)."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..exceptions import InvalidArgumentError, NumericalInstabilityError
from ..logging import get_logger, log_insufficient_data
from ..series import as_series
from .lags import lag
from .moments import default_max_lags

logger = get_logger(__name__)


def acf(series, max_lags: Optional[int] = None) -> np.ndarray:
    """Compute the autocorrelation coefficients of a series.

    Entry 0 is exactly 1.0. For i > 0::

        ρ(i) = Σ_t (x[t] - x̄)(x[t-i] - x̄) / (s² (n - 1))

    where s² is the sample variance. Both factors are centered on the same
    mean x̄ of the whole series, not on the means of the overlapping
    segments, so the coefficients are consistent with :func:`acvf`.

    Args:
        series: Series or array-like of optional reals.
        max_lags: Highest lag. Defaults to ``floor(10 * log10(n))``.

    Returns:
        Autocorrelations [ρ(0), ..., ρ(max_lags)], shape (max_lags + 1,).

    Raises:
        InvalidArgumentError: If max_lags < 0.
        NumericalInstabilityError: If the series has zero sample variance
            or fewer than two present values.

    Example:
        >>> rho = acf([1.0, 2.0, 3.0, 4.0, 5.0], max_lags=1)
        >>> rho[0]
        1.0
    """
    series = as_series(series)
    size = len(series)
    if max_lags is None:
        max_lags = default_max_lags(size)
    if max_lags < 0:
        raise InvalidArgumentError(f"max_lags must be >= 0, got {max_lags}")

    m = series.mean()
    var = series.variance_sample()
    if var == 0.0:
        raise NumericalInstabilityError(
            "acf is undefined for a series with zero variance"
        )
    if max_lags >= size:
        log_insufficient_data(
            logger, "acf", "max_lags=%d reaches past series length %d", max_lags, size
        )

    centered = series - m
    denom = var * (size - 1)
    rho = np.empty(max_lags + 1)
    rho[0] = 1.0
    for i in range(1, max_lags + 1):
        rho[i] = (centered * (lag(series, i) - m)).sum() / denom
    return rho
