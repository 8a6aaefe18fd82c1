"""Time-series statistics for tsconduit.

Lag and difference transforms, autocovariance, autocorrelation, partial
autocorrelation, AR(k) estimation and smoothing.

Example:
    >>> import numpy as np
    >>> from tsconduit.timeseries import acf, pacf, fit_ar
    >>>
    >>> rng = np.random.default_rng(0)
    >>> eps = rng.normal(size=500)
    >>> x = np.zeros(500)
    >>> for t in range(1, 500):
    ...     x[t] = 0.7 * x[t - 1] + eps[t]
    >>>
    >>> rho = acf(x, 5)
    >>> phi = pacf(x, 5, method="ld")
    >>> model = fit_ar(x, k=1)
    >>> print(f"Estimated phi: {model.coefficients[0]:.3f}")

References:
    - Box & Jenkins (1976): Time Series Analysis: Forecasting and Control
    - Hamilton (1994): Time Series Analysis
"""

from __future__ import annotations

from .ar import ARModel, ar, fit_ar, simulate_ar
from .correlation import acf
from .lags import diff, lag
from .moments import acvf, default_max_lags, mean, variance_sample
from .pacf import (
    LevinsonDurbinResult,
    PacfMethod,
    levinson_durbin,
    pacf,
    pacf_ld,
    pacf_mle,
    pacf_yw,
    yule_walker,
)
from .smoothing import ema, ma, macd

__all__ = [
    # Transforms
    "lag",
    "diff",
    # Moments
    "mean",
    "variance_sample",
    "acvf",
    "default_max_lags",
    # Correlation
    "acf",
    "pacf",
    "pacf_yw",
    "pacf_mle",
    "pacf_ld",
    "PacfMethod",
    "levinson_durbin",
    "LevinsonDurbinResult",
    "yule_walker",
    # AR
    "ARModel",
    "fit_ar",
    "simulate_ar",
    "ar",
    # Smoothing
    "ma",
    "ema",
    "macd",
]
