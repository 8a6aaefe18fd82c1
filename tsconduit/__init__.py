"""tsconduit - time-ordered numeric series analysis on NumPy and SciPy."""

__version__ = "0.1.0"

from .config import ARConfig, InnovationPolicy, MACDConfig
from .exceptions import (
    InsufficientDataError,
    InvalidArgumentError,
    NumericalInstabilityError,
    TimeSeriesError,
)
from .logging import configure_logging, get_logger, set_log_level
from .series import Series, as_series, to_series
from .timeseries import (
    ARModel,
    LevinsonDurbinResult,
    PacfMethod,
    acf,
    acvf,
    ar,
    default_max_lags,
    diff,
    ema,
    fit_ar,
    lag,
    levinson_durbin,
    ma,
    macd,
    mean,
    pacf,
    simulate_ar,
    variance_sample,
    yule_walker,
)

__all__ = [
    "__version__",
    # Series
    "Series",
    "as_series",
    "to_series",
    # Errors
    "TimeSeriesError",
    "InvalidArgumentError",
    "NumericalInstabilityError",
    "InsufficientDataError",
    # Configuration
    "ARConfig",
    "MACDConfig",
    "InnovationPolicy",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Time series
    "lag",
    "diff",
    "mean",
    "variance_sample",
    "acvf",
    "default_max_lags",
    "acf",
    "pacf",
    "PacfMethod",
    "levinson_durbin",
    "LevinsonDurbinResult",
    "yule_walker",
    "ARModel",
    "fit_ar",
    "simulate_ar",
    "ar",
    "ma",
    "ema",
    "macd",
]
