"""Partial autocorrelation function (PACF) and the Levinson-Durbin solver.

The PACF at order m is the last coefficient of the best linear AR(m)
predictor. Three estimators are available:

- ``"yw"``: Yule-Walker. For each order, solve the Yule-Walker system built
  from the sample autocovariances.
- ``"mle"``: maximum likelihood. For each order, maximise the conditional
  Gaussian likelihood of an AR(m) numerically.
- ``"ld"``: a single Levinson-Durbin pass over :func:`acvf`; the reflection
  coefficients are the PACF.

References:
    - Durbin (1960): "The fitting of time-series models"
    - Levinson (1947): "The Wiener RMS error criterion"
    - Hamilton (1994): Time Series Analysis, ch. 3-5
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

import numpy as np
from scipy import linalg, optimize

from ..exceptions import InvalidArgumentError, NumericalInstabilityError
from ..logging import get_logger, log_insufficient_data
from ..series import Series, as_series
from .moments import acvf, default_max_lags

logger = get_logger(__name__)


class PacfMethod(Enum):
    """Estimator used by :func:`pacf`."""

    YW = "yw"
    MLE = "mle"
    LD = "ld"

    @classmethod
    def parse(cls, value: "PacfMethod | str") -> "PacfMethod":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidArgumentError(
                "Method presents for pacf are 'yw', 'mle' or 'ld'"
            ) from None


@dataclass
class LevinsonDurbinResult:
    """Output of the Levinson-Durbin recursion.

    Attributes:
        sigma_v: Prediction-error variance of the highest order.
        arcoefs: AR coefficients [φ_1, ..., φ_p] of the highest order, shape (p,).
        pacf: Reflection coefficients [φ_11, φ_22, ..., φ_pp], shape (p,).
        sigma: Prediction-error variance of every order 0..p, shape (p+1,).
        phi: Coefficient table, shape (p+1, p+1). Column m holds the AR(m)
            coefficients in rows 1..m.
    """

    sigma_v: float
    arcoefs: np.ndarray
    pacf: np.ndarray
    sigma: np.ndarray
    phi: np.ndarray


def _check_error_variance(value: float, order: int) -> None:
    if not value > 0:
        raise NumericalInstabilityError(
            f"Levinson-Durbin: non-positive prediction-error variance {value} "
            f"at order {order}; input is not a valid autocovariance sequence"
        )


def levinson_durbin(autocov, nlags: Optional[int] = None) -> LevinsonDurbinResult:
    """Solve the Yule-Walker equations by Levinson-Durbin recursion.

    Starting from the order-0 error variance γ(0), each order m computes::

        φ_mm = (γ(m) - Σ_{j<m} φ_{j,m-1} γ(m-j)) / σ²_{m-1}
        φ_jm = φ_{j,m-1} - φ_mm φ_{m-j,m-1}        for j < m
        σ²_m = σ²_{m-1} (1 - φ_mm²)

    Args:
        autocov: Autocovariances [γ(0), ..., γ(p)] (or autocorrelations).
        nlags: Highest order to solve. Defaults to ``len(autocov) - 1``.

    Returns:
        LevinsonDurbinResult for orders 1..nlags.

    Raises:
        InvalidArgumentError: If autocov is not 1D or nlags is out of range.
        NumericalInstabilityError: If an error variance is not positive.

    Example:
        >>> res = levinson_durbin(np.array([1.0, 0.7, 0.49]))
        >>> np.round(res.pacf, 6)
        array([0.7, 0. ])
    """
    r = np.asarray(autocov, dtype=float)
    if r.ndim != 1:
        raise InvalidArgumentError(f"autocov must be 1D array, got shape {r.shape}")
    if nlags is None:
        nlags = len(r) - 1
    if nlags < 1:
        raise InvalidArgumentError(f"nlags must be >= 1, got {nlags}")
    if nlags > len(r) - 1:
        raise InvalidArgumentError(
            f"nlags={nlags} needs {nlags + 1} autocovariances, got {len(r)}"
        )

    phi = np.zeros((nlags + 1, nlags + 1))
    sigma = np.zeros(nlags + 1)
    sigma[0] = r[0]
    _check_error_variance(sigma[0], 0)

    for m in range(1, nlags + 1):
        num = r[m] - np.dot(phi[1:m, m - 1], r[m - 1 : 0 : -1])
        kappa = num / sigma[m - 1]
        phi[m, m] = kappa
        phi[1:m, m] = phi[1:m, m - 1] - kappa * phi[m - 1 : 0 : -1, m - 1]
        sigma[m] = sigma[m - 1] * (1.0 - kappa**2)
        _check_error_variance(sigma[m], m)

    return LevinsonDurbinResult(
        sigma_v=float(sigma[-1]),
        arcoefs=phi[1:, -1].copy(),
        pacf=np.diag(phi)[1:].copy(),
        sigma=sigma,
        phi=phi,
    )


def yule_walker(
    series, order: int, unbiased: bool = True
) -> Tuple[np.ndarray, float]:
    """Estimate AR(order) coefficients from the Yule-Walker equations.

    Args:
        series: Series or array-like of optional reals.
        order: AR order. Must be >= 1.
        unbiased: Divisor convention passed to :func:`acvf`.

    Returns:
        Tuple of (phi, sigma2): coefficients [φ_1, ..., φ_order] and the
        residual variance.

    Raises:
        InvalidArgumentError: If order < 1.
        NumericalInstabilityError: If the autocovariances do not form a
            valid (positive definite) sequence, e.g. a constant series.
    """
    if order < 1:
        raise InvalidArgumentError(f"order must be >= 1, got {order}")
    gamma = acvf(series, unbiased=unbiased, nlags=order)
    result = levinson_durbin(gamma, order)
    return result.arcoefs, result.sigma_v


def _solve_yule_walker(gamma: np.ndarray, order: int) -> np.ndarray:
    """Solve the order-`order` Yule-Walker system R φ = γ[1:order+1].

    R is the symmetric Toeplitz matrix built from γ[0:order]. The system is
    solved as a general linear system, so sample autocovariances that are
    not positive definite still give coefficients.

    Raises:
        NumericalInstabilityError: If the system is singular.
    """
    try:
        phi = linalg.solve_toeplitz(gamma[:order], gamma[1 : order + 1])
    except np.linalg.LinAlgError as exc:
        raise NumericalInstabilityError(
            f"Yule-Walker system of order {order} is singular: {exc}"
        ) from exc
    if not np.all(np.isfinite(phi)):
        raise NumericalInstabilityError(
            f"Yule-Walker system of order {order} has no finite solution"
        )
    return phi


def pacf_yw(series, max_lags: int) -> np.ndarray:
    """PACF by solving the Yule-Walker system once per order.

    Each order keeps the last coefficient of its own solution. Unlike
    :func:`pacf_ld`, no positivity of the prediction-error variance is
    required, so short series yield values rather than an error.
    """
    gamma = acvf(series, nlags=max_lags)
    values = np.zeros(max_lags)
    for m in range(1, max_lags + 1):
        values[m - 1] = _solve_yule_walker(gamma, m)[-1]
    return values


def _lag_design(x: np.ndarray, p: int) -> Tuple[np.ndarray, np.ndarray]:
    """Position-aligned AR(p) regression rows with every value present.

    Row t pairs the response x[t] with x[t-1], ..., x[t-p]; rows touching an
    absent position are dropped, so values on either side of a gap are
    never treated as neighbours.
    """
    n = len(x)
    if p >= n:
        return np.empty((0, p)), x[:0]
    X = np.empty((n - p, p))
    for j in range(p):
        X[:, j] = x[p - 1 - j : n - 1 - j]
    y = x[p:]
    keep = ~np.isnan(y) & ~np.isnan(X).any(axis=1)
    return X[keep], y[keep]


def _conditional_neg_loglike(
    phi: np.ndarray, X: np.ndarray, y: np.ndarray
) -> Tuple[float, np.ndarray]:
    """Negative conditional Gaussian log-likelihood of an AR and its gradient.

    The innovation variance is profiled out (σ² = mean squared residual).
    """
    nobs = len(y)
    resid = y - X @ phi
    sigma2 = max(float(np.mean(resid**2)), 1e-12)
    nll = 0.5 * nobs * (np.log(2 * np.pi) + np.log(sigma2) + 1)
    grad = -(X.T @ resid) / sigma2
    return nll, grad


def pacf_mle(series, max_lags: int) -> np.ndarray:
    """PACF by conditional maximum likelihood, one AR fit per order.

    Lags are taken by position, as in :func:`acvf`. Each order starts the
    optimizer from its Yule-Walker solution. Orders that leave fewer than two
    usable residuals are reported as 0.0.
    """
    series = as_series(series)
    x = series.to_numpy() - series.mean()
    gamma = acvf(series, nlags=max_lags)

    values = np.zeros(max_lags)
    for m in range(1, max_lags + 1):
        X, y = _lag_design(x, m)
        if len(y) < 2:
            log_insufficient_data(
                logger,
                "pacf_mle",
                "orders %d..%d leave %d complete rows, set to 0",
                m,
                max_lags,
                len(y),
            )
            break
        start = _solve_yule_walker(gamma, m)
        result = optimize.minimize(
            _conditional_neg_loglike,
            start,
            args=(X, y),
            jac=True,
            method="L-BFGS-B",
            options={"maxiter": 1000},
        )
        if not result.success:
            logger.warning("pacf_mle: order %d did not converge: %s", m, result.message)
        values[m - 1] = result.x[-1]
    return values


def pacf_ld(series, max_lags: int) -> np.ndarray:
    """PACF as the reflection coefficients of one Levinson-Durbin pass.

    The recursion runs over ``acvf(series)``; the autocovariance vector is
    extended when `max_lags` exceeds its default length.
    """
    series = as_series(series)
    nlags = max(max_lags, default_max_lags(len(series)))
    return levinson_durbin(acvf(series, nlags=nlags), max_lags).pacf


_PACF_IMPLEMENTATIONS: Dict[PacfMethod, Callable[[Series, int], np.ndarray]] = {
    PacfMethod.YW: pacf_yw,
    PacfMethod.MLE: pacf_mle,
    PacfMethod.LD: pacf_ld,
}


def pacf(
    series, max_lags: Optional[int] = None, method: PacfMethod | str = "yw"
) -> np.ndarray:
    """Compute the partial autocorrelation function of a series.

    Args:
        series: Series or array-like of optional reals.
        max_lags: Highest order. Defaults to ``floor(10 * log10(n))``.
        method: ``"yw"`` (Yule-Walker, default), ``"mle"`` (maximum
            likelihood) or ``"ld"`` (Levinson-Durbin over :func:`acvf`).

    Returns:
        Partial autocorrelations [π(1), ..., π(max_lags)], shape (max_lags,).

    Raises:
        InvalidArgumentError: If method is unknown or max_lags < 1.
        NumericalInstabilityError: If the recursion meets a non-positive
            prediction-error variance.

    Example:
        >>> rng = np.random.default_rng(0)
        >>> x = rng.normal(size=200)
        >>> len(pacf(x, 5, method="ld"))
        5
    """
    method = PacfMethod.parse(method)
    series = as_series(series)
    if max_lags is None:
        max_lags = default_max_lags(len(series))
    if max_lags < 1:
        raise InvalidArgumentError(f"max_lags must be >= 1, got {max_lags}")

    logger.debug("pacf: method=%s, max_lags=%d", method.value, max_lags)
    return _PACF_IMPLEMENTATIONS[method](series, max_lags)
