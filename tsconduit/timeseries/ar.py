"""Autoregressive AR(k) estimation and simulation.

Models the (demeaned) series as::

    x_t = φ_1 x_{t-1} + ... + φ_k x_{t-k} + ε_t,    ε_t ~ N(0, σ²)

with φ and σ² taken from the Yule-Walker equations.

Example:
    >>> rng = np.random.default_rng(0)
    >>> eps = rng.normal(size=500)
    >>> x = np.zeros(500)
    >>> for t in range(1, 500):
    ...     x[t] = 0.7 * x[t - 1] + eps[t]
    >>> model = fit_ar(x, k=1)
    >>> sim = model.simulate(100, seed=1)
    >>> len(sim)
    100
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..config import (
    DEFAULT_AR_OBSERVATIONS,
    DEFAULT_AR_ORDER,
    DEFAULT_SEED,
    ARConfig,
    InnovationPolicy,
)
from ..exceptions import InsufficientDataError, InvalidArgumentError
from ..logging import get_logger
from ..series import Series, as_series
from .pacf import yule_walker

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class ARModel:
    """Fitted AR(order) model.

    Attributes:
        order: AR order k.
        coefficients: [φ_1, ..., φ_k], shape (k,).
        sigma2: Residual (innovation) variance.
        mean: Mean of the series the model was fitted on.
        nobs: Number of present observations used in fitting.
        history: Last k demeaned observations, oldest first. Seeds the
            recursion when no innovations are drawn.
    """

    order: int
    coefficients: np.ndarray
    sigma2: float
    mean: float
    nobs: int
    history: np.ndarray

    def simulate(
        self,
        n: int,
        innovations: InnovationPolicy | str = InnovationPolicy.GAUSSIAN,
        seed: Optional[int] = DEFAULT_SEED,
        burn: int = 0,
    ) -> Series:
        """Generate n values from the fitted recursion. See :func:`simulate_ar`."""
        return simulate_ar(self, n, innovations=innovations, seed=seed, burn=burn)


def fit_ar(series, k: int = DEFAULT_AR_ORDER) -> ARModel:
    """Fit an AR(k) model by Yule-Walker.

    Args:
        series: Series or array-like of optional reals.
        k: AR order. Must be >= 1.

    Returns:
        Fitted ARModel.

    Raises:
        InvalidArgumentError: If k < 1.
        InsufficientDataError: If the series has no more than k present
            observations.
        NumericalInstabilityError: If the autocovariances are degenerate
            (for example a constant series).
    """
    if k < 1:
        raise InvalidArgumentError(f"k must be >= 1, got {k}")
    series = as_series(series)
    observed = series.compressed()
    if observed.size <= k:
        raise InsufficientDataError(
            f"AR({k}) needs more than {k} observations, got {observed.size}"
        )

    phi, sigma2 = yule_walker(series, order=k)
    mu = float(np.mean(observed))
    logger.debug("fit_ar: order=%d, phi=%s, sigma2=%.6g", k, phi, sigma2)
    return ARModel(
        order=k,
        coefficients=phi,
        sigma2=sigma2,
        mean=mu,
        nobs=int(observed.size),
        history=observed[-k:] - mu,
    )


def simulate_ar(
    model: ARModel,
    n: int,
    innovations: InnovationPolicy | str = InnovationPolicy.GAUSSIAN,
    seed: Optional[int] = DEFAULT_SEED,
    burn: int = 0,
) -> Series:
    """Iterate the fitted AR recursion to produce a zero-mean series.

    With Gaussian innovations the recursion starts from zeros, draws
    ε_t ~ N(0, σ²) from ``numpy.random.default_rng(seed)`` and drops the
    first `burn` values. With zero innovations it starts from the model's
    last k observations and is fully deterministic.

    Args:
        model: Fitted ARModel.
        n: Number of values to return. Must be >= 0.
        innovations: ``"gaussian"`` or ``"zero"``.
        seed: Seed for the Gaussian innovations.
        burn: Warm-up values to discard (Gaussian only).

    Returns:
        Simulated series of length n.
    """
    innovations = InnovationPolicy.parse(innovations)
    if n < 0:
        raise InvalidArgumentError(f"n must be >= 0, got {n}")
    if burn < 0:
        raise InvalidArgumentError(f"burn must be >= 0, got {burn}")

    k = model.order
    phi = model.coefficients

    if innovations is InnovationPolicy.GAUSSIAN:
        rng = np.random.default_rng(seed)
        total = k + burn + n
        x = np.zeros(total)
        eps = rng.normal(scale=np.sqrt(model.sigma2), size=total)
        skip = k + burn
    else:
        total = k + n
        x = np.zeros(total)
        x[:k] = model.history
        eps = np.zeros(total)
        skip = k

    for t in range(k, total):
        x[t] = np.dot(phi, x[t - k : t][::-1]) + eps[t]

    return Series._wrap(x[skip:])


def ar(
    series,
    n: int = DEFAULT_AR_OBSERVATIONS,
    k: int = DEFAULT_AR_ORDER,
    innovations: InnovationPolicy | str = InnovationPolicy.GAUSSIAN,
    seed: Optional[int] = DEFAULT_SEED,
    config: Optional[ARConfig] = None,
) -> Series:
    """Estimated AR series: fit AR(k) by Yule-Walker, then simulate n values.

    Args:
        series: Series or array-like of optional reals.
        n: Number of observations to generate.
        k: AR order.
        innovations: ``"gaussian"`` (default) or ``"zero"``.
        seed: Seed for the Gaussian innovations.
        config: ARConfig overriding all of the above.

    Returns:
        Simulated series of length n.
    """
    if config is None:
        config = ARConfig(n=n, order=k, innovations=innovations, seed=seed)
    model = fit_ar(series, k=config.order)
    return simulate_ar(
        model,
        config.n,
        innovations=config.innovations,
        seed=config.seed,
        burn=config.burn,
    )
