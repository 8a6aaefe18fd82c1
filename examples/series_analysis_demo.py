"""Example: Correlation structure and smoothing with tsconduit

Fits an AR(2) to a simulated series, inspects its ACF/PACF with every PACF
estimator, and smooths a random walk with MA, EMA and MACD.
"""

import numpy as np

from tsconduit import acf, ar, diff, ema, fit_ar, ma, macd, pacf


def example_correlation_structure():
    """Example: ACF/PACF of an AR(2) process and a Yule-Walker fit."""
    print("=" * 60)
    print("Example 1: ACF, PACF and AR(2) fit")
    print("=" * 60)

    rng = np.random.default_rng(7)
    n = 800
    eps = rng.normal(size=n)
    x = np.zeros(n)
    for t in range(2, n):
        x[t] = 0.5 * x[t - 1] + 0.3 * x[t - 2] + eps[t]

    print(f"ACF (lags 0-5):   {np.round(acf(x, 5), 3)}")
    for method in ("yw", "mle", "ld"):
        print(f"PACF {method:>3} (1-5):  {np.round(pacf(x, 5, method=method), 3)}")

    model = fit_ar(x, k=2)
    print(f"AR(2) coefficients: {np.round(model.coefficients, 3)}")
    print(f"Residual variance:  {model.sigma2:.3f}")

    simulated = ar(x, n=10, k=2, seed=1)
    print(f"Simulated AR(2) values: {np.round(simulated.values, 3)}")
    print()


def example_smoothing():
    """Example: Moving averages and MACD on a random walk."""
    print("=" * 60)
    print("Example 2: MA, EMA and MACD")
    print("=" * 60)

    rng = np.random.default_rng(3)
    prices = 100 + np.cumsum(rng.normal(size=60))

    print(f"First difference (last 3): {diff(prices).to_list()[-3:]}")
    print(f"MA(10)  (last 3): {np.round(ma(prices, 10).values[-3:], 3)}")
    print(f"EMA(10) (last 3): {np.round(ema(prices, 10).values[-3:], 3)}")

    macd_line, signal_line = macd(prices)
    print(f"MACD   (last): {macd_line[-1]:.4f}")
    print(f"Signal (last): {signal_line[-1]:.4f}")
    print()


if __name__ == "__main__":
    example_correlation_structure()
    example_smoothing()
