"""Pytest configuration and shared fixtures for tsconduit tests.

This module provides:
- A deterministic numpy RNG fixture
- A simulated AR(1) sample shared by the estimator tests
"""

import os

import numpy as np
import pytest


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def ar1_sample(rng: np.random.Generator) -> np.ndarray:
    """500 observations of x_t = 0.7 x_{t-1} + e_t with standard normal e_t."""
    n = 500
    eps = rng.normal(size=n)
    x = np.zeros(n)
    for t in range(1, n):
        x[t] = 0.7 * x[t - 1] + eps[t]
    return x
