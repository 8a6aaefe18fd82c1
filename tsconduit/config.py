"""Configuration for tsconduit.

Module defaults can be overridden through environment variables:

- ``TSCONDUIT_LOG_LEVEL``: initial level of package loggers (default WARNING).
- ``TSCONDUIT_SEED``: default seed for AR simulation (default unset, i.e.
  fresh OS entropy on every call).

Parameter bundles for the multi-argument operations are frozen dataclasses
that validate themselves on construction.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import InvalidArgumentError

_LOG_LEVEL_ENV_VAR = "TSCONDUIT_LOG_LEVEL"
_SEED_ENV_VAR = "TSCONDUIT_SEED"

LOG_LEVEL: str = os.getenv(_LOG_LEVEL_ENV_VAR, "WARNING").upper()


def _seed_from_env() -> Optional[int]:
    raw = os.getenv(_SEED_ENV_VAR)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"{_SEED_ENV_VAR} must be an integer, got {raw!r}"
        ) from exc


DEFAULT_SEED: Optional[int] = _seed_from_env()

DEFAULT_AR_OBSERVATIONS = 1500
DEFAULT_AR_ORDER = 1
DEFAULT_MA_WINDOW = 10
DEFAULT_EMA_WINDOW = 10


class InnovationPolicy(Enum):
    """Source of the innovation term when simulating an AR recursion."""

    GAUSSIAN = "gaussian"
    ZERO = "zero"

    @classmethod
    def parse(cls, value: "InnovationPolicy | str") -> "InnovationPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidArgumentError(
                f"innovations must be 'gaussian' or 'zero', got {value!r}"
            ) from None


@dataclass(frozen=True)
class ARConfig:
    """
    Parameters for fitting an AR(order) model and simulating from it.

    n is the length of the simulated series, burn the number of warm-up
    values discarded before it (Gaussian innovations only).
    """

    n: int = DEFAULT_AR_OBSERVATIONS
    order: int = DEFAULT_AR_ORDER
    innovations: InnovationPolicy = InnovationPolicy.GAUSSIAN
    seed: Optional[int] = DEFAULT_SEED
    burn: int = 0

    def __post_init__(self) -> None:
        if self.n < 0:
            raise InvalidArgumentError(f"n must be >= 0, got {self.n}")
        if self.order < 1:
            raise InvalidArgumentError(f"order must be >= 1, got {self.order}")
        if self.burn < 0:
            raise InvalidArgumentError(f"burn must be >= 0, got {self.burn}")
        object.__setattr__(
            self, "innovations", InnovationPolicy.parse(self.innovations)
        )


@dataclass(frozen=True)
class MACDConfig:
    """Spans of the fast, slow and signal EMAs of a MACD."""

    fast: int = 12
    slow: int = 26
    signal: int = 9

    def __post_init__(self) -> None:
        for name in ("fast", "slow", "signal"):
            value = getattr(self, name)
            if value < 1:
                raise InvalidArgumentError(f"{name} must be >= 1, got {value}")
