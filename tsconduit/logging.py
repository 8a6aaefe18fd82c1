"""Logging for tsconduit.

Every module logs through ``get_logger(__name__)``, which hands out loggers
under the ``tsconduit`` namespace. They share one stderr handler layout,
start at the level named by ``TSCONDUIT_LOG_LEVEL`` and do not propagate to
the root logger.

The estimators are permissive about short series: instead of failing they
return absent or zero-filled output. :func:`log_insufficient_data` reports
those fallbacks with a uniform ``<operation>: insufficient data: ...``
message so they can be filtered or asserted on.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from .config import LOG_LEVEL

_NAMESPACE = "tsconduit"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


_level: int = _coerce_level(LOG_LEVEL)


def _attach_handler(
    logger: logging.Logger, stream, fmt: str = _FORMAT
) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached tsconduit logger for `name`.

    Args:
        name: Module name, typically ``__name__``. Names outside the package
            are nested under ``tsconduit.``; None gives the package logger.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("acvf: %d lags", 20)
    """
    if name is None:
        name = _NAMESPACE
    if name != _NAMESPACE and not name.startswith(_NAMESPACE + "."):
        name = f"{_NAMESPACE}.{name}"

    logger = _loggers.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        if not logger.handlers:
            _attach_handler(logger, sys.stderr)
            logger.propagate = False
        _loggers[name] = logger
    return logger


def log_insufficient_data(
    logger: logging.Logger, operation: str, message: str, *args
) -> None:
    """Warn that `operation` fell back to degenerate output on a short series.

    Args:
        logger: Module logger.
        operation: Name of the public operation, e.g. ``"ema"``.
        message: %-style detail; `args` fill it.
    """
    logger.warning("%s: insufficient data: " + message, operation, *args)


def set_log_level(level: int | str) -> None:
    """Set the level of every tsconduit logger and of loggers created later.

    Args:
        level: ``logging`` constant or name ('DEBUG', 'INFO', ...).
    """
    global _level
    _level = _coerce_level(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


@contextmanager
def log_level(level: int | str) -> Iterator[None]:
    """Temporarily change the tsconduit log level.

    Example:
        >>> with log_level("DEBUG"):
        ...     pacf(x, 5)
    """
    previous = _level
    set_log_level(level)
    try:
        yield
    finally:
        set_log_level(previous)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the handler of every tsconduit logger.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format. Defaults to ``[LEVEL] name: message``.
        stream: Output stream (default: sys.stderr).
    """
    global _level
    _level = _coerce_level(level)
    for logger in _loggers.values():
        _attach_handler(logger, stream or sys.stderr, format_string or _FORMAT)
