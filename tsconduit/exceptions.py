"""Exception hierarchy for tsconduit.

Every error raised by the package derives from :class:`TimeSeriesError` and
from the builtin exception a caller would otherwise expect, so
``except ValueError`` keeps working for argument problems.
"""

from __future__ import annotations


class TimeSeriesError(Exception):
    """Base class for all tsconduit errors."""


class InvalidArgumentError(TimeSeriesError, ValueError):
    """An argument is outside the contract of the called operation."""


class NumericalInstabilityError(TimeSeriesError, ArithmeticError):
    """A computation would divide by zero or leave its valid domain."""


class InsufficientDataError(TimeSeriesError, ValueError):
    """The series is too short to produce any estimate at all."""
