"""Ordered numeric series with absent values.

A :class:`Series` is a fixed-length, position-indexed sequence of optional
real numbers, earliest observation first. Absent observations are stored as
NaN in a float64 buffer and surface as ``None`` on element access.

Arithmetic is elementwise and propagates absence: any operation touching an
absent operand yields an absent result.

Example:
    >>> from tsconduit import Series
    >>> s = Series([1.0, None, 3.0])
    >>> s[1] is None
    True
    >>> (s - s.mean()).to_list()
    [-1.0, None, 1.0]
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

import numpy as np

from .exceptions import InvalidArgumentError, NumericalInstabilityError

Operand = Union["Series", float, int]


def _to_buffer(values) -> np.ndarray:
    """Validate and cast input to a fresh 1D float64 array, None -> NaN."""
    if isinstance(values, Series):
        return values.to_numpy()
    if isinstance(values, np.ndarray):
        arr = np.array(values, dtype=float)
    else:
        arr = np.array(
            [np.nan if v is None else v for v in values], dtype=float
        )
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise InvalidArgumentError(f"Expected 1D data, got {arr.ndim}D array")
    if np.any(np.isinf(arr)):
        raise InvalidArgumentError("Input contains Inf values")
    return arr


class Series:
    """Fixed-length sequence of optional reals indexed by position."""

    __slots__ = ("_data",)

    # numpy operands on the left defer to the reflected Series operators.
    __array_ufunc__ = None

    def __init__(self, values: Iterable[Optional[float]] = ()) -> None:
        self._data = _to_buffer(values)
        self._data.flags.writeable = False

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Series":
        # Takes ownership of an already validated buffer.
        obj = cls.__new__(cls)
        obj._data = data
        obj._data.flags.writeable = False
        return obj

    @classmethod
    def absent(cls, size: int) -> "Series":
        """Series of `size` absent values."""
        return cls._wrap(np.full(size, np.nan))

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Series._wrap(self._data[index].copy())
        value = self._data[index]
        return None if np.isnan(value) else float(value)

    def __iter__(self) -> Iterator[Optional[float]]:
        for value in self._data:
            yield None if np.isnan(value) else float(value)

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the underlying buffer (absent = NaN)."""
        return self._data

    def to_numpy(self) -> np.ndarray:
        """Writable copy of the underlying buffer (absent = NaN)."""
        return self._data.copy()

    def to_list(self) -> list[Optional[float]]:
        return list(self)

    # ------------------------------------------------------------------
    # Validity
    # ------------------------------------------------------------------

    def valid_mask(self) -> np.ndarray:
        """Boolean mask, True where an observation is present."""
        return ~np.isnan(self._data)

    @property
    def n_valid(self) -> int:
        return int(np.count_nonzero(self.valid_mask()))

    def first_valid_index(self) -> Optional[int]:
        valid = np.flatnonzero(self.valid_mask())
        return int(valid[0]) if valid.size else None

    def compressed(self) -> np.ndarray:
        """Present observations only, in order."""
        return self._data[self.valid_mask()]

    # ------------------------------------------------------------------
    # Statistics over present values
    # ------------------------------------------------------------------

    def sum(self) -> float:
        return float(np.sum(self.compressed()))

    def mean(self) -> float:
        """Arithmetic mean of the present values.

        Raises:
            NumericalInstabilityError: If no value is present.
        """
        valid = self.compressed()
        if valid.size == 0:
            raise NumericalInstabilityError(
                "mean of a series without present values"
            )
        return float(np.mean(valid))

    def variance_sample(self) -> float:
        """Sample variance (divisor count - 1) of the present values.

        Raises:
            NumericalInstabilityError: If fewer than two values are present.
        """
        valid = self.compressed()
        if valid.size < 2:
            raise NumericalInstabilityError(
                f"sample variance needs at least 2 present values, got {valid.size}"
            )
        return float(np.var(valid, ddof=1))

    # ------------------------------------------------------------------
    # Elementwise arithmetic
    # ------------------------------------------------------------------

    def _operand(self, other: Operand) -> np.ndarray | float:
        if isinstance(other, Series):
            if len(other) != len(self):
                raise InvalidArgumentError(
                    f"Series lengths differ: {len(self)} vs {len(other)}"
                )
            return other._data
        if isinstance(other, (int, float, np.floating, np.integer)):
            return float(other)
        return NotImplemented

    def _binary(self, other: Operand, op) -> "Series":
        rhs = self._operand(other)
        if rhs is NotImplemented:
            return NotImplemented
        return Series._wrap(op(self._data, rhs))

    def __add__(self, other: Operand) -> "Series":
        return self._binary(other, np.add)

    def __radd__(self, other: Operand) -> "Series":
        return self._binary(other, np.add)

    def __sub__(self, other: Operand) -> "Series":
        return self._binary(other, np.subtract)

    def __rsub__(self, other: Operand) -> "Series":
        return self._binary(other, lambda a, b: np.subtract(b, a))

    def __mul__(self, other: Operand) -> "Series":
        return self._binary(other, np.multiply)

    def __rmul__(self, other: Operand) -> "Series":
        return self._binary(other, np.multiply)

    def __truediv__(self, other: Operand) -> "Series":
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._binary(other, np.divide)

    def __neg__(self) -> "Series":
        return Series._wrap(-self._data)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def equals(self, other, rtol: float = 0.0, atol: float = 0.0) -> bool:
        """Positionwise equality, absent matching absent."""
        other = as_series(other)
        if len(other) != len(self):
            return False
        return bool(
            np.allclose(self._data, other._data, rtol=rtol, atol=atol, equal_nan=True)
        )

    __hash__ = None

    def __repr__(self) -> str:
        body = ",".join("nil" if v is None else repr(v) for v in self)
        return f"Series(n={len(self)})[{body}]"


def as_series(values) -> Series:
    """Return `values` as a :class:`Series`, without copying a Series."""
    if isinstance(values, Series):
        return values
    return Series(values)


def to_series(values: Iterable[Optional[float]]) -> Series:
    """Shorthand constructor, ``to_series([1, 2, None])``."""
    return Series(values)
