"""
Vector: fixed-dimension ordered sequence of real numbers.

Each arithmetic primitive comes as a pair: ``*_in_place`` mutates the
receiver (and returns it for chaining), the plain name returns a new
Vector and leaves the receiver untouched. Every operation validates its
arguments before touching storage.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.formatting import DEFAULT_FORMAT, DisplayFormat, format_values
from pylinalg.core.tolerances import CPU_FP64, ToleranceTier
from pylinalg.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_real,
    check_same_shape,
    warn_non_finite,
)
from pylinalg.vector._parse import parse_vector_literal


class Vector:
    """
    Dense real-valued vector.

    Construction:
        Vector(dim)                  zero-filled, dim >= 1
        Vector.copy_of(v)            independent copy
        Vector.parse("[ 1 2 3 ]")    bracketed text literal
        Vector.from_values([1, 2])   any 1D array-like

    Indices are 0-based and must lie in ``[0, dimension)``; negative
    indices are rejected, not wrapped.

    Examples:
        >>> v = Vector.parse("[ 1.0 2.0 3.0 ]")
        >>> v.add_scalar(1.0)
        Vector([2.0, 3.0, 4.0])
        >>> v.inner_product(Vector.from_values([4, 5, 6]))
        32.0
    """

    __slots__ = ('_values',)

    # Make numpy defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    # Mutable value object
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, dim: int):
        n = check_dimension(dim, "dim")
        self._values: NDArray[np.float64] = np.zeros(n, dtype=np.float64)

    # --- Construction ---

    @classmethod
    def _wrap(cls, values: NDArray[np.float64]) -> Vector:
        """
        Adopt an already-validated 1D float64 array without copying.

        Internal to the package: Matrix uses it to hand over freshly
        copied rows and product results. Callers must not keep another
        reference to ``values``.
        """
        v = cls.__new__(cls)
        v._values = values
        return v

    @classmethod
    def copy_of(cls, v: Vector) -> Vector:
        """Return an independent copy of ``v``."""
        return cls._wrap(v._values.copy())

    @classmethod
    def parse(cls, text: str) -> Vector:
        """
        Build a Vector from a literal like ``"[ -1.2 2.0 3.1 ]"``.

        Parameters
        ----------
        text : str
            Whitespace-separated tokens. The first must be ``[``, the
            last ``]``, everything between a real number.

        Raises
        ------
        ParseError
            If a bracket is missing, a token is not numeric, or there
            are no entries.
        """
        values = parse_vector_literal(text)
        warn_non_finite(values, "text")
        return cls._wrap(values)

    @classmethod
    def from_values(cls, values: ArrayLike) -> Vector:
        """
        Build a Vector from a 1D array-like of real numbers.

        The input is copied; later changes to it do not affect the Vector.
        """
        array = check_array(values, 1, "values")
        warn_non_finite(array, "values")
        return cls._wrap(array)

    def copy(self) -> Vector:
        return type(self).copy_of(self)

    # --- Shape and element access ---

    @property
    def dimension(self) -> int:
        """Number of entries."""
        return int(self._values.shape[0])

    @property
    def shape(self) -> tuple[int]:
        return (self.dimension,)

    def get(self, index: int) -> float:
        """
        Return the entry at ``index``.

        Raises:
            IndexOutOfBoundsError: If index is outside [0, dimension)
        """
        i = check_index(index, self.dimension, "index")
        return float(self._values[i])

    def set(self, index: int, value: float) -> None:
        """
        Store ``value`` at ``index``.

        Raises:
            IndexOutOfBoundsError: If index is outside [0, dimension)
        """
        i = check_index(index, self.dimension, "index")
        self._values[i] = check_real(value, "value")

    def resize(self, new_dim: int) -> None:
        """
        Change the dimension by reallocating storage.

        Entries at indices below ``min(dimension, new_dim)`` are kept,
        entries added by growing are 0.0, and entries cut off by
        shrinking are lost for good.

        Raises:
            InvalidDimensionError: If new_dim < 1
        """
        n = check_dimension(new_dim, "new_dim")
        resized = np.zeros(n, dtype=np.float64)
        keep = min(self.dimension, n)
        resized[:keep] = self._values[:keep]
        self._values = resized

    # --- Scalar arithmetic ---

    def add_scalar_in_place(self, d: float) -> Vector:
        """Add ``d`` to every entry of this vector."""
        self._values += check_real(d, "d")
        return self

    def add_scalar(self, d: float) -> Vector:
        """Return a new vector with ``d`` added to every entry."""
        return self.copy().add_scalar_in_place(d)

    def multiply_scalar_in_place(self, d: float) -> Vector:
        """Multiply every entry of this vector by ``d``."""
        self._values *= check_real(d, "d")
        return self

    def multiply_scalar(self, d: float) -> Vector:
        """Return a new vector with every entry multiplied by ``d``."""
        return self.copy().multiply_scalar_in_place(d)

    # --- Elementwise arithmetic ---

    def add_elementwise_in_place(self, other: Vector) -> Vector:
        """
        Add ``other`` to this vector entry by entry.

        Raises:
            DimensionMismatchError: If dimensions differ
        """
        check_same_shape(self.shape, other.shape, "add elementwise")
        self._values += other._values
        return self

    def add_elementwise(self, other: Vector) -> Vector:
        check_same_shape(self.shape, other.shape, "add elementwise")
        return type(self)._wrap(self._values + other._values)

    def multiply_elementwise_in_place(self, other: Vector) -> Vector:
        """
        Multiply this vector by ``other`` entry by entry.

        Raises:
            DimensionMismatchError: If dimensions differ
        """
        check_same_shape(self.shape, other.shape, "multiply elementwise")
        self._values *= other._values
        return self

    def multiply_elementwise(self, other: Vector) -> Vector:
        check_same_shape(self.shape, other.shape, "multiply elementwise")
        return type(self)._wrap(self._values * other._values)

    def inner_product(self, other: Vector) -> float:
        """
        Sum of ``self[i] * other[i]``, accumulated in ascending index order.

        Raises:
            DimensionMismatchError: If dimensions differ
        """
        check_same_shape(self.shape, other.shape, "take inner product of")
        total = 0.0
        for a, b in zip(self._values.tolist(), other._values.tolist()):
            total += a * b
        return total

    # --- Comparison ---

    def equals(self, other: Any) -> bool:
        """
        True iff ``other`` is a Vector of the same dimension whose
        entries are exactly equal. No tolerance is applied; NaN entries
        never compare equal.
        """
        if not isinstance(other, Vector):
            return False
        return self.shape == other.shape and bool(np.array_equal(self._values, other._values))

    def allclose(self, other: Vector, tier: ToleranceTier = CPU_FP64) -> bool:
        """Approximate equality under ``tier``; False on dimension mismatch."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._values, other._values, rtol=tier.rtol, atol=tier.atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    # --- Conversion and display ---

    def to_array(self) -> NDArray[np.float64]:
        """Independent numpy copy of the entries."""
        return self._values.copy()

    def to_list(self) -> list[float]:
        return self._values.tolist()

    def to_display_string(self, fmt: DisplayFormat = DEFAULT_FORMAT) -> str:
        """Render as ``[ v0 v1 ... ]`` with each entry formatted ``%6.3f``."""
        return format_values(self._values.tolist(), fmt)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Vector({self._values.tolist()!r})"

    # --- Python protocol ---

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def __add__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.add_elementwise(other)
        if isinstance(other, Real):
            return self.add_scalar(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Vector:
        if isinstance(other, Real):
            return self.add_scalar(other)
        return NotImplemented

    def __iadd__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.add_elementwise_in_place(other)
        if isinstance(other, Real):
            return self.add_scalar_in_place(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.multiply_elementwise(other)
        if isinstance(other, Real):
            return self.multiply_scalar(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector:
        if isinstance(other, Real):
            return self.multiply_scalar(other)
        return NotImplemented

    def __imul__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.multiply_elementwise_in_place(other)
        if isinstance(other, Real):
            return self.multiply_scalar_in_place(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> float:
        if isinstance(other, Vector):
            return self.inner_product(other)
        return NotImplemented


def inner_product(v1: Vector, v2: Vector) -> float:
    """
    Inner product of two vectors of equal dimension.

    Raises:
        DimensionMismatchError: If dimensions differ
    """
    return v1.inner_product(v2)
