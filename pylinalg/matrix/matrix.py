"""
Matrix: fixed-shape 2D grid of real numbers.

The shape is set at construction and never changes. Derived matrices
(transpose, identity, products) are always freshly allocated, and row or
column extraction returns an independent Vector, never a view.
"""

from __future__ import annotations

from typing import Any, Iterator, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.formatting import DEFAULT_FORMAT, DisplayFormat, format_rows
from pylinalg.core.tolerances import CPU_FP64, ToleranceTier
from pylinalg.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_inner_dimensions,
    check_real,
    warn_non_finite,
)
from pylinalg.matrix._products import identity_array, matmul_loops, matvec_loops
from pylinalg.vector.vector import Vector


class Matrix:
    """
    Dense real-valued matrix, row-major.

    Construction:
        Matrix(rows, cols)                 zero-filled, both >= 1
        Matrix.copy_of(m)                  independent deep copy
        Matrix.from_rows([[1, 2], [3, 4]]) any 2D array-like
        Matrix.identity(n)                 n x n identity

    Element access takes a (row, col) pair, e.g. ``m[0, 1]``; both
    indices must be non-negative and below their dimension.
    """

    __slots__ = ('_data',)

    __array_ufunc__ = None

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int):
        n_rows = check_dimension(rows, "rows")
        n_cols = check_dimension(cols, "cols")
        self._data: NDArray[np.float64] = np.zeros((n_rows, n_cols), dtype=np.float64)

    # --- Construction ---

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        """Adopt an already-validated 2D float64 array without copying."""
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def copy_of(cls, m: Matrix) -> Matrix:
        """Return an independent deep copy of ``m``."""
        return cls._wrap(m._data.copy())

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D array-like of real numbers.

        Parameters
        ----------
        rows : array-like
            Sequence of equal-length rows, or a 2D numpy array. Copied.

        Raises
        ------
        ValidationError
            If rows are ragged, non-numeric, or not 2D.
        InvalidDimensionError
            If there are no rows or no columns.
        """
        array = check_array(rows, 2, "rows")
        warn_non_finite(array, "rows")
        return cls._wrap(array)

    @classmethod
    def identity(cls, dim: int) -> Matrix:
        return identity(dim)

    def copy(self) -> Matrix:
        return type(self).copy_of(self)

    # --- Shape and element access ---

    @property
    def num_rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def num_cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        """(num_rows, num_cols)"""
        return (self.num_rows, self.num_cols)

    def _check_position(self, row: int, col: int) -> tuple[int, int]:
        r = check_index(row, self.num_rows, "row")
        c = check_index(col, self.num_cols, "col")
        return r, c

    def get(self, row: int, col: int) -> float:
        """
        Return the entry at (row, col).

        Raises:
            IndexOutOfBoundsError: If either index is out of range
        """
        r, c = self._check_position(row, col)
        return float(self._data[r, c])

    def set(self, row: int, col: int, value: float) -> None:
        """
        Store ``value`` at (row, col).

        Raises:
            IndexOutOfBoundsError: If either index is out of range
        """
        r, c = self._check_position(row, col)
        self._data[r, c] = check_real(value, "value")

    def get_row(self, row: int) -> Vector:
        """
        Copy of row ``row`` as a Vector of length num_cols.

        Raises:
            IndexOutOfBoundsError: If row is out of range
        """
        r = check_index(row, self.num_rows, "row")
        return Vector._wrap(self._data[r, :].copy())

    def get_column(self, col: int) -> Vector:
        """
        Copy of column ``col`` as a Vector of length num_rows.

        Raises:
            IndexOutOfBoundsError: If col is out of range
        """
        c = check_index(col, self.num_cols, "col")
        return Vector._wrap(self._data[:, c].copy())

    # --- Derived matrices ---

    def transpose(self) -> Matrix:
        """New (num_cols x num_rows) matrix with ``result[c, r] == self[r, c]``."""
        return type(self)._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # --- Comparison ---

    def equals(self, other: Any) -> bool:
        """
        True iff ``other`` is a Matrix of the same shape whose entries
        are exactly equal at every (row, col).
        """
        if not isinstance(other, Matrix):
            return False
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(self, other: Matrix, tier: ToleranceTier = CPU_FP64) -> bool:
        """Approximate equality under ``tier``; False on shape mismatch."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=tier.rtol, atol=tier.atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    # --- Conversion and display ---

    def to_array(self) -> NDArray[np.float64]:
        """Independent numpy copy of the entries."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    def to_display_string(self, fmt: DisplayFormat = DEFAULT_FORMAT) -> str:
        """One ``[ ... ]`` line per row, rows separated by newlines."""
        return format_rows(self._data.tolist(), fmt)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    # --- Python protocol ---

    def __iter__(self) -> Iterator[Vector]:
        """Iterate over row copies."""
        for r in range(self.num_rows):
            yield self.get_row(r)

    def __getitem__(self, position: tuple[int, int]) -> float:
        row, col = _unpack_position(position)
        return self.get(row, col)

    def __setitem__(self, position: tuple[int, int], value: float) -> None:
        row, col = _unpack_position(position)
        self.set(row, col, value)

    @overload
    def __matmul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __matmul__(self, other: Vector) -> Vector: ...

    def __matmul__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return multiply(self, other)
        return NotImplemented


def _unpack_position(position: Any) -> tuple[int, int]:
    if not isinstance(position, tuple) or len(position) != 2:
        raise TypeError(
            f"Matrix indices must be a (row, col) pair, got {position!r}"
        )
    return position


def identity(dim: int) -> Matrix:
    """
    Square identity matrix of size ``dim``.

    Raises:
        InvalidDimensionError: If dim <= 0
    """
    n = check_dimension(dim, "dim")
    return Matrix._wrap(identity_array(n))


@overload
def multiply(left: Matrix, right: Matrix) -> Matrix: ...


@overload
def multiply(left: Matrix, right: Vector) -> Vector: ...


def multiply(left, right):
    """
    Matrix-matrix or matrix-vector product.

    Parameters
    ----------
    left : Matrix
        Left operand, shape (n, k).
    right : Matrix or Vector
        Right operand, shape (k, m) or dimension k (treated as a column).

    Returns
    -------
    Matrix of shape (n, m), or Vector of dimension n.

    Raises
    ------
    DimensionMismatchError
        If the inner dimensions differ.
    TypeError
        If the operands are not a Matrix and a Matrix/Vector.
    """
    if not isinstance(left, Matrix):
        raise TypeError(f"left operand must be a Matrix, got {type(left).__name__}")

    if isinstance(right, Matrix):
        check_inner_dimensions(left.shape, right.shape, "multiply matrices")
        return Matrix._wrap(matmul_loops(left.to_list(), right.to_list()))

    if isinstance(right, Vector):
        check_inner_dimensions(left.shape, right.shape, "multiply matrix by vector")
        return Vector._wrap(matvec_loops(left.to_list(), right.to_list()))

    raise TypeError(
        f"right operand must be a Matrix or Vector, got {type(right).__name__}"
    )
