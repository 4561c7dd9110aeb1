"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Vector and Matrix call them
before touching their storage, so a failed call never leaves a partial
mutation behind.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import operator
import warnings
from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
    NonFiniteValueWarning,
    ValidationError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a requested dimension is a positive integer.

    Args:
        value: Requested dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        InvalidDimensionError: If value is not an integer or is < 1
    """
    if isinstance(value, (bool, np.bool_)):
        raise InvalidDimensionError(
            f"{name}: expected a positive integer, got bool {value!r}",
            dimension=value,
        )
    try:
        dim = operator.index(value)
    except TypeError as e:
        raise InvalidDimensionError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}",
            dimension=value,
        ) from e
    if dim < 1:
        raise InvalidDimensionError(
            f"{name}: dimension {dim} cannot be less than 1",
            dimension=dim,
        )
    return dim


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify an index lies in ``[0, bound)``.

    Negative indices are rejected rather than wrapped around.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer, or is a bool
        IndexOutOfBoundsError: If index < 0 or index >= bound
    """
    if isinstance(index, (bool, np.bool_)):
        raise TypeError(f"{name}: expected an integer index, got bool {index!r}")
    i = operator.index(index)
    if i < 0 or i >= bound:
        raise IndexOutOfBoundsError(
            f"{name}: index {i} is out of bounds [0, {bound})",
            index=i,
            bounds=bound,
        )
    return i


def check_real(value: Any, name: str) -> float:
    """
    Verify a scalar is a real number.

    Strings and complex numbers are rejected rather than coerced.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Returns:
        The value as a plain float

    Raises:
        TypeError: If value is not a real number
    """
    if not isinstance(value, Real):
        raise TypeError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    return float(value)


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"Cannot {operation} operands of different dimensions {left} and {right}",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_inner_dimensions(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify the contracted dimensions of a product agree.

    The last axis of ``left`` must equal the first axis of ``right``.

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left[-1] != right[0]:
        raise DimensionMismatchError(
            f"Cannot {operation}: left operand has {left[-1]} columns "
            f"but right operand has {right[0]} rows (shapes {left} and {right})",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_array(
    array: ArrayLike,
    ndim: int,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array of given rank.

    Returns a fresh copy, so the caller owns the storage outright.

    Args:
        array: Input to validate
        ndim: Required number of dimensions (1 or 2)
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input is ragged, non-numeric or of wrong rank
        InvalidDimensionError: If any axis has length 0
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    if result.ndim != ndim:
        raise ValidationError(
            f"{name}: expected {ndim}D array, got {result.ndim}D with shape {result.shape}"
        )

    if 0 in result.shape:
        raise InvalidDimensionError(
            f"{name}: shape {result.shape} has an empty axis",
            dimension=result.shape,
        )

    return result.astype(np.float64, copy=False)


def warn_non_finite(
    array: NDArray[np.float64],
    name: str,
    stacklevel: int = 2,
) -> None:
    """
    Emit NonFiniteValueWarning if the array holds NaN or Inf.

    Args:
        array: Array to check
        name: Parameter name for the warning message
        stacklevel: Forwarded to warnings.warn so the warning points
                    at the user's call site
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        warnings.warn(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            NonFiniteValueWarning,
            stacklevel=stacklevel + 1,
        )
