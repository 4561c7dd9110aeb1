"""
Exception hierarchy for pylinalg.

All exceptions inherit from LinAlgError to allow catching any
library-specific error. Each concrete failure carries a ``kind`` tag so
callers that receive an error through an Outcome can branch on it
without isinstance chains.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Raised before any mutation of the receiver
"""

from __future__ import annotations


class LinAlgError(Exception):
    """Base exception for all pylinalg errors."""
    kind: str = 'linalg_error'


class ValidationError(LinAlgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    kind = 'validation_error'


class InvalidDimensionError(ValidationError):
    """
    A vector or matrix was requested with a non-positive dimension.

    Attributes:
        dimension: The offending dimension value, if known
    """
    kind = 'invalid_dimension'

    def __init__(self, message: str, dimension: object | None = None):
        super().__init__(message)
        self.dimension = dimension


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    An index fell outside ``[0, bound)``.

    Also an IndexError, so plain Python index handling keeps working.

    Attributes:
        index: The offending index (int, or (row, col) tuple for matrices)
        bounds: The valid upper bounds (int, or (rows, cols) tuple)
    """
    kind = 'index_out_of_bounds'

    def __init__(
        self,
        message: str,
        index: int | tuple[int, ...] | None = None,
        bounds: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class DimensionMismatchError(ValidationError):
    """
    Operands of a binary operation have incompatible shapes.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
        operation: Name of the operation that rejected the operands
    """
    kind = 'dimension_mismatch'

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class ParseError(ValidationError, ValueError):
    """
    A textual vector literal is malformed.

    Attributes:
        text: The full input that failed to parse
        token: The token that could not be interpreted, if any
    """
    kind = 'parse_error'

    def __init__(
        self,
        message: str,
        text: str | None = None,
        token: str | None = None,
    ):
        super().__init__(message)
        self.text = text
        self.token = token


class NonFiniteValueWarning(UserWarning):
    """
    Input contained NaN or Inf.

    Construction still succeeds, but exact equality never holds for NaN
    entries, so callers usually want to know.
    """
    pass
