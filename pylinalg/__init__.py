"""
pylinalg: dense real-valued vectors and matrices.

A small numeric foundation for teaching code and lightweight solvers:
construction, indexed access, exact equality, transposition, identity,
scalar and elementwise arithmetic, inner product, and matrix/vector
multiplication.

Submodules:
    core: Exceptions, Outcome envelope, validation, formatting, tolerances
    vector: Vector and inner_product
    matrix: Matrix, identity and multiply
"""

__version__ = "0.1.0"

from pylinalg.core.exceptions import (
    LinAlgError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfBoundsError,
    DimensionMismatchError,
    ParseError,
    NonFiniteValueWarning,
)
from pylinalg.core.result import Outcome, attempt
from pylinalg.vector import Vector, inner_product
from pylinalg.matrix import Matrix, identity, multiply

__all__ = [
    "__version__",
    # Types
    "Vector",
    "Matrix",
    # Operations
    "inner_product",
    "identity",
    "multiply",
    # Result
    "Outcome",
    "attempt",
    # Exceptions
    "LinAlgError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    "ParseError",
    "NonFiniteValueWarning",
]
