"""
Core infrastructure for pylinalg.

This module provides the shared abstractions used by the vector and
matrix submodules.

Key components:
    exceptions: Exception hierarchy and warning category
    result: Outcome[T] success/failure envelope and attempt()
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
    formatting: Fixed-point display formatting
"""

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
from pylinalg.core.formatting import DisplayFormat, DEFAULT_FORMAT
from pylinalg.core.tolerances import ToleranceTier, EXACT, CPU_FP64

__all__ = [
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
    # Configuration
    "DisplayFormat",
    "DEFAULT_FORMAT",
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
]
