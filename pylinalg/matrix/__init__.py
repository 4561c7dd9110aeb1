"""
Matrix module.

Public API:
    Matrix                  - dense real-valued matrix
    identity(dim)           - square identity matrix
    multiply(left, right)   - matrix-matrix or matrix-vector product
"""

from pylinalg.matrix.matrix import Matrix, identity, multiply

__all__ = [
    "Matrix",
    "identity",
    "multiply",
]
