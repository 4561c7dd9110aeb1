"""
Vector module.

Public API:
    Vector                    - dense real-valued vector
    inner_product(v1, v2)     - sum of elementwise products
"""

from pylinalg.vector.vector import Vector, inner_product

__all__ = [
    "Vector",
    "inner_product",
]
