"""
Product kernels on plain row lists.

Straightforward loops, no blocking or BLAS: every output entry is
accumulated left to right over the contracted index, so results are
reproducible bit for bit.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def identity_array(dim: int) -> NDArray[np.float64]:
    """dim x dim array with 1.0 on the main diagonal, 0.0 elsewhere."""
    out = np.zeros((dim, dim), dtype=np.float64)
    for i in range(dim):
        out[i, i] = 1.0
    return out


def matmul_loops(
    a: list[list[float]],
    b: list[list[float]],
) -> NDArray[np.float64]:
    """
    Matrix product via the triple loop.

    ``out[i][j] = sum_k a[i][k] * b[k][j]`` accumulated in ascending k.
    Caller guarantees ``len(a[0]) == len(b)``.
    """
    n_rows = len(a)
    n_inner = len(b)
    n_cols = len(b[0])
    out = np.zeros((n_rows, n_cols), dtype=np.float64)
    for i in range(n_rows):
        a_row = a[i]
        for j in range(n_cols):
            total = 0.0
            for k in range(n_inner):
                total += a_row[k] * b[k][j]
            out[i, j] = total
    return out


def matvec_loops(
    a: list[list[float]],
    x: list[float],
) -> NDArray[np.float64]:
    """
    Matrix-vector product.

    ``out[i] = sum_j a[i][j] * x[j]`` accumulated in ascending j.
    Caller guarantees ``len(a[0]) == len(x)``.
    """
    out = np.zeros(len(a), dtype=np.float64)
    for i, a_row in enumerate(a):
        total = 0.0
        for a_ij, x_j in zip(a_row, x):
            total += a_ij * x_j
        out[i] = total
    return out
