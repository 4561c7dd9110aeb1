"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def v123():
    """The vector [1, 2, 3]."""
    return Vector.from_values([1.0, 2.0, 3.0])


@pytest.fixture
def m2x3():
    """[[1, 2, 3], [4, 5, 6]]"""
    return Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def m3x2():
    """[[7, 8], [9, 10], [11, 12]]"""
    return Matrix.from_rows([[7.0, 8.0], [9.0, 10.0], [11.0, 12.0]])


@pytest.fixture
def random_matrix(rng):
    """Random 4x3 matrix with standard normal entries."""
    return Matrix.from_rows(rng.standard_normal((4, 3)))
