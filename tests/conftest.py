"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyalgebra import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    """[[2, 1], [1, 1]]: eliminates to [[2, 1], [0, 0.5]]."""
    return Matrix(2, 2, [[2, 1], [1, 1]])


@pytest.fixture
def rect_2x3():
    return Matrix(2, 3, [[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def vector_3():
    return Vector(3, [1, 2, 3])


@pytest.fixture
def diagonally_dominant(rng):
    """Random 5x5 diagonally dominant matrix: never meets a zero pivot."""
    n = 5
    A = rng.standard_normal((n, n))
    A += np.diag(np.abs(A).sum(axis=1) + 1.0)
    return A
