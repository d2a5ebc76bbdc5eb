"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square2():
    """[[1, 2], [3, 4]]: det -2, Frobenius norm sqrt(30)."""
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def ragged3():
    """Ragged input padded to 3 x 3: [1,2,5,3,4,0,6,0,0]."""
    return Matrix.from_rows([[1, 2, 5], [3, 4], [6]])


@pytest.fixture
def square4():
    """4 x 4 integer matrix with det 14."""
    return Matrix.from_rows([
        [1, 3, 0, -1],
        [0, 2, 1, 3],
        [3, 1, 2, 1],
        [-1, 2, 0, 3],
    ])


@pytest.fixture
def rank_deficient3():
    """Third row's pivot vanishes: rank 2, det 0."""
    return Matrix.from_rows([[1, 2, 3], [2, 4, 6], [1, 1, 1]])
