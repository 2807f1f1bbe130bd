"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def diagonally_dominant_system(rng):
    """
    Strictly diagonally dominant 6x6 system with a known solution.

    Elimination without row interchange never meets a zero pivot on such
    a matrix, so every backend must solve it.
    """
    n = 6
    A = rng.uniform(-10, 10, size=(n, n))
    A[np.diag_indices(n)] = np.abs(A).sum(axis=1) + 1.0
    x_true = rng.uniform(-5, 5, size=n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def envelope_matrix(rng):
    """Random 4x4 matrix with entries in the console's value range."""
    return np.round(rng.uniform(-100, 100, size=(4, 4)), 3)
