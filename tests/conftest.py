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
def well_conditioned_matrix(rng):
    """Random 5x5 matrix made diagonally dominant (safely invertible)."""
    n = 5
    A = rng.standard_normal((n, n))
    A += np.diag(np.sum(np.abs(A), axis=1) + 1.0)
    return A


@pytest.fixture
def singular_matrix():
    """Rank-2 3x3 matrix; elimination meets an exact zero pivot in column 2."""
    return [
        [1.0, 2.0, 3.0],
        [2.0, 4.0, 6.0],
        [1.0, 1.0, 1.0],
    ]


@pytest.fixture
def hilbert_matrix():
    """6x6 Hilbert matrix (condition number ~1.5e7) and its exact inverse."""
    from scipy import linalg
    return linalg.hilbert(6), linalg.invhilbert(6)
