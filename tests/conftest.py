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
def shifted_groups(rng):
    """Two groups of 1000, same SD, means 0 and 5 (Cohen's d about -0.5)."""
    x = rng.normal(0, 10, 1000)
    y = rng.normal(5, 10, 1000)
    return x, y


@pytest.fixture
def small_groups():
    """Small, clearly separated groups."""
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    y = np.array([6.0, 7.0, 8.0, 9.0, 10.0])
    return x, y
