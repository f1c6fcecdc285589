"""
Shared fixtures for the ttestkit test suite.

Reference vectors are textbook two-sample examples with published p-values.
"""
import pytest


@pytest.fixture
def bottle_fill():
    """Two machines filling 30 oz bottles; 6 observations each."""
    a = [30.02, 29.99, 30.11, 29.97, 30.01, 29.99]
    b = [29.89, 29.93, 29.72, 29.98, 30.02, 29.98]
    return a, b


@pytest.fixture
def plant_growth():
    """Fifteen observations per group, unequal spread."""
    a = [27.5, 21.0, 19.0, 23.6, 17.0, 17.9, 16.9, 20.1,
         21.9, 22.6, 23.1, 19.6, 19.0, 21.7, 21.4]
    b = [27.1, 22.0, 20.8, 23.4, 23.4, 23.5, 25.8, 22.0,
         24.8, 20.2, 21.9, 22.1, 22.9, 20.5, 24.4]
    return a, b


@pytest.fixture
def constant_samples():
    """Two samples with zero variance each."""
    return [3.0, 3.0, 3.0, 3.0], [4.0, 4.0, 4.0, 4.0]


@pytest.fixture
def beta_grid():
    """(a, b, x) triples spanning small, unit and large shape parameters."""
    shapes = [0.1, 0.5, 1.0, 2.5, 10.0, 75.0, 400.0]
    xs = [1e-6, 0.01, 0.2, 0.5, 0.8, 0.99, 1 - 1e-6]
    return [(a, b, x) for a in shapes for b in shapes for x in xs]
