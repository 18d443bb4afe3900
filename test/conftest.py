"""Pytest fixtures for flat trajectory tests."""

import numpy as np
import pytest

from flat_trajectories import SUPPORTED_ORDERS


@pytest.fixture(params=SUPPORTED_ORDERS, ids=lambda n: f"order{n}")
def order(request) -> int:
    """Every supported smoothness order."""
    return request.param


@pytest.fixture
def start_pos() -> np.ndarray:
    """Three-axis start position."""
    return np.array([0.0, 1.0, -0.5])


@pytest.fixture
def end_pos() -> np.ndarray:
    """Three-axis end position, one axis moving backwards."""
    return np.array([1.0, -2.0, 0.25])


@pytest.fixture
def dense_times() -> np.ndarray:
    """Dense grid over a 2 s transition."""
    return np.linspace(0.0, 2.0, 20001)
