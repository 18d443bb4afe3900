"""Flat trajectories package - smooth point-to-point motion references."""

from .base_trajectory import BaseTrajectory, BaseTrajectoryConfig, default_time_grid
from .coefficients import DEFAULT_ORDER, SUPPORTED_ORDERS, coefficients, exponents, validate_order
from .errors import (
    BoundaryTimeMismatchError,
    DimensionMismatchError,
    InvalidDerivativeOrderError,
    InvalidTimesError,
    TrajectoryError,
    UnsupportedOrderError,
)
from .flat_trajectory import (
    FlatTrajectory,
    FlatTrajectoryConfig,
    Trajectory,
    base_polynomial,
    derivative,
    generate,
    generate_derivative,
    motion_profile,
    scaled_polynomial,
    trajectory,
)
from .polynomial import Polynomial

__all__ = [
    # Coefficient table
    "DEFAULT_ORDER",
    "SUPPORTED_ORDERS",
    "coefficients",
    "exponents",
    "validate_order",
    # Polynomial engine
    "Polynomial",
    "base_polynomial",
    "scaled_polynomial",
    # Evaluation
    "Trajectory",
    "trajectory",
    "derivative",
    "generate",
    "generate_derivative",
    "motion_profile",
    # Output layer
    "BaseTrajectory",
    "BaseTrajectoryConfig",
    "FlatTrajectory",
    "FlatTrajectoryConfig",
    "default_time_grid",
    # Errors
    "TrajectoryError",
    "UnsupportedOrderError",
    "DimensionMismatchError",
    "BoundaryTimeMismatchError",
    "InvalidTimesError",
    "InvalidDerivativeOrderError",
]
