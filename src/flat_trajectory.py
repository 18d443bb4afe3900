"""Differentially flat point-to-point trajectories.

Every dimension m moves from ``start[m]`` to ``end[m]`` along the same
normalized boundary-value polynomial:

    q_m(t) = start_m + (end_m - start_m) * P(t / T)

The k-th time derivative only depends on ``end - start``:

    q_m^(k)(t) = (end_m - start_m) * d^k/dt^k P(t / T)

P has degree 2n+1, so every derivative above that order is identically zero.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .base_trajectory import DEFAULT_NAME, DEFAULT_SAMPLING, BaseTrajectory, BaseTrajectoryConfig, default_time_grid
from .coefficients import DEFAULT_ORDER, coefficients, exponents, validate_order
from .errors import (
    BoundaryTimeMismatchError,
    DimensionMismatchError,
    InvalidDerivativeOrderError,
    InvalidTimesError,
)
from .polynomial import Polynomial

logger = logging.getLogger(__name__)


def base_polynomial(order: int) -> Polynomial:
    """Normalized transition P(tau) for the given smoothness order."""
    return Polynomial.from_coefficients(coefficients(order), exponents(order))


def scaled_polynomial(order: int, transition: float, derivative_order: int = 0) -> Polynomial:
    """P(t / transition) differentiated ``derivative_order`` times in t."""
    return base_polynomial(order).scale(transition).differentiate(derivative_order)


def _validate_transition(transition) -> float:
    transition = float(transition)
    if not np.isfinite(transition) or transition <= 0.0:
        raise InvalidTimesError(f"Transition time must be positive and finite, got {transition}")
    return transition


def _validate_boundaries(start, end) -> tuple[np.ndarray, np.ndarray]:
    start = np.atleast_1d(np.asarray(start, dtype=float))
    end = np.atleast_1d(np.asarray(end, dtype=float))
    if start.ndim != 1 or end.ndim != 1:
        raise DimensionMismatchError(f"Start and end must be vectors, got shapes {start.shape} and {end.shape}")
    if start.size == 0:
        raise DimensionMismatchError("Start and end must not be empty")
    if start.shape != end.shape:
        raise DimensionMismatchError(f"Start has {start.size} dimensions but end has {end.size}")
    return start, end


def _validate_times(times, transition: float) -> np.ndarray:
    times = np.asarray(times, dtype=float)
    if times.ndim != 1:
        raise InvalidTimesError(f"Time samples must be a vector, got shape {times.shape}")
    if times.size == 0:
        raise InvalidTimesError("Time samples must not be empty")
    if not np.all(np.isfinite(times)):
        raise InvalidTimesError("Time samples must be finite")
    if times[0] < 0.0:
        raise InvalidTimesError(f"Time samples must be non-negative, got {times[0]}")
    if np.any(np.diff(times) < 0.0):
        raise InvalidTimesError("Time samples must be non-decreasing")
    # Exact comparison: P only reaches its boundary values at tau == 1.
    if times[-1] != transition:
        raise BoundaryTimeMismatchError(
            f"Transition time [{transition}s] and final value of time [{times[-1]}s] mismatch"
        )
    return times


def _validate_derivative_order(derivative_order) -> int:
    if isinstance(derivative_order, bool) or not isinstance(derivative_order, (int, np.integer)):
        raise InvalidDerivativeOrderError(f"Derivative order must be an integer, got {derivative_order!r}")
    if derivative_order < 0:
        raise InvalidDerivativeOrderError(f"Derivative order must be non-negative, got {derivative_order}")
    return int(derivative_order)


def _prepare(start, end, order, transition, times, sampling):
    order = validate_order(order)
    transition = _validate_transition(transition)
    start, end = _validate_boundaries(start, end)
    if times is None:
        times = default_time_grid(transition, sampling)
    times = _validate_times(times, transition)
    return start, end, order, transition, times


def _time_scale(transition: float, derivative_order: int) -> np.float64:
    """Chain-rule factor T^-k of the k-th derivative of P(t / T)."""
    with np.errstate(over="ignore", under="ignore"):
        factor = np.float64(transition) ** -derivative_order
    if not np.isfinite(factor):
        raise InvalidTimesError(
            f"Derivative {derivative_order} overflows for transition time {transition}s"
        )
    return factor


def _evaluate(start, end, order, derivative_order, transition, times) -> np.ndarray:
    # Evaluated in tau = t / T so extreme transition times do not overflow the
    # scaled coefficients; equal to scaled_polynomial(...).evaluate(times).
    poly = base_polynomial(order).differentiate(derivative_order)
    logger.debug(
        "Evaluating order %d trajectory, derivative %d, %d samples x %d dimensions",
        order,
        derivative_order,
        times.size,
        start.size,
    )
    if poly.is_zero:
        return np.zeros((times.size, start.size))

    factor = _time_scale(transition, derivative_order)
    shape = poly.evaluate(times / transition) * factor
    values = (end - start)[np.newaxis, :] * shape[:, np.newaxis]
    if derivative_order == 0:
        values = values + start[np.newaxis, :]
    return values


def trajectory(
    start,
    end,
    order: int = DEFAULT_ORDER,
    transition: float = 1.0,
    times=None,
    sampling: float = DEFAULT_SAMPLING,
) -> np.ndarray:
    """Position samples of the flat trajectory.

    Args:
        start: (M,) start position, scalars are treated as one dimension.
        end: (M,) end position.
        order: Smoothness order 1..7.
        transition: Transition time T [s].
        times: (N,) non-decreasing sample times ending exactly at T. Defaults
            to a grid from 0 to T with step ``sampling``.
        sampling: Step of the default grid [s].

    Returns:
        (N, M) array of positions.
    """
    return derivative(start, end, order, 0, transition, times, sampling)


def derivative(
    start,
    end,
    order: int = DEFAULT_ORDER,
    derivative_order: int = 1,
    transition: float = 1.0,
    times=None,
    sampling: float = DEFAULT_SAMPLING,
) -> np.ndarray:
    """``derivative_order``-th time derivative of the flat trajectory.

    Derivative order 0 is the position. Orders above 2 * order + 1 give an
    all-zero (N, M) array.
    """
    start, end, order, transition, times = _prepare(start, end, order, transition, times, sampling)
    derivative_order = _validate_derivative_order(derivative_order)
    return _evaluate(start, end, order, derivative_order, transition, times)


@dataclass
class Trajectory:
    """Time-stamped samples of one flat trajectory (or one of its derivatives).

    Attributes:
        time: (N,) sample times [s].
        values: (N, M) samples, one column per dimension.
        name: Label of the time series.
        derivative_order: 0 for positions, k for the k-th derivative.
        order: Smoothness order of the underlying polynomial.
        transition: Transition time [s].
    """

    time: np.ndarray
    values: np.ndarray
    name: str = DEFAULT_NAME
    derivative_order: int = 0
    order: int = DEFAULT_ORDER
    transition: float = 1.0

    def __post_init__(self):
        self.time = np.asarray(self.time, dtype=float).ravel()
        self.values = np.asarray(self.values, dtype=float)
        if self.values.ndim == 1:
            self.values = self.values[:, np.newaxis]
        if self.values.shape[0] != self.time.size:
            raise ValueError(f"values must have {self.time.size} rows, got {self.values.shape[0]}")

    @property
    def num_samples(self) -> int:
        return self.time.size

    @property
    def num_dimensions(self) -> int:
        return self.values.shape[1]

    def __len__(self):
        return self.num_samples

    def __getitem__(self, index):
        return self.values[index]

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.values
        return self.values.astype(dtype)


def generate(
    start,
    end,
    order: int = DEFAULT_ORDER,
    transition: float = 1.0,
    times=None,
    sampling: float = DEFAULT_SAMPLING,
    name: str = DEFAULT_NAME,
) -> Trajectory:
    """Generate a time-stamped flat position trajectory.

    >>> generate(0.0, 1.0, order=6, transition=1.0, times=[0.0, 0.5, 1.0])[1]
    array([0.5])
    """
    return generate_derivative(start, end, 0, order, transition, times, sampling, name)


def generate_derivative(
    start,
    end,
    derivative_order: int,
    order: int = DEFAULT_ORDER,
    transition: float = 1.0,
    times=None,
    sampling: float = DEFAULT_SAMPLING,
    name: str | None = None,
) -> Trajectory:
    """Generate the time-stamped ``derivative_order``-th derivative trajectory."""
    start, end, order, transition, times = _prepare(start, end, order, transition, times, sampling)
    derivative_order = _validate_derivative_order(derivative_order)
    values = _evaluate(start, end, order, derivative_order, transition, times)
    if name is None:
        name = DEFAULT_NAME if derivative_order == 0 else f"{DEFAULT_NAME}_d{derivative_order}"
    return Trajectory(
        time=times,
        values=values,
        name=name,
        derivative_order=derivative_order,
        order=order,
        transition=transition,
    )


def motion_profile(
    start,
    end,
    num_derivatives: int = 2,
    order: int = DEFAULT_ORDER,
    transition: float = 1.0,
    times=None,
    sampling: float = DEFAULT_SAMPLING,
) -> list[np.ndarray]:
    """Position followed by derivatives 1..num_derivatives on a shared grid.

    Returns:
        List of ``num_derivatives + 1`` arrays of shape (N, M).
    """
    start, end, order, transition, times = _prepare(start, end, order, transition, times, sampling)
    num_derivatives = _validate_derivative_order(num_derivatives)
    return [_evaluate(start, end, order, k, transition, times) for k in range(num_derivatives + 1)]


@dataclass(kw_only=True)
class FlatTrajectoryConfig(BaseTrajectoryConfig):
    start_pos: list[float]  # Required, no default
    end_pos: list[float]  # Required, no default
    order: int = DEFAULT_ORDER  # Smoothness order 1..7
    num_derivatives: int = 2  # Exported derivatives: 2 -> pos, vel, acc


class FlatTrajectory(BaseTrajectory):
    """Differentially flat transition for multiple axes.

    Position and the first ``order`` derivatives are continuous and the
    derivatives vanish at both ends of the transition.
    """

    def __init__(self, cfg: FlatTrajectoryConfig, *args, **kwargs):
        super().__init__(cfg, *args, **kwargs)

        self.order = validate_order(cfg.order)
        self.start_pos, self.end_pos = _validate_boundaries(cfg.start_pos, cfg.end_pos)
        self.num_axes = self.start_pos.size
        self.num_derivatives = _validate_derivative_order(cfg.num_derivatives)

    def trajectory(self, derivative_order: int = 0) -> Trajectory:
        """Time-stamped ``derivative_order``-th derivative on the configured grid."""
        name = self.name if derivative_order == 0 else f"{self.name}_d{derivative_order}"
        return generate_derivative(
            self.start_pos,
            self.end_pos,
            derivative_order,
            order=self.order,
            transition=self.transition,
            times=self.time_array,
            name=name,
        )

    def get_value(self) -> list[np.ndarray]:
        """Position and derivatives at all time steps, each (N, num_axes)."""
        return motion_profile(
            self.start_pos,
            self.end_pos,
            num_derivatives=self.num_derivatives,
            order=self.order,
            transition=self.transition,
            times=self.time_array,
        )

    def _generate(self) -> list[np.ndarray]:
        return self.get_value()
