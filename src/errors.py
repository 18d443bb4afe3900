"""Exceptions raised by trajectory validation.

Every error derives from ``ValueError`` so callers that already guard
against bad arguments keep working.
"""


class TrajectoryError(ValueError):
    """Base class for invalid trajectory requests."""


class UnsupportedOrderError(TrajectoryError):
    """Smoothness order outside the coefficient table."""


class DimensionMismatchError(TrajectoryError):
    """Start and end vectors do not describe the same number of dimensions."""


class BoundaryTimeMismatchError(TrajectoryError):
    """Final time sample differs from the transition time."""


class InvalidTimesError(TrajectoryError):
    """Empty, non-monotonic or otherwise unusable time samples."""


class InvalidDerivativeOrderError(TrajectoryError):
    """Negative or non-integer derivative order."""
