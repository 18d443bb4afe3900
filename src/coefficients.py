"""Boundary-value polynomial coefficients.

For smoothness order n the normalized transition is

    P(tau) = sum_{i=0}^{n} c_i * tau^(n + 1 + i),   tau in [0, 1]

with P(0) = 0, P(1) = 1 and the first n derivatives vanishing at both ends.
"""

from types import MappingProxyType

import numpy as np

from .errors import UnsupportedOrderError

DEFAULT_ORDER = 6

_COEFFICIENTS = MappingProxyType(
    {
        1: (3.0, -2.0),
        2: (10.0, -15.0, 6.0),
        3: (35.0, -84.0, 70.0, -20.0),
        4: (126.0, -420.0, 540.0, -315.0, 70.0),
        5: (462.0, -1980.0, 3465.0, -3080.0, 1386.0, -252.0),
        6: (1716.0, -9009.0, 20020.0, -24024.0, 16380.0, -6006.0, 924.0),
        7: (6435.0, -40040.0, 108108.0, -163800.0, 150150.0, -83160.0, 25740.0, -3432.0),
    }
)

SUPPORTED_ORDERS = tuple(sorted(_COEFFICIENTS))


def validate_order(order) -> int:
    """Return ``order`` as a plain int or raise UnsupportedOrderError."""
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise UnsupportedOrderError(f"Smoothness order must be an integer, got {order!r}")
    if int(order) not in _COEFFICIENTS:
        raise UnsupportedOrderError(
            f"Unsupported smoothness order {order}; expected {SUPPORTED_ORDERS[0]}..{SUPPORTED_ORDERS[-1]}"
        )
    return int(order)


def coefficients(order: int) -> tuple[float, ...]:
    """Coefficients c_0..c_n for the given smoothness order."""
    return _COEFFICIENTS[validate_order(order)]


def exponents(order: int) -> range:
    """Exponents n+1..2n+1 matching ``coefficients(order)``."""
    n = validate_order(order)
    return range(n + 1, 2 * n + 2)
