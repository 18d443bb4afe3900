"""Sparse power-series polynomials.

A polynomial is stored as ``{exponent: coefficient}``. Only the operations
needed for flat trajectories are provided: evaluation, time scaling and
differentiation. Differentiating the coefficient map replaces generating one
evaluator per (order, derivative) pair ahead of time.
"""

from collections.abc import Iterable, Mapping

import numpy as np


class Polynomial:
    """Immutable sparse polynomial p(t) = sum c_e * t^e."""

    __slots__ = ("_terms",)

    def __init__(self, terms: Mapping[int, float] | None = None):
        clean = {}
        for exponent, coeff in (terms or {}).items():
            if exponent < 0:
                raise ValueError(f"Negative exponent {exponent} is not a polynomial term")
            clean[int(exponent)] = float(coeff)
        self._terms = dict(sorted(clean.items()))

    @classmethod
    def from_coefficients(cls, coeffs: Iterable[float], exponents: Iterable[int]) -> "Polynomial":
        coeffs = list(coeffs)
        exponents = list(exponents)
        if len(coeffs) != len(exponents):
            raise ValueError(f"Got {len(coeffs)} coefficients for {len(exponents)} exponents")
        return cls(dict(zip(exponents, coeffs)))

    @property
    def terms(self) -> dict[int, float]:
        return dict(self._terms)

    @property
    def is_zero(self) -> bool:
        return not self._terms

    @property
    def degree(self) -> int:
        """Highest exponent, -1 for the zero polynomial."""
        return max(self._terms) if self._terms else -1

    def evaluate(self, t):
        """Evaluate at scalar or array ``t``; output has the shape of ``t``."""
        t = np.asarray(t, dtype=float)
        result = np.zeros_like(t)
        for exponent, coeff in self._terms.items():
            result = result + coeff * t**exponent
        return result

    __call__ = evaluate

    def differentiate(self, times: int = 1) -> "Polynomial":
        """Return the ``times``-th derivative.

        Constant terms drop out, so differentiating past the degree gives the
        zero polynomial instead of failing.
        """
        if times < 0:
            raise ValueError(f"Cannot differentiate a negative number of times ({times})")
        terms = self._terms
        for _ in range(times):
            if not terms:
                break
            terms = {e - 1: c * e for e, c in terms.items() if e >= 1}
        return Polynomial(terms)

    def scale(self, duration: float) -> "Polynomial":
        """Substitute tau = t / duration, i.e. divide c_e by duration**e."""
        duration = float(duration)
        if not np.isfinite(duration) or duration <= 0.0:
            raise ValueError(f"Scaling duration must be positive and finite, got {duration}")
        rate = np.float64(1.0) / np.float64(duration)
        with np.errstate(over="ignore", under="ignore"):
            terms = {e: c * rate**e for e, c in self._terms.items()}
        if not all(np.isfinite(c) for c in terms.values()):
            raise ValueError(f"Scaling by duration {duration} overflows the coefficients")
        return Polynomial(terms)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self):
        return hash(tuple(self._terms.items()))

    def __repr__(self):
        if not self._terms:
            return "Polynomial(0)"
        body = " + ".join(f"{c:g}*t^{e}" for e, c in self._terms.items())
        return f"Polynomial({body})"
