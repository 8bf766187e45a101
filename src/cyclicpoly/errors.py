"""Typed failures raised while building a cyclic polygon.

All of them derive from :class:`PolygonError` (a ``ValueError``) so callers
can catch the whole family in one place.
"""

from __future__ import annotations

from typing import Optional


class PolygonError(ValueError):
    """Base class for every polygon construction failure."""


class InvalidInput(PolygonError):
    """A side length is non-numeric, non-finite, or not strictly positive."""

    def __init__(self, message: str, index: Optional[int] = None, value: object = None) -> None:
        super().__init__(message)
        self.index = index
        self.value = value


class TooFewSides(PolygonError):
    def __init__(self, count: int) -> None:
        super().__init__(f"A polygon must have at least 3 sides (got {count}).")
        self.count = count


class DegeneratePolygon(PolygonError):
    """The longest side is not shorter than the sum of all other sides."""

    def __init__(self, max_side: float, sum_others: float) -> None:
        super().__init__(
            f"Impossible polygon! The longest side ({max_side:g}) must be shorter "
            f"than the sum of the other sides ({sum_others:g})."
        )
        self.max_side = max_side
        self.sum_others = sum_others


class ConvergenceFailure(PolygonError, RuntimeError):
    """Bisection hit its iteration cap with the closing residual above tolerance."""

    def __init__(self, radius: float, residual: float, iterations: int) -> None:
        super().__init__(
            f"Circumradius search did not converge after {iterations} iterations "
            f"(R={radius:.6g}, residual={residual:.3e} rad)."
        )
        self.radius = radius
        self.residual = residual
        self.iterations = iterations
