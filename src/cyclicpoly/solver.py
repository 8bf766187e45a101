"""Circumradius search for cyclic polygons.

The unknown is the radius ``R`` at which the central angles of all sides
add up to exactly 2π. The residual is monotone on the admissible domain
``R > max_side / 2``, so the root is bracketed and then bisected.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Tuple

import numpy as np
from scipy.optimize import brentq

from .errors import ConvergenceFailure
from .geometry import TWO_PI, central_angles, reflex_side_index
from .models import DEFAULT_CONFIG, CircumradiusResult, SolverConfig

logger = logging.getLogger(__name__)


def angle_sum_residual(
    sides: Sequence[float],
    radius: float,
    reflex_index: Optional[int] = None,
) -> float:
    """``Σ central_angle(i) - 2π``; ``inf`` when *radius* is too small for a side."""
    arr = np.asarray(sides, dtype=float)
    if radius <= 0 or np.any(arr / (2.0 * radius) > 1.0):
        return math.inf
    return float(np.sum(central_angles(arr, radius, reflex_index))) - TWO_PI


def _too_small(residual: float, reflex_index: Optional[int]) -> bool:
    # On the reflex branch the residual rises with R instead of falling.
    if math.isinf(residual):
        return True
    if reflex_index is None:
        return residual > 0
    return residual < 0


def bracket_circumradius(
    sides: Sequence[float],
    config: SolverConfig = DEFAULT_CONFIG,
    reflex_index: Optional[int] = None,
) -> Tuple[float, float]:
    """Return ``(low, high)`` with the root in ``[low, high]``.

    ``high`` starts at ``config.initial_high`` (or twice ``low``) and is
    doubled until the residual changes sign.
    """
    max_side = max(sides)
    low = max_side / 2.0 * (1.0 + config.epsilon)
    high = config.initial_high if config.initial_high is not None else 2.0 * low
    high = max(high, low)

    for step in range(config.max_doublings):
        residual = angle_sum_residual(sides, high, reflex_index)
        if not _too_small(residual, reflex_index):
            logger.debug(
                "bracketed R in [%.6g, %.6g] after %d doublings", low, high, step
            )
            return low, high
        low = high
        high *= 2.0

    residual = angle_sum_residual(sides, high, reflex_index)
    raise ConvergenceFailure(high, residual, 0)


def solve_circumradius(
    sides: Sequence[float],
    config: SolverConfig = DEFAULT_CONFIG,
) -> CircumradiusResult:
    """Bisect for the circumradius of the convex cyclic polygon with *sides*.

    *sides* must already be validated. The loop stops once
    ``|residual| < config.tolerance`` or after ``config.max_iter`` steps.
    Without convergence the last midpoint is returned with
    ``converged=False`` unless ``config.strict`` is set.
    """
    reflex_index = reflex_side_index(sides)
    low, high = bracket_circumradius(sides, config, reflex_index)

    radius = (low + high) / 2.0
    residual = math.inf
    converged = False
    iterations = 0
    while iterations < config.max_iter:
        radius = (low + high) / 2.0
        residual = angle_sum_residual(sides, radius, reflex_index)
        iterations += 1
        if abs(residual) < config.tolerance:
            converged = True
            break
        if _too_small(residual, reflex_index):
            low = radius
        else:
            high = radius

    if config.refine:
        radius, residual, converged = _refine(sides, low, high, config, reflex_index)

    if not converged:
        if config.strict:
            raise ConvergenceFailure(radius, residual, iterations)
        logger.warning(
            "circumradius search stopped after %d iterations with residual %.3e; "
            "using R=%.6g",
            iterations,
            residual,
            radius,
        )
    else:
        logger.debug("R=%.9g after %d iterations (residual %.3e)", radius, iterations, residual)

    return CircumradiusResult(
        radius=radius,
        residual=residual,
        iterations=iterations,
        converged=converged,
        low=low,
        high=high,
        reflex_index=reflex_index,
    )


def _refine(
    sides: Sequence[float],
    low: float,
    high: float,
    config: SolverConfig,
    reflex_index: Optional[int],
) -> Tuple[float, float, bool]:
    def residual(r: float) -> float:
        return angle_sum_residual(sides, r, reflex_index)

    f_low = residual(low)
    f_high = residual(high)
    if not (math.isfinite(f_low) and math.isfinite(f_high)) or f_low * f_high > 0:
        mid = (low + high) / 2.0
        value = residual(mid)
        return mid, value, abs(value) < config.tolerance

    radius = brentq(residual, low, high, xtol=1e-14, maxiter=config.max_iter)
    value = residual(radius)
    logger.debug("brentq refined R to %.12g (residual %.3e)", radius, value)
    return float(radius), value, abs(value) < config.tolerance


def regular_circumradius(side: float, n: int) -> float:
    """Closed-form circumradius of the regular *n*-gon with edge *side*."""
    if n < 3:
        raise ValueError("n must be >= 3")
    if side <= 0:
        raise ValueError("side must be positive")
    return side / (2.0 * math.sin(math.pi / n))
