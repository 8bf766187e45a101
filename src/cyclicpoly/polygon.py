from __future__ import annotations

from typing import Optional, Sequence

from .geometry import START_ANGLE, central_angles, place_vertices
from .models import DEFAULT_CONFIG, CyclicPolygon, SolverConfig, vertices_from_points
from .solver import solve_circumradius
from .validation import validate_sides


def solve_polygon(
    sides: Sequence[object],
    config: Optional[SolverConfig] = None,
    start_angle: float = START_ANGLE,
) -> CyclicPolygon:
    """Build the convex cyclic polygon whose sides are *sides*, in order.

    Vertices lie on a circle centred on the origin; the first one sits at
    *start_angle*. Raises a :class:`~cyclicpoly.errors.PolygonError`
    subclass when the sides cannot close into a polygon.
    """
    config = config or DEFAULT_CONFIG
    values = validate_sides(sides)
    result = solve_circumradius(values, config)
    angles = central_angles(values, result.radius, result.reflex_index)
    points = place_vertices(values, result.radius, start_angle=start_angle, angles=angles)
    return CyclicPolygon(
        sides=values,
        vertices=vertices_from_points(points),
        radius=result.radius,
        central_angles=tuple(float(a) for a in angles),
        residual=result.residual,
        iterations=result.iterations,
        converged=result.converged,
        metadata={
            "start_angle": start_angle,
            "reflex_side": result.reflex_index,
        },
    )
