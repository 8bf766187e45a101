"""Placement of vertices on the circumcircle, plus chord/area helpers.

Angles follow the math convention: vertices advance by increasing angle,
starting at ``-π/2``. With y pointing down (SVG, PNG canvases) that is the
top of the circle and the walk is clockwise on screen; with y pointing up
it is the bottom and the walk is counter-clockwise.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .models import Point

START_ANGLE = -math.pi / 2
TWO_PI = 2.0 * math.pi


def circumcentre_inside(sides: Sequence[float]) -> bool:
    """True when the circumcentre lies inside (or on) the convex cyclic polygon.

    Evaluated at the smallest admissible radius ``max_side / 2``: if the
    angle sum there still reaches 2π, the root lies on the ordinary branch
    where every side subtends less than π.
    """
    arr = np.asarray(sides, dtype=float)
    ratio = np.clip(arr / arr.max(), 0.0, 1.0)
    return float(2.0 * np.sum(np.arcsin(ratio))) >= TWO_PI


def reflex_side_index(sides: Sequence[float]) -> Optional[int]:
    """Index of the side whose arc is reflex, or ``None``.

    Only the longest side can subtend more than π, and only when the
    circumcentre falls outside the polygon.
    """
    if circumcentre_inside(sides):
        return None
    return int(np.argmax(np.asarray(sides, dtype=float)))


def central_angles(
    sides: Sequence[float],
    radius: float,
    reflex_index: Optional[int] = None,
) -> np.ndarray:
    """Arc subtended by each side at the centre, in radians.

    ``2·asin(s / 2R)``; the side at *reflex_index* takes the complementary
    arc ``2π - 2·asin(s / 2R)``. Ratios are clipped to 1.
    """
    arr = np.asarray(sides, dtype=float)
    ratio = np.clip(arr / (2.0 * radius), 0.0, 1.0)
    angles = 2.0 * np.arcsin(ratio)
    if reflex_index is not None:
        angles[reflex_index] = TWO_PI - angles[reflex_index]
    return angles


def place_vertices(
    sides: Sequence[float],
    radius: float,
    start_angle: float = START_ANGLE,
    reflex_index: Optional[int] = None,
    angles: Optional[Sequence[float]] = None,
) -> List[Point]:
    """Walk the circle of *radius* emitting one vertex per side."""
    if angles is None:
        angles = central_angles(sides, radius, reflex_index)
    points: List[Point] = []
    angle = start_angle
    for theta in angles:
        points.append((radius * math.cos(angle), radius * math.sin(angle)))
        angle += float(theta)
    return points


def closure_residual(
    sides: Sequence[float],
    radius: float,
    start_angle: float = START_ANGLE,
    reflex_index: Optional[int] = None,
) -> float:
    """Signed gap between the final walking angle and ``start_angle + 2π``."""
    angle = start_angle + float(np.sum(central_angles(sides, radius, reflex_index)))
    return angle - (start_angle + TWO_PI)


def edge_length(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def chord_lengths(points: Sequence[Point]) -> List[float]:
    """Distance from each vertex to the next, wrapping around."""
    n = len(points)
    return [edge_length(points[i], points[(i + 1) % n]) for i in range(n)]


def signed_area(points: Sequence[Point]) -> float:
    """Shoelace area; positive for counter-clockwise order in y-up axes."""
    area = 0.0
    n = len(points)
    for i in range(n):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % n]
        area += x1 * y2 - x2 * y1
    return area / 2.0


def centroid(points: Sequence[Point]) -> Tuple[float, float]:
    if not points:
        return (0.0, 0.0)
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return (sum(xs) / len(xs), sum(ys) / len(ys))


def radial_spread(points: Sequence[Point], center: Point = (0.0, 0.0)) -> float:
    """Max minus min distance of *points* from *center*; zero for a cyclic set."""
    if not points:
        return 0.0
    dists = [math.hypot(x - center[0], y - center[1]) for x, y in points]
    return max(dists) - min(dists)
