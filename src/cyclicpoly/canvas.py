"""Mapping of circle-centred geometry onto a square drawing surface.

The circle of radius ``R`` is scaled to span ``canvas_size - padding``
and its centre is moved to the canvas centre. Nothing here depends on how
``R`` was obtained.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from .models import CanvasTransform, Point, Vertex

DEFAULT_PADDING = 40.0

PointLike = Union[Point, Vertex]


def canvas_transform(
    radius: float,
    canvas_size: float,
    padding: float = DEFAULT_PADDING,
) -> CanvasTransform:
    """Transform fitting a circle of *radius* into a *canvas_size* square."""
    if radius <= 0:
        raise ValueError("radius must be positive")
    center = canvas_size / 2.0
    scale = (canvas_size - padding) / (2.0 * radius)
    return CanvasTransform(scale=scale, offset_x=center, offset_y=center)


def map_to_canvas(
    vertices: Iterable[PointLike],
    radius: float,
    canvas_size: float,
    padding: float = DEFAULT_PADDING,
) -> List[Point]:
    """Scale and recentre *vertices* into canvas coordinates."""
    transform = canvas_transform(radius, canvas_size, padding)
    return apply_transform(vertices, transform)


def apply_transform(vertices: Iterable[PointLike], transform: CanvasTransform) -> List[Point]:
    coords = np.array([_xy(v) for v in vertices], dtype=float).reshape(-1, 2)
    mapped = coords * transform.scale + np.array([transform.offset_x, transform.offset_y])
    return [(float(x), float(y)) for x, y in mapped]


def svg_points(points: Sequence[PointLike], precision: Optional[int] = None) -> str:
    """Format points as an SVG ``<polygon points="...">`` attribute value."""
    parts = []
    for p in points:
        x, y = _xy(p)
        if precision is None:
            parts.append(f"{x!r},{y!r}")
        else:
            parts.append(f"{x:.{precision}f},{y:.{precision}f}")
    return " ".join(parts)


def _xy(p: PointLike) -> Point:
    if isinstance(p, Vertex):
        return (p.x, p.y)
    return (float(p[0]), float(p[1]))
