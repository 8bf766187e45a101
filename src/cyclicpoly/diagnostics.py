from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List

from .geometry import START_ANGLE, chord_lengths, closure_residual, radial_spread, signed_area
from .models import CyclicPolygon


@dataclass(frozen=True)
class PolygonStats:
    sides: list[float]
    chord_lengths: list[float]
    chord_errors: list[float]
    chord_rel_errors: list[float]
    angle_sum_residual: float
    closure_residual: float
    radial_spread: float
    area: float


def polygon_diagnostics(polygon: CyclicPolygon) -> PolygonStats:
    """Measure how well *polygon* honours its input sides and closes up."""
    points = polygon.points()
    chords = chord_lengths(points)
    errors = [c - s for c, s in zip(chords, polygon.sides)]
    rel_errors = [abs(e) / s for e, s in zip(errors, polygon.sides)]
    start = float(polygon.metadata.get("start_angle", START_ANGLE))
    closure = closure_residual(
        polygon.sides,
        polygon.radius,
        start_angle=start,
        reflex_index=polygon.metadata.get("reflex_side"),
    )
    return PolygonStats(
        sides=list(polygon.sides),
        chord_lengths=chords,
        chord_errors=errors,
        chord_rel_errors=rel_errors,
        angle_sum_residual=math.fsum(polygon.central_angles) - 2.0 * math.pi,
        closure_residual=closure,
        radial_spread=radial_spread(points),
        area=abs(signed_area(points)),
    )


def quality_gates(
    stats: PolygonStats,
    chord_rel_tol: float = 1e-3,
    closure_tol: float = 1e-6,
) -> Dict[str, float | bool]:
    """Pass/fail flags for chord fidelity and angular closure."""
    max_rel = _max(stats.chord_rel_errors)
    chord_ok = max_rel <= chord_rel_tol
    closure_ok = abs(stats.closure_residual) <= closure_tol
    angle_ok = abs(stats.angle_sum_residual) <= closure_tol
    return {
        "max_chord_rel_error": max_rel,
        "chord_ok": chord_ok,
        "closure_residual": stats.closure_residual,
        "closure_ok": closure_ok,
        "angle_sum_ok": angle_ok,
        "passed": chord_ok and closure_ok and angle_ok,
    }


def diagnostics_report(polygon: CyclicPolygon) -> Dict[str, object]:
    """Build a structured diagnostics report suitable for JSON export."""
    stats = polygon_diagnostics(polygon)
    return {
        "n_sides": polygon.vertex_count(),
        "radius": polygon.radius,
        "iterations": polygon.iterations,
        "converged": polygon.converged,
        "area": stats.area,
        "radial_spread": stats.radial_spread,
        "chords": {
            "lengths": stats.chord_lengths,
            "errors": stats.chord_errors,
            "max_rel_error": _max(stats.chord_rel_errors),
        },
        "quality": quality_gates(stats),
    }


def _max(values: List[float]) -> float:
    return max(values) if values else 0.0
