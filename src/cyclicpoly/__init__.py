"""cyclicpoly — convex cyclic polygons from ordered side lengths.

Public API is organised into layers:

- **Core** — models, errors, validation
- **Solving** — circumradius search, vertex placement, polygon façade
- **Canvas** — mapping onto a square drawing surface
- **Diagnostics** — chord and closure checks
- **I/O** — JSON persistence (rendering lives in ``cyclicpoly.render``)
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import (
    Vertex,
    SolverConfig,
    DEFAULT_CONFIG,
    CircumradiusResult,
    CanvasTransform,
    CyclicPolygon,
)
from .errors import (
    PolygonError,
    InvalidInput,
    TooFewSides,
    DegeneratePolygon,
    ConvergenceFailure,
)
from .validation import validate_sides, parse_side_lengths

# ── Solving ─────────────────────────────────────────────────────────
from .solver import (
    angle_sum_residual,
    bracket_circumradius,
    solve_circumradius,
    regular_circumradius,
)
from .geometry import (
    START_ANGLE,
    central_angles,
    place_vertices,
    closure_residual,
    chord_lengths,
    signed_area,
)
from .polygon import solve_polygon

# ── Canvas ──────────────────────────────────────────────────────────
from .canvas import DEFAULT_PADDING, canvas_transform, map_to_canvas, apply_transform, svg_points

# ── Diagnostics ─────────────────────────────────────────────────────
from .diagnostics import PolygonStats, polygon_diagnostics, quality_gates, diagnostics_report

# ── I/O ─────────────────────────────────────────────────────────────
from .io import load_sides_json, save_polygon_json, load_polygon_json

__all__ = [
    # Core
    "Vertex", "SolverConfig", "DEFAULT_CONFIG", "CircumradiusResult",
    "CanvasTransform", "CyclicPolygon",
    "PolygonError", "InvalidInput", "TooFewSides", "DegeneratePolygon",
    "ConvergenceFailure",
    "validate_sides", "parse_side_lengths",
    # Solving
    "angle_sum_residual", "bracket_circumradius", "solve_circumradius",
    "regular_circumradius",
    "START_ANGLE", "central_angles", "place_vertices", "closure_residual",
    "chord_lengths", "signed_area",
    "solve_polygon",
    # Canvas
    "DEFAULT_PADDING", "canvas_transform", "map_to_canvas", "apply_transform", "svg_points",
    # Diagnostics
    "PolygonStats", "polygon_diagnostics", "quality_gates", "diagnostics_report",
    # I/O
    "load_sides_json", "save_polygon_json", "load_polygon_json",
]
