import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cyclicpoly import PolygonError, map_to_canvas, solve_polygon, svg_points
from cyclicpoly.diagnostics import polygon_diagnostics, quality_gates

CANVAS_SIZE = 335.0


def main() -> None:
    examples = [
        [10, 12, 15, 7, 9],
        [10, 10, 10, 10, 10],
        [10, 6, 6],
        [50, 1, 1, 1],
    ]
    for sides in examples:
        print("Sides:", sides)
        try:
            poly = solve_polygon(sides)
        except PolygonError as exc:
            print("  error:", exc)
            continue
        quality = quality_gates(polygon_diagnostics(poly))
        print(f"  R = {poly.radius:.6f}  area = {poly.area():.4f}  passed = {quality['passed']}")
        points = map_to_canvas(poly.vertices, poly.radius, CANVAS_SIZE)
        print("  points:", svg_points(points, precision=2))


if __name__ == "__main__":
    main()
