"""Cyclic polygon command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .canvas import DEFAULT_PADDING, map_to_canvas, svg_points
from .errors import PolygonError
from .io import load_sides_json, save_polygon_json
from .models import CyclicPolygon, SolverConfig
from .polygon import solve_polygon
from .validation import parse_side_lengths


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cyclic polygon solver")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Solve a cyclic polygon and print its vertices")
    _add_sides_args(solve)
    solve.add_argument("--json", dest="json_path", help="Write the solved polygon as JSON")

    canvas = sub.add_parser("canvas", help="Print SVG polygon points for a square canvas")
    _add_sides_args(canvas)
    canvas.add_argument("--size", type=float, required=True)
    canvas.add_argument("--padding", type=float, default=DEFAULT_PADDING)
    canvas.add_argument("--precision", type=int, default=3)

    render = sub.add_parser("render", help="Render a cyclic polygon to PNG")
    _add_sides_args(render)
    render.add_argument("--out", dest="output_path", required=True)
    render.add_argument("--size", type=float, default=400.0)
    render.add_argument("--padding", type=float, default=DEFAULT_PADDING)
    render.add_argument("--circle", action="store_true", help="Draw the circumcircle")

    diagnose = sub.add_parser("diagnose", help="Print chord and closure diagnostics")
    _add_sides_args(diagnose)
    diagnose.add_argument("--diagnose-json", dest="diagnose_json")

    return parser


def _add_sides_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("sides", nargs="*", help="Side lengths, in order")
    parser.add_argument("--in", dest="input_path", help="JSON file with side lengths")
    parser.add_argument("--strict", action="store_true", help="Fail if bisection does not converge")
    parser.add_argument("--refine", action="store_true", help="Polish the radius with Brent's method")
    parser.add_argument("--max-iter", type=int, default=100)
    parser.add_argument("--tolerance", type=float, default=1e-6)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        polygon = _solve_from_args(args)
    except PolygonError as exc:
        print(exc)
        raise SystemExit(1)

    if args.command == "solve":
        _cmd_solve(args, polygon)

    elif args.command == "canvas":
        points = map_to_canvas(polygon.vertices, polygon.radius, args.size, args.padding)
        print(svg_points(points, precision=args.precision))

    elif args.command == "render":
        from .render import render_png
        render_png(
            polygon,
            args.output_path,
            canvas_size=args.size,
            padding=args.padding,
            show_circle=args.circle,
        )
        print(f"Saved {args.output_path}")

    elif args.command == "diagnose":
        _cmd_diagnose(args, polygon)


def _solve_from_args(args) -> CyclicPolygon:
    if args.input_path:
        sides = load_sides_json(args.input_path)
    else:
        sides = parse_side_lengths(args.sides)
    config = SolverConfig(
        max_iter=args.max_iter,
        tolerance=args.tolerance,
        strict=args.strict,
        refine=args.refine,
    )
    return solve_polygon(sides, config=config)


def _cmd_solve(args, polygon: CyclicPolygon) -> None:
    print(f"R = {polygon.radius:.9g} ({polygon.iterations} iterations"
          f"{'' if polygon.converged else ', not converged'})")
    for vertex, side in zip(polygon.vertices, polygon.sides):
        print(f"{vertex.id}: ({vertex.x:.6f}, {vertex.y:.6f})  side {side:g}")
    if args.json_path:
        save_polygon_json(polygon, args.json_path)
        print(f"Saved {args.json_path}")


def _cmd_diagnose(args, polygon: CyclicPolygon) -> None:
    from .diagnostics import diagnostics_report

    for line in _diagnostics_lines(polygon):
        print(line)
    if args.diagnose_json:
        report = diagnostics_report(polygon)
        Path(args.diagnose_json).write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"Saved {args.diagnose_json}")


def _diagnostics_lines(polygon: CyclicPolygon) -> List[str]:
    from .diagnostics import polygon_diagnostics, quality_gates

    stats = polygon_diagnostics(polygon)
    quality = quality_gates(stats)
    lines = [f"radius: {polygon.radius:.9g}", f"area: {stats.area:.6f}", "chords:"]
    for i, (side, chord) in enumerate(zip(stats.sides, stats.chord_lengths)):
        lines.append(f"  {i}: target {side:g} got {chord:.6f}")
    lines.append("quality gates:")
    lines.append(f"  chord_ok: {quality['chord_ok']} (max rel {quality['max_chord_rel_error']:.2e})")
    lines.append(f"  closure_ok: {quality['closure_ok']} (residual {quality['closure_residual']:.2e})")
    lines.append(f"  passed: {quality['passed']}")
    return lines


if __name__ == "__main__":
    main()
