"""Tests for the solve_polygon façade."""

import math
import random

import pytest

from cyclicpoly.errors import DegeneratePolygon, InvalidInput, TooFewSides
from cyclicpoly.geometry import chord_lengths
from cyclicpoly.models import CyclicPolygon, SolverConfig
from cyclicpoly.polygon import solve_polygon


def _cross_signs(points):
    n = len(points)
    signs = []
    for i in range(n):
        ax, ay = points[i]
        bx, by = points[(i + 1) % n]
        cx, cy = points[(i + 2) % n]
        cross = (bx - ax) * (cy - by) - (by - ay) * (cx - bx)
        signs.append(cross > 0)
    return signs


ACCEPTED = [
    [10, 12, 15, 7, 9],
    [10, 6, 6],
    [3, 3, 8, 3],
    [1, 2, 2.5],
    [5, 5, 5, 5, 5, 5, 5, 5],
    [0.001, 0.002, 0.0025, 0.002],
    [1000, 1, 999.5],
    [3, 4, 5],
    [3, 4, 4.99999],
    [3, 4, 5.00001],
    [0.001, 6, 8, 10],
    [8.405, 7.038, 4.597],
    [3.68, 8.02, 2.17, 0.48, 2.60, 3.34],
]


def _random_sides(rng, count):
    cases = []
    while len(cases) < count:
        sides = [rng.uniform(0.05, 10.0) for _ in range(rng.randint(3, 8))]
        longest = max(sides)
        # R grows without bound near the degenerate limit; keep a margin.
        if longest < 0.9 * (math.fsum(sides) - longest):
            cases.append(sides)
    return cases


def _near_right_triangles(rng, count):
    cases = []
    for _ in range(count):
        a = rng.uniform(0.05, 10.0)
        b = rng.uniform(0.05, 10.0)
        c = math.hypot(a, b) * (1.0 + rng.uniform(-1e-7, 1e-7))
        sides = [a, b, c]
        rng.shuffle(sides)
        cases.append(sides)
    return cases


def _near_diameter_polygons(rng, count):
    """Cyclic polygons of known radius whose longest side is almost a diameter."""
    cases = []
    for _ in range(count):
        radius = rng.uniform(1.0, 10.0)
        weights = [rng.uniform(0.2, 1.0) for _ in range(rng.randint(2, 6))]
        spread = math.pi * (1.0 + rng.uniform(-1e-6, 1e-6))
        arcs = [spread * w / sum(weights) for w in weights]
        arcs.append(2 * math.pi - spread)
        sides = [2 * radius * math.sin(arc / 2) for arc in arcs]
        rng.shuffle(sides)
        cases.append((sides, radius))
    return cases


_RNG = random.Random(20261019)
RANDOM_SIDES = _random_sides(_RNG, 300) + _near_right_triangles(_RNG, 60)
NEAR_DIAMETER = _near_diameter_polygons(_RNG, 60)


class TestRegularPentagon:
    def test_radius(self):
        poly = solve_polygon([10, 10, 10, 10, 10])
        assert poly.radius == pytest.approx(10 / (2 * math.sin(math.pi / 5)), abs=1e-5)
        assert poly.radius == pytest.approx(8.5065, abs=1e-4)

    def test_equidistant_and_equally_spaced(self):
        poly = solve_polygon([10, 10, 10, 10, 10])
        for v in poly.vertices:
            assert math.hypot(v.x, v.y) == pytest.approx(poly.radius)
        for a in poly.central_angles:
            assert a == pytest.approx(2 * math.pi / 5, abs=1e-6)

    def test_first_vertex_at_top(self):
        poly = solve_polygon([10, 10, 10, 10, 10])
        first = poly.vertices[0]
        assert first.x == pytest.approx(0.0, abs=1e-9)
        assert first.y == pytest.approx(-poly.radius)


class TestProperties:
    @pytest.mark.parametrize("sides", ACCEPTED)
    def test_angles_sum_to_full_turn(self, sides):
        poly = solve_polygon(sides)
        assert math.fsum(poly.central_angles) == pytest.approx(2 * math.pi, abs=1e-6)

    @pytest.mark.parametrize("sides", ACCEPTED)
    def test_chords_match_sides(self, sides):
        poly = solve_polygon(sides)
        for chord, side in zip(chord_lengths(poly.points()), sides):
            assert chord == pytest.approx(side, rel=1e-3)

    @pytest.mark.parametrize("sides", ACCEPTED)
    def test_convex(self, sides):
        poly = solve_polygon(sides)
        signs = _cross_signs(poly.points())
        assert all(signs) or not any(signs)

    @pytest.mark.parametrize("sides", ACCEPTED)
    def test_all_vertices_on_circle(self, sides):
        poly = solve_polygon(sides)
        for v in poly.vertices:
            assert math.hypot(v.x, v.y) == pytest.approx(poly.radius)

    def test_order_matters(self):
        a = solve_polygon([4, 5, 6, 7])
        b = solve_polygon([4, 6, 5, 7])
        assert a.radius == pytest.approx(b.radius, abs=1e-5)
        assert a.points() != b.points()

    def test_obtuse_triangle_marks_reflex_side(self):
        poly = solve_polygon([6, 10, 6])
        assert poly.metadata["reflex_side"] == 1
        assert poly.central_angles[1] > math.pi


class TestOptions:
    def test_start_angle(self):
        poly = solve_polygon([2, 2, 2, 2], start_angle=0.0)
        assert poly.vertices[0].x == pytest.approx(poly.radius)
        assert poly.vertices[0].y == pytest.approx(0.0, abs=1e-12)

    def test_config_passed_through(self):
        poly = solve_polygon([10, 12, 15, 7, 9], config=SolverConfig(max_iter=2))
        assert poly.iterations == 2
        assert not poly.converged

    def test_vertex_ids(self):
        poly = solve_polygon([3, 4, 4])
        assert [v.id for v in poly.vertices] == ["v0", "v1", "v2"]


class TestRejection:
    def test_degenerate(self):
        with pytest.raises(DegeneratePolygon):
            solve_polygon([50, 1, 1, 1])

    def test_too_few(self):
        with pytest.raises(TooFewSides):
            solve_polygon([5, 5])

    def test_invalid(self):
        with pytest.raises(InvalidInput):
            solve_polygon([5, float("inf"), 5])


class TestCyclicPolygonModel:
    def test_area_of_unit_square(self):
        poly = solve_polygon([1, 1, 1, 1])
        assert poly.area() == pytest.approx(1.0, abs=1e-6)

    def test_dict_round_trip(self):
        poly = solve_polygon([10, 6, 6])
        loaded = CyclicPolygon.from_dict(poly.to_dict())
        assert loaded == poly
        assert loaded.metadata["reflex_side"] == 0


class TestRandomisedProperties:
    @pytest.mark.parametrize("sides", RANDOM_SIDES)
    def test_closes_and_honours_sides(self, sides):
        poly = solve_polygon(sides)
        assert poly.converged
        assert math.fsum(poly.central_angles) == pytest.approx(2 * math.pi, abs=1e-6)
        for chord, side in zip(chord_lengths(poly.points()), sides):
            assert chord == pytest.approx(side, rel=1e-3)

    @pytest.mark.parametrize("sides,radius", NEAR_DIAMETER)
    def test_near_diameter_recovers_radius(self, sides, radius):
        poly = solve_polygon(sides)
        assert poly.converged
        assert poly.radius == pytest.approx(radius, rel=1e-6)
        assert math.fsum(poly.central_angles) == pytest.approx(2 * math.pi, abs=1e-6)
        for chord, side in zip(chord_lengths(poly.points()), sides):
            assert chord == pytest.approx(side, rel=1e-3)
