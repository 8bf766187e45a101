from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple


Point = Tuple[float, float]


@dataclass(frozen=True)
class Vertex:
    id: str
    x: float
    y: float

    def as_tuple(self) -> Point:
        return (self.x, self.y)

    def distance_to(self, other: "Vertex") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class SolverConfig:
    """Tuning knobs for the circumradius search.

    *epsilon* is relative: the lower bracket is ``max_side / 2 * (1 + epsilon)``.
    It must stay below the gap between ``max_side / 2`` and the root, which
    vanishes when the longest side is a diameter.
    *initial_high* fixes the upper bracket; ``None`` grows it by doubling
    until the angle sum drops below 2π.
    *strict* turns a non-converged bisection into :class:`ConvergenceFailure`
    instead of returning the last midpoint.
    *refine* polishes the final bracket with Brent's method.
    """

    epsilon: float = 1e-15
    max_iter: int = 100
    tolerance: float = 1e-6
    initial_high: Optional[float] = None
    max_doublings: int = 64
    strict: bool = False
    refine: bool = False

    def __post_init__(self) -> None:
        if self.epsilon < 0:
            raise ValueError("epsilon must be >= 0")
        if self.max_iter < 1:
            raise ValueError("max_iter must be >= 1")
        if self.tolerance <= 0:
            raise ValueError("tolerance must be positive")
        if self.initial_high is not None and self.initial_high <= 0:
            raise ValueError("initial_high must be positive")
        if self.max_doublings < 1:
            raise ValueError("max_doublings must be >= 1")


DEFAULT_CONFIG = SolverConfig()


@dataclass(frozen=True)
class CircumradiusResult:
    radius: float
    residual: float
    iterations: int
    converged: bool
    low: float
    high: float
    reflex_index: Optional[int] = None


@dataclass(frozen=True)
class CanvasTransform:
    """Uniform scale followed by a translation: ``p ↦ offset + scale · p``."""

    scale: float
    offset_x: float
    offset_y: float

    def apply(self, x: float, y: float) -> Point:
        return (self.offset_x + self.scale * x, self.offset_y + self.scale * y)

    def apply_all(self, points: Iterable[Point]) -> List[Point]:
        return [self.apply(x, y) for x, y in points]


@dataclass(frozen=True)
class CyclicPolygon:
    """A closed convex polygon inscribed in a circle centred on the origin.

    ``vertices[i]`` and ``vertices[i + 1]`` (cyclically) are joined by the
    chord of length ``sides[i]``.
    """

    sides: Tuple[float, ...]
    vertices: Tuple[Vertex, ...]
    radius: float
    central_angles: Tuple[float, ...]
    residual: float = 0.0
    iterations: int = 0
    converged: bool = True
    metadata: dict = field(default_factory=dict, compare=False)

    def vertex_count(self) -> int:
        return len(self.vertices)

    def points(self) -> List[Point]:
        return [v.as_tuple() for v in self.vertices]

    def area(self) -> float:
        from .geometry import signed_area
        return abs(signed_area(self.points()))

    def to_dict(self) -> dict:
        return {
            "sides": list(self.sides),
            "radius": self.radius,
            "central_angles": list(self.central_angles),
            "residual": self.residual,
            "iterations": self.iterations,
            "converged": self.converged,
            "vertices": [{"id": v.id, "x": v.x, "y": v.y} for v in self.vertices],
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CyclicPolygon":
        vertices = tuple(
            Vertex(str(item["id"]), float(item["x"]), float(item["y"]))
            for item in data.get("vertices", [])
        )
        return cls(
            sides=tuple(float(s) for s in data["sides"]),
            vertices=vertices,
            radius=float(data["radius"]),
            central_angles=tuple(float(a) for a in data.get("central_angles", [])),
            residual=float(data.get("residual", 0.0)),
            iterations=int(data.get("iterations", 0)),
            converged=bool(data.get("converged", True)),
            metadata=dict(data.get("metadata", {})),
        )


def vertices_from_points(points: Sequence[Point], prefix: str = "v") -> Tuple[Vertex, ...]:
    return tuple(Vertex(f"{prefix}{i}", float(x), float(y)) for i, (x, y) in enumerate(points))
