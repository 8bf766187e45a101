from __future__ import annotations

from pathlib import Path

from .canvas import DEFAULT_PADDING, canvas_transform
from .models import CyclicPolygon

DEFAULT_CANVAS_SIZE = 400.0


def render_png(
    polygon: CyclicPolygon,
    output_path: str | Path,
    canvas_size: float = DEFAULT_CANVAS_SIZE,
    padding: float = DEFAULT_PADDING,
    face_color: str = "#4caf50",
    face_alpha: float = 0.3,
    edge_color: str = "#4caf50",
    edge_width: float = 3.0,
    show_circle: bool = False,
    circle_color: str = "#bbbbbb",
    show_vertices: bool = False,
    vertex_color: str = "#2b2b2b",
    vertex_size: float = 12.0,
    dpi: int = 100,
) -> None:
    """Render *polygon* to PNG in canvas coordinates (y pointing down).

    Requires matplotlib; imported lazily to keep core package lightweight.
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Circle, Polygon
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    transform = canvas_transform(polygon.radius, canvas_size, padding)
    points = transform.apply_all(polygon.points())

    inches = canvas_size / dpi
    fig, ax = plt.subplots(figsize=(inches, inches))

    if show_circle:
        ax.add_patch(Circle(
            (transform.offset_x, transform.offset_y),
            polygon.radius * transform.scale,
            fill=False,
            edgecolor=circle_color,
            linewidth=1.0,
            linestyle=(0, (3, 3)),
        ))

    ax.add_patch(Polygon(points, closed=True, facecolor=face_color, alpha=face_alpha))
    xs, ys = zip(*(points + [points[0]]))
    ax.plot(xs, ys, color=edge_color, linewidth=edge_width)

    if show_vertices:
        ax.scatter(xs[:-1], ys[:-1], s=vertex_size, c=vertex_color, zorder=3)

    ax.set_aspect("equal", "box")
    ax.set_xlim(0, canvas_size)
    ax.set_ylim(canvas_size, 0)
    ax.axis("off")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi)
    plt.close(fig)
