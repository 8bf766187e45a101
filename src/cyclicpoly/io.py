from __future__ import annotations

import json
from pathlib import Path
from typing import Tuple, Union

from .errors import InvalidInput
from .models import CyclicPolygon
from .validation import parse_side_lengths


PathLike = Union[str, Path]


def load_sides_json(path: PathLike) -> Tuple[float, ...]:
    """Read side lengths from a JSON list or an object with a ``"sides"`` key."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise InvalidInput(f"{path}: cannot read side lengths ({exc.strerror or exc})") from exc
    except json.JSONDecodeError as exc:
        raise InvalidInput(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    if isinstance(data, dict):
        data = data.get("sides")
    if not isinstance(data, list):
        raise InvalidInput(f"{path}: expected a list of side lengths")
    return parse_side_lengths(data)


def save_polygon_json(polygon: CyclicPolygon, path: PathLike) -> None:
    Path(path).write_text(json.dumps(polygon.to_dict(), indent=2), encoding="utf-8")


def load_polygon_json(path: PathLike) -> CyclicPolygon:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return CyclicPolygon.from_dict(data)
