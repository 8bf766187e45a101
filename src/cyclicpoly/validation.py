"""Feasibility checks for side-length sequences."""

from __future__ import annotations

import math
import numbers
import re
from typing import Iterable, Sequence, Tuple, Union

from .errors import DegeneratePolygon, InvalidInput, TooFewSides

MIN_SIDES = 3

_SEPARATORS = re.compile(r"[\s,;]+")


def validate_sides(sides: Sequence[object]) -> Tuple[float, ...]:
    """Return *sides* as floats, or raise the first failure found.

    Checks run in a fixed order: every element must be a finite positive
    real, there must be at least three of them, and the longest must be
    strictly shorter than the sum of the rest.
    """
    values = list(sides)
    out: list[float] = []
    for idx, value in enumerate(values):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidInput(
                f"Side {idx + 1} is not a number: {value!r}", index=idx, value=value
            )
        fvalue = float(value)
        if not math.isfinite(fvalue):
            raise InvalidInput(
                f"Side {idx + 1} is not finite: {value!r}", index=idx, value=value
            )
        if fvalue <= 0:
            raise InvalidInput(
                f"Side {idx + 1} must be positive, got {value!r}", index=idx, value=value
            )
        out.append(fvalue)

    if len(out) < MIN_SIDES:
        raise TooFewSides(len(out))

    max_side = max(out)
    sum_others = math.fsum(out) - max_side
    if max_side >= sum_others:
        raise DegeneratePolygon(max_side, sum_others)
    return tuple(out)


def parse_side_lengths(raw: Union[str, Iterable[object]]) -> Tuple[float, ...]:
    """Parse free-form side lengths and validate them.

    *raw* is either a single string (``"10, 12 15;7"``) or an iterable of
    strings/numbers such as the values of individual text fields.
    """
    if isinstance(raw, str):
        tokens: list[object] = [t for t in _SEPARATORS.split(raw.strip()) if t]
    else:
        tokens = list(raw)

    values: list[object] = []
    for idx, token in enumerate(tokens):
        if isinstance(token, str):
            text = token.strip()
            try:
                values.append(float(text))
            except ValueError:
                raise InvalidInput(
                    f"Side {idx + 1} is not a number: {token!r}", index=idx, value=token
                ) from None
        else:
            values.append(token)
    return validate_sides(values)
