from __future__ import annotations

import math
from typing import Tuple

Vec = Tuple[float, float]

_DENOM_EPS = 1e-12


def _vec2(a: Vec, b: Vec) -> Vec:
    return b[0] - a[0], b[1] - a[1]


def _dot2(a: Vec, b: Vec) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _cross2(a: Vec, b: Vec) -> float:
    return a[0] * b[1] - a[1] * b[0]


def distance(a: Vec, b: Vec) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def side_of_line(p1: Vec, p2: Vec, v: Vec) -> float:
    """Signed cross product telling which side of line ``p1 -> p2`` point ``v`` is on."""

    return _cross2(_vec2(p1, p2), _vec2(p1, v))


def unit_vector(a: Vec, b: Vec) -> Vec:
    """Return the unit vector pointing from ``a`` to ``b``.

    Raises ``ZeroDivisionError`` when the two points coincide.
    """

    d = distance(a, b)
    if d <= _DENOM_EPS:
        raise ZeroDivisionError("cannot take a direction between coincident points")
    return (b[0] - a[0]) / d, (b[1] - a[1]) / d


def interior_angle(vertex: Vec, a: Vec, b: Vec) -> float:
    """Angle ``a-vertex-b`` in degrees."""

    v1 = _vec2(vertex, a)
    v2 = _vec2(vertex, b)
    return math.degrees(math.atan2(abs(_cross2(v1, v2)), _dot2(v1, v2)))


__all__ = [
    "Vec",
    "_DENOM_EPS",
    "_cross2",
    "_dot2",
    "_vec2",
    "distance",
    "interior_angle",
    "side_of_line",
    "unit_vector",
]
