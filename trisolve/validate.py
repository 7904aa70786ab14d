from __future__ import annotations

import math
import numbers
from typing import Optional, Sequence, Tuple

from .errors import Degenerate, InvalidAngle, InvalidLength
from .math_utils import distance
from .names import opposite_side_name
from .types import VertexSet


def _format_lengths(lengths: Sequence[float], labels: Optional[Sequence[str]]) -> str:
    if labels is None:
        return ", ".join(f"{value:g}" for value in lengths)
    return ", ".join(f"{label}={value:g}" for label, value in zip(labels, lengths))


def check_positive_length(length: float, label: str = "length") -> None:
    if not isinstance(length, numbers.Real) or not math.isfinite(length) or length <= 0:
        raise InvalidLength(f"{label}={length!r}, the length must be greater than 0")


def check_angle_range(angle: float, label: str = "angle") -> None:
    if not isinstance(angle, numbers.Real) or not 0 < angle < 180:
        raise InvalidAngle(f"∠{label}={angle!r}, must be between 0 and 180 degrees")


def check_angle_sum(first: float, second: float, labels: Tuple[str, str] = ("1", "2")) -> None:
    total = first + second
    if total >= 180:
        raise InvalidAngle(f"∠{labels[0]}+∠{labels[1]}={total:g}, must be less than 180 degrees")


def check_triangle_inequality(
    lengths: Sequence[float], labels: Optional[Sequence[str]] = None
) -> None:
    """Fail with ``Degenerate`` unless the three lengths satisfy the strict inequality.

    The equality case (collinear points, zero area) is rejected as well.
    """

    if len(lengths) != 3:
        raise ValueError(f"expected 3 side lengths, got {len(lengths)}")
    low, mid, high = sorted(float(v) for v in lengths)
    if not low + mid > high:
        raise Degenerate(f"Invalid triangle: {_format_lengths(lengths, labels)}")


def side_lengths(vertices: VertexSet) -> Tuple[float, float, float]:
    """Lengths of the sides opposite each vertex, in vertex order (a, b, c)."""

    a, b, c = (p.xy for p in vertices)
    return distance(b, c), distance(c, a), distance(a, b)


def validate_vertex_set(vertices: VertexSet) -> None:
    """Check the core invariant: finite coordinates and a non-degenerate triangle."""

    for point in vertices:
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise Degenerate(f"Vertex {point.name} has non-finite coordinates ({point.x}, {point.y})")
    labels = [opposite_side_name(p.name) for p in vertices]
    check_triangle_inequality(side_lengths(vertices), labels)


__all__ = [
    "check_positive_length",
    "check_angle_range",
    "check_angle_sum",
    "check_triangle_inequality",
    "side_lengths",
    "validate_vertex_set",
]
