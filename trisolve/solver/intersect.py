"""Two-circle intersection with orientation-preserving candidate selection."""

from __future__ import annotations

import logging
import math
from typing import Tuple

from ..errors import Degenerate
from ..math_utils import _DENOM_EPS, Vec, distance, side_of_line

logger = logging.getLogger(__name__)


def circle_intersections(p1: Vec, d1: float, p2: Vec, d2: float) -> Tuple[Vec, Vec]:
    """Return both points at distance ``d1`` from ``p1`` and ``d2`` from ``p2``.

    The first candidate lies on the negative side of line ``p1 -> p2`` in the
    sense of :func:`~trisolve.math_utils.side_of_line`, the second on the
    positive side.  Tangent circles yield the same point twice.
    """

    dist = distance(p1, p2)
    if dist <= _DENOM_EPS:
        raise Degenerate(f"Anchor points {p1} and {p2} coincide")

    a = (d1 ** 2 - d2 ** 2 + dist ** 2) / (2 * dist)
    radicand = d1 ** 2 - a ** 2
    if radicand < 0:
        raise Degenerate(
            f"No point lies at distance {d1:g} and {d2:g} from anchors {dist:g} apart"
        )
    h = math.sqrt(radicand)

    dx = (p2[0] - p1[0]) / dist
    dy = (p2[1] - p1[1]) / dist
    ix = p1[0] + a * dx
    iy = p1[1] + a * dy

    first = (ix + h * dy, iy - h * dx)
    second = (ix - h * dy, iy + h * dx)
    return first, second


def locate_vertex(reference: Vec, p1: Vec, d1: float, p2: Vec, d2: float) -> Vec:
    """Place a vertex ``d1`` from ``p1`` and ``d2`` from ``p2`` on ``reference``'s side.

    ``reference`` is the vertex position before the update; the candidate on
    the same side of line ``p1 -> p2`` wins.  A reference lying on the line
    selects the positive-side candidate.
    """

    first, second = circle_intersections(p1, d1, p2, d2)
    ref_side = side_of_line(p1, p2, reference)
    chosen = first if side_of_line(p1, p2, first) * ref_side > 0 else second
    logger.debug(
        "Located vertex at (%.6g, %.6g) from anchors %s/%s (ref side %.3g)",
        chosen[0],
        chosen[1],
        p1,
        p2,
        ref_side,
    )
    return chosen


__all__ = ["circle_intersections", "locate_vertex"]
