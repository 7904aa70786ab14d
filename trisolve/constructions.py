"""Congruence-theorem constructors (SSS, SAS, ASA, AAS, HL).

Each constructor validates its measurements before placing anything, places
the vertices in closed form starting from the default placement, validates
the finished triangle and shifts it so all coordinates respect the margin.
Angles are in degrees; side ``a`` is opposite vertex ``A`` and so on.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

from .errors import InvalidLength
from .logging_utils import apply_debug_logging
from .math_utils import unit_vector
from .names import opposite_side_name, parse_triangle_name
from .solver.config import get_solver_config
from .solver.intersect import locate_vertex
from .transforms import normalize_into_margin
from .types import PointName, VertexSet
from .validate import (
    check_angle_range,
    check_angle_sum,
    check_positive_length,
    check_triangle_inequality,
    validate_vertex_set,
)

logger = logging.getLogger(__name__)

DEFAULT_NAME = "ABC"


def _placed(names: Sequence[PointName]) -> VertexSet:
    return VertexSet.from_coords(names, get_solver_config().default_placement)


def _finish(vertices: VertexSet) -> VertexSet:
    validate_vertex_set(vertices)
    return normalize_into_margin(vertices)


def _side_labels(names: Tuple[PointName, PointName, PointName]) -> Tuple[str, str, str]:
    a, b, c = (opposite_side_name(n) for n in names)
    return a, b, c


def default_vertex_set(name: str = DEFAULT_NAME) -> VertexSet:
    """Default, roughly equilateral placement named by a three-vertex name."""

    return _placed(parse_triangle_name(name))


def from_sss(a: float, b: float, c: float, name: str = DEFAULT_NAME) -> VertexSet:
    names = parse_triangle_name(name)
    labels = _side_labels(names)
    for label, length in zip(labels, (a, b, c)):
        check_positive_length(length, label)
    check_triangle_inequality((a, b, c), labels)
    logger.info("Constructing %s from SSS: %s=%g, %s=%g, %s=%g", name, labels[0], a, labels[1], b, labels[2], c)

    vertices = _placed(names)
    pa, pb, pc = (p.xy for p in vertices)
    ux, uy = unit_vector(pa, pb)
    pb = (pa[0] + ux * c, pa[1] + uy * c)
    x, y = locate_vertex(pc, pa, b, pb, a)
    vertices = VertexSet.from_coords(names, (pa, pb, (x, y)))
    return _finish(vertices)


def from_sas(b: float, angle_a: float, c: float, name: str = DEFAULT_NAME) -> VertexSet:
    """Sides ``b`` and ``c`` with the included angle at ``A``."""

    names = parse_triangle_name(name)
    labels = _side_labels(names)
    check_angle_range(angle_a, names[0])
    check_positive_length(b, labels[1])
    check_positive_length(c, labels[2])
    logger.info("Constructing %s from SAS: %s=%g, ∠%s=%g, %s=%g", name, labels[1], b, names[0], angle_a, labels[2], c)

    vertices = _placed(names)
    pa, pb = vertices[0].xy, vertices[1].xy
    dx, dy = unit_vector(pa, pb)
    radian = math.radians(angle_a)
    cos_t = math.cos(radian)
    sin_t = math.sin(radian)
    pb = (pa[0] + dx * c, pa[1] + dy * c)
    pc = (
        pa[0] + b * (dx * cos_t + dy * sin_t),
        pa[1] + b * (-dx * sin_t + dy * cos_t),
    )
    return _finish(VertexSet.from_coords(names, (pa, pb, pc)))


def from_asa(angle_b: float, a: float, angle_c: float, name: str = DEFAULT_NAME) -> VertexSet:
    """Side ``a`` (``BC``) with the angles at both of its ends."""

    names = parse_triangle_name(name)
    labels = _side_labels(names)
    check_angle_range(angle_b, names[1])
    check_angle_range(angle_c, names[2])
    check_angle_sum(angle_b, angle_c, (names[1], names[2]))
    check_positive_length(a, labels[0])
    logger.info("Constructing %s from ASA: ∠%s=%g, %s=%g, ∠%s=%g", name, names[1], angle_b, labels[0], a, names[2], angle_c)

    vertices = _placed(names)
    pb = vertices[1].xy
    pc = (pb[0] + a, pb[1])
    # A is where the ray from B at angle_b meets the ray from C at angle_c
    rad_b = math.radians(angle_b)
    c = a * math.sin(math.radians(angle_c)) / math.sin(math.radians(angle_b + angle_c))
    pa = (pb[0] + c * math.cos(rad_b), pb[1] - c * math.sin(rad_b))
    return _finish(VertexSet.from_coords(names, (pa, pb, pc)))


def from_aas(angle_a: float, angle_b: float, a: float, name: str = DEFAULT_NAME) -> VertexSet:
    """Angles at ``A`` and ``B`` with side ``a``; solved as ASA on ``B`` and ``C``."""

    names = parse_triangle_name(name)
    check_angle_range(angle_a, names[0])
    check_angle_range(angle_b, names[1])
    check_angle_sum(angle_a, angle_b, (names[0], names[1]))
    return from_asa(angle_b, a, 180 - angle_a - angle_b, name)


def from_hl(hypotenuse: float, leg: float, name: str = DEFAULT_NAME) -> VertexSet:
    """Right triangle with the right angle at ``B``.

    ``hypotenuse`` is side ``b`` (``CA``) and ``leg`` is side ``a`` (``BC``).
    """

    names = parse_triangle_name(name)
    labels = _side_labels(names)
    check_positive_length(leg, labels[0])
    check_positive_length(hypotenuse, labels[1])
    if hypotenuse <= leg:
        raise InvalidLength(f"Hypotenuse {labels[1]}={hypotenuse!r} must be greater than leg {labels[0]}={leg!r}")
    logger.info("Constructing %s from HL: hypotenuse=%g, leg=%g", name, hypotenuse, leg)

    vertices = _placed(names)
    pb = vertices[1].xy
    pc = (pb[0] + leg, pb[1])
    pa = (pb[0], pb[1] - math.sqrt(hypotenuse ** 2 - leg ** 2))
    return _finish(VertexSet.from_coords(names, (pa, pb, pc)))


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "DEFAULT_NAME",
    "default_vertex_set",
    "from_sss",
    "from_sas",
    "from_asa",
    "from_aas",
    "from_hl",
]
