"""Rigid transforms over a vertex set.

Every function returns a new :class:`~trisolve.types.VertexSet`; the
coordinate maps are applied to the ``(3, 2)`` coordinate array at once.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import Degenerate, DegenerateLine, UnknownVertex
from .names import primed_names
from .solver.config import get_solver_config
from .types import Line, PointName, VertexSet
from .validate import validate_vertex_set

logger = logging.getLogger(__name__)


def centroid(vertices: VertexSet) -> Tuple[float, float]:
    cx, cy = vertices.as_array().mean(axis=0)
    return float(cx), float(cy)


def translate(vertices: VertexSet, dx: float, dy: float) -> VertexSet:
    return vertices.with_array(vertices.as_array() + np.array([dx, dy], dtype=float))


def translate_point(vertices: VertexSet, name: PointName, dx: float, dy: float) -> VertexSet:
    """Move one named vertex; the result must still be a valid triangle."""

    idx = vertices.index_of(name)
    if idx < 0:
        raise UnknownVertex(f"Point {name} not found in {''.join(vertices.names)}")
    point = vertices[idx]
    moved = vertices.with_point(idx, point.x + dx, point.y + dy)
    validate_vertex_set(moved)
    return moved


def scale(vertices: VertexSet, factor: float) -> VertexSet:
    """Scale each vertex's offset from the centroid by ``factor``."""

    if abs(factor) <= get_solver_config().tolerance:
        raise Degenerate(f"Scale factor {factor!r} collapses the triangle to its centroid")
    coords = vertices.as_array()
    center = coords.mean(axis=0)
    return vertices.with_array(center + (coords - center) * factor)


def rotation_matrix(angle_degrees: float) -> np.ndarray:
    radian = math.radians(angle_degrees)
    cos_t = math.cos(radian)
    sin_t = math.sin(radian)
    return np.array([[cos_t, -sin_t], [sin_t, cos_t]], dtype=float)


def rotate(vertices: VertexSet, angle_degrees: float) -> VertexSet:
    """Rotate about the centroid.

    With y growing downward a positive angle turns the triangle clockwise
    on screen.
    """

    coords = vertices.as_array()
    center = coords.mean(axis=0)
    rotated = (coords - center) @ rotation_matrix(angle_degrees).T + center
    return vertices.with_array(rotated)


def reflect(vertices: VertexSet, line: Line) -> VertexSet:
    """Mirror every vertex across ``a*x + b*y + c = 0``."""

    a, b, c = float(line.a), float(line.b), float(line.c)
    denominator = a * a + b * b
    if denominator == 0:
        raise DegenerateLine(f"Line {a:g}x + {b:g}y + {c:g} = 0 has no direction (a = b = 0)")
    coords = vertices.as_array()
    normal = np.array([a, b], dtype=float)
    signed = (coords @ normal + c) / denominator
    return vertices.with_array(coords - 2.0 * signed[:, None] * normal)


def copy_vertex_set(
    vertices: VertexSet,
    names: Optional[Sequence[PointName]] = None,
    offset: Optional[Tuple[float, float]] = None,
) -> VertexSet:
    """Return the same shape under new names, shifted so it does not overlap."""

    if offset is None:
        offset = get_solver_config().copy_offset
    renamed = vertices.renamed(names if names is not None else primed_names(vertices.names))
    return translate(renamed, *offset)


def normalize_into_margin(vertices: VertexSet, margin: Optional[float] = None) -> VertexSet:
    """Translate so every coordinate is at least ``margin``; never moves toward the origin."""

    if margin is None:
        margin = get_solver_config().margin
    coords = vertices.as_array()
    shift = np.maximum(margin - coords.min(axis=0), 0.0)
    if not shift.any():
        return vertices
    logger.debug("Shifting %s by (%g, %g) into margin %g", "".join(vertices.names), shift[0], shift[1], margin)
    return vertices.with_array(coords + shift)


__all__ = [
    "centroid",
    "translate",
    "translate_point",
    "scale",
    "rotation_matrix",
    "rotate",
    "reflect",
    "copy_vertex_set",
    "normalize_into_margin",
]
