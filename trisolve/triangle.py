"""Owning wrapper around a vertex set plus its style attributes."""

from __future__ import annotations

import copy as _copy
import logging
from typing import Dict, Mapping, Optional, Tuple

from . import constructions, transforms
from .errors import UnknownVertex
from .math_utils import interior_angle
from .names import parse_triangle_name
from .solver.resolver import set_side_lengths, side_length
from .types import Coord, Line, PointName, TriangleStyle, VertexSet
from .validate import validate_vertex_set

logger = logging.getLogger(__name__)


class Triangle:
    """A triangle that always satisfies the strict triangle inequality.

    Every mutator computes a new :class:`VertexSet` first and only then
    replaces the current one, so a failed call leaves the triangle exactly
    as it was.  Instances are not safe for concurrent mutation.
    """

    def __init__(
        self,
        name: str = constructions.DEFAULT_NAME,
        *,
        style: Optional[TriangleStyle] = None,
    ) -> None:
        self._vertices = constructions.default_vertex_set(name)
        self.style = style if style is not None else TriangleStyle()

    @classmethod
    def from_vertex_set(cls, vertices: VertexSet, *, style: Optional[TriangleStyle] = None) -> "Triangle":
        validate_vertex_set(vertices)
        triangle = cls.__new__(cls)
        triangle._vertices = vertices
        triangle.style = style if style is not None else TriangleStyle()
        return triangle

    @classmethod
    def from_sss(cls, a: float, b: float, c: float, name: str = constructions.DEFAULT_NAME) -> "Triangle":
        return cls.from_vertex_set(constructions.from_sss(a, b, c, name))

    @classmethod
    def from_sas(cls, b: float, angle_a: float, c: float, name: str = constructions.DEFAULT_NAME) -> "Triangle":
        return cls.from_vertex_set(constructions.from_sas(b, angle_a, c, name))

    @classmethod
    def from_asa(cls, angle_b: float, a: float, angle_c: float, name: str = constructions.DEFAULT_NAME) -> "Triangle":
        return cls.from_vertex_set(constructions.from_asa(angle_b, a, angle_c, name))

    @classmethod
    def from_aas(cls, angle_a: float, angle_b: float, a: float, name: str = constructions.DEFAULT_NAME) -> "Triangle":
        return cls.from_vertex_set(constructions.from_aas(angle_a, angle_b, a, name))

    @classmethod
    def from_hl(cls, hypotenuse: float, leg: float, name: str = constructions.DEFAULT_NAME) -> "Triangle":
        return cls.from_vertex_set(constructions.from_hl(hypotenuse, leg, name))

    def __repr__(self) -> str:
        pts = ", ".join(f"{p.name}=({p.x:.6g}, {p.y:.6g})" for p in self._vertices)
        return f"Triangle({pts})"

    # -- read accessors --------------------------------------------------

    @property
    def vertices(self) -> VertexSet:
        return self._vertices

    @property
    def names(self) -> Tuple[PointName, PointName, PointName]:
        return self._vertices.names

    @property
    def coords(self) -> Dict[PointName, Coord]:
        return self._vertices.coords()

    @property
    def centroid(self) -> Coord:
        return transforms.centroid(self._vertices)

    def side_length(self, side: str) -> float:
        return side_length(self._vertices, side)

    def angle(self, vertex: PointName) -> float:
        """Interior angle at ``vertex`` in degrees."""

        idx = self._vertices.index_of(vertex)
        if idx < 0:
            raise UnknownVertex(f"Point {vertex} not found in {''.join(self.names)}")
        others = [p.xy for k, p in enumerate(self._vertices) if k != idx]
        return interior_angle(self._vertices[idx].xy, others[0], others[1])

    # -- mutators --------------------------------------------------------

    def _commit(self, vertices: VertexSet) -> "Triangle":
        self._vertices = vertices
        return self

    def set_side_length(self, sides: Mapping[str, float]) -> "Triangle":
        """Set one, two or three sides, e.g. ``set_side_length({"AB": 5, "c": 5})``."""

        return self._commit(set_side_lengths(self._vertices, sides))

    def translate(self, dx: float, dy: float) -> "Triangle":
        return self._commit(transforms.translate(self._vertices, dx, dy))

    def translate_point(self, name: PointName, dx: float, dy: float) -> "Triangle":
        return self._commit(transforms.translate_point(self._vertices, name, dx, dy))

    def rotate(self, angle_degrees: float) -> "Triangle":
        return self._commit(transforms.rotate(self._vertices, angle_degrees))

    def reflect(self, line: Line) -> "Triangle":
        return self._commit(transforms.reflect(self._vertices, line))

    def scale(self, factor: float) -> "Triangle":
        return self._commit(transforms.scale(self._vertices, factor))

    def copy(self, name: Optional[str] = None) -> "Triangle":
        """Return an independent triangle with the same shape and style, shifted by the copy offset.

        Without ``name`` the copy's vertices are the current names with an
        apostrophe appended.
        """

        names = parse_triangle_name(name) if name is not None else None
        vertices = transforms.copy_vertex_set(self._vertices, names)
        logger.info("Copied %s as %s", "".join(self.names), "".join(vertices.names))
        return Triangle.from_vertex_set(vertices, style=_copy.copy(self.style))


__all__ = ["Triangle"]
