from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Iterator, Sequence, Tuple

import numpy as np

PointName = str
Coord = Tuple[float, float]
SidePair = Tuple[int, int]


@dataclass(frozen=True)
class Point:
    """Named vertex position in the shared 2D plane."""

    x: float
    y: float
    name: PointName

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @property
    def xy(self) -> Coord:
        return self.x, self.y

    def moved_to(self, x: float, y: float) -> "Point":
        return replace(self, x=x, y=y)


@dataclass(frozen=True)
class VertexSet:
    """Immutable ordered triple of named points.

    Geometry functions never mutate a ``VertexSet``; they return a new one.
    Whether the triple forms a valid triangle is checked by
    :func:`trisolve.validate.validate_vertex_set`, not here, so intermediate
    placements can be represented.
    """

    points: Tuple[Point, Point, Point]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if len(points) != 3:
            raise ValueError(f"a vertex set needs exactly 3 points, got {len(points)}")
        if len({p.name for p in points}) != 3:
            raise ValueError(f"vertex names must be distinct: {[p.name for p in points]}")
        object.__setattr__(self, "points", points)

    @classmethod
    def from_coords(cls, names: Sequence[PointName], coords: Iterable[Sequence[float]]) -> "VertexSet":
        pts = [Point(float(xy[0]), float(xy[1]), name) for name, xy in zip(names, coords)]
        return cls(tuple(pts))  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def __len__(self) -> int:
        return 3

    @property
    def names(self) -> Tuple[PointName, PointName, PointName]:
        return tuple(p.name for p in self.points)  # type: ignore[return-value]

    def index_of(self, name: PointName) -> int:
        """Return the position of ``name`` or ``-1`` when it is absent."""

        for idx, point in enumerate(self.points):
            if point.name == name:
                return idx
        return -1

    def coords(self) -> Dict[PointName, Coord]:
        return {p.name: p.xy for p in self.points}

    def as_array(self) -> np.ndarray:
        """Return the coordinates as a ``(3, 2)`` float array."""

        return np.array([[p.x, p.y] for p in self.points], dtype=float)

    def with_array(self, array: np.ndarray) -> "VertexSet":
        arr = np.asarray(array, dtype=float).reshape(3, 2)
        return VertexSet.from_coords(self.names, arr.tolist())

    def with_point(self, index: int, x: float, y: float) -> "VertexSet":
        pts = list(self.points)
        pts[index] = pts[index].moved_to(x, y)
        return VertexSet(tuple(pts))  # type: ignore[arg-type]

    def renamed(self, names: Sequence[PointName]) -> "VertexSet":
        return VertexSet.from_coords(names, [p.xy for p in self.points])


@dataclass(frozen=True)
class Line:
    """Line ``a*x + b*y + c = 0`` used as a reflection axis."""

    a: float
    b: float
    c: float

    @classmethod
    def through(cls, p: Sequence[float], q: Sequence[float]) -> "Line":
        """Return the line through two points."""

        a = q[1] - p[1]
        b = p[0] - q[0]
        return cls(a, b, -(a * p[0] + b * p[1]))


@dataclass(frozen=True)
class SideConstraint:
    """Requested length for one physical edge, keyed by the token that named it first."""

    token: str
    length: float
    pair: SidePair


@dataclass
class TriangleStyle:
    stroke_color: str = "black"
    stroke_width: float = 1
    fill_color: str = "transparent"


__all__ = [
    "PointName",
    "Coord",
    "SidePair",
    "Point",
    "VertexSet",
    "Line",
    "SideConstraint",
    "TriangleStyle",
]
