"""Vertex-name grammar and side-token resolution.

A vertex name is one uppercase letter followed by zero or more digits or
apostrophes (``A``, ``B1``, ``C''``).  A triangle name is exactly three vertex
names written back to back (``ABC``, ``A'B'C'``, ``P1P2P3``).

A side is addressed either by its two endpoints (``AB``, ``BA``, ``A'B'``) or
by the lowercase letter of the opposite vertex plus the same suffix
(``c`` for the side opposite ``C``, ``a'`` for the side opposite ``A'``).
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .errors import MalformedSideName, MalformedTriangleName, UnknownVertex
from .types import PointName, SidePair, VertexSet

_VERTEX_RE = re.compile(r"[A-Z][0-9']*")
_VERTEX_RUN_RE = re.compile(r"(?:[A-Z][0-9']*)+")
_OPPOSITE_RE = re.compile(r"[a-z][0-9']*")


def is_vertex_name(value: object) -> bool:
    """Return ``True`` when *value* is a single well-formed vertex name."""

    return isinstance(value, str) and _VERTEX_RE.fullmatch(value) is not None


def split_vertex_names(text: str) -> Optional[List[PointName]]:
    """Split concatenated vertex names, or return ``None`` if *text* is not one."""

    if not isinstance(text, str) or _VERTEX_RUN_RE.fullmatch(text) is None:
        return None
    return _VERTEX_RE.findall(text)


def parse_triangle_name(name: str) -> Tuple[PointName, PointName, PointName]:
    names = split_vertex_names(name)
    if names is None:
        raise MalformedTriangleName(f"Invalid triangle name: {name!r}")
    if len(names) != 3:
        raise MalformedTriangleName(
            f"Invalid triangle name: {name!r}, expected 3 vertices but found {len(names)}"
        )
    if len(set(names)) != 3:
        raise MalformedTriangleName(f"Invalid triangle name: {name!r}, vertices must be distinct")
    return names[0], names[1], names[2]


def primed_names(names: Tuple[PointName, ...]) -> Tuple[PointName, ...]:
    return tuple(name + "'" for name in names)


def resolve_side(vertices: VertexSet, token: str) -> SidePair:
    """Resolve a side token to the ordered index pair ``(i, j)`` with ``i < j``."""

    if not isinstance(token, str):
        raise MalformedSideName(f"Invalid side name: {token!r}")

    if _OPPOSITE_RE.fullmatch(token):
        vertex = token[0].upper() + token[1:]
        idx = vertices.index_of(vertex)
        if idx < 0:
            raise UnknownVertex(f'Invalid side name: "{token}", vertex "{vertex}" does not exist')
        i, j = (k for k in range(3) if k != idx)
        return i, j

    endpoints = split_vertex_names(token)
    if endpoints is None:
        raise MalformedSideName(f'Invalid side name: "{token}"')
    if len(endpoints) != 2:
        raise MalformedSideName(
            f'Invalid side name: "{token}", expected exactly 2 vertices but found {len(endpoints)}'
        )
    if endpoints[0] == endpoints[1]:
        raise MalformedSideName(f'Invalid side name: "{token}", endpoints must differ')
    indices = [vertices.index_of(name) for name in endpoints]
    missing = [name for name, idx in zip(endpoints, indices) if idx < 0]
    if missing:
        raise UnknownVertex(
            f'Invalid side name: "{token}", vertices {missing} do not exist in {"".join(vertices.names)}'
        )
    i, j = sorted(indices)
    return i, j


def side_name(vertices: VertexSet, pair: SidePair) -> str:
    """Endpoint-form name of the side ``pair`` (``AB``)."""

    return vertices[pair[0]].name + vertices[pair[1]].name


def opposite_side_name(name: PointName) -> str:
    """Opposite-vertex token for the side facing vertex ``name`` (``C`` -> ``c``)."""

    return name[0].lower() + name[1:]


__all__ = [
    "is_vertex_name",
    "split_vertex_names",
    "parse_triangle_name",
    "primed_names",
    "resolve_side",
    "side_name",
    "opposite_side_name",
]
