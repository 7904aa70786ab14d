"""Side-length resolver: recompute vertex positions for 1, 2 or 3 requested sides."""

from __future__ import annotations

import logging
from typing import List, Mapping, Sequence, Tuple

from ..errors import ConflictingConstraint
from ..logging_utils import apply_debug_logging
from ..math_utils import distance, unit_vector
from ..names import opposite_side_name, resolve_side, side_name
from ..types import Point, SideConstraint, VertexSet
from ..validate import check_positive_length, check_triangle_inequality, validate_vertex_set
from .intersect import locate_vertex

logger = logging.getLogger(__name__)


def side_length(vertices: VertexSet, token: str) -> float:
    """Length of the side named by ``token`` (``"AB"`` or ``"c"``)."""

    i, j = resolve_side(vertices, token)
    return distance(vertices[i].xy, vertices[j].xy)


def merge_side_constraints(vertices: VertexSet, sides: Mapping[str, float]) -> List[SideConstraint]:
    """Resolve side tokens and merge the ones naming the same physical edge.

    Two tokens for one edge must request exactly the same length.
    """

    constraints: List[SideConstraint] = []
    for token, length in sides.items():
        pair = resolve_side(vertices, token)
        existing = next((c for c in constraints if c.pair == pair), None)
        if existing is None:
            constraints.append(SideConstraint(token, length, pair))
        elif existing.length != length:
            raise ConflictingConstraint(
                "Different lengths have been set for the same edge: "
                f"{existing.token}={existing.length!r} and {token}={length!r}"
            )
    for constraint in constraints:
        check_positive_length(constraint.length, constraint.token)
    return constraints


def _anchor_key(point: Point) -> Tuple[float, float]:
    # leftmost, then bottommost (y grows downward)
    return point.x, -point.y


def _second_key(point: Point) -> Tuple[float, float]:
    # bottommost, then rightmost
    return -point.y, -point.x


def _slide(vertices: VertexSet, fixed: int, slid: int, length: float) -> VertexSet:
    """Move vertex ``slid`` along ``fixed -> slid`` so the two are ``length`` apart."""

    origin = vertices[fixed].xy
    ux, uy = unit_vector(origin, vertices[slid].xy)
    return vertices.with_point(slid, origin[0] + ux * length, origin[1] + uy * length)


def _other_end(constraint: SideConstraint, index: int) -> int:
    i, j = constraint.pair
    return j if i == index else i


def _set_one_side(vertices: VertexSet, constraint: SideConstraint) -> VertexSet:
    i, j = constraint.pair
    k = 3 - i - j
    p1, p2, left = vertices[i], vertices[j], vertices[k]
    to_p2 = distance(left.xy, p2.xy)
    to_p1 = distance(left.xy, p1.xy)
    check_triangle_inequality(
        [constraint.length, to_p2, to_p1],
        [side_name(vertices, constraint.pair), opposite_side_name(p1.name), opposite_side_name(p2.name)],
    )

    fixed, slid = sorted((i, j), key=lambda idx: _anchor_key(vertices[idx]))
    logger.debug("Fixing %s, sliding %s", vertices[fixed].name, vertices[slid].name)
    moved = _slide(vertices, fixed, slid, constraint.length)
    x, y = locate_vertex(left.xy, moved[j].xy, to_p2, moved[i].xy, to_p1)
    return moved.with_point(k, x, y)


def _set_two_sides(vertices: VertexSet, constraints: Sequence[SideConstraint]) -> VertexSet:
    first, second = constraints
    shared = set(first.pair) & set(second.pair)
    if len(shared) != 1:
        raise ConflictingConstraint(
            f"Sides {first.token} and {second.token} do not share exactly one vertex"
        )
    public = shared.pop()
    end1 = _other_end(first, public)
    end2 = _other_end(second, public)
    third = distance(vertices[end1].xy, vertices[end2].xy)
    check_triangle_inequality(
        [third, first.length, second.length],
        [opposite_side_name(vertices[public].name), first.token, second.token],
    )
    x, y = locate_vertex(
        vertices[public].xy,
        vertices[end1].xy,
        first.length,
        vertices[end2].xy,
        second.length,
    )
    return vertices.with_point(public, x, y)


def _set_all_sides(vertices: VertexSet, constraints: Sequence[SideConstraint]) -> VertexSet:
    check_triangle_inequality([c.length for c in constraints], [c.token for c in constraints])

    fixed = min(range(3), key=lambda idx: _anchor_key(vertices[idx]))
    slid = min((idx for idx in range(3) if idx != fixed), key=lambda idx: _second_key(vertices[idx]))
    target = 3 - fixed - slid
    base_pair = (min(fixed, slid), max(fixed, slid))
    base = next(c for c in constraints if c.pair == base_pair)
    rest = [c for c in constraints if c is not base]
    logger.debug(
        "Fixing %s, sliding %s to %s=%g, locating %s",
        vertices[fixed].name,
        vertices[slid].name,
        base.token,
        base.length,
        vertices[target].name,
    )

    moved = _slide(vertices, fixed, slid, base.length)
    end1 = _other_end(rest[0], target)
    end2 = _other_end(rest[1], target)
    x, y = locate_vertex(
        vertices[target].xy,
        moved[end1].xy,
        rest[0].length,
        moved[end2].xy,
        rest[1].length,
    )
    return moved.with_point(target, x, y)


def set_side_lengths(vertices: VertexSet, sides: Mapping[str, float]) -> VertexSet:
    """Return a new vertex set whose requested sides have the requested lengths.

    ``sides`` maps side tokens to lengths and may name 1, 2 or 3 distinct
    edges.  The input is never modified; any failure raises a
    :class:`~trisolve.errors.GeometryError` subclass.
    """

    constraints = merge_side_constraints(vertices, sides)
    logger.info(
        "Setting side lengths on %s: %s",
        "".join(vertices.names),
        ", ".join(f"{c.token}={c.length:g}" for c in constraints) or "(none)",
    )
    if not constraints:
        return vertices
    if len(constraints) == 1:
        result = _set_one_side(vertices, constraints[0])
    elif len(constraints) == 2:
        result = _set_two_sides(vertices, constraints)
    else:
        result = _set_all_sides(vertices, constraints)
    validate_vertex_set(result)
    return result


apply_debug_logging(globals(), logger=logger)


__all__ = ["side_length", "merge_side_constraints", "set_side_lengths"]
