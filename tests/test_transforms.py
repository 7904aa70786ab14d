import numpy as np
import pytest

from trisolve import Degenerate, DegenerateLine, Line, UnknownVertex, VertexSet
from trisolve.constructions import default_vertex_set
from trisolve.solver.resolver import side_length
from trisolve.transforms import (
    centroid,
    copy_vertex_set,
    normalize_into_margin,
    reflect,
    rotate,
    scale,
    translate,
    translate_point,
)


def _scalene():
    return VertexSet.from_coords("PQR", [(12.5, -3.0), (40.0, 7.25), (21.0, 33.0)])


def test_centroid_is_mean(right_vertices):
    assert centroid(right_vertices) == pytest.approx((1.0, 1.0))


def test_translate_moves_every_vertex(right_vertices):
    moved = translate(right_vertices, 2.0, -1.0)

    assert np.allclose(moved.as_array(), right_vertices.as_array() + [2.0, -1.0])
    assert moved.names == right_vertices.names


def test_translate_point_moves_one_vertex(right_vertices):
    moved = translate_point(right_vertices, "B", 1.0, 4.0)

    assert moved.coords() == {"A": (0.0, 0.0), "B": (4.0, 4.0), "C": (0.0, 3.0)}


def test_translate_point_unknown_vertex(right_vertices):
    with pytest.raises(UnknownVertex):
        translate_point(right_vertices, "D", 1.0, 1.0)


def test_translate_point_into_collinear_is_degenerate(right_vertices):
    with pytest.raises(Degenerate):
        translate_point(right_vertices, "C", 6.0, -3.0)


@pytest.mark.parametrize('vertices', [_scalene(), default_vertex_set("ABC")])
def test_rotate_full_turn_is_identity(vertices):
    assert np.allclose(rotate(vertices, 360).as_array(), vertices.as_array())


def test_rotate_quarter_turn_about_centroid(right_vertices):
    rotated = rotate(right_vertices, 90)

    assert np.allclose(rotated.as_array(), [[2.0, 0.0], [2.0, 3.0], [-1.0, 0.0]])
    assert centroid(rotated) == pytest.approx(centroid(right_vertices))


def test_rotate_opposite_angles_cancel():
    vertices = _scalene()

    assert np.allclose(rotate(rotate(vertices, 37.5), -37.5).as_array(), vertices.as_array())


@pytest.mark.parametrize('line', [Line(0, 1, 0), Line(1, 0, -5), Line(2.0, -3.0, 7.5)])
def test_reflect_twice_is_identity(line):
    vertices = _scalene()

    assert np.allclose(reflect(reflect(vertices, line), line).as_array(), vertices.as_array())


def test_reflect_across_vertical_line(right_vertices):
    mirrored = reflect(right_vertices, Line(1, 0, -5))

    assert np.allclose(mirrored.as_array(), [[10.0, 0.0], [7.0, 0.0], [10.0, 3.0]])


def test_reflect_across_line_through_points(right_vertices):
    mirrored = reflect(right_vertices, Line.through((0.0, 0.0), (1.0, 1.0)))

    assert np.allclose(mirrored.as_array(), [[0.0, 0.0], [0.0, 3.0], [3.0, 0.0]])


def test_reflect_degenerate_line(right_vertices):
    with pytest.raises(DegenerateLine) as exc:
        reflect(right_vertices, Line(0, 0, 3))

    assert exc.value.kind == 'DegenerateLine'


def test_scale_one_is_identity():
    vertices = _scalene()

    assert np.allclose(scale(vertices, 1).as_array(), vertices.as_array())


def test_scale_two_doubles_offsets_and_sides():
    vertices = _scalene()
    scaled = scale(vertices, 2)

    assert centroid(scaled) == pytest.approx(centroid(vertices))
    for token in ("p", "q", "r"):
        assert side_length(scaled, token) == pytest.approx(2 * side_length(vertices, token))


def test_scale_zero_is_degenerate(right_vertices):
    with pytest.raises(Degenerate):
        scale(right_vertices, 0)


def test_copy_vertex_set_renames_and_offsets(right_vertices):
    copied = copy_vertex_set(right_vertices)

    assert copied.names == ("A'", "B'", "C'")
    assert np.allclose(copied.as_array(), right_vertices.as_array() + 10.0)


def test_copy_vertex_set_with_explicit_names(right_vertices):
    copied = copy_vertex_set(right_vertices, ("X", "Y", "Z"), offset=(0.0, 5.0))

    assert copied.coords() == {"X": (0.0, 5.0), "Y": (3.0, 5.0), "Z": (0.0, 8.0)}


def test_normalize_into_margin_shifts_negative_coordinates():
    shifted = normalize_into_margin(_scalene(), 20.0)

    coords = shifted.as_array()
    assert coords[:, 0].min() == pytest.approx(20.0)
    assert coords[:, 1].min() == pytest.approx(20.0)


def test_normalize_into_margin_never_pulls_back():
    far = VertexSet.from_coords("ABC", [(100, 100), (200, 100), (150, 180)])

    assert normalize_into_margin(far, 20.0) is far
