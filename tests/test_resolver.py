import math

import pytest

from trisolve import ConflictingConstraint, Degenerate, InvalidLength, MalformedSideName, UnknownVertex
from trisolve.constructions import default_vertex_set
from trisolve.math_utils import side_of_line
from trisolve.solver.resolver import merge_side_constraints, set_side_lengths, side_length

SQRT_12500 = math.sqrt(50.0 ** 2 + 100.0 ** 2)


def _sides(vertices):
    return {token: side_length(vertices, token) for token in ("a", "b", "c")}


def test_side_length_on_default_placement():
    vertices = default_vertex_set("ABC")

    assert side_length(vertices, "a") == pytest.approx(100.0)
    assert side_length(vertices, "BC") == pytest.approx(100.0)
    assert side_length(vertices, "b") == pytest.approx(SQRT_12500)
    assert side_length(vertices, "AB") == pytest.approx(SQRT_12500)


def test_merge_combines_tokens_for_the_same_edge():
    vertices = default_vertex_set("ABC")

    constraints = merge_side_constraints(vertices, {"AB": 5, "BA": 5, "c": 5})

    assert len(constraints) == 1
    assert constraints[0].token == "AB"
    assert constraints[0].pair == (0, 1)


def test_merge_rejects_conflicting_lengths():
    vertices = default_vertex_set("ABC")

    with pytest.raises(ConflictingConstraint) as exc:
        merge_side_constraints(vertices, {"AB": 5, "c": 6})

    assert "AB=5" in str(exc.value) and "c=6" in str(exc.value)


@pytest.mark.parametrize('length', [0, -3])
def test_non_positive_length_is_rejected(length):
    with pytest.raises(InvalidLength):
        set_side_lengths(default_vertex_set("ABC"), {"a": length})


def test_one_side_round_trip_keeps_other_sides():
    vertices = default_vertex_set("ABC")
    before = _sides(vertices)

    result = set_side_lengths(vertices, {"c": 80.0})
    after = _sides(result)

    assert after["c"] == pytest.approx(80.0)
    assert after["a"] == pytest.approx(before["a"])
    assert after["b"] == pytest.approx(before["b"])


def test_one_side_keeps_leftmost_endpoint_fixed():
    vertices = default_vertex_set("ABC")

    result = set_side_lengths(vertices, {"AB": 80.0})

    # B (20, 120) is left of A (70, 20), so B stays and A slides toward it
    assert result.coords()["B"] == pytest.approx((20.0, 120.0))
    ax, ay = result.coords()["A"]
    assert ax == pytest.approx(20.0 + 50.0 * 80.0 / SQRT_12500)
    assert ay == pytest.approx(120.0 - 100.0 * 80.0 / SQRT_12500)


def test_one_side_tie_break_prefers_bottommost():
    vertices = default_vertex_set("ABC").with_point(0, 20.0, 20.0)

    result = set_side_lengths(vertices, {"AB": 50.0})

    # same x: B has the larger y so it is the fixed end
    assert result.coords()["B"] == pytest.approx((20.0, 120.0))
    assert result.coords()["A"] == pytest.approx((20.0, 70.0))


@pytest.mark.parametrize('token', ['a', 'b', 'c', 'AB', 'BC', 'CA'])
@pytest.mark.parametrize('length', [60.0, 100.0, 150.0])
def test_one_side_preserves_orientation(token, length):
    vertices = default_vertex_set("ABC")
    i, j = merge_side_constraints(vertices, {token: length})[0].pair
    k = 3 - i - j
    before = side_of_line(vertices[i].xy, vertices[j].xy, vertices[k].xy)

    result = set_side_lengths(vertices, {token: length})
    after = side_of_line(result[i].xy, result[j].xy, result[k].xy)

    assert side_length(result, token) == pytest.approx(length)
    assert math.copysign(1.0, before) == math.copysign(1.0, after)


def test_one_side_violating_inequality_fails():
    vertices = default_vertex_set("ABC")

    with pytest.raises(Degenerate):
        set_side_lengths(vertices, {"c": 1000.0})


def test_two_sides_move_only_the_shared_vertex():
    vertices = default_vertex_set("ABC")

    result = set_side_lengths(vertices, {"b": 100.0, "a": 100.0})

    assert result.coords()["A"] == pytest.approx((70.0, 20.0))
    assert result.coords()["B"] == pytest.approx((20.0, 120.0))
    assert side_length(result, "CA") == pytest.approx(100.0)
    assert side_length(result, "CB") == pytest.approx(100.0)
    assert side_length(result, "c") == pytest.approx(SQRT_12500)


def test_two_sides_keep_shared_vertex_on_its_side():
    vertices = default_vertex_set("ABC")
    before = side_of_line(vertices[0].xy, vertices[1].xy, vertices[2].xy)

    result = set_side_lengths(vertices, {"AC": 90.0, "BC": 70.0})
    after = side_of_line(result[0].xy, result[1].xy, result[2].xy)

    assert before * after > 0


def test_two_sides_violating_inequality_fails():
    vertices = default_vertex_set("ABC")

    with pytest.raises(Degenerate):
        set_side_lengths(vertices, {"a": 10.0, "b": 10.0})


def test_three_sides_make_equilateral():
    vertices = default_vertex_set("ABC")

    result = set_side_lengths(vertices, {"AB": 5, "BC": 5, "CA": 5})

    for token in ("AB", "BC", "CA"):
        assert side_length(result, token) == pytest.approx(5.0)
    # B is leftmost and stays; C is the bottommost of the rest and slides toward it
    assert result.coords()["B"] == pytest.approx((20.0, 120.0))
    assert result.coords()["C"] == pytest.approx((25.0, 120.0))
    assert side_of_line(result[1].xy, result[2].xy, result[0].xy) < 0


@pytest.mark.parametrize('lengths', [(3, 4, 5), (7, 10, 5), (2, 2, 3.9)])
def test_three_sides_round_trip(lengths):
    vertices = default_vertex_set("ABC")

    result = set_side_lengths(vertices, dict(zip(("a", "b", "c"), lengths)))

    assert [side_length(result, t) for t in ("a", "b", "c")] == pytest.approx(list(lengths))


@pytest.mark.parametrize('lengths', [(1, 1, 3), (2, 2, 4)])
def test_three_sides_degenerate(lengths):
    with pytest.raises(Degenerate):
        set_side_lengths(default_vertex_set("ABC"), dict(zip(("a", "b", "c"), lengths)))


def test_errors_leave_input_untouched():
    vertices = default_vertex_set("ABC")
    snapshot = vertices.coords()

    for sides, error in [
        ({"AB": 1000}, Degenerate),
        ({"AD": 3}, UnknownVertex),
        ({"ABC": 3}, MalformedSideName),
        ({"a": 3, "BC": 4}, ConflictingConstraint),
    ]:
        with pytest.raises(error):
            set_side_lengths(vertices, sides)

    assert vertices.coords() == snapshot


def test_empty_request_is_a_no_op():
    vertices = default_vertex_set("ABC")

    assert set_side_lengths(vertices, {}) is vertices


def test_set_side_lengths_logs_request(caplog):
    caplog.set_level("INFO", logger="trisolve.solver.resolver")

    set_side_lengths(default_vertex_set("ABC"), {"a": 90})

    assert "Setting side lengths on ABC: a=90" in caplog.text
