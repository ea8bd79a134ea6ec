import math

import pytest

from glsketches.cube import Arrow, CubeView, build_scene, rotation_matrix
from glsketches.scene import Primitive

IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _columns(matrix):
    return [matrix[i * 4:i * 4 + 3] for i in range(3)]


def _dot(u, v):
    return sum(a * b for a, b in zip(u, v))


def test_no_rotation_is_identity():
    assert rotation_matrix(0, 0) == pytest.approx(IDENTITY)


@pytest.mark.parametrize("rx, ry", [(5, 0), (0, 5), (30, -45), (-170, 275)])
def test_rotation_is_orthonormal(rx, ry):
    cols = _columns(rotation_matrix(rx, ry))
    for i, u in enumerate(cols):
        for j, v in enumerate(cols):
            assert _dot(u, v) == pytest.approx(1.0 if i == j else 0.0, abs=1e-12)


def test_full_turn_returns_to_identity():
    assert rotation_matrix(360, -360) == pytest.approx(IDENTITY, abs=1e-12)


def test_rotation_about_y_keeps_y_axis():
    m = rotation_matrix(0, 37)
    assert m[4:8] == pytest.approx((0.0, 1.0, 0.0, 0.0))


def test_rotation_about_x_keeps_x_axis():
    m = rotation_matrix(81, 0)
    assert m[0:4] == pytest.approx((1.0, 0.0, 0.0, 0.0))


@pytest.mark.parametrize(
    "arrow, expected",
    [
        (Arrow.RIGHT, (0.0, 5.0)),
        (Arrow.LEFT, (0.0, -5.0)),
        (Arrow.UP, (5.0, 0.0)),
        (Arrow.DOWN, (-5.0, 0.0)),
    ],
)
def test_press_rotates_five_degrees(arrow, expected):
    view = CubeView()
    view.press(arrow)
    assert (view.rotate_x, view.rotate_y) == expected


def test_opposite_presses_cancel():
    view = CubeView()
    for arrow in (Arrow.RIGHT, Arrow.UP, Arrow.LEFT, Arrow.DOWN):
        view.press(arrow)
    assert (view.rotate_x, view.rotate_y) == (0.0, 0.0)


def test_other_keys_are_ignored():
    view = CubeView(rotate_x=10.0, rotate_y=20.0)
    view.press("space")
    assert (view.rotate_x, view.rotate_y) == (10.0, 20.0)


def test_transform_follows_view():
    view = CubeView()
    view.press(Arrow.UP)
    view.press(Arrow.RIGHT)
    view.press(Arrow.RIGHT)
    assert view.transform() == rotation_matrix(view.rotate_x, view.rotate_y)


def test_scene_has_six_square_faces():
    scene = build_scene()
    assert len(scene.shapes) == 6
    for shape in scene.shapes:
        assert shape.primitive is Primitive.POLYGON
        assert len(shape.vertices) == 4
        for vertex in shape.vertices:
            assert all(abs(c) == 0.5 for c in vertex.position)
        assert len(list(shape.triangles())) == 2


def test_each_face_lies_in_a_plane_of_the_cube():
    for shape in build_scene().shapes:
        fixed = [
            axis for axis in range(3)
            if len({v.position[axis] for v in shape.vertices}) == 1
        ]
        assert len(fixed) == 1


def test_front_face_is_multicoloured():
    front = build_scene().shapes[0]
    assert [v.color for v in front.vertices] == [
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
        (1.0, 0.0, 1.0),
    ]


def test_other_faces_are_flat_coloured():
    for shape in build_scene().shapes[1:]:
        assert len({v.color for v in shape.vertices}) == 1


def test_rotation_preserves_vertex_distance():
    m = rotation_matrix(25, 70)
    for shape in build_scene().shapes:
        for v in shape.vertices:
            x, y, z = v.position
            rotated = [m[r] * x + m[4 + r] * y + m[8 + r] * z for r in range(3)]
            assert math.dist(rotated, (0, 0, 0)) == pytest.approx(math.dist(v.position, (0, 0, 0)))