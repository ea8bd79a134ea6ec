import pytest

from glsketches.movement import (
    RED,
    SIDE,
    SLOW_SPEED,
    SPEED,
    YELLOW,
    Direction,
    Movement,
    draw_square,
)
from glsketches.scene import Primitive


def test_idle_step_keeps_position_and_yellow():
    movement = Movement()
    assert movement.step() == (0.1, 0.1)
    assert movement.color == YELLOW


@pytest.mark.parametrize(
    "direction, dx, dy",
    [
        (Direction.RIGHT, 1, 0),
        (Direction.LEFT, -1, 0),
        (Direction.UP, 0, 1),
        (Direction.DOWN, 0, -1),
    ],
)
def test_single_direction_moves_at_normal_speed(direction, dx, dy):
    movement = Movement()
    movement.press(direction, ctrl=False)
    left, bottom = movement.step()
    assert left == pytest.approx(0.1 + dx * SPEED)
    assert bottom == pytest.approx(0.1 + dy * SPEED)


def test_opposite_keys_cancel():
    movement = Movement()
    for direction in Direction:
        movement.press(direction, ctrl=False)
    assert movement.step() == (0.1, 0.1)


def test_ctrl_slows_and_turns_red():
    movement = Movement()
    movement.press(Direction.UP, ctrl=True)
    _, bottom = movement.step()
    assert bottom == pytest.approx(0.1 + SLOW_SPEED)
    assert movement.color == RED


def test_press_without_ctrl_clears_slow_mode():
    movement = Movement()
    movement.press(Direction.UP, ctrl=True)
    movement.press(Direction.RIGHT, ctrl=False)
    movement.step()
    assert movement.ctrl is False
    assert movement.color == YELLOW


def test_release_stops_motion():
    movement = Movement()
    movement.press(Direction.RIGHT, ctrl=False)
    first = movement.step()
    movement.release(Direction.RIGHT)
    assert movement.step() == first


def test_release_of_unpressed_key_is_harmless():
    movement = Movement()
    movement.release(Direction.DOWN)
    assert movement.pressed == set()


def test_non_direction_key_updates_ctrl_only():
    movement = Movement()
    movement.press("f1", ctrl=True)
    assert movement.ctrl is True
    assert movement.pressed == set()


def test_right_edge_wraps_to_left():
    movement = Movement(left=0.99)
    movement.press(Direction.RIGHT, ctrl=False)
    left, _ = movement.step()
    assert left == pytest.approx(-(0.99 + SPEED))


def test_bottom_edge_wraps_to_top():
    movement = Movement(bottom=-0.99)
    movement.press(Direction.DOWN, ctrl=False)
    _, bottom = movement.step()
    assert bottom == pytest.approx(0.99 + SPEED)


def test_position_stays_bounded_over_many_steps():
    movement = Movement()
    movement.press(Direction.UP, ctrl=False)
    movement.press(Direction.LEFT, ctrl=False)
    for _ in range(500):
        left, bottom = movement.step()
        assert abs(left) < 1.0 + SPEED
        assert abs(bottom) < 1.0 + SPEED


def test_draw_square_corners():
    vertices = draw_square(0.2, 0.4, 0.5, RED)
    assert [(v.x, v.y) for v in vertices] == [
        (0.4, 0.2),
        (0.9, 0.2),
        (0.9, 0.7),
        (0.4, 0.7),
    ]
    assert all(v.color == RED for v in vertices)


def test_scene_holds_current_square():
    movement = Movement(left=0.3, bottom=-0.4)
    movement.press(Direction.UP, ctrl=True)
    movement.step()
    scene = movement.scene()
    assert len(scene.shapes) == 1
    shape = scene.shapes[0]
    assert shape.primitive is Primitive.QUADS
    assert shape.vertices == tuple(draw_square(movement.bottom, movement.left, SIDE, RED))