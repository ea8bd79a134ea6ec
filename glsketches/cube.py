"""A multi-coloured cube that the arrow keys rotate about the x and y axes."""

from __future__ import annotations

import argparse
import enum
import math
from dataclasses import dataclass
from typing import Tuple

from glsketches.render import SceneWindow
from glsketches.scene import Primitive, Scene, Vertex

Matrix = Tuple[float, ...]

ROTATION_STEP = 5.0

_RED = (1.0, 0.0, 0.0)
_GREEN = (0.0, 1.0, 0.0)
_BLUE = (0.0, 0.0, 1.0)
_PURPLE = (1.0, 0.0, 1.0)
_WHITE = (1.0, 1.0, 1.0)


class Arrow(enum.Enum):
    """The arrow keys that rotate the cube."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# Each arrow changes (rotate_x, rotate_y) by this many steps.
_ARROW_STEPS = {
    Arrow.RIGHT: (0, 1),
    Arrow.LEFT: (0, -1),
    Arrow.UP: (1, 0),
    Arrow.DOWN: (-1, 0),
}


def rotation_matrix(rotate_x: float, rotate_y: float) -> Matrix:
    """Column-major matrix rotating by ``rotate_x`` degrees about x, then ``rotate_y`` about y.

    Equivalent to multiplying a rotation about x by a rotation about y, so the
    y rotation is applied to vertices first.
    """
    a = math.radians(rotate_x)
    b = math.radians(rotate_y)
    ca, sa = math.cos(a), math.sin(a)
    cb, sb = math.cos(b), math.sin(b)
    return (
        cb, sa * sb, -ca * sb, 0.0,
        0.0, ca, sa, 0.0,
        sb, -sa * cb, ca * cb, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


@dataclass
class CubeView:
    """Rotation state of the cube, in degrees."""

    rotate_x: float = 0.0
    rotate_y: float = 0.0

    def press(self, key) -> None:
        """Rotate five degrees for an arrow key; other keys change nothing."""
        steps = _ARROW_STEPS.get(key)
        if steps is None:
            return
        dx, dy = steps
        self.rotate_x += dx * ROTATION_STEP
        self.rotate_y += dy * ROTATION_STEP

    def transform(self) -> Matrix:
        """The model matrix for the current rotation."""
        return rotation_matrix(self.rotate_x, self.rotate_y)


def _face(color, *corners):
    return [Vertex(x, y, z, color=color) for x, y, z in corners]


def build_scene() -> Scene:
    """Six unit-cube faces centred on the origin; the front face is multi-coloured."""
    scene = Scene()
    scene.add(
        Primitive.POLYGON,
        [
            Vertex(0.5, -0.5, -0.5, color=_RED),
            Vertex(0.5, 0.5, -0.5, color=_GREEN),
            Vertex(-0.5, 0.5, -0.5, color=_BLUE),
            Vertex(-0.5, -0.5, -0.5, color=_PURPLE),
        ],
    )
    scene.add(
        Primitive.POLYGON,
        _face(_WHITE, (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, -0.5, 0.5)),
    )
    scene.add(
        Primitive.POLYGON,
        _face(_PURPLE, (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (0.5, -0.5, 0.5)),
    )
    scene.add(
        Primitive.POLYGON,
        _face(_GREEN, (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5)),
    )
    scene.add(
        Primitive.POLYGON,
        _face(_BLUE, (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5), (-0.5, 0.5, 0.5)),
    )
    scene.add(
        Primitive.POLYGON,
        _face(_RED, (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5), (-0.5, -0.5, -0.5)),
    )
    return scene


def main(argv=None) -> int:
    """Open the cube window; arrow keys rotate the cube."""
    parser = argparse.ArgumentParser(
        prog="glsketches-cube", description="Draw a cube that the arrow keys rotate."
    )
    parser.parse_args(argv)

    from pyglet.window import key

    arrows = {
        key.LEFT: Arrow.LEFT,
        key.RIGHT: Arrow.RIGHT,
        key.UP: Arrow.UP,
        key.DOWN: Arrow.DOWN,
    }
    view = CubeView()
    window = SceneWindow(build_scene(), title="Awesome Cube", depth_test=True)
    window.model = view.transform()

    def on_key_press(symbol, modifiers):
        arrow = arrows.get(symbol)
        if arrow is not None:
            view.press(arrow)
            window.model = view.transform()

    window.run(on_key_press=on_key_press)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())