"""A small square steered with the arrow keys; holding Ctrl slows it down."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass, field
from typing import List, Set, Tuple

from glsketches.render import SceneWindow
from glsketches.scene import Primitive, Scene, Vertex

Color = Tuple[float, float, float]

SIDE = 0.03
SPEED = 0.02
SLOW_SPEED = 0.005
YELLOW: Color = (1.0, 1.0, 0.0)
RED: Color = (1.0, 0.0, 0.0)


class Direction(enum.Enum):
    """The arrow keys that steer the square."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def draw_square(bottom: float, left: float, side: float, color: Color) -> List[Vertex]:
    """The four corners of a flat-coloured square, counter-clockwise."""
    return [
        Vertex(left, bottom, color=color),
        Vertex(left + side, bottom, color=color),
        Vertex(left + side, bottom + side, color=color),
        Vertex(left, bottom + side, color=color),
    ]


def _axis(positive: bool, negative: bool) -> float:
    if positive and negative:
        return 0.0
    if positive:
        return 1.0
    if negative:
        return -1.0
    return 0.0


@dataclass
class Movement:
    """Key state and position of the square, advanced one frame per ``step``."""

    left: float = 0.1
    bottom: float = 0.1
    ctrl: bool = False
    color: Color = YELLOW
    pressed: Set[Direction] = field(default_factory=set)

    def press(self, key, ctrl: bool) -> None:
        """Record a special key going down along with the Ctrl modifier state."""
        self.ctrl = bool(ctrl)
        if isinstance(key, Direction):
            self.pressed.add(key)

    def release(self, key) -> None:
        """Record a special key going up."""
        self.pressed.discard(key)

    def step(self) -> Tuple[float, float]:
        """Move one frame, wrap at the edges, and return (left, bottom)."""
        dy = _axis(Direction.UP in self.pressed, Direction.DOWN in self.pressed)
        dx = _axis(Direction.RIGHT in self.pressed, Direction.LEFT in self.pressed)
        if self.ctrl:
            speed, self.color = SLOW_SPEED, RED
        else:
            speed, self.color = SPEED, YELLOW

        self.left += dx * speed
        self.bottom += dy * speed

        if abs(self.bottom) >= 1.0:
            self.bottom = -self.bottom
        if abs(self.left) >= 1.0:
            self.left = -self.left
        return (self.left, self.bottom)

    def scene(self) -> Scene:
        """A scene holding the square at its current place and colour."""
        scene = Scene()
        scene.add(Primitive.QUADS, draw_square(self.bottom, self.left, SIDE, self.color))
        return scene


def main(argv=None) -> int:
    """Open the movement window; arrows move the square, Ctrl slows it."""
    parser = argparse.ArgumentParser(
        prog="glsketches-movement",
        description="Steer a square with the arrow keys; hold Ctrl to move slowly.",
    )
    parser.parse_args(argv)

    import pyglet
    from pyglet.window import key

    directions = {
        key.UP: Direction.UP,
        key.DOWN: Direction.DOWN,
        key.LEFT: Direction.LEFT,
        key.RIGHT: Direction.RIGHT,
    }
    movement = Movement()
    window = SceneWindow(movement.scene(), title="Movement Test")

    def on_key_press(symbol, modifiers):
        direction = directions.get(symbol)
        if direction is not None:
            movement.press(direction, bool(modifiers & key.MOD_CTRL))

    def on_key_release(symbol, modifiers):
        direction = directions.get(symbol)
        if direction is not None:
            movement.release(direction)

    def advance(dt):
        movement.step()
        window.scene = movement.scene()

    pyglet.clock.schedule(advance)
    window.run(on_key_press=on_key_press, on_key_release=on_key_release)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())