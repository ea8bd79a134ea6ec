"""Clipping area and viewport: shapes that keep their aspect ratio on resize."""

from __future__ import annotations

import argparse
from typing import List, Tuple

from glsketches.render import SceneWindow
from glsketches.scene import Primitive, Scene, Vertex

_DARK_GRAY = (0.2, 0.2, 0.2)
_WHITE = (1.0, 1.0, 1.0)
_TURQUOISE = (0.0, 1.0, 1.0)
_GREEN = (0.0, 1.0, 0.0)
_BLUE = (0.0, 0.0, 1.0)
_RED = (1.0, 0.0, 0.0)
_YELLOW = (1.0, 1.0, 0.0)


def square(left: float, bottom: float, side_length: float) -> List[Vertex]:
    """Four corners counter-clockwise, alternating dark grey and white."""
    right = left + side_length
    top = bottom + side_length
    return [
        Vertex(left, bottom, color=_DARK_GRAY),
        Vertex(right, bottom, color=_WHITE),
        Vertex(right, top, color=_DARK_GRAY),
        Vertex(left, top, color=_WHITE),
    ]


def _flat(color, *points):
    return [Vertex(x, y, color=color) for x, y in points]


def build_scene() -> Scene:
    """Quads with two diagonal trails of squares, two triangles, a hexagon."""
    scene = Scene()

    quads = _flat(_TURQUOISE, (-0.8, 0.1), (-0.2, 0.1), (-0.2, 0.7), (-0.8, 0.7))
    quads += _flat(_GREEN, (-0.7, -0.6), (-0.1, -0.6), (-0.1, 0.0), (-0.7, 0.0))
    for a in range(21):
        quads += square(0.02 * a, 0.01 * a, 0.025)
    for i in range(21):
        quads += square(-0.01 * i, -0.01 * i, 0.025)
    scene.add(Primitive.QUADS, quads)

    triangles = _flat(_BLUE, (0.1, -0.6), (0.7, -0.6), (0.4, -0.1))
    triangles += [
        Vertex(0.3, -0.4, color=_RED),
        Vertex(0.9, -0.4, color=_GREEN),
        Vertex(0.6, -0.9, color=_BLUE),
    ]
    scene.add(Primitive.TRIANGLES, triangles)

    scene.add(
        Primitive.POLYGON,
        _flat(_YELLOW, (0.4, 0.2), (0.6, 0.2), (0.7, 0.4), (0.6, 0.6), (0.4, 0.6), (0.3, 0.4)),
    )
    return scene


def ortho_bounds(width: int, height: int) -> Tuple[float, float, float, float]:
    """Clipping bounds matching the window's aspect; the short side spans -1..1."""
    if height == 0:
        height = 1
    if width == 0:
        # A zero-width window would give an infinite clipping area.
        width = 1
    aspect = width / height
    if width >= height:
        return (-aspect, aspect, -1.0, 1.0)
    return (-1.0, 1.0, -1.0 / aspect, 1.0 / aspect)


def main(argv=None) -> int:
    """Open the viewport demo window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="glsketches-viewport",
        description="Draw shapes whose aspect ratio survives window resizing.",
    )
    parser.parse_args(argv)
    SceneWindow(
        build_scene(),
        title="Viewport Transform",
        width=640,
        height=480,
        position=(50, 50),
        clear_color=(0.0, 0.0, 0.0, 1.0),
        reshape=ortho_bounds,
    ).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())