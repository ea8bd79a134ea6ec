"""Setup check: a few flat-coloured squares on a grey background."""

from __future__ import annotations

import argparse

from glsketches.render import SceneWindow
from glsketches.scene import Primitive, Scene, Vertex

_YELLOW = (1.0, 1.0, 0.0)
_RED = (1.0, 0.0, 0.0)
_WHITE = (1.0, 1.0, 1.0)


def _rectangle(half_width: float, half_height: float, color):
    return [
        Vertex(-half_width, -half_height, color=color),
        Vertex(half_width, -half_height, color=color),
        Vertex(half_width, half_height, color=color),
        Vertex(-half_width, half_height, color=color),
    ]


def build_scene() -> Scene:
    """A yellow border, a red square and a white bar, all centred."""
    scene = Scene()
    scene.add(
        Primitive.QUADS,
        _rectangle(0.525, 0.55, _YELLOW)
        + _rectangle(0.5, 0.5, _RED)
        + _rectangle(0.2, 0.5, _WHITE),
    )
    return scene


def main(argv=None) -> int:
    """Open the setup-test window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="glsketches-hello", description="Draw a test pattern to check the graphics setup."
    )
    parser.parse_args(argv)
    SceneWindow(
        build_scene(),
        title="OpenGL Setup Test",
        clear_color=(0.5, 0.5, 0.5, 0.8),
    ).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())