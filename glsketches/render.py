"""Drawing scenes in a resizable window with an orthographic projection."""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from glsketches.scene import Scene

Matrix = Tuple[float, ...]
Bounds = Tuple[float, float, float, float]

_IDENTITY: Matrix = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

_VERTEX_SOURCE = """#version 330 core
in vec3 position;
in vec3 colors;
uniform mat4 projection;
uniform mat4 model;
out vec3 vertex_color;
void main()
{
    gl_Position = projection * model * vec4(position, 1.0);
    vertex_color = colors;
}
"""

_FRAGMENT_SOURCE = """#version 330 core
in vec3 vertex_color;
out vec4 final_color;
void main()
{
    final_color = vec4(vertex_color, 1.0);
}
"""


def ortho2d(left: float, right: float, bottom: float, top: float) -> Matrix:
    """Column-major orthographic projection with near -1 and far 1."""
    if left == right or bottom == top:
        raise ValueError("clipping area must have non-zero width and height")
    width = right - left
    height = top - bottom
    return (
        2.0 / width, 0.0, 0.0, 0.0,
        0.0, 2.0 / height, 0.0, 0.0,
        0.0, 0.0, -1.0, 0.0,
        -(right + left) / width, -(top + bottom) / height, 0.0, 1.0,
    )


def _vertex_data(scene: Scene):
    positions: list = []
    colors: list = []
    for triangle in scene.triangles():
        for vertex in triangle:
            positions.extend(vertex.position)
            colors.extend(vertex.color)
    return positions, colors


def _build_program():
    from pyglet.graphics.shader import Shader, ShaderProgram

    return ShaderProgram(
        Shader(_VERTEX_SOURCE, "vertex"),
        Shader(_FRAGMENT_SOURCE, "fragment"),
    )


class SceneWindow:
    """A window that redraws ``scene`` through ``model`` and ``projection``.

    ``reshape`` maps a window size to clipping bounds (left, right, bottom,
    top); without it the clipping area stays the unit square.
    """

    def __init__(
        self,
        scene: Scene,
        *,
        title: str,
        width: int = 300,
        height: int = 300,
        position: Optional[Tuple[int, int]] = None,
        clear_color: Sequence[float] = (0.0, 0.0, 0.0, 1.0),
        reshape: Optional[Callable[[int, int], Bounds]] = None,
        depth_test: bool = False,
    ) -> None:
        self.scene = scene
        self.title = title
        self.width = width
        self.height = height
        self.position = position
        self.clear_color = tuple(clear_color)
        self.reshape = reshape
        self.depth_test = depth_test
        self.model: Matrix = _IDENTITY
        self.projection: Matrix = _IDENTITY
        self.window = None
        self._program = None

    def on_resize(self, width: int, height: int) -> bool:
        """Recompute the projection for the new size; handled here."""
        self.width, self.height = width, height
        if self.reshape is None:
            self.projection = _IDENTITY
        else:
            self.projection = ortho2d(*self.reshape(width, height))
        return True

    def on_draw(self) -> None:
        """Clear the window and draw the current scene."""
        from pyglet import gl

        fb_width, fb_height = self.window.get_framebuffer_size()
        gl.glViewport(0, 0, fb_width, fb_height)
        gl.glClearColor(*self.clear_color)
        mask = gl.GL_COLOR_BUFFER_BIT
        if self.depth_test:
            gl.glEnable(gl.GL_DEPTH_TEST)
            mask |= gl.GL_DEPTH_BUFFER_BIT
        else:
            gl.glDisable(gl.GL_DEPTH_TEST)
        gl.glClear(mask)

        positions, colors = _vertex_data(self.scene)
        if not positions:
            return
        program = self._program
        program.use()
        program["projection"] = self.projection
        program["model"] = self.model
        vertex_list = program.vertex_list(
            len(positions) // 3,
            gl.GL_TRIANGLES,
            position=("f", positions),
            colors=("f", colors),
        )
        vertex_list.draw(gl.GL_TRIANGLES)
        vertex_list.delete()
        program.stop()

    def run(self, **handlers) -> None:
        """Open the window, attach extra event ``handlers`` and run the loop."""
        import pyglet

        window = pyglet.window.Window(
            self.width, self.height, caption=self.title, resizable=True
        )
        if self.position is not None:
            window.set_location(*self.position)
        self.window = window
        self._program = _build_program()
        window.push_handlers(on_draw=self.on_draw, on_resize=self.on_resize, **handlers)
        self.on_resize(window.width, window.height)
        pyglet.app.run()