# glsketches

Four small OpenGL sketches drawn with pyglet. Each one opens a resizable
window and draws a scene built from quads, triangles and polygons.

## Installation

```
pip install .
```

Python 3.10 or later is required. The windows draw through OpenGL 3.3 core
shaders, so a display and driver with OpenGL 3.3 support are needed.

## Sketches

| Command               | What it shows                                                                                         |
|-----------------------|-------------------------------------------------------------------------------------------------------|
| `glsketches-hello`    | A grey background with a yellow, a red and a white quad drawn over each other in the centre.          |
| `glsketches-viewport` | Two quads, two diagonal trails of small shaded squares, two triangles and a yellow hexagon in a 640x480 window. The clipping area follows the window's aspect ratio when it is resized. |
| `glsketches-cube`     | A cube with a coloured face on each side and depth testing on. Each arrow key press turns it by 5 degrees. |
| `glsketches-movement` | A small square that moves every frame while arrow keys are held down.                                 |

The commands take no options other than `--help`.

In `glsketches-movement`:

- opposite arrows held together cancel each other on that axis;
- when the square's left or bottom coordinate reaches 1 or -1 in magnitude it
  jumps to the opposite side;
- the Ctrl state is read when an arrow key is pressed: if Ctrl was held, the
  square moves at a quarter of the normal speed and turns red until an arrow is
  next pressed without Ctrl.

## Using the pieces

The scenes are plain data, so they can be built and inspected without opening a
window:

```python
from glsketches import hello, viewport

scene = hello.build_scene()
for a, b, c in scene.triangles():
    print(a.position, b.position, c.position)

print(viewport.ortho_bounds(640, 480))
```

- `glsketches.scene` has `Primitive` (`QUADS`, `TRIANGLES`, `POLYGON`),
  `Vertex` (a position with a colour), `Shape` and `Scene`. `Shape.triangles()`
  and `Scene.triangles()` break quads, triangles and polygons into triangles in
  drawing order.
- `glsketches.render` has `ortho2d(left, right, bottom, top)`, which returns a
  column-major orthographic matrix, and `SceneWindow`, which draws a `Scene`
  through its `model` and `projection` matrices.
- `glsketches.cube` has `CubeView`, whose `press()` takes an `Arrow` and whose
  `transform()` returns the model matrix, and `rotation_matrix(rotate_x, rotate_y)`.
- `glsketches.movement` has `Movement`, with `press(key, ctrl)`, `release(key)`,
  `step()` (advance one frame and return `(left, bottom)`) and `scene()`, plus
  `Direction` and `draw_square(bottom, left, side, color)`.

## Running the tests

```
pip install .[test]
pytest
```