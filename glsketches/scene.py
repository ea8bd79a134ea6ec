"""Immediate-mode style scene description: primitives made of coloured vertices."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from itertools import chain
from typing import Iterable, Iterator, Tuple

Color = Tuple[float, float, float]
Triangle = Tuple["Vertex", "Vertex", "Vertex"]

WHITE: Color = (1.0, 1.0, 1.0)


class Primitive(enum.Enum):
    """How a run of vertices is assembled into faces."""

    QUADS = "quads"
    TRIANGLES = "triangles"
    POLYGON = "polygon"


@dataclass(frozen=True)
class Vertex:
    """A point in space carrying the colour current when it was issued."""

    x: float
    y: float
    z: float = 0.0
    color: Color = WHITE

    @property
    def position(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Shape:
    """One begin/end block: a primitive kind and its vertices in order."""

    primitive: Primitive
    vertices: Tuple[Vertex, ...]

    def triangles(self) -> Iterator[Triangle]:
        """Yield the triangles that fill this shape, in drawing order.

        Trailing vertices that do not complete a quad or triangle are ignored.
        """
        verts = self.vertices
        if self.primitive is Primitive.QUADS:
            for a, b, c, d in zip(*[iter(verts)] * 4):
                yield (a, b, c)
                yield (a, c, d)
        elif self.primitive is Primitive.TRIANGLES:
            yield from zip(*[iter(verts)] * 3)
        else:
            if len(verts) < 3:
                return
            first = verts[0]
            for b, c in zip(verts[1:], verts[2:]):
                yield (first, b, c)


@dataclass
class Scene:
    """An ordered collection of shapes; later shapes draw over earlier ones."""

    shapes: list = field(default_factory=list)

    def add(self, primitive, vertices: Iterable[Vertex]) -> Shape:
        """Append a shape built from ``vertices`` and return it."""
        shape = Shape(Primitive(primitive), tuple(vertices))
        self.shapes.append(shape)
        return shape

    def triangles(self) -> Iterator[Triangle]:
        """Yield every triangle of every shape in drawing order."""
        return chain.from_iterable(shape.triangles() for shape in self.shapes)