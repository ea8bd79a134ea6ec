"""Small OpenGL sketches drawn with pyglet: scenes, a window and four demos."""

__version__ = "0.1.0"