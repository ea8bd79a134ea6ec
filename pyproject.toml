[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glsketches"
version = "0.1.0"
description = "Small OpenGL sketches drawn with pyglet: a test pattern, an aspect-preserving viewport, a rotatable cube and a steerable square"
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["opengl", "pyglet", "graphics", "sketches", "viewport", "cube"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
glsketches-hello = "glsketches.hello:main"
glsketches-viewport = "glsketches.viewport:main"
glsketches-cube = "glsketches.cube:main"
glsketches-movement = "glsketches.movement:main"

[tool.hatch.build.targets.wheel]
packages = ["glsketches"]

[tool.pytest.ini_options]
addopts = "-ra"
