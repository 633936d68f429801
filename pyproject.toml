[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicegl"
version = "0.0.0"
description = "OpenGL practice examples: a free-look camera, vertex packing, shader helpers and two small rendering demos"
requires-python = ">=3.10"
keywords = ["opengl", "graphics", "camera", "shader", "3d", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
practicegl-cube = "practicegl.cube:main"
practicegl-triangle = "practicegl.triangle:main"

[tool.hatch.build.targets.wheel]
packages = ["practicegl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
