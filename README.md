# practicegl

Small OpenGL building blocks and two demo programs, built on numpy and pyglet.

## Modules

- `practicegl.camera`: `FreeCamera` is steered by yaw and pitch in degrees
  (`rotation[0]` and `rotation[1]`) and has a `position`.
  - `projection()` returns the perspective matrix, or the identity for other
    projection types.
  - `view()` recomputes the `front` and `right` vectors and returns the view
    matrix.
  - `perspective_matrix(fovy, aspect_ratio, near, far)` builds the perspective
    matrix. Its `fovy` is in radians.
  - `look_at(eye, center, up)` builds a right-handed view matrix.
  - `ViewInfo(projection, view).to_bytes()` packs both matrices as
    column-major float32, projection first, ready for a uniform buffer.
- `practicegl.vertex`: `SimpleVertex` holds a position (3 floats), an RGBA
  colour (4) and a UV pair (2). A wrong number of components raises
  `ValueError`. `pack_vertices` packs vertices into an interleaved float32
  buffer. The constants `STRIDE`, `POSITION_OFFSET`, `COLOR_OFFSET` and
  `UV_OFFSET` describe that layout.
- `practicegl.shader`: `Shader.load(*paths)` compiles two or more stage files
  and links them into a program.
  - The stage is chosen from the file extension: `.vert`/`.vs` for vertex,
    `.frag`/`.fs` for fragment. `shader_type_for(extension)` returns it as a
    `ShaderType`.
  - These raise `ShaderError`: an unknown extension, a failed compile, a
    failed link, and using a shader before it is loaded.
  - The uniform setters are `set_bool`, `set_int`, `set_float`, `vec2`,
    `vec3`, `vec4`, `mat2`, `mat3` and `mat4`. The `vecN` setters take either
    one sequence or N separate floats.
  - `close()` deletes the program. A `Shader` also works as a context manager
    and calls `close()` on exit.
  - By default it uses pyglet shader objects, which need a current OpenGL
    context. Any object that follows the `GraphicsBackend` protocol can be
    passed instead.
- `practicegl.iosystem`: `read_file(path, binary=False)` and
  `read_binary(path)` return a file's whole content. They return an empty
  string or empty bytes if the file cannot be opened.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Demos

To draw a single orange triangle (OpenGL 3.3 core context), run:

```
practicegl-triangle
```

Escape closes the window.

To fly around a coloured cube, run:

```
practicegl-cube --vertex path/to/surface.vert --fragment path/to/surface.frag
```

Move the mouse to look around and use W, A, S, D to move. Escape closes the
window. This demo needs an OpenGL 4.6 core context.

If `--vertex` and `--fragment` are not given, the demo looks for
`../../res/shaders/simple_surface.vert` and `.frag` relative to the current
directory. If these cannot be compiled and linked, the demo prints the error
and exits with status 1.

## What it does not do

The package ships no shader files. The cube demo needs a vertex and a
fragment shader that you supply. They must read the position, colour and UV
attributes at locations 0, 1 and 2, and take the projection and view matrices
from the uniform block bound at index 0.

## Using the camera

```python
from practicegl.camera import FreeCamera, ViewInfo

camera = FreeCamera()
camera.perspective(45.0, 1280 / 720, 0.001, 100.0)
camera.rotation = (-90.0, 0.0, 0.0)

info = ViewInfo(camera.projection(), camera.view())
payload = info.to_bytes()  # upload to a uniform buffer
```

## Using shaders

```python
from practicegl.shader import Shader

with Shader() as surface:
    surface.load("shaders/simple_surface.vert", "shaders/simple_surface.frag")
    surface.bind()
    surface.vec3("tint", 1.0, 0.5, 0.2)
```