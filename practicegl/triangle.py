"""A single orange triangle drawn with a minimal shader program."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_TITLE = "LearnOpenGL"
CLEAR_COLOR = (0.2, 0.3, 0.3, 1.0)

VERTEX_SHADER_SOURCE = """#version 330 core
layout (location = 0) in vec3 aPos;
void main()
{
   gl_Position = vec4(aPos.x, aPos.y, aPos.z, 1.0);
}
"""

FRAGMENT_SHADER_SOURCE = """#version 330 core
out vec4 FragColor;
void main()
{
   FragColor = vec4(1.0f, 0.5f, 0.2f, 1.0f);
}
"""


def triangle_vertices() -> tuple[float, ...]:
    """Positions of the triangle's left, right and top corners, flattened."""
    return (
        -0.5, -0.5, 0.0,
        0.5, -0.5, 0.0,
        0.0, 0.5, 0.0,
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="triangle", description="Draw one triangle.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the triangle window and run until it is closed."""
    _parse_args(argv)

    import pyglet
    from pyglet import gl
    from pyglet.graphics.shader import Shader, ShaderException, ShaderProgram
    from pyglet.window import key

    config = gl.Config(
        major_version=3, minor_version=3, forward_compatible=True, double_buffer=True
    )
    try:
        window = pyglet.window.Window(SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, config=config)
    except (pyglet.window.NoSuchConfigException, gl.ContextException):
        print("Failed to create window", file=sys.stderr)
        return -1

    stages = (
        ("VERTEX", VERTEX_SHADER_SOURCE, "vertex"),
        ("FRAGMENT", FRAGMENT_SHADER_SOURCE, "fragment"),
    )
    shaders = []
    for label, source, stage in stages:
        try:
            shaders.append(Shader(source, stage))
        except ShaderException as exc:
            print(f"ERROR::SHADER::{label}::COMPILATION_FAILED\n{exc}", file=sys.stderr)
            window.close()
            return 1
    try:
        program = ShaderProgram(*shaders)
    except ShaderException as exc:
        print(f"ERROR::SHADER::PROGRAM::LINKING_FAILED\n{exc}", file=sys.stderr)
        window.close()
        return 1
    finally:
        for shader in shaders:
            shader.delete()

    vertices = triangle_vertices()
    vertex_list = program.vertex_list(len(vertices) // 3, gl.GL_TRIANGLES, aPos=("f", vertices))

    @window.event
    def on_key_press(symbol: int, modifiers: int) -> None:
        if symbol == key.ESCAPE:
            window.close()

    @window.event
    def on_draw() -> None:
        gl.glClearColor(*CLEAR_COLOR)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        program.use()
        vertex_list.draw(gl.GL_TRIANGLES)

    try:
        pyglet.app.run()
    finally:
        vertex_list.delete()
        program.delete()
    return 0


if __name__ == "__main__":
    sys.exit(main())