"""Textured-colour cube viewed through a free camera driven by mouse and keyboard."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Collection, Sequence

from practicegl.camera import FreeCamera, ViewInfo
from practicegl.shader import Shader, ShaderError
from practicegl.vertex import (
    COLOR_COMPONENTS,
    COLOR_OFFSET,
    POSITION_COMPONENTS,
    POSITION_OFFSET,
    STRIDE,
    UV_COMPONENTS,
    UV_OFFSET,
    SimpleVertex,
    pack_vertices,
)

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

MOUSE_SENSITIVITY = 0.2
MOVE_VELOCITY = 4.0
PITCH_LIMIT = 89.0

CLEAR_COLOR = (7 / 255.0, 11 / 255.0, 52 / 255.0, 1.0)
VIEW_INFO_SIZE = 2 * 16 * 4

DEFAULT_VERTEX_SHADER = "../../res/shaders/simple_surface.vert"
DEFAULT_FRAGMENT_SHADER = "../../res/shaders/simple_surface.frag"

_FACE_UVS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0))

_FACES = (
    (
        (1.0, 0.0, 0.0, 1.0),
        (
            (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5),
            (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5),
        ),
    ),
    (
        (0.0, 0.0, 1.0, 1.0),
        (
            (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5),
            (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, -0.5, 0.5),
        ),
    ),
    (
        (0.0, 1.0, 0.0, 1.0),
        (
            (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5),
            (-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5),
        ),
    ),
    (
        (1.0, 1.0, 0.0, 1.0),
        (
            (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (0.5, -0.5, -0.5),
            (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5),
        ),
    ),
    (
        (1.0, 1.0, 1.0, 1.0),
        (
            (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5),
            (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5), (-0.5, -0.5, -0.5),
        ),
    ),
    (
        (1.0, 0.4, 0.0, 1.0),
        (
            (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5),
            (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5),
        ),
    ),
)

CUBE: tuple[SimpleVertex, ...] = tuple(
    SimpleVertex(position=position, color=color, uv=uv)
    for color, positions in _FACES
    for position, uv in zip(positions, _FACE_UVS)
)


class MouseLook:
    """Turns cursor movement into camera yaw and pitch.

    The first position seen becomes the reference, so the first update
    does not rotate the camera.
    """

    def __init__(self, sensitivity: float = MOUSE_SENSITIVITY) -> None:
        self.sensitivity = sensitivity
        self._last: tuple[float, float] | None = None

    def update(self, camera: FreeCamera, x: float, y: float) -> None:
        """Rotate *camera* by the movement since the last cursor position."""
        if self._last is None:
            self._last = (x, y)
        last_x, last_y = self._last
        x_offset = x - last_x
        y_offset = last_y - y
        self._last = (x, y)

        rotation = camera.rotation
        rotation[0] += x_offset * self.sensitivity
        rotation[1] += y_offset * self.sensitivity
        rotation[1] = min(max(rotation[1], -PITCH_LIMIT), PITCH_LIMIT)
        camera.rotation = rotation


def move_camera(camera: FreeCamera, pressed: Collection[str], dt: float) -> bool:
    """Move *camera* for the pressed keys ("w", "a", "s", "d").

    Returns True when "escape" is pressed, asking the window to close.
    """
    step = MOVE_VELOCITY * dt
    if "w" in pressed:
        camera.position = camera.position + camera.front * step
    if "s" in pressed:
        camera.position = camera.position - camera.front * step
    if "a" in pressed:
        camera.position = camera.position - camera.right * step
    if "d" in pressed:
        camera.position = camera.position + camera.right * step
    return "escape" in pressed


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cube", description="Fly around a coloured cube.")
    parser.add_argument("--vertex", default=DEFAULT_VERTEX_SHADER, help="vertex shader file")
    parser.add_argument(
        "--fragment", default=DEFAULT_FRAGMENT_SHADER, help="fragment shader file"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the cube window and run until it is closed."""
    args = _parse_args(argv)

    import pyglet
    from pyglet import gl
    from pyglet.graphics.vertexarray import VertexArray
    from pyglet.graphics.vertexbuffer import BufferObject
    from pyglet.window import key

    config = gl.Config(major_version=4, minor_version=6, depth_size=24, double_buffer=True)
    try:
        window = pyglet.window.Window(SCREEN_WIDTH, SCREEN_HEIGHT, "cube", config=config)
    except (pyglet.window.NoSuchConfigException, gl.ContextException) as exc:
        print(f"Failed to create window: {exc}", file=sys.stderr)
        return -1

    gl.glEnable(gl.GL_DEPTH_TEST)

    data = pack_vertices(CUBE)
    vbo = BufferObject(len(data), usage=gl.GL_STATIC_DRAW)
    vbo.set_data(data)

    vao = VertexArray()
    vao.bind()
    vbo.bind()
    attributes = (
        (POSITION_COMPONENTS, POSITION_OFFSET),
        (COLOR_COMPONENTS, COLOR_OFFSET),
        (UV_COMPONENTS, UV_OFFSET),
    )
    for index, (size, offset) in enumerate(attributes):
        gl.glVertexAttribPointer(index, size, gl.GL_FLOAT, gl.GL_FALSE, STRIDE, offset)
        gl.glEnableVertexAttribArray(index)

    ubo = BufferObject(VIEW_INFO_SIZE, usage=gl.GL_DYNAMIC_DRAW)
    gl.glBindBufferBase(gl.GL_UNIFORM_BUFFER, 0, ubo.id)

    camera = FreeCamera()
    camera.perspective(45.0, SCREEN_WIDTH / float(SCREEN_HEIGHT), 0.001, 100.0)

    surface = Shader()
    try:
        surface.load(args.vertex, args.fragment)
    except ShaderError as exc:
        print(exc, file=sys.stderr)
        window.close()
        return 1

    keys = key.KeyStateHandler()
    window.push_handlers(keys)
    window.set_exclusive_mouse(True)
    key_names = {"w": key.W, "s": key.S, "a": key.A, "d": key.D, "escape": key.ESCAPE}

    mouse = MouseLook()
    cursor = [0.0, 0.0]

    @window.event
    def on_mouse_motion(x: int, y: int, dx: int, dy: int) -> None:
        cursor[0] += dx
        cursor[1] -= dy

    @window.event
    def on_draw() -> None:
        gl.glClearColor(*CLEAR_COLOR)
        window.clear()
        info = ViewInfo(camera.projection(), camera.view())
        ubo.set_data(info.to_bytes())
        surface.bind()
        vao.bind()
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, len(CUBE))

    def update(dt: float) -> None:
        pressed = {name for name, symbol in key_names.items() if keys[symbol]}
        if move_camera(camera, pressed, dt):
            pyglet.clock.unschedule(update)
            window.close()
            return
        mouse.update(camera, cursor[0], cursor[1])

    pyglet.clock.schedule(update)
    try:
        pyglet.app.run()
    finally:
        surface.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())