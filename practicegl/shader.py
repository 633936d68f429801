"""Shader programs built from source files, with uniform setters."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Protocol, Sequence, Union

import numpy as np

from practicegl.iosystem import read_binary

PathLike = Union[str, "os.PathLike[str]"]


class ShaderType(Enum):
    UNDEFINED = 0
    VERTEX = 1
    GEOMETRY = 2
    FRAGMENT = 3

    @property
    def label(self) -> str:
        return self.name

    @property
    def gl_enum(self) -> int:
        """The OpenGL enumerant for this stage (0 when undefined)."""
        return _GL_ENUMS[self]


_GL_ENUMS = {
    ShaderType.UNDEFINED: 0x0000,
    ShaderType.VERTEX: 0x8B31,
    ShaderType.FRAGMENT: 0x8B30,
    ShaderType.GEOMETRY: 0x8DD9,
}

_EXTENSIONS = {
    ".vert": ShaderType.VERTEX,
    ".vs": ShaderType.VERTEX,
    ".frag": ShaderType.FRAGMENT,
    ".fs": ShaderType.FRAGMENT,
}

_SEPARATOR = "\n -- --------------------------------------------------- -- "


class ShaderError(Exception):
    """Raised when a shader fails to compile or link, or is used unloaded."""


def shader_type_for(extension: str) -> ShaderType:
    """Map a file extension such as ``".vert"`` to a shader stage."""
    return _EXTENSIONS.get(extension, ShaderType.UNDEFINED)


class GraphicsBackend(Protocol):
    def compile(self, source: str, kind: ShaderType) -> Any: ...

    def link(self, shaders: Sequence[Any]) -> Any: ...

    def delete_shader(self, shader: Any) -> None: ...

    def use(self, program: Any) -> None: ...

    def set_uniform(self, program: Any, name: str, value: Any) -> None: ...

    def delete_program(self, program: Any) -> None: ...

    def program_id(self, program: Any) -> int: ...


class PygletBackend:
    """Backend on top of pyglet's shader objects; needs a current GL context."""

    _STAGES = {
        ShaderType.VERTEX: "vertex",
        ShaderType.FRAGMENT: "fragment",
        ShaderType.GEOMETRY: "geometry",
    }

    def compile(self, source: str, kind: ShaderType) -> Any:
        from pyglet.graphics.shader import Shader as GLShader
        from pyglet.graphics.shader import ShaderException

        try:
            return GLShader(source, self._STAGES[kind])
        except ShaderException as exc:
            raise ShaderError(str(exc)) from exc

    def link(self, shaders: Sequence[Any]) -> Any:
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        try:
            return ShaderProgram(*shaders)
        except ShaderException as exc:
            raise ShaderError(str(exc)) from exc

    def delete_shader(self, shader: Any) -> None:
        shader.delete()

    def use(self, program: Any) -> None:
        program.use()

    def set_uniform(self, program: Any, name: str, value: Any) -> None:
        # Unknown uniforms are ignored, as a location of -1 is in GL.
        if name in program.uniforms:
            program[name] = value

    def delete_program(self, program: Any) -> None:
        program.delete()

    def program_id(self, program: Any) -> int:
        return int(program.id)


def _vector(size: int, args: tuple) -> tuple[float, ...]:
    if len(args) == 1:
        values = tuple(float(v) for v in args[0])
    else:
        values = tuple(float(v) for v in args)
    if len(values) != size:
        raise TypeError(f"expected a {size}-component vector, got {len(values)} values")
    return values


def _matrix(size: int, mat: Any) -> tuple[float, ...]:
    array = np.asarray(mat, dtype=float)
    if array.shape != (size, size):
        raise ValueError(f"expected a {size}x{size} matrix, got shape {array.shape}")
    return tuple(float(v) for v in array.T.ravel())


class Shader:
    """A linked shader program; usable as a context manager that frees it."""

    def __init__(self, backend: GraphicsBackend | None = None) -> None:
        self._backend: GraphicsBackend = backend if backend is not None else PygletBackend()
        self._program: Any = None

    def __enter__(self) -> "Shader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def id(self) -> int:
        if self._program is None:
            return 0
        return self._backend.program_id(self._program)

    def load(self, *args: PathLike) -> None:
        """Compile the given stage files (at least two) and link them."""
        if len(args) < 2:
            raise TypeError(f"load() needs at least two shader files, got {len(args)}")
        self.close()
        compiled: list[Any] = []
        errors: list[str] = []
        try:
            for arg in args:
                path = Path(arg)
                kind = shader_type_for(path.suffix)
                if kind is ShaderType.UNDEFINED:
                    errors.append(
                        f"{path.name} COMPILATION FAILED: \n"
                        f"unknown shader stage for extension {path.suffix!r}{_SEPARATOR}"
                    )
                    continue
                source = read_binary(path).decode("utf-8")
                try:
                    compiled.append(self._backend.compile(source, kind))
                except ShaderError as exc:
                    errors.append(f"{path.name} COMPILATION FAILED: \n{exc}{_SEPARATOR}")
            if errors:
                raise ShaderError("\n".join(errors))
            try:
                self._program = self._backend.link(compiled)
            except ShaderError as exc:
                raise ShaderError(f"linking failed: \n{exc}{_SEPARATOR}") from exc
        finally:
            for handle in compiled:
                self._backend.delete_shader(handle)

    def bind(self) -> None:
        self._backend.use(self._require_program())

    def close(self) -> None:
        """Delete the program, if any."""
        if self._program is not None:
            self._backend.delete_program(self._program)
            self._program = None

    def _require_program(self) -> Any:
        if self._program is None:
            raise ShaderError("no shader program is loaded")
        return self._program

    def _set(self, name: str, value: Any) -> None:
        self._backend.set_uniform(self._require_program(), name, value)

    def set_bool(self, name: str, value: bool) -> None:
        self._set(name, int(bool(value)))

    def set_int(self, name: str, value: int) -> None:
        self._set(name, int(value))

    def set_float(self, name: str, value: float) -> None:
        self._set(name, float(value))

    def vec2(self, name: str, *args: Any) -> None:
        """Set a vec2 from one 2-sequence or two floats."""
        self._set(name, _vector(2, args))

    def vec3(self, name: str, *args: Any) -> None:
        """Set a vec3 from one 3-sequence or three floats."""
        self._set(name, _vector(3, args))

    def vec4(self, name: str, *args: Any) -> None:
        """Set a vec4 from one 4-sequence or four floats."""
        self._set(name, _vector(4, args))

    def mat2(self, name: str, mat: Any) -> None:
        self._set(name, _matrix(2, mat))

    def mat3(self, name: str, mat: Any) -> None:
        self._set(name, _matrix(3, mat))

    def mat4(self, name: str, mat: Any) -> None:
        self._set(name, _matrix(4, mat))