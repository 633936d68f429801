"""Interleaved vertex layout: position, colour and texture coordinates."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterable, Sequence

POSITION_COMPONENTS = 3
COLOR_COMPONENTS = 4
UV_COMPONENTS = 2
COMPONENTS = POSITION_COMPONENTS + COLOR_COMPONENTS + UV_COMPONENTS

_FLOAT_SIZE = 4
STRIDE = COMPONENTS * _FLOAT_SIZE
POSITION_OFFSET = 0
COLOR_OFFSET = POSITION_COMPONENTS * _FLOAT_SIZE
UV_OFFSET = COLOR_OFFSET + COLOR_COMPONENTS * _FLOAT_SIZE

_LAYOUT = struct.Struct(f"={COMPONENTS}f")


def _components(values: Sequence[float], size: int, field: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != size:
        raise ValueError(f"{field} needs {size} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class SimpleVertex:
    """A vertex with a 3D position, an RGBA colour and a UV pair."""

    position: Sequence[float] = (0.0, 0.0, 0.0)
    color: Sequence[float] = (0.0, 0.0, 0.0, 0.0)
    uv: Sequence[float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "position", _components(self.position, POSITION_COMPONENTS, "position")
        )
        object.__setattr__(self, "color", _components(self.color, COLOR_COMPONENTS, "color"))
        object.__setattr__(self, "uv", _components(self.uv, UV_COMPONENTS, "uv"))

    def as_floats(self) -> tuple[float, ...]:
        """Return the vertex as its interleaved float components."""
        return (*self.position, *self.color, *self.uv)


def pack_vertices(vertices: Iterable[SimpleVertex]) -> bytes:
    """Pack vertices into a tightly interleaved float32 buffer."""
    return b"".join(_LAYOUT.pack(*vertex.as_floats()) for vertex in vertices)