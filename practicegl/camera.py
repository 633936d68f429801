"""A free-flying camera with perspective projection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

WORLD_UP = np.array([0.0, 1.0, 0.0])


class ProjectionType(Enum):
    NONE = 0
    PERSPECTIVE = 1
    ORTHOGRAPHIC = 2


def _vec3(value: Sequence[float]) -> np.ndarray:
    array = np.array(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {array.shape}")
    return array


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def perspective_matrix(fovy: float, aspect_ratio: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective matrix mapping depth to [-1, 1]; *fovy* is in radians."""
    tan_half = math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect_ratio * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[3, 2] = -1.0
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    return matrix


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from *eye* towards *center*."""
    eye_v = _vec3(eye)
    forward = _normalize(_vec3(center) - eye_v)
    side = _normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -np.dot(side, eye_v)
    matrix[1, 3] = -np.dot(upward, eye_v)
    matrix[2, 3] = np.dot(forward, eye_v)
    return matrix


class FreeCamera:
    """Camera steered by yaw and pitch in degrees (rotation x and y)."""

    def __init__(self, position: Sequence[float] = (0.0, 0.0, 0.0)) -> None:
        self.position = position
        self.rotation = (0.0, 0.0, 0.0)
        self.near = 0.001
        self.far = 100.0
        self.fovy = 45.0
        self.aspect_ratio = 16 / 9.0
        self.projection_type = ProjectionType.PERSPECTIVE
        self._front = np.zeros(3)
        self._right = np.zeros(3)

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = _vec3(value)

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value: Sequence[float]) -> None:
        self._rotation = _vec3(value)

    @property
    def front(self) -> np.ndarray:
        """Viewing direction as computed by the last call to :meth:`view`."""
        return self._front.copy()

    @property
    def right(self) -> np.ndarray:
        """Right direction as computed by the last call to :meth:`view`."""
        return self._right.copy()

    def perspective(self, fovy: float, aspect_ratio: float, near: float, far: float) -> None:
        """Switch to a perspective projection with the given parameters."""
        self.projection_type = ProjectionType.PERSPECTIVE
        self.fovy = fovy
        self.aspect_ratio = aspect_ratio
        self.near = near
        self.far = far

    def projection(self) -> np.ndarray:
        if self.projection_type is ProjectionType.PERSPECTIVE:
            return perspective_matrix(self.fovy, self.aspect_ratio, self.near, self.far)
        return np.identity(4)

    def view(self) -> np.ndarray:
        """Recompute the basis vectors from the rotation and return the view matrix."""
        yaw, pitch = np.radians(self._rotation[:2])
        self._front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self._right = _normalize(np.cross(self._front, WORLD_UP))
        up = _normalize(np.cross(self._right, self._front))
        return look_at(self._position, self._position + self._front, up)


@dataclass
class ViewInfo:
    """Projection and view matrices as laid out in a uniform buffer."""

    projection: np.ndarray
    view: np.ndarray

    def to_bytes(self) -> bytes:
        """Both matrices as column-major float32, projection first."""
        return b"".join(
            np.ascontiguousarray(np.asarray(matrix, dtype=np.float32).T).tobytes()
            for matrix in (self.projection, self.view)
        )