import math

import numpy as np
import pytest

from practicegl.camera import (
    FreeCamera,
    ProjectionType,
    ViewInfo,
    look_at,
    perspective_matrix,
)


def _project(matrix, point):
    clip = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return clip[:3] / clip[3]


def test_perspective_maps_near_and_far_planes_to_ndc_bounds():
    matrix = perspective_matrix(math.radians(60), 1.5, 0.1, 50.0)
    assert _project(matrix, (0, 0, -0.1))[2] == pytest.approx(-1.0)
    assert _project(matrix, (0, 0, -50.0))[2] == pytest.approx(1.0)


def test_perspective_maps_frustum_edge_to_unit_y():
    fovy = math.radians(60)
    matrix = perspective_matrix(fovy, 2.0, 0.1, 50.0)
    depth = 10.0
    edge_y = depth * math.tan(fovy / 2)
    edge_x = edge_y * 2.0
    assert _project(matrix, (edge_x, edge_y, -depth))[:2] == pytest.approx([1.0, 1.0])


def test_look_at_moves_eye_to_origin_and_target_down_negative_z():
    eye = (1.0, 2.0, 3.0)
    center = (1.0, 2.0, -7.0)
    view = look_at(eye, center, (0, 1, 0))
    assert _project(view, eye) == pytest.approx([0.0, 0.0, 0.0])
    mapped = _project(view, center)
    assert mapped[:2] == pytest.approx([0.0, 0.0])
    assert mapped[2] == pytest.approx(-10.0)


def test_look_at_rotation_is_orthonormal():
    view = look_at((3, -1, 2), (0, 0, 0), (0, 1, 0))
    rotation = view[:3, :3]
    assert rotation @ rotation.T == pytest.approx(np.identity(3))


def test_default_camera_projection():
    camera = FreeCamera()
    assert camera.projection_type is ProjectionType.PERSPECTIVE
    assert camera.projection() == pytest.approx(
        perspective_matrix(45.0, 16 / 9.0, 0.001, 100.0)
    )


def test_perspective_method_updates_parameters():
    camera = FreeCamera()
    camera.projection_type = ProjectionType.NONE
    camera.perspective(0.8, 1280 / 720, 0.5, 20.0)
    assert camera.projection_type is ProjectionType.PERSPECTIVE
    assert camera.projection() == pytest.approx(perspective_matrix(0.8, 1280 / 720, 0.5, 20.0))


def test_non_perspective_projection_is_identity():
    camera = FreeCamera()
    camera.projection_type = ProjectionType.ORTHOGRAPHIC
    assert camera.projection() == pytest.approx(np.identity(4))


def test_zero_rotation_looks_along_positive_x():
    camera = FreeCamera((0, 0, 0))
    camera.view()
    assert camera.front == pytest.approx([1.0, 0.0, 0.0])


@pytest.mark.parametrize("yaw,pitch", [(0, 0), (37, 12), (-120, -80), (200, 89)])
def test_view_basis_is_orthonormal(yaw, pitch):
    camera = FreeCamera((1, 2, 3))
    camera.rotation = (yaw, pitch, 0)
    camera.view()
    front, right = camera.front, camera.right
    assert np.linalg.norm(front) == pytest.approx(1.0)
    assert np.linalg.norm(right) == pytest.approx(1.0)
    assert np.dot(front, right) == pytest.approx(0.0, abs=1e-9)
    assert right[1] == pytest.approx(0.0, abs=1e-9)


def test_view_puts_point_in_front_on_viewing_axis():
    camera = FreeCamera((4, -2, 1))
    camera.rotation = (30, 20, 0)
    view = camera.view()
    ahead = camera.position + 5 * camera.front
    mapped = _project(view, ahead)
    assert mapped[:2] == pytest.approx([0.0, 0.0], abs=1e-9)
    assert mapped[2] == pytest.approx(-5.0)


def test_position_returns_copy():
    camera = FreeCamera((1, 2, 3))
    position = camera.position
    position[0] = 99
    assert camera.position == pytest.approx([1, 2, 3])


def test_position_rejects_wrong_length_and_keeps_old_value():
    camera = FreeCamera((1, 2, 3))
    with pytest.raises(ValueError):
        camera.position = (1, 2)
    assert camera.position == pytest.approx([1, 2, 3])


def test_view_info_bytes_are_column_major_round_trip():
    projection = np.arange(16, dtype=float).reshape(4, 4)
    view = np.arange(16, 32, dtype=float).reshape(4, 4)
    data = ViewInfo(projection, view).to_bytes()
    assert len(data) == 2 * 16 * 4
    floats = np.frombuffer(data, dtype=np.float32)
    assert np.reshape(floats[:16], (4, 4), order="F") == pytest.approx(projection)
    assert np.reshape(floats[16:], (4, 4), order="F") == pytest.approx(view)