import struct

import pytest

from practicegl.vertex import (
    COLOR_OFFSET,
    STRIDE,
    UV_OFFSET,
    SimpleVertex,
    pack_vertices,
)


def test_as_floats_interleaves_in_declared_order():
    vertex = SimpleVertex(position=(-0.5, -0.5, -0.5), color=(1, 0, 0, 1), uv=(0, 1))
    assert vertex.as_floats() == (-0.5, -0.5, -0.5, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0)


def test_default_vertex_is_all_zero():
    assert all(value == 0.0 for value in SimpleVertex().as_floats())
    assert len(SimpleVertex().as_floats()) * 4 == STRIDE


def test_offsets_locate_fields_in_packed_data():
    vertex = SimpleVertex(position=(1.0, 2.0, 3.0), color=(0.25, 0.5, 0.75, 1.0), uv=(0.125, 0.875))
    data = pack_vertices([vertex])
    assert len(data) == STRIDE
    assert struct.unpack_from("=3f", data, 0) == (1.0, 2.0, 3.0)
    assert struct.unpack_from("=4f", data, COLOR_OFFSET) == (0.25, 0.5, 0.75, 1.0)
    assert struct.unpack_from("=2f", data, UV_OFFSET) == (0.125, 0.875)


def test_pack_length_is_stride_per_vertex():
    vertices = [SimpleVertex((i, i, i), (1, 1, 1, 1), (0, 1)) for i in range(5)]
    assert len(pack_vertices(vertices)) == STRIDE * 5


def test_pack_round_trip():
    vertices = [
        SimpleVertex((0.5, -0.5, 0.5), (0.0, 0.0, 1.0, 1.0), (1.0, 0.0)),
        SimpleVertex((-0.5, 0.5, -0.5), (1.0, 0.5, 0.0, 1.0), (0.0, 1.0)),
    ]
    data = pack_vertices(vertices)
    unpacked = [struct.unpack_from("=9f", data, offset) for offset in (0, STRIDE)]
    assert unpacked == [v.as_floats() for v in vertices]


def test_pack_empty():
    assert pack_vertices([]) == b""


@pytest.mark.parametrize(
    "kwargs",
    [
        {"position": (1.0, 2.0)},
        {"color": (1.0, 1.0, 1.0)},
        {"uv": (0.0, 0.0, 0.0)},
    ],
)
def test_wrong_component_count_rejected(kwargs):
    with pytest.raises(ValueError):
        SimpleVertex(**kwargs)