import pytest

from waldem.buffer import (
    BufferElement,
    BufferLayout,
    IndexBuffer,
    ShaderDataType,
    StorageBuffer,
    UnsupportedRendererAPIError,
    VertexBuffer,
    shader_data_type_size,
)


@pytest.mark.parametrize(
    "data_type, size",
    [
        (ShaderDataType.NONE, 0),
        (ShaderDataType.FLOAT, 4),
        (ShaderDataType.FLOAT2, 8),
        (ShaderDataType.FLOAT3, 12),
        (ShaderDataType.FLOAT4, 16),
        (ShaderDataType.MAT3, 36),
        (ShaderDataType.MAT4, 64),
        (ShaderDataType.INT, 4),
        (ShaderDataType.INT2, 8),
        (ShaderDataType.INT3, 12),
        (ShaderDataType.INT4, 16),
        (ShaderDataType.BOOL, 1),
    ],
)
def test_shader_data_type_size(data_type, size):
    assert shader_data_type_size(data_type) == size


def test_unknown_shader_data_type_raises():
    with pytest.raises(ValueError):
        shader_data_type_size(99)


@pytest.mark.parametrize(
    "data_type, count",
    [
        (ShaderDataType.NONE, 0),
        (ShaderDataType.FLOAT3, 3),
        (ShaderDataType.MAT3, 9),
        (ShaderDataType.MAT4, 16),
        (ShaderDataType.INT2, 2),
        (ShaderDataType.BOOL, 1),
    ],
)
def test_component_count(data_type, count):
    assert BufferElement(data_type, "x").component_count() == count


def test_element_size_follows_type():
    element = BufferElement(ShaderDataType.FLOAT2, "UV", True)
    assert element.size == shader_data_type_size(ShaderDataType.FLOAT2)
    assert element.offset == 0
    assert element.normalized is True


def _vertex_layout():
    return BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "Position", False),
            BufferElement(ShaderDataType.FLOAT3, "Normal", False),
            BufferElement(ShaderDataType.FLOAT2, "UV", True),
            BufferElement(ShaderDataType.INT, "MeshId", True),
        ]
    )


def test_layout_offsets_are_running_sums():
    layout = _vertex_layout()
    running = 0
    for element in layout:
        assert element.offset == running
        running += element.size
    assert layout.stride == running


def test_layout_stride_equals_total_size():
    layout = _vertex_layout()
    assert layout.stride == sum(e.size for e in layout.elements)
    assert len(layout) == 4


def test_layout_keeps_order():
    layout = _vertex_layout()
    assert [e.name for e in layout] == ["Position", "Normal", "UV", "MeshId"]


def test_empty_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0


def test_storage_buffer_create_is_unsupported():
    with pytest.raises(UnsupportedRendererAPIError):
        StorageBuffer.create(b"\x00" * 4, 4)


def test_abstract_buffers_cannot_be_instantiated():
    with pytest.raises(TypeError):
        VertexBuffer()
    with pytest.raises(TypeError):
        IndexBuffer()