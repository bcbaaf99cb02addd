"""Shader data types, vertex buffer layouts and GPU buffer interfaces."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


class ShaderDataType(enum.Enum):
    """Type of one attribute as a shader sees it."""

    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.NONE: 0,
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 8,
    ShaderDataType.FLOAT3: 12,
    ShaderDataType.FLOAT4: 16,
    ShaderDataType.MAT3: 36,
    ShaderDataType.MAT4: 64,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 8,
    ShaderDataType.INT3: 12,
    ShaderDataType.INT4: 16,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.NONE: 0,
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 9,
    ShaderDataType.MAT4: 16,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}


class UnsupportedRendererAPIError(RuntimeError):
    """The active rendering API cannot create the requested object."""


def shader_data_type_size(data_type: ShaderDataType | int) -> int:
    """Size in bytes of a value of ``data_type``; unknown types raise ValueError."""
    return _SIZES[ShaderDataType(data_type)]


@dataclass
class BufferElement:
    """One named attribute of a vertex layout."""

    type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(init=False)
    offset: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.type = ShaderDataType(self.type)
        self.size = shader_data_type_size(self.type)

    def component_count(self) -> int:
        """Number of scalar components the attribute holds."""
        return _COMPONENTS[self.type]


class BufferLayout:
    """Ordered attributes of a vertex, with their byte offsets and stride."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        self._elements = list(elements)
        self._stride = 0
        offset = 0
        for element in self._elements:
            element.offset = offset
            offset += element.size
        self._stride = offset

    @property
    def elements(self) -> list[BufferElement]:
        return list(self._elements)

    @property
    def stride(self) -> int:
        """Size in bytes of one whole vertex."""
        return self._stride

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)


class VertexBuffer(ABC):
    """A buffer of vertices living on the GPU."""

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of vertices."""


class IndexBuffer(ABC):
    """A buffer of vertex indices living on the GPU."""

    def __init__(self) -> None:
        self.indices: list[int] = []

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of indices."""


class StorageBuffer(ABC):
    """A structured buffer readable from shaders."""

    @property
    @abstractmethod
    def platform_resource(self) -> Any:
        """The backend's own handle of the buffer."""

    @classmethod
    def create(cls, data: Any, size: int) -> StorageBuffer:
        """Create a storage buffer through the active rendering API.

        No rendering API provides storage buffers, so this always raises
        UnsupportedRendererAPIError.
        """
        raise UnsupportedRendererAPIError(
            "the active rendering API does not support storage buffers"
        )