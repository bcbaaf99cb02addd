"""Shaders, textures, render targets and the resources bound to pipelines."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable

from waldem.buffer import StorageBuffer
from waldem.graphic_types import Sampler
from waldem.texture_format import TextureFormat

_UINT32_SIZE = 4


class PipelineType(enum.Enum):
    GRAPHICS = 0
    COMPUTE = 1


class ResourceType(enum.IntEnum):
    CONSTANT_BUFFER = 0
    BUFFER = 1
    BUFFER_RAW = 2
    RW_BUFFER = 3
    RW_BUFFER_RAW = 4
    TEXTURE = 5
    RW_TEXTURE = 6
    SAMPLER = 7
    RENDER_TARGET = 8
    RW_RENDER_TARGET = 9
    CONSTANT = 19


class Shader(ABC):
    """A named shader program."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def compile_from_file(self, filepath: str) -> bool:
        """Compile the shader source at ``filepath``; tell whether it worked."""


class PixelShader(Shader):
    """A vertex and pixel shader pair."""

    @property
    @abstractmethod
    def vertex_shader(self) -> Any:
        """Compiled vertex stage."""

    @property
    @abstractmethod
    def pixel_shader(self) -> Any:
        """Compiled pixel stage."""


class ComputeShader(Shader):
    """A compute shader."""

    @property
    @abstractmethod
    def platform_data(self) -> Any:
        """The backend's compiled form of the shader."""


class Texture2D(ABC):
    """A two-dimensional texture."""

    def __init__(self, name: str, width: int, height: int, texture_format: TextureFormat) -> None:
        self.name = name
        self.width = width
        self.height = height
        self.format = texture_format

    @property
    @abstractmethod
    def platform_resource(self) -> Any:
        """The backend's own handle of the texture."""


class RenderTarget(Texture2D):
    """A texture that can be rendered into."""

    def __init__(self, name: str, width: int, height: int, texture_format: TextureFormat) -> None:
        super().__init__(name, width, height, texture_format)
        self.is_depth_stencil = False


@dataclass
class Resource:
    """Something bound to a shader slot: buffer, constants, textures, samplers."""

    name: str
    resource_type: ResourceType
    num_resources: int = 1
    data: Any = None
    stride: int = 0
    size: tuple[float, float] = (0.0, 0.0)
    slot: int = 0
    bound_textures: list[Texture2D] = field(default_factory=list)
    bound_buffers: list[StorageBuffer] = field(default_factory=list)
    bound_samplers: list[Sampler] = field(default_factory=list)
    bound_render_target: RenderTarget | None = None

    @classmethod
    def constant_buffer(
        cls,
        name: str,
        resource_type: ResourceType,
        data: Any,
        stride: int,
        size: float | tuple[float, float],
        slot: int,
    ) -> Resource:
        """A buffer of ``size`` bytes, or of a ``(width, height)`` extent.

        A scalar size of zero counts as one.
        """
        if isinstance(size, (int, float)):
            extent = (float(size or 1), 1.0)
        else:
            width, height = size
            extent = (float(width), float(height))
        return cls(name, resource_type, 1, data, stride, extent, slot)

    @classmethod
    def constants(
        cls, name: str, resource_type: ResourceType, num_constants: int, data: Any, slot: int
    ) -> Resource:
        """``num_constants`` 32-bit root constants."""
        return cls(
            name,
            resource_type,
            1,
            data,
            _UINT32_SIZE,
            (float(_UINT32_SIZE * num_constants), 1.0),
            slot,
        )

    @classmethod
    def textures(cls, name: str, textures: Iterable[Texture2D], slot: int) -> Resource:
        items = list(textures)
        return cls(
            name, ResourceType.TEXTURE, len(items), slot=slot, bound_textures=items
        )

    @classmethod
    def buffers(cls, name: str, buffers: Iterable[StorageBuffer], slot: int) -> Resource:
        items = list(buffers)
        return cls(name, ResourceType.BUFFER, len(items), slot=slot, bound_buffers=items)

    @classmethod
    def render_target(
        cls, name: str, render_target: RenderTarget, slot: int, uav: bool = False
    ) -> Resource:
        """A render target, read-only or, with ``uav``, writable."""
        resource_type = ResourceType.RW_RENDER_TARGET if uav else ResourceType.RENDER_TARGET
        return cls(name, resource_type, 1, slot=slot, bound_render_target=render_target)

    @classmethod
    def samplers(cls, name: str, samplers: Iterable[Sampler], slot: int) -> Resource:
        items = list(samplers)
        return cls(name, ResourceType.SAMPLER, len(items), slot=slot, bound_samplers=items)


class RootSignature(ABC):
    """The set of resources a pipeline's shaders are bound to."""

    def __init__(self) -> None:
        self.current_pipeline_type = PipelineType.GRAPHICS

    @property
    @abstractmethod
    def native_object(self) -> Any:
        """The backend's own object."""

    @abstractmethod
    def update_resource_data(self, name: str, data: Any) -> None:
        """Replace the contents of the resource called ``name``."""


class Pipeline(ABC):
    """A compiled graphics or compute pipeline."""

    def __init__(self, name: str) -> None:
        self.name = name

    @property
    @abstractmethod
    def native_object(self) -> Any:
        """The backend's own object."""