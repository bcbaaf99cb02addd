"""Rasterizer, topology, resource-state and sampler descriptions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class FillMode(enum.IntEnum):
    WIREFRAME = 2
    SOLID = 3


class CullMode(enum.IntEnum):
    NONE = 1
    FRONT = 2
    BACK = 3


class ConservativeRasterizationMode(enum.IntEnum):
    OFF = 0
    ON = 1


@dataclass
class RasterizerDesc:
    """How primitives are turned into pixels."""

    fill_mode: FillMode = FillMode.SOLID
    cull_mode: CullMode = CullMode.BACK
    front_counter_clockwise: bool = False
    depth_bias: int = 0
    depth_bias_clamp: float = 0.0
    slope_scaled_depth_bias: float = 0.0
    depth_clip_enable: bool = False
    multisample_enable: bool = False
    antialiased_line_enable: bool = False
    forced_sample_count: int = 0
    conservative_raster: ConservativeRasterizationMode = ConservativeRasterizationMode.OFF


class PrimitiveTopologyType(enum.IntEnum):
    UNDEFINED = 0
    POINT = 1
    LINE = 2
    TRIANGLE = 3
    PATCH = 4


class ResourceStates(enum.IntFlag):
    """States a GPU resource can be transitioned between."""

    COMMON = 0
    VERTEX_AND_CONSTANT_BUFFER = 0x1
    INDEX_BUFFER = 0x2
    RENDER_TARGET = 0x4
    UNORDERED_ACCESS = 0x8
    DEPTH_WRITE = 0x10
    DEPTH_READ = 0x20
    NON_PIXEL_SHADER_RESOURCE = 0x40
    PIXEL_SHADER_RESOURCE = 0x80
    STREAM_OUT = 0x100
    INDIRECT_ARGUMENT = 0x200
    COPY_DEST = 0x400
    COPY_SOURCE = 0x800
    RESOLVE_DEST = 0x1000
    RESOLVE_SOURCE = 0x2000
    RESERVED_INTERNAL_4000 = 0x4000
    RESERVED_INTERNAL_8000 = 0x8000
    VIDEO_DECODE_READ = 0x10000
    VIDEO_DECODE_WRITE = 0x20000
    VIDEO_PROCESS_READ = 0x40000
    VIDEO_PROCESS_WRITE = 0x80000
    RESERVED_INTERNAL_100000 = 0x100000
    VIDEO_ENCODE_READ = 0x200000
    RAYTRACING_ACCELERATION_STRUCTURE = 0x400000
    VIDEO_ENCODE_WRITE = 0x800000
    SHADING_RATE_SOURCE = 0x1000000
    RESERVED_INTERNAL_40000000 = 0x40000000
    RESERVED_INTERNAL_80000000 = 0x80000000
    READ_GENERIC = 0x1 | 0x2 | 0x40 | 0x80 | 0x200 | 0x800
    ALL_SHADER_RESOURCE = 0x40 | 0x80
    PRESENT = 0
    PREDICATION = 0x200


class SamplerFilter(enum.IntEnum):
    MIN_MAG_MIP_POINT = 0
    MIN_MAG_POINT_MIP_LINEAR = 0x1
    MIN_POINT_MAG_LINEAR_MIP_POINT = 0x4
    MIN_POINT_MAG_MIP_LINEAR = 0x5
    MIN_LINEAR_MAG_MIP_POINT = 0x10
    MIN_LINEAR_MAG_POINT_MIP_LINEAR = 0x11
    MIN_MAG_LINEAR_MIP_POINT = 0x14
    MIN_MAG_MIP_LINEAR = 0x15
    MIN_MAG_ANISOTROPIC_MIP_POINT = 0x54
    ANISOTROPIC = 0x55
    COMPARISON_MIN_MAG_MIP_POINT = 0x80
    COMPARISON_MIN_MAG_POINT_MIP_LINEAR = 0x81
    COMPARISON_MIN_POINT_MAG_LINEAR_MIP_POINT = 0x84
    COMPARISON_MIN_POINT_MAG_MIP_LINEAR = 0x85
    COMPARISON_MIN_LINEAR_MAG_MIP_POINT = 0x90
    COMPARISON_MIN_LINEAR_MAG_POINT_MIP_LINEAR = 0x91
    COMPARISON_MIN_MAG_LINEAR_MIP_POINT = 0x94
    COMPARISON_MIN_MAG_MIP_LINEAR = 0x95
    COMPARISON_MIN_MAG_ANISOTROPIC_MIP_POINT = 0xD4
    COMPARISON_ANISOTROPIC = 0xD5
    MINIMUM_MIN_MAG_MIP_POINT = 0x100
    MINIMUM_MIN_MAG_POINT_MIP_LINEAR = 0x101
    MINIMUM_MIN_POINT_MAG_LINEAR_MIP_POINT = 0x104
    MINIMUM_MIN_POINT_MAG_MIP_LINEAR = 0x105
    MINIMUM_MIN_LINEAR_MAG_MIP_POINT = 0x110
    MINIMUM_MIN_LINEAR_MAG_POINT_MIP_LINEAR = 0x111
    MINIMUM_MIN_MAG_LINEAR_MIP_POINT = 0x114
    MINIMUM_MIN_MAG_MIP_LINEAR = 0x115
    MINIMUM_MIN_MAG_ANISOTROPIC_MIP_POINT = 0x154
    MINIMUM_ANISOTROPIC = 0x155
    MAXIMUM_MIN_MAG_MIP_POINT = 0x180
    MAXIMUM_MIN_MAG_POINT_MIP_LINEAR = 0x181
    MAXIMUM_MIN_POINT_MAG_LINEAR_MIP_POINT = 0x184
    MAXIMUM_MIN_POINT_MAG_MIP_LINEAR = 0x185
    MAXIMUM_MIN_LINEAR_MAG_MIP_POINT = 0x190
    MAXIMUM_MIN_LINEAR_MAG_POINT_MIP_LINEAR = 0x191
    MAXIMUM_MIN_MAG_LINEAR_MIP_POINT = 0x194
    MAXIMUM_MIN_MAG_MIP_LINEAR = 0x195
    MAXIMUM_MIN_MAG_ANISOTROPIC_MIP_POINT = 0x1D4
    MAXIMUM_ANISOTROPIC = 0x1D5


class TextureAddressMode(enum.IntEnum):
    WRAP = 1
    MIRROR = 2
    CLAMP = 3
    BORDER = 4
    MIRROR_ONCE = 5


class ComparisonFunc(enum.IntEnum):
    NONE = 0
    NEVER = 1
    LESS = 2
    EQUAL = 3
    LESS_EQUAL = 4
    GREATER = 5
    NOT_EQUAL = 6
    GREATER_EQUAL = 7
    ALWAYS = 8


FLOAT_MAX = 3.402823466e38


@dataclass
class Sampler:
    """How a texture is filtered and addressed when sampled."""

    filter: SamplerFilter
    address_u: TextureAddressMode
    address_v: TextureAddressMode
    address_w: TextureAddressMode
    comparison_func: ComparisonFunc
    mip_lod_bias: float = field(default=0.0, kw_only=True)
    max_anisotropy: int = field(default=1, kw_only=True)
    min_lod: float = field(default=0.0, kw_only=True)
    max_lod: float = field(default=FLOAT_MAX, kw_only=True)