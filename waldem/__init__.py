"""Core of a small game engine: events, input, layers, transforms, cameras, culling and an application loop."""

__version__ = "0.1.0"

__all__ = [
    "application",
    "buffer",
    "camera",
    "ecs",
    "events",
    "graphic_types",
    "input",
    "keycodes",
    "layers",
    "line",
    "log",
    "mathutils",
    "resources",
    "texture_format",
    "transform",
]