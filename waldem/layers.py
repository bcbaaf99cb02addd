"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Any, Iterator

from waldem.events import Event


class Layer:
    """A slice of the application that is updated, drawn and fed events.

    The default hooks keep simple bookkeeping that subclasses may rely on
    or replace.
    """

    def __init__(self, name: str = "Layer", window: Any = None) -> None:
        self.name = name
        self.window = window
        self.attached = False
        self.in_frame = False
        self.elapsed = 0.0
        self.ui_frames = 0
        self.last_event: Event | None = None

    def begin(self) -> None:
        """Mark the start of the layer's frame work."""
        self.in_frame = True

    def end(self) -> None:
        """Mark the end of the layer's frame work."""
        self.in_frame = False

    def on_attach(self) -> None:
        """Record that the layer was pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Record that the layer was removed from a stack."""
        self.attached = False

    def on_update(self, delta_time: float) -> None:
        """Advance the layer's clock by ``delta_time`` seconds."""
        self.elapsed += delta_time

    def on_draw_ui(self, delta_time: float) -> None:
        """Count a user-interface frame."""
        self.ui_frames += 1

    def on_event(self, event: Event) -> None:
        """Remember the most recent event without handling it."""
        self.last_event = event


class LayerStack:
    """Ordered layers: regular layers first, overlays after them."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        """Insert ``layer`` after the other regular layers, before overlays."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        """Append ``overlay`` at the top of the stack."""
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Detach and remove ``layer`` if it is on the stack."""
        if layer in self._layers:
            layer.on_detach()
            self._layers.remove(layer)
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach and remove ``overlay`` if it is on the stack."""
        if overlay in self._layers:
            overlay.on_detach()
            self._layers.remove(overlay)

    def close(self) -> None:
        """Detach every layer and empty the stack."""
        for layer in self._layers:
            layer.on_detach()
        self._layers.clear()
        self._insert_index = 0

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)