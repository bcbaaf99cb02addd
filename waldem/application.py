"""The application: window, layers, scenes and the main loop."""

from __future__ import annotations

import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar

from waldem.ecs import Registry
from waldem.events import Event, EventDispatcher, WindowCloseEvent
from waldem.input import InputManager
from waldem.layers import Layer, LayerStack

EventCallback = Callable[[Event], None]


@dataclass
class WindowProps:
    """Initial title and size of a window."""

    title: str = "Waldem Engine"
    width: float = 1280
    height: float = 720


class Window(ABC):
    """A native window that pumps events to a callback."""

    @abstractmethod
    def on_update(self) -> None:
        """Process pending window events."""

    @property
    @abstractmethod
    def width(self) -> float: ...

    @property
    @abstractmethod
    def height(self) -> float: ...

    def size(self) -> tuple[float, float]:
        """Width and height of the window."""
        return (self.width, self.height)

    @abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None: ...

    @abstractmethod
    def set_vsync(self, enabled: bool) -> None: ...

    @abstractmethod
    def set_title(self, title: str) -> None: ...

    @property
    @abstractmethod
    def vsync(self) -> bool: ...


@dataclass
class SceneData:
    """What a scene is given when it is opened."""

    window: Window | None


class Scene(ABC):
    """A world that is initialized once, then updated and drawn each frame."""

    @abstractmethod
    def initialize(
        self, scene_data: SceneData, input_manager: InputManager, registry: Registry
    ) -> None: ...

    @abstractmethod
    def draw(self, delta_time: float) -> None: ...

    @abstractmethod
    def update(self, delta_time: float) -> None: ...

    @abstractmethod
    def draw_ui(self, delta_time: float) -> None: ...


class Application:
    """Owns the window, renderer and layer stack and runs the frame loop."""

    instance: ClassVar[Application | None] = None
    MAX_FRAMES = 100

    def __init__(self, window: Window, renderer: Any, ui_layer: Layer | None = None) -> None:
        Application.instance = self
        self.window = window
        self.window.set_event_callback(self.on_event)
        self.renderer = renderer
        self.renderer.initialize(window)
        self.layer_stack = LayerStack()
        self.is_running = True
        self.delta_time = 0.0
        self._frame_times: list[float] = []
        self._frame_count = 0
        self.ui_layer = ui_layer
        if ui_layer is not None:
            self.push_overlay(ui_layer)

    def push_layer(self, layer: Layer) -> None:
        self.layer_stack.push_layer(layer)
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        self.layer_stack.push_overlay(overlay)
        overlay.on_attach()

    def on_event(self, event: Event) -> None:
        """Handle window close, then pass ``event`` down from the top layer."""
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_close)
        for layer in reversed(self.layer_stack):
            layer.on_event(event)
            if event.handled:
                break

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self.is_running = False
        return True

    def calculate_average_fps(self, delta_time: float) -> float:
        """Frames per second averaged over the last hundred frames."""
        if len(self._frame_times) < self.MAX_FRAMES:
            self._frame_times.append(delta_time)
        else:
            self._frame_times[self._frame_count % self.MAX_FRAMES] = delta_time
        self._frame_count += 1
        average = sum(self._frame_times) / len(self._frame_times)
        return math.inf if average == 0 else 1.0 / average

    def run_frame(self, delta_time: float) -> float:
        """Update, draw and present one frame; return the average FPS."""
        self.delta_time = delta_time
        self.renderer.begin()
        for layer in self.layer_stack:
            layer.on_update(delta_time)
        if self.ui_layer is not None:
            self.ui_layer.begin()
        for layer in self.layer_stack:
            layer.on_draw_ui(delta_time)
        if self.ui_layer is not None:
            self.ui_layer.end()
        self.renderer.end()
        self.renderer.present()

        fps = self.calculate_average_fps(delta_time)
        self.window.set_title(f"{fps:f}"[:4])
        return fps

    def run(self) -> None:
        """Run frames until the window is closed."""
        last_frame_time = time.perf_counter()
        while self.is_running:
            self.window.on_update()
            now = time.perf_counter()
            delta_time = now - last_frame_time
            last_frame_time = now
            self.run_frame(delta_time)

    def close(self) -> None:
        """Detach every layer."""
        self.layer_stack.close()
        if Application.instance is self:
            Application.instance = None