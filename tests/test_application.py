import pytest

from waldem.application import Application, SceneData, Window, WindowProps
from waldem.events import WindowCloseEvent
from waldem.layers import Layer


class FakeWindow(Window):
    def __init__(self, close_after=None):
        self.props = WindowProps()
        self.callback = None
        self.titles = []
        self.updates = 0
        self.close_after = close_after
        self._vsync = False

    def on_update(self):
        self.updates += 1
        if self.close_after is not None and self.updates >= self.close_after:
            self.callback(WindowCloseEvent())

    @property
    def width(self):
        return self.props.width

    @property
    def height(self):
        return self.props.height

    def set_event_callback(self, callback):
        self.callback = callback

    def set_vsync(self, enabled):
        self._vsync = enabled

    def set_title(self, title):
        self.titles.append(title)

    @property
    def vsync(self):
        return self._vsync


class FakeRenderer:
    def __init__(self):
        self.calls = []

    def initialize(self, window):
        self.calls.append("initialize")

    def begin(self):
        self.calls.append("begin")

    def end(self):
        self.calls.append("end")

    def present(self):
        self.calls.append("present")


class RecordingLayer(Layer):
    def __init__(self, name, log, handles=False):
        super().__init__(name)
        self.log = log
        self.handles = handles
        self.attached = False
        self.updates = 0

    def on_attach(self):
        self.attached = True

    def on_update(self, delta_time):
        self.updates += 1

    def on_event(self, event):
        self.log.append(self.name)
        if self.handles:
            event.handled = True


def make_app(window=None):
    return Application(window or FakeWindow(), FakeRenderer())


def test_window_defaults_and_size():
    props = WindowProps()
    assert props.title == "Waldem Engine"
    assert FakeWindow().size() == (1280, 720)


def test_construction_wires_window_and_renderer():
    window = FakeWindow()
    app = make_app(window)
    assert window.callback == app.on_event
    assert app.renderer.calls == ["initialize"]
    assert Application.instance is app


def test_push_attaches_and_orders_layers():
    app = make_app()
    log = []
    overlay = RecordingLayer("overlay", log)
    first = RecordingLayer("first", log)
    second = RecordingLayer("second", log)
    app.push_overlay(overlay)
    app.push_layer(first)
    app.push_layer(second)
    assert all(layer.attached for layer in (overlay, first, second))
    assert list(app.layer_stack) == [first, second, overlay]


def test_window_close_stops_running():
    app = make_app()
    event = WindowCloseEvent()
    app.on_event(event)
    assert app.is_running is False
    assert event.handled is True


def test_events_go_top_down_until_handled():
    app = make_app()
    log = []
    app.push_layer(RecordingLayer("bottom", log))
    app.push_layer(RecordingLayer("middle", log, handles=True))
    app.push_overlay(RecordingLayer("top", log))
    app.on_event(WindowCloseEvent.__new__(WindowCloseEvent) if False else _UnhandledEvent())
    assert log == ["top", "middle"]


class _UnhandledEvent:
    def __init__(self):
        self.handled = False


def test_average_fps_over_window():
    app = make_app()
    assert app.calculate_average_fps(0.5) == pytest.approx(2.0)
    for _ in range(Application.MAX_FRAMES):
        app.calculate_average_fps(0.25)
    assert app.calculate_average_fps(0.25) == pytest.approx(4.0)


def test_zero_frame_time_gives_infinite_fps():
    app = make_app()
    assert app.calculate_average_fps(0.0) == float("inf")


def test_run_frame_order_and_title():
    window = FakeWindow()
    app = make_app(window)
    layer = RecordingLayer("layer", [])
    app.push_layer(layer)
    fps = app.run_frame(0.5)
    assert fps == pytest.approx(2.0)
    assert app.delta_time == 0.5
    assert layer.updates == 1
    assert app.renderer.calls == ["initialize", "begin", "end", "present"]
    assert window.titles == ["2.00"]


def test_run_until_window_closes():
    window = FakeWindow(close_after=3)
    app = make_app(window)
    layer = RecordingLayer("layer", [])
    app.push_layer(layer)
    app.run()
    assert app.is_running is False
    assert window.updates == 3
    assert layer.updates == 3
    assert len(window.titles) == 3


def test_scene_data_holds_window():
    window = FakeWindow()
    assert SceneData(window).window is window