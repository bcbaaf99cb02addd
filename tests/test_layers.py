from waldem.layers import Layer, LayerStack


class RecordingLayer(Layer):
    def __init__(self, name, log):
        super().__init__(name)
        self.log = log

    def on_detach(self):
        self.log.append(self.name)


def test_default_layer_name():
    assert Layer().name == "Layer"
    assert Layer("GameLayer").name == "GameLayer"


def test_layers_stay_below_overlays():
    stack = LayerStack()
    a, b, overlay = Layer("a"), Layer("b"), Layer("overlay")
    stack.push_layer(a)
    stack.push_overlay(overlay)
    stack.push_layer(b)
    assert list(stack) == [a, b, overlay]
    assert list(reversed(stack)) == [overlay, b, a]
    assert len(stack) == 3


def test_pop_layer_detaches_and_keeps_insert_position():
    log = []
    stack = LayerStack()
    a = RecordingLayer("a", log)
    b = RecordingLayer("b", log)
    overlay = RecordingLayer("overlay", log)
    stack.push_layer(a)
    stack.push_layer(b)
    stack.push_overlay(overlay)
    stack.pop_layer(a)
    assert log == ["a"]
    c = RecordingLayer("c", log)
    stack.push_layer(c)
    assert list(stack) == [b, c, overlay]


def test_pop_overlay():
    log = []
    stack = LayerStack()
    layer = RecordingLayer("layer", log)
    overlay = RecordingLayer("overlay", log)
    stack.push_layer(layer)
    stack.push_overlay(overlay)
    stack.pop_overlay(overlay)
    assert log == ["overlay"]
    assert list(stack) == [layer]


def test_pop_missing_layer_is_ignored():
    log = []
    stack = LayerStack()
    present = RecordingLayer("present", log)
    stack.push_layer(present)
    stack.pop_layer(RecordingLayer("absent", log))
    stack.pop_overlay(RecordingLayer("absent", log))
    assert log == []
    assert list(stack) == [present]


def test_close_detaches_all_in_order():
    log = []
    stack = LayerStack()
    stack.push_layer(RecordingLayer("a", log))
    stack.push_overlay(RecordingLayer("o", log))
    stack.push_layer(RecordingLayer("b", log))
    stack.close()
    assert log == ["a", "b", "o"]
    assert len(stack) == 0


def test_context_manager_closes():
    log = []
    with LayerStack() as stack:
        stack.push_layer(RecordingLayer("a", log))
        assert len(stack) == 1
    assert log == ["a"]
    assert list(stack) == []