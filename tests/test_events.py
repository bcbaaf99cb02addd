import pytest

from waldem.events import (
    AppTickEvent,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
    bit,
)


def test_bit_shifts_one():
    assert bit(0) == 1
    assert bit(3) == EventCategory.MOUSE


def test_window_close_name_and_str():
    event = WindowCloseEvent()
    assert event.name == "WindowClose"
    assert str(event) == "WindowClose"
    assert event.event_type is EventType.WINDOW_CLOSE


def test_window_resize_str_and_size():
    event = WindowResizeEvent(1280, 720)
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert event.size == (1280, 720)
    assert event.name == "WindowResize"


def test_key_pressed_str():
    event = KeyPressedEvent(65, 2)
    assert str(event) == "KeyPressedEvent: 65 (2 repeats)"
    assert event.key_code == 65
    assert event.repeat_count == 2


def test_key_released_and_typed_str():
    assert str(KeyReleasedEvent(97)) == "KeyReleasedEvent: 97"
    assert str(KeyTypedEvent(98)) == "KeyTypedEvent: 98"


def test_mouse_event_strings():
    assert str(MouseMovedEvent(1.5, 2.25)) == "MouseMovedEvent: 1.5, 2.25"
    assert str(MouseScrolledEvent(0.0, -1.0)) == "MouseScrolledEvent: 0, -1"
    assert str(MouseButtonPressedEvent(3)) == "MouseButtonPressedEvent: 3"
    assert str(MouseButtonReleasedEvent(1)) == "MouseButtonReleasedEvent: 1"


@pytest.mark.parametrize(
    "event, inside, outside",
    [
        (WindowResizeEvent(1, 1), EventCategory.APPLICATION, EventCategory.INPUT),
        (KeyPressedEvent(1, 0), EventCategory.KEYBOARD, EventCategory.MOUSE),
        (KeyPressedEvent(1, 0), EventCategory.INPUT, EventCategory.APPLICATION),
        (MouseMovedEvent(0, 0), EventCategory.MOUSE, EventCategory.MOUSE_BUTTON),
        (MouseButtonPressedEvent(1), EventCategory.MOUSE_BUTTON, EventCategory.KEYBOARD),
        (AppTickEvent(), EventCategory.APPLICATION, EventCategory.MOUSE),
    ],
)
def test_categories(event, inside, outside):
    assert event.is_in_category(inside) is True
    assert event.is_in_category(outside) is False


def test_dispatch_matching_type_sets_handled():
    event = WindowCloseEvent()
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(WindowCloseEvent, handler) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_other_type_skips_handler():
    event = KeyPressedEvent(10, 0)
    seen = []
    result = EventDispatcher(event).dispatch(WindowCloseEvent, lambda e: seen.append(e) or True)
    assert result is False
    assert seen == []
    assert event.handled is False


def test_dispatch_overwrites_handled_with_result():
    event = WindowCloseEvent()
    event.handled = True
    EventDispatcher(event).dispatch(WindowCloseEvent, lambda e: False)
    assert event.handled is False


def test_handled_not_part_of_equality():
    a = KeyReleasedEvent(5)
    b = KeyReleasedEvent(5)
    b.handled = True
    assert a == b