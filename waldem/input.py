"""Mouse button codes and a subscriber registry for input events."""

from __future__ import annotations

import enum
from collections import defaultdict
from typing import Callable

from waldem.events import (
    Event,
    EventType,
    KeyEvent,
    MouseButtonEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
)

Vector2 = tuple[float, float]
PressHandler = Callable[[bool], None]
VectorHandler = Callable[[Vector2], None]


class MouseButton(enum.IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    X1 = 4
    X2 = 5


def mouse_button_mask(button: int) -> int:
    """Return the bit mask for a mouse button number."""
    return 1 << (button - 1)


MOUSE_BUTTON_LMASK = mouse_button_mask(MouseButton.LEFT)
MOUSE_BUTTON_MMASK = mouse_button_mask(MouseButton.MIDDLE)
MOUSE_BUTTON_RMASK = mouse_button_mask(MouseButton.RIGHT)
MOUSE_BUTTON_X1MASK = mouse_button_mask(MouseButton.X1)
MOUSE_BUTTON_X2MASK = mouse_button_mask(MouseButton.X2)


class InputManager:
    """Forward input events to the handlers subscribed to them."""

    def __init__(self) -> None:
        self._key_handlers: defaultdict[int, list[PressHandler]] = defaultdict(list)
        self._mouse_button_handlers: defaultdict[int, list[PressHandler]] = defaultdict(list)
        self._mouse_move_handlers: list[VectorHandler] = []
        self._mouse_scroll_handlers: list[VectorHandler] = []

    def subscribe_to_key_event(self, key_code: int, handler: PressHandler) -> None:
        """Call ``handler(pressed)`` whenever ``key_code`` is pressed or released."""
        self._key_handlers[key_code].append(handler)

    def subscribe_to_mouse_button_event(self, mouse_button: int, handler: PressHandler) -> None:
        """Call ``handler(pressed)`` whenever ``mouse_button`` is pressed or released."""
        self._mouse_button_handlers[mouse_button].append(handler)

    def subscribe_to_mouse_move_event(self, handler: VectorHandler) -> None:
        """Call ``handler((x, y))`` whenever the mouse moves."""
        self._mouse_move_handlers.append(handler)

    def subscribe_to_mouse_scroll_event(self, handler: VectorHandler) -> None:
        """Call ``handler((x_offset, y_offset))`` whenever the wheel scrolls."""
        self._mouse_scroll_handlers.append(handler)

    def broadcast(self, event: Event) -> None:
        """Pass ``event`` to every handler subscribed to it."""
        match event.event_type:
            case EventType.KEY_PRESSED | EventType.KEY_RELEASED:
                assert isinstance(event, KeyEvent)
                pressed = event.event_type is EventType.KEY_PRESSED
                for handler in self._key_handlers.get(event.key_code, ()):
                    handler(pressed)
            case EventType.MOUSE_BUTTON_PRESSED | EventType.MOUSE_BUTTON_RELEASED:
                assert isinstance(event, MouseButtonEvent)
                pressed = event.event_type is EventType.MOUSE_BUTTON_PRESSED
                for handler in self._mouse_button_handlers.get(event.button, ()):
                    handler(pressed)
            case EventType.MOUSE_MOVED:
                assert isinstance(event, MouseMovedEvent)
                for handler in self._mouse_move_handlers:
                    handler((event.x, event.y))
            case EventType.MOUSE_SCROLLED:
                assert isinstance(event, MouseScrolledEvent)
                for handler in self._mouse_scroll_handlers:
                    handler((event.x_offset, event.y_offset))