"""Blocking engine events and a dispatcher that routes them by type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Callable


class EventType(IntEnum):
    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    MOUSE_BUTTON_PRESSED = 11
    MOUSE_BUTTON_RELEASED = 12
    MOUSE_MOVED = 13
    MOUSE_SCROLLED = 14

    @property
    def label(self) -> str:
        """The type's name in CamelCase, e.g. ``WindowClose``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class EventCategory(IntFlag):
    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _number(value: float) -> str:
    return f"{value:g}"


class Event:
    """Base of all events; subclasses set ``event_type`` and ``category``."""

    event_type = EventType.NONE
    category = EventCategory.NONE
    handled = False

    @property
    def name(self) -> str:
        return self.event_type.label

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category & category)

    def __str__(self) -> str:
        return self.name


class EventDispatcher:
    """Calls a handler on an event when the event is of the handler's type."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[Event], func: Callable[[Event], bool]) -> bool:
        if self._event.event_type != event_class.event_type:
            return False
        self._event.handled = bool(func(self._event))
        return True


@dataclass
class WindowResizeEvent(Event):
    width: int
    height: int

    event_type = EventType.WINDOW_RESIZE
    category = EventCategory.APPLICATION

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category = EventCategory.APPLICATION


@dataclass
class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    category = EventCategory.APPLICATION


@dataclass
class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    category = EventCategory.APPLICATION


@dataclass
class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    category = EventCategory.APPLICATION


@dataclass
class KeyEvent(Event):
    key_code: int

    category = EventCategory.KEYBOARD | EventCategory.INPUT


@dataclass
class KeyPressedEvent(KeyEvent):
    repeat_count: int

    event_type = EventType.KEY_PRESSED

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count} repeats)"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


@dataclass
class MouseMovedEvent(Event):
    x: float
    y: float

    event_type = EventType.MOUSE_MOVED
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_number(self.x)}, {_number(self.y)}"


@dataclass
class MouseScrolledEvent(Event):
    x_offset: float
    y_offset: float

    event_type = EventType.MOUSE_SCROLLED
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_number(self.x_offset)}, {_number(self.y_offset)}"


@dataclass
class MouseButtonEvent(Event):
    button: int

    category = EventCategory.MOUSE | EventCategory.INPUT


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"