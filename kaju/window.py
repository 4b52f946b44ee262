"""Desktop window abstraction and its pygame-backed implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

import pygame

from kaju.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from kaju.log import core_assert, core_logger

EventCallback = Callable[[Event], None]


@dataclass
class WindowProps:
    title: str = "Kaju Engine"
    width: int = 1280
    height: int = 720


class InputAction(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Window(ABC):
    """A window that turns raw input into engine events for one callback."""

    def __init__(self, props: WindowProps) -> None:
        self._title = props.title
        self._width = props.width
        self._height = props.height
        self._vsync = False
        self._callback: Optional[EventCallback] = None

    @property
    def title(self) -> str:
        return self._title

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def vsync(self) -> bool:
        return self._vsync

    @abstractmethod
    def on_update(self) -> None:
        """Process pending input and present the frame."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release the window."""

    def set_event_callback(self, callback: EventCallback) -> None:
        self._callback = callback

    def set_vsync(self, enabled: bool) -> None:
        self._vsync = bool(enabled)

    def _emit(self, event: Event) -> None:
        if self._callback is None:
            raise RuntimeError("no event callback set on window")
        self._callback(event)

    def handle_resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._emit(WindowResizeEvent(width, height))

    def handle_close(self) -> None:
        self._emit(WindowCloseEvent())

    def handle_key(self, key: int, action: int) -> None:
        action = InputAction(action)
        if action is InputAction.PRESS:
            self._emit(KeyPressedEvent(key, 0))
        elif action is InputAction.RELEASE:
            self._emit(KeyReleasedEvent(key))
        else:
            self._emit(KeyPressedEvent(key, 1))

    def handle_mouse_button(self, button: int, action: int) -> None:
        action = InputAction(action)
        if action is InputAction.PRESS:
            self._emit(MouseButtonPressedEvent(button))
        elif action is InputAction.RELEASE:
            self._emit(MouseButtonReleasedEvent(button))

    def handle_scroll(self, x_offset: float, y_offset: float) -> None:
        self._emit(MouseScrolledEvent(float(x_offset), float(y_offset)))

    def handle_cursor_pos(self, x: float, y: float) -> None:
        self._emit(MouseMovedEvent(float(x), float(y)))

    def __enter__(self) -> "Window":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


_pygame_initialized = False
_WHEEL_BUTTONS = frozenset({4, 5})
_REPEAT_DELAY_MS = 500
_REPEAT_INTERVAL_MS = 30


def _ensure_pygame() -> None:
    global _pygame_initialized
    # pygame is initialised once per run; several windows may share it.
    if not _pygame_initialized:
        pygame.init()
        _pygame_initialized = True
    if not pygame.display.get_init():
        pygame.display.init()
    core_assert(pygame.display.get_init(), "Could not initialize pygame.")


class PygameWindow(Window):
    """Window backed by the pygame display."""

    def __init__(self, props: WindowProps) -> None:
        super().__init__(props)
        core_logger().info(
            "Creating window %s (%d, %d)", props.title, props.width, props.height
        )
        _ensure_pygame()
        self._held_keys: set[int] = set()
        self._surface = None
        pygame.display.set_caption(props.title)
        self.set_vsync(True)
        pygame.key.set_repeat(_REPEAT_DELAY_MS, _REPEAT_INTERVAL_MS)

    def _open_display(self, vsync: bool):
        size = (self.width, self.height)
        flags = pygame.RESIZABLE
        try:
            return pygame.display.set_mode(size, flags, vsync=int(vsync))
        except pygame.error as exc:
            if not vsync:
                raise
            core_logger().error("pygame error: %s", exc)
            return pygame.display.set_mode(size, flags)

    def set_vsync(self, enabled: bool) -> None:
        self._surface = self._open_display(bool(enabled))
        super().set_vsync(enabled)

    def _translate(self, event) -> None:
        kind = event.type
        if kind == pygame.QUIT:
            self.handle_close()
        elif kind == pygame.VIDEORESIZE:
            self.handle_resize(event.w, event.h)
        elif kind == pygame.KEYDOWN:
            repeated = event.key in self._held_keys
            self._held_keys.add(event.key)
            self.handle_key(event.key, InputAction.REPEAT if repeated else InputAction.PRESS)
        elif kind == pygame.KEYUP:
            self._held_keys.discard(event.key)
            self.handle_key(event.key, InputAction.RELEASE)
        elif kind == pygame.MOUSEBUTTONDOWN and event.button not in _WHEEL_BUTTONS:
            self.handle_mouse_button(event.button, InputAction.PRESS)
        elif kind == pygame.MOUSEBUTTONUP and event.button not in _WHEEL_BUTTONS:
            self.handle_mouse_button(event.button, InputAction.RELEASE)
        elif kind == pygame.MOUSEWHEEL:
            self.handle_scroll(event.x, event.y)
        elif kind == pygame.MOUSEMOTION:
            self.handle_cursor_pos(*event.pos)

    def on_update(self) -> None:
        for event in pygame.event.get():
            self._translate(event)
        pygame.display.flip()

    def shutdown(self) -> None:
        self._held_keys.clear()
        self._surface = None
        if pygame.display.get_init():
            pygame.display.quit()


def create_window(props: Optional[WindowProps] = None) -> Window:
    """Create the platform window."""
    return PygameWindow(props if props is not None else WindowProps())