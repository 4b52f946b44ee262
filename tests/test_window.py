import pygame
import pytest

from kaju.events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from kaju.window import InputAction, PygameWindow, Window, WindowProps, create_window


class _HeadlessWindow(Window):
    def __init__(self, props=None):
        super().__init__(props or WindowProps())
        self.updates = 0
        self.closed = False

    def on_update(self):
        self.updates += 1

    def shutdown(self):
        self.closed = True


@pytest.fixture
def headless():
    window = _HeadlessWindow()
    events = []
    window.set_event_callback(events.append)
    return window, events


def test_props_defaults():
    props = WindowProps()
    assert (props.title, props.width, props.height) == ("Kaju Engine", 1280, 720)


def test_window_takes_props():
    window = _HeadlessWindow(WindowProps("Demo", 640, 480))
    assert (window.title, window.width, window.height) == ("Demo", 640, 480)


def test_resize_updates_size_and_emits(headless):
    window, events = headless
    window.handle_resize(800, 600)
    assert (window.width, window.height) == (800, 600)
    assert events == [WindowResizeEvent(800, 600)]


def test_close_emits(headless):
    window, events = headless
    window.handle_close()
    assert events == [WindowCloseEvent()]


def test_key_actions(headless):
    window, events = headless
    window.handle_key(65, InputAction.PRESS)
    window.handle_key(65, InputAction.REPEAT)
    window.handle_key(65, InputAction.RELEASE)
    assert events == [KeyPressedEvent(65, 0), KeyPressedEvent(65, 1), KeyReleasedEvent(65)]


def test_unknown_action_rejected(headless):
    window, events = headless
    with pytest.raises(ValueError):
        window.handle_key(65, 7)
    assert events == []
    window.handle_key(65, InputAction.PRESS)
    assert events == [KeyPressedEvent(65, 0)]


def test_mouse_buttons_ignore_repeat(headless):
    window, events = headless
    window.handle_mouse_button(1, InputAction.PRESS)
    window.handle_mouse_button(1, InputAction.REPEAT)
    window.handle_mouse_button(1, InputAction.RELEASE)
    assert events == [MouseButtonPressedEvent(1), MouseButtonReleasedEvent(1)]


def test_scroll_and_cursor(headless):
    window, events = headless
    window.handle_scroll(0, 2)
    window.handle_cursor_pos(10, 20)
    assert events == [MouseScrolledEvent(0.0, 2.0), MouseMovedEvent(10.0, 20.0)]


def test_missing_callback_raises():
    window = _HeadlessWindow(WindowProps("NoCallback", 100, 100))
    with pytest.raises(RuntimeError):
        window.handle_close()
    events = []
    window.set_event_callback(events.append)
    window.handle_close()
    assert events == [WindowCloseEvent()]


def test_vsync_flag():
    window = _HeadlessWindow(WindowProps("Vsync", 100, 100))
    window.set_vsync(True)
    assert window.vsync is True
    window.set_vsync(False)
    assert window.vsync is False
    assert window.title == "Vsync"


def test_context_manager_shuts_down():
    with _HeadlessWindow(WindowProps("Scoped", 200, 100)) as window:
        assert window.closed is False
        assert (window.width, window.height) == (200, 100)
    assert window.closed is True


@pytest.fixture
def pg_window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    window = create_window(WindowProps("Test", 320, 240))
    events = []
    window.set_event_callback(events.append)
    yield window, events
    window.shutdown()


def test_pygame_window_opens_display(pg_window):
    window, _ = pg_window
    assert isinstance(window, PygameWindow)
    assert pygame.display.get_surface().get_size() == (320, 240)
    assert window.vsync is True
    assert window.title == "Test"


def test_pygame_quit_becomes_close_event(pg_window):
    window, events = pg_window
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    window.on_update()
    assert WindowCloseEvent() in events


def test_pygame_repeated_keydown_is_repeat(pg_window):
    window, events = pg_window
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    window.on_update()
    keys = [e for e in events if isinstance(e, (KeyPressedEvent, KeyReleasedEvent))]
    assert keys == [
        KeyPressedEvent(pygame.K_a, 0),
        KeyPressedEvent(pygame.K_a, 1),
        KeyReleasedEvent(pygame.K_a),
    ]


def test_pygame_shutdown_closes_display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    window = create_window()
    assert (window.width, window.height) == (1280, 720)
    window.shutdown()
    assert pygame.display.get_init() is False