"""The application object that owns the window and runs the main loop."""

from __future__ import annotations

from typing import Callable, Optional

from kaju.events import Event, EventDispatcher, WindowCloseEvent
from kaju.log import TRACE, core_logger, init
from kaju.window import Window, create_window


class Application:
    """Runs until its window is closed; subclass it to build a client."""

    def __init__(self, window: Optional[Window] = None) -> None:
        self._window = window if window is not None else create_window()
        self._window.set_event_callback(self.on_event)
        self._running = True

    @property
    def window(self) -> Window:
        return self._window

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        while self._running:
            self._window.on_update()

    def on_event(self, event: Event) -> None:
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_close)
        core_logger().log(TRACE, "%s", event)

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._window.shutdown()


def run_application(factory: Callable[[], Application]) -> None:
    """Set up logging, build the application with ``factory`` and run it to the end."""
    init()
    core_logger().warning("Engine is Running.")
    with factory() as application:
        application.run()