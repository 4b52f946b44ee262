# kaju

A small game engine core built on pygame. It has:

- `kaju.window`: a window that turns resize, close, keyboard, mouse
  button, scroll and cursor input into engine events;
- `kaju.events`: event classes with a type and category flags, and an
  `EventDispatcher` that routes an event to a handler by its class;
- `kaju.log`: two named loggers, one for the engine (`KAJU`) and one for
  the application (`APP`), and assertion helpers;
- `kaju.application`: an `Application` base class whose main loop runs
  until its window is closed;
- `kaju.sandbox`: a sample application and the `kaju-sandbox` command.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Trying it

The sandbox application opens an empty, resizable 1280×720 window titled
"Kaju Engine" and logs every event it receives to standard output:

```
kaju-sandbox
```

Close the window to end the program.

## Writing an application

Subclass `Application` and hand a factory for it to `run_application`.
It sets up logging, logs "Engine is Running.", builds the application,
runs its loop and shuts the window down when the loop ends:

```python
from kaju.application import Application, run_application


class MyGame(Application):
    pass


if __name__ == "__main__":
    run_application(MyGame)
```

`Application()` creates its window with `create_window()`; you can pass a
`Window` of your own instead, e.g. `Application(window=my_window)`. Its
`on_event` method stops the loop on a `WindowCloseEvent` and logs every
event at the engine logger's trace level. `running` and `window` are
read-only properties, and an application can be used in a `with` block,
which shuts its window down on exit.

## Events

Events are blocking: each one is handled as soon as it is dispatched.
A handler takes the event and returns whether it handled it; the result
is stored in the event's `handled` attribute.

```python
from kaju.events import EventCategory, EventDispatcher, KeyPressedEvent


def on_key(event):
    print(event)          # KeyPressedEvent: 65 (0 repeats)
    return True


event = KeyPressedEvent(65, 0)
dispatcher = EventDispatcher(event)
dispatcher.dispatch(KeyPressedEvent, on_key)   # True: the types match
event.is_in_category(EventCategory.KEYBOARD)   # True
```

The event classes are `WindowResizeEvent`, `WindowCloseEvent`,
`AppTickEvent`, `AppUpdateEvent`, `AppRenderEvent`, `KeyPressedEvent`,
`KeyReleasedEvent`, `MouseMovedEvent`, `MouseScrolledEvent`,
`MouseButtonPressedEvent` and `MouseButtonReleasedEvent`, with the bases
`Event`, `KeyEvent` and `MouseButtonEvent`. Each has an `event_type`
(`EventType`), a `category` (`EventCategory` flags) and a `name`.

## Windows

`create_window(props)` returns a `PygameWindow` built from `WindowProps`
(default title "Kaju Engine", 1280×720); vsync is switched on when it is
created. `on_update()` translates pending pygame events and presents the
frame; `shutdown()` closes the display. A window is also a context manager.

The base `Window` class turns raw input into events through
`handle_resize`, `handle_close`, `handle_key`, `handle_mouse_button`,
`handle_scroll` and `handle_cursor_pos`, passing each to the callback set
with `set_event_callback`. `handle_key` and `handle_mouse_button` take an
`InputAction` (`PRESS`, `RELEASE`, `REPEAT`); a repeated key becomes a
`KeyPressedEvent` with a repeat count of 1. Emitting an event with no
callback set raises `RuntimeError`.

## Logging

```python
from kaju import log

log.init()
log.core_logger().info("engine message")
log.client_logger().info("application message")
```

`init()` sends every level, down to a custom `TRACE` level, to standard
output as `[HH:MM:SS] NAME: message`, coloured by level on a terminal.
`core_assert` and `client_assert` log an error and raise `AssertionError`
when their condition is false.

## What it does not do

There is no rendering: the window is only cleared and flipped each frame.
There are no focus or window-moved events from the window, and the
application tick, update and render events are defined but never sent.