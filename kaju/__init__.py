"""A small game engine core on pygame: a window, input events, logging and an application loop."""

__version__ = "0.1.0"
__all__ = ["application", "events", "log", "sandbox", "window"]