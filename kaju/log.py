"""Engine and client loggers, plus assertion helpers that report through them."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_LOGGER_NAME = "KAJU"
CLIENT_LOGGER_NAME = "APP"

_PATTERN = "[%(asctime)s] %(name)s: %(message)s"
_TIME_FORMAT = "%H:%M:%S"

_RESET = "\033[0m"
_LEVEL_COLOURS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}


class _StdoutHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stdout``."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value) -> None:
        # The target is always the live standard output.
        pass


class _ColourFormatter(logging.Formatter):
    """Colours the whole line by level when writing to a terminal."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        isatty = getattr(sys.stdout, "isatty", None)
        if isatty is not None and isatty():
            colour = _LEVEL_COLOURS.get(record.levelno, "")
            if colour:
                return f"{colour}{text}{_RESET}"
        return text


def init() -> None:
    """Configure the engine and client loggers to write every level to stdout."""
    for name in (CORE_LOGGER_NAME, CLIENT_LOGGER_NAME):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if isinstance(handler, _StdoutHandler):
                logger.removeHandler(handler)
        handler = _StdoutHandler()
        handler.setFormatter(_ColourFormatter(_PATTERN, _TIME_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(TRACE)
        logger.propagate = False


def core_logger() -> logging.Logger:
    """Return the engine's logger."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """Return the application's logger."""
    return logging.getLogger(CLIENT_LOGGER_NAME)


def _check(logger: logging.Logger, condition: object, message: str) -> None:
    if not condition:
        logger.error("Assertion Failed: %s", message)
        raise AssertionError(message)


def core_assert(condition: object, message: str) -> None:
    """Log through the engine logger and raise AssertionError if ``condition`` is false."""
    _check(core_logger(), condition, message)


def client_assert(condition: object, message: str) -> None:
    """Log through the client logger and raise AssertionError if ``condition`` is false."""
    _check(client_logger(), condition, message)