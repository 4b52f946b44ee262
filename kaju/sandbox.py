"""Sample client application built on the engine."""

from __future__ import annotations

from typing import Optional, Sequence

from kaju.application import Application, run_application


class Sandbox(Application):
    """The sample application."""


def create_application() -> Application:
    """Build the client application."""
    return Sandbox()


def main(argv: Optional[Sequence[str]] = None) -> int:
    run_application(create_application)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())