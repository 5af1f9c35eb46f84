"""Fatal error reporting."""

from __future__ import annotations

from typing import NoReturn


class FatalError(Exception):
    """An error after which the program cannot go on.

    ``status`` is the exit status a command should end with.
    """

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def die(message: str, error: OSError | None = None) -> NoReturn:
    """Raise a :class:`FatalError` for ``message``.

    When ``message`` ends with a colon and ``error`` is given, the
    description of the operating-system error is appended to it.
    """
    text = message
    if message.endswith(":") and error is not None:
        reason = error.strerror or str(error)
        text = f"{message} {reason}"
    raise FatalError(text)