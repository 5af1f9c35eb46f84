"""Parsing of single-letter command-line options."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class UsageError(Exception):
    """The command line does not follow the expected usage."""


def parse_short_options(
    argv: Iterable[str], takes_argument: Iterable[str] = ""
) -> tuple[list[tuple[str, str | None]], list[str]]:
    """Split ``argv`` (without the program name) into options and operands.

    Options are clustered single letters after a ``-``. Parsing stops at the
    first argument that is not an option, at a lone ``-``, or after ``--``.
    A letter in ``takes_argument`` consumes the rest of its cluster or, when
    that is empty, the next argument.

    Returns a list of ``(letter, value)`` pairs, ``value`` being ``None`` for
    letters without an argument, and the remaining operands.
    """
    needs_value = set(takes_argument)
    pending = deque(argv)
    options: list[tuple[str, str | None]] = []

    while pending:
        arg = pending[0]
        if not arg.startswith("-") or arg == "-":
            break
        pending.popleft()
        if arg == "--":
            break
        for position, letter in enumerate(arg[1:], start=1):
            if letter not in needs_value:
                options.append((letter, None))
                continue
            rest = arg[position + 1:]
            if rest:
                value = rest
            elif pending:
                value = pending.popleft()
            else:
                raise UsageError(f"option -{letter} requires an argument")
            options.append((letter, value))
            break

    return options, list(pending)