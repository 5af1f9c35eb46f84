"""Command-line options of the menu."""

from __future__ import annotations

import re
import sys
from collections import deque
from dataclasses import dataclass, field

from quickpick.argparsing import UsageError
from quickpick.config import MenuConfig, Scheme

VERSION = "5.3"

_USAGE = (
    "usage: quickpick [-bfiv] [-l lines] [-p prompt] [-fn font] [-m monitor]\n"
    "             [-nb color] [-nf color] [-sb color] [-sf color] [-w windowid]"
)

_COLOR_OPTIONS = {
    "-nb": (Scheme.NORM, 1),
    "-nf": (Scheme.NORM, 0),
    "-sb": (Scheme.SEL, 1),
    "-sf": (Scheme.SEL, 0),
}

_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _atoi(value: str) -> int:
    found = _INTEGER.match(value)
    return int(found.group(1)) if found else 0


@dataclass
class Options:
    """Settings taken from the command line."""

    config: MenuConfig = field(default_factory=MenuConfig)
    fast: bool = False
    case_insensitive: bool = False
    monitor: int = -1
    embed: str | None = None
    show_version: bool = False


def usage_message() -> str:
    """Return the usage text."""
    return _USAGE


def parse_args(argv: list[str] | None = None) -> Options:
    """Parse the command line (without the program name).

    ``-v`` stops parsing at once. Raises :class:`UsageError` for an unknown
    option or an option missing its argument.
    """
    pending = deque(sys.argv[1:] if argv is None else argv)
    options = Options()
    config = options.config

    while pending:
        arg = pending.popleft()
        if arg == "-v":
            options.show_version = True
            return options
        if arg == "-b":
            config.topbar = False
            continue
        if arg == "-f":
            options.fast = True
            continue
        if arg == "-i":
            options.case_insensitive = True
            continue
        if not pending:
            raise UsageError(usage_message())

        value = pending.popleft()
        if arg == "-l":
            config.lines = _atoi(value)
        elif arg == "-m":
            options.monitor = _atoi(value)
        elif arg == "-p":
            config.prompt = value
        elif arg == "-fn":
            config.fonts = (value, *config.fonts[1:])
        elif arg in _COLOR_OPTIONS:
            scheme, index = _COLOR_OPTIONS[arg]
            pair = list(config.colors[scheme])
            pair[index] = value
            config.colors[scheme] = (pair[0], pair[1])
        elif arg == "-w":
            options.embed = value
        else:
            raise UsageError(usage_message())

    return options