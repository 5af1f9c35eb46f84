"""Filter file names by their properties."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterator
from dataclasses import dataclass

from quickpick.argparsing import UsageError, parse_short_options

_FLAGS = "abcdefghlpqrsuvwx"
_PATH_MAX = 4096
_USAGE = "usage: stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]"


def _seconds(st: os.stat_result) -> int:
    return st.st_mtime_ns // 1_000_000_000


def _is_symlink(path: str) -> bool:
    try:
        return stat.S_ISLNK(os.lstat(path).st_mode)
    except (OSError, ValueError):
        return False


@dataclass(frozen=True)
class FileTest:
    """A set of conditions a file must meet.

    ``flags`` holds the letters of the active tests; ``newer_than`` and
    ``older_than`` are modification times in whole seconds, or ``None``.
    """

    flags: frozenset[str] = frozenset()
    newer_than: int | None = None
    older_than: int | None = None

    def matches(self, path: str, name: str) -> bool:
        """Tell whether ``path`` passes, inverted when ``v`` is set."""
        return self._passes(path, name) != ("v" in self.flags)

    def _passes(self, path: str, name: str) -> bool:
        try:
            st = os.stat(path)
        except (OSError, ValueError):
            return False
        f = self.flags
        mode = st.st_mode
        mtime = _seconds(st)
        return all((
            "a" in f or not name.startswith("."),
            "b" not in f or stat.S_ISBLK(mode),
            "c" not in f or stat.S_ISCHR(mode),
            "d" not in f or stat.S_ISDIR(mode),
            "e" not in f or os.access(path, os.F_OK),
            "f" not in f or stat.S_ISREG(mode),
            "g" not in f or bool(mode & stat.S_ISGID),
            "h" not in f or _is_symlink(path),
            self.newer_than is None or mtime > self.newer_than,
            self.older_than is None or mtime < self.older_than,
            "p" not in f or stat.S_ISFIFO(mode),
            "r" not in f or os.access(path, os.R_OK),
            "s" not in f or st.st_size > 0,
            "u" not in f or bool(mode & stat.S_ISUID),
            "w" not in f or os.access(path, os.W_OK),
            "x" not in f or os.access(path, os.X_OK),
        ))


def parse_args(argv: list[str]) -> tuple[FileTest, list[str]]:
    """Build a :class:`FileTest` and the operands from the command line.

    A reference file for ``-n`` or ``-o`` that cannot be read is reported on
    standard error and leaves that test off.
    """
    options, operands = parse_short_options(argv, "no")
    flags: set[str] = set()
    newer: int | None = None
    older: int | None = None
    for letter, value in options:
        if letter in ("n", "o"):
            try:
                mtime: int | None = _seconds(os.stat(value))
            except OSError as exc:
                print(f"{value}: {exc.strerror}", file=sys.stderr)
                mtime = None
            if letter == "n":
                newer = mtime
            else:
                older = mtime
        elif letter in _FLAGS:
            flags.add(letter)
        else:
            raise UsageError(f"unknown option -{letter}")
    return FileTest(frozenset(flags), newer, older), operands


def _directory_entries(path: str) -> list[str] | None:
    try:
        names = os.listdir(path)
    except (OSError, ValueError):
        return None
    return [".", "..", *names]


def _candidates(test: FileTest, operands: list[str]) -> Iterator[tuple[str, str]]:
    if not operands:
        for line in sys.stdin:
            line = line.removesuffix("\n")
            yield line, line
        return
    for operand in operands:
        entries = _directory_entries(operand) if "l" in test.flags else None
        if entries is None:
            yield operand, operand
            continue
        for name in entries:
            path = f"{operand}/{name}"
            if len(os.fsencode(path)) < _PATH_MAX:
                yield path, name


def main(argv: list[str] | None = None) -> int:
    """Print the names that pass the tests; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        test, operands = parse_args(args)
    except UsageError:
        print(_USAGE, file=sys.stderr)
        return 2

    matched = False
    for path, name in _candidates(test, operands):
        if test.matches(path, name):
            if "q" in test.flags:
                return 0
            matched = True
            print(name)
    return 0 if matched else 1


if __name__ == "__main__":
    sys.exit(main())