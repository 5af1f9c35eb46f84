"""Default menu settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Scheme(enum.Enum):
    """Colour schemes used when drawing the menu."""

    NORM = "norm"
    SEL = "sel"
    OUT = "out"


_PARTS = {"fg": 0, "bg": 1}

_DEFAULT_FONT = "JetBrainsMono Nerd Font:size=12 , Noto Sans Arabic:size=16"

_DEFAULT_COLORS = {
    Scheme.NORM: ("#bbbbbb", "#e53212"),
    Scheme.SEL: ("#ffffff", "#f67434"),
    Scheme.OUT: ("#000000", "#2d3d5d"),
}


@dataclass
class MenuConfig:
    """Menu settings; command-line options override these defaults.

    ``colors`` maps each scheme to its ``(foreground, background)`` pair.
    ``lines`` above zero selects a vertical list of that many lines.
    """

    topbar: bool = False
    fonts: tuple[str, ...] = (_DEFAULT_FONT,)
    prompt: str | None = None
    colors: dict[Scheme, tuple[str, str]] = field(
        default_factory=lambda: dict(_DEFAULT_COLORS)
    )
    lines: int = 7
    word_delimiters: str = " "

    def color(self, scheme: Scheme, part: str) -> str:
        """Return the ``"fg"`` or ``"bg"`` colour of ``scheme``."""
        try:
            index = _PARTS[part]
        except KeyError:
            raise ValueError(f"unknown colour part: {part!r}") from None
        return self.colors[scheme][index]