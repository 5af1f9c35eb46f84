"""Menu state: typed text, matching items, selection and paging."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import IO

from quickpick.matching import match_items

BUFSIZ = 8192
_TEXT_LIMIT = BUFSIZ - 1

_CONTROL_ALIASES = {
    "a": "Home",
    "b": "Left",
    "c": "Escape",
    "d": "Delete",
    "e": "End",
    "f": "Right",
    "g": "Escape",
    "h": "BackSpace",
    "i": "Tab",
    "j": "Return",
    "J": "Return",
    "m": "Return",
    "M": "Return",
    "n": "Down",
    "p": "Up",
}

_ALT_ALIASES = {
    "g": "Home",
    "G": "End",
    "h": "Up",
    "j": "Next",
    "k": "Prior",
    "l": "Down",
}

_KEYPAD = {
    "KP_Delete": "Delete",
    "KP_End": "End",
    "KP_Home": "Home",
    "KP_Left": "Left",
    "KP_Up": "Up",
    "KP_Next": "Next",
    "KP_Prior": "Prior",
    "KP_Enter": "Return",
    "KP_Right": "Right",
    "KP_Down": "Down",
}


def _is_control(char: str) -> bool:
    code = ord(char)
    return code < 32 or code == 127


def _fit(text: str) -> str:
    """Cut ``text`` to what fits in the input buffer."""
    return text.encode("utf-8")[:_TEXT_LIMIT].decode("utf-8", "ignore")


@dataclass
class Item:
    """One line of input; ``out`` marks it as already printed."""

    text: str
    out: bool = False


@dataclass(frozen=True)
class KeyResult:
    """What a key press asks of the caller.

    ``output`` is text to print, ``exit_status`` is set when the menu should
    close, and ``paste_from`` names the selection (``"primary"`` or
    ``"clipboard"``) to request for pasting.
    """

    redraw: bool = True
    output: str | None = None
    exit_status: int | None = None
    paste_from: str | None = None


_NO_REDRAW = KeyResult(redraw=False)


def read_items(stream: IO[str], lines: int) -> tuple[list[Item], int]:
    """Read one item per line from ``stream``.

    Returns the items and ``lines`` limited to the number of items read.
    """
    items = [Item(line.removesuffix("\n")) for line in stream]
    return items, min(lines, len(items))


class Menu:
    """Interactive filtering of items against typed text.

    Widths are measured with ``text_width``; ``padding`` is added to every
    measured text. With ``lines`` above zero the menu is a vertical list of
    that many rows, each ``line_height`` high; otherwise items are laid out
    horizontally after the input field.
    """

    def __init__(
        self,
        items: Iterable[Item],
        *,
        lines: int = 0,
        case_insensitive: bool = False,
        word_delimiters: str = " ",
        prompt: str | None = None,
        menu_width: int = 80,
        line_height: int = 1,
        padding: int = 0,
        text_width: Callable[[str], int] = len,
    ) -> None:
        self.items = list(items)
        self.lines = max(lines, 0)
        self.case_insensitive = case_insensitive
        self.word_delimiters = word_delimiters
        self.prompt = prompt
        self.menu_width = menu_width
        self.line_height = line_height
        self.padding = padding
        self.text_width = text_width
        self.prompt_width = (
            self._textw(prompt) - padding // 4 if prompt else 0
        )
        self.input_width = menu_width // 3

        self.text = ""
        self.cursor = 0
        self.matches: list[Item] = []
        self.page_start: int | None = None
        self.next_page: int | None = None
        self.prev_page: int | None = None
        self.selected: int | None = None
        self.match()

    # measuring

    def _textw(self, text: str) -> int:
        return self.text_width(text) + self.padding

    def _page_limit(self) -> int:
        if self.lines > 0:
            return self.lines * self.line_height
        return self.menu_width - (
            self.prompt_width + self.input_width + self._textw("<") + self._textw(">")
        )

    def _item_width(self, item: Item, limit: int) -> int:
        if self.lines > 0:
            return self.line_height
        return min(self._textw(item.text), limit)

    # matching and paging

    def match(self) -> None:
        """Recompute the matching items and reset the selection."""
        order = match_items(
            [item.text for item in self.items], self.text, self.case_insensitive
        )
        self.matches = [self.items[index] for index in order]
        self.page_start = self.selected = 0 if self.matches else None
        self.calc_offsets()

    def calc_offsets(self) -> None:
        """Find where the next and the previous page begin."""
        start = self.page_start
        if start is None:
            self.next_page = self.prev_page = None
            return
        limit = self._page_limit()

        used = 0
        following: int | None = None
        for index in range(start, len(self.matches)):
            used += self._item_width(self.matches[index], limit)
            if used > limit:
                following = index
                break
        self.next_page = following

        used = 0
        previous = start
        while previous > 0:
            used += self._item_width(self.matches[previous - 1], limit)
            if used > limit:
                break
            previous -= 1
        self.prev_page = previous

    def visible_items(self) -> list[Item]:
        """Return the matching items shown on the current page."""
        if self.page_start is None:
            return []
        end = len(self.matches) if self.next_page is None else self.next_page
        return self.matches[self.page_start:end]

    # editing

    def insert(self, text: str) -> bool:
        """Insert ``text`` at the cursor; return False when it does not fit."""
        size = len(self.text.encode("utf-8")) + len(text.encode("utf-8"))
        if size > _TEXT_LIMIT:
            return False
        self.text = self.text[: self.cursor] + text + self.text[self.cursor:]
        self.cursor += len(text)
        self.match()
        return True

    def delete(self, count: int) -> None:
        """Delete ``count`` characters before the cursor."""
        if count < 0 or count > self.cursor:
            raise ValueError(f"cannot delete {count} characters before the cursor")
        self.text = self.text[: self.cursor - count] + self.text[self.cursor:]
        self.cursor -= count
        self.match()

    def next_rune(self, inc: int) -> int:
        """Return the cursor position one character away in direction ``inc``."""
        return self.cursor + (1 if inc > 0 else -1)

    def _is_delimiter(self, char: str) -> bool:
        return char in self.word_delimiters

    def move_word_edge(self, direction: int) -> None:
        """Move the cursor to the start (negative) or end of a word."""
        text = self.text
        if direction < 0:
            while self.cursor > 0 and self._is_delimiter(text[self.cursor - 1]):
                self.cursor = self.next_rune(-1)
            while self.cursor > 0 and not self._is_delimiter(text[self.cursor - 1]):
                self.cursor = self.next_rune(-1)
        else:
            while self.cursor < len(text) and self._is_delimiter(text[self.cursor]):
                self.cursor = self.next_rune(+1)
            while self.cursor < len(text) and not self._is_delimiter(text[self.cursor]):
                self.cursor = self.next_rune(+1)

    def _delete_word(self) -> None:
        while self.cursor > 0 and self._is_delimiter(self.text[self.cursor - 1]):
            self.delete(1)
        while self.cursor > 0 and not self._is_delimiter(self.text[self.cursor - 1]):
            self.delete(1)

    def paste(self, selection: str) -> None:
        """Insert the first line of a pasted selection."""
        self.insert(selection.split("\n", 1)[0])

    # keys

    def keypress(
        self,
        key: str | None,
        text: str = "",
        control: bool = False,
        alt: bool = False,
        shift: bool = False,
    ) -> KeyResult:
        """Handle a key.

        ``key`` is a key symbol name such as ``"Return"`` or ``"a"``, or
        ``None`` when only composed ``text`` arrived from an input method.
        """
        if key is None:
            return self._insert_typed(text)

        if control:
            if key in _CONTROL_ALIASES:
                if key in "jJmM":
                    control = False
                key = _CONTROL_ALIASES[key]
            elif key == "k":
                self.text = self.text[: self.cursor]
                self.match()
            elif key == "u":
                self.delete(self.cursor)
            elif key == "w":
                self._delete_word()
            elif key in ("y", "Y"):
                return KeyResult(
                    redraw=False, paste_from="clipboard" if shift else "primary"
                )
            elif key in ("Left", "KP_Left"):
                self.move_word_edge(-1)
                return KeyResult()
            elif key in ("Right", "KP_Right"):
                self.move_word_edge(+1)
                return KeyResult()
            elif key in ("Return", "KP_Enter"):
                pass
            elif key == "bracketleft":
                return KeyResult(redraw=False, exit_status=1)
            else:
                return _NO_REDRAW
        elif alt:
            if key == "b":
                self.move_word_edge(-1)
                return KeyResult()
            if key == "f":
                self.move_word_edge(+1)
                return KeyResult()
            if key not in _ALT_ALIASES:
                return _NO_REDRAW
            key = _ALT_ALIASES[key]

        return self._dispatch(_KEYPAD.get(key, key), text, control, shift)

    def _insert_typed(self, text: str) -> KeyResult:
        if text and not _is_control(text[0]):
            self.insert(text)
        return KeyResult()

    def _dispatch(self, key: str, text: str, control: bool, shift: bool) -> KeyResult:
        last = len(self.matches) - 1 if self.matches else None

        if key == "Delete":
            if self.cursor >= len(self.text):
                return _NO_REDRAW
            self.cursor = self.next_rune(+1)
            key = "BackSpace"
        if key == "BackSpace":
            if self.cursor == 0:
                return _NO_REDRAW
            self.delete(1)
            return KeyResult()

        if key == "End":
            if self.cursor < len(self.text):
                self.cursor = len(self.text)
                return KeyResult()
            if self.next_page is not None:
                self.page_start = last
                self.calc_offsets()
                self.page_start = self.prev_page
                self.calc_offsets()
                while (
                    self.next_page is not None
                    and self.page_start is not None
                    and self.page_start < len(self.matches) - 1
                ):
                    self.page_start += 1
                    self.calc_offsets()
            self.selected = last
            return KeyResult()

        if key == "Escape":
            return KeyResult(redraw=False, exit_status=1)

        if key == "Home":
            first = 0 if self.matches else None
            if self.selected == first:
                self.cursor = 0
                return KeyResult()
            self.selected = self.page_start = first
            self.calc_offsets()
            return KeyResult()

        if key == "Left":
            if self.cursor > 0 and (
                self.selected is None or self.selected == 0 or self.lines > 0
            ):
                self.cursor = self.next_rune(-1)
                return KeyResult()
            if self.lines > 0:
                return _NO_REDRAW
            key = "Up"
        if key == "Up":
            if self.selected is not None and self.selected > 0:
                self.selected -= 1
                if self.selected + 1 == self.page_start:
                    self.page_start = self.prev_page
                    self.calc_offsets()
            return KeyResult()

        if key == "Next":
            if self.next_page is None:
                return _NO_REDRAW
            self.selected = self.page_start = self.next_page
            self.calc_offsets()
            return KeyResult()

        if key == "Prior":
            if self.prev_page is None:
                return _NO_REDRAW
            self.selected = self.page_start = self.prev_page
            self.calc_offsets()
            return KeyResult()

        if key == "Return":
            chosen = self.matches[self.selected] if self.selected is not None else None
            output = chosen.text if chosen is not None and not shift else self.text
            if not control:
                return KeyResult(output=output, exit_status=0)
            if chosen is not None:
                chosen.out = True
            return KeyResult(output=output)

        if key == "Right":
            if self.cursor < len(self.text):
                self.cursor = self.next_rune(+1)
                return KeyResult()
            if self.lines > 0:
                return _NO_REDRAW
            key = "Down"
        if key == "Down":
            if self.selected is not None and self.selected < len(self.matches) - 1:
                self.selected += 1
                if self.selected == self.next_page:
                    self.page_start = self.next_page
                    self.calc_offsets()
            return KeyResult()

        if key == "Tab":
            if self.selected is None:
                return _NO_REDRAW
            self.text = _fit(self.matches[self.selected].text)
            self.cursor = len(self.text)
            self.match()
            return KeyResult()

        return self._insert_typed(text)