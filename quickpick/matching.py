"""Filtering and ranking of menu items against the typed text."""

from __future__ import annotations

import string
from collections.abc import Sequence

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _normalise(text: str, case_insensitive: bool) -> str:
    """Fold ASCII case of ``text`` when matching ignores case."""
    return _fold(text) if case_insensitive else text


def cistrstr(haystack: str, needle: str) -> int:
    """Find ``needle`` in ``haystack`` ignoring ASCII case.

    Returns the index of the first occurrence, or -1 when there is none.
    """
    return _fold(haystack).find(_fold(needle))


def tokenize(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty tokens."""
    return [token for token in text.split(" ") if token]


def match_items(
    items: Sequence[str], text: str, case_insensitive: bool = False
) -> list[int]:
    """Return the indices of the items matching ``text``, best first.

    An item matches when it contains every space-separated token. Items equal
    to the whole text come first, then those starting with the first token,
    then the rest; each group keeps the input order. Empty text matches all.
    """
    tokens = [_normalise(token, case_insensitive) for token in tokenize(text)]
    whole = _normalise(text, case_insensitive)

    exact: list[int] = []
    prefix: list[int] = []
    substring: list[int] = []
    for index, item in enumerate(items):
        folded = _normalise(item, case_insensitive)
        if not all(token in folded for token in tokens):
            continue
        if not tokens or folded == whole:
            exact.append(index)
        elif folded.startswith(tokens[0]):
            prefix.append(index)
        else:
            substring.append(index)
    return exact + prefix + substring