"""Small string helpers used when reading XPM sources."""

from __future__ import annotations

import re

_WORD_SEPARATOR = re.compile(r"[ \t]+")


def _require_needle(needle: str) -> None:
    if not needle:
        raise ValueError("search string must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Return the index of the first ``needle`` in ``text``, or -1.

    ``limit`` is the size of the region being searched; a needle longer
    than that can never match and yields -1 straight away.
    """
    _require_needle(needle)
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted spans.

    A double quote toggles the quoted state at the position where it
    occurs, so a needle that starts on an opening quote is not matched.
    """
    _require_needle(needle)
    if len(needle) > limit:
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs."""
    return [word for word in _WORD_SEPARATOR.split(text) if word]