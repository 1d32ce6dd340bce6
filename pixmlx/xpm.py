"""Reading XPM pixmaps into :class:`~pixmlx.image.Image` objects."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from os import PathLike

from pixmlx.colornames import NONE_COLOR, lookup_color
from pixmlx.image import Image, new_image
from pixmlx.text import find_unquoted, split_words

TRANSPARENT_PIXEL = 0xFF000000
"""Raw pixel value written for the ``None`` colour."""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


def _leading_int(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _leading_hex(text: str) -> int:
    match = _LEADING_HEX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside double-quoted strings.

    Comment characters are replaced by spaces; a line comment also
    swallows the newline that ends it.
    """
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        end = text.find("*/", begin + 2)
        if end == -1:
            raise XpmError(f"unterminated comment at offset {begin}")
        stop = end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``, in order."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _text_rgb(name: str, extra: str | None) -> int:
    if name.startswith("#"):
        return _leading_hex(name[1:])
    if extra is not None:
        name = f"{name} {extra}"
    value = lookup_color(name)
    return 0 if value is None else value


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values, got {line!r}")
    values = tuple(_leading_int(word) for word in words[:4])
    if not all(values):
        raise XpmError(f"invalid XPM header {line!r}")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    key = line[:cpp]
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without colour value: {line!r}")
    extra = words[index + 1] if index + 1 < len(words) else None
    return key, _text_rgb(words[index], extra)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM pixmap.

    The first string is the header (width, height, colour count and
    characters per pixel), followed by the colour table and one string
    per pixel row. Colours are stored raw; ``None`` becomes
    :data:`TRANSPARENT_PIXEL`.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "the header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color(_next_line(source, "the end of the colour table"), cpp)
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = new_image(width, height)
    for y in range(height):
        row = _next_line(source, "the last pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width * cpp} characters")
        for x in range(width):
            color = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            if color == NONE_COLOR:
                color = TRANSPARENT_PIXEL
            image.set_raw(x, y, color)
    return image


def xpm_to_image(xpm_data: Sequence[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and build an image from it."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))