"""Off-screen images: a pixel buffer laid out like an X ZPixmap image."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import NamedTuple

from pixmlx.color import TRUECOLOR_24, VisualFormat

_BITMAP_PAD = 32


class ImageType(enum.IntEnum):
    """How an image is backed."""

    XIMAGE = 1
    SHM = 2
    SHM_PIXMAP = 3


class DataAddr(NamedTuple):
    """The pixel buffer of an image together with its layout."""

    data: bytearray
    bits_per_pixel: int
    size_line: int
    endian: int


def _bits_per_pixel(depth: int) -> int:
    if depth <= 8:
        return 8
    if depth <= 16:
        return 16
    return 32


@dataclass(eq=False)
class Image:
    """A width x height pixel buffer; ``endian`` is 0 for LSB first, 1 for MSB first."""

    width: int
    height: int
    visual: VisualFormat
    bits_per_pixel: int
    size_line: int
    endian: int = 0
    type: ImageType = ImageType.XIMAGE
    data: bytearray = field(default_factory=bytearray)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def data_addr(self) -> DataAddr:
        """Return the pixel buffer with bits per pixel, line size and byte order."""
        return DataAddr(self.data, self.bits_per_pixel, self.size_line, self.endian)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def _encode(self, value: int) -> bytes:
        opp = self.bytes_per_pixel
        value &= (1 << (8 * opp)) - 1
        return value.to_bytes(opp, "big" if self.endian else "little")

    def set_raw(self, x: int, y: int, color: int) -> None:
        """Store a pixel value as is, in the image's byte order."""
        offset = self._offset(x, y)
        self.data[offset:offset + self.bytes_per_pixel] = self._encode(color)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a 0xRRGGBB colour, converted for the image's visual."""
        self.set_raw(x, y, self.visual.convert(color))

    def get_pixel(self, x: int, y: int) -> int:
        """Return the raw pixel value stored at (x, y)."""
        offset = self._offset(x, y)
        raw = self.data[offset:offset + self.bytes_per_pixel]
        return int.from_bytes(raw, "big" if self.endian else "little")

    def fill(self, color: int) -> None:
        """Set every pixel to a 0xRRGGBB colour."""
        row = self._encode(self.visual.convert(color)) * self.width
        for y in range(self.height):
            start = y * self.size_line
            self.data[start:start + len(row)] = row


def new_image(width: int, height: int, fmt: VisualFormat | None = None) -> Image:
    """Create a zeroed image for the given visual (24-bit TrueColor by default)."""
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    visual = fmt if fmt is not None else TRUECOLOR_24
    bpp = _bits_per_pixel(visual.depth)
    size_line = (width * bpp + _BITMAP_PAD - 1) // _BITMAP_PAD * (_BITMAP_PAD // 8)
    return Image(
        width=width,
        height=height,
        visual=visual,
        bits_per_pixel=bpp,
        size_line=size_line,
        data=bytearray(size_line * height),
    )