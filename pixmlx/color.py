"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations

from dataclasses import dataclass


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (shift, bit count) of the contiguous run of ones in ``mask``."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


@dataclass(frozen=True)
class VisualFormat:
    """Pixel layout of a TrueColor visual: depth and per-channel placement."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    def convert(self, color: int) -> int:
        """Turn a 0xRRGGBB colour into a pixel value for this visual.

        Visuals of depth 24 or more take the colour unchanged.
        """
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - self.red_bits)) << self.red_shift)
            + ((green >> (16 - self.green_bits)) << self.green_shift)
            + ((blue >> (16 - self.blue_bits)) << self.blue_shift)
        )


def visual_format(red_mask: int, green_mask: int, blue_mask: int, depth: int) -> VisualFormat:
    """Describe a visual from its channel masks and depth."""
    red_shift, red_bits = _mask_layout(red_mask)
    green_shift, green_bits = _mask_layout(green_mask)
    blue_shift, blue_bits = _mask_layout(blue_mask)
    return VisualFormat(
        depth=depth,
        red_shift=red_shift,
        red_bits=red_bits,
        green_shift=green_shift,
        green_bits=green_bits,
        blue_shift=blue_shift,
        blue_bits=blue_bits,
    )


TRUECOLOR_24 = visual_format(0xFF0000, 0x00FF00, 0x0000FF, 24)
"""The common 24-bit TrueColor visual."""