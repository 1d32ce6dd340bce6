import pytest

from pixmlx.color import TRUECOLOR_24, visual_format

W = 242
H = 242


def _color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_truecolor_layout():
    fmt = visual_format(0xFF0000, 0x00FF00, 0x0000FF, 24)
    assert (fmt.red_shift, fmt.red_bits) == (16, 8)
    assert (fmt.green_shift, fmt.green_bits) == (8, 8)
    assert (fmt.blue_shift, fmt.blue_bits) == (0, 8)
    assert fmt == TRUECOLOR_24


@pytest.mark.parametrize("x,y", [(0, 0), (241, 241), (100, 20), (5, 121)])
def test_depth_24_keeps_color(x, y):
    color = _color_map(x, y, W, H)
    assert TRUECOLOR_24.convert(color) == color


def test_rgb565_layout():
    fmt = visual_format(0xF800, 0x07E0, 0x001F, 16)
    assert (fmt.red_shift, fmt.red_bits) == (11, 5)
    assert (fmt.green_shift, fmt.green_bits) == (5, 6)
    assert (fmt.blue_shift, fmt.blue_bits) == (0, 5)


def test_rgb565_convert():
    fmt = visual_format(0xF800, 0x07E0, 0x001F, 16)
    assert fmt.convert(0xFFFFFF) == 0xFFFF
    assert fmt.convert(0xFF0000) == 0xF800
    assert fmt.convert(0x00FF00) == 0x07E0
    assert fmt.convert(0x0000FF) == 0x001F
    assert fmt.convert(0x000000) == 0


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        visual_format(0, 0xFF00, 0xFF, 24)