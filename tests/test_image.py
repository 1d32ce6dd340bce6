import dataclasses

import pytest

from pixmlx.color import visual_format
from pixmlx.image import ImageType, new_image

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_layout():
    img = new_image(IM1_SX, IM1_SY)
    bpp, sl = img.bits_per_pixel, img.size_line
    assert bpp == 32
    assert sl == IM1_SX * 4
    assert len(img.data) == sl * IM1_SY
    assert img.type is ImageType.XIMAGE
    assert not any(img.data)


def test_data_addr_matches_image():
    img = new_image(IM1_SX, IM1_SY)
    addr = img.data_addr()
    assert addr.data is img.data
    assert (addr.bits_per_pixel, addr.size_line, addr.endian) == (32, img.size_line, 0)


def test_color_map_round_trip():
    img = new_image(IM1_SX, IM1_SY)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            img.put_pixel(x, y, _color_map(x, y, IM1_SX, IM1_SY))
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            assert img.get_pixel(x, y) == _color_map(x, y, IM1_SX, IM1_SY)


def test_little_endian_byte_layout():
    img = new_image(IM3_SX, IM3_SY)
    img.set_raw(1, 2, 0x11223344)
    offset = 2 * img.size_line + 4
    assert bytes(img.data[offset:offset + 4]) == b"\x44\x33\x22\x11"


def test_big_endian_byte_layout():
    base = new_image(4, 4)
    img = dataclasses.replace(base, endian=1, data=bytearray(len(base.data)))
    img.set_raw(0, 0, 0x11223344)
    assert bytes(img.data[0:4]) == b"\x11\x22\x33\x44"
    assert img.get_pixel(0, 0) == 0x11223344


def test_writes_through_data_addr_visible():
    img = new_image(2, 2)
    data = img.data_addr().data
    data[img.size_line:img.size_line + 4] = (0xABCDEF).to_bytes(4, "little")
    assert img.get_pixel(0, 1) == 0xABCDEF


def test_negative_value_wraps_to_pixel_width():
    img = new_image(1, 1)
    img.set_raw(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


def test_fill_sets_every_pixel():
    img = new_image(5, 3)
    img.fill(0xFF99FF)
    assert all(img.get_pixel(x, y) == 0xFF99FF for y in range(3) for x in range(5))


def test_sixteen_bit_visual():
    fmt = visual_format(0xF800, 0x07E0, 0x001F, 16)
    img = new_image(10, 2, fmt)
    assert img.bits_per_pixel == 16
    assert img.size_line == 20
    img.put_pixel(9, 1, 0xFFFFFF)
    assert img.get_pixel(9, 1) == 0xFFFF
    img.put_pixel(0, 0, 0xFF0000)
    assert img.get_pixel(0, 0) == 0xF800


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_bounds(x, y):
    img = new_image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 0)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize("w,h", [(0, 10), (10, 0), (-5, 5)])
def test_invalid_size(w, h):
    with pytest.raises(ValueError):
        new_image(w, h)