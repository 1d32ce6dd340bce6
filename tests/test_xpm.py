import pytest

from pixmlx.xpm import (
    TRANSPARENT_PIXEL,
    XpmError,
    parse_xpm,
    quoted_lines,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = [
    "3 2 3 1",
    "r c #FF0000",
    "b c blue",
    ". c None",
    "rb.",
    ".br",
]


def test_strip_block_comment_keeps_length():
    text = 'a /* note */ "b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "note" not in result
    assert result.endswith('"b"')


def test_strip_comment_inside_quotes_is_kept():
    text = '"a /* x */ b"'
    assert strip_comments(text) == text


def test_strip_line_comment_eats_newline():
    text = "a // x\nb"
    result = strip_comments(text)
    assert "//" not in result
    assert "\n" not in result
    assert result.startswith("a ")
    assert result.endswith("b")
    assert len(result) == len(text)


def test_unterminated_comment_raises():
    with pytest.raises(XpmError):
        strip_comments("a /* never closed")


def test_quoted_lines():
    assert list(quoted_lines('x "a", "b c" y "d')) == ["a", "b c"]


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF
    assert image.get_pixel(2, 0) == TRANSPARENT_PIXEL
    assert image.get_pixel(0, 1) == TRANSPARENT_PIXEL
    assert image.get_pixel(2, 1) == 0xFF0000


def test_xpm_to_image_matches_parse():
    first = xpm_to_image(SAMPLE)
    second = parse_xpm(iter(SAMPLE))
    assert first.data == second.data


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "g c light goldenrod", "g"])
    assert image.get_pixel(0, 0) == 0xFAFAD2


def test_unknown_colour_is_black():
    image = parse_xpm(["1 1 1 1", "u c nosuchcolour", "u"])
    assert image.get_pixel(0, 0) == 0


def test_wide_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.get_pixel(0, 0) == 0xFF0000


def test_narrow_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.get_pixel(0, 0) == 0xFF


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_malformed_xpm_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_file_to_image(tmp_path):
    path = tmp_path / "sample.xpm"
    body = ",\n".join(f'"{line}"' for line in SAMPLE)
    path.write_text(
        "/* XPM */\nstatic char *sample[] = {\n// header follows\n" + body + "\n};\n"
    )
    image = xpm_file_to_image(path)
    assert image.data == parse_xpm(SAMPLE).data


def test_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        xpm_file_to_image(tmp_path / "absent.xpm")