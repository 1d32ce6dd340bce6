import pytest

from pixmlx.colornames import COLOR_NAMES, NONE_COLOR, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("navy", 0x80),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == NONE_COLOR
    assert lookup_color("none") == -1


@pytest.mark.parametrize("name", ["SNOW", "Snow", "GhOsT WhItE", "NONE"])
def test_lookup_ignores_case(name):
    assert lookup_color(name) == lookup_color(name.lower())


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("name", ["", "no such colour", "snow5", "#ffffff", "red "])
def test_unknown_names(name):
    assert lookup_color(name) is None


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("misty rose", "mistyrose"),
        ("dark red", "darkred"),
        ("medium purple", "mediumpurple"),
    ],
)
def test_spaced_and_joined_forms_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_every_name_resolves_within_rgb_range():
    for name, _ in COLOR_NAMES:
        value = lookup_color(name)
        assert value == NONE_COLOR or 0 <= value <= 0xFFFFFF


def test_every_lookup_matches_some_table_entry():
    for name, _ in COLOR_NAMES:
        values = {v for n, v in COLOR_NAMES if n == name}
        assert lookup_color(name.upper()) in values