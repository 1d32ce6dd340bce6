import pytest

from pixmlx.text import find, find_unquoted, split_words


def test_find_locates_needle():
    text = 'static char *x[] = { "abc" };'
    pos = find(text, '"', len(text))
    assert text[pos] == '"'
    assert '"' not in text[:pos]


def test_find_missing_needle():
    assert find("no quotes here", '"', 100) == -1


def test_find_needle_longer_than_limit():
    text = "abc*/def"
    assert find(text, "*/", 1) == -1
    assert text[find(text, "*/", 2):].startswith("*/")


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_unquoted_skips_quoted_match():
    text = '"/* not a comment */" /* real */'
    pos = find_unquoted(text, "/*", len(text))
    assert text[pos:pos + 2] == "/*"
    assert pos > text.rindex('"')


def test_find_unquoted_all_inside_quotes():
    text = '"a // b"'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_unquoted_text_matches_find():
    text = "x = 1; // comment"
    assert find_unquoted(text, "//", len(text)) == find(text, "//", len(text))


def test_find_unquoted_limit():
    assert find_unquoted("/*", "/*", 1) == -1


def test_find_unquoted_rejects_empty_needle():
    with pytest.raises(ValueError):
        find_unquoted("abc", "", 3)


def test_split_words_spaces_and_tabs():
    assert split_words("  16 7\t1 \t 1 ") == ["16", "7", "1", "1"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty_and_blank():
    assert split_words("") == []
    assert split_words(" \t ") == []


def test_split_words_round_trip():
    words = ["c", "#FF0000", "s", "none"]
    assert split_words(" ".join(words)) == words