import pytest

from miniprintf.chars import to_upper
from miniprintf.text import split, striteri, strjoin, strmapi, strtrim, substr


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_length_is_clamped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_past_end_is_empty():
    assert substr("hello", 10, 2) == ""


def test_substr_start_at_end_is_empty():
    assert substr("hello", 5, 2) == ""


def test_substr_stops_at_nul():
    assert substr("ab\0cd", 1, 10) == "b"


@pytest.mark.parametrize("start,length", [(-1, 2), (0, -3)])
def test_substr_negative_raises(start, length):
    with pytest.raises(ValueError):
        substr("hello", start, length)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"


def test_strjoin_ignores_text_after_nul():
    assert strjoin("ab\0x", "cd\0y") == "abcd"


def test_strjoin_empty_parts():
    assert strjoin("", "") == ""
    assert strjoin("abc", "") == "abc"


def test_strtrim_both_ends():
    assert strtrim("xyhixyx", "xy") == "hi"


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_leaves_string():
    assert strtrim("  hi  ", "") == "  hi  "


def test_strtrim_empty_string():
    assert strtrim("", "abc") == ""


def test_split_skips_empty_words():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_without_separator_present():
    assert split("hello", ",") == ["hello"]


@pytest.mark.parametrize("text", ["", ",,,,"])
def test_split_no_words(text):
    assert split(text, ",") == []


def test_split_accepts_int_separator():
    assert split("a,b,,c", ord(",")) == ["a", "b", "c"]


def test_split_words_contain_no_separator():
    words = split(",,one,two,,three,", ",")
    assert all(word and "," not in word for word in words)
    assert ",".join(words) == "one,two,three"


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_split_rejects_bad_type():
    with pytest.raises(TypeError):
        split("a,b", 1.5)


def test_strmapi_maps_characters():
    assert strmapi("abc", lambda i, c: to_upper(c)) == "ABC"


def test_strmapi_passes_indices():
    seen = []

    def record(index, ch):
        seen.append(index)
        return ch

    assert strmapi("xyz", record) == "xyz"
    assert seen == [0, 1, 2]


def test_strmapi_empty():
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_modifies_in_place():
    chars = list("abc")

    def upper(index, seq):
        seq[index] = to_upper(seq[index])

    striteri(chars, upper)
    assert chars == ["A", "B", "C"]


def test_striteri_stops_at_nul():
    chars = list("ab\0c")
    calls = []

    def visit(index, seq):
        calls.append(index)
        seq[index] = to_upper(seq[index])

    striteri(chars, visit)
    assert calls == [0, 1]
    assert chars == ["A", "B", "\0", "c"]


def test_striteri_on_bytearray():
    data = bytearray(b"ab\0c")

    def upper(index, seq):
        seq[index] = to_upper(seq[index])

    striteri(data, upper)
    assert data == bytearray(b"AB\0c")