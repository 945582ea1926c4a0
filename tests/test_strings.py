import pytest

from pushswap.libft.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first_occurrence():
    text = "hello world"
    position = strchr(text, "o")
    assert text[position] == "o"
    assert "o" not in text[:position]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strrchr_finds_last_occurrence():
    text = "banana"
    position = strrchr(text, "a")
    assert position == len(text) - 1
    assert strrchr(text, "n") == text.rindex("n")


def test_strrchr_missing_and_nul():
    assert strrchr("banana", "x") is None
    assert strrchr("banana", "\0") == len("banana")


def test_strnstr_respects_length():
    haystack = "haystack"
    assert strnstr(haystack, "st", 5) == haystack.index("st")
    assert strnstr(haystack, "st", 4) is None


def test_strnstr_empty_needle_and_absent():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 10) is None


def test_substr_ranges():
    assert substr("hello", 1, 100) == "ello"
    assert substr("hello", 10, 2) == ""
    assert substr("hello", 0, 0) == ""
    assert substr("hello", 5, 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_concatenates():
    joined = strjoin("push", "swap")
    assert joined == "pushswap"
    assert len(joined) == len("push") + len("swap")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_everything_or_nothing():
    assert strtrim("xxx", "x") == ""
    assert strtrim("", "x") == ""
    assert strtrim(" a ", "") == " a "


def test_split_skips_empty_words():
    assert split("  42 -7  13 ", " ") == ["42", "-7", "13"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_round_trip():
    words = ["3", "1", "2"]
    assert split(" ".join(words), " ") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_maps_each_char():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    seen = []
    result = strmapi("xyz", lambda i, c: seen.append(i) or c)
    assert result == "xyz"
    assert seen == [0, 1, 2]


def test_striteri_modifies_in_place():
    buffer = list("abc")
    striteri(buffer, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert buffer == ["A", "b", "C"]


def test_strncmp_sign_and_limit():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("a", "", 1) == ord("a")
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strlcpy_truncates_and_returns_source_length():
    buffer = list("xxxx")
    assert strlcpy(buffer, "hello", 3) == len("hello")
    assert buffer == list("he")


def test_strlcpy_size_zero_leaves_dest():
    buffer = list("keep")
    assert strlcpy(buffer, "new", 0) == len("new")
    assert buffer == list("keep")


def test_strlcpy_bytearray():
    buffer = bytearray(b"old")
    strlcpy(buffer, b"data", 10)
    assert buffer == bytearray(b"data")


def test_strlcat_appends_within_size():
    buffer = list("ab")
    assert strlcat(buffer, "cdef", 5) == len("ab") + len("cdef")
    assert buffer == list("abcd")


def test_strlcat_full_destination():
    buffer = list("abcd")
    assert strlcat(buffer, "xy", 3) == 3 + len("xy")
    assert buffer == list("abcd")


def test_strlcat_enough_room():
    buffer = list("push")
    strlcat(buffer, "swap", 20)
    assert "".join(buffer) == "pushswap"