import pytest

from pushswap.text import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-42abc", -42),
        ("+7", 7),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("-0", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 1, -1, 2147483647, -2147483648, 1234, -98765])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_text():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("3")


def test_split_drops_empty_words():
    assert split("  a b  c ", " ") == ["a", "b", "c"]


def test_split_all_separators():
    assert split("    ", " ") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_split_join_round_trip():
    words = ["one", "two", "three"]
    assert split(" ".join(words), " ") == words


def test_strchr_first():
    assert strchr("hello", "l") == "llo"


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_terminator():
    assert strchr("hello", "\0") == ""


def test_strrchr_last():
    assert strrchr("hello", "l") == "lo"


def test_strrchr_missing():
    assert strrchr("hello", "q") is None


def test_strrchr_terminator():
    assert strrchr("hello", "\0") == ""


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_everything():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_missing_inputs():
    assert strtrim(None, "a") == ""
    assert strtrim("abc", None) == ""


def test_strtrim_empty_set():
    assert strtrim(" abc ", "") == " abc "


def test_substr():
    assert substr("hello world", 6, 5) == "world"


def test_substr_clamps_length():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_past_end():
    assert substr("hello", 10, 3) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("push", "swap") == "pushswap"
    assert strjoin("", "") == ""