import pytest

from sigtalk.text import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    split,
    strchr,
    strrchr,
    strtrim,
    substr,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-42abc", -42),
        ("+17", 17),
        ("\v\f\r 7", 7),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("--5", 0),
        ("12 34", 12),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_value():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)


def test_split_drops_empty_words():
    assert split(",,a,b,,c,", ",") == ["a", "b", "c"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_nul_separator_keeps_whole_text():
    assert split("hello world", "\0") == ["hello world"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_split_join_invariant():
    text = "  one two   three "
    words = split(text, " ")
    assert " ".join(words) == "one two three"
    assert all(word and " " not in word for word in words)


def test_strtrim():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim("keep", "") == "keep"


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 99, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strchr_and_strrchr():
    assert strchr("banana", "a") == 1
    assert strrchr("banana", "a") == 5
    assert strchr("banana", "z") is None
    assert strrchr("banana", "z") is None
    assert strchr("banana", "\0") == len("banana")
    assert strrchr("banana", 0) == len("banana")
    assert strchr("banana", ord("n")) == 2


def test_classifiers():
    assert is_alpha("a") and is_alpha("Z") and not is_alpha("1")
    assert is_digit("0") and is_digit("9") and not is_digit("a")
    assert is_alnum("x") and is_alnum("5") and not is_alnum("_")
    assert is_ascii(0) and is_ascii(127) and not is_ascii(128) and not is_ascii(-1)
    assert is_print(" ") and is_print("~") and not is_print(31) and not is_print(127)


def test_case_conversion():
    assert to_lower("A") == "a"
    assert to_upper("z") == "Z"
    assert to_lower("1") == "1"
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("@")) == ord("@")


def test_case_round_trip():
    for ch in "abcdefghijklmnopqrstuvwxyz":
        assert to_lower(to_upper(ch)) == ch


def test_classifier_rejects_long_string():
    with pytest.raises(ValueError):
        is_alpha("ab")