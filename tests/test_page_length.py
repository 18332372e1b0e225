import pytest

from learnersdict.page_length import format_page_length, parse_page_length


@pytest.mark.parametrize("text,expected", [("25", 25), (" 7 ", 7), ("+4", 4), ("4294967295", 4294967295)])
def test_parse_valid(text, expected):
    assert parse_page_length(text) == expected


@pytest.mark.parametrize("text", ["0", "", "abc", "-3", "1.5", "4294967296", "1_000", "unlimited"])
def test_parse_invalid_is_unlimited(text):
    assert parse_page_length(text) is None


def test_format_unlimited():
    assert format_page_length(None) == "unlimited"


def test_format_number():
    assert format_page_length(12) == "12"


@pytest.mark.parametrize("value", [None, 1, 50, 4294967295])
def test_round_trip(value):
    assert parse_page_length(format_page_length(value)) == value