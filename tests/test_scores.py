import pytest

from drills.scores import (
    EmptyScoreLineError,
    InvalidScoreTokenError,
    ParseScoreError,
    parse_score_line,
)


def test_parses_valid_line():
    assert parse_score_line("12, 34,56") == [12, 34, 56]


def test_handles_negative_numbers_and_spaces():
    assert parse_score_line(" -1 , 0 , 5 ") == [-1, 0, 5]


def test_errors_on_empty_input():
    with pytest.raises(EmptyScoreLineError):
        parse_score_line("   ")


def test_errors_on_invalid_token():
    with pytest.raises(InvalidScoreTokenError) as info:
        parse_score_line("10, xx, 3")
    assert info.value.token == "xx"
    assert info.value == InvalidScoreTokenError("xx")


def test_errors_share_base_class():
    with pytest.raises(ParseScoreError):
        parse_score_line("")


def test_empty_token_between_commas_is_invalid():
    with pytest.raises(InvalidScoreTokenError) as info:
        parse_score_line("1,,2")
    assert info.value.token == ""


@pytest.mark.parametrize("token", ["2147483648", "-2147483649", "1_0", "1 2", "3.5"])
def test_rejects_out_of_range_and_malformed(token):
    with pytest.raises(InvalidScoreTokenError) as info:
        parse_score_line(token)
    assert info.value.token == token


def test_accepts_int32_limits_and_plus_sign():
    assert parse_score_line("2147483647,-2147483648,+7") == [2147483647, -2147483648, 7]