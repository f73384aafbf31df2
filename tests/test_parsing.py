import pytest

from pushswap.parsing import (
    InputError,
    atol,
    is_empty_split,
    is_valid_number,
    parse_arguments,
    parse_number,
    split_arguments,
)


def test_atol_beyond_int():
    assert atol("2147483648") == 2147483648
    assert atol("-2147483649") == -2147483649


def test_atol_skips_whitespace():
    assert atol("   +15") == 15


@pytest.mark.parametrize("token", ["0", "42", "-7", "+7", "-0", "0012"])
def test_valid_numbers(token):
    assert is_valid_number(token) is True


@pytest.mark.parametrize("token", ["", "+", "-", "+-1", "1a", "a1", " 1", "1 2", "--1", "1-"])
def test_invalid_numbers(token):
    assert is_valid_number(token) is False


def test_is_empty_split():
    assert is_empty_split(None) is True
    assert is_empty_split([]) is True
    assert is_empty_split(["", ""]) is True
    assert is_empty_split(["", "1"]) is False


def test_parse_number_limits():
    assert parse_number("2147483647") == 2147483647
    assert parse_number("-2147483648") == -2147483648


@pytest.mark.parametrize("token", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_number_out_of_range(token):
    with pytest.raises(InputError):
        parse_number(token)


def test_parse_number_bad_syntax():
    with pytest.raises(InputError):
        parse_number("12x")


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_number("x")


def test_split_arguments_none():
    assert split_arguments([]) == []


def test_split_arguments_single_string():
    assert split_arguments(["3  1 2"]) == ["3", "1", "2"]


def test_split_arguments_many():
    assert split_arguments(["3", "1", "2"]) == ["3", "1", "2"]


@pytest.mark.parametrize("argv", [[""], ["    "]])
def test_split_arguments_empty_single(argv):
    with pytest.raises(InputError):
        split_arguments(argv)


def test_parse_arguments_single_and_many_agree():
    assert parse_arguments(["5 -3 0 8"]) == parse_arguments(["5", "-3", "0", "8"])
    assert parse_arguments(["5 -3 0 8"]) == [5, -3, 0, 8]


def test_parse_arguments_keeps_order():
    values = [9, -1, 4, 7, 0]
    assert parse_arguments([str(v) for v in values]) == values


def test_parse_arguments_empty():
    assert parse_arguments([]) == []


def test_parse_arguments_duplicate():
    with pytest.raises(InputError):
        parse_arguments(["1", "2", "1"])


def test_parse_arguments_duplicate_signed_zero():
    with pytest.raises(InputError):
        parse_arguments(["0 -0"])


def test_parse_arguments_space_inside_one_of_many():
    with pytest.raises(InputError):
        parse_arguments(["1 2", "3"])


def test_parse_arguments_empty_among_many():
    with pytest.raises(InputError):
        parse_arguments(["1", "", "3"])