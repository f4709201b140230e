import pytest

from philo.arguments import (
    ArgumentError,
    Settings,
    is_valid_number,
    parse_arguments,
    parse_long,
)


@pytest.mark.parametrize("text", ["5", "+5", "-5", "0", "-0", "123456"])
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize("text", ["", "+", "-", "1a", "a1", " 5", "5 ", "+-5", "1.5"])
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("+7", 7),
        ("-42", -42),
        ("  \t-42abc", -42),
        ("abc", 0),
        ("", 0),
        ("12 34", 12),
    ],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


def test_parse_four_arguments():
    settings = parse_arguments(["5", "800", "200", "100"])
    assert settings == Settings(
        number_of_philosophers=5,
        time_to_die=800,
        time_to_eat=200,
        time_to_sleep=100,
        must_eat_n=0,
        count_each=False,
    )


def test_parse_five_arguments():
    settings = parse_arguments(["4", "410", "200", "200", "7"])
    assert settings.must_eat_n == 7
    assert settings.count_each is True
    assert settings.number_of_philosophers == 4


def test_signed_values_accepted():
    settings = parse_arguments(["+3", "+600", "+100", "+100"])
    assert settings.number_of_philosophers == 3
    assert settings.time_to_die == 600


def test_negative_time_to_eat_is_not_rejected():
    settings = parse_arguments(["2", "100", "-5", "100"])
    assert settings.time_to_eat == -5


def test_time_to_sleep_is_read_leniently():
    settings = parse_arguments(["2", "100", "100", "abc"])
    assert settings.time_to_sleep == 0


@pytest.mark.parametrize("count", [3, 6, 0, 1])
def test_wrong_argument_count(count):
    with pytest.raises(ArgumentError):
        parse_arguments(["1"] * count)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["-5", "800", "200", "200"],
        ["5", "-1", "200", "200"],
        ["5", "800", "200", "-1"],
        ["5", "800", "200", "200", "-3"],
        ["x", "800", "200", "200"],
        ["5", "8o0", "200", "200"],
        ["5", "800", "", "200"],
        ["2147483648", "800", "200", "200"],
    ],
)
def test_rejected_arguments(args):
    with pytest.raises(ArgumentError):
        parse_arguments(args)


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["0", "1", "1", "1"])