"""Tests for the range-checked number reader."""

import pytest

from exercise_menu.console import parse_unsigned
from exercise_menu.errors import EndOfInput


class BrokenStream:
    """Raises once, then behaves like a stream holding a single line."""

    def __init__(self, line: str) -> None:
        self._calls = 0
        self._line = line

    def readline(self) -> str:
        self._calls += 1
        if self._calls == 1:
            raise OSError("device not ready")
        return self._line


class TestReadNumber:
    def test_returns_first_valid_value(self, make_console):
        console = make_console("7")
        assert console.read_number(1, 9) == 7

    def test_accepts_inclusive_bounds(self, make_console):
        console = make_console("1", "9")
        assert console.read_number(1, 9) == 1
        assert console.read_number(1, 9) == 9

    def test_strips_surrounding_whitespace(self, make_console):
        console = make_console("  42  ")
        assert console.read_number(0, 100) == 42

    def test_retries_on_empty_and_non_numeric(self, make_console):
        console = make_console("", "abc", "-3", "2.5", "4")
        assert console.read_number(0, 9) == 4
        assert console.output_lines().count("Failed to read input") == 4

    def test_retries_when_out_of_range(self, make_console):
        console = make_console("0", "10", "5")
        assert console.read_number(1, 9) == 5
        assert console.output_lines().count("Input out of range") == 2

    def test_retries_after_read_failure(self, make_console):
        console = make_console()
        console.stdin = BrokenStream("3\n")
        assert console.read_number(1, 9) == 3
        assert "Failed to read input" in console.output_lines()

    def test_closed_input_raises(self, make_console):
        console = make_console("x")
        with pytest.raises(EndOfInput):
            console.read_number(1, 9)

    def test_prompts_before_every_attempt(self, make_console):
        console = make_console("x", "2")
        console.read_number(1, 9)
        assert console.output_lines().count("Selection: ") == 2


class TestParseUnsigned:
    @pytest.mark.parametrize("text,expected", [("0", 0), ("42", 42), ("+5", 5), ("4294967295", 4294967295)])
    def test_accepts_ascii_digits(self, text, expected):
        assert parse_unsigned(text) == expected

    @pytest.mark.parametrize("text", ["", "+", "-1", "1.0", "５", "٣", "²", "4294967296", "99999999999999999999"])
    def test_rejects_non_numbers(self, text):
        assert parse_unsigned(text) is None


def test_full_width_digit_is_not_a_number(make_console):
    console = make_console("５", "5")
    assert console.read_number(1, 9) == 5
    assert console.output_lines().count("Failed to read input") == 1


def test_value_beyond_u32_fails_to_parse(make_console):
    console = make_console("99999999999999999999", "3")
    assert console.read_number(1, 9) == 3
    lines = console.output_lines()
    assert "Failed to read input" in lines
    assert "Input out of range" not in lines


def test_leading_plus_is_accepted(make_console):
    console = make_console("+5")
    assert console.read_number(1, 9) == 5
