"""Tests for mean/median/mode."""

import pytest

from exercise_menu.errors import EmptySequenceError
from exercise_menu.services.statistics_service import StatisticsService, array_details, median, mode


def test_odd_count():
    details = array_details([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9])
    assert details.mean == pytest.approx(54 / 11)
    assert details.median == 5
    assert details.mode == 9


def test_even_count_with_tied_mode():
    details = array_details([-1, -1, 1, 1])
    assert details.mean == 0
    assert details.median == 0
    assert details.mode == -1


def test_input_is_sorted_in_place():
    values = [3, 1, 2]
    array_details(values)
    assert values == [1, 2, 3]


def test_mode_tie_goes_to_first_occurrence():
    assert mode([5, 3, 3, 5]) == 5
    assert mode([3, 5, 5, 3]) == 3


def test_median_even_is_average_of_middle_pair():
    assert median([1, 2, 3, 4]) == 2.5


def test_single_value():
    details = array_details([7])
    assert (details.mean, details.median, details.mode) == (7, 7, 7)


def test_empty_sequence_raises():
    with pytest.raises(EmptySequenceError):
        array_details([])


def test_demo_output(make_console):
    console = make_console()
    StatisticsService(console=console).run()
    lines = console.output_lines()
    assert lines[0] == "Values: [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9]"
    assert "Median: 5.0" in lines
    assert "Mode: -1" in lines
