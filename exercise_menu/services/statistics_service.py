# exercise_menu/services/statistics_service.py
"""
Mean, median and mode of an integer sequence.

Mode ties go to the value that occurs first in the input (Counter keeps
first-seen order for equal counts).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, MutableSequence, Sequence

from ..console import Console
from ..errors import EmptySequenceError
from ..models import ArrayDetails


def mean(values: Sequence[int]) -> float:
    return sum(values) / len(values)


def mode(values: Sequence[int]) -> int:
    """Most frequent value; first occurrence wins a tie."""
    value, _ = Counter(values).most_common(1)[0]
    return value


def median(sorted_values: Sequence[int]) -> float:
    """Median of an already sorted sequence."""
    n = len(sorted_values)
    mid = n // 2
    if n % 2:
        return float(sorted_values[mid])
    return (sorted_values[mid - 1] + sorted_values[mid]) / 2


def array_details(values: MutableSequence[int]) -> ArrayDetails:
    """
    Compute mean, median and mode.

    values is sorted in place as a side effect.

    Raises:
        EmptySequenceError: values is empty.
    """
    if not values:
        raise EmptySequenceError()

    most_common = mode(values)
    values.sort()
    return ArrayDetails(mean=mean(values), median=median(values), mode=most_common)


DEMO_SEQUENCES: List[List[int]] = [
    [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9],
    [-1, -1, 1, 1],
]


@dataclass
class StatisticsService:
    """Console demo for array_details."""

    console: Console

    def run(self) -> None:
        for sample in DEMO_SEQUENCES:
            values = list(sample)
            details = array_details(values)
            self.console.write(f"Values: {values}")
            self.console.write(f"Mean: {details.mean}")
            self.console.write(f"Median: {details.median}")
            self.console.write(f"Mode: {details.mode}")
