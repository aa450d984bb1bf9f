# exercise_menu/services/vector_service.py
"""
List manipulation demos: running sum, scheduled-game filtering, index scaling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, MutableSequence, Sequence

from ..console import Console
from ..models import ABANDONED, DRAW, HOME_WIN, POSTPONED, MatchResult


def append_sum(values: MutableSequence[int]) -> None:
    """Append the sum of all current elements to values."""
    values.append(sum(values))


class ScheduledGames(Sequence[MatchResult]):
    """
    Live view of the scheduled entries of a games list.

    Nothing is copied: every access re-reads the source list, so replacing an
    element of the source is visible through an existing view.
    """

    def __init__(self, games: Sequence[MatchResult]) -> None:
        self._games = games

    def positions(self) -> List[int]:
        """Indexes into the source list of the scheduled games, in order."""
        return [i for i, g in enumerate(self._games) if g.is_scheduled]

    def __getitem__(self, index):
        picked = [self._games[i] for i in self.positions()]
        return picked[index]

    def __len__(self) -> int:
        return len(self.positions())

    def __iter__(self) -> Iterator[MatchResult]:
        return (g for g in self._games if g.is_scheduled)

    def __repr__(self) -> str:
        return repr(list(self))


def games_to_be_played(games: Sequence[MatchResult]) -> ScheduledGames:
    return ScheduledGames(games)


def multiply_vec(values: MutableSequence[float]) -> None:
    """Scale each element by its zero-based index, in place."""
    for i, val in enumerate(values):
        values[i] = val * i


@dataclass
class VectorService:
    """Console demo for the list helpers."""

    console: Console

    def run(self) -> None:
        self.console.write("Creating vectors")

        v1: List[int] = []
        v1.append(0)
        v1.append(1)
        v1.append(2)
        append_sum(v1)
        self.console.write(f"v1: {v1}")

        v2: List[MatchResult] = [
            ABANDONED,
            POSTPONED,
            MatchResult.scheduled("15:00"),
            HOME_WIN,
            DRAW,
            MatchResult.scheduled("19:00"),
        ]

        to_be_played = games_to_be_played(v2)
        self.console.write(f"Games to be played: {to_be_played!r}")

        v2[2] = MatchResult.scheduled("15:45")
        v2[5] = HOME_WIN
        self.console.write(f"Games to be played: {to_be_played!r}")

        v3 = [0.5, 0.6, 1.4, -0.3, 7.2]
        self.console.write(f"Values in the array: {v3}")
        multiply_vec(v3)
        self.console.write(f"Modified values in the array: {v3}")
