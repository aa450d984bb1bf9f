# exercise_menu/models.py
"""
Domain models for the exercises.

Match outcomes and completions are closed sum types: MatchResult is a single
frozen record tagged by ResultKind (only SCHEDULED carries a payload), and
MatchCompletion is one of four frozen variants sharing a small base class.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle; width and height are not validated."""
    width: float
    height: float

    @classmethod
    def square(cls, side: float) -> "Rectangle":
        """Build a rectangle whose width and height are both side."""
        return cls(width=side, height=side)

    def area(self) -> float:
        return self.width * self.height

    def can_hold(self, inner: "Rectangle") -> bool:
        """Return True if inner fits strictly inside this rectangle on both dimensions."""
        return inner.width < self.width and inner.height < self.height


class ResultKind(Enum):
    HOME_WIN = "HomeWin"
    DRAW = "Draw"
    AWAY_WIN = "AwayWin"
    ABANDONED = "Abandoned"
    POSTPONED = "Postponed"
    SCHEDULED = "Scheduled"


@dataclass(frozen=True)
class MatchResult:
    """
    A match outcome.

    kickoff is only set for SCHEDULED results. str() gives the kickoff for
    scheduled matches and "Game Over" for everything else.
    """
    kind: ResultKind
    kickoff: Optional[str] = None

    @classmethod
    def scheduled(cls, kickoff: str) -> "MatchResult":
        return cls(kind=ResultKind.SCHEDULED, kickoff=kickoff)

    @property
    def is_scheduled(self) -> bool:
        return self.kind is ResultKind.SCHEDULED

    @property
    def is_decided(self) -> bool:
        """True for the three score-derived outcomes (home win, draw, away win)."""
        return self.kind in (ResultKind.HOME_WIN, ResultKind.DRAW, ResultKind.AWAY_WIN)

    def __str__(self) -> str:
        if self.is_scheduled:
            return self.kickoff or ""
        return "Game Over"

    def __repr__(self) -> str:
        if self.is_scheduled:
            return f'{self.kind.value}("{self.kickoff}")'
        return self.kind.value


HOME_WIN = MatchResult(ResultKind.HOME_WIN)
DRAW = MatchResult(ResultKind.DRAW)
AWAY_WIN = MatchResult(ResultKind.AWAY_WIN)
ABANDONED = MatchResult(ResultKind.ABANDONED)
POSTPONED = MatchResult(ResultKind.POSTPONED)


@dataclass(frozen=True)
class MatchScore:
    """Goals for each side at one stage of a match."""
    home: int
    away: int

    def __str__(self) -> str:
        return f"{self.home} - {self.away}"


class MatchCompletion:
    """Base for the four completion stages; never instantiated directly."""
    __slots__ = ()


@dataclass(frozen=True)
class Incomplete(MatchCompletion):
    """Match not played yet."""


@dataclass(frozen=True)
class NormalTime(MatchCompletion):
    score: MatchScore


@dataclass(frozen=True)
class ExtraTime(MatchCompletion):
    score: MatchScore
    aet: MatchScore


@dataclass(frozen=True)
class Penalties(MatchCompletion):
    score: MatchScore
    aet: MatchScore
    penalties: MatchScore


Completion = Union[Incomplete, NormalTime, ExtraTime, Penalties]


@dataclass(frozen=True)
class ArrayDetails:
    """Snapshot of mean/median/mode for one sequence."""
    mean: float
    median: float
    mode: int


@dataclass(frozen=True)
class EmployeeDetails:
    name: str
    department: str


class ActionKind(Enum):
    ADD = "Add"
    REMOVE = "Remove"
    REPEAT = "Repeat"
    DISPLAY = "Display"
    QUIT = "Quit"


@dataclass(frozen=True)
class EmployeeAction:
    """
    One parsed registry command.

    details is set for ADD/REMOVE, message for REPEAT.
    """
    kind: ActionKind
    details: Optional[EmployeeDetails] = None
    message: str = ""

    @classmethod
    def add(cls, name: str, department: str) -> "EmployeeAction":
        return cls(kind=ActionKind.ADD, details=EmployeeDetails(name=name, department=department))

    @classmethod
    def remove(cls, name: str, department: str) -> "EmployeeAction":
        return cls(kind=ActionKind.REMOVE, details=EmployeeDetails(name=name, department=department))

    @classmethod
    def repeat(cls, message: str) -> "EmployeeAction":
        return cls(kind=ActionKind.REPEAT, message=message)


DISPLAY = EmployeeAction(ActionKind.DISPLAY)
QUIT = EmployeeAction(ActionKind.QUIT)
