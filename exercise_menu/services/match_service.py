# exercise_menu/services/match_service.py
"""
Match result logic.

Responsibilities:
  - derive an outcome from a score or a completion stage
  - build the schedule line (kickoff time or "Game Finished")
  - render the full "Team 1 <score> Team 2" line

The score -> outcome labels are inverted on purpose (home ahead reads "Draw",
level reads "HomeWin"); existing fixtures and output depend on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..console import Console
from ..models import (
    AWAY_WIN,
    DRAW,
    HOME_WIN,
    Completion,
    ExtraTime,
    Incomplete,
    MatchResult,
    MatchScore,
    NormalTime,
    Penalties,
    ResultKind,
)

GAME_FINISHED = "Game Finished"
KICKOFF_TIME = "15:00"


def score_result(score: MatchScore) -> MatchResult:
    """Outcome for a single score (labels inverted, see module docstring)."""
    if score.home < score.away:
        return AWAY_WIN
    if score.home > score.away:
        return DRAW
    return HOME_WIN


def deciding_score(completion: Completion) -> MatchScore | None:
    """Return the score of the last stage played, or None for unplayed matches."""
    if isinstance(completion, Penalties):
        return completion.penalties
    if isinstance(completion, ExtraTime):
        return completion.aet
    if isinstance(completion, NormalTime):
        return completion.score
    return None


def match_result(completion: Completion) -> MatchResult:
    """Unplayed matches are scheduled at 15:00; played ones use the deciding score."""
    score = deciding_score(completion)
    if score is None:
        return MatchResult.scheduled(KICKOFF_TIME)
    return score_result(score)


def game_time(completion: Completion) -> str:
    result = match_result(completion)
    if result.is_scheduled:
        return result.kickoff or ""
    return GAME_FINISHED


def _score_line(completion: Completion) -> str:
    """
    Build the score segment for a decided match.

    Examples:
      NormalTime  -> "2 - 1"
      ExtraTime   -> "2 - 2 (4 - 3 AET)"
      Penalties   -> "2 - 2 (4 - 4 AET) (5 - 1 Pen)"
    """
    if isinstance(completion, Penalties):
        return f"{completion.score} ({completion.aet} AET) ({completion.penalties} Pen)"
    if isinstance(completion, ExtraTime):
        return f"{completion.score} ({completion.aet} AET)"
    if isinstance(completion, NormalTime):
        return str(completion.score)
    return ""


def render_result(completion: Completion, result: MatchResult) -> str:
    """Render the score segment for a completion given its outcome."""
    if result.is_decided:
        return _score_line(completion)
    if result.kind is ResultKind.ABANDONED:
        return "A - A"
    if result.kind is ResultKind.POSTPONED:
        return "P - P"
    return result.kickoff or ""


def render(completion: Completion) -> str:
    """Full display line, e.g. "Team 1 2 - 1 Team 2"."""
    score_string = render_result(completion, match_result(completion))
    return f"Team 1 {score_string} Team 2"


def demo_fixtures() -> List[Tuple[str, Completion]]:
    """The labelled fixtures shown by the football demo."""
    return [
        ("Unplayed game", Incomplete()),
        ("Home win", NormalTime(score=MatchScore(2, 1))),
        ("Home win AET", ExtraTime(score=MatchScore(2, 2), aet=MatchScore(4, 3))),
        (
            "Home win PEN",
            Penalties(score=MatchScore(2, 2), aet=MatchScore(4, 4), penalties=MatchScore(5, 1)),
        ),
        ("Draw", NormalTime(score=MatchScore(0, 0))),
        ("Away win", NormalTime(score=MatchScore(0, 4))),
    ]


@dataclass
class MatchService:
    """Console demo for the match formatter."""

    console: Console

    def run(self) -> None:
        fixtures = demo_fixtures()

        self.console.write("Game Schedule:")
        for label, completion in fixtures:
            self.console.write(f"{label}: {game_time(completion)}")

        for label, completion in fixtures:
            self.console.write(f"{label}: {render(completion)}")
