# exercise_menu/handlers/menu_handler.py
"""
Handler responsible for the interactive menu loop.

Keeps app.py simple by concentrating dispatch here: print the menu, read a
selection, run the matching exercise, repeat until 0 is chosen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
import logging
from typing import Callable, Dict, List, Tuple

from dateutil import tz

from ..console import Console
from ..services import (
    EmployeeService,
    GrepService,
    GuessingService,
    MatchService,
    PigLatinService,
    RectangleService,
    StatisticsService,
    VectorService,
)

logger = logging.getLogger(__name__)

EXIT_OPTION = 0


@dataclass
class MenuHandler:
    """Maps menu numbers onto exercise routines."""

    console: Console
    guessing: GuessingService
    rectangles: RectangleService
    matches: MatchService
    vectors: VectorService
    statistics: StatisticsService
    pig_latin: PigLatinService
    employees: EmployeeService
    grep: GrepService
    tz_name: str = "America/Chicago"
    routines: Dict[int, Tuple[str, Callable[[], object]]] = field(init=False)

    def __post_init__(self) -> None:
        self.routines = {
            1: ("Play guess the number", self.guessing.run),
            2: ("Find the area of a rectangle", self.rectangles.run_area),
            3: ("Play rectangle stacking", self.rectangles.run_stacking),
            4: ("Play football", self.matches.run),
            5: ("Vectors", self.vectors.run),
            6: ("Mean, median and mode", self.statistics.run),
            7: ("Pig latin", self.pig_latin.run),
            8: ("Employee registry", self.employees.run),
            9: ("Search a file", self.grep.run),
        }

    def _now_local(self) -> datetime:
        """Return the current time in the configured timezone."""
        return datetime.now(tz=tz.gettz(self.tz_name))

    def menu_lines(self) -> List[str]:
        lines = ["Which menu option do you want?"]
        lines.extend(f"{number} - {label}" for number, (label, _) in sorted(self.routines.items()))
        lines.append(f"{EXIT_OPTION} - Exit")
        return lines

    def dispatch(self, selection: int) -> bool:
        """
        Run the routine for selection.

        Returns False when selection means exit.
        """
        entry = self.routines.get(selection)
        if entry is None:
            return False

        label, routine = entry
        logger.debug("running option %d (%s)", selection, label)
        routine()
        return True

    def run(self) -> None:
        """Loop until the exit option is chosen. EndOfInput and fatal errors propagate."""
        self.console.write(f"Session started {self._now_local():%a %b %d %H:%M %Z}")

        while True:
            for line in self.menu_lines():
                self.console.write(line)

            selection = self.console.read_number(EXIT_OPTION, max(self.routines))
            if not self.dispatch(selection):
                return
