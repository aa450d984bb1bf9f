# exercise_menu/services/employee_service.py
"""
Employee registry driven by one-line commands.

Grammar (whitespace-separated, keywords case-insensitive):
  quit | exit                          -> stop, print nothing
  continue | display | finished        -> stop, print the registry
  repeat                               -> show usage
  add|remove <name> <department>
  add|remove <name> <ignored> <department>

The four-word form takes the department from the last word and drops the
third one; older scripts rely on that.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, List, Optional

from ..console import Console
from ..models import DISPLAY, QUIT, ActionKind, EmployeeAction, EmployeeDetails

logger = logging.getLogger(__name__)

QUIT_WORDS = ("quit", "exit")
DISPLAY_WORDS = ("continue", "display", "finished")

USAGE = (
    "Enter 'add <name> <department>' or 'remove <name> <department>'; "
    "'display' to show the company, 'quit' to leave"
)


def _parse_change(action: str, name: str, department: str) -> EmployeeAction:
    verb = action.lower()
    if verb == "add":
        return EmployeeAction.add(name, department)
    if verb == "remove":
        return EmployeeAction.remove(name, department)
    return EmployeeAction.repeat(f"Unknown action '{action}', expected add or remove")


def parse_command(line: str) -> EmployeeAction:
    """Parse one input line into an EmployeeAction."""
    words = line.split()

    if not words:
        return EmployeeAction.repeat("No command entered")

    if len(words) == 1:
        word = words[0].lower()
        if word in QUIT_WORDS:
            return QUIT
        if word in DISPLAY_WORDS:
            return DISPLAY
        if word == "repeat":
            return EmployeeAction.repeat(USAGE)
        return EmployeeAction.repeat(f"Unrecognised command '{words[0]}'")

    if len(words) == 2:
        return EmployeeAction.repeat("Insufficient data: expected a name and a department")

    if len(words) == 3:
        return _parse_change(words[0], words[1], words[2])

    if len(words) == 4:
        return _parse_change(words[0], words[1], words[3])

    return EmployeeAction.repeat("Too many words in command")


@dataclass
class Company:
    """Department -> employee names, in the order they were added."""

    departments: Dict[str, List[str]] = field(default_factory=dict)

    def add(self, details: EmployeeDetails) -> None:
        self.departments.setdefault(details.department, []).append(details.name)

    def remove(self, details: EmployeeDetails) -> bool:
        """
        Remove the first matching name from its department.

        Empty departments are dropped. Returns False if nothing matched.
        """
        names = self.departments.get(details.department)
        if not names or details.name not in names:
            return False

        names.remove(details.name)
        if not names:
            del self.departments[details.department]
        return True

    def lines(self) -> List[str]:
        """Display lines, one per department, departments sorted by name."""
        return [f"{dept}: {', '.join(names)}" for dept, names in sorted(self.departments.items())]


@dataclass
class EmployeeService:
    """Runs one registry session against a fresh Company."""

    console: Console

    def apply(self, company: Company, action: EmployeeAction) -> None:
        """Apply an ADD or REMOVE action and report the outcome."""
        details = action.details
        if details is None:
            return

        if action.kind is ActionKind.ADD:
            company.add(details)
            self.console.write(f"Added {details.name} to {details.department}")
        elif company.remove(details):
            self.console.write(f"Removed {details.name} from {details.department}")
        else:
            self.console.write(f"{details.name} is not in {details.department}")

    def run(self) -> Optional[Company]:
        """
        Read commands until display or quit.

        Returns the company for display, None for quit.
        """
        company = Company()
        self.console.write(USAGE)

        while True:
            action = parse_command(self.console.read_line())
            logger.debug("parsed %s", action)

            if action.kind is ActionKind.QUIT:
                return None

            if action.kind is ActionKind.DISPLAY:
                for line in company.lines():
                    self.console.write(line)
                return company

            if action.kind is ActionKind.REPEAT:
                self.console.write(action.message)
                continue

            self.apply(company, action)
