# app.py
"""
Console entrypoint for the exercise menu.

Menu options:
  1 - guess the number
  2 - rectangle area
  3 - rectangle stacking
  4 - football results
  5 - vectors
  6 - mean / median / mode
  7 - pig latin
  8 - employee registry
  9 - search a file
  0 - exit

Environment (see exercise_menu.config):
  - TZ, RESOURCE_DIR, RANDOM_SEED, LOG_LEVEL

Notes:
  - Closing stdin (Ctrl-D) exits like option 0.
  - A grep file that cannot be read ends the program with status 1.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from exercise_menu.config import AppConfig
from exercise_menu.console import Console
from exercise_menu.errors import EndOfInput, ExerciseError
from exercise_menu.handlers.menu_handler import MenuHandler
from exercise_menu.services import (
    EmployeeService,
    GrepService,
    GuessingService,
    MatchService,
    PigLatinService,
    RectangleService,
    StatisticsService,
    VectorService,
)

logger = logging.getLogger("exercise_menu")


def create_app(cfg: Optional[AppConfig] = None, console: Optional[Console] = None) -> MenuHandler:
    """
    App factory.

    Builds one service per exercise around a shared console and returns the
    menu handler that dispatches to them.
    """
    cfg = cfg or AppConfig()
    console = console or Console()

    return MenuHandler(
        console=console,
        guessing=GuessingService(console=console, seed=cfg.random_seed),
        rectangles=RectangleService(console=console),
        matches=MatchService(console=console),
        vectors=VectorService(console=console),
        statistics=StatisticsService(console=console),
        pig_latin=PigLatinService(console=console),
        employees=EmployeeService(console=console),
        grep=GrepService(console=console, resource_dir=cfg.resource_dir),
        tz_name=cfg.tz,
    )


def main(cfg: Optional[AppConfig] = None, console: Optional[Console] = None) -> int:
    """Run the menu; returns the process exit status."""
    cfg = cfg or AppConfig()
    logging.basicConfig(
        level=cfg.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    handler = create_app(cfg, console)
    try:
        handler.run()
    except EndOfInput:
        logger.debug("stdin closed, exiting")
    except ExerciseError as exc:
        logger.error("%s", exc)
        handler.console.write(f"Error: {exc.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
