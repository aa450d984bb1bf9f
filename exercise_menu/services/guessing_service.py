# exercise_menu/services/guessing_service.py
"""
Guess the number.

Quirks kept from the first version of the game:
  - a new secret is drawn for every guess, not once per game
  - the secret is drawn from 1..100 while guesses are accepted from 1..101
  - the secret is revealed after each guess
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random
from typing import Optional

from ..console import Console

logger = logging.getLogger(__name__)

SECRET_MIN = 1
SECRET_MAX = 100
GUESS_MAX = 101


def compare_guess(guess: int, secret: int) -> str:
    """Return the verdict line for one guess."""
    if guess < secret:
        return "Too Small!"
    if guess > secret:
        return "Too Big!"
    return "Correct, you win!"


@dataclass
class GuessingService:
    """Plays rounds until a guess matches that round's secret."""

    console: Console
    seed: Optional[int] = None
    rng: random.Random = field(init=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def draw_secret(self) -> int:
        return self.rng.randint(SECRET_MIN, SECRET_MAX)

    def run(self) -> int:
        """Play until a correct guess; returns the number of guesses taken."""
        self.console.write("Guess the number!")

        guesses = 0
        while True:
            secret = self.draw_secret()
            guess = self.console.read_number(SECRET_MIN, GUESS_MAX)
            guesses += 1
            logger.debug("guess %d: %d vs %d", guesses, guess, secret)

            self.console.write(f"The correct answer was {secret}")
            self.console.write(compare_guess(guess, secret))
            if guess == secret:
                return guesses
