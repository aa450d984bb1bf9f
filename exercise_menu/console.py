# exercise_menu/console.py
"""
Line-oriented console I/O shared by every exercise.

Routines never touch sys.stdin/sys.stdout directly; they receive a Console so
tests can drive them with in-memory streams.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import sys
from typing import Optional, TextIO

from .errors import EndOfInput

logger = logging.getLogger(__name__)

U32_MAX = 2**32 - 1


def parse_unsigned(text: str) -> Optional[int]:
    """
    Parse a 32-bit unsigned number.

    Accepts ASCII digits with an optional leading "+". Returns None for
    anything else, including values above U32_MAX.
    """
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= U32_MAX else None


@dataclass
class Console:
    """A pair of text streams with the two operations the exercises need."""

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def write(self, text: str = "") -> None:
        """Write one line of output."""
        print(text, file=self.stdout)

    def read_line(self) -> str:
        """
        Read one raw line, line terminator included.

        Raises:
            EndOfInput: the stream is closed (readline returned "").
            OSError / UnicodeDecodeError: the read itself failed.
        """
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EndOfInput()
        return line

    def read_number(self, minimum: int, maximum: int) -> int:
        """
        Prompt until a whole number within [minimum, maximum] is entered.

        Read failures, non-numeric input and out-of-range values print a
        diagnostic and re-prompt. Only EndOfInput escapes.
        """
        while True:
            self.write("Selection: ")

            try:
                raw = self.read_line()
            except (OSError, UnicodeDecodeError) as exc:
                logger.debug("read failed: %s", exc)
                self.write("Failed to read input")
                continue

            value = parse_unsigned(raw.strip())
            if value is None:
                logger.debug("not a number: %r", raw)
                self.write("Failed to read input")
                continue

            if value < minimum or value > maximum:
                logger.debug("%d outside [%d, %d]", value, minimum, maximum)
                self.write("Input out of range")
                continue

            return value
