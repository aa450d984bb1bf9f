# exercise_menu/errors.py
"""Error codes raised by the exercises."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ErrorCode(Enum):
    """Exercise error codes."""

    END_OF_INPUT = "END_OF_INPUT"
    EMPTY_SEQUENCE = "EMPTY_SEQUENCE"
    RESOURCE_FILE = "RESOURCE_FILE"


@dataclass(frozen=True)
class ExerciseError(Exception):
    """Base exercise error with code and user-facing message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EndOfInput(ExerciseError):
    """Raised when standard input is closed while a line is expected."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.END_OF_INPUT,
            message="Input stream closed",
        )


class EmptySequenceError(ExerciseError):
    """Raised when statistics are requested for no values."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_SEQUENCE,
            message="Cannot compute statistics of an empty sequence",
        )


class ResourceFileError(ExerciseError):
    """Raised when a grep resource file cannot be opened or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            code=ErrorCode.RESOURCE_FILE,
            message=f"Could not read {path}: {reason}",
        )
        object.__setattr__(self, "path", path)
