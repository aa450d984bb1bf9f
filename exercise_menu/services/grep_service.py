# exercise_menu/services/grep_service.py
"""
Minimal grep over a file in the resource directory.

File names are joined onto the resource directory as given; absolute paths and
".." are not rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import List

from ..console import Console
from ..errors import ResourceFileError

logger = logging.getLogger(__name__)


def read_resource(resource_dir: Path, name: str) -> str:
    """
    Read a resource file as UTF-8 text.

    Raises:
        ResourceFileError: the file is missing, unreadable or not valid UTF-8.
    """
    path = Path(resource_dir) / name
    logger.debug("reading %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ResourceFileError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ResourceFileError(path, "not valid UTF-8 text") from exc


def search(term: str, contents: str) -> List[str]:
    """Lines of contents containing term as a literal substring."""
    return [line for line in contents.splitlines() if term in line]


@dataclass
class GrepService:
    """Reads a file name and a term, echoes the file, then prints matches."""

    console: Console
    resource_dir: Path

    def run(self) -> List[str]:
        self.console.write("File name: ")
        name = self.console.read_line().strip()
        self.console.write("Search term: ")
        term = self.console.read_line().rstrip("\r\n")

        contents = read_resource(self.resource_dir, name)

        self.console.write(f"Contents of {name}:")
        for line in contents.splitlines():
            self.console.write(line)

        matches = search(term, contents)
        self.console.write(f"Lines containing '{term}':")
        for line in matches:
            self.console.write(line)
        return matches
