"""Pytest configuration and shared fixtures."""

import io

import pytest

from exercise_menu.console import Console


class ScriptedConsole(Console):
    """Console fed from a fixed list of input lines."""

    def output(self) -> str:
        return self.stdout.getvalue()

    def output_lines(self) -> list[str]:
        return self.output().splitlines()


@pytest.fixture
def make_console():
    def _make(*lines: str) -> ScriptedConsole:
        text = "".join(f"{line}\n" for line in lines)
        return ScriptedConsole(stdin=io.StringIO(text), stdout=io.StringIO())

    return _make
