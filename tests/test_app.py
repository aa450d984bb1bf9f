"""Tests for the menu loop and app wiring."""

from pathlib import Path

import pytest

from app import create_app, main
from exercise_menu.config import AppConfig, PROJECT_ROOT


@pytest.fixture
def cfg(tmp_path):
    (tmp_path / "notes.txt").write_text("alpha\nbeta\n", encoding="utf-8")
    return AppConfig(
        tz="UTC",
        resource_dir=tmp_path,
        random_seed=1,
        log_level="WARNING",
    )


def test_menu_lists_every_option(cfg, make_console):
    handler = create_app(cfg, make_console())
    lines = handler.menu_lines()
    assert lines[0] == "Which menu option do you want?"
    assert [line.split(" - ")[0] for line in lines[1:]] == [str(n) for n in range(1, 10)] + ["0"]


def test_zero_exits(cfg, make_console):
    console = make_console("0")
    assert main(cfg, console) == 0
    assert console.output_lines().count("Which menu option do you want?") == 1


def test_closed_input_exits_cleanly(cfg, make_console):
    console = make_console("4")
    assert main(cfg, console) == 0
    assert "Game Schedule:" in console.output_lines()


def test_out_of_range_selection_reprompts(cfg, make_console):
    console = make_console("12", "3", "0")
    assert main(cfg, console) == 0
    lines = console.output_lines()
    assert "Input out of range" in lines
    assert any("fit inside rectangle r1" in line for line in lines)


def test_routines_run_in_sequence(cfg, make_console):
    console = make_console("2", "5", "6", "7", "8", "add Alice Eng", "display", "9", "notes.txt", "beta", "0")
    assert main(cfg, console) == 0
    lines = console.output_lines()
    assert "The area of the square is 16.0" in lines
    assert "v1: [0, 1, 2, 3]" in lines
    assert "Mode: 9" in lines
    assert "Eng: Alice" in lines
    assert lines.count("beta") == 2


def test_missing_grep_file_ends_program(cfg, make_console):
    console = make_console("9", "nope.txt", "x", "1")
    assert main(cfg, console) == 1
    assert console.output_lines()[-1].startswith("Error: Could not read")


def test_default_config(monkeypatch):
    for name in ("TZ", "RESOURCE_DIR", "RANDOM_SEED", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    cfg = AppConfig()
    assert cfg.resource_dir == PROJECT_ROOT / "resources"
    assert cfg.random_seed is None
    assert cfg.log_level == "WARNING"


def test_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("RESOURCE_DIR", str(tmp_path))
    monkeypatch.setenv("RANDOM_SEED", "42")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = AppConfig()
    assert cfg.resource_dir == Path(tmp_path)
    assert cfg.random_seed == 42
    assert cfg.log_level == "DEBUG"


def test_config_ignores_bad_values(monkeypatch):
    monkeypatch.setenv("RANDOM_SEED", "lots")
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    cfg = AppConfig()
    assert cfg.random_seed is None
    assert cfg.log_level == "WARNING"


def test_shipped_resource_exists():
    assert (PROJECT_ROOT / "resources" / "poem.txt").is_file()


def test_unplayed_fixture_kickoff_ignores_environment(cfg, make_console, monkeypatch):
    monkeypatch.setenv("KICKOFF_TIME", "19:45")
    console = make_console("4", "0")
    assert main(AppConfig(tz="UTC", resource_dir=cfg.resource_dir), console) == 0
    lines = console.output_lines()
    assert "Unplayed game: 15:00" in lines
    assert "Unplayed game: Team 1 15:00 Team 2" in lines
    assert not hasattr(cfg, "kickoff_time")


def test_session_banner_precedes_menu(cfg, make_console):
    console = make_console("0")
    assert main(cfg, console) == 0
    lines = console.output_lines()
    assert lines[0].startswith("Session started ")
    assert lines[0].endswith(" UTC")
    assert lines[1] == "Which menu option do you want?"
