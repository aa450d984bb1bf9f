# exercise_menu/config.py
"""
Configuration for the exercise menu.

This module centralizes the few setup settings (timezone for the session
banner, grep resource directory, guessing game seed and log level). Everything
is read from the environment once, when AppConfig is constructed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Optional

# Repo root = .../<checkout>, resources live beside the package
PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    """Read an integer environment variable, returning default on missing/invalid values."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_log_level(name: str, default: str) -> str:
    """Read a logging level name; unknown names fall back to default."""
    raw = (os.getenv(name) or "").strip().upper()
    if raw in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
        return raw
    return default


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable app configuration.

    Notes:
      - resource_dir: grep looks file names up relative to this directory.
        Absolute names replace it entirely (no sanitization, local tool only).
      - random_seed: None means a fresh, unseeded generator per game.
    """

    tz: str = field(default_factory=lambda: os.getenv("TZ", "America/Chicago"))
    resource_dir: Path = field(
        default_factory=lambda: Path(os.getenv("RESOURCE_DIR", str(PROJECT_ROOT / "resources")))
    )
    random_seed: Optional[int] = field(default_factory=lambda: _env_int("RANDOM_SEED", None))
    log_level: str = field(default_factory=lambda: _env_log_level("LOG_LEVEL", "WARNING"))
