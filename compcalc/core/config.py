"""Application configuration primitives."""
from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _load_env(dotenv_path: Optional[Path] = None) -> None:
    """Load the .env file once for the process."""

    if getattr(_load_env, "_loaded", False):  # type: ignore[attr-defined]
        return

    load_dotenv(dotenv_path)
    setattr(_load_env, "_loaded", True)  # type: ignore[attr-defined]


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {raw!r}")
    return value


@dataclass(frozen=True)
class GoalSettings:
    """Parameters of the ARR goal simulation."""

    target_arr: float = 10_000_000.0
    assumed_win_rate: float = 0.20

    @classmethod
    def from_env(cls) -> "GoalSettings":
        """Instantiate settings using environment overrides when present."""

        defaults = cls()
        return cls(
            target_arr=_get_float("GOAL_TARGET_ARR", defaults.target_arr),
            assumed_win_rate=_get_float("GOAL_ASSUMED_WIN_RATE", defaults.assumed_win_rate),
        )


@dataclass(frozen=True)
class Settings:
    """Container for application configuration."""

    goal: GoalSettings
    currency_symbol: str = "€"
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, dotenv_path: Optional[Path] = None) -> "Settings":
        """Build ``Settings`` using environment variables (optionally from ``.env``)."""

        _load_env(dotenv_path)

        goal = GoalSettings.from_env()
        log_dir = os.getenv("LOG_DIR", "").strip()

        return cls(
            goal=goal,
            currency_symbol=os.getenv("CURRENCY_SYMBOL", "€"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=Path(log_dir) if log_dir else None,
        )


@lru_cache()
def get_settings(dotenv_path: Optional[Path] = None) -> Settings:
    """Return a cached settings instance."""

    return Settings.from_env(dotenv_path=dotenv_path)
