from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .heap import Orientation

BUNDLED_SEED = Path(__file__).with_name("sample_players.json")

DEFAULT_HTTP_TIMEOUT_S = 10.0

_FALSEY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LeaderboardConfig:
    orientation: Orientation
    seed_source: Optional[str]
    color: bool
    log_level: str
    http_timeout_s: float = DEFAULT_HTTP_TIMEOUT_S


def _orientation_from_env() -> Orientation:
    raw = os.environ.get("LEADERBOARD_ORIENTATION", "max").strip().lower()
    try:
        return Orientation(raw)
    except ValueError:
        raise ValueError(f"LEADERBOARD_ORIENTATION must be 'max' or 'min', got {raw!r}") from None


def _log_level_from_env() -> str:
    raw = os.environ.get("LEADERBOARD_LOG_LEVEL", "WARNING").strip().upper()
    # getLevelName maps a known name to its int and anything else to "Level <x>"
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"LEADERBOARD_LOG_LEVEL must be a logging level name, got {raw!r}")
    return raw


def _http_timeout_from_env() -> float:
    raw = os.environ.get("LEADERBOARD_HTTP_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_HTTP_TIMEOUT_S
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"LEADERBOARD_HTTP_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"LEADERBOARD_HTTP_TIMEOUT must be positive, got {raw!r}")
    return timeout


def config_from_env() -> LeaderboardConfig:
    """Build the config from LEADERBOARD_* variables. Bad values raise ValueError."""
    seed_source = os.environ.get("LEADERBOARD_SEED") or None
    color = os.environ.get("LEADERBOARD_COLOR", "1").strip().lower() not in _FALSEY
    if "NO_COLOR" in os.environ:
        color = False
    return LeaderboardConfig(
        orientation=_orientation_from_env(),
        seed_source=seed_source,
        color=color,
        log_level=_log_level_from_env(),
        http_timeout_s=_http_timeout_from_env(),
    )
