"""
config.py — Runtime configuration
==================================
Defaults live here as module constants.  Environment variables with the
VISUALIZER_ prefix override them:

    VISUALIZER_SPEED_MS        default replay interval between steps (ms)
    VISUALIZER_HISTORY_LIMIT   max graph snapshots kept for undo / redo
    VISUALIZER_LOG_LEVEL       logging level name for the web server
    VISUALIZER_SECRET_KEY      Flask session key (random per process if unset)

The Flask app loads `Config` with `app.config.from_object`.
"""

import os
import secrets

ENV_PREFIX = "VISUALIZER_"

DEFAULT_SPEED_MS = 500
DEFAULT_HISTORY_LIMIT = 100

# Speed presets (milliseconds per step)
SPEED_PRESETS = {
    "slow":   1000,    # teaching mode
    "medium": 500,
    "fast":   150,
    "turbo":  50,
}

MIN_SPEED_MS = 20


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def speed_ms() -> int:
    return max(MIN_SPEED_MS, _env_int("SPEED_MS", DEFAULT_SPEED_MS))


def history_limit() -> int:
    return max(1, _env_int("HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT))


def resolve_speed(value) -> int:
    """Turn a preset name or a number of milliseconds into milliseconds."""
    if isinstance(value, str) and value in SPEED_PRESETS:
        return SPEED_PRESETS[value]
    try:
        ms = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"Unknown speed: {value!r}") from None
    return max(MIN_SPEED_MS, ms)


class Config:
    SECRET_KEY = os.environ.get(ENV_PREFIX + "SECRET_KEY") or secrets.token_hex(32)
    LOG_LEVEL = os.environ.get(ENV_PREFIX + "LOG_LEVEL", "INFO")
    SPEED_MS = speed_ms()
    HISTORY_LIMIT = history_limit()
