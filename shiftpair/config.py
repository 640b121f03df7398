"""
Runtime settings, read from the environment.

SHIFTPAIR_MAX_SEARCH_STEPS  step cap for the odd-count backtracking search (0 = no cap)
SHIFTPAIR_MAX_PARTICIPANTS  largest participant count the HTTP API accepts
SHIFTPAIR_MAX_FAIR_PARTICIPANTS  largest odd count the HTTP API sends to bye rotation
SHIFTPAIR_LOG_LEVEL         logging level for the CLI and API
SHIFTPAIR_CORS_ORIGINS      comma-separated allowed origins for the API
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_MAX_SEARCH_STEPS = 2_000_000
DEFAULT_MAX_PARTICIPANTS = 64
# Largest odd count the bye rotation finishes within the default step cap
DEFAULT_MAX_FAIR_PARTICIPANTS = 23
DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    max_search_steps: int | None = DEFAULT_MAX_SEARCH_STEPS
    max_participants: int = DEFAULT_MAX_PARTICIPANTS
    max_fair_participants: int = DEFAULT_MAX_FAIR_PARTICIPANTS
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def get_settings() -> Settings:
    """Read settings from the environment. Called per use so tests can monkeypatch."""
    steps = _int_from_env("SHIFTPAIR_MAX_SEARCH_STEPS", DEFAULT_MAX_SEARCH_STEPS)
    origins_raw = os.environ.get("SHIFTPAIR_CORS_ORIGINS", "")
    origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip()) or DEFAULT_CORS_ORIGINS
    return Settings(
        max_search_steps=steps or None,
        max_participants=_int_from_env("SHIFTPAIR_MAX_PARTICIPANTS", DEFAULT_MAX_PARTICIPANTS),
        max_fair_participants=_int_from_env("SHIFTPAIR_MAX_FAIR_PARTICIPANTS", DEFAULT_MAX_FAIR_PARTICIPANTS),
        log_level=os.environ.get("SHIFTPAIR_LOG_LEVEL", "INFO").upper(),
        cors_origins=origins,
    )
