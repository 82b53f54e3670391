from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_APP_TITLE_ENV = "DECK_APP_TITLE"
_DECK_NAME_ENV = "DECK_NAME"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    app_title: str
    deck_name: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        app_title=_read_str_env(_APP_TITLE_ENV, "expoTestApp"),
        deck_name=_read_str_env(_DECK_NAME_ENV, "Control Deck"),
        log_level=_read_log_level("INFO"),
    )
