"""Runtime settings read from environment variables.

Call load_env() first if a .env file should be honoured.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .ranking import DEFAULT_LIMIT, DEFAULT_REQUIRED_YEARS

MAX_LIMIT = 100
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class Settings:
    db_path: Path = Path("data/talentmatch.db")
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    # experience baseline every match is measured against
    required_years: int = DEFAULT_REQUIRED_YEARS
    default_limit: int = DEFAULT_LIMIT
    max_limit: int = MAX_LIMIT


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _log_level_env(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def load_settings() -> Settings:
    log_dir = os.getenv("TALENTMATCH_LOG_DIR")
    return Settings(
        db_path=Path(os.getenv("TALENTMATCH_DB_PATH", "data/talentmatch.db")),
        log_level=_log_level_env("TALENTMATCH_LOG_LEVEL", "INFO"),
        log_dir=Path(log_dir) if log_dir else None,
        required_years=_int_env("TALENTMATCH_REQUIRED_YEARS", DEFAULT_REQUIRED_YEARS),
        default_limit=_int_env("TALENTMATCH_DEFAULT_LIMIT", DEFAULT_LIMIT),
        max_limit=_int_env("TALENTMATCH_MAX_LIMIT", MAX_LIMIT),
    )
