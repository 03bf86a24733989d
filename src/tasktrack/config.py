# src/tasktrack/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from disk or env at import time; call get_settings().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKTRACK"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_csv_path: Path

    @staticmethod
    def from_env() -> "Settings":
        data_dir = _env_path(_k("DATA_DIR"), Path("data"))

        return Settings(
            app_name=_env(_k("APP_NAME"), "tasktrack"),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            data_dir=data_dir,
            tasks_csv_path=_env_path(_k("TASKS_CSV_PATH"), data_dir / "tasks.csv"),
        )


_SETTINGS: Settings | None = None


def get_settings(*, reload: bool = False) -> Settings:
    """Process-wide settings; .env from the working dir is loaded on first use (existing env wins)."""
    global _SETTINGS
    if _SETTINGS is None or reload:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
