# src/rem_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Everything has a sensible default; nothing is required to start.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "REM"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
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

    # ---- Console ----
    console_timestamps: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Rem").strip() or "Rem"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        console_timestamps = _env_bool(_k("CONSOLE_TIMESTAMPS"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/rem"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_timestamps=console_timestamps,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            log_dir=log_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
