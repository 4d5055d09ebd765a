# src/memobot/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- Malformed values fall back to defaults instead of failing startup.

Environment variables (all optional):
  MEMOBOT_APP_NAME         display name (default: memobot)
  MEMOBOT_LOG_LEVEL        console log level (default: INFO)
  MEMOBOT_DATA_DIR         local data directory (default: ~/.memobot)
  MEMOBOT_TASKS_DB_PATH    SQLite file (default: <data_dir>/db.sqlite)
  MEMOBOT_SEED_ENABLED     seed a placeholder task into an empty store (default: true)
  MEMOBOT_SEED_TASK_NAME   placeholder name (default: "Add a task")
  MEMOBOT_SEED_TASK_URL    placeholder url (default: http://example.com)
  MEMOBOT_CONSOLE_ENABLED  run the console shell (default: true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "MEMOBOT"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


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

    # ---- Local data paths ----
    data_dir: Path
    tasks_db_path: Path

    # ---- Store initialization ----
    seed_enabled: bool
    seed_task_name: str
    seed_task_url: str

    # ---- Shell ----
    console_enabled: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "memobot").strip() or "memobot"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path.home() / ".memobot")
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "db.sqlite")

        seed_enabled = _env_bool(_k("SEED_ENABLED"), True)
        seed_task_name = _env(_k("SEED_TASK_NAME"), "Add a task").strip() or "Add a task"
        seed_task_url = _env(_k("SEED_TASK_URL"), "http://example.com").strip()

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            seed_enabled=seed_enabled,
            seed_task_name=seed_task_name,
            seed_task_url=seed_task_url,
            console_enabled=console_enabled,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
