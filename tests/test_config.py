# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from memobot.config import Settings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "MEMOBOT_APP_NAME",
        "MEMOBOT_LOG_LEVEL",
        "MEMOBOT_DATA_DIR",
        "MEMOBOT_TASKS_DB_PATH",
        "MEMOBOT_SEED_ENABLED",
        "MEMOBOT_SEED_TASK_NAME",
        "MEMOBOT_SEED_TASK_URL",
        "MEMOBOT_CONSOLE_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()

    assert s.app_name == "memobot"
    assert s.log_level == "INFO"
    assert s.data_dir == Path.home() / ".memobot"
    assert s.tasks_db_path == s.data_dir / "db.sqlite"
    assert s.seed_enabled is True
    assert s.seed_task_name == "Add a task"
    assert s.seed_task_url == "http://example.com"
    assert s.console_enabled is True


def test_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("MEMOBOT_DATA_DIR", str(tmp_path))
    clean_env.setenv("MEMOBOT_LOG_LEVEL", "debug")
    clean_env.setenv("MEMOBOT_SEED_ENABLED", "no")
    clean_env.setenv("MEMOBOT_CONSOLE_ENABLED", "0")

    s = Settings.from_env()

    assert s.data_dir == tmp_path
    assert s.tasks_db_path == tmp_path / "db.sqlite"
    assert s.log_level == "DEBUG"
    assert s.seed_enabled is False
    assert s.console_enabled is False


def test_explicit_db_path_wins(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("MEMOBOT_DATA_DIR", str(tmp_path / "data"))
    clean_env.setenv("MEMOBOT_TASKS_DB_PATH", str(tmp_path / "elsewhere.sqlite"))

    s = Settings.from_env()

    assert s.tasks_db_path == tmp_path / "elsewhere.sqlite"


def test_blank_values_fall_back_to_defaults(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("MEMOBOT_APP_NAME", "   ")
    clean_env.setenv("MEMOBOT_SEED_ENABLED", "")

    s = Settings.from_env()

    assert s.app_name == "memobot"
    assert s.seed_enabled is True
