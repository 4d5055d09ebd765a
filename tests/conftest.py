# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from memobot.cli.bootstrap import create_initial_state
from memobot.core.state import AppState
from memobot.tasks.task_store import TaskStore

from .fakes import FixedClock

TODAY = date(2025, 4, 8)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap and commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment.
    """
    return SimpleNamespace(
        app_name="memobot-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "db.sqlite",
        seed_enabled=True,
        seed_task_name="Add a task",
        seed_task_url="http://example.com",
        console_enabled=False,
    )


@pytest.fixture()
def store(tmp_path: Path, clock: FixedClock):
    """Unseeded SQLite store in a per-test directory."""
    s = TaskStore(tmp_path / "tasks.sqlite", clock=clock, seed=False)
    yield s
    s.close()


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FixedClock):
    """
    AppState wired through the real composition root.

    NOTE: the SQLite store is real here; its ordering and transaction behaviour
    is part of what we want to test. Only the clock is fixed.
    """
    st: AppState = create_initial_state(settings=settings, clock=clock)
    yield st
    st.task_store.close()
