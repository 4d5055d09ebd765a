# src/memobot/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_scheduler import ReviewScheduler
from ..tasks.task_store import TaskStore
from .ports import Clock


@dataclass
class AppState:
    # Settings are kept on the state so outer layers (commands, console) can read them.
    settings: object

    clock: Clock
    task_store: TaskStore
    scheduler: ReviewScheduler
