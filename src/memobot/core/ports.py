# src/memobot/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The scheduler depends on Protocols instead of concrete implementations.
This keeps the storage engine swappable and makes testing easier.
"""

from collections.abc import Callable
from datetime import date
from typing import Any, Protocol

# fn(task) -> (new_level, new_due_date)
TaskMutation = Callable[[Any], tuple[int, date]]


class Clock(Protocol):
    """Source of "today" in the local calendar (date-only precision)."""
    def today(self) -> date: ...


class TaskRepo(Protocol):
    # CRUD
    def create(self, name: str, url: str) -> Any: ...
    def delete(self, task_id: int) -> bool: ...
    def get(self, task_id: int) -> Any: ...
    def update(self, task_id: int, level: int, due_date: date) -> None: ...

    # Date-ordered queries (due_date DESC, id DESC)
    def list_all(self) -> list[Any]: ...
    def list_due(self, as_of: date) -> list[Any]: ...

    # Review API: read-modify-write under the store lock
    def modify(self, task_id: int, fn: TaskMutation) -> Any: ...
