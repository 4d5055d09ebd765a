# src/memobot/tasks/task_scheduler.py

from __future__ import annotations

"""
Review scheduler.

A minimal three-bucket spaced-repetition policy:
- HARD  -> level + 1, next review in floor(1.9 ** old_level) days
- GOOD  -> level + 1, next review in floor(1.3 ** old_level) days
- RESET -> level - 3 (never below 0), next review tomorrow

The interval always reads the level *before* it is updated.
Persistence is delegated to an injected TaskRepo; the scheduler never talks to SQLite.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

from ..core.ports import Clock, TaskRepo
from .task_models import Rating, Task

logger = logging.getLogger(__name__)

HARD_BASE = 1.9
GOOD_BASE = 1.3
RESET_PENALTY = 3
RESET_INTERVAL_DAYS = 1


@dataclass(slots=True, frozen=True)
class ReviewOutcome:
    old_level: int
    new_level: int
    interval_days: int
    due_date: date


def interval_days(level: int, rating: Any) -> int:
    """Days until the next review, computed from the current (pre-update) level."""
    rating = Rating.parse(rating)
    if rating is Rating.RESET:
        return RESET_INTERVAL_DAYS

    base = HARD_BASE if rating is Rating.HARD else GOOD_BASE
    try:
        return math.floor(base ** level)
    except OverflowError:
        # float power overflowed; anything past date.max is clamped by the caller anyway
        return timedelta.max.days


def next_level(level: int, rating: Any) -> int:
    rating = Rating.parse(rating)
    if rating is Rating.RESET:
        return max(0, level - RESET_PENALTY)
    return level + 1


def compute_review(level: int, rating: Any, today: date) -> ReviewOutcome:
    """
    Pure scheduling policy: (level, rating, today) -> ReviewOutcome.

    Raises InvalidRating for anything outside HARD/GOOD/RESET.
    """
    rating = Rating.parse(rating)
    level = max(0, int(level))

    days = interval_days(level, rating)
    try:
        due = today + timedelta(days=days)
    except OverflowError:
        logger.warning("Interval of %s days from %s overflows the calendar; clamping to %s", days, today, date.max)
        due = date.max
        days = (due - today).days

    return ReviewOutcome(
        old_level=level,
        new_level=next_level(level, rating),
        interval_days=days,
        due_date=due,
    )


class ReviewScheduler:
    """Applies a rating to a stored task as one read-modify-write against the repo."""

    def __init__(self, store: TaskRepo, clock: Clock) -> None:
        self._store = store
        self._clock = clock

    def review(self, task_id: int, rating: Any) -> Task:
        """
        Record a review and return the updated task.

        The rating is validated before the store is touched, so an invalid
        rating raises InvalidRating with no mutation. Raises NotFound for
        unknown ids.
        """
        parsed = Rating.parse(rating)
        today = self._clock.today()
        outcome: ReviewOutcome | None = None

        def _apply(task: Task) -> tuple[int, date]:
            nonlocal outcome
            outcome = compute_review(task.level, parsed, today)
            return outcome.new_level, outcome.due_date

        task = self._store.modify(task_id, _apply)

        if outcome is not None:
            logger.info(
                "Task %s reviewed rating=%s level %s -> %s due=%s (+%sd)",
                task_id,
                parsed.name.lower(),
                outcome.old_level,
                outcome.new_level,
                outcome.due_date,
                outcome.interval_days,
            )
        return task
