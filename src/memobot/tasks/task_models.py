# src/memobot/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Any

from ..core.errors import InvalidRating


class Rating(IntEnum):
    """
    Review outcome chosen by the user.

    Numeric values match the ones stored/sent by the UI:
    1 = hard, 2 = good, 3 = reset (the UI labels this one "again").
    """

    HARD = 1
    GOOD = 2
    RESET = 3

    @classmethod
    def parse(cls, raw: Any) -> Rating:
        """Accept a Rating, 1..3 (int or digit string) or a name; raise InvalidRating otherwise."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, bool):
            raise InvalidRating(raw)
        if isinstance(raw, int):
            try:
                return cls(raw)
            except ValueError:
                raise InvalidRating(raw) from None
        if isinstance(raw, str):
            s = raw.strip().lower()
            if s.isdecimal():
                return cls.parse(int(s))
            if s == "again":
                return cls.RESET
            try:
                return cls[s.upper()]
            except KeyError:
                raise InvalidRating(raw) from None
        raise InvalidRating(raw)


@dataclass(slots=True)
class Task:
    id: int
    name: str
    url: str
    level: int
    due_date: date

    def is_due(self, as_of: date) -> bool:
        return self.due_date <= as_of
