"""Memobot: recurring review tasks scheduled with a small spaced-repetition policy."""

__version__ = "0.1.0"
