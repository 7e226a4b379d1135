"""Shared utilities for ranking and score arithmetic."""

from .ranking import rank_by_score, take
from .scores import clamp, normalize_counts, pluralize

__all__ = [
    "clamp",
    "normalize_counts",
    "pluralize",
    "rank_by_score",
    "take",
]
