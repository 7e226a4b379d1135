"""
Ranking helpers — stable descending sort and limit handling shared by all stages.
"""

from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


def rank_by_score(items: Sequence[T], key: Callable[[T], float] = lambda c: c.score) -> List[T]:
    """
    Sort items by key, highest first.

    Python's sort is stable with reverse=True as well, so items with equal
    keys keep their input (catalog) order.
    """
    return sorted(items, key=key, reverse=True)


def take(items: Sequence[T], limit: int) -> List[T]:
    """First `limit` items; zero or negative limits yield an empty list."""
    if limit <= 0:
        return []
    return list(items[:limit])
