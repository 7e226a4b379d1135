"""
Score helpers — normalization and clamping used by the scorers.
"""

from typing import Dict


def normalize_counts(counts: Dict[str, int]) -> Dict[str, float]:
    """Divide every count by the largest one (floored at 1) so values land in [0, 1]."""
    max_count = max(max(counts.values(), default=0), 1)
    return {key: count / max_count for key, count in counts.items()}


def clamp(value: float, upper: float) -> float:
    return min(value, upper)


def pluralize(count: int, noun: str) -> str:
    """'1 session', '3 sessions'."""
    return f"{count} {noun}{'s' if count != 1 else ''}"
