"""
Profile-free orderings: trending, new releases, and the cold-start ranking.

Used directly by the browse lists and as the fallback when a user has no
history or preferences to personalize on.
"""

from typing import List, Sequence

from ..models.catalog import Session
from ..models.scoring import ScoredSession


def rank_trending(sessions: Sequence[Session]) -> List[Session]:
    """Most viewed first; equal view counts keep catalog order."""
    return sorted(sessions, key=lambda s: s.views, reverse=True)


def rank_new_releases(sessions: Sequence[Session]) -> List[Session]:
    """Newest first; same-day releases keep catalog order."""
    return sorted(sessions, key=lambda s: s.date, reverse=True)


def rank_cold_start(scored: Sequence[ScoredSession]) -> List[ScoredSession]:
    """
    Order scored sessions for a user with no history: popularity, then recency.

    Scores and reasons are kept as computed so the UI can still explain the
    list; only the order comes from the catalog metadata.
    """
    return sorted(
        scored,
        key=lambda c: (c.session.views, c.session.date),
        reverse=True,
    )
