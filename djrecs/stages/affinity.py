"""
Genre and DJ affinity from viewing history.

Counts how often each genre / DJ appears across the sessions a user has
viewed, normalized to [0, 1] by the largest count. Recency within the
history does not matter here, only membership.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Sequence

from ..models.catalog import Session
from ..models.profile import UserProfile
from ..models.scoring import UserAffinity
from ..utils.scores import normalize_counts

logger = logging.getLogger(__name__)


def _viewed_sessions(sessions: Sequence[Session], viewed_ids: Iterable[str]) -> List[Session]:
    """Resolve viewed ids against the catalog, skipping ids that no longer exist."""
    by_id = {s.id: s for s in sessions}
    resolved = []
    missing = 0
    for session_id in viewed_ids:
        session = by_id.get(session_id)
        if session is None:
            missing += 1
            continue
        resolved.append(session)
    if missing:
        logger.debug("[affinity] VIEWED_SESSION_MISSING skipped=%s", missing)
    return resolved


def compute_genre_affinity(
    sessions: Sequence[Session],
    viewed_ids: Iterable[str],
) -> Dict[str, float]:
    """One count per genre of each viewed session, normalized by the max count."""
    counts: Counter = Counter()
    for session in _viewed_sessions(sessions, viewed_ids):
        counts.update(session.genres)
    return normalize_counts(counts)


def compute_dj_affinity(
    sessions: Sequence[Session],
    viewed_ids: Iterable[str],
) -> Dict[str, float]:
    """One count per viewed session keyed by its DJ, normalized by the max count."""
    counts: Counter = Counter(
        session.dj_id for session in _viewed_sessions(sessions, viewed_ids)
    )
    return normalize_counts(counts)


def compute_affinities(sessions: Sequence[Session], profile: UserProfile) -> UserAffinity:
    """Both affinity maps for a profile, computed once per ranking pass."""
    return UserAffinity(
        genres=compute_genre_affinity(sessions, profile.viewed_sessions),
        djs=compute_dj_affinity(sessions, profile.viewed_sessions),
    )
