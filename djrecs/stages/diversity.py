"""
Diversity balancing — greedy re-ranking that keeps one DJ or series from
dominating the top of a session list.

Single pass over candidates in score order: a candidate is admitted when its
DJ is new, or its series is new, or fewer than limit / 2 items have been
admitted so far. Remaining slots are backfilled in score order.
"""

import logging
from typing import List, Sequence, Set

from ..models.catalog import Session
from ..models.scoring import ScoredSession
from ..utils.ranking import rank_by_score

logger = logging.getLogger(__name__)


def diversify(
    candidates: Sequence[ScoredSession],
    limit: int = 6,
    target_diversity: float = 0.5,
) -> List[ScoredSession]:
    """
    Re-rank scored sessions for DJ/series variety.

    Args:
        candidates: Scored sessions, any order. Not mutated.
        limit: Number of results wanted.
        target_diversity: Hint only; logged with the achieved diversity.

    Returns:
        min(limit, len(candidates)) items drawn from candidates. Nothing is
        invented; only order and membership change.
    """
    if limit <= 0:
        return []
    ordered = rank_by_score(candidates)
    if len(ordered) <= limit:
        return ordered

    result: List[ScoredSession] = []
    admitted: Set[int] = set()
    used_djs: Set[str] = set()
    used_series: Set[str] = set()

    for idx, candidate in enumerate(ordered):
        if len(result) >= limit:
            break
        session = candidate.session
        dj_used = session.dj_id in used_djs
        series_used = session.series in used_series
        if not dj_used or not series_used or len(result) < limit / 2:
            result.append(candidate)
            admitted.add(idx)
            used_djs.add(session.dj_id)
            used_series.add(session.series)

    # Backfill with the best candidates the pass skipped
    for idx, candidate in enumerate(ordered):
        if len(result) >= limit:
            break
        if idx not in admitted:
            result.append(candidate)
            admitted.add(idx)

    logger.debug(
        "[diversity] BALANCED limit=%s candidates=%s target=%s achieved=%.3f",
        limit,
        len(ordered),
        target_diversity,
        calculate_diversity([c.session for c in result]),
    )
    return result


def calculate_diversity(sessions: Sequence[Session]) -> float:
    """
    Content diversity of a session list in [0, 1]-ish.

    Mean of genre variety (unique genres / n), DJ variety (unique DJs / n)
    and series variety (unique series / min(n, 3)). 0.0 for an empty list.
    """
    if not sessions:
        return 0.0
    genres = {genre for s in sessions for genre in s.genres}
    djs = {s.dj_id for s in sessions}
    series = {s.series for s in sessions}
    n = len(sessions)
    genre_diversity = len(genres) / n
    dj_diversity = len(djs) / n
    series_diversity = len(series) / min(n, 3)
    return (genre_diversity + dj_diversity + series_diversity) / 3
