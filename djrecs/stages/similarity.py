"""
Content similarity for "more like this" lists.

Scores every other catalog item by metadata overlap with a target item.
Independent of any user profile, so results only change when the catalog does.
"""

from typing import List, Optional, Sequence

from ..models.catalog import DJ, Session
from ..models.config import RecommendationConfig, resolve_config
from ..models.scoring import ScoredDJ, ScoredSession
from ..utils.ranking import rank_by_score, take


def _shared(left: Sequence[str], right: Sequence[str]) -> int:
    right_set = set(right)
    return sum(1 for value in left if value in right_set)


def session_similarity(
    target: Session,
    other: Session,
    config: Optional[RecommendationConfig] = None,
) -> float:
    """Same DJ, same series, shared genres, shared moods."""
    config = resolve_config(config)
    score = 0.0
    if other.dj_id == target.dj_id:
        score += config.similar_session_same_dj
    if other.series == target.series:
        score += config.similar_session_same_series
    score += _shared(other.genres, target.genres) * config.similar_session_shared_genre
    score += _shared(other.mood, target.mood) * config.similar_session_shared_mood
    return score


def dj_similarity(
    target: DJ,
    other: DJ,
    config: Optional[RecommendationConfig] = None,
) -> float:
    """Shared genres and same location."""
    config = resolve_config(config)
    score = _shared(other.genres, target.genres) * config.similar_dj_shared_genre
    if other.location == target.location:
        score += config.similar_dj_same_location
    return score


def get_similar_sessions(
    target_id: str,
    sessions: Sequence[Session],
    limit: int = 4,
    config: Optional[RecommendationConfig] = None,
) -> List[ScoredSession]:
    """Top `limit` sessions most similar to target_id; [] when the target is unknown."""
    target = next((s for s in sessions if s.id == target_id), None)
    if target is None:
        return []
    scored = [
        ScoredSession(session=other, score=session_similarity(target, other, config))
        for other in sessions
        if other.id != target_id
    ]
    return take(rank_by_score(scored), limit)


def get_similar_djs(
    target_id: str,
    djs: Sequence[DJ],
    limit: int = 4,
    config: Optional[RecommendationConfig] = None,
) -> List[ScoredDJ]:
    """Top `limit` DJs most similar to target_id; [] when the target is unknown."""
    target = next((d for d in djs if d.id == target_id), None)
    if target is None:
        return []
    scored = [
        ScoredDJ(dj=other, score=dj_similarity(target, other, config))
        for other in djs
        if other.id != target_id
    ]
    return take(rank_by_score(scored), limit)
