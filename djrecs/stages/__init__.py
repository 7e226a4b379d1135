"""Pipeline stages: affinity, per-item scoring, similarity, diversity, browse orderings."""

from .affinity import compute_affinities, compute_dj_affinity, compute_genre_affinity
from .browse import rank_cold_start, rank_new_releases, rank_trending
from .diversity import calculate_diversity, diversify
from .dj_scoring import score_dj, score_djs
from .session_scoring import score_session, score_sessions
from .similarity import get_similar_djs, get_similar_sessions

__all__ = [
    "calculate_diversity",
    "compute_affinities",
    "compute_dj_affinity",
    "compute_genre_affinity",
    "diversify",
    "get_similar_djs",
    "get_similar_sessions",
    "rank_cold_start",
    "rank_new_releases",
    "rank_trending",
    "score_dj",
    "score_djs",
    "score_session",
    "score_sessions",
]
