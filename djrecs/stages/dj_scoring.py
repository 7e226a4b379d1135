"""
Per-DJ scoring against a user profile.

Parallel to session scoring: genre affinity (capped), explicit genres,
content availability, featured bonus, and a novelty bonus for DJs the
user has not favorited yet.
"""

from typing import List, Optional, Union

from ..models.catalog import DJ, Catalog, ensure_catalog
from ..models.config import RecommendationConfig, resolve_config
from ..models.profile import UserProfile, ensure_profile
from ..models.scoring import ScoredDJ, UserAffinity
from ..utils.scores import clamp, pluralize
from .affinity import compute_affinities

REASON_GENRE_AFFINITY = "Plays genres you enjoy"
REASON_EXPLICIT_GENRES = "Matches your selected genres"
REASON_FEATURED = "Featured artist"
REASON_NEW_ARTIST = "New artist to discover"


def score_dj(
    dj: DJ,
    profile: Union[UserProfile, dict],
    catalog: Union[Catalog, dict],
    affinity: Optional[UserAffinity] = None,
    config: Optional[RecommendationConfig] = None,
) -> ScoredDJ:
    """Score one DJ for a profile. Session counts come from catalog.sessions."""
    config = resolve_config(config)
    catalog = ensure_catalog(catalog)
    profile = ensure_profile(profile)
    if affinity is None:
        affinity = compute_affinities(catalog.sessions, profile)

    score = 0.0
    reasons: List[str] = []

    genre_score = sum(
        affinity.genres.get(genre, 0.0) * config.dj_genre_affinity_weight
        for genre in dj.genres
    )
    if genre_score > 0:
        score += clamp(genre_score, config.dj_genre_affinity_cap)
        reasons.append(REASON_GENRE_AFFINITY)

    explicit_matches = sum(1 for genre in dj.genres if genre in profile.favorite_genres)
    if explicit_matches > 0:
        score += explicit_matches * config.dj_explicit_genre_weight
        reasons.append(REASON_EXPLICIT_GENRES)

    session_count = len(catalog.sessions_for_dj(dj.id))
    score += clamp(session_count * config.dj_session_count_weight, config.dj_session_count_cap)
    if session_count > 0:
        reasons.append(f"{pluralize(session_count, 'session')} available")

    if dj.featured:
        score += config.dj_featured_bonus
        reasons.append(REASON_FEATURED)

    if not profile.is_favorite_dj(dj.id):
        score += config.dj_novelty_bonus
        reasons.append(REASON_NEW_ARTIST)

    return ScoredDJ(dj=dj, score=score, reasons=reasons)


def score_djs(
    djs: List[DJ],
    profile: Union[UserProfile, dict],
    catalog: Union[Catalog, dict],
    config: Optional[RecommendationConfig] = None,
) -> List[ScoredDJ]:
    """Score every DJ in input order, sharing one affinity pass."""
    config = resolve_config(config)
    catalog = ensure_catalog(catalog)
    profile = ensure_profile(profile)
    affinity = compute_affinities(catalog.sessions, profile)
    return [score_dj(dj, profile, catalog, affinity, config) for dj in djs]
