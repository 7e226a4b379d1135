"""
Per-session scoring against a user profile.

The score is a sum of independent contributions (genre affinity, DJ
affinity, favorite DJ, explicit genres, novelty, popularity). It is a
relative ranking signal, not a probability, and is never normalized.
Reasons are appended in the order contributions are applied.
"""

from typing import List, Optional, Union

from ..models.catalog import Catalog, Session, ensure_catalog
from ..models.config import RecommendationConfig, resolve_config
from ..models.profile import UserProfile, ensure_profile
from ..models.scoring import ScoredSession, UserAffinity
from ..utils.scores import clamp
from .affinity import compute_affinities

REASON_GENRE_AFFINITY = "Matches your genre preferences"
REASON_DJ_AFFINITY = "You've enjoyed {dj_name}'s sets"
REASON_FAVORITE_DJ = "From one of your favorite DJs"
REASON_EXPLICIT_GENRES = "Matches your selected genres"
REASON_NEW_SESSION = "New session for you"


def score_session(
    session: Session,
    profile: Union[UserProfile, dict],
    catalog: Union[Catalog, dict],
    affinity: Optional[UserAffinity] = None,
    config: Optional[RecommendationConfig] = None,
    max_views: Optional[int] = None,
) -> ScoredSession:
    """
    Score one session for a profile.

    affinity and max_views may be passed in when scoring a whole catalog so
    they are computed once per pass; otherwise they are derived from catalog.
    """
    config = resolve_config(config)
    catalog = ensure_catalog(catalog)
    profile = ensure_profile(profile)
    if affinity is None:
        affinity = compute_affinities(catalog.sessions, profile)
    if max_views is None:
        max_views = catalog.max_views()

    score = 0.0
    reasons: List[str] = []

    # Genre affinity (capped)
    genre_score = sum(
        affinity.genres.get(genre, 0.0) * config.session_genre_affinity_weight
        for genre in session.genres
    )
    if genre_score > 0:
        score += clamp(genre_score, config.session_genre_affinity_cap)
        reasons.append(REASON_GENRE_AFFINITY)

    # DJ affinity
    dj_score = affinity.djs.get(session.dj_id, 0.0) * config.session_dj_affinity_weight
    if dj_score > 0:
        score += dj_score
        reasons.append(REASON_DJ_AFFINITY.format(dj_name=session.display_dj_name))

    if profile.is_favorite_dj(session.dj_id):
        score += config.session_favorite_dj_bonus
        reasons.append(REASON_FAVORITE_DJ)

    explicit_matches = sum(1 for genre in session.genres if genre in profile.favorite_genres)
    if explicit_matches > 0:
        score += explicit_matches * config.session_explicit_genre_weight
        reasons.append(REASON_EXPLICIT_GENRES)

    if not profile.has_viewed(session.id):
        score += config.session_novelty_bonus
        reasons.append(REASON_NEW_SESSION)

    # Popularity: no reason string, it is a background signal
    popularity = session.views / max(max_views, 1) * config.session_popularity_weight
    score += clamp(popularity, config.session_popularity_weight)

    return ScoredSession(session=session, score=score, reasons=reasons)


def score_sessions(
    sessions: List[Session],
    profile: Union[UserProfile, dict],
    catalog: Union[Catalog, dict],
    config: Optional[RecommendationConfig] = None,
) -> List[ScoredSession]:
    """Score every session in input order, sharing one affinity pass."""
    config = resolve_config(config)
    catalog = ensure_catalog(catalog)
    profile = ensure_profile(profile)
    affinity = compute_affinities(catalog.sessions, profile)
    max_views = catalog.max_views()
    return [
        score_session(s, profile, catalog, affinity, config, max_views)
        for s in sessions
    ]
