"""
DJ session recommendation engine.

Single entry point for the djrecs package:
- models/: Session, DJ, Catalog, UserProfile, RecommendationConfig, scored candidates
- stages/: affinity, session/DJ scoring, similarity, diversity, browse orderings
- recommendation_engine: RecommendationService facade

The module-level functions below are the stable, language-neutral API:
catalog and profile in, scored candidates out. Nothing is kept between calls.
"""

from typing import List, Optional, Union

from .models import (
    DEFAULT_CONFIG,
    DJ,
    Catalog,
    RecommendationConfig,
    RecommendationOptions,
    ScoredDJ,
    ScoredSession,
    Session,
    UserProfile,
    ensure_catalog,
    ensure_profile,
    resolve_config,
)
from .recommendation_engine import RecommendationService
from .stages import (
    calculate_diversity,
    compute_dj_affinity,
    compute_genre_affinity,
    diversify,
    score_dj,
    score_session,
)


def get_top_session_recommendations(
    catalog: Union[Catalog, dict],
    profile: Union[UserProfile, dict],
    limit: int = 6,
    config: Optional[RecommendationConfig] = None,
) -> List[ScoredSession]:
    """Scored sessions for a profile, best first, truncated to limit."""
    return RecommendationService(config).get_top_session_recommendations(catalog, profile, limit)


def get_top_dj_recommendations(
    catalog: Union[Catalog, dict],
    profile: Union[UserProfile, dict],
    limit: int = 4,
    config: Optional[RecommendationConfig] = None,
) -> List[ScoredDJ]:
    """Scored DJs for a profile, best first, truncated to limit."""
    return RecommendationService(config).get_top_dj_recommendations(catalog, profile, limit)


__all__ = [
    "Catalog",
    "DEFAULT_CONFIG",
    "DJ",
    "RecommendationConfig",
    "RecommendationOptions",
    "RecommendationService",
    "ScoredDJ",
    "ScoredSession",
    "Session",
    "UserProfile",
    "calculate_diversity",
    "compute_dj_affinity",
    "compute_genre_affinity",
    "diversify",
    "ensure_catalog",
    "ensure_profile",
    "get_top_session_recommendations",
    "get_top_dj_recommendations",
    "resolve_config",
    "score_dj",
    "score_session",
]
