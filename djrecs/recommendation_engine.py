"""
Recommendation Engine — public facade over the scoring stages.

Every operation is a pure function of the catalog snapshot and profile it is
given; nothing is cached between calls. The facade is the only layer that
knows the default list sizes (RecommendationConfig.default_*_limit).
"""

import logging
from typing import List, Optional, Union

from .models.catalog import DJ, Catalog, Session, ensure_catalog
from .models.config import RecommendationConfig, RecommendationOptions, resolve_config
from .models.profile import UserProfile, ensure_profile
from .models.scoring import ScoredDJ, ScoredSession
from .stages.browse import rank_cold_start, rank_new_releases, rank_trending
from .stages.diversity import calculate_diversity, diversify
from .stages.dj_scoring import score_djs
from .stages.session_scoring import score_sessions
from .stages.similarity import get_similar_djs, get_similar_sessions
from .utils.ranking import rank_by_score, take

logger = logging.getLogger(__name__)


class RecommendationService:
    """Personalized and similarity-based lists for sessions and DJs."""

    def __init__(self, config: Optional[RecommendationConfig] = None):
        self.config = resolve_config(config)

    # ------------------------------------------------------------------
    # Personalized sessions
    # ------------------------------------------------------------------

    def get_top_session_recommendations(
        self,
        catalog: Union[Catalog, dict],
        profile: Union[UserProfile, dict],
        limit: Optional[int] = None,
        exclude_viewed: bool = False,
        diversify_results: bool = False,
    ) -> List[ScoredSession]:
        """
        Score, rank and truncate sessions for a profile.

        Cold-start profiles (no views, no favorites) are ordered by
        popularity then recency instead of by score.
        """
        catalog = ensure_catalog(catalog)
        profile = ensure_profile(profile)
        limit = self.config.default_session_limit if limit is None else limit
        if limit <= 0:
            return []

        sessions = catalog.sessions
        if exclude_viewed:
            sessions = [s for s in sessions if not profile.has_viewed(s.id)]

        scored = score_sessions(sessions, profile, catalog, self.config)
        if profile.is_cold_start:
            logger.info("[cold_start] NO_HISTORY ranking %s sessions by popularity/recency", len(scored))
            ranked = rank_cold_start(scored)
        else:
            ranked = rank_by_score(scored)

        if diversify_results:
            ranked = diversify(ranked, limit, self.config.target_diversity)
        return take(ranked, limit)

    def get_recommended_sessions(
        self,
        catalog: Union[Catalog, dict],
        profile: Union[UserProfile, dict],
        options: Optional[RecommendationOptions] = None,
    ) -> List[Session]:
        """Recommended sessions for a profile (items only)."""
        if options is None:
            options = RecommendationOptions()
        scored = self.get_top_session_recommendations(
            catalog,
            profile,
            limit=options.limit,
            exclude_viewed=options.exclude_viewed,
            diversify_results=options.diversify,
        )
        return [c.session for c in scored]

    # ------------------------------------------------------------------
    # Personalized DJs
    # ------------------------------------------------------------------

    def get_top_dj_recommendations(
        self,
        catalog: Union[Catalog, dict],
        profile: Union[UserProfile, dict],
        limit: Optional[int] = None,
    ) -> List[ScoredDJ]:
        catalog = ensure_catalog(catalog)
        profile = ensure_profile(profile)
        limit = self.config.default_dj_limit if limit is None else limit
        active = [dj for dj in catalog.djs if dj.is_active]
        scored = score_djs(active, profile, catalog, self.config)
        return take(rank_by_score(scored), limit)

    def get_recommended_djs(
        self,
        catalog: Union[Catalog, dict],
        profile: Union[UserProfile, dict],
        limit: Optional[int] = None,
    ) -> List[DJ]:
        return [c.dj for c in self.get_top_dj_recommendations(catalog, profile, limit)]

    # ------------------------------------------------------------------
    # Similarity
    # ------------------------------------------------------------------

    def get_similar_sessions(
        self,
        session_id: str,
        catalog: Union[Catalog, dict],
        limit: Optional[int] = None,
    ) -> List[Session]:
        catalog = ensure_catalog(catalog)
        limit = self.config.default_similar_limit if limit is None else limit
        scored = get_similar_sessions(session_id, catalog.sessions, limit, self.config)
        return [c.session for c in scored]

    def get_similar_djs(
        self,
        dj_id: str,
        catalog: Union[Catalog, dict],
        limit: Optional[int] = None,
    ) -> List[DJ]:
        catalog = ensure_catalog(catalog)
        limit = self.config.default_similar_limit if limit is None else limit
        scored = get_similar_djs(dj_id, catalog.djs, limit, self.config)
        return [c.dj for c in scored]

    # ------------------------------------------------------------------
    # History and browse lists
    # ------------------------------------------------------------------

    def get_continue_watching(
        self,
        profile: Union[UserProfile, dict],
        catalog: Union[Catalog, dict],
        limit: Optional[int] = None,
    ) -> List[Session]:
        """Most recently viewed sessions that still resolve in the catalog."""
        catalog = ensure_catalog(catalog)
        profile = ensure_profile(profile)
        limit = self.config.default_continue_watching_limit if limit is None else limit
        recent = take(profile.viewed_sessions, limit)
        resolved = [catalog.get_session(session_id) for session_id in recent]
        return [s for s in resolved if s is not None]

    def get_trending_sessions(
        self,
        catalog: Union[Catalog, dict],
        limit: Optional[int] = None,
    ) -> List[Session]:
        catalog = ensure_catalog(catalog)
        limit = self.config.default_session_limit if limit is None else limit
        return take(rank_trending(catalog.sessions), limit)

    def get_new_releases(
        self,
        catalog: Union[Catalog, dict],
        limit: Optional[int] = None,
    ) -> List[Session]:
        catalog = ensure_catalog(catalog)
        limit = self.config.default_session_limit if limit is None else limit
        return take(rank_new_releases(catalog.sessions), limit)

    def get_sessions_by_favorite_genres(
        self,
        catalog: Union[Catalog, dict],
        profile: Union[UserProfile, dict],
        limit: Optional[int] = None,
    ) -> List[Session]:
        """Catalog-order sessions sharing any favorite genre. No scoring."""
        catalog = ensure_catalog(catalog)
        profile = ensure_profile(profile)
        limit = self.config.default_session_limit if limit is None else limit
        if not profile.favorite_genres:
            return []
        favorites = set(profile.favorite_genres)
        matching = [s for s in catalog.sessions if favorites.intersection(s.genres)]
        return take(matching, limit)

    # ------------------------------------------------------------------
    # Re-exports
    # ------------------------------------------------------------------

    def diversify(self, candidates: List[ScoredSession], limit: Optional[int] = None) -> List[ScoredSession]:
        limit = self.config.default_session_limit if limit is None else limit
        return diversify(candidates, limit, self.config.target_diversity)

    @staticmethod
    def calculate_diversity(sessions: List[Session]) -> float:
        return calculate_diversity(sessions)
