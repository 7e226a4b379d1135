"""Data models for the recommendation engine."""

from .catalog import (
    DJ,
    Catalog,
    Session,
    SeriesType,
    ensure_catalog,
    ensure_djs,
    ensure_sessions,
)
from .config import (
    DEFAULT_CONFIG,
    RecommendationConfig,
    RecommendationOptions,
    resolve_config,
)
from .profile import MAX_VIEWED_SESSIONS, UserProfile, ensure_profile
from .scoring import ScoredDJ, ScoredSession, UserAffinity

__all__ = [
    "Catalog",
    "DEFAULT_CONFIG",
    "DJ",
    "MAX_VIEWED_SESSIONS",
    "RecommendationConfig",
    "RecommendationOptions",
    "ScoredDJ",
    "ScoredSession",
    "SeriesType",
    "Session",
    "UserAffinity",
    "UserProfile",
    "ensure_catalog",
    "ensure_djs",
    "ensure_profile",
    "ensure_sessions",
    "resolve_config",
]
