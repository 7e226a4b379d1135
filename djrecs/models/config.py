"""
Algorithm configuration — scoring weights, caps, and default list sizes.

RecommendationConfig defaults are the production constants. The server may
pass a dict (e.g. from a JSON file at ALGORITHM_CONFIG_PATH); from_dict()
merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator


class RecommendationConfig(BaseModel):
    """Configuration for the recommendation scorers and the facade."""

    # -------------------------------------------------------------------------
    # Session scoring
    # score = genre_match + dj_affinity + favorite_dj + explicit_genres
    #         + novelty + popularity
    # -------------------------------------------------------------------------

    # Points per genre, multiplied by that genre's affinity (0-1).
    session_genre_affinity_weight: float = 15.0
    # Cap on the summed genre affinity contribution.
    session_genre_affinity_cap: float = 30.0
    # Points multiplied by the affinity of the session's DJ. Uncapped.
    session_dj_affinity_weight: float = 25.0
    # Flat bonus when the session's DJ is a favorite.
    session_favorite_dj_bonus: float = 20.0
    # Points per session genre the user picked explicitly. Uncapped.
    session_explicit_genre_weight: float = 15.0
    # Flat bonus for sessions the user has not viewed.
    session_novelty_bonus: float = 10.0
    # Max points for popularity: views / max_views_in_catalog * weight.
    session_popularity_weight: float = 10.0

    # -------------------------------------------------------------------------
    # DJ scoring
    # -------------------------------------------------------------------------

    dj_genre_affinity_weight: float = 20.0
    dj_genre_affinity_cap: float = 40.0
    dj_explicit_genre_weight: float = 20.0
    # Points per available session, capped.
    dj_session_count_weight: float = 3.0
    dj_session_count_cap: float = 15.0
    dj_featured_bonus: float = 10.0
    # Flat bonus for DJs the user has not favorited yet.
    dj_novelty_bonus: float = 5.0

    # -------------------------------------------------------------------------
    # Similarity ("more like this")
    # -------------------------------------------------------------------------

    similar_session_same_dj: float = 5.0
    similar_session_same_series: float = 3.0
    similar_session_shared_genre: float = 2.0
    similar_session_shared_mood: float = 1.0
    similar_dj_shared_genre: float = 3.0
    similar_dj_same_location: float = 2.0

    # -------------------------------------------------------------------------
    # Default list sizes (only the facade applies these)
    # -------------------------------------------------------------------------

    default_session_limit: int = 6
    default_dj_limit: int = 4
    default_similar_limit: int = 4
    default_continue_watching_limit: int = 4

    # Hint for the diversity pass. Only logged; any value triggers the pass.
    target_diversity: float = 0.5

    @model_validator(mode="after")
    def caps_are_non_negative(self):
        for name in (
            "session_genre_affinity_cap",
            "session_popularity_weight",
            "dj_genre_affinity_cap",
            "dj_session_count_cap",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RecommendationConfig":
        """
        Create config from dictionary (e.g., loaded from JSON).

        Accepts flat field names or the grouped layout:
        {"session_scoring": {...}, "dj_scoring": {...}, "similarity": {...}, "limits": {...}}
        where group keys are field names without their group prefix.
        """
        flat = {}
        prefixes = {
            "session_scoring": "session_",
            "dj_scoring": "dj_",
            "similarity": "similar_",
            "limits": "default_",
        }
        for group, prefix in prefixes.items():
            for key, value in (config_dict.get(group) or {}).items():
                flat[key if key.startswith(prefix) else prefix + key] = value
        for key, value in config_dict.items():
            if key not in prefixes:
                flat[key] = value
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


class RecommendationOptions(BaseModel):
    """Per-call options for session recommendations. limit=None means the configured default."""

    limit: Optional[int] = None
    exclude_viewed: bool = False
    diversify: bool = False


DEFAULT_CONFIG = RecommendationConfig()


def resolve_config(config: Optional["RecommendationConfig"]) -> "RecommendationConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
