"""
User profile model — the read-only preference snapshot passed into every scoring call.

The profile is owned and persisted by the profile store. The engine only
reads it; mutations (tracking a view, toggling a favorite) produce a new
profile in the store layer.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .catalog import dedupe

MAX_VIEWED_SESSIONS = 50


class UserProfile(BaseModel):
    """
    User preferences used for personalization.

    viewed_sessions: most-recent-first session ids, duplicate-free, at most 50.
    favorite_djs: DJ ids the user has favorited.
    favorite_genres: genres the user picked explicitly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    viewed_sessions: List[str] = Field(default_factory=list)
    favorite_djs: List[str] = Field(default_factory=list, alias="favoriteDJs")
    favorite_genres: List[str] = Field(default_factory=list)

    @field_validator("viewed_sessions")
    @classmethod
    def cap_viewed_sessions(cls, value: List[str]) -> List[str]:
        # Keep the first occurrence: the list is most-recent-first.
        return dedupe(value)[:MAX_VIEWED_SESSIONS]

    @field_validator("favorite_djs", "favorite_genres")
    @classmethod
    def unique_favorites(cls, value: List[str]) -> List[str]:
        return dedupe(value)

    @property
    def is_cold_start(self) -> bool:
        """True when there is no history and no explicit preference to personalize on."""
        return not (self.viewed_sessions or self.favorite_djs or self.favorite_genres)

    def has_viewed(self, session_id: str) -> bool:
        return session_id in self.viewed_sessions

    def is_favorite_dj(self, dj_id: str) -> bool:
        return dj_id in self.favorite_djs


def ensure_profile(profile) -> UserProfile:
    """Return a UserProfile for dict or UserProfile input; None is a caller bug."""
    if profile is None:
        raise ValueError("profile is required")
    if isinstance(profile, UserProfile):
        return profile
    return UserProfile.model_validate(profile)
