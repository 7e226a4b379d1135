"""Request/response models for user profile endpoints."""

from typing import List

from pydantic import BaseModel, Field


class TrackViewRequest(BaseModel):
    session_id: str = Field(min_length=1)


class ProfileResponse(BaseModel):
    """Profile as stored; lists are most-recent-first for viewed_sessions."""

    user_id: str
    viewed_sessions: List[str] = []
    favorite_djs: List[str] = []
    favorite_genres: List[str] = []
