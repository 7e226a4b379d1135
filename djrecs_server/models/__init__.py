"""Pydantic request/response models for the API."""

from .common import DJCard, SessionCard
from .profiles import ProfileResponse, TrackViewRequest
from .recommendations import DJListResponse, ListDebugInfo, SessionListResponse

__all__ = [
    "DJCard",
    "DJListResponse",
    "ListDebugInfo",
    "ProfileResponse",
    "SessionCard",
    "SessionListResponse",
    "TrackViewRequest",
]
