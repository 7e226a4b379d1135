"""Recommendation list response models."""

from typing import List, Optional

from pydantic import BaseModel

from .common import DJCard, SessionCard


class ListDebugInfo(BaseModel):
    catalog_fingerprint: str
    candidates_count: int
    cold_start: bool = False
    diversity: Optional[float] = None
    top_scores: List[float] = []


class SessionListResponse(BaseModel):
    sessions: List[SessionCard]
    total: int
    user_id: Optional[str] = None
    debug: Optional[ListDebugInfo] = None


class DJListResponse(BaseModel):
    djs: List[DJCard]
    total: int
    user_id: Optional[str] = None
    debug: Optional[ListDebugInfo] = None
