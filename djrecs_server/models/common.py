"""Common Pydantic models shared across routes."""

from typing import List, Optional

from pydantic import BaseModel


class SessionCard(BaseModel):
    id: str
    title: str
    dj_id: str
    dj_name: str
    date: str
    series: str
    genres: List[str] = []
    mood: List[str] = []
    views: int = 0
    score: Optional[float] = None
    reasons: List[str] = []
    position: Optional[int] = None


class DJCard(BaseModel):
    id: str
    name: str
    genres: List[str] = []
    location: str = ""
    featured: bool = False
    session_count: Optional[int] = None
    score: Optional[float] = None
    reasons: List[str] = []
    position: Optional[int] = None
