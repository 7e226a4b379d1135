"""
Scoring models — scored candidates returned by the scorers and rankers.

Contains:
- ScoredSession / ScoredDJ: an item with its score and the reasons behind it
- UserAffinity: genre and DJ affinity maps computed once per ranking pass
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from .catalog import DJ, Session


class ScoredSession(BaseModel):
    """A session with its recommendation score and human-readable reasons."""

    session: Session
    score: float
    reasons: List[str] = Field(default_factory=list)


class ScoredDJ(BaseModel):
    """A DJ with its recommendation score and human-readable reasons."""

    dj: DJ
    score: float
    reasons: List[str] = Field(default_factory=list)


class UserAffinity(BaseModel):
    """Normalized [0, 1] affinity maps derived from viewing history."""

    genres: Dict[str, float] = Field(default_factory=dict)
    djs: Dict[str, float] = Field(default_factory=dict)
