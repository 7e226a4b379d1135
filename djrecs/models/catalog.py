"""
Catalog models — sessions and DJs as supplied by the catalog store.

Built from CMS/JSON dicts via Session.model_validate(d) or ensure_sessions().
Records accept the CMS camelCase keys (djId, djName) as well as field names.
All models are frozen: scorers read them, never write them.
Genre and mood lists are sets in meaning: duplicates are dropped on load.
"""

import hashlib
import json
import datetime
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

SeriesType = Literal["studio", "warehouse", "rooftop"]

_CATALOG_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="allow",
)


def dedupe(values: List[str]) -> List[str]:
    """Drop repeated values, keeping the first occurrence and the original order."""
    seen = set()
    out = []
    for value in values:
        if value not in seen:
            seen.add(value)
            out.append(value)
    return out


class Session(BaseModel):
    """A recorded DJ session. Several sessions may share a dj_id."""

    model_config = _CATALOG_MODEL_CONFIG

    id: str
    dj_id: str
    title: str = ""
    dj_name: str = ""
    date: datetime.date
    genres: List[str] = Field(default_factory=list)
    series: SeriesType
    mood: List[str] = Field(default_factory=list)
    views: int = Field(default=0, ge=0)

    @field_validator("genres", "mood")
    @classmethod
    def unique_tags(cls, value: List[str]) -> List[str]:
        return dedupe(value)

    @property
    def display_dj_name(self) -> str:
        return self.dj_name or self.dj_id


class DJ(BaseModel):
    """A DJ/artist profile."""

    model_config = _CATALOG_MODEL_CONFIG

    id: str
    name: str = ""
    genres: List[str] = Field(default_factory=list)
    location: str = ""
    featured: bool = False
    status: Literal["active", "inactive"] = "active"

    @field_validator("genres")
    @classmethod
    def unique_genres(cls, value: List[str]) -> List[str]:
        return dedupe(value)

    @property
    def is_active(self) -> bool:
        return self.status == "active"


class Catalog(BaseModel):
    """
    Read-only catalog snapshot used for one or more scoring calls.

    Lookups are linear scans over the snapshot; the catalog is expected to be
    small (hundreds of sessions) and is never indexed or cached here.
    """

    model_config = ConfigDict(frozen=True)

    sessions: List[Session] = Field(default_factory=list)
    djs: List[DJ] = Field(default_factory=list)

    def get_session(self, session_id: str) -> Optional[Session]:
        return next((s for s in self.sessions if s.id == session_id), None)

    def get_dj(self, dj_id: str) -> Optional[DJ]:
        return next((d for d in self.djs if d.id == dj_id), None)

    def sessions_for_dj(self, dj_id: str) -> List[Session]:
        return [s for s in self.sessions if s.dj_id == dj_id]

    def max_views(self) -> int:
        """Highest view count in the catalog, floored at 1 so it is safe as a denominator."""
        return max((s.views for s in self.sessions), default=0) or 1

    def fingerprint(self) -> str:
        """Stable sha256 of the catalog contents; changes whenever any record changes."""
        payload = json.dumps(self.model_dump(mode="json"), sort_keys=True)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def ensure_sessions(sessions: List[Union[Dict[str, Any], Session]]) -> List[Session]:
    """Convert list of dicts or Sessions to list of Session models."""
    return [
        Session.model_validate(s) if isinstance(s, dict) else s
        for s in sessions
    ]


def ensure_djs(djs: List[Union[Dict[str, Any], DJ]]) -> List[DJ]:
    """Convert list of dicts or DJs to list of DJ models."""
    return [DJ.model_validate(d) if isinstance(d, dict) else d for d in djs]


def ensure_catalog(catalog: Union[Dict[str, Any], Catalog, None]) -> Catalog:
    """
    Return a Catalog model for dict or Catalog input.

    A missing catalog is a caller bug, not an empty catalog, so None raises.
    """
    if catalog is None:
        raise ValueError("catalog is required")
    if isinstance(catalog, Catalog):
        return catalog
    return Catalog(
        sessions=ensure_sessions(catalog.get("sessions", [])),
        djs=ensure_djs(catalog.get("djs", [])),
    )
