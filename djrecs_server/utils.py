"""Pure helpers: card formatting for sessions, DJs, and profiles."""

from typing import Optional

from djrecs.models import DJ, ScoredDJ, ScoredSession, Session, UserProfile

from .models import DJCard, ProfileResponse, SessionCard

# Upper bound on any list endpoint's limit parameter
MAX_LIST_LIMIT = 50


def to_session_card(
    session: Session,
    scored: Optional[ScoredSession] = None,
    position: Optional[int] = None,
) -> SessionCard:
    """Convert a Session (optionally with its score) to a SessionCard."""
    return SessionCard(
        id=session.id,
        title=session.title,
        dj_id=session.dj_id,
        dj_name=session.display_dj_name,
        date=session.date.isoformat(),
        series=session.series,
        genres=list(session.genres),
        mood=list(session.mood),
        views=session.views,
        score=round(scored.score, 4) if scored else None,
        reasons=list(scored.reasons) if scored else [],
        position=position,
    )


def to_dj_card(
    dj: DJ,
    scored: Optional[ScoredDJ] = None,
    position: Optional[int] = None,
    session_count: Optional[int] = None,
) -> DJCard:
    """Convert a DJ (optionally with its score) to a DJCard."""
    return DJCard(
        id=dj.id,
        name=dj.name,
        genres=list(dj.genres),
        location=dj.location,
        featured=dj.featured,
        session_count=session_count,
        score=round(scored.score, 4) if scored else None,
        reasons=list(scored.reasons) if scored else [],
        position=position,
    )


def to_profile_response(user_id: str, profile: UserProfile) -> ProfileResponse:
    return ProfileResponse(
        user_id=user_id,
        viewed_sessions=list(profile.viewed_sessions),
        favorite_djs=list(profile.favorite_djs),
        favorite_genres=list(profile.favorite_genres),
    )
