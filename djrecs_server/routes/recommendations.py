"""Personalized and browse recommendation endpoints."""

from typing import Optional

from fastapi import APIRouter, Query

from djrecs.models import UserProfile

from ..models import DJListResponse, ListDebugInfo, SessionListResponse
from ..state import get_state
from ..utils import MAX_LIST_LIMIT, to_dj_card, to_session_card

router = APIRouter()


def _profile_for(state, user_id: Optional[str]) -> UserProfile:
    """Stored profile, or an empty one for anonymous requests."""
    if not user_id or not user_id.strip():
        return UserProfile()
    return state.profile_store.get(user_id)


def _session_list(sessions, user_id: Optional[str] = None) -> SessionListResponse:
    cards = [to_session_card(s, position=i + 1) for i, s in enumerate(sessions)]
    return SessionListResponse(sessions=cards, total=len(cards), user_id=user_id)


@router.get("/sessions", response_model=SessionListResponse)
def recommended_sessions(
    user_id: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, le=MAX_LIST_LIMIT),
    exclude_viewed: bool = Query(False),
    diversify: bool = Query(False),
    debug: bool = Query(False),
):
    """Personalized sessions with scores and reasons."""
    state = get_state()
    profile = _profile_for(state, user_id)
    catalog = state.catalog
    scored = state.service.get_top_session_recommendations(
        catalog,
        profile,
        limit=limit,
        exclude_viewed=exclude_viewed,
        diversify_results=diversify,
    )
    cards = [to_session_card(c.session, c, i + 1) for i, c in enumerate(scored)]
    debug_info = None
    if debug:
        debug_info = ListDebugInfo(
            catalog_fingerprint=state.current_catalog.fingerprint,
            candidates_count=len(catalog.sessions),
            cold_start=profile.is_cold_start,
            diversity=round(state.service.calculate_diversity([c.session for c in scored]), 4),
            top_scores=[round(c.score, 3) for c in scored[:5]],
        )
    return SessionListResponse(sessions=cards, total=len(cards), user_id=user_id, debug=debug_info)


@router.get("/djs", response_model=DJListResponse)
def recommended_djs(
    user_id: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, le=MAX_LIST_LIMIT),
):
    """Personalized DJs with scores and reasons."""
    state = get_state()
    catalog = state.catalog
    scored = state.service.get_top_dj_recommendations(catalog, _profile_for(state, user_id), limit)
    cards = [
        to_dj_card(c.dj, c, i + 1, session_count=len(catalog.sessions_for_dj(c.dj.id)))
        for i, c in enumerate(scored)
    ]
    return DJListResponse(djs=cards, total=len(cards), user_id=user_id)


@router.get("/continue-watching", response_model=SessionListResponse)
def continue_watching(
    user_id: str = Query(..., min_length=1),
    limit: Optional[int] = Query(None, le=MAX_LIST_LIMIT),
):
    state = get_state()
    sessions = state.service.get_continue_watching(_profile_for(state, user_id), state.catalog, limit)
    return _session_list(sessions, user_id)


@router.get("/favorite-genres", response_model=SessionListResponse)
def sessions_by_favorite_genres(
    user_id: str = Query(..., min_length=1),
    limit: Optional[int] = Query(None, le=MAX_LIST_LIMIT),
):
    state = get_state()
    sessions = state.service.get_sessions_by_favorite_genres(
        state.catalog, _profile_for(state, user_id), limit
    )
    return _session_list(sessions, user_id)


@router.get("/trending", response_model=SessionListResponse)
def trending(limit: Optional[int] = Query(None, le=MAX_LIST_LIMIT)):
    state = get_state()
    return _session_list(state.service.get_trending_sessions(state.catalog, limit))


@router.get("/new-releases", response_model=SessionListResponse)
def new_releases(limit: Optional[int] = Query(None, le=MAX_LIST_LIMIT)):
    state = get_state()
    return _session_list(state.service.get_new_releases(state.catalog, limit))
