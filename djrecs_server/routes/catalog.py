"""Catalog detail and "more like this" endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..models import DJCard, DJListResponse, SessionCard, SessionListResponse
from ..state import get_state
from ..utils import MAX_LIST_LIMIT, to_dj_card, to_session_card

router = APIRouter()


@router.get("/sessions/{session_id}", response_model=SessionCard)
def get_session(session_id: str):
    state = get_state()
    session = state.catalog.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return to_session_card(session)


@router.get("/sessions/{session_id}/similar", response_model=SessionListResponse)
def similar_sessions(session_id: str, limit: Optional[int] = Query(None, le=MAX_LIST_LIMIT)):
    """Sessions like this one. Unknown ids return an empty list."""
    state = get_state()
    sessions = state.service.get_similar_sessions(session_id, state.catalog, limit)
    cards = [to_session_card(s, position=i + 1) for i, s in enumerate(sessions)]
    return SessionListResponse(sessions=cards, total=len(cards))


@router.get("/djs/{dj_id}", response_model=DJCard)
def get_dj(dj_id: str):
    state = get_state()
    catalog = state.catalog
    dj = catalog.get_dj(dj_id)
    if not dj:
        raise HTTPException(status_code=404, detail="DJ not found")
    return to_dj_card(dj, session_count=len(catalog.sessions_for_dj(dj_id)))


@router.get("/djs/{dj_id}/similar", response_model=DJListResponse)
def similar_djs(dj_id: str, limit: Optional[int] = Query(None, le=MAX_LIST_LIMIT)):
    """DJs like this one. Unknown ids return an empty list."""
    state = get_state()
    djs = state.service.get_similar_djs(dj_id, state.catalog, limit)
    cards = [to_dj_card(d, position=i + 1) for i, d in enumerate(djs)]
    return DJListResponse(djs=cards, total=len(cards))
