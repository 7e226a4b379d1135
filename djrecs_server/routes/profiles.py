"""User profile endpoints: history and favorites."""

from fastapi import APIRouter

from ..models import ProfileResponse, TrackViewRequest
from ..state import get_state
from ..utils import to_profile_response

router = APIRouter()


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(user_id: str):
    """Stored profile; unknown users get an empty profile."""
    state = get_state()
    return to_profile_response(user_id, state.profile_store.get(user_id))


@router.delete("/{user_id}")
def clear_profile(user_id: str):
    state = get_state()
    state.profile_store.clear(user_id)
    return {"status": "ok", "user_id": user_id}


@router.post("/{user_id}/views", response_model=ProfileResponse)
def track_view(user_id: str, request: TrackViewRequest):
    """Record a session view. Ids are not checked against the catalog."""
    state = get_state()
    profile = state.profile_store.track_session_view(user_id, request.session_id)
    return to_profile_response(user_id, profile)


@router.post("/{user_id}/favorite-djs/{dj_id}/toggle", response_model=ProfileResponse)
def toggle_favorite_dj(user_id: str, dj_id: str):
    state = get_state()
    profile = state.profile_store.toggle_favorite_dj(user_id, dj_id)
    return to_profile_response(user_id, profile)


@router.put("/{user_id}/favorite-genres/{genre}", response_model=ProfileResponse)
def add_favorite_genre(user_id: str, genre: str):
    state = get_state()
    profile = state.profile_store.add_favorite_genre(user_id, genre)
    return to_profile_response(user_id, profile)


@router.delete("/{user_id}/favorite-genres/{genre}", response_model=ProfileResponse)
def remove_favorite_genre(user_id: str, genre: str):
    state = get_state()
    profile = state.profile_store.remove_favorite_genre(user_id, genre)
    return to_profile_response(user_id, profile)
