"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    loaded = state.current_catalog
    return {
        "name": "DJ Session Recommendations API",
        "version": "1.0.0",
        "catalog": {
            "sessions": loaded.session_count,
            "djs": loaded.dj_count,
            "fingerprint": loaded.fingerprint,
        },
        "endpoints": {
            "recommendations": [
                "/api/recommendations/sessions",
                "/api/recommendations/djs",
                "/api/recommendations/continue-watching",
                "/api/recommendations/favorite-genres",
                "/api/recommendations/trending",
                "/api/recommendations/new-releases",
            ],
            "catalog": ["/api/catalog/sessions/{id}/similar", "/api/catalog/djs/{id}/similar"],
            "profiles": ["/api/profiles/{user_id}"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "sessions": state.current_catalog.session_count,
        "djs": state.current_catalog.dj_count,
    }
