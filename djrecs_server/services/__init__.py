"""Backing logic: catalog loading and profile persistence."""

from .catalog_loader import CatalogLoader, LoadedCatalog
from .profile_store import (
    InMemoryProfileStore,
    JsonProfileStore,
    ProfileStore,
    add_favorite_genre,
    remove_favorite_genre,
    toggle_favorite_dj,
    track_session_view,
)

__all__ = [
    "CatalogLoader",
    "InMemoryProfileStore",
    "JsonProfileStore",
    "LoadedCatalog",
    "ProfileStore",
    "add_favorite_genre",
    "remove_favorite_genre",
    "toggle_favorite_dj",
    "track_session_view",
]
