"""Application state: catalog snapshot, profile store, and recommendation service."""

import logging
from typing import Optional

from djrecs import RecommendationService

from .config import ServerConfig, get_config
from .services import (
    CatalogLoader,
    InMemoryProfileStore,
    JsonProfileStore,
    LoadedCatalog,
    ProfileStore,
)

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        loaded_catalog: Optional[LoadedCatalog] = None,
        profile_store: Optional[ProfileStore] = None,
    ):
        self.config = config
        self.catalog_loader = CatalogLoader(config.catalog_dir)
        self.current_catalog: LoadedCatalog = loaded_catalog or self.catalog_loader.load()
        self.profile_store: ProfileStore = profile_store or self._create_profile_store(config)
        self.service = RecommendationService(config.load_algorithm_config())

    def _create_profile_store(self, config: ServerConfig) -> ProfileStore:
        """JSON-backed store when PROFILES_PATH is set, else in-memory."""
        if config.profiles_path:
            logger.info("[startup] Profile store: JSON (%s)", config.profiles_path)
            return JsonProfileStore(config.profiles_path)
        logger.info("[startup] Profile store: in-memory")
        return InMemoryProfileStore()

    @property
    def catalog(self):
        return self.current_catalog.catalog


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (tests, or an embedding app that builds its own)."""
    global _state
    _state = state
