"""
DJ Session Recommendations Server

Usage: uvicorn djrecs_server:app --reload --port 8000
"""

from .app import app, create_app
from .config import ServerConfig, get_config, reload_config
from .services import CatalogLoader, InMemoryProfileStore, JsonProfileStore
from .state import AppState, get_state, set_state

__all__ = [
    "app",
    "create_app",
    "AppState",
    "CatalogLoader",
    "InMemoryProfileStore",
    "JsonProfileStore",
    "ServerConfig",
    "get_config",
    "get_state",
    "reload_config",
    "set_state",
]
