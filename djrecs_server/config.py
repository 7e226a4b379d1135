"""
Server Configuration

Loads configuration from environment variables and provides defaults.
A .env file at the project root is loaded first using python-dotenv.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from djrecs import RecommendationConfig

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Directory holding sessions.json and djs.json
    catalog_dir: Path = BASE_DIR / "data" / "catalog"
    # JSON file for user profiles; None keeps profiles in memory only
    profiles_path: Optional[Path] = None
    # Optional JSON overrides for RecommendationConfig
    algorithm_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (BASE_DIR / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            catalog_dir=_path_env("CATALOG_DIR", BASE_DIR / "data" / "catalog"),
            profiles_path=_path_env("PROFILES_PATH"),
            algorithm_config_path=_path_env("ALGORITHM_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []
        if not self.catalog_dir.exists():
            errors.append(f"Catalog directory not found: {self.catalog_dir}")
        if self.algorithm_config_path and not self.algorithm_config_path.exists():
            errors.append(f"Algorithm config not found: {self.algorithm_config_path}")
        if logging.getLevelName(self.log_level) == f"Level {self.log_level}":
            errors.append(f"Unknown log level: {self.log_level}")
        return len(errors) == 0, errors

    def load_algorithm_config(self) -> RecommendationConfig:
        """RecommendationConfig from algorithm_config_path, or defaults when unset."""
        if not self.algorithm_config_path:
            return RecommendationConfig()
        with open(self.algorithm_config_path) as f:
            return RecommendationConfig.from_dict(json.load(f))


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
