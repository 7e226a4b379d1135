"""
Catalog Loader

Loads a catalog snapshot from a directory exported by the CMS.
The directory must contain sessions.json and djs.json; each file is either a
JSON list of records or an object with a "sessions" / "djs" list.

Usage:
    loader = CatalogLoader(catalog_dir)
    loaded = loader.load()
    print(f"Loaded {len(loaded.catalog.sessions)} sessions ({loaded.fingerprint[:8]})")
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from djrecs.models import Catalog, ensure_djs, ensure_sessions

logger = logging.getLogger(__name__)


@dataclass
class LoadedCatalog:
    """A loaded catalog with its source path and content fingerprint."""
    path: Path
    catalog: Catalog
    fingerprint: str

    @property
    def session_count(self) -> int:
        return len(self.catalog.sessions)

    @property
    def dj_count(self) -> int:
        return len(self.catalog.djs)


class CatalogLoader:
    """
    Loads sessions and DJs from JSON files.

    Expected directory structure:
        data/catalog/
        ├── sessions.json
        └── djs.json
    """

    def __init__(self, catalog_dir: Path):
        self.catalog_dir = Path(catalog_dir)

    def _read_records(self, filename: str, key: str) -> List[Dict[str, Any]]:
        path = self.catalog_dir / filename
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")
        try:
            with open(path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
        records = data.get(key, []) if isinstance(data, dict) else data
        if not isinstance(records, list):
            raise ValueError(f"Expected a list of {key} in {path}")
        return records

    def load(self) -> LoadedCatalog:
        """Read and validate both files. Raises on missing files or malformed records."""
        catalog = Catalog(
            sessions=ensure_sessions(self._read_records("sessions.json", "sessions")),
            djs=ensure_djs(self._read_records("djs.json", "djs")),
        )
        loaded = LoadedCatalog(
            path=self.catalog_dir,
            catalog=catalog,
            fingerprint=catalog.fingerprint(),
        )
        logger.info(
            "[catalog] LOADED sessions=%s djs=%s fingerprint=%s path=%s",
            loaded.session_count,
            loaded.dj_count,
            loaded.fingerprint[:12],
            self.catalog_dir,
        )
        return loaded
