"""
Profile store: owns and persists user profiles for the recommendation engine.

The engine only reads UserProfile values. Every mutation here builds a new
profile (model_copy) and replaces the stored one; stored profiles are never
changed in place. Persistence is in memory or a JSON file depending on
PROFILES_PATH.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Callable, Dict, List, Optional, Protocol, Union

from djrecs.models import MAX_VIEWED_SESSIONS, UserProfile

logger = logging.getLogger(__name__)


def _normalize_user_id(user_id: str) -> str:
    """Normalize for use as storage key: strip and lowercase."""
    return user_id.strip().lower()


# ---------------------------------------------------------------------------
# Profile transformations (pure: profile in, new profile out)
# ---------------------------------------------------------------------------


def track_session_view(profile: UserProfile, session_id: str) -> UserProfile:
    """Move session_id to the front of the history, dropping older duplicates; keep the last 50."""
    others = [sid for sid in profile.viewed_sessions if sid != session_id]
    viewed = ([session_id] + others)[:MAX_VIEWED_SESSIONS]
    return profile.model_copy(update={"viewed_sessions": viewed})


def toggle_favorite_dj(profile: UserProfile, dj_id: str) -> UserProfile:
    if profile.is_favorite_dj(dj_id):
        favorites = [d for d in profile.favorite_djs if d != dj_id]
    else:
        favorites = profile.favorite_djs + [dj_id]
    return profile.model_copy(update={"favorite_djs": favorites})


def add_favorite_genre(profile: UserProfile, genre: str) -> UserProfile:
    if genre in profile.favorite_genres:
        return profile
    return profile.model_copy(update={"favorite_genres": profile.favorite_genres + [genre]})


def remove_favorite_genre(profile: UserProfile, genre: str) -> UserProfile:
    genres = [g for g in profile.favorite_genres if g != genre]
    return profile.model_copy(update={"favorite_genres": genres})


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------


class ProfileStore(Protocol):
    """Protocol for profile persistence. Implement for memory, JSON file, or a key-value store."""

    def get(self, user_id: str) -> UserProfile:
        """Return the user's profile, or an empty profile for unknown users."""
        ...

    def track_session_view(self, user_id: str, session_id: str) -> UserProfile:
        ...

    def toggle_favorite_dj(self, user_id: str, dj_id: str) -> UserProfile:
        ...

    def add_favorite_genre(self, user_id: str, genre: str) -> UserProfile:
        ...

    def remove_favorite_genre(self, user_id: str, genre: str) -> UserProfile:
        ...

    def clear(self, user_id: str) -> None:
        """Forget everything about the user."""
        ...


class InMemoryProfileStore:
    """
    Profile store kept in process memory. Used for local runs and tests.

    FastAPI runs sync routes in a threadpool, so every read-modify-write holds
    the store lock.
    """

    def __init__(self, profiles: Optional[Dict[str, UserProfile]] = None):
        self._lock = threading.RLock()
        self._profiles: Dict[str, UserProfile] = {
            _normalize_user_id(uid): p for uid, p in (profiles or {}).items()
        }

    def _put(self, user_id: str, profile: UserProfile) -> UserProfile:
        self._profiles[_normalize_user_id(user_id)] = profile
        return profile

    def _update(self, user_id: str, transform: Callable[..., UserProfile], *args) -> UserProfile:
        with self._lock:
            return self._put(user_id, transform(self.get(user_id), *args))

    def get(self, user_id: str) -> UserProfile:
        return self._profiles.get(_normalize_user_id(user_id), UserProfile())

    def user_ids(self) -> List[str]:
        with self._lock:
            return list(self._profiles)

    def track_session_view(self, user_id: str, session_id: str) -> UserProfile:
        return self._update(user_id, track_session_view, session_id)

    def toggle_favorite_dj(self, user_id: str, dj_id: str) -> UserProfile:
        return self._update(user_id, toggle_favorite_dj, dj_id)

    def add_favorite_genre(self, user_id: str, genre: str) -> UserProfile:
        return self._update(user_id, add_favorite_genre, genre)

    def remove_favorite_genre(self, user_id: str, genre: str) -> UserProfile:
        return self._update(user_id, remove_favorite_genre, genre)

    def clear(self, user_id: str) -> None:
        with self._lock:
            self._profiles.pop(_normalize_user_id(user_id), None)


class JsonProfileStore(InMemoryProfileStore):
    """Profile store backed by a JSON file (e.g. data/profiles.json). Saved after every write."""

    def __init__(self, path: Union[Path, str]):
        super().__init__()
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("[profiles] LOAD_FAILED path=%s error=%s, starting empty", self._path, e)
            return
        profiles = data.get("profiles") if isinstance(data, dict) else None
        for uid, raw in (profiles or {}).items():
            self._profiles[_normalize_user_id(uid)] = UserProfile.model_validate(raw)

    def _save(self) -> None:
        out = {
            "profiles": {
                uid: profile.model_dump(by_alias=True)
                for uid, profile in self._profiles.items()
            }
        }
        with open(self._path, "w") as f:
            json.dump(out, f, indent=2)

    def _put(self, user_id: str, profile: UserProfile) -> UserProfile:
        with self._lock:
            super()._put(user_id, profile)
            self._save()
        return profile

    def clear(self, user_id: str) -> None:
        with self._lock:
            super().clear(user_id)
            self._save()
