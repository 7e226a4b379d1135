"""Tests for profile transformations and stores."""

import json
from concurrent.futures import ThreadPoolExecutor

from djrecs.models import MAX_VIEWED_SESSIONS, UserProfile
from djrecs_server.services import (
    InMemoryProfileStore,
    JsonProfileStore,
    add_favorite_genre,
    remove_favorite_genre,
    toggle_favorite_dj,
    track_session_view,
)


class TestProfileTransforms:

    def test_track_view_moves_to_front(self):
        profile = UserProfile(viewed_sessions=["a", "b", "c"])
        updated = track_session_view(profile, "c")
        assert updated.viewed_sessions == ["c", "a", "b"]
        # original untouched
        assert profile.viewed_sessions == ["a", "b", "c"]

    def test_track_view_caps_history(self):
        profile = UserProfile(viewed_sessions=[f"s{i}" for i in range(MAX_VIEWED_SESSIONS)])
        updated = track_session_view(profile, "new")
        assert updated.viewed_sessions[0] == "new"
        assert len(updated.viewed_sessions) == MAX_VIEWED_SESSIONS
        assert f"s{MAX_VIEWED_SESSIONS - 1}" not in updated.viewed_sessions

    def test_toggle_favorite_dj(self):
        profile = toggle_favorite_dj(UserProfile(), "dj-1")
        assert profile.favorite_djs == ["dj-1"]
        assert toggle_favorite_dj(profile, "dj-1").favorite_djs == []

    def test_genres(self):
        profile = add_favorite_genre(UserProfile(), "house")
        assert add_favorite_genre(profile, "house") is profile
        assert remove_favorite_genre(profile, "house").favorite_genres == []
        assert remove_favorite_genre(profile, "techno").favorite_genres == ["house"]


class TestInMemoryProfileStore:

    def test_unknown_user_gets_empty_profile(self):
        store = InMemoryProfileStore()
        assert store.get("nobody") == UserProfile()
        assert store.user_ids() == []

    def test_user_ids_are_normalized(self):
        store = InMemoryProfileStore()
        store.add_favorite_genre(" Alice ", "house")
        assert store.get("alice").favorite_genres == ["house"]
        assert store.user_ids() == ["alice"]

    def test_clear(self):
        store = InMemoryProfileStore({"bob": UserProfile(favorite_djs=["dj-1"])})
        store.clear("bob")
        assert store.get("bob").is_cold_start

    def test_concurrent_writes_for_one_user_are_not_lost(self):
        store = InMemoryProfileStore()
        genres = [f"genre-{i}" for i in range(200)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda g: store.add_favorite_genre("u1", g), genres))
        assert sorted(store.get("u1").favorite_genres) == sorted(genres)


class TestJsonProfileStore:

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "profiles.json"
        store = JsonProfileStore(path)
        store.track_session_view("u1", "session-001")
        store.toggle_favorite_dj("u1", "dj-002")

        reopened = JsonProfileStore(path)
        profile = reopened.get("u1")
        assert profile.viewed_sessions == ["session-001"]
        assert profile.favorite_djs == ["dj-002"]

        raw = json.loads(path.read_text())
        assert raw["profiles"]["u1"]["favoriteDJs"] == ["dj-002"]

    def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text("{not json")
        store = JsonProfileStore(path)
        assert store.user_ids() == []

    def test_concurrent_writes_are_saved(self, tmp_path):
        path = tmp_path / "profiles.json"
        store = JsonProfileStore(path)
        users = [f"user-{i}" for i in range(40)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda u: store.track_session_view(u, "session-001"), users))
        assert sorted(JsonProfileStore(path).user_ids()) == sorted(users)

    def test_clear_is_saved(self, tmp_path):
        path = tmp_path / "profiles.json"
        store = JsonProfileStore(path)
        store.add_favorite_genre("u1", "disco")
        store.clear("u1")
        assert JsonProfileStore(path).user_ids() == []
