"""Tests for catalog, profile, and config models."""

import pytest
from pydantic import ValidationError

from djrecs.models import (
    DJ,
    MAX_VIEWED_SESSIONS,
    Catalog,
    RecommendationConfig,
    Session,
    UserProfile,
    ensure_catalog,
    ensure_profile,
)


class TestSession:

    def test_accepts_camel_case_keys(self):
        session = Session.model_validate(
            {"id": "s", "djId": "d", "djName": "Dee", "date": "2025-02-01", "series": "rooftop"}
        )
        assert session.dj_id == "d"
        assert session.display_dj_name == "Dee"
        assert session.date.isoformat() == "2025-02-01"

    def test_display_name_falls_back_to_id(self, make_session):
        assert make_session("s", dj_id="dj-9").display_dj_name == "dj-9"

    def test_negative_views_rejected(self, make_session):
        with pytest.raises(ValidationError):
            make_session("s", views=-1)

    def test_unknown_series_rejected(self, make_session):
        with pytest.raises(ValidationError):
            make_session("s", series="basement")

    def test_repeated_genres_and_moods_dropped(self, make_session):
        session = make_session("s", genres=["house", "disco", "house"], mood=["dark", "dark"])
        assert session.genres == ["house", "disco"]
        assert session.mood == ["dark"]


class TestDJ:

    def test_repeated_genres_dropped(self):
        dj = DJ.model_validate({"id": "d", "genres": ["techno", "techno", "minimal"]})
        assert dj.genres == ["techno", "minimal"]

    def test_status(self):
        assert DJ(id="d").is_active
        assert not DJ(id="d", status="inactive").is_active
        with pytest.raises(ValidationError):
            DJ(id="d", status="retired")


class TestCatalog:

    def test_lookups(self, sample_catalog):
        assert sample_catalog.get_session("session-004").dj_id == "dj-002"
        assert sample_catalog.get_session("missing") is None
        assert sample_catalog.get_dj("dj-003").name == "Kai Thompson"
        assert [s.id for s in sample_catalog.sessions_for_dj("dj-004")] == ["session-005", "session-010"]

    def test_max_views_floor(self, make_session):
        assert Catalog().max_views() == 1
        assert Catalog(sessions=[make_session("s", views=0)]).max_views() == 1

    def test_fingerprint_tracks_content(self, make_session):
        first = Catalog(sessions=[make_session("s", views=1)])
        same = Catalog(sessions=[make_session("s", views=1)])
        changed = Catalog(sessions=[make_session("s", views=2)])
        assert first.fingerprint() == same.fingerprint()
        assert first.fingerprint() != changed.fingerprint()

    def test_ensure_catalog(self, sample_catalog):
        assert ensure_catalog(sample_catalog) is sample_catalog
        assert ensure_catalog({}).sessions == []
        with pytest.raises(ValueError):
            ensure_catalog(None)


class TestUserProfile:

    def test_viewed_sessions_deduped_and_capped(self):
        ids = ["a", "b", "a"] + [f"s{i}" for i in range(60)]
        profile = UserProfile(viewed_sessions=ids)
        assert profile.viewed_sessions[:3] == ["a", "b", "s0"]
        assert len(profile.viewed_sessions) == MAX_VIEWED_SESSIONS

    def test_wire_aliases(self):
        profile = UserProfile.model_validate(
            {"viewedSessions": ["x"], "favoriteDJs": ["d"], "favoriteGenres": ["house"]}
        )
        assert profile.favorite_djs == ["d"]
        assert profile.model_dump(by_alias=True) == {
            "viewedSessions": ["x"],
            "favoriteDJs": ["d"],
            "favoriteGenres": ["house"],
        }

    def test_cold_start(self):
        assert UserProfile().is_cold_start
        assert not UserProfile(favorite_genres=["house"]).is_cold_start
        assert not UserProfile(viewed_sessions=["s"]).is_cold_start

    def test_profile_is_frozen(self):
        profile = UserProfile()
        with pytest.raises(ValidationError):
            profile.favorite_genres = ["house"]

    def test_ensure_profile(self):
        assert ensure_profile({"favoriteGenres": ["disco"]}).favorite_genres == ["disco"]
        with pytest.raises(ValueError):
            ensure_profile(None)


class TestRecommendationConfig:

    def test_defaults(self):
        config = RecommendationConfig()
        assert config.session_genre_affinity_cap == 30.0
        assert config.dj_session_count_cap == 15.0
        assert config.default_session_limit == 6
        assert config.default_dj_limit == 4

    def test_from_dict_grouped(self):
        config = RecommendationConfig.from_dict(
            {
                "session_scoring": {"novelty_bonus": 0},
                "dj_scoring": {"featured_bonus": 2},
                "similarity": {"session_same_dj": 9},
                "limits": {"session_limit": 3},
                "target_diversity": 0.7,
                "unknown": 1,
            }
        )
        assert config.session_novelty_bonus == 0
        assert config.dj_featured_bonus == 2
        assert config.similar_session_same_dj == 9
        assert config.default_session_limit == 3
        assert config.target_diversity == 0.7

    def test_from_dict_flat(self):
        config = RecommendationConfig.from_dict({"session_popularity_weight": 5})
        assert config.session_popularity_weight == 5

    def test_negative_cap_rejected(self):
        with pytest.raises(ValidationError):
            RecommendationConfig(session_genre_affinity_cap=-1)
