"""Shared fixtures: small catalogs, profiles, and model factories."""

import json
from pathlib import Path

import pytest

from djrecs.models import DJ, Catalog, Session, UserProfile

SAMPLE_CATALOG_DIR = Path(__file__).parent.parent / "data" / "catalog"


@pytest.fixture
def make_session():
    """Factory for Session models with sensible defaults."""

    def _make(
        id,
        dj_id="dj-001",
        genres=("house",),
        series="studio",
        mood=(),
        views=0,
        date="2025-01-01",
        dj_name="",
    ):
        return Session(
            id=id,
            dj_id=dj_id,
            dj_name=dj_name,
            genres=list(genres),
            series=series,
            mood=list(mood),
            views=views,
            date=date,
        )

    return _make


@pytest.fixture
def make_dj():
    """Factory for DJ models."""

    def _make(id, genres=("house",), location="dc", featured=False, name=""):
        return DJ(id=id, name=name or id, genres=list(genres), location=location, featured=featured)

    return _make


@pytest.fixture
def two_session_catalog(make_session):
    """S1 (house, D1, 100 views) and S2 (techno, D2, 10 views)."""
    return Catalog(
        sessions=[
            make_session("S1", dj_id="D1", genres=["house"], views=100),
            make_session("S2", dj_id="D2", genres=["techno"], views=10, series="warehouse"),
        ],
        djs=[],
    )


@pytest.fixture
def sample_catalog():
    """The catalog shipped under data/catalog."""
    with open(SAMPLE_CATALOG_DIR / "sessions.json") as f:
        sessions = json.load(f)
    with open(SAMPLE_CATALOG_DIR / "djs.json") as f:
        djs = json.load(f)
    return Catalog(
        sessions=[Session.model_validate(s) for s in sessions],
        djs=[DJ.model_validate(d) for d in djs],
    )


@pytest.fixture
def empty_profile():
    return UserProfile()


@pytest.fixture
def catalog_dir(tmp_path):
    """A temporary copy of the sample catalog directory."""
    target = tmp_path / "catalog"
    target.mkdir()
    for name in ("sessions.json", "djs.json"):
        (target / name).write_text((SAMPLE_CATALOG_DIR / name).read_text())
    return target
