"""Tests for diversity balancing and the diversity measure."""

import math

import pytest

from djrecs.models import ScoredSession
from djrecs.stages.diversity import calculate_diversity, diversify


@pytest.fixture
def scored(make_session):
    """Factory: (id, dj_id, series, score) tuples to ScoredSessions."""

    def _make(*specs):
        return [
            ScoredSession(session=make_session(sid, dj_id=dj, series=series), score=score)
            for sid, dj, series, score in specs
        ]

    return _make


class TestDiversify:

    def test_short_list_is_returned_sorted(self, scored):
        candidates = scored(("a", "D1", "studio", 1.0), ("b", "D1", "studio", 3.0))
        assert [c.session.id for c in diversify(candidates, limit=6)] == ["b", "a"]

    def test_limits_single_dj_dominance(self, scored):
        candidates = scored(
            ("a1", "A", "studio", 10),
            ("a2", "A", "studio", 9),
            ("a3", "A", "studio", 8),
            ("a4", "A", "studio", 7),
            ("b1", "B", "studio", 6),
            ("b2", "B", "studio", 5),
            ("c1", "C", "studio", 4),
        )
        result = diversify(candidates, limit=4)
        assert [c.session.id for c in result] == ["a1", "a2", "b1", "c1"]
        per_dj = {}
        for c in result:
            per_dj[c.session.dj_id] = per_dj.get(c.session.dj_id, 0) + 1
        assert max(per_dj.values()) <= math.ceil(4 / 2)

    def test_backfill_in_score_order(self, scored):
        candidates = scored(
            ("a1", "A", "studio", 10),
            ("a2", "A", "studio", 9),
            ("a3", "A", "studio", 8),
            ("b1", "B", "studio", 7),
            ("a4", "A", "studio", 6),
        )
        result = diversify(candidates, limit=4)
        assert [c.session.id for c in result] == ["a1", "a2", "b1", "a3"]

    def test_unused_series_is_admitted(self, scored):
        candidates = scored(
            ("a1", "A", "studio", 10),
            ("a2", "A", "studio", 9),
            ("a3", "A", "rooftop", 8),
            ("a4", "A", "studio", 7),
            ("b1", "B", "studio", 1),
        )
        result = diversify(candidates, limit=4)
        assert [c.session.id for c in result] == ["a1", "a2", "a3", "b1"]

    def test_no_diversity_available_falls_back_to_score_order(self, scored):
        candidates = scored(*[(f"s{i}", "A", "studio", 10 - i) for i in range(7)])
        result = diversify(candidates, limit=5)
        assert [c.session.id for c in result] == ["s0", "s1", "s2", "s3", "s4"]

    def test_never_invents_or_shrinks(self, scored):
        candidates = scored(*[(f"s{i}", f"D{i % 3}", "studio", float(i % 4)) for i in range(9)])
        for limit in range(0, 12):
            result = diversify(candidates, limit=limit)
            assert len(result) == min(limit, len(candidates))
            assert len({c.session.id for c in result}) == len(result)
            assert {c.session.id for c in result} <= {c.session.id for c in candidates}

    def test_negative_limit_is_empty(self, scored):
        assert diversify(scored(("a", "A", "studio", 1.0)), limit=-1) == []

    def test_does_not_mutate_input(self, scored):
        candidates = scored(("a", "A", "studio", 1.0), ("b", "B", "studio", 2.0), ("c", "C", "studio", 3.0))
        before = [c.session.id for c in candidates]
        diversify(candidates, limit=2)
        assert [c.session.id for c in candidates] == before


class TestCalculateDiversity:

    def test_empty(self):
        assert calculate_diversity([]) == 0.0

    def test_two_sessions(self, make_session):
        sessions = [
            make_session("a", dj_id="D1", genres=["house"], series="studio"),
            make_session("b", dj_id="D2", genres=["techno"], series="studio"),
        ]
        # genres 2/2, djs 2/2, series 1/2
        assert calculate_diversity(sessions) == pytest.approx((1 + 1 + 0.5) / 3)
