"""Tests for ownership-gated week reads and pagination."""

import pytest

from forzeit.errors import Forbidden, NotFound, Unauthenticated
from forzeit.weeks import WeekQueries, clamp_page


@pytest.fixture
def queries(store):
    return WeekQueries(store)


class TestClampPage:
    @pytest.mark.parametrize(
        "limit, offset, expected",
        [
            (None, None, (10, 0)),
            (5, 2, (5, 2)),
            (0, 0, (10, 0)),
            (-3, -1, (10, 0)),
            (500, 0, (50, 0)),
            (50, 7, (50, 7)),
        ],
    )
    def test_clamp(self, limit, offset, expected):
        assert clamp_page(limit, offset) == expected


class TestWeekQueries:
    def test_get_week(self, queries, alice):
        assert queries.get_week("w1", alice).start_iso == "2025-08-25"

    def test_get_week_not_found_first(self, queries):
        with pytest.raises(NotFound):
            queries.get_week("nope", None)

    def test_get_week_unauthenticated(self, queries):
        with pytest.raises(Unauthenticated):
            queries.get_week("w1", None)

    def test_get_week_foreign(self, queries, bob):
        with pytest.raises(Forbidden):
            queries.get_week("w1", bob)

    def test_weeks_by_user(self, queries, alice):
        assert [w.id for w in queries.weeks_by_user("u1", alice)] == ["w2", "w1"]
        assert [w.id for w in queries.weeks_by_user("u1", alice, limit=1, offset=1)] == ["w1"]

    def test_weeks_of_other_user(self, queries, alice):
        with pytest.raises(Forbidden):
            queries.weeks_by_user("u2", alice)

    def test_cards_for_week(self, queries, alice):
        assert [c.id for c in queries.cards_for_week("w1", alice)] == ["c1", "c2"]

    def test_cards_for_foreign_week(self, queries, alice):
        with pytest.raises(Forbidden):
            queries.cards_for_week("w3", alice)

    def test_sessions_for_week_carry_duration(self, queries, alice):
        views = queries.sessions_for_week("w1", alice)

        assert [v.session.id for v in views] == ["s1"]
        assert views[0].duration_minutes == 120
        assert views[0].to_dict() == {
            "id": "s1",
            "userId": "u1",
            "startedAt": "2025-08-25T09:00:00Z",
            "endedAt": "2025-08-25T11:00:00Z",
            "durationMinutes": 120,
        }

    def test_sessions_for_missing_week(self, queries, alice):
        with pytest.raises(NotFound):
            queries.sessions_for_week("nope", alice)
