"""Wire models are built from the domain records' camelCase dicts."""

from forzeit.cache import CacheStats
from forzeit.insights import compute_insights
from forzeit.weeks import SessionView
from forzeit_api.response_models import (
    AvaInsightsResponse,
    CacheStatsResponse,
    CardResponse,
    SessionResponse,
    WeekResponse,
)


class TestResponseBuilders:
    def test_week(self, store):
        week = store.get_week_by_id("w1")
        assert WeekResponse.from_week(week).model_dump(by_alias=True) == week.to_dict()

    def test_card(self, store):
        card = store.get_card_by_id("c1")
        assert CardResponse.from_card(card).model_dump(by_alias=True) == card.to_dict()

    def test_session(self, store):
        view = SessionView(store.get_sessions_by_user_id("u1")[0], duration_minutes=120)
        dumped = SessionResponse.from_view(view).model_dump(by_alias=True)
        assert dumped == view.to_dict()
        assert dumped["durationMinutes"] == 120

    def test_insights(self, store):
        insights = compute_insights(store.get_cards_by_week_id("w1"), [])
        dumped = AvaInsightsResponse.from_insights(insights).model_dump(by_alias=True)
        assert dumped == insights.to_dict()

    def test_cache_stats(self):
        stats = CacheStats(total_entries=3, valid_entries=2, expired_entries=1)
        dumped = CacheStatsResponse.from_stats(stats, timestamp="2025-08-25T00:00:00.000Z")
        assert dumped.model_dump(by_alias=True) == {
            "totalEntries": 3,
            "validEntries": 2,
            "expiredEntries": 1,
            "timestamp": "2025-08-25T00:00:00.000Z",
        }
