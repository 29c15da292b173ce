"""
Tests for the insights orchestrator.

Tests cover:
- miss computes and caches, hit returns the cached object
- cache slots keyed by (week, requester)
- invalidation forces recomputation
- TTL expiry forces recomputation
- NotFound precedes authorization; no cache access before authorization
"""

import pytest

from forzeit.errors import Forbidden, NotFound, Unauthenticated
from forzeit.insights import InsightsService
from forzeit.insights.engine import MSG_BREAK_DOWN_TASKS, MSG_START_TRACKING
from forzeit.models import AvaInsights, CardStatus
from forzeit.store import RecordStore


class TestLookup:
    def test_miss_then_hit(self, insights_service, alice):
        first = insights_service.lookup("w1", alice)
        second = insights_service.lookup("w1", alice)

        assert first.cache_hit is False
        assert second.cache_hit is True
        assert second.insights is first.insights

    def test_week_values(self, insights_service, alice):
        insights = insights_service.get_insights("w1", alice)

        # c1 DONE 60 + c2 TODO 120; s1 = 120 minutes inside the week, s2 starts on w2
        assert insights == AvaInsights(
            total_minutes=180,
            done_count=1,
            focus_score=20,
            recommendations=(MSG_BREAK_DOWN_TASKS,),
        )

    def test_session_on_next_week_boundary_counts_for_next_week(self, insights_service, alice):
        insights = insights_service.get_insights("w2", alice)
        # no cards, s2 = 60 minutes -> 5
        assert insights.focus_score == 5

    def test_week_with_unparseable_start(self, cache, alice):
        store = RecordStore.from_dict(
            {
                "users": [{"id": "u1", "email": "alice@example.com", "name": "Alice"}],
                "weeks": [{"id": "w1", "userId": "u1", "startISO": "not-a-date"}],
                "cards": [
                    {"id": "c1", "userId": "u1", "weekId": "w1", "title": "Plan",
                     "status": "DONE", "minutes": 15}
                ],
                "sessions": [
                    {"id": "s1", "userId": "u1", "startedAt": "2025-08-25T09:00:00Z",
                     "endedAt": "2025-08-25T10:00:00Z"}
                ],
            }
        )
        insights = InsightsService(store, cache).get_insights("w1", alice)

        # no sessions selected: 1 done card -> 10
        assert insights.total_minutes == 15
        assert insights.focus_score == 10
        assert MSG_START_TRACKING in insights.recommendations

    def test_cached_under_requester_key(self, insights_service, cache, alice):
        insights_service.get_insights("w1", alice)
        assert cache.has("ava_insights:u1:w1")
        assert cache.stats().total_entries == 1

    def test_hit_does_not_refresh_ttl(self, insights_service, clock, alice):
        insights_service.lookup("w1", alice)
        clock.advance(40)
        assert insights_service.lookup("w1", alice).cache_hit is True
        clock.advance(21)
        assert insights_service.lookup("w1", alice).cache_hit is False

    def test_ttl_is_sixty_seconds(self, store, cache, clock, alice):
        service = InsightsService(store, cache)
        service.lookup("w1", alice)

        clock.advance(60)
        assert service.lookup("w1", alice).cache_hit is True
        clock.advance(1)
        assert service.lookup("w1", alice).cache_hit is False


class TestIsolation:
    def test_keys_differ_per_requester(self):
        assert InsightsService.cache_key("w1", "u1") != InsightsService.cache_key("w1", "u2")

    def test_each_owner_has_own_slot(self, insights_service, cache, alice, bob):
        insights_service.get_insights("w1", alice)
        insights_service.get_insights("w3", bob)

        assert cache.has("ava_insights:u1:w1")
        assert cache.has("ava_insights:u2:w3")
        assert cache.stats().total_entries == 2

    def test_foreign_slot_is_never_served(self, insights_service, cache, alice):
        planted = AvaInsights(total_minutes=999, done_count=99, focus_score=100)
        cache.set(InsightsService.cache_key("w1", "u2"), planted)

        result = insights_service.lookup("w1", alice)
        assert result.cache_hit is False
        assert result.insights != planted

    def test_invalidating_one_requester_keeps_the_other(self, insights_service, cache, alice, bob):
        insights_service.get_insights("w1", alice)
        insights_service.get_insights("w3", bob)

        assert insights_service.invalidate("w3", "u2") is True

        assert cache.has("ava_insights:u1:w1")
        assert not cache.has("ava_insights:u2:w3")

    def test_invalidate_other_user_same_week_is_noop(self, insights_service, cache, alice):
        insights_service.get_insights("w1", alice)
        assert insights_service.invalidate("w1", "u2") is False
        assert cache.has("ava_insights:u1:w1")


class TestInvalidation:
    def test_invalidate_recomputes_with_new_data(self, insights_service, store, alice):
        before = insights_service.get_insights("w1", alice)
        assert before.done_count == 1

        store.update_card_status("c2", CardStatus.DONE)

        # without invalidation the stale value is served
        assert insights_service.lookup("w1", alice).insights == before

        insights_service.invalidate("w1", "u1")
        after = insights_service.lookup("w1", alice)

        assert after.cache_hit is False
        assert after.insights.done_count == 2
        assert after.insights.focus_score == 30

    def test_invalidate_missing_slot(self, insights_service):
        assert insights_service.invalidate("w1", "u1") is False


class TestAuthorization:
    def test_no_principal(self, insights_service):
        with pytest.raises(Unauthenticated):
            insights_service.get_insights("w1", None)

    def test_not_owner(self, insights_service, bob):
        with pytest.raises(Forbidden):
            insights_service.get_insights("w1", bob)

    def test_missing_week(self, insights_service, alice):
        with pytest.raises(NotFound):
            insights_service.get_insights("nope", alice)

    def test_not_found_precedes_unauthenticated(self, insights_service):
        with pytest.raises(NotFound):
            insights_service.get_insights("nope", None)

    def test_denied_requests_never_touch_cache(self, insights_service, cache, bob):
        with pytest.raises(Forbidden):
            insights_service.get_insights("w1", bob)
        with pytest.raises(Unauthenticated):
            insights_service.get_insights("w1", None)

        assert cache.stats().total_entries == 0

    def test_stats_passthrough(self, insights_service, alice):
        insights_service.get_insights("w1", alice)
        assert insights_service.stats().valid_entries == 1
