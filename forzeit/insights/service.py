"""
Insights access orchestrator.

resolve week -> authorize ownership -> cache lookup keyed by (week, requester)
-> compute on miss -> populate cache -> return.

Mutation handlers receive `invalidate` as a callable and drop the owner's slot
after a write, so the next read recomputes.
"""

import logging
from dataclasses import dataclass

from forzeit import config
from forzeit.auth.gate import require_ownership
from forzeit.cache import CacheManager, CacheStats
from forzeit.errors import NotFound
from forzeit.insights.engine import compute_insights
from forzeit.models import AvaInsights, Principal
from forzeit.store import RecordStore

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "ava_insights"


@dataclass(frozen=True)
class InsightsLookup:
    """Insights plus whether they came from the cache."""

    insights: AvaInsights
    cache_hit: bool


class InsightsService:
    """Authorization-gated, cached access to Ava insights."""

    def __init__(
        self,
        store: RecordStore,
        cache: CacheManager,
        ttl_seconds: float = config.INSIGHTS_TTL_SECONDS,
    ):
        self.store = store
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def cache_key(week_id: str, user_id: str) -> str:
        """One slot per (requester, week); requester first so slots never alias across users."""
        return f"{CACHE_KEY_PREFIX}:{user_id}:{week_id}"

    def lookup(self, week_id: str, principal: Principal | None) -> InsightsLookup:
        """
        Return insights for a week the principal owns.

        Raises:
            NotFound: week does not exist (checked before authorization)
            Unauthenticated: no principal
            Forbidden: principal does not own the week
        """
        week = self.store.get_week_by_id(week_id)
        if week is None:
            raise NotFound(f"Week with id {week_id} not found")

        principal = require_ownership(principal, week.user_id)
        key = self.cache_key(week_id, principal.id)

        cached = self.cache.get(key)
        if isinstance(cached, AvaInsights):
            logger.debug(f"Cache hit for {key}")
            return InsightsLookup(insights=cached, cache_hit=True)

        cards = self.store.get_cards_by_week_id(week_id)
        sessions = self.store.get_sessions_by_week_range(week.user_id, week.start_iso)
        insights = compute_insights(cards, sessions)

        self.cache.set(key, insights, self.ttl_seconds)
        logger.debug(f"Cache miss for {key}, insights computed")
        return InsightsLookup(insights=insights, cache_hit=False)

    def get_insights(self, week_id: str, principal: Principal | None) -> AvaInsights:
        return self.lookup(week_id, principal).insights

    def invalidate(self, week_id: str, owner_id: str) -> bool:
        """Drop the cached insights of (week, owner). Returns whether a slot existed."""
        removed = self.cache.delete(self.cache_key(week_id, owner_id))
        logger.info(f"Cache invalidated for week {week_id}, user {owner_id}")
        return removed

    def stats(self) -> CacheStats:
        return self.cache.stats()
