"""Explicitly constructed components shared by the routes of one app instance."""

from dataclasses import dataclass

from fastapi import Request

from forzeit.auth import TokenService
from forzeit.cache import CacheManager, CacheSweeper
from forzeit.cards import CardMutations
from forzeit.insights import InsightsService
from forzeit.store import RecordStore
from forzeit.weeks import WeekQueries


@dataclass
class AppServices:
    store: RecordStore
    cache: CacheManager
    sweeper: CacheSweeper
    tokens: TokenService
    insights: InsightsService
    weeks: WeekQueries
    cards: CardMutations

    @classmethod
    def build(
        cls,
        store: RecordStore,
        cache: CacheManager,
        tokens: TokenService,
        sweep_interval: float,
    ) -> "AppServices":
        insights = InsightsService(store, cache)
        return cls(
            store=store,
            cache=cache,
            sweeper=CacheSweeper(cache, interval_seconds=sweep_interval),
            tokens=tokens,
            insights=insights,
            weeks=WeekQueries(store),
            cards=CardMutations(store, invalidate=insights.invalidate),
        )


def get_services(request: Request) -> AppServices:
    return request.app.state.services
