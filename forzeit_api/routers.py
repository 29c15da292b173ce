"""
REST routes for weeks, cards, sessions and Ava insights.

Every route resolves the optional principal and hands it to the domain layer;
the authorization gate there raises, and the app maps ForzeitError to JSON.

Endpoints:
- GET   /weeks/{week_id}
- GET   /users/{user_id}/weeks?limit=&offset=
- GET   /weeks/{week_id}/cards
- GET   /weeks/{week_id}/sessions
- GET   /weeks/{week_id}/insights       X-Cache: HIT | MISS
- POST  /cards
- PATCH /cards/{card_id}/status
- GET   /health
- GET   /cache/stats
- POST  /auth/test-token                (development only)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from forzeit import config
from forzeit.models import Principal
from forzeit.timeutil import utc_now_iso
from forzeit_api.auth import get_principal
from forzeit_api.dependencies import AppServices, get_services
from forzeit_api.response_models import (
    AvaInsightsResponse,
    CacheStatsResponse,
    CardResponse,
    CreateCardRequest,
    ErrorResponse,
    HealthResponse,
    IssueTokenRequest,
    SessionResponse,
    TokenResponse,
    UpdateCardStatusRequest,
    WeekResponse,
)

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}

weeks_router = APIRouter(tags=["weeks"], responses=_ERROR_RESPONSES)
cards_router = APIRouter(tags=["cards"], responses=_ERROR_RESPONSES)
system_router = APIRouter(tags=["system"])


# ==== Weeks ====


@weeks_router.get("/weeks/{week_id}", response_model=WeekResponse)
def get_week(
    week_id: str,
    principal: Principal | None = Depends(get_principal),
    services: AppServices = Depends(get_services),
) -> WeekResponse:
    return WeekResponse.from_week(services.weeks.get_week(week_id, principal))


@weeks_router.get("/users/{user_id}/weeks", response_model=list[WeekResponse])
def weeks_by_user(
    user_id: str,
    limit: int | None = Query(None, description="Defaults to 10, capped at 50"),
    offset: int | None = Query(None, description="Defaults to 0"),
    principal: Principal | None = Depends(get_principal),
    services: AppServices = Depends(get_services),
) -> list[WeekResponse]:
    weeks = services.weeks.weeks_by_user(user_id, principal, limit=limit, offset=offset)
    return [WeekResponse.from_week(w) for w in weeks]


@weeks_router.get("/weeks/{week_id}/cards", response_model=list[CardResponse])
def week_cards(
    week_id: str,
    principal: Principal | None = Depends(get_principal),
    services: AppServices = Depends(get_services),
) -> list[CardResponse]:
    return [CardResponse.from_card(c) for c in services.weeks.cards_for_week(week_id, principal)]


@weeks_router.get("/weeks/{week_id}/sessions", response_model=list[SessionResponse])
def week_sessions(
    week_id: str,
    principal: Principal | None = Depends(get_principal),
    services: AppServices = Depends(get_services),
) -> list[SessionResponse]:
    views = services.weeks.sessions_for_week(week_id, principal)
    return [SessionResponse.from_view(v) for v in views]


@weeks_router.get("/weeks/{week_id}/insights", response_model=AvaInsightsResponse)
def week_insights(
    week_id: str,
    response: Response,
    principal: Principal | None = Depends(get_principal),
    services: AppServices = Depends(get_services),
) -> AvaInsightsResponse:
    result = services.insights.lookup(week_id, principal)
    response.headers["X-Cache"] = "HIT" if result.cache_hit else "MISS"
    return AvaInsightsResponse.from_insights(result.insights)


# ==== Cards ====


@cards_router.post("/cards", response_model=CardResponse, status_code=201)
def create_card(
    body: CreateCardRequest,
    principal: Principal | None = Depends(get_principal),
    services: AppServices = Depends(get_services),
) -> CardResponse:
    card = services.cards.create_card(principal, body.week_id, body.title, body.minutes)
    return CardResponse.from_card(card)


@cards_router.patch("/cards/{card_id}/status", response_model=CardResponse)
def update_card_status(
    card_id: str,
    body: UpdateCardStatusRequest,
    principal: Principal | None = Depends(get_principal),
    services: AppServices = Depends(get_services),
) -> CardResponse:
    card = services.cards.update_card_status(principal, card_id, body.status)
    return CardResponse.from_card(card)


# ==== System ====


@system_router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=utc_now_iso(), service=config.SERVICE_NAME)


@system_router.get("/cache/stats", response_model=CacheStatsResponse)
def cache_stats(services: AppServices = Depends(get_services)) -> CacheStatsResponse:
    return CacheStatsResponse.from_stats(services.insights.stats(), timestamp=utc_now_iso())


@system_router.post("/auth/test-token", response_model=TokenResponse)
def issue_test_token(
    body: IssueTokenRequest | None = None,
    services: AppServices = Depends(get_services),
) -> TokenResponse:
    """Sign a token for any user id. Disabled unless FORZEIT_ENABLE_TEST_TOKENS is on."""
    if not config.ENABLE_TEST_TOKENS:
        raise HTTPException(status_code=404, detail="Not Found")
    user_id = body.user_id if body else None
    if not user_id:
        raise HTTPException(status_code=400, detail="userId is required")

    token = services.tokens.issue_test_token(user_id)
    logger.info(f"Test token issued for {user_id}")
    return TokenResponse(
        token=token,
        user_id=user_id,
        message="Test token generated successfully. Use in Authorization header as: Bearer <token>",
    )
