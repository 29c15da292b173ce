"""
Forzeit API server: weeks, cards, sessions and cached Ava insights.

create_app() wires explicitly constructed components (store, cache, token
service) so tests can build isolated instances. The lifespan starts the cache
sweeper and stops it on shutdown.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from forzeit import __version__, config
from forzeit.auth import TokenService
from forzeit.cache import CacheManager
from forzeit.errors import ForzeitError
from forzeit.observability import CorrelationIdMiddleware, configure_logging
from forzeit.store import RecordStore
from forzeit_api.dependencies import AppServices
from forzeit_api.routers import cards_router, system_router, weeks_router

logger = logging.getLogger(__name__)


async def forzeit_error_handler(request: Request, exc: ForzeitError) -> JSONResponse:
    logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app(
    store: RecordStore | None = None,
    cache: CacheManager | None = None,
    token_service: TokenService | None = None,
    start_sweeper: bool = True,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Record store. Defaults to one loaded from config.SEED_PATH.
        cache: Insights cache. Defaults to a fresh CacheManager.
        token_service: Bearer token verifier. Defaults to config-driven TokenService.
        start_sweeper: Run the background cache sweep for the app's lifetime.
    """
    services = AppServices.build(
        store=store if store is not None else RecordStore.from_seed_file(config.SEED_PATH),
        cache=cache if cache is not None else CacheManager(default_ttl=config.INSIGHTS_TTL_SECONDS),
        tokens=token_service if token_service is not None else TokenService(),
        sweep_interval=config.CACHE_SWEEP_SECONDS,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if start_sweeper:
            services.sweeper.start()
        logger.info(f"{config.SERVICE_NAME} ready: {services.store.counts()}")
        try:
            yield
        finally:
            services.sweeper.stop()
            services.cache.clear()

    app = FastAPI(
        title="Forzeit Insights API",
        description="Weekly cards, tracked sessions and cached Ava insights",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.services = services

    # CORS - configurable via CORS_ORIGINS env var
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    app.add_exception_handler(ForzeitError, forzeit_error_handler)

    app.include_router(system_router)
    app.include_router(weeks_router)
    app.include_router(cards_router)

    return app


# ==== Main ====


def main():
    """Run the server."""
    configure_logging(config.LOG_LEVEL, json_format=config.LOG_JSON)
    uvicorn.run(create_app(), host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
