"""
Request authentication for the Forzeit API.

Authentication is optional at the transport level: a missing or invalid
bearer token resolves to no principal, and the authorization gate inside each
operation decides whether that is acceptable.

Usage:
    from forzeit_api.auth import get_principal

    @router.get("/weeks/{week_id}")
    def get_week(week_id: str, principal: Principal | None = Depends(get_principal)):
        ...
"""

import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from forzeit.models import Principal
from forzeit_api.dependencies import AppServices, get_services

logger = logging.getLogger(__name__)

# Security scheme for OpenAPI docs
security = HTTPBearer(auto_error=False)


async def get_principal(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    services: AppServices = Depends(get_services),
) -> Principal | None:
    """Resolve the bearer credentials parsed by HTTPBearer to a principal, or None."""
    if credentials is None:
        return None

    principal = services.tokens.principal_from_header(
        f"Bearer {credentials.credentials}", services.store
    )
    if principal is not None:
        logger.debug(f"Authenticated {principal.id} for {request.url.path}")
    return principal
