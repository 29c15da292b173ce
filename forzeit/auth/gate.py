"""
Authorization gate.

Both checks are pure predicates over the request principal and a resource
owner id. Call them before touching the cache or the store: cache keys do not
enforce tenancy on their own.
"""

from forzeit.errors import Forbidden, Unauthenticated
from forzeit.models import Principal


def require_authenticated(principal: Principal | None) -> Principal:
    """Raise Unauthenticated if there is no principal; return it otherwise."""
    if principal is None:
        raise Unauthenticated(
            "Authentication required. Please provide a valid JWT token in the Authorization header."
        )
    return principal


def require_ownership(principal: Principal | None, owner_id: str) -> Principal:
    """Require authentication, then raise Forbidden unless principal owns the resource."""
    principal = require_authenticated(principal)
    if principal.id != owner_id:
        raise Forbidden("Access denied: You can only access your own resources.")
    return principal
