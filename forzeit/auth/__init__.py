"""
Authentication and authorization for Forzeit.

Exports:
    require_authenticated: raise Unauthenticated when no principal is present
    require_ownership: raise Forbidden unless the principal owns the resource
    TokenService: bearer token verification and development token issuance
"""

from forzeit.auth.gate import require_authenticated, require_ownership
from forzeit.auth.tokens import TokenService

__all__ = [
    "require_authenticated",
    "require_ownership",
    "TokenService",
]
