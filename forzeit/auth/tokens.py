"""
Bearer token verification and issuance.

Tokens are HS256 JWTs whose `sub` claim is the user id. Verification never
raises: an invalid, expired or malformed token is logged and yields None, so
the request continues unauthenticated and the gate decides.
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from forzeit import config
from forzeit.models import Principal
from forzeit.store import RecordStore

logger = logging.getLogger(__name__)


class TokenService:
    """Verify bearer tokens and resolve them to principals."""

    def __init__(
        self,
        secret: str = config.JWT_SECRET,
        algorithm: str = config.JWT_ALGORITHM,
        expires_hours: int = config.TOKEN_TTL_HOURS,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expires = timedelta(hours=expires_hours)

    @staticmethod
    def extract_token_from_header(auth_header: str | None) -> str | None:
        """Return the token of an `Authorization: Bearer <token>` header."""
        if not auth_header:
            return None

        parts = auth_header.split(" ")
        if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
            logger.warning("Invalid Authorization header format")
            return None
        return parts[1]

    def verify_token(self, token: str) -> dict[str, Any] | None:
        """Decode and validate a token. Returns the payload or None."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            logger.warning(f"JWT verification failed: {e}")
            return None

        if not payload.get("sub"):
            logger.warning("JWT token missing sub claim")
            return None
        return payload

    def issue_test_token(self, user_id: str) -> str:
        """Sign a token for user_id. Development only; real issuance lives elsewhere."""
        now = datetime.now(UTC)
        payload = {
            "sub": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def principal_from_header(
        self, auth_header: str | None, store: RecordStore
    ) -> Principal | None:
        """Resolve an Authorization header to a known user, or None."""
        token = self.extract_token_from_header(auth_header)
        if not token:
            return None

        payload = self.verify_token(token)
        if not payload:
            return None

        user = store.get_user_by_id(str(payload["sub"]))
        if user is None:
            logger.warning(f"Valid token but user not found: {payload['sub']}")
            return None
        return Principal.from_user(user)
