"""
Centralized configuration for Forzeit.

All values that vary by deployment belong here.
Override via environment variables where marked.
"""

import os
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ============================================================
# Authentication
# ============================================================

JWT_SECRET: str = os.environ.get("FORZEIT_JWT_SECRET", "forzeit-dev-secret-key-not-for-production")
"""HMAC secret for bearer tokens. Always override outside development."""

JWT_ALGORITHM: str = os.environ.get("FORZEIT_JWT_ALGORITHM", "HS256")

TOKEN_TTL_HOURS: int = int(os.environ.get("FORZEIT_TOKEN_TTL_HOURS", "24"))
"""Lifetime of tokens issued by /auth/test-token."""

ENABLE_TEST_TOKENS: bool = _env_bool("FORZEIT_ENABLE_TEST_TOKENS", True)
"""Expose POST /auth/test-token. Development only."""

# ============================================================
# Data
# ============================================================

SEED_PATH: Path = Path(
    os.environ.get("FORZEIT_SEED_PATH", str(Path(__file__).parent / "data" / "seed.json"))
)
"""JSON file the record store is loaded from at startup."""

# ============================================================
# Cache
# ============================================================

INSIGHTS_TTL_SECONDS: int = 60
"""Ava insights are recomputed at most once a minute per (week, requester)."""

CACHE_SWEEP_SECONDS: float = float(os.environ.get("FORZEIT_CACHE_SWEEP_SECONDS", "30"))
"""Interval of the background sweep that evicts expired entries."""

# ============================================================
# Input limits
# ============================================================

WEEKS_DEFAULT_LIMIT: int = 10
WEEKS_MAX_LIMIT: int = 50
CARD_TITLE_MAX_LENGTH: int = 200

# ============================================================
# Server / logging
# ============================================================

HOST: str = os.environ.get("FORZEIT_HOST", "0.0.0.0")  # noqa: S104
PORT: int = int(os.environ.get("PORT", "4000"))

CORS_ORIGINS: list[str] = [
    o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()
]
"""Comma-separated list; "*" allows all origins (development default)."""

LOG_LEVEL: str = os.environ.get("FORZEIT_LOG_LEVEL", "INFO")

LOG_JSON: bool | None = (
    _env_bool("FORZEIT_LOG_JSON", False) if "FORZEIT_LOG_JSON" in os.environ else None
)
"""None lets configure_logging pick JSON when stderr is not a TTY."""

SERVICE_NAME: str = "forzeit-insights-api"
