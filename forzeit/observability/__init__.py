"""
Observability module: structured logging and request IDs.

Usage:
    from forzeit.observability import configure_logging, RequestContext

    configure_logging("INFO")
    logger = logging.getLogger(__name__)

    with RequestContext() as ctx:
        logger.info("Request started")  # JSON output carries ctx.request_id
"""

from .context import RequestContext, generate_request_id, get_request_id
from .logging import CorrelationIdMiddleware, HumanFormatter, JSONFormatter, configure_logging

__all__ = [
    "configure_logging",
    "JSONFormatter",
    "HumanFormatter",
    "CorrelationIdMiddleware",
    "RequestContext",
    "get_request_id",
    "generate_request_id",
]
