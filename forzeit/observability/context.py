"""
Request-scoped context: the request id every log line carries.
"""

import contextvars
import uuid

_request_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "forzeit_request_id", default=None
)


def get_request_id() -> str | None:
    """Get the current request ID from context."""
    return _request_id_var.get()


def generate_request_id() -> str:
    return f"req-{uuid.uuid4().hex[:16]}"


class RequestContext:
    """
    Bind a request id for the duration of a block.

    Usage:
        with RequestContext(request_id="req-abc123") as ctx:
            logger.info("Processing")  # carries ctx.request_id
    """

    def __init__(self, request_id: str | None = None):
        self.request_id = request_id or generate_request_id()
        self._token: contextvars.Token | None = None

    def __enter__(self) -> "RequestContext":
        self._token = _request_id_var.set(self.request_id)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            _request_id_var.reset(self._token)
            self._token = None
