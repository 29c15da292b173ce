"""
Error taxonomy for Forzeit.

Every business-rule failure is a ForzeitError. They are deterministic and
surfaced to the caller as request-level failures; nothing here is retried.
"""


class ForzeitError(Exception):
    """Base class for request-level failures."""

    code: str = "ERROR"
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code}


class NotFound(ForzeitError):
    """Referenced week or card does not exist."""

    code = "NOT_FOUND"
    status_code = 404


class Unauthenticated(ForzeitError):
    """No principal on the request."""

    code = "UNAUTHENTICATED"
    status_code = 401


class Forbidden(ForzeitError):
    """Principal is not the owner of the resource."""

    code = "FORBIDDEN"
    status_code = 403


class InvalidInput(ForzeitError):
    """Empty or oversized title, negative minutes, unknown status."""

    code = "INVALID_INPUT"
    status_code = 400
