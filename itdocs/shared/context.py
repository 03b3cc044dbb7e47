"""Request context management using contextvars.

Holds the request id for the current request so log records emitted while
serving a search carry it. Set by RequestIDMiddleware; "-" outside requests.
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str] = ContextVar("request_id", default="-")


def set_request_id(request_id: str) -> Token[str]:
    """Set the request id for the current async task; returns the reset token."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    _request_id.reset(token)


def get_request_id() -> str:
    return _request_id.get()
