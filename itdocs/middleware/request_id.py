"""Request ID middleware.

Generates or forwards the request id header, echoes it on the response and
exposes it to logging through itdocs.shared.context for the duration of the
request. Client-provided values are sanitized (length + character set) to
prevent log injection. Raw ASGI, no BaseHTTPMiddleware.
"""

import re
import uuid
from typing import Callable

from itdocs.shared.context import reset_request_id, set_request_id

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,%d}$" % REQUEST_ID_MAX_LENGTH)


def _header_value(scope: dict, name: bytes) -> str | None:
    """First value of header name (lowercase bytes) in the ASGI scope."""
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None


def resolve_request_id(raw: str | None) -> str:
    """Return the client's id when it is safe to log, else a fresh UUID4 hex."""
    candidate = (raw or "").strip()
    if REQUEST_ID_PATTERN.match(candidate):
        return candidate
    return uuid.uuid4().hex


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Wrap an ASGI app so every HTTP request has a request id."""
    header_key = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = resolve_request_id(_header_value(scope, header_key))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_header(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_key, request_id.encode()),
                ]
            await send(message)

        token = set_request_id(request_id)
        try:
            await app(scope, receive, send_with_header)
        finally:
            reset_request_id(token)

    return asgi_app
