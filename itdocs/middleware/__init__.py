"""HTTP middleware. Applied in itdocs.main; first added = outermost."""

from itdocs.middleware.request_id import RequestIDMiddleware, resolve_request_id

__all__ = ["RequestIDMiddleware", "resolve_request_id"]
