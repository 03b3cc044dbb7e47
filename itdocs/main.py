"""FastAPI application entry point.

Wiring only: logging, lifespan, exception handlers, middleware, routers.
No business logic here (SRP). See itdocs.core.lifespan and
itdocs.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
optionally clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from itdocs.api.router import api_router
from itdocs.core.config import get_settings
from itdocs.core.exception_handlers import register_exception_handlers
from itdocs.core.lifespan import create_lifespan
from itdocs.core.limiter import limiter
from itdocs.middleware import RequestIDMiddleware
from itdocs.shared.telemetry import SearchTelemetry, set_telemetry, setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Last added = outermost: request ID wraps CORS so preflights carry an id too.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["GET", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    if settings.telemetry_enabled:
        telemetry = SearchTelemetry(settings)
        if telemetry.start(app):
            set_telemetry(telemetry)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
