"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Backend choices (search cache) are validated at load
time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Upper bound of the search endpoint's limit parameter.
MAX_SEARCH_LIMIT = 200


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every setting has a default; an empty database_url means the SQL
    backend is not configured and search endpoints answer 503.
    """

    # App
    app_name: str = "itdocs"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (postgresql+asyncpg://... in production, sqlite+aiosqlite://... locally)
    database_url: str = ""
    database_echo: bool = False
    # Optional pool overrides (None = use defaults in database.py; ignored for SQLite)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Search
    search_cache_backend: str = "memory"
    search_cache_ttl_seconds: int = 30
    search_min_query_length: int = 2
    search_default_limit: int = 50
    search_page_content_scan_limit: int = 30
    search_rate_limit: str = "120/minute"

    # Redis (only used when search_cache_backend is 'redis')
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_search_settings(self) -> "Settings":
        """Validate search cache backend and numeric search bounds."""
        if self.search_cache_backend not in ("memory", "redis"):
            raise ValueError(
                f"search_cache_backend must be 'memory' or 'redis', got: {self.search_cache_backend!r}"
            )
        if self.search_cache_ttl_seconds <= 0:
            raise ValueError("search_cache_ttl_seconds must be positive")
        if self.search_min_query_length < 1:
            raise ValueError("search_min_query_length must be at least 1")
        if not 1 <= self.search_default_limit <= MAX_SEARCH_LIMIT:
            raise ValueError(
                f"search_default_limit must be between 1 and {MAX_SEARCH_LIMIT}"
            )
        if self.search_page_content_scan_limit < 1:
            raise ValueError("search_page_content_scan_limit must be at least 1")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
