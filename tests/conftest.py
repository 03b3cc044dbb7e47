"""Pytest configuration and fixtures for itdocs.

HTTP tests run itdocs.main:app through httpx ASGITransport with the search
service dependency overridden by one built over an in-memory table source,
so no database or Redis is needed. The lifespan does not run under
ASGITransport.
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from itdocs.api.dependencies import get_search_service
from itdocs.application.use_cases.search import SearchService, build_searchers
from itdocs.core.limiter import limiter
from itdocs.infrastructure.cache import MemorySearchCache
from itdocs.infrastructure.persistence.repositories import InMemoryTableSource
from itdocs.main import app

ACME_ID = "org-acme"
GLOBEX_ID = "org-globex"
CREATED = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Monotonic clock stand-in that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def seed_sample_rows(source: InMemoryTableSource) -> InMemoryTableSource:
    """Two organizations with a handful of records each (fixed ids)."""
    source.insert(
        "organizations",
        id=ACME_ID,
        name="Acme Corp",
        description="A technology corp",
        website="https://acme.example.com",
        email=None,
        status="active",
        created_at=CREATED,
    )
    source.insert(
        "organizations",
        id=GLOBEX_ID,
        name="Globex",
        description="Logistics",
        status="active",
    )
    source.insert(
        "contacts",
        id="contact-jane",
        organization_id=ACME_ID,
        first_name="Jane",
        last_name="Doe",
        email="jane@acme.com",
        created_at=CREATED,
    )
    source.insert(
        "contacts",
        id="contact-hank",
        organization_id=GLOBEX_ID,
        first_name="Hank",
        last_name="Scorpio",
        company="Globex",
    )
    source.insert(
        "documents",
        id="doc-jane",
        organization_id=ACME_ID,
        name="Jane's Report",
        category="Reports",
        file_type="pdf",
        created_at=CREATED,
    )
    source.insert(
        "documents",
        id="doc-network",
        organization_id=ACME_ID,
        name="Network Diagram",
        description="Core switch layout",
        category="Network",
    )
    source.insert(
        "organization_sidebar_items",
        id="item-after-hours",
        organization_id=ACME_ID,
        item_name="After Hour Access",
        item_slug="after-hour-access",
        item_type="page",
        description="How to reach the office after hours",
        parent_category="Procedures",
        is_active=True,
    )
    source.insert(
        "organization_sidebar_items",
        id="item-archived",
        organization_id=ACME_ID,
        item_name="Old Jane Page",
        item_slug="old-jane-page",
        item_type="page",
        is_active=False,
    )
    source.insert(
        "page_contents",
        id="page-after-hours",
        sidebar_item_id="item-after-hours",
        content_type="rich-text",
        content_data={"content": "<p>Call the <b>alarm company</b> before entering.</p>"},
    )
    source.insert(
        "passwords",
        id="pw-firewall",
        organization_id=ACME_ID,
        name="Firewall Admin",
        username="admin",
        encrypted_value="gAAAA-secret",
        category="Network",
    )
    source.insert(
        "domains",
        id="domain-acme",
        organization_id=ACME_ID,
        domain_name="acme.com",
        registrar=None,
    )
    source.insert(
        "locations",
        id="loc-warehouse",
        organization_id=GLOBEX_ID,
        name="Warehouse",
        city="Cypress Creek",
    )
    return source


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sample_source() -> InMemoryTableSource:
    """In-memory tables seeded with Acme (Jane) and Globex rows."""
    return seed_sample_rows(InMemoryTableSource())


@pytest.fixture
def search_cache(clock: FakeClock) -> MemorySearchCache:
    return MemorySearchCache(ttl_seconds=30.0, clock=clock)


@pytest.fixture
def search_service(
    sample_source: InMemoryTableSource, search_cache: MemorySearchCache
) -> SearchService:
    return SearchService(build_searchers(sample_source), search_cache)


@pytest.fixture
async def client(search_service: SearchService) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with in-memory search."""
    app.dependency_overrides[get_search_service] = lambda: search_service
    limiter.enabled = False
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True


@pytest.fixture
async def unconfigured_client() -> AsyncClient:
    """Client with no search service on app.state (DATABASE_URL unset)."""
    limiter.enabled = False
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        limiter.enabled = True
