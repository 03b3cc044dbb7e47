"""Tests for per-source searchers (query building and row mapping)."""

from unittest.mock import AsyncMock

from itdocs.application.dtos.table_query import RowQuery
from itdocs.application.use_cases.search.searchers import (
    ContactSearcher,
    CustomFieldSearcher,
    DocumentSearcher,
    DomainSearcher,
    OrganizationSearcher,
    PageContentSearcher,
    PasswordSearcher,
    SidebarItemSearcher,
    build_searchers,
)
from itdocs.domain.enums import SearchResultType, SearchScope
from itdocs.domain.exceptions import SourceQueryException
from itdocs.infrastructure.persistence.repositories import InMemoryTableSource


class TestQueryBuilding:
    def test_global_scope_has_no_tenant_filter(self) -> None:
        query = ContactSearcher(AsyncMock()).build_query("jane", SearchScope.GLOBAL, None)
        assert isinstance(query, RowQuery)
        assert query.table == "contacts"
        assert query.equals == ()
        assert query.limit == 15
        assert query.text == "jane"
        assert "organization.name" in query.columns

    def test_organization_scope_filters_by_tenant(self) -> None:
        query = DocumentSearcher(AsyncMock()).build_query(
            "report", SearchScope.ORGANIZATION, "org-1"
        )
        assert query.equals == (("organization_id", "org-1"),)
        assert query.limit == 10

    def test_sidebar_items_only_active(self) -> None:
        query = SidebarItemSearcher(AsyncMock()).build_query(
            "access", SearchScope.ORGANIZATION, "org-1"
        )
        assert query.equals == (("is_active", True), ("organization_id", "org-1"))
        assert query.limit == 20

    def test_organization_searcher_skipped_in_organization_scope(self) -> None:
        searcher = OrganizationSearcher(AsyncMock())
        assert searcher.build_query("acme", SearchScope.ORGANIZATION, "org-1") is None
        assert searcher.build_query("acme", SearchScope.GLOBAL, None) is not None

    def test_page_content_scans_newest_without_text_filter(self) -> None:
        query = PageContentSearcher(AsyncMock(), scan_limit=5).build_query(
            "alarm", SearchScope.ORGANIZATION, "org-1"
        )
        assert query.search_fields == ()
        assert query.order_by == "updated_at"
        assert query.descending is True
        assert query.limit == 5
        assert query.equals == (("sidebar_item.organization_id", "org-1"),)

    def test_password_searcher_never_selects_secret(self) -> None:
        query = PasswordSearcher(AsyncMock()).build_query("fw", SearchScope.GLOBAL, None)
        assert not any("encrypted" in c or c == "password" for c in query.columns)

    def test_build_searchers_fixed_order(self) -> None:
        types = [s.result_type for s in build_searchers(AsyncMock())]
        assert types == [
            SearchResultType.SIDEBAR_ITEM,
            SearchResultType.PAGE_CONTENT,
            SearchResultType.ORGANIZATION,
            SearchResultType.CONTACT,
            SearchResultType.LOCATION,
            SearchResultType.DOCUMENT,
            SearchResultType.PASSWORD,
            SearchResultType.CONFIGURATION,
            SearchResultType.DOMAIN,
            SearchResultType.ASSET,
            SearchResultType.CUSTOM_FIELD,
        ]

    def test_relations_from_dotted_columns(self) -> None:
        query = PageContentSearcher(AsyncMock()).build_query("x", SearchScope.GLOBAL, None)
        assert query.relations == [("sidebar_item",), ("sidebar_item", "organization")]


class TestRowMapping:
    async def test_contact_result(self, sample_source: InMemoryTableSource) -> None:
        results = await ContactSearcher(sample_source).search("jane", SearchScope.GLOBAL)
        assert len(results) == 1
        contact = results[0]
        assert contact.id == "contact-jane"
        assert contact.type == SearchResultType.CONTACT
        assert contact.title == "Jane Doe"
        assert contact.organization_id == "org-acme"
        assert contact.organization_name == "Acme Corp"
        assert contact.url == "/organizations/org-acme/contacts"
        assert contact.matched_fields == ["first_name", "email"]
        assert contact.relevance_score == 120
        assert contact.metadata["email"] == "jane@acme.com"
        assert contact.created_at is not None and contact.created_at.tzinfo is not None

    async def test_sidebar_item_result(self, sample_source: InMemoryTableSource) -> None:
        results = await SidebarItemSearcher(sample_source).search("access", SearchScope.GLOBAL)
        assert [r.id for r in results] == ["item-after-hours"]
        item = results[0]
        assert item.url == "/organizations/org-acme/after-hour-access"
        assert item.subtype == "page"
        assert item.category == "Procedures"
        assert item.relevance_score == 80

    async def test_inactive_sidebar_items_excluded(
        self, sample_source: InMemoryTableSource
    ) -> None:
        results = await SidebarItemSearcher(sample_source).search("jane", SearchScope.GLOBAL)
        assert results == []

    async def test_page_content_matches_flattened_text(
        self, sample_source: InMemoryTableSource
    ) -> None:
        results = await PageContentSearcher(sample_source).search("ALARM", SearchScope.GLOBAL)
        assert len(results) == 1
        page = results[0]
        assert page.type == SearchResultType.PAGE_CONTENT
        assert page.title == "After Hour Access"
        assert page.organization_id == "org-acme"
        assert page.organization_name == "Acme Corp"
        assert page.url == "/organizations/org-acme/after-hour-access"
        assert page.matched_fields == ["content"]
        assert page.metadata == {
            "contentType": "rich-text",
            "sidebarItemId": "item-after-hours",
        }
        assert "alarm company" in page.matched_text
        assert "<b>" not in (page.description or "")

    async def test_page_content_without_match_is_dropped(
        self, sample_source: InMemoryTableSource
    ) -> None:
        assert await PageContentSearcher(sample_source).search("zebra", SearchScope.GLOBAL) == []

    async def test_domain_without_registrar(self, sample_source: InMemoryTableSource) -> None:
        results = await DomainSearcher(sample_source).search("acme", SearchScope.GLOBAL)
        assert results[0].description == "Registrar: Unknown"
        assert results[0].title == "acme.com"

    async def test_organization_result_has_no_parent(
        self, sample_source: InMemoryTableSource
    ) -> None:
        results = await OrganizationSearcher(sample_source).search("corp", SearchScope.GLOBAL)
        assert len(results) == 1
        org = results[0]
        assert org.organization_id is None
        assert org.url == "/organizations/org-acme"
        assert org.relevance_score == 120

    async def test_untitled_fallback(self, sample_source: InMemoryTableSource) -> None:
        sample_source.insert(
            "custom_fields",
            id="cf-1",
            organization_id="org-acme",
            entity_type="assets",
            entity_id="a-1",
            field_name="",
            field_value="rack 7",
        )
        results = await CustomFieldSearcher(sample_source).search("rack", SearchScope.GLOBAL)
        assert results[0].title == "Unnamed Field"
        assert results[0].url == "/organizations/org-acme/assets"


class TestFailureIsolation:
    async def test_source_error_yields_empty_list(self) -> None:
        source = AsyncMock()
        source.fetch.side_effect = SourceQueryException("contacts", "boom")
        assert await ContactSearcher(source).search("jane", SearchScope.GLOBAL) == []

    async def test_unexpected_error_yields_empty_list(self) -> None:
        source = AsyncMock()
        source.fetch.return_value = [{"no_id": True}]
        assert await ContactSearcher(source).search("jane", SearchScope.GLOBAL) == []
