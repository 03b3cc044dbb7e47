"""Per-source searchers for federated search.

One searcher per content table. Each builds a RowQuery (projection,
OR-combined contains filter, tenant equality, row cap), fetches rows from
an ITableSource and maps them to SearchResult. A searcher never raises:
any failure is logged and yields an empty list so one broken source cannot
abort the aggregate search.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from itdocs.application.dtos.search import SearchResult
from itdocs.application.dtos.table_query import RowQuery
from itdocs.application.interfaces.repositories import ITableSource
from itdocs.application.services.content_text import flatten_content
from itdocs.application.services.relevance import (
    calculate_relevance_score,
    extract_matched_text,
    get_matched_fields,
)
from itdocs.domain.enums import SearchResultType, SearchScope
from itdocs.shared.utils.datetime import parse_datetime

logger = logging.getLogger(__name__)

ORGANIZATION_NAME = "organization.name"
TIMESTAMPS = ("created_at", "updated_at")
PAGE_DESCRIPTION_MAX_LENGTH = 200


def _concat(*values: Any) -> str:
    """Space-join values, rendering None as ""."""
    return " ".join("" if v is None else str(v) for v in values)


def _org_url(organization_id: str | None, *path: str | None) -> str | None:
    """Deep link under an organization; None when a segment is missing."""
    if not organization_id or not all(path):
        return None
    return "/".join(["/organizations", organization_id, *path])  # type: ignore[list-item]


class EntitySearcher(ABC):
    """Base class: query one table and map its rows to SearchResult."""

    result_type: ClassVar[SearchResultType]
    table: ClassVar[str]
    columns: ClassVar[tuple[str, ...]]
    search_fields: ClassVar[tuple[str, ...]] = ()
    row_limit: ClassVar[int] = 10
    tenant_column: ClassVar[str] = "organization_id"

    def __init__(self, source: ITableSource) -> None:
        self.source = source

    @property
    def name(self) -> str:
        return self.result_type.value

    async def search(
        self,
        query: str,
        scope: SearchScope,
        organization_id: str | None = None,
    ) -> list[SearchResult]:
        """Return this source's results for query; [] on any failure."""
        try:
            row_query = self.build_query(query, scope, organization_id)
            if row_query is None:
                return []
            rows = await self.source.fetch(row_query)
            return self.shape_rows(query, rows)
        except Exception:
            logger.exception("Error searching %s", self.name)
            return []

    def build_query(
        self, query: str, scope: SearchScope, organization_id: str | None
    ) -> RowQuery | None:
        """Return the RowQuery for this source, or None to skip the source."""
        return RowQuery(
            table=self.table,
            columns=self.columns,
            search_fields=self.search_fields,
            text=query,
            equals=self.equality_filters(scope, organization_id),
            limit=self.row_limit,
        )

    def equality_filters(
        self, scope: SearchScope, organization_id: str | None
    ) -> tuple[tuple[str, Any], ...]:
        if scope == SearchScope.ORGANIZATION and organization_id:
            return ((self.tenant_column, organization_id),)
        return ()

    def shape_rows(self, query: str, rows: list[dict[str, Any]]) -> list[SearchResult]:
        return [self.to_result(query, row) for row in rows]

    @abstractmethod
    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        """Map one fetched row to a SearchResult."""

    def _build(
        self,
        query: str,
        row: dict[str, Any],
        *,
        title: str,
        url: str | None,
        excerpt: str,
        score_title: str | None,
        score_description: str | None = None,
        description: str | None = None,
        **extra: Any,
    ) -> SearchResult:
        """Assemble a SearchResult with matched fields, excerpt and score filled in."""
        return SearchResult(
            id=str(row["id"]),
            title=title,
            type=self.result_type,
            description=description or None,
            organization_id=row.get("organization_id"),
            organization_name=row.get(ORGANIZATION_NAME),
            url=url,
            matched_fields=get_matched_fields(
                query, {f: row.get(f) for f in self.search_fields}
            ),
            matched_text=extract_matched_text(query, excerpt),
            relevance_score=calculate_relevance_score(
                query, score_title, score_description
            ),
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
            **extra,
        )


class SidebarItemSearcher(EntitySearcher):
    """Active custom sidebar navigation items."""

    result_type = SearchResultType.SIDEBAR_ITEM
    table = "organization_sidebar_items"
    columns = (
        "id",
        "organization_id",
        "item_name",
        "item_slug",
        "item_type",
        "icon",
        "description",
        "parent_category",
        *TIMESTAMPS,
        ORGANIZATION_NAME,
    )
    search_fields = ("item_name", "description", "parent_category")
    row_limit = 20

    def equality_filters(
        self, scope: SearchScope, organization_id: str | None
    ) -> tuple[tuple[str, Any], ...]:
        return (("is_active", True),) + super().equality_filters(scope, organization_id)

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        name = row.get("item_name") or ""
        return self._build(
            query,
            row,
            title=name or "Untitled Item",
            description=row.get("description"),
            subtype=row.get("item_type"),
            category=row.get("parent_category"),
            url=_org_url(row.get("organization_id"), row.get("item_slug")),
            excerpt=_concat(name, row.get("description") or ""),
            score_title=name,
            score_description=row.get("description"),
            metadata={"icon": row.get("icon"), "slug": row.get("item_slug")},
        )


class PageContentSearcher(EntitySearcher):
    """Page payloads behind sidebar items, matched on their flattened text.

    Payloads are opaque JSON, so the newest pages (up to scan_limit) are
    fetched unfiltered and matched in Python after flattening.
    """

    result_type = SearchResultType.PAGE_CONTENT
    table = "page_contents"
    columns = (
        "id",
        "sidebar_item_id",
        "content_type",
        "content_data",
        *TIMESTAMPS,
        "sidebar_item.item_name",
        "sidebar_item.organization_id",
        "sidebar_item.item_slug",
        "sidebar_item.organization.name",
    )
    tenant_column = "sidebar_item.organization_id"

    def __init__(self, source: ITableSource, scan_limit: int = 30) -> None:
        super().__init__(source)
        self.scan_limit = scan_limit

    def build_query(
        self, query: str, scope: SearchScope, organization_id: str | None
    ) -> RowQuery | None:
        return RowQuery(
            table=self.table,
            columns=self.columns,
            equals=self.equality_filters(scope, organization_id),
            order_by="updated_at",
            limit=self.scan_limit,
        )

    def shape_rows(self, query: str, rows: list[dict[str, Any]]) -> list[SearchResult]:
        query_lower = query.lower()
        results = []
        for row in rows:
            text = flatten_content(row.get("content_type"), row.get("content_data"))
            if query_lower in text.lower():
                results.append(self._page_result(query, row, text))
        return results

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        return self._page_result(
            query, row, flatten_content(row.get("content_type"), row.get("content_data"))
        )

    def _page_result(self, query: str, row: dict[str, Any], text: str) -> SearchResult:
        item_name = row.get("sidebar_item.item_name") or ""
        organization_id = row.get("sidebar_item.organization_id")
        return SearchResult(
            id=str(row["id"]),
            title=item_name or "Untitled Page",
            type=self.result_type,
            description=extract_matched_text(query, text, PAGE_DESCRIPTION_MAX_LENGTH) or None,
            subtype=row.get("content_type"),
            organization_id=organization_id,
            organization_name=row.get("sidebar_item.organization.name"),
            url=_org_url(organization_id, row.get("sidebar_item.item_slug")),
            matched_fields=["content"],
            matched_text=extract_matched_text(query, text),
            relevance_score=calculate_relevance_score(query, item_name, text),
            metadata={
                "contentType": row.get("content_type"),
                "sidebarItemId": row.get("sidebar_item_id"),
            },
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
        )


class OrganizationSearcher(EntitySearcher):
    """Tenants themselves; skipped in organization scope."""

    result_type = SearchResultType.ORGANIZATION
    table = "organizations"
    columns = ("id", "name", "description", "website", "email", "status", *TIMESTAMPS)
    search_fields = ("name", "description", "website", "email")

    def build_query(
        self, query: str, scope: SearchScope, organization_id: str | None
    ) -> RowQuery | None:
        if scope == SearchScope.ORGANIZATION:
            return None
        return super().build_query(query, scope, organization_id)

    def equality_filters(
        self, scope: SearchScope, organization_id: str | None
    ) -> tuple[tuple[str, Any], ...]:
        return ()

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        name = row.get("name") or ""
        return self._build(
            query,
            row,
            title=name or "Unnamed Organization",
            description=row.get("description"),
            url=f"/organizations/{row['id']}",
            excerpt=_concat(name, row.get("description") or ""),
            score_title=name,
            score_description=row.get("description"),
            metadata={
                "website": row.get("website"),
                "email": row.get("email"),
                "status": row.get("status"),
            },
        )


class ContactSearcher(EntitySearcher):
    result_type = SearchResultType.CONTACT
    table = "contacts"
    columns = (
        "id",
        "organization_id",
        "first_name",
        "last_name",
        "company",
        "title",
        "email",
        "phone",
        "mobile",
        "notes",
        *TIMESTAMPS,
        ORGANIZATION_NAME,
    )
    search_fields = ("first_name", "last_name", "company", "email", "phone", "notes")
    row_limit = 15

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        full_name = _concat(row.get("first_name"), row.get("last_name"))
        return self._build(
            query,
            row,
            title=full_name.strip() or row.get("company") or "Unnamed Contact",
            description=_concat(row.get("title"), row.get("email"), row.get("phone")).strip(),
            url=_org_url(row.get("organization_id"), "contacts"),
            excerpt=_concat(
                row.get("first_name"), row.get("last_name"), row.get("email"), row.get("notes")
            ),
            score_title=full_name,
            score_description=row.get("email"),
            metadata={
                "email": row.get("email"),
                "phone": row.get("phone"),
                "company": row.get("company"),
            },
        )


class LocationSearcher(EntitySearcher):
    result_type = SearchResultType.LOCATION
    table = "locations"
    columns = (
        "id",
        "organization_id",
        "name",
        "address",
        "city",
        "state",
        "country",
        "postal_code",
        "notes",
        *TIMESTAMPS,
        ORGANIZATION_NAME,
    )
    search_fields = ("name", "address", "city", "state", "country", "notes")

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        name = row.get("name") or ""
        return self._build(
            query,
            row,
            title=name or "Unnamed Location",
            description=_concat(row.get("address"), row.get("city"), row.get("state")).strip(),
            url=_org_url(row.get("organization_id"), "locations"),
            excerpt=_concat(name, row.get("address"), row.get("notes")),
            score_title=name,
            score_description=row.get("address"),
            metadata={
                "address": row.get("address"),
                "city": row.get("city"),
                "state": row.get("state"),
                "country": row.get("country"),
            },
        )


class DocumentSearcher(EntitySearcher):
    result_type = SearchResultType.DOCUMENT
    table = "documents"
    columns = (
        "id",
        "organization_id",
        "name",
        "description",
        "category",
        "file_type",
        *TIMESTAMPS,
        ORGANIZATION_NAME,
    )
    search_fields = ("name", "description", "category")

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        name = row.get("name") or ""
        return self._build(
            query,
            row,
            title=name or "Untitled Document",
            description=row.get("description"),
            subtype=row.get("file_type"),
            category=row.get("category"),
            url=_org_url(row.get("organization_id"), "documents"),
            excerpt=_concat(name, row.get("description")),
            score_title=name,
            score_description=row.get("description"),
            metadata={"fileType": row.get("file_type"), "category": row.get("category")},
        )


class PasswordSearcher(EntitySearcher):
    """Password entries; only descriptive columns are selected, never the secret."""

    result_type = SearchResultType.PASSWORD
    table = "passwords"
    columns = (
        "id",
        "organization_id",
        "name",
        "username",
        "url",
        "notes",
        "category",
        *TIMESTAMPS,
        ORGANIZATION_NAME,
    )
    search_fields = ("name", "username", "url", "notes", "category")

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        name = row.get("name") or ""
        return self._build(
            query,
            row,
            title=name or "Untitled Password",
            description=_concat(row.get("username"), row.get("url")).strip(),
            category=row.get("category"),
            url=_org_url(row.get("organization_id"), "passwords"),
            excerpt=_concat(name, row.get("username"), row.get("notes")),
            score_title=name,
            score_description=row.get("username"),
            metadata={
                "username": row.get("username"),
                "url": row.get("url"),
                "category": row.get("category"),
            },
        )


class ConfigurationSearcher(EntitySearcher):
    result_type = SearchResultType.CONFIGURATION
    table = "configurations"
    columns = (
        "id",
        "organization_id",
        "name",
        "description",
        "config_type",
        *TIMESTAMPS,
        ORGANIZATION_NAME,
    )
    search_fields = ("name", "description", "config_type")

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        name = row.get("name") or ""
        return self._build(
            query,
            row,
            title=name or "Untitled Configuration",
            description=row.get("description"),
            subtype=row.get("config_type"),
            url=_org_url(row.get("organization_id"), "configurations"),
            excerpt=_concat(name, row.get("description")),
            score_title=name,
            score_description=row.get("description"),
            metadata={"configType": row.get("config_type")},
        )


class DomainSearcher(EntitySearcher):
    result_type = SearchResultType.DOMAIN
    table = "domains"
    columns = (
        "id",
        "organization_id",
        "domain_name",
        "registrar",
        "notes",
        *TIMESTAMPS,
        ORGANIZATION_NAME,
    )
    search_fields = ("domain_name", "registrar", "notes")

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        domain_name = row.get("domain_name") or ""
        return self._build(
            query,
            row,
            title=domain_name or "Untitled Domain",
            description=f"Registrar: {row.get('registrar') or 'Unknown'}",
            url=_org_url(row.get("organization_id"), "domains"),
            excerpt=_concat(domain_name, row.get("registrar"), row.get("notes")),
            score_title=domain_name,
            score_description=row.get("registrar"),
            metadata={"registrar": row.get("registrar")},
        )


class AssetSearcher(EntitySearcher):
    result_type = SearchResultType.ASSET
    table = "assets"
    columns = (
        "id",
        "organization_id",
        "name",
        "description",
        "asset_type",
        "manufacturer",
        "model",
        "serial_number",
        *TIMESTAMPS,
        ORGANIZATION_NAME,
    )
    search_fields = ("name", "description", "manufacturer", "model", "serial_number")

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        name = row.get("name") or ""
        return self._build(
            query,
            row,
            title=name or "Untitled Asset",
            description=_concat(row.get("manufacturer"), row.get("model")).strip(),
            subtype=row.get("asset_type"),
            url=_org_url(row.get("organization_id"), "assets"),
            excerpt=_concat(name, row.get("description"), row.get("manufacturer")),
            score_title=name,
            score_description=row.get("description"),
            metadata={
                "assetType": row.get("asset_type"),
                "manufacturer": row.get("manufacturer"),
                "model": row.get("model"),
                "serialNumber": row.get("serial_number"),
            },
        )


class CustomFieldSearcher(EntitySearcher):
    """User-defined name/value fields attached to other records."""

    result_type = SearchResultType.CUSTOM_FIELD
    table = "custom_fields"
    columns = (
        "id",
        "organization_id",
        "entity_type",
        "entity_id",
        "field_name",
        "field_value",
        *TIMESTAMPS,
        ORGANIZATION_NAME,
    )
    search_fields = ("field_name", "field_value")

    def to_result(self, query: str, row: dict[str, Any]) -> SearchResult:
        field_name = row.get("field_name") or ""
        return self._build(
            query,
            row,
            title=field_name or "Unnamed Field",
            description=row.get("field_value"),
            subtype=row.get("entity_type"),
            url=_org_url(row.get("organization_id"), row.get("entity_type")),
            excerpt=_concat(field_name, row.get("field_value")),
            score_title=field_name,
            score_description=row.get("field_value"),
            metadata={
                "entityType": row.get("entity_type"),
                "entityId": row.get("entity_id"),
            },
        )


def build_searchers(
    source: ITableSource, page_content_scan_limit: int = 30
) -> list[EntitySearcher]:
    """Return all searchers in merge order (ties in score keep this order)."""
    return [
        SidebarItemSearcher(source),
        PageContentSearcher(source, scan_limit=page_content_scan_limit),
        OrganizationSearcher(source),
        ContactSearcher(source),
        LocationSearcher(source),
        DocumentSearcher(source),
        PasswordSearcher(source),
        ConfigurationSearcher(source),
        DomainSearcher(source),
        AssetSearcher(source),
        CustomFieldSearcher(source),
    ]
