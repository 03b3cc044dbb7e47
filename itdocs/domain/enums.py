"""Domain enumerations for itdocs.

Enums represent fixed sets of domain values (search result types, search
scope, page content types).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class SearchResultType(_ValuesMixin, str, Enum):
    """Kind of record a search result points at (closed set)."""

    SIDEBAR_ITEM = "sidebar_item"
    PAGE_CONTENT = "page_content"
    ORGANIZATION = "organization"
    CONTACT = "contact"
    LOCATION = "location"
    DOCUMENT = "document"
    PASSWORD = "password"
    CONFIGURATION = "configuration"
    DOMAIN = "domain"
    ASSET = "asset"
    CUSTOM_FIELD = "custom_field"


class SearchScope(_ValuesMixin, str, Enum):
    """Whether a search spans all tenants or a single organization."""

    GLOBAL = "global"
    ORGANIZATION = "organization"


class SearchType(_ValuesMixin, str, Enum):
    """Which search engine produced a response (single-table or federated)."""

    LEGACY = "legacy"
    DEEP = "deep"


class PageContentType(_ValuesMixin, str, Enum):
    """Shape tag of a page's stored content payload."""

    RICH_TEXT = "rich-text"
    CONTACT_FORM = "contact-form"
    LOCATION_INFO = "location-info"
    FORM_DATA = "form-data"
    DOCUMENT_LIBRARY = "document-library"
    NOTES_COMMENTS = "notes-comments"
    CHECKLIST = "checklist"
    KEY_VALUE = "key-value"
