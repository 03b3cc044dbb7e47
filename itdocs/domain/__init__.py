"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from itdocs.domain.enums import (
    PageContentType,
    SearchResultType,
    SearchScope,
    SearchType,
)
from itdocs.domain.exceptions import (
    ItDocsException,
    SourceQueryException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "PageContentType",
    "SearchResultType",
    "SearchScope",
    "SearchType",
    # Exceptions
    "ItDocsException",
    "SourceQueryException",
    "SqlNotConfiguredException",
    "ValidationException",
]
