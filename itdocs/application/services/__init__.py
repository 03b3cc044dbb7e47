"""Application services: relevance scoring and page content flattening."""

from itdocs.application.services.content_text import flatten_content, strip_html
from itdocs.application.services.relevance import (
    calculate_relevance_score,
    extract_matched_text,
    get_matched_fields,
)

__all__ = [
    "calculate_relevance_score",
    "extract_matched_text",
    "flatten_content",
    "get_matched_fields",
    "strip_html",
]
