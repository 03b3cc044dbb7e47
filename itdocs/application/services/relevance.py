"""Relevance scoring and match helpers for federated search.

Pure functions shared by every searcher: which fields matched, a short
excerpt around the first occurrence, and the additive relevance score used
to order merged results.
"""

import re
from collections.abc import Mapping
from typing import Any


EXACT_TITLE_SCORE = 100
TITLE_CONTAINS_SCORE = 50
TITLE_WORD_SCORE = 30
DESCRIPTION_CONTAINS_SCORE = 25
DESCRIPTION_WORD_SCORE = 15

MATCH_CONTEXT_CHARS = 50
MATCH_EXCERPT_MAX_LENGTH = 150
ELLIPSIS = "..."


def _word_pattern(query_lower: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(query_lower)}\b", re.ASCII)


def calculate_relevance_score(
    query: str,
    title: str | None = None,
    description: str | None = None,
) -> int:
    """Return the additive relevance score (>= 0) of a result for query.

    An exact (case-insensitive) title match scores 100. Otherwise a title
    containing the query scores 50, plus 30 when the query is a whole word
    of the title. Independently, a description containing the query adds 25,
    plus 15 when it is a whole word of the description.

    Args:
        query: Raw search text.
        title: Result title; None is treated as "".
        description: Result description; None is treated as "".

    Returns:
        Non-negative integer score.
    """
    query_lower = query.lower()
    title_lower = (title or "").lower()
    desc_lower = (description or "").lower()
    word = _word_pattern(query_lower)

    score = 0
    if title_lower == query_lower:
        score += EXACT_TITLE_SCORE
    elif query_lower in title_lower:
        # Word bonus only on partial title matches: ("acme", "Acme") stays at 100.
        score += TITLE_CONTAINS_SCORE
        if word.search(title_lower):
            score += TITLE_WORD_SCORE

    if query_lower in desc_lower:
        score += DESCRIPTION_CONTAINS_SCORE
        if word.search(desc_lower):
            score += DESCRIPTION_WORD_SCORE
    return score


def get_matched_fields(query: str, fields: Mapping[str, Any]) -> list[str]:
    """Return names of fields whose value contains query (case-insensitive), in mapping order."""
    query_lower = query.lower()
    return [
        name
        for name, value in fields.items()
        if value and query_lower in str(value).lower()
    ]


def extract_matched_text(
    query: str,
    text: str | None,
    max_length: int = MATCH_EXCERPT_MAX_LENGTH,
) -> str:
    """Return an excerpt of text around the first occurrence of query.

    The window spans 50 characters either side of the match, with "..."
    marking clipped ends. When query does not occur, the first max_length
    characters are returned ("..." appended if truncated).
    """
    if not text:
        return ""
    index = text.lower().find(query.lower())
    if index == -1:
        return text[:max_length] + (ELLIPSIS if len(text) > max_length else "")

    start = max(0, index - MATCH_CONTEXT_CHARS)
    end = min(len(text), index + len(query) + MATCH_CONTEXT_CHARS)
    excerpt = text[start:end]
    if start > 0:
        excerpt = ELLIPSIS + excerpt
    if end < len(text):
        excerpt = excerpt + ELLIPSIS
    return excerpt
