"""Flatten page content payloads into plain searchable text.

Page content is stored as a JSON payload whose shape depends on the page's
content_type tag. Each known tag has a flattener; a flattener returns None
when the payload does not have the shape its tag promises, and the payload
then goes through shape detection and finally a JSON dump. Unknown or future
content types are therefore always searched as their stringified blob,
never skipped.
"""

import json
import re
from collections.abc import Callable, Iterable
from typing import Any

from itdocs.domain.enums import PageContentType

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")

Flattener = Callable[[dict[str, Any]], str | None]


def strip_html(html: str) -> str:
    """Replace markup tags with spaces, collapse whitespace, and trim."""
    return _WHITESPACE_RE.sub(" ", _TAG_RE.sub(" ", html)).strip()


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _records(payload: dict[str, Any], key: str) -> list[dict[str, Any]] | None:
    """Return payload[key] if it is a list (non-dict entries dropped), else None."""
    value = payload.get(key)
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, dict)]


def _join_records(records: Iterable[dict[str, Any]], keys: tuple[str, ...]) -> str:
    return " ".join(" ".join(_text(r.get(k)) for k in keys) for r in records)


def _flatten_rich_text(payload: dict[str, Any]) -> str | None:
    content = payload.get("content")
    if not content or not isinstance(content, str):
        return None
    return strip_html(content)


def _flatten_contacts(payload: dict[str, Any]) -> str | None:
    contacts = _records(payload, "contacts")
    if contacts is None:
        return None
    return _join_records(contacts, ("name", "email", "phone", "notes"))


def _flatten_locations(payload: dict[str, Any]) -> str | None:
    locations = _records(payload, "locations")
    if locations is None:
        return None
    return _join_records(locations, ("name", "address", "city", "notes"))


def _flatten_checklist(payload: dict[str, Any]) -> str | None:
    items = _records(payload, "items")
    if items is None:
        return None
    return " ".join([_text(payload.get("title"))] + [_text(i.get("text")) for i in items]).strip()


def _flatten_key_value(payload: dict[str, Any]) -> str | None:
    pairs = _records(payload, "pairs")
    if pairs is None:
        return None
    body = _join_records(pairs, ("key", "value", "description"))
    return f"{_text(payload.get('title'))} {body}".strip()


_FLATTENERS: dict[str, Flattener] = {
    PageContentType.RICH_TEXT.value: _flatten_rich_text,
    PageContentType.CONTACT_FORM.value: _flatten_contacts,
    PageContentType.LOCATION_INFO.value: _flatten_locations,
    PageContentType.CHECKLIST.value: _flatten_checklist,
    PageContentType.KEY_VALUE.value: _flatten_key_value,
}

# Shape detection order for untagged or mismatched payloads.
_SHAPE_FLATTENERS: tuple[Flattener, ...] = (
    _flatten_rich_text,
    _flatten_contacts,
    _flatten_locations,
)


def _stringify(payload: Any) -> str:
    return json.dumps(payload, default=str, ensure_ascii=False).lower()


def flatten_content(content_type: str | None, content_data: Any) -> str:
    """Return searchable plain text for a page content payload.

    Args:
        content_type: Tag stored with the page (e.g. "rich-text"); may be unknown.
        content_data: Decoded JSON payload (dict, list, string, or None).

    Returns:
        Flattened text; "" for an empty payload.
    """
    if content_data is None or content_data == "":
        return ""
    if isinstance(content_data, str):
        return content_data
    if isinstance(content_data, dict):
        flattener = _FLATTENERS.get(content_type or "")
        if flattener is not None:
            text = flattener(content_data)
            if text is not None:
                return text
        for shape in _SHAPE_FLATTENERS:
            text = shape(content_data)
            if text is not None:
                return text
        return _stringify(content_data)
    if isinstance(content_data, list):
        return _stringify(content_data)
    return str(content_data)
