"""Shared utilities: datetime and generators."""

from itdocs.shared.utils.datetime import ensure_utc, parse_datetime, utc_now
from itdocs.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "parse_datetime",
]
