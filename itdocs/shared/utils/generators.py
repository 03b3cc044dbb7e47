"""ID and slug generators for persisted records."""

import re

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2) for primary keys."""
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def slugify(name: str) -> str:
    """Return a URL path segment for a sidebar item name.

    Lowercases, replaces runs of non-alphanumerics with a single hyphen and
    trims hyphens from both ends ("After Hour Access" -> "after-hour-access").

    Raises:
        ValueError: If nothing usable remains.
    """
    slug = _NON_SLUG_CHARS.sub("-", name.lower()).strip("-")
    if not slug:
        raise ValueError(f"Cannot build a slug from {name!r}")
    return slug
