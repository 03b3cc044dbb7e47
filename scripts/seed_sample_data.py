"""Seed sample organizations and searchable records into the configured database.

Creates the schema with Base.metadata.create_all (use Alembic for real
deployments) and inserts a small, realistic data set: organizations,
sidebar items with page content, contacts, locations, documents, passwords,
configurations, domains, assets and custom fields.

Usage:
    python -m scripts.seed_sample_data

Requires: DATABASE_URL (e.g. sqlite+aiosqlite:///./itdocs.db or Postgres).
Organizations that already exist (by name) are skipped.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from itdocs.core.config import get_settings
from itdocs.domain.enums import PageContentType
from itdocs.infrastructure.persistence import database
from itdocs.infrastructure.persistence.models import (
    Asset,
    Configuration,
    Contact,
    CustomField,
    Document,
    Domain,
    Location,
    Organization,
    OrganizationSidebarItem,
    PageContent,
    Password,
)
from itdocs.shared.utils.generators import slugify

SAMPLE_ORGANIZATIONS: list[dict[str, Any]] = [
    {
        "name": "Acme Corp",
        "description": "A technology corp with two offices",
        "website": "https://acme.example.com",
        "email": "it@acme.example.com",
        "contacts": [
            {"first_name": "Jane", "last_name": "Doe", "email": "jane@acme.com", "title": "IT Manager"},
            {"first_name": "Bob", "last_name": "Stone", "email": "bob@acme.com", "phone": "+1 555 0100"},
        ],
        "locations": [
            {"name": "Headquarters", "address": "1 Main Street", "city": "Springfield", "country": "US"},
        ],
        "documents": [
            {"name": "Jane's Report", "category": "Reports", "file_type": "pdf"},
            {"name": "Network Diagram", "description": "Core switch layout", "category": "Network", "file_type": "png"},
        ],
        "passwords": [
            {"name": "Firewall Admin", "username": "admin", "url": "https://fw.acme.example.com", "category": "Network"},
        ],
        "configurations": [
            {"name": "Core Switch", "description": "Stacked access switches", "config_type": "network"},
        ],
        "domains": [
            {"domain_name": "acme.example.com", "registrar": "Example Registrar"},
        ],
        "assets": [
            {"name": "Mail Server", "manufacturer": "Dell", "model": "R650", "asset_type": "server", "serial_number": "SN-1001"},
        ],
        "sidebar_items": [
            {
                "item_name": "After Hour Access",
                "description": "How to reach the office after hours",
                "parent_category": "Procedures",
                "content_type": PageContentType.RICH_TEXT.value,
                "content_data": {"content": "<p>Call the <b>alarm company</b> before entering.</p>"},
            },
            {
                "item_name": "Onboarding Checklist",
                "parent_category": "Procedures",
                "content_type": PageContentType.CHECKLIST.value,
                "content_data": {
                    "title": "New hire",
                    "items": [{"text": "Create mailbox"}, {"text": "Issue laptop"}],
                },
            },
        ],
    },
    {
        "name": "Globex",
        "description": "Logistics company",
        "website": "https://globex.example.com",
        "contacts": [{"first_name": "Hank", "last_name": "Scorpio", "company": "Globex"}],
        "locations": [{"name": "Warehouse", "city": "Cypress Creek"}],
        "documents": [],
        "passwords": [],
        "configurations": [],
        "domains": [{"domain_name": "globex.example.com"}],
        "assets": [],
        "sidebar_items": [
            {
                "item_name": "Vendors",
                "content_type": PageContentType.KEY_VALUE.value,
                "content_data": {
                    "title": "Vendor accounts",
                    "pairs": [{"key": "ISP", "value": "Fiber Co", "description": "Account 7781"}],
                },
            },
        ],
    },
]


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _seed_organization(session: AsyncSession, data: dict[str, Any]) -> bool:
    existing = await session.scalar(
        select(Organization).where(Organization.name == data["name"])
    )
    if existing is not None:
        print(f"  skip {data['name']} (exists)")
        return False

    org = Organization(
        name=data["name"],
        description=data.get("description"),
        website=data.get("website"),
        email=data.get("email"),
    )
    session.add(org)
    await session.flush()

    for model, key in (
        (Contact, "contacts"),
        (Location, "locations"),
        (Document, "documents"),
        (Password, "passwords"),
        (Configuration, "configurations"),
        (Domain, "domains"),
        (Asset, "assets"),
    ):
        for values in data.get(key, []):
            session.add(model(organization_id=org.id, **values))

    for order, item in enumerate(data.get("sidebar_items", [])):
        sidebar_item = OrganizationSidebarItem(
            organization_id=org.id,
            item_name=item["item_name"],
            item_slug=slugify(item["item_name"]),
            description=item.get("description"),
            parent_category=item.get("parent_category"),
            sort_order=order,
        )
        session.add(sidebar_item)
        await session.flush()
        session.add(
            PageContent(
                sidebar_item_id=sidebar_item.id,
                content_type=item["content_type"],
                content_data=item["content_data"],
            )
        )
        session.add(
            CustomField(
                organization_id=org.id,
                entity_type="sidebar-items",
                entity_id=sidebar_item.id,
                field_name="Owner",
                field_value=f"{data['name']} IT",
            )
        )

    print(f"  seeded {data['name']}")
    return True


async def seed() -> int:
    settings = get_settings()
    if not settings.database_url:
        print("DATABASE_URL is not set", file=sys.stderr)
        return 1

    factory = database.get_session_factory()
    assert database.engine is not None
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)

    created = 0
    async with factory() as session:
        async with session.begin():
            for data in SAMPLE_ORGANIZATIONS:
                if await _seed_organization(session, data):
                    created += 1
    await database.dispose_engine()
    print(f"Done: {created} organization(s) created")
    return 0


def main() -> None:
    _load_env()
    sys.exit(asyncio.run(seed()))


if __name__ == "__main__":
    main()
