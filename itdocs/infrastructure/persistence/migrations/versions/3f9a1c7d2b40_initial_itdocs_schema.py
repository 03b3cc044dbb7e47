"""Initial schema: organizations, sidebar items, page content, searchable records

Revision ID: 3f9a1c7d2b40
Revises:
Create Date: 2026-10-19 09:12:41.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9a1c7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Tables owned by an organization, in creation order.
ORGANIZATION_TABLES = (
    "organization_sidebar_items",
    "contacts",
    "locations",
    "documents",
    "passwords",
    "configurations",
    "domains",
    "assets",
    "custom_fields",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _organization_fk() -> sa.Column:
    return sa.Column(
        "organization_id",
        sa.String(),
        sa.ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    """Create initial schema."""
    op.create_table(
        "organizations",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("website", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="active"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_organizations_name"), "organizations", ["name"])

    op.create_table(
        "organization_sidebar_items",
        sa.Column("id", sa.String(), nullable=False),
        _organization_fk(),
        sa.Column("item_name", sa.String(), nullable=False),
        sa.Column("item_slug", sa.String(), nullable=False),
        sa.Column("item_type", sa.String(), nullable=False, server_default="page"),
        sa.Column("icon", sa.String(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("parent_category", sa.String(), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ux_sidebar_item_org_slug",
        "organization_sidebar_items",
        ["organization_id", "item_slug"],
        unique=True,
    )

    op.create_table(
        "page_contents",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column(
            "sidebar_item_id",
            sa.String(),
            sa.ForeignKey("organization_sidebar_items.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("content_type", sa.String(), nullable=False),
        sa.Column("content_data", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_page_contents_sidebar_item_id"), "page_contents", ["sidebar_item_id"]
    )

    op.create_table(
        "contacts",
        sa.Column("id", sa.String(), nullable=False),
        _organization_fk(),
        sa.Column("first_name", sa.String(), nullable=True),
        sa.Column("last_name", sa.String(), nullable=True),
        sa.Column("company", sa.String(), nullable=True),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("mobile", sa.String(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_contacts_email"), "contacts", ["email"])

    op.create_table(
        "locations",
        sa.Column("id", sa.String(), nullable=False),
        _organization_fk(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=True),
        sa.Column("city", sa.String(), nullable=True),
        sa.Column("state", sa.String(), nullable=True),
        sa.Column("country", sa.String(), nullable=True),
        sa.Column("postal_code", sa.String(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "documents",
        sa.Column("id", sa.String(), nullable=False),
        _organization_fk(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(), nullable=True),
        sa.Column("file_type", sa.String(), nullable=True),
        sa.Column("storage_ref", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_documents_category"), "documents", ["category"])

    op.create_table(
        "passwords",
        sa.Column("id", sa.String(), nullable=False),
        _organization_fk(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("username", sa.String(), nullable=True),
        sa.Column("encrypted_value", sa.Text(), nullable=True),
        sa.Column("url", sa.String(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("category", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "configurations",
        sa.Column("id", sa.String(), nullable=False),
        _organization_fk(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("config_type", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "domains",
        sa.Column("id", sa.String(), nullable=False),
        _organization_fk(),
        sa.Column("domain_name", sa.String(), nullable=False),
        sa.Column("registrar", sa.String(), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_domains_domain_name"), "domains", ["domain_name"])

    op.create_table(
        "assets",
        sa.Column("id", sa.String(), nullable=False),
        _organization_fk(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("asset_type", sa.String(), nullable=True),
        sa.Column("manufacturer", sa.String(), nullable=True),
        sa.Column("model", sa.String(), nullable=True),
        sa.Column("serial_number", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_assets_serial_number"), "assets", ["serial_number"])

    op.create_table(
        "custom_fields",
        sa.Column("id", sa.String(), nullable=False),
        _organization_fk(),
        sa.Column("entity_type", sa.String(), nullable=False),
        sa.Column("entity_id", sa.String(), nullable=False),
        sa.Column("field_name", sa.String(), nullable=False),
        sa.Column("field_value", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_custom_field_entity", "custom_fields", ["entity_type", "entity_id"]
    )

    for table in ORGANIZATION_TABLES:
        op.create_index(op.f(f"ix_{table}_organization_id"), table, ["organization_id"])


def downgrade() -> None:
    """Drop all tables (children first)."""
    for table in reversed(ORGANIZATION_TABLES):
        op.drop_index(op.f(f"ix_{table}_organization_id"), table_name=table)
    op.drop_table("custom_fields")
    op.drop_table("assets")
    op.drop_table("domains")
    op.drop_table("configurations")
    op.drop_table("passwords")
    op.drop_table("documents")
    op.drop_table("locations")
    op.drop_table("contacts")
    op.drop_table("page_contents")
    op.drop_table("organization_sidebar_items")
    op.drop_table("organizations")
