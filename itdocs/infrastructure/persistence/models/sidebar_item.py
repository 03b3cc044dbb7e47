"""Custom sidebar navigation items and the page content behind them."""

from typing import Any

from sqlalchemy import JSON, Boolean, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from itdocs.infrastructure.persistence.database import Base
from itdocs.infrastructure.persistence.models.mixins import (
    CuidMixin,
    OrganizationScopedModel,
    TimestampMixin,
)


class OrganizationSidebarItem(OrganizationScopedModel, Base):
    """Sidebar item. Table: organization_sidebar_items. Slug is unique per organization."""

    __tablename__ = "organization_sidebar_items"

    item_name: Mapped[str] = mapped_column(String, nullable=False)
    item_slug: Mapped[str] = mapped_column(String, nullable=False)
    item_type: Mapped[str] = mapped_column(String, nullable=False, default="page")
    icon: Mapped[str | None] = mapped_column(String, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_category: Mapped[str | None] = mapped_column(String, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index(
            "ux_sidebar_item_org_slug", "organization_id", "item_slug", unique=True
        ),
    )


class PageContent(CuidMixin, TimestampMixin, Base):
    """Page payload for a sidebar item. Table: page_contents.

    content_data is opaque JSON whose shape depends on content_type
    (rich-text, contact-form, checklist, ...).
    """

    __tablename__ = "page_contents"

    sidebar_item_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("organization_sidebar_items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content_type: Mapped[str] = mapped_column(String, nullable=False)
    content_data: Mapped[Any] = mapped_column(JSON, nullable=True)

    sidebar_item: Mapped[OrganizationSidebarItem] = relationship()
