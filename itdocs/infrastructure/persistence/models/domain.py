"""Domain (DNS name) ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from itdocs.infrastructure.persistence.database import Base
from itdocs.infrastructure.persistence.models.mixins import OrganizationScopedModel


class Domain(OrganizationScopedModel, Base):
    """Registered domain name. Table: domains."""

    __tablename__ = "domains"

    domain_name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    registrar: Mapped[str | None] = mapped_column(String, nullable=True)
    expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
