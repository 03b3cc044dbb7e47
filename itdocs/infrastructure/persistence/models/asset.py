"""Asset ORM model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from itdocs.infrastructure.persistence.database import Base
from itdocs.infrastructure.persistence.models.mixins import OrganizationScopedModel


class Asset(OrganizationScopedModel, Base):
    """Hardware or software asset. Table: assets."""

    __tablename__ = "assets"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    asset_type: Mapped[str | None] = mapped_column(String, nullable=True)
    manufacturer: Mapped[str | None] = mapped_column(String, nullable=True)
    model: Mapped[str | None] = mapped_column(String, nullable=True)
    serial_number: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
