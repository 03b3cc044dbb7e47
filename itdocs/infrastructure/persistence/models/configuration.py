"""Configuration ORM model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from itdocs.infrastructure.persistence.database import Base
from itdocs.infrastructure.persistence.models.mixins import OrganizationScopedModel


class Configuration(OrganizationScopedModel, Base):
    """Configuration record (servers, network gear, ...). Table: configurations."""

    __tablename__ = "configurations"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    config_type: Mapped[str | None] = mapped_column(String, nullable=True)
