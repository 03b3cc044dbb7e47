"""Custom field ORM model. User-defined name/value pairs on other records."""

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from itdocs.infrastructure.persistence.database import Base
from itdocs.infrastructure.persistence.models.mixins import OrganizationScopedModel


class CustomField(OrganizationScopedModel, Base):
    """Custom field value. Table: custom_fields. entity_type names the owning table's route."""

    __tablename__ = "custom_fields"

    entity_type: Mapped[str] = mapped_column(String, nullable=False)
    entity_id: Mapped[str] = mapped_column(String, nullable=False)
    field_name: Mapped[str] = mapped_column(String, nullable=False)
    field_value: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("ix_custom_field_entity", "entity_type", "entity_id"),
    )
