"""Document ORM model. Metadata only; file bytes live in external storage."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from itdocs.infrastructure.persistence.database import Base
from itdocs.infrastructure.persistence.models.mixins import OrganizationScopedModel


class Document(OrganizationScopedModel, Base):
    """Document entity. Table: documents."""

    __tablename__ = "documents"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    file_type: Mapped[str | None] = mapped_column(String, nullable=True)
    storage_ref: Mapped[str | None] = mapped_column(String, nullable=True)
