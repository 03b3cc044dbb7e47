"""Persistence models: ORM entities and mixins.

Importing this package registers every table on Base.metadata.
"""

from itdocs.infrastructure.persistence.models.asset import Asset
from itdocs.infrastructure.persistence.models.configuration import Configuration
from itdocs.infrastructure.persistence.models.contact import Contact
from itdocs.infrastructure.persistence.models.custom_field import CustomField
from itdocs.infrastructure.persistence.models.document import Document
from itdocs.infrastructure.persistence.models.domain import Domain
from itdocs.infrastructure.persistence.models.location import Location
from itdocs.infrastructure.persistence.models.mixins import (
    CuidMixin,
    OrganizationMixin,
    OrganizationScopedModel,
    TimestampMixin,
)
from itdocs.infrastructure.persistence.models.organization import Organization
from itdocs.infrastructure.persistence.models.password import Password
from itdocs.infrastructure.persistence.models.sidebar_item import (
    OrganizationSidebarItem,
    PageContent,
)

MODELS_BY_TABLE = {
    model.__tablename__: model
    for model in (
        Organization,
        OrganizationSidebarItem,
        PageContent,
        Contact,
        Location,
        Document,
        Password,
        Configuration,
        Domain,
        Asset,
        CustomField,
    )
}

__all__ = [
    "Asset",
    "Configuration",
    "Contact",
    "CuidMixin",
    "CustomField",
    "Document",
    "Domain",
    "Location",
    "MODELS_BY_TABLE",
    "Organization",
    "OrganizationMixin",
    "OrganizationScopedModel",
    "OrganizationSidebarItem",
    "PageContent",
    "Password",
    "TimestampMixin",
]
