"""
Organization service: the root tenants of the hierarchy.

Organizations have no parent, so this is the only service without an
ownership check; everything else ultimately asks it whether an
organization exists.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from uuid import UUID

from nomina.domain import Organization
from nomina.errors import NotFoundError
from nomina.repositories.protocols import OrganizationRepository
from nomina.services.common import normalize_optional, normalize_text, supplied_fields

logger = logging.getLogger(__name__)


@dataclass
class CreateOrganizationParams:
    name: str


@dataclass
class UpdateOrganizationParams:
    name: str | None = None


class OrganizationService:
    def __init__(self, repository: OrganizationRepository) -> None:
        self.repository = repository

    async def create(self, params: CreateOrganizationParams) -> Organization:
        name = normalize_text(params.name, "organization name")
        organization = await self.repository.insert(Organization(id=uuid.uuid4(), name=name))
        logger.info(
            "organization created: %s",
            organization.id,
            extra={"entity": "organization", "entity_id": organization.id},
        )
        return organization

    async def get(self, organization_id: UUID) -> Organization | None:
        return await self.repository.fetch(organization_id)

    async def list(self) -> list[Organization]:
        """All organizations, ordered by name (ordinal, case-sensitive)."""
        organizations = await self.repository.fetch_all()
        return sorted(organizations, key=lambda o: o.name)

    async def update(
        self, organization_id: UUID, params: UpdateOrganizationParams
    ) -> Organization | None:
        """
        Rename an organization.

        Returns None when *organization_id* does not exist; an unknown id is
        not an error here.
        """
        supplied_fields(params)
        changes = {"name": normalize_optional(params.name, "organization name")}
        organization = await self.repository.update(organization_id, changes)
        if organization is not None:
            logger.info("organization updated: %s", organization_id)
        return organization

    async def delete(self, organization_id: UUID) -> bool:
        deleted = await self.repository.delete(organization_id)
        if deleted:
            logger.info("organization deleted: %s", organization_id)
        return deleted

    async def ensure_exists(self, organization_id: UUID) -> None:
        """Raise NotFoundError when *organization_id* does not exist."""
        if await self.get(organization_id) is None:
            raise NotFoundError(f"organization `{organization_id}` not found")
