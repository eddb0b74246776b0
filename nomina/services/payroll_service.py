"""
Payroll service: payrolls scoped under an organization.

A payroll that exists under a different organization is reported exactly
like a missing one: ``get`` returns None and ``ensure_belongs_to_organization``
raises NotFoundError.  Dependent services (divisions, jobs, employees) go
through ``ensure_belongs_to_organization`` before touching their own data.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from uuid import UUID

from nomina.domain import Payroll
from nomina.errors import NotFoundError
from nomina.repositories.protocols import PayrollRepository
from nomina.services.common import normalize_text, supplied_fields
from nomina.services.organization_service import OrganizationService

logger = logging.getLogger(__name__)


@dataclass
class CreatePayrollParams:
    name: str
    description: str


@dataclass
class UpdatePayrollParams:
    name: str | None = None
    description: str | None = None
    # Reassigns the payroll to another (existing) organization.
    organization_id: UUID | None = None


class PayrollService:
    def __init__(
        self,
        repository: PayrollRepository,
        organization_service: OrganizationService,
    ) -> None:
        self.repository = repository
        self.organization_service = organization_service

    async def create(self, organization_id: UUID, params: CreatePayrollParams) -> Payroll:
        name = normalize_text(params.name, "payroll name")
        description = normalize_text(params.description, "payroll description")
        await self.organization_service.ensure_exists(organization_id)

        payroll = await self.repository.insert(
            Payroll(
                id=uuid.uuid4(),
                name=name,
                description=description,
                organization_id=organization_id,
            )
        )
        logger.info(
            "payroll created: %s",
            payroll.id,
            extra={"entity": "payroll", "organization_id": organization_id},
        )
        return payroll

    async def get(self, organization_id: UUID, payroll_id: UUID) -> Payroll | None:
        payroll = await self.repository.fetch(payroll_id)
        if payroll is None or payroll.organization_id != organization_id:
            return None
        return payroll

    async def list(self, organization_id: UUID) -> list[Payroll]:
        await self.organization_service.ensure_exists(organization_id)
        payrolls = await self.repository.fetch_by_organization(organization_id)
        return sorted(payrolls, key=lambda p: p.name)

    async def update(
        self,
        organization_id: UUID,
        payroll_id: UUID,
        params: UpdatePayrollParams,
    ) -> Payroll | None:
        supplied_fields(params)
        await self.organization_service.ensure_exists(organization_id)
        if await self.get(organization_id, payroll_id) is None:
            return None

        changes = {}
        if params.organization_id is not None:
            await self.organization_service.ensure_exists(params.organization_id)
            changes["organization_id"] = params.organization_id
        if params.name is not None:
            changes["name"] = normalize_text(params.name, "payroll name")
        if params.description is not None:
            changes["description"] = normalize_text(params.description, "payroll description")

        payroll = await self.repository.update(payroll_id, changes)
        logger.info("payroll updated: %s (%s)", payroll_id, ", ".join(sorted(changes)))
        return payroll

    async def delete(self, organization_id: UUID, payroll_id: UUID) -> bool:
        await self.organization_service.ensure_exists(organization_id)
        if await self.get(organization_id, payroll_id) is None:
            return False

        deleted = await self.repository.delete(payroll_id)
        if deleted:
            logger.info("payroll deleted: %s", payroll_id)
        return deleted

    # ------------------------------------------------------------------
    # Ownership check
    # ------------------------------------------------------------------

    async def ensure_belongs_to_organization(
        self, organization_id: UUID, payroll_id: UUID
    ) -> None:
        """Raise NotFoundError unless *payroll_id* exists under *organization_id*."""
        await self.organization_service.ensure_exists(organization_id)
        if await self.get(organization_id, payroll_id) is None:
            raise NotFoundError(
                f"payroll `{payroll_id}` not found for organization `{organization_id}`"
            )
