"""
Bank service: banks an organization pays its employees through.

``get`` does not check that the organization exists: a bank owned by a
different organization, or any bank under an unknown organization, simply
comes back as None.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from uuid import UUID

from nomina.domain import Bank
from nomina.repositories.protocols import BankRepository
from nomina.services.common import normalize_text, supplied_fields
from nomina.services.organization_service import OrganizationService

logger = logging.getLogger(__name__)


@dataclass
class CreateBankParams:
    name: str


@dataclass
class UpdateBankParams:
    name: str | None = None


class BankService:
    def __init__(
        self,
        repository: BankRepository,
        organization_service: OrganizationService,
    ) -> None:
        self.repository = repository
        self.organization_service = organization_service

    async def create(self, organization_id: UUID, params: CreateBankParams) -> Bank:
        name = normalize_text(params.name, "bank name")
        await self.organization_service.ensure_exists(organization_id)

        bank = await self.repository.insert(
            Bank(id=uuid.uuid4(), name=name, organization_id=organization_id)
        )
        logger.info(
            "bank created: %s",
            bank.id,
            extra={"entity": "bank", "organization_id": organization_id},
        )
        return bank

    async def get(self, organization_id: UUID, bank_id: UUID) -> Bank | None:
        bank = await self.repository.fetch(bank_id)
        if bank is None or bank.organization_id != organization_id:
            return None
        return bank

    async def list(self, organization_id: UUID) -> list[Bank]:
        await self.organization_service.ensure_exists(organization_id)
        banks = await self.repository.fetch_by_organization(organization_id)
        return sorted(banks, key=lambda b: b.name)

    async def update(
        self, organization_id: UUID, bank_id: UUID, params: UpdateBankParams
    ) -> Bank | None:
        supplied_fields(params)
        if await self.get(organization_id, bank_id) is None:
            return None

        bank = await self.repository.update(
            bank_id, {"name": normalize_text(params.name, "bank name")}
        )
        logger.info("bank updated: %s", bank_id)
        return bank

    async def delete(self, organization_id: UUID, bank_id: UUID) -> bool:
        if await self.get(organization_id, bank_id) is None:
            return False

        deleted = await self.repository.delete(bank_id)
        if deleted:
            logger.info("bank deleted: %s", bank_id)
        return deleted
