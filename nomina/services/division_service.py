"""
Division service: the division tree of one payroll.

Divisions form a self-referential tree scoped to a single payroll.  The
parent check is one hop deep: a division may not be its own parent and its
parent must live in the same payroll.  Longer cycles (A → B → C → A) are
not detected.

``parent_division_id`` is a tri-state update field (see ``nomina.fields``):
``UNCHANGED`` keeps the parent, ``CLEAR`` detaches the division to the top
level, ``Set(id)`` re-validates and moves it.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from uuid import UUID

from nomina.domain import Division
from nomina.errors import NotFoundError
from nomina.fields import UNCHANGED, Patch, is_supplied, value_of
from nomina.repositories.protocols import DivisionRepository
from nomina.services.common import invalid, normalize_optional, normalize_text, supplied_fields
from nomina.services.payroll_service import PayrollService

logger = logging.getLogger(__name__)


@dataclass
class CreateDivisionParams:
    name: str
    description: str
    budget_code: str
    parent_division_id: UUID | None = None


@dataclass
class UpdateDivisionParams:
    name: str | None = None
    description: str | None = None
    budget_code: str | None = None
    parent_division_id: Patch[UUID] = UNCHANGED


class DivisionService:
    def __init__(
        self,
        repository: DivisionRepository,
        payroll_service: PayrollService,
    ) -> None:
        self.repository = repository
        self.payroll_service = payroll_service

    async def create(
        self,
        organization_id: UUID,
        payroll_id: UUID,
        params: CreateDivisionParams,
    ) -> Division:
        name = normalize_text(params.name, "division name")
        description = normalize_text(params.description, "division description")
        budget_code = normalize_text(params.budget_code, "division budget code")
        await self.payroll_service.ensure_belongs_to_organization(organization_id, payroll_id)
        parent_division_id = await self.validate_parent(
            params.parent_division_id, payroll_id, None
        )

        division = await self.repository.insert(
            Division(
                id=uuid.uuid4(),
                name=name,
                description=description,
                budget_code=budget_code,
                payroll_id=payroll_id,
                parent_division_id=parent_division_id,
            )
        )
        logger.info(
            "division created: %s",
            division.id,
            extra={"entity": "division", "payroll_id": payroll_id},
        )
        return division

    async def get(
        self, organization_id: UUID, payroll_id: UUID, division_id: UUID
    ) -> Division | None:
        await self.payroll_service.ensure_belongs_to_organization(organization_id, payroll_id)
        division = await self.repository.fetch(division_id)
        if division is None or division.payroll_id != payroll_id:
            return None
        return division

    async def list(self, organization_id: UUID, payroll_id: UUID) -> list[Division]:
        await self.payroll_service.ensure_belongs_to_organization(organization_id, payroll_id)
        divisions = await self.repository.fetch_by_payroll(payroll_id)
        return sorted(divisions, key=lambda d: d.name)

    async def children(
        self, organization_id: UUID, payroll_id: UUID, division_id: UUID
    ) -> list[Division]:
        """Direct sub-divisions of *division_id*, ordered by name."""
        if await self.get(organization_id, payroll_id, division_id) is None:
            raise NotFoundError(
                f"division `{division_id}` not found for payroll `{payroll_id}`"
            )
        divisions = await self.repository.fetch_by_payroll(payroll_id)
        return sorted(
            (d for d in divisions if d.parent_division_id == division_id),
            key=lambda d: d.name,
        )

    async def update(
        self,
        organization_id: UUID,
        payroll_id: UUID,
        division_id: UUID,
        params: UpdateDivisionParams,
    ) -> Division | None:
        supplied_fields(params)

        changes = {}
        for field, label in (
            ("name", "division name"),
            ("description", "division description"),
            ("budget_code", "division budget code"),
        ):
            value = normalize_optional(getattr(params, field), label)
            if value is not None:
                changes[field] = value

        if await self.get(organization_id, payroll_id, division_id) is None:
            return None
        if is_supplied(params.parent_division_id):
            changes["parent_division_id"] = await self.validate_parent(
                value_of(params.parent_division_id), payroll_id, division_id
            )

        division = await self.repository.update(division_id, changes)
        logger.info("division updated: %s (%s)", division_id, ", ".join(sorted(changes)))
        return division

    async def delete(
        self, organization_id: UUID, payroll_id: UUID, division_id: UUID
    ) -> bool:
        if await self.get(organization_id, payroll_id, division_id) is None:
            return False

        deleted = await self.repository.delete(division_id)
        if deleted:
            logger.info("division deleted: %s", division_id)
        return deleted

    async def validate_parent(
        self,
        parent_division_id: UUID | None,
        payroll_id: UUID,
        division_id: UUID | None,
    ) -> UUID | None:
        """
        Check a prospective parent for a division of *payroll_id*.

        *division_id* is the division being moved, or None when it is being
        created.  Returns the accepted parent id (None for a top-level
        division).
        """
        if parent_division_id is None:
            return None
        if parent_division_id == division_id:
            raise invalid("division cannot be its own parent")

        parent = await self.repository.fetch(parent_division_id)
        if parent is None:
            raise NotFoundError(f"parent division `{parent_division_id}` not found")
        if parent.payroll_id != payroll_id:
            raise invalid("parent division must belong to the same payroll")
        return parent_division_id
