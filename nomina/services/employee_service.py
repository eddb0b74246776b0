"""
Employee service: the integration point of the hierarchy.

An employee is addressed through (organization, payroll, division) and
references a job and a bank.  Before anything is written the whole
ownership chain is confirmed:

- the division lives in the payroll, which lives in the organization;
- the job belongs to the same payroll;
- the bank belongs to the same organization.

Any break in the chain is a NotFoundError, exactly as if the referenced
entity did not exist.  The division and payroll ids are copied onto the
stored employee, and reads filter on both so that an employee id looked up
through the wrong division or payroll is "not found".

Checks and writes are separate repository calls with no transaction
spanning them; a parent deleted between the check and the write is not
detected here.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nomina.domain import Employee
from nomina.errors import NotFoundError
from nomina.fields import UNCHANGED, Patch, is_supplied, value_of
from nomina.repositories.protocols import EmployeeRepository
from nomina.services.bank_service import BankService
from nomina.services.common import invalid, normalize_optional, normalize_text, supplied_fields
from nomina.services.division_service import DivisionService
from nomina.services.job_service import JobService
from nomina.services.payroll_service import PayrollService

logger = logging.getLogger(__name__)

# Required text fields and the label used in validation messages.
TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("id_number", "id number"),
    ("last_name", "last name"),
    ("first_name", "first name"),
    ("address", "address"),
    ("phone", "phone"),
    ("place_of_birth", "place of birth"),
    ("nationality", "nationality"),
    ("marital_status", "marital status"),
    ("gender", "gender"),
    ("classification", "classification"),
    ("bank_account", "bank account"),
    ("status", "status"),
)


@dataclass
class CreateEmployeeParams:
    id_number: str
    last_name: str
    first_name: str
    address: str
    phone: str
    place_of_birth: str
    date_of_birth: date
    nationality: str
    marital_status: str
    gender: str
    hire_date: date
    classification: str
    job_id: UUID
    bank_id: UUID
    bank_account: str
    status: str
    hours: int
    termination_date: date | None = None


@dataclass
class UpdateEmployeeParams:
    id_number: str | None = None
    last_name: str | None = None
    first_name: str | None = None
    address: str | None = None
    phone: str | None = None
    place_of_birth: str | None = None
    date_of_birth: date | None = None
    nationality: str | None = None
    marital_status: str | None = None
    gender: str | None = None
    hire_date: date | None = None
    termination_date: Patch[date] = UNCHANGED
    classification: str | None = None
    job_id: UUID | None = None
    bank_id: UUID | None = None
    bank_account: str | None = None
    status: str | None = None
    hours: int | None = None


def validate_hours(value: int) -> int:
    if value < 0:
        raise invalid("hours cannot be negative")
    return value


def validate_termination_date(hire_date: date, termination_date: date | None) -> date | None:
    """A termination date may equal the hire date but never precede it."""
    if termination_date is not None and termination_date < hire_date:
        raise invalid("termination date cannot be before hire date")
    return termination_date


class EmployeeService:
    def __init__(
        self,
        repository: EmployeeRepository,
        division_service: DivisionService,
        payroll_service: PayrollService,
        job_service: JobService,
        bank_service: BankService,
    ) -> None:
        self.repository = repository
        self.division_service = division_service
        self.payroll_service = payroll_service
        self.job_service = job_service
        self.bank_service = bank_service

    async def create(
        self,
        organization_id: UUID,
        payroll_id: UUID,
        division_id: UUID,
        params: CreateEmployeeParams,
    ) -> Employee:
        division = await self.division_service.get(organization_id, payroll_id, division_id)
        if division is None:
            raise self._division_not_found(organization_id, payroll_id, division_id)
        await self.ensure_job_belongs(organization_id, payroll_id, params.job_id)
        await self.ensure_bank_belongs(organization_id, params.bank_id)

        text = {
            field: normalize_text(getattr(params, field), label)
            for field, label in TEXT_FIELDS
        }
        hours = validate_hours(params.hours)
        termination_date = validate_termination_date(params.hire_date, params.termination_date)

        employee = await self.repository.insert(
            Employee(
                id=uuid.uuid4(),
                date_of_birth=params.date_of_birth,
                hire_date=params.hire_date,
                termination_date=termination_date,
                job_id=params.job_id,
                bank_id=params.bank_id,
                hours=hours,
                division_id=division.id,
                payroll_id=payroll_id,
                **text,
            )
        )
        logger.info(
            "employee created: %s",
            employee.id,
            extra={"entity": "employee", "division_id": division.id, "payroll_id": payroll_id},
        )
        return employee

    async def get(
        self,
        organization_id: UUID,
        payroll_id: UUID,
        division_id: UUID,
        employee_id: UUID,
    ) -> Employee | None:
        await self.ensure_division_accessible(organization_id, payroll_id, division_id)
        employee = await self.repository.fetch(employee_id)
        if employee is None:
            return None
        if employee.division_id != division_id or employee.payroll_id != payroll_id:
            return None
        return employee

    async def list(
        self, organization_id: UUID, payroll_id: UUID, division_id: UUID
    ) -> list[Employee]:
        """Employees of the division ordered by (last name, first name)."""
        await self.ensure_division_accessible(organization_id, payroll_id, division_id)
        employees = await self.repository.fetch_by_division(division_id)
        return sorted(
            (e for e in employees if e.payroll_id == payroll_id),
            key=lambda e: (e.last_name, e.first_name),
        )

    async def update(
        self,
        organization_id: UUID,
        payroll_id: UUID,
        division_id: UUID,
        employee_id: UUID,
        params: UpdateEmployeeParams,
    ) -> Employee | None:
        """
        Apply a partial update.

        The job and bank are re-checked only when they are being changed.
        The termination-date bound is computed against the new hire date
        when one is supplied, otherwise against the stored one; moving the
        hire date past an already stored termination date is rejected too.
        """
        supplied_fields(params)
        employee = await self.get(organization_id, payroll_id, division_id, employee_id)
        if employee is None:
            return None

        if params.job_id is not None:
            await self.ensure_job_belongs(organization_id, payroll_id, params.job_id)
        if params.bank_id is not None:
            await self.ensure_bank_belongs(organization_id, params.bank_id)

        changes = {}
        hire_date = params.hire_date if params.hire_date is not None else employee.hire_date
        if is_supplied(params.termination_date):
            changes["termination_date"] = validate_termination_date(
                hire_date, value_of(params.termination_date)
            )
        elif params.hire_date is not None:
            validate_termination_date(hire_date, employee.termination_date)

        for field, label in TEXT_FIELDS:
            value = normalize_optional(getattr(params, field), label)
            if value is not None:
                changes[field] = value
        for field in ("date_of_birth", "hire_date", "job_id", "bank_id"):
            value = getattr(params, field)
            if value is not None:
                changes[field] = value
        if params.hours is not None:
            changes["hours"] = validate_hours(params.hours)

        updated = await self.repository.update(employee_id, changes)
        logger.info("employee updated: %s (%s)", employee_id, ", ".join(sorted(changes)))
        return updated

    async def delete(
        self,
        organization_id: UUID,
        payroll_id: UUID,
        division_id: UUID,
        employee_id: UUID,
    ) -> bool:
        if await self.get(organization_id, payroll_id, division_id, employee_id) is None:
            return False

        deleted = await self.repository.delete(employee_id)
        if deleted:
            logger.info("employee deleted: %s", employee_id)
        return deleted

    # ------------------------------------------------------------------
    # Ownership checks
    # ------------------------------------------------------------------

    async def ensure_division_accessible(
        self, organization_id: UUID, payroll_id: UUID, division_id: UUID
    ) -> None:
        await self.payroll_service.ensure_belongs_to_organization(organization_id, payroll_id)
        if await self.division_service.get(organization_id, payroll_id, division_id) is None:
            raise self._division_not_found(organization_id, payroll_id, division_id)

    async def ensure_job_belongs(
        self, organization_id: UUID, payroll_id: UUID, job_id: UUID
    ) -> None:
        job = await self.job_service.get(organization_id, payroll_id, job_id)
        if job is None or job.payroll_id != payroll_id:
            raise NotFoundError(f"job `{job_id}` not found for payroll `{payroll_id}`")

    async def ensure_bank_belongs(self, organization_id: UUID, bank_id: UUID) -> None:
        bank = await self.bank_service.get(organization_id, bank_id)
        if bank is None or bank.organization_id != organization_id:
            raise NotFoundError(
                f"bank `{bank_id}` not found for organization `{organization_id}`"
            )

    @staticmethod
    def _division_not_found(
        organization_id: UUID, payroll_id: UUID, division_id: UUID
    ) -> NotFoundError:
        return NotFoundError(
            f"division `{division_id}` not found for payroll `{payroll_id}` "
            f"in organization `{organization_id}`"
        )
