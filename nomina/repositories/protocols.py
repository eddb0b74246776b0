"""
Repository contracts: the only storage surface the services see.

Structural ``Protocol`` types: any object with matching async methods
satisfies them, so the SQLAlchemy repositories (``nomina.repositories.sql``)
and the in-memory ones used by the tests need no shared base class.

``update`` receives a mapping of field name to new value holding only the
fields to change.  A key mapped to ``None`` clears a nullable column; a
missing key leaves the column untouched.
"""
from typing import Any, Mapping, Protocol
from uuid import UUID

from nomina.domain import Bank, Division, Employee, Job, Organization, Payroll

Changes = Mapping[str, Any]


class OrganizationRepository(Protocol):
    async def insert(self, organization: Organization) -> Organization: ...
    async def fetch(self, id: UUID) -> Organization | None: ...
    async def fetch_all(self) -> list[Organization]: ...
    async def update(self, id: UUID, changes: Changes) -> Organization | None: ...
    async def delete(self, id: UUID) -> bool: ...


class PayrollRepository(Protocol):
    async def insert(self, payroll: Payroll) -> Payroll: ...
    async def fetch(self, id: UUID) -> Payroll | None: ...
    async def fetch_by_organization(self, organization_id: UUID) -> list[Payroll]: ...
    async def update(self, id: UUID, changes: Changes) -> Payroll | None: ...
    async def delete(self, id: UUID) -> bool: ...


class DivisionRepository(Protocol):
    async def insert(self, division: Division) -> Division: ...
    async def fetch(self, id: UUID) -> Division | None: ...
    async def fetch_by_payroll(self, payroll_id: UUID) -> list[Division]: ...
    async def update(self, id: UUID, changes: Changes) -> Division | None: ...
    async def delete(self, id: UUID) -> bool: ...


class JobRepository(Protocol):
    async def insert(self, job: Job) -> Job: ...
    async def fetch(self, id: UUID) -> Job | None: ...
    async def fetch_by_payroll(self, payroll_id: UUID) -> list[Job]: ...
    async def update(self, id: UUID, changes: Changes) -> Job | None: ...
    async def delete(self, id: UUID) -> bool: ...


class BankRepository(Protocol):
    async def insert(self, bank: Bank) -> Bank: ...
    async def fetch(self, id: UUID) -> Bank | None: ...
    async def fetch_by_organization(self, organization_id: UUID) -> list[Bank]: ...
    async def update(self, id: UUID, changes: Changes) -> Bank | None: ...
    async def delete(self, id: UUID) -> bool: ...


class EmployeeRepository(Protocol):
    async def insert(self, employee: Employee) -> Employee: ...
    async def fetch(self, id: UUID) -> Employee | None: ...
    async def fetch_by_division(self, division_id: UUID) -> list[Employee]: ...
    async def update(self, id: UUID, changes: Changes) -> Employee | None: ...
    async def delete(self, id: UUID) -> bool: ...
