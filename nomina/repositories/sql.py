"""
SQLAlchemy repositories: the persistent implementation of the contracts
in ``nomina.repositories.protocols``.

Design notes
------------
- One repository instance wraps one ``AsyncSession``.  Repositories flush
  but never commit; the transaction boundary belongs to ``session_scope``
  (``get_db`` in the HTTP layer).
- Rows are converted to frozen domain dataclasses on the way out, so no ORM
  instance escapes into the services.
- Any ``SQLAlchemyError`` surfaces as ``DatabaseError``.  A stored
  value the column type cannot load (e.g. an id that is not a UUID) means
  the data is corrupt and surfaces as ``InternalError``.
"""
import dataclasses
import logging
from contextlib import asynccontextmanager
from typing import Any, Generic, Mapping, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nomina.database import Base
from nomina.domain import Bank, Division, Employee, Job, Organization, Payroll
from nomina.errors import DatabaseError, InternalError
from nomina.models import (
    BankRow,
    DivisionRow,
    EmployeeRow,
    JobRow,
    OrganizationRow,
    PayrollRow,
)

logger = logging.getLogger(__name__)

E = TypeVar("E")


class SqlRepository(Generic[E]):
    """Generic insert/fetch/update/delete over one mapped table."""

    row_type: type[Base]
    entity_type: type
    entity_name: str

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def _to_entity(self, row) -> E:
        return self.entity_type(
            **{f.name: getattr(row, f.name) for f in dataclasses.fields(self.entity_type)}
        )

    @asynccontextmanager
    async def _guard(self, operation: str):
        try:
            yield
        except (ValueError, TypeError) as exc:
            # Raised by the Uuid/Date result processors on a corrupt stored value.
            logger.error(
                "%s %s read a malformed value: %s",
                self.entity_name,
                operation,
                exc,
                extra={"entity": self.entity_name},
            )
            raise InternalError(
                f"stored {self.entity_name} has a malformed value: {exc}"
            ) from exc
        except SQLAlchemyError as exc:
            logger.error(
                "%s %s failed: %s",
                self.entity_name,
                operation,
                exc,
                extra={"entity": self.entity_name},
            )
            raise DatabaseError(f"{self.entity_name} {operation} failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    async def insert(self, entity: E) -> E:
        row = self.row_type(**dataclasses.asdict(entity))
        async with self._guard("insert"):
            self.session.add(row)
            await self.session.flush()
        return self._to_entity(row)

    async def fetch(self, id: UUID) -> E | None:
        async with self._guard("fetch"):
            row = await self.session.get(self.row_type, id)
        return None if row is None else self._to_entity(row)

    async def update(self, id: UUID, changes: Mapping[str, Any]) -> E | None:
        async with self._guard("update"):
            row = await self.session.get(self.row_type, id)
            if row is None:
                return None
            for field, value in changes.items():
                setattr(row, field, value)
            await self.session.flush()
        return self._to_entity(row)

    async def delete(self, id: UUID) -> bool:
        async with self._guard("delete"):
            row = await self.session.get(self.row_type, id)
            if row is None:
                return False
            await self.session.delete(row)
            await self.session.flush()
        return True

    async def _fetch_where(self, column, value: UUID | None = None) -> list[E]:
        q = select(self.row_type)
        if column is not None:
            q = q.where(column == value)
        async with self._guard("list"):
            result = await self.session.execute(q)
            rows = result.scalars().all()
        return [self._to_entity(row) for row in rows]


# ---------------------------------------------------------------------------
# Per-entity repositories
# ---------------------------------------------------------------------------

class SqlOrganizationRepository(SqlRepository[Organization]):
    row_type = OrganizationRow
    entity_type = Organization
    entity_name = "organization"

    async def fetch_all(self) -> list[Organization]:
        return await self._fetch_where(None)


class SqlPayrollRepository(SqlRepository[Payroll]):
    row_type = PayrollRow
    entity_type = Payroll
    entity_name = "payroll"

    async def fetch_by_organization(self, organization_id: UUID) -> list[Payroll]:
        return await self._fetch_where(PayrollRow.organization_id, organization_id)


class SqlDivisionRepository(SqlRepository[Division]):
    row_type = DivisionRow
    entity_type = Division
    entity_name = "division"

    async def fetch_by_payroll(self, payroll_id: UUID) -> list[Division]:
        return await self._fetch_where(DivisionRow.payroll_id, payroll_id)


class SqlJobRepository(SqlRepository[Job]):
    row_type = JobRow
    entity_type = Job
    entity_name = "job"

    async def fetch_by_payroll(self, payroll_id: UUID) -> list[Job]:
        return await self._fetch_where(JobRow.payroll_id, payroll_id)


class SqlBankRepository(SqlRepository[Bank]):
    row_type = BankRow
    entity_type = Bank
    entity_name = "bank"

    async def fetch_by_organization(self, organization_id: UUID) -> list[Bank]:
        return await self._fetch_where(BankRow.organization_id, organization_id)


class SqlEmployeeRepository(SqlRepository[Employee]):
    row_type = EmployeeRow
    entity_type = Employee
    entity_name = "employee"

    async def fetch_by_division(self, division_id: UUID) -> list[Employee]:
        return await self._fetch_where(EmployeeRow.division_id, division_id)
