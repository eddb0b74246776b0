"""
Service wiring.

``build_services`` assembles the full service graph over one database
session; the seed script calls it directly.  The ``get_*_service``
functions are the FastAPI dependencies used by the routers::

    @router.get("/{organization_id}")
    async def get_organization(
        organization_id: UUID,
        service: OrganizationService = Depends(get_organization_service),
    ):
        ...

FastAPI caches dependencies per request, so every service resolved while
handling one request shares the same ``Services`` instance and therefore
the same session and transaction.
"""
from dataclasses import dataclass

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nomina.database import get_db
from nomina.repositories.sql import (
    SqlBankRepository,
    SqlDivisionRepository,
    SqlEmployeeRepository,
    SqlJobRepository,
    SqlOrganizationRepository,
    SqlPayrollRepository,
)
from nomina.services.bank_service import BankService
from nomina.services.division_service import DivisionService
from nomina.services.employee_service import EmployeeService
from nomina.services.job_service import JobService
from nomina.services.organization_service import OrganizationService
from nomina.services.payroll_service import PayrollService


@dataclass(frozen=True)
class Services:
    organizations: OrganizationService
    payrolls: PayrollService
    divisions: DivisionService
    jobs: JobService
    banks: BankService
    employees: EmployeeService


def build_services(session: AsyncSession) -> Services:
    """Wire every service, leaves first, over the SQLAlchemy repositories."""
    organizations = OrganizationService(SqlOrganizationRepository(session))
    payrolls = PayrollService(SqlPayrollRepository(session), organizations)
    divisions = DivisionService(SqlDivisionRepository(session), payrolls)
    jobs = JobService(SqlJobRepository(session), payrolls)
    banks = BankService(SqlBankRepository(session), organizations)
    employees = EmployeeService(
        SqlEmployeeRepository(session), divisions, payrolls, jobs, banks
    )
    return Services(
        organizations=organizations,
        payrolls=payrolls,
        divisions=divisions,
        jobs=jobs,
        banks=banks,
        employees=employees,
    )


async def get_services(db: AsyncSession = Depends(get_db)) -> Services:
    return build_services(db)


async def get_organization_service(
    services: Services = Depends(get_services),
) -> OrganizationService:
    return services.organizations


async def get_payroll_service(services: Services = Depends(get_services)) -> PayrollService:
    return services.payrolls


async def get_division_service(services: Services = Depends(get_services)) -> DivisionService:
    return services.divisions


async def get_job_service(services: Services = Depends(get_services)) -> JobService:
    return services.jobs


async def get_bank_service(services: Services = Depends(get_services)) -> BankService:
    return services.banks


async def get_employee_service(services: Services = Depends(get_services)) -> EmployeeService:
    return services.employees
