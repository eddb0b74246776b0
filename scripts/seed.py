"""Seed a demo organization hierarchy through the service layer."""
import argparse
import asyncio
import logging
import time
from datetime import date

from nomina.config import settings
from nomina.database import create_tables, engine, session_scope
from nomina.dependencies import Services, build_services
from nomina.logging_config import configure_logging
from nomina.services.bank_service import CreateBankParams
from nomina.services.division_service import CreateDivisionParams
from nomina.services.employee_service import CreateEmployeeParams
from nomina.services.job_service import CreateJobParams
from nomina.services.organization_service import CreateOrganizationParams
from nomina.services.payroll_service import CreatePayrollParams

logger = logging.getLogger("nomina.seed")

DIVISIONS = [
    # (name, budget code, parent name)
    ("Operations", "OPS-100", None),
    ("Finance", "FIN-200", None),
    ("Logistics", "OPS-110", "Operations"),
    ("Accounts Payable", "FIN-210", "Finance"),
]

JOBS = [
    ("Analyst", 2400.0),
    ("Coordinator", 2100.0),
    ("Manager", 3800.0),
]

EMPLOYEES = [
    ("Rivera", "Ana"),
    ("Gomez", "Luis"),
    ("Castillo", "Maria"),
    ("Ortega", "Pedro"),
    ("Mendez", "Sofia"),
]


async def seed_organization(services: Services, name: str) -> int:
    organization = await services.organizations.create(CreateOrganizationParams(name=name))
    oid = organization.id

    bank = await services.banks.create(oid, CreateBankParams(name=f"{name} Savings Bank"))
    payroll = await services.payrolls.create(
        oid, CreatePayrollParams(name="Monthly", description="Salaried staff, paid monthly")
    )
    pid = payroll.id

    divisions = {}
    for div_name, budget_code, parent in DIVISIONS:
        division = await services.divisions.create(
            oid,
            pid,
            CreateDivisionParams(
                name=div_name,
                description=f"{div_name} division",
                budget_code=budget_code,
                parent_division_id=divisions[parent].id if parent else None,
            ),
        )
        divisions[div_name] = division

    jobs = [
        await services.jobs.create(oid, pid, CreateJobParams(job_title=title, salary=salary))
        for title, salary in JOBS
    ]

    count = 0
    division_list = list(divisions.values())
    for i, (last_name, first_name) in enumerate(EMPLOYEES):
        await services.employees.create(
            oid,
            pid,
            division_list[i % len(division_list)].id,
            CreateEmployeeParams(
                id_number=f"{name[:3].upper()}-{i:05d}",
                last_name=last_name,
                first_name=first_name,
                address=f"{100 + i} Main Street",
                phone=f"555-01{i:02d}",
                place_of_birth="Caracas",
                date_of_birth=date(1985 + i, 1 + i, 10),
                nationality="Venezuelan",
                marital_status="single",
                gender="F" if i % 2 == 0 else "M",
                hire_date=date(2020, 1 + i, 1),
                classification="permanent",
                job_id=jobs[i % len(jobs)].id,
                bank_id=bank.id,
                bank_account=f"0102-{i:012d}",
                status="active",
                hours=40,
            ),
        )
        count += 1
    return count


async def seed(organizations: int, reset: bool) -> None:
    start = time.perf_counter()
    await create_tables(reset=reset)

    employees = 0
    async with session_scope() as session:
        services = build_services(session)
        for i in range(organizations):
            employees += await seed_organization(services, f"Acme {i + 1}")

    logger.info(
        "seeded %d organizations, %d employees in %.2fs",
        organizations,
        employees,
        time.perf_counter() - start,
    )
    await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the nomina database")
    parser.add_argument("--organizations", type=int, default=1, help="Organizations to create")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate all tables first")
    args = parser.parse_args()

    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    asyncio.run(seed(args.organizations, args.reset))


if __name__ == "__main__":
    main()
