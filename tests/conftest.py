"""
Test infrastructure for the nomina API.

Strategy
--------
- SQLite in-memory via aiosqlite replaces Postgres, so the suite needs no
  running database.
- StaticPool keeps every task on the same connection; an in-memory SQLite
  database only exists for the connection that created it.
- ``get_db`` is overridden to run each request in ``session_scope`` over
  the test session factory, committing or rolling back like production.
- Tables are created before each test and dropped after it.
- Service-level tests run against dict-backed repositories
  (``InMemoryRepository``) that satisfy the repository protocols, so the
  ownership rules are exercised without any database at all.
"""
import dataclasses
from typing import Any, Mapping
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from nomina.database import Base, create_tables, get_db, session_scope
from nomina.dependencies import Services
from nomina.main import app
from nomina.middleware import install_query_counter
from nomina.services.bank_service import BankService
from nomina.services.division_service import DivisionService
from nomina.services.employee_service import EmployeeService
from nomina.services.job_service import JobService
from nomina.services.organization_service import OrganizationService
from nomina.services.payroll_service import PayrollService

# ---------------------------------------------------------------------------
# Test database engine: SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def override_get_db():
    async with session_scope(async_session_test) as session:
        yield session


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------

class InMemoryRepository:
    """Dict-backed repository implementing every per-entity query."""

    def __init__(self) -> None:
        self.items: dict[UUID, Any] = {}

    async def insert(self, entity):
        self.items[entity.id] = entity
        return entity

    async def fetch(self, id: UUID):
        return self.items.get(id)

    async def update(self, id: UUID, changes: Mapping[str, Any]):
        if id not in self.items:
            return None
        self.items[id] = dataclasses.replace(self.items[id], **changes)
        return self.items[id]

    async def delete(self, id: UUID) -> bool:
        return self.items.pop(id, None) is not None

    def _where(self, field: str, value: UUID) -> list:
        return [e for e in self.items.values() if getattr(e, field) == value]

    async def fetch_all(self):
        return list(self.items.values())

    async def fetch_by_organization(self, organization_id: UUID):
        return self._where("organization_id", organization_id)

    async def fetch_by_payroll(self, payroll_id: UUID):
        return self._where("payroll_id", payroll_id)

    async def fetch_by_division(self, division_id: UUID):
        return self._where("division_id", division_id)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    await create_tables(engine_test)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """A live session for repository tests; nothing is committed."""
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def services() -> Services:
    """The full service graph over fresh in-memory repositories."""
    organizations = OrganizationService(InMemoryRepository())
    payrolls = PayrollService(InMemoryRepository(), organizations)
    divisions = DivisionService(InMemoryRepository(), payrolls)
    jobs = JobService(InMemoryRepository(), payrolls)
    banks = BankService(InMemoryRepository(), organizations)
    employees = EmployeeService(InMemoryRepository(), divisions, payrolls, jobs, banks)
    return Services(
        organizations=organizations,
        payrolls=payrolls,
        divisions=divisions,
        jobs=jobs,
        banks=banks,
        employees=employees,
    )


# ---------------------------------------------------------------------------
# HTTP hierarchy fixtures (each returns the created resource as JSON)
# ---------------------------------------------------------------------------

API = "/api/v1/organizations"


@pytest_asyncio.fixture
async def organization(async_client: AsyncClient) -> dict:
    resp = await async_client.post(API, json={"name": "Acme"})
    assert resp.status_code == 201
    return resp.json()


@pytest_asyncio.fixture
async def payroll(async_client: AsyncClient, organization: dict) -> dict:
    resp = await async_client.post(
        f"{API}/{organization['id']}/payrolls",
        json={"name": "Monthly", "description": "Monthly staff"},
    )
    assert resp.status_code == 201
    return resp.json()


@pytest_asyncio.fixture
async def division(async_client: AsyncClient, organization: dict, payroll: dict) -> dict:
    resp = await async_client.post(
        f"{API}/{organization['id']}/payrolls/{payroll['id']}/divisions",
        json={"name": "Operations", "description": "Ops", "budget_code": "OPS-1"},
    )
    assert resp.status_code == 201
    return resp.json()


@pytest_asyncio.fixture
async def job(async_client: AsyncClient, organization: dict, payroll: dict) -> dict:
    resp = await async_client.post(
        f"{API}/{organization['id']}/payrolls/{payroll['id']}/jobs",
        json={"job_title": "Analyst", "salary": 2500.0},
    )
    assert resp.status_code == 201
    return resp.json()


@pytest_asyncio.fixture
async def bank(async_client: AsyncClient, organization: dict) -> dict:
    resp = await async_client.post(
        f"{API}/{organization['id']}/banks", json={"name": "First Bank"}
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def employee_payload(job: dict, bank: dict):
    """Factory for a valid employee body referencing the ``job`` and ``bank`` fixtures."""

    def make(**overrides) -> dict:
        payload = {
            "id_number": "V-1234567",
            "last_name": "Rivera",
            "first_name": "Ana",
            "address": "12 Main Street",
            "phone": "555-0100",
            "place_of_birth": "Caracas",
            "date_of_birth": "1990-04-02",
            "nationality": "Venezuelan",
            "marital_status": "single",
            "gender": "F",
            "hire_date": "2021-03-01",
            "classification": "permanent",
            "job_id": job["id"],
            "bank_id": bank["id"],
            "bank_account": "0102-000000000001",
            "status": "active",
            "hours": 40,
        }
        payload.update(overrides)
        return payload

    return make
