"""
Domain entities.

Plain frozen dataclasses: they are what the services accept from and hand
back to their repositories, independent of how a repository stores them.
"""
from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class Organization:
    id: UUID
    name: str


@dataclass(frozen=True)
class Payroll:
    id: UUID
    name: str
    description: str
    organization_id: UUID


@dataclass(frozen=True)
class Division:
    id: UUID
    name: str
    description: str
    budget_code: str
    payroll_id: UUID
    parent_division_id: UUID | None = None


@dataclass(frozen=True)
class Job:
    id: UUID
    job_title: str
    salary: float
    payroll_id: UUID


@dataclass(frozen=True)
class Bank:
    id: UUID
    name: str
    organization_id: UUID


@dataclass(frozen=True)
class Employee:
    id: UUID
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
    termination_date: date | None
    classification: str
    job_id: UUID
    bank_id: UUID
    bank_account: str
    status: str
    hours: int
    division_id: UUID
    payroll_id: UUID
