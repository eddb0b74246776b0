from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Optional

from sqlalchemy import Date, DateTime, Float, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from nomina.database import Base

# Parent references are plain indexed UUID columns without ForeignKey
# constraints; ownership is enforced by the services.


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )


# ---------------------------------------------------------------------------
# Organization
# ---------------------------------------------------------------------------
class OrganizationRow(TimestampMixin, Base):
    __tablename__ = "organizations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)


# ---------------------------------------------------------------------------
# Payroll
# ---------------------------------------------------------------------------
class PayrollRow(TimestampMixin, Base):
    __tablename__ = "payrolls"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)


# ---------------------------------------------------------------------------
# Division (self-referential tree within one payroll)
# ---------------------------------------------------------------------------
class DivisionRow(TimestampMixin, Base):
    __tablename__ = "divisions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    budget_code: Mapped[str] = mapped_column(String(100), nullable=False)
    payroll_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    parent_division_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, nullable=True, index=True
    )


# ---------------------------------------------------------------------------
# Job
# ---------------------------------------------------------------------------
class JobRow(TimestampMixin, Base):
    __tablename__ = "jobs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    job_title: Mapped[str] = mapped_column(String(200), nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False)
    payroll_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)


# ---------------------------------------------------------------------------
# Bank
# ---------------------------------------------------------------------------
class BankRow(TimestampMixin, Base):
    __tablename__ = "banks"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)


# ---------------------------------------------------------------------------
# Employee
# ---------------------------------------------------------------------------
class EmployeeRow(TimestampMixin, Base):
    __tablename__ = "employees"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    id_number: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(150), nullable=False)
    address: Mapped[str] = mapped_column(String(300), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    place_of_birth: Mapped[str] = mapped_column(String(150), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    nationality: Mapped[str] = mapped_column(String(100), nullable=False)
    marital_status: Mapped[str] = mapped_column(String(50), nullable=False)
    gender: Mapped[str] = mapped_column(String(50), nullable=False)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    termination_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    classification: Mapped[str] = mapped_column(String(100), nullable=False)
    bank_account: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    hours: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    job_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    bank_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    division_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    payroll_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
