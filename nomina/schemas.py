from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# --- Organization ---

class OrganizationCreate(BaseModel):
    name: str = Field(max_length=200)


class OrganizationUpdate(BaseModel):
    name: str | None = Field(None, max_length=200)


class OrganizationResponse(BaseModel):
    id: UUID
    name: str
    model_config = ConfigDict(from_attributes=True)


# --- Payroll ---

class PayrollCreate(BaseModel):
    name: str = Field(max_length=200)
    description: str = Field(max_length=500)


class PayrollUpdate(BaseModel):
    name: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=500)
    organization_id: UUID | None = None


class PayrollResponse(BaseModel):
    id: UUID
    name: str
    description: str
    organization_id: UUID
    model_config = ConfigDict(from_attributes=True)


# --- Division ---

class DivisionCreate(BaseModel):
    name: str = Field(max_length=200)
    description: str = Field(max_length=500)
    budget_code: str = Field(max_length=100)
    parent_division_id: UUID | None = None


class DivisionUpdate(BaseModel):
    name: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=500)
    budget_code: str | None = Field(None, max_length=100)
    # Omitted: keep the parent.  null: detach.  UUID: move under that division.
    parent_division_id: UUID | None = None


class DivisionResponse(BaseModel):
    id: UUID
    name: str
    description: str
    budget_code: str
    payroll_id: UUID
    parent_division_id: UUID | None
    model_config = ConfigDict(from_attributes=True)


# --- Job ---

class JobCreate(BaseModel):
    job_title: str = Field(max_length=200)
    salary: float = Field(allow_inf_nan=False)


class JobUpdate(BaseModel):
    job_title: str | None = Field(None, max_length=200)
    salary: float | None = Field(None, allow_inf_nan=False)


class JobResponse(BaseModel):
    id: UUID
    job_title: str
    salary: float
    payroll_id: UUID
    model_config = ConfigDict(from_attributes=True)


# --- Bank ---

class BankCreate(BaseModel):
    name: str = Field(max_length=200)


class BankUpdate(BaseModel):
    name: str | None = Field(None, max_length=200)


class BankResponse(BaseModel):
    id: UUID
    name: str
    organization_id: UUID
    model_config = ConfigDict(from_attributes=True)


# --- Employee ---

class EmployeeBase(BaseModel):
    id_number: str = Field(max_length=50)
    last_name: str = Field(max_length=150)
    first_name: str = Field(max_length=150)
    address: str = Field(max_length=300)
    phone: str = Field(max_length=50)
    place_of_birth: str = Field(max_length=150)
    date_of_birth: date
    nationality: str = Field(max_length=100)
    marital_status: str = Field(max_length=50)
    gender: str = Field(max_length=50)
    hire_date: date
    termination_date: date | None = None
    classification: str = Field(max_length=100)
    job_id: UUID
    bank_id: UUID
    bank_account: str = Field(max_length=100)
    status: str = Field(max_length=50)
    hours: int


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(BaseModel):
    id_number: str | None = Field(None, max_length=50)
    last_name: str | None = Field(None, max_length=150)
    first_name: str | None = Field(None, max_length=150)
    address: str | None = Field(None, max_length=300)
    phone: str | None = Field(None, max_length=50)
    place_of_birth: str | None = Field(None, max_length=150)
    date_of_birth: date | None = None
    nationality: str | None = Field(None, max_length=100)
    marital_status: str | None = Field(None, max_length=50)
    gender: str | None = Field(None, max_length=50)
    hire_date: date | None = None
    # Omitted: keep.  null: clear.  date: set (must not precede hire_date).
    termination_date: date | None = None
    classification: str | None = Field(None, max_length=100)
    job_id: UUID | None = None
    bank_id: UUID | None = None
    bank_account: str | None = Field(None, max_length=100)
    status: str | None = Field(None, max_length=50)
    hours: int | None = None


class EmployeeResponse(EmployeeBase):
    id: UUID
    division_id: UUID
    payroll_id: UUID
    model_config = ConfigDict(from_attributes=True)


# --- Health / errors ---

class HealthResponse(BaseModel):
    status: str
    application: str
    version: str


class ErrorResponse(BaseModel):
    error: str
