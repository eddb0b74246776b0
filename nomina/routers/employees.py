from uuid import UUID

from fastapi import APIRouter, Depends

from nomina.config import settings
from nomina.dependencies import get_employee_service
from nomina.errors import NotFoundError
from nomina.fields import patch_from_model
from nomina.schemas import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from nomina.services.employee_service import (
    CreateEmployeeParams,
    EmployeeService,
    UpdateEmployeeParams,
)

router = APIRouter(
    prefix=(
        f"{settings.API_PREFIX}/organizations/{{organization_id}}"
        "/payrolls/{payroll_id}/divisions/{division_id}/employees"
    ),
    tags=["employees"],
)


def _not_found(employee_id: UUID) -> NotFoundError:
    return NotFoundError(f"employee `{employee_id}` not found")


def _update_params(data: EmployeeUpdate) -> UpdateEmployeeParams:
    """Only termination_date is nullable; an explicit null elsewhere counts as omitted."""
    fields = data.model_dump(exclude_unset=True, exclude={"termination_date"})
    return UpdateEmployeeParams(
        **fields,
        termination_date=patch_from_model(data, "termination_date"),
    )


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    organization_id: UUID,
    payroll_id: UUID,
    division_id: UUID,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.list(organization_id, payroll_id, division_id)


@router.post("", status_code=201, response_model=EmployeeResponse)
async def create_employee(
    organization_id: UUID,
    payroll_id: UUID,
    division_id: UUID,
    data: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    params = CreateEmployeeParams(**data.model_dump())
    return await service.create(organization_id, payroll_id, division_id, params)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    organization_id: UUID,
    payroll_id: UUID,
    division_id: UUID,
    employee_id: UUID,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.get(organization_id, payroll_id, division_id, employee_id)
    if employee is None:
        raise _not_found(employee_id)
    return employee


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    organization_id: UUID,
    payroll_id: UUID,
    division_id: UUID,
    employee_id: UUID,
    data: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = await service.update(
        organization_id, payroll_id, division_id, employee_id, _update_params(data)
    )
    if employee is None:
        raise _not_found(employee_id)
    return employee


@router.delete("/{employee_id}", status_code=204)
async def delete_employee(
    organization_id: UUID,
    payroll_id: UUID,
    division_id: UUID,
    employee_id: UUID,
    service: EmployeeService = Depends(get_employee_service),
):
    if not await service.delete(organization_id, payroll_id, division_id, employee_id):
        raise _not_found(employee_id)
