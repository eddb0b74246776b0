from uuid import UUID

from fastapi import APIRouter, Depends

from nomina.config import settings
from nomina.dependencies import get_payroll_service
from nomina.errors import NotFoundError
from nomina.schemas import PayrollCreate, PayrollResponse, PayrollUpdate
from nomina.services.payroll_service import (
    CreatePayrollParams,
    PayrollService,
    UpdatePayrollParams,
)

router = APIRouter(
    prefix=f"{settings.API_PREFIX}/organizations/{{organization_id}}/payrolls",
    tags=["payrolls"],
)


def _not_found(payroll_id: UUID) -> NotFoundError:
    return NotFoundError(f"payroll `{payroll_id}` not found")


@router.get("", response_model=list[PayrollResponse])
async def list_payrolls(
    organization_id: UUID,
    service: PayrollService = Depends(get_payroll_service),
):
    return await service.list(organization_id)


@router.post("", status_code=201, response_model=PayrollResponse)
async def create_payroll(
    organization_id: UUID,
    data: PayrollCreate,
    service: PayrollService = Depends(get_payroll_service),
):
    params = CreatePayrollParams(name=data.name, description=data.description)
    return await service.create(organization_id, params)


@router.get("/{payroll_id}", response_model=PayrollResponse)
async def get_payroll(
    organization_id: UUID,
    payroll_id: UUID,
    service: PayrollService = Depends(get_payroll_service),
):
    payroll = await service.get(organization_id, payroll_id)
    if payroll is None:
        raise _not_found(payroll_id)
    return payroll


@router.put("/{payroll_id}", response_model=PayrollResponse)
async def update_payroll(
    organization_id: UUID,
    payroll_id: UUID,
    data: PayrollUpdate,
    service: PayrollService = Depends(get_payroll_service),
):
    params = UpdatePayrollParams(**data.model_dump(exclude_unset=True))
    payroll = await service.update(organization_id, payroll_id, params)
    if payroll is None:
        raise _not_found(payroll_id)
    return payroll


@router.delete("/{payroll_id}", status_code=204)
async def delete_payroll(
    organization_id: UUID,
    payroll_id: UUID,
    service: PayrollService = Depends(get_payroll_service),
):
    if not await service.delete(organization_id, payroll_id):
        raise _not_found(payroll_id)
