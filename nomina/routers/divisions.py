from uuid import UUID

from fastapi import APIRouter, Depends

from nomina.config import settings
from nomina.dependencies import get_division_service
from nomina.errors import NotFoundError
from nomina.fields import patch_from_model
from nomina.schemas import DivisionCreate, DivisionResponse, DivisionUpdate
from nomina.services.division_service import (
    CreateDivisionParams,
    DivisionService,
    UpdateDivisionParams,
)

router = APIRouter(
    prefix=(
        f"{settings.API_PREFIX}/organizations/{{organization_id}}"
        "/payrolls/{payroll_id}/divisions"
    ),
    tags=["divisions"],
)


def _not_found(division_id: UUID) -> NotFoundError:
    return NotFoundError(f"division `{division_id}` not found")


@router.get("", response_model=list[DivisionResponse])
async def list_divisions(
    organization_id: UUID,
    payroll_id: UUID,
    service: DivisionService = Depends(get_division_service),
):
    return await service.list(organization_id, payroll_id)


@router.post("", status_code=201, response_model=DivisionResponse)
async def create_division(
    organization_id: UUID,
    payroll_id: UUID,
    data: DivisionCreate,
    service: DivisionService = Depends(get_division_service),
):
    return await service.create(organization_id, payroll_id, CreateDivisionParams(**data.model_dump()))


@router.get("/{division_id}", response_model=DivisionResponse)
async def get_division(
    organization_id: UUID,
    payroll_id: UUID,
    division_id: UUID,
    service: DivisionService = Depends(get_division_service),
):
    division = await service.get(organization_id, payroll_id, division_id)
    if division is None:
        raise _not_found(division_id)
    return division


@router.get("/{division_id}/children", response_model=list[DivisionResponse])
async def list_child_divisions(
    organization_id: UUID,
    payroll_id: UUID,
    division_id: UUID,
    service: DivisionService = Depends(get_division_service),
):
    return await service.children(organization_id, payroll_id, division_id)


@router.put("/{division_id}", response_model=DivisionResponse)
async def update_division(
    organization_id: UUID,
    payroll_id: UUID,
    division_id: UUID,
    data: DivisionUpdate,
    service: DivisionService = Depends(get_division_service),
):
    params = UpdateDivisionParams(
        name=data.name,
        description=data.description,
        budget_code=data.budget_code,
        parent_division_id=patch_from_model(data, "parent_division_id"),
    )
    division = await service.update(organization_id, payroll_id, division_id, params)
    if division is None:
        raise _not_found(division_id)
    return division


@router.delete("/{division_id}", status_code=204)
async def delete_division(
    organization_id: UUID,
    payroll_id: UUID,
    division_id: UUID,
    service: DivisionService = Depends(get_division_service),
):
    if not await service.delete(organization_id, payroll_id, division_id):
        raise _not_found(division_id)
