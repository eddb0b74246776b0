from uuid import UUID

from fastapi import APIRouter, Depends

from nomina.config import settings
from nomina.dependencies import get_organization_service
from nomina.errors import NotFoundError
from nomina.schemas import OrganizationCreate, OrganizationResponse, OrganizationUpdate
from nomina.services.organization_service import (
    CreateOrganizationParams,
    OrganizationService,
    UpdateOrganizationParams,
)

router = APIRouter(prefix=f"{settings.API_PREFIX}/organizations", tags=["organizations"])


def _not_found(organization_id: UUID) -> NotFoundError:
    return NotFoundError(f"organization `{organization_id}` not found")


@router.get("", response_model=list[OrganizationResponse])
async def list_organizations(service: OrganizationService = Depends(get_organization_service)):
    return await service.list()


@router.post("", status_code=201, response_model=OrganizationResponse)
async def create_organization(
    data: OrganizationCreate,
    service: OrganizationService = Depends(get_organization_service),
):
    return await service.create(CreateOrganizationParams(name=data.name))


@router.get("/{organization_id}", response_model=OrganizationResponse)
async def get_organization(
    organization_id: UUID,
    service: OrganizationService = Depends(get_organization_service),
):
    organization = await service.get(organization_id)
    if organization is None:
        raise _not_found(organization_id)
    return organization


@router.put("/{organization_id}", response_model=OrganizationResponse)
async def update_organization(
    organization_id: UUID,
    data: OrganizationUpdate,
    service: OrganizationService = Depends(get_organization_service),
):
    organization = await service.update(organization_id, UpdateOrganizationParams(name=data.name))
    if organization is None:
        raise _not_found(organization_id)
    return organization


@router.delete("/{organization_id}", status_code=204)
async def delete_organization(
    organization_id: UUID,
    service: OrganizationService = Depends(get_organization_service),
):
    if not await service.delete(organization_id):
        raise _not_found(organization_id)
