from uuid import UUID

from fastapi import APIRouter, Depends

from nomina.config import settings
from nomina.dependencies import get_bank_service
from nomina.errors import NotFoundError
from nomina.schemas import BankCreate, BankResponse, BankUpdate
from nomina.services.bank_service import BankService, CreateBankParams, UpdateBankParams

router = APIRouter(
    prefix=f"{settings.API_PREFIX}/organizations/{{organization_id}}/banks",
    tags=["banks"],
)


def _not_found(bank_id: UUID) -> NotFoundError:
    return NotFoundError(f"bank `{bank_id}` not found")


@router.get("", response_model=list[BankResponse])
async def list_banks(organization_id: UUID, service: BankService = Depends(get_bank_service)):
    return await service.list(organization_id)


@router.post("", status_code=201, response_model=BankResponse)
async def create_bank(
    organization_id: UUID,
    data: BankCreate,
    service: BankService = Depends(get_bank_service),
):
    return await service.create(organization_id, CreateBankParams(name=data.name))


@router.get("/{bank_id}", response_model=BankResponse)
async def get_bank(
    organization_id: UUID,
    bank_id: UUID,
    service: BankService = Depends(get_bank_service),
):
    bank = await service.get(organization_id, bank_id)
    if bank is None:
        raise _not_found(bank_id)
    return bank


@router.put("/{bank_id}", response_model=BankResponse)
async def update_bank(
    organization_id: UUID,
    bank_id: UUID,
    data: BankUpdate,
    service: BankService = Depends(get_bank_service),
):
    bank = await service.update(organization_id, bank_id, UpdateBankParams(name=data.name))
    if bank is None:
        raise _not_found(bank_id)
    return bank


@router.delete("/{bank_id}", status_code=204)
async def delete_bank(
    organization_id: UUID,
    bank_id: UUID,
    service: BankService = Depends(get_bank_service),
):
    if not await service.delete(organization_id, bank_id):
        raise _not_found(bank_id)
