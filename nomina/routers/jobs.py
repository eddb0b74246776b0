from uuid import UUID

from fastapi import APIRouter, Depends

from nomina.config import settings
from nomina.dependencies import get_job_service
from nomina.errors import NotFoundError
from nomina.schemas import JobCreate, JobResponse, JobUpdate
from nomina.services.job_service import CreateJobParams, JobService, UpdateJobParams

router = APIRouter(
    prefix=(
        f"{settings.API_PREFIX}/organizations/{{organization_id}}"
        "/payrolls/{payroll_id}/jobs"
    ),
    tags=["jobs"],
)


def _not_found(job_id: UUID) -> NotFoundError:
    return NotFoundError(f"job `{job_id}` not found")


@router.get("", response_model=list[JobResponse])
async def list_jobs(
    organization_id: UUID,
    payroll_id: UUID,
    service: JobService = Depends(get_job_service),
):
    return await service.list(organization_id, payroll_id)


@router.post("", status_code=201, response_model=JobResponse)
async def create_job(
    organization_id: UUID,
    payroll_id: UUID,
    data: JobCreate,
    service: JobService = Depends(get_job_service),
):
    params = CreateJobParams(job_title=data.job_title, salary=data.salary)
    return await service.create(organization_id, payroll_id, params)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    organization_id: UUID,
    payroll_id: UUID,
    job_id: UUID,
    service: JobService = Depends(get_job_service),
):
    job = await service.get(organization_id, payroll_id, job_id)
    if job is None:
        raise _not_found(job_id)
    return job


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    organization_id: UUID,
    payroll_id: UUID,
    job_id: UUID,
    data: JobUpdate,
    service: JobService = Depends(get_job_service),
):
    params = UpdateJobParams(job_title=data.job_title, salary=data.salary)
    job = await service.update(organization_id, payroll_id, job_id, params)
    if job is None:
        raise _not_found(job_id)
    return job


@router.delete("/{job_id}", status_code=204)
async def delete_job(
    organization_id: UUID,
    payroll_id: UUID,
    job_id: UUID,
    service: JobService = Depends(get_job_service),
):
    if not await service.delete(organization_id, payroll_id, job_id):
        raise _not_found(job_id)
