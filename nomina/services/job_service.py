"""Job service: job titles and salaries defined per payroll."""
from __future__ import annotations

import logging
import math
import uuid
from dataclasses import dataclass
from uuid import UUID

from nomina.domain import Job
from nomina.repositories.protocols import JobRepository
from nomina.services.common import invalid, normalize_text, supplied_fields
from nomina.services.payroll_service import PayrollService

logger = logging.getLogger(__name__)


@dataclass
class CreateJobParams:
    job_title: str
    salary: float


@dataclass
class UpdateJobParams:
    job_title: str | None = None
    salary: float | None = None


def validate_salary(value: float) -> float:
    if not (math.isfinite(value) and value > 0):
        raise invalid("salary must be greater than zero")
    return value


class JobService:
    def __init__(self, repository: JobRepository, payroll_service: PayrollService) -> None:
        self.repository = repository
        self.payroll_service = payroll_service

    async def create(
        self, organization_id: UUID, payroll_id: UUID, params: CreateJobParams
    ) -> Job:
        await self.payroll_service.ensure_belongs_to_organization(organization_id, payroll_id)
        job_title = normalize_text(params.job_title, "job title")
        salary = validate_salary(params.salary)

        job = await self.repository.insert(
            Job(id=uuid.uuid4(), job_title=job_title, salary=salary, payroll_id=payroll_id)
        )
        logger.info(
            "job created: %s",
            job.id,
            extra={"entity": "job", "payroll_id": payroll_id},
        )
        return job

    async def get(self, organization_id: UUID, payroll_id: UUID, job_id: UUID) -> Job | None:
        await self.payroll_service.ensure_belongs_to_organization(organization_id, payroll_id)
        job = await self.repository.fetch(job_id)
        if job is None or job.payroll_id != payroll_id:
            return None
        return job

    async def list(self, organization_id: UUID, payroll_id: UUID) -> list[Job]:
        await self.payroll_service.ensure_belongs_to_organization(organization_id, payroll_id)
        jobs = await self.repository.fetch_by_payroll(payroll_id)
        return sorted(jobs, key=lambda j: j.job_title)

    async def update(
        self,
        organization_id: UUID,
        payroll_id: UUID,
        job_id: UUID,
        params: UpdateJobParams,
    ) -> Job | None:
        supplied_fields(params)
        if await self.get(organization_id, payroll_id, job_id) is None:
            return None

        changes = {}
        if params.job_title is not None:
            changes["job_title"] = normalize_text(params.job_title, "job title")
        if params.salary is not None:
            changes["salary"] = validate_salary(params.salary)

        job = await self.repository.update(job_id, changes)
        logger.info("job updated: %s (%s)", job_id, ", ".join(sorted(changes)))
        return job

    async def delete(self, organization_id: UUID, payroll_id: UUID, job_id: UUID) -> bool:
        if await self.get(organization_id, payroll_id, job_id) is None:
            return False

        deleted = await self.repository.delete(job_id)
        if deleted:
            logger.info("job deleted: %s", job_id)
        return deleted
