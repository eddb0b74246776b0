"""Job endpoint tests."""
import uuid

import pytest
from httpx import AsyncClient

API = "/api/v1/organizations"


def _url(organization: dict, payroll: dict) -> str:
    return f"{API}/{organization['id']}/payrolls/{payroll['id']}/jobs"


@pytest.mark.asyncio
async def test_create_job(async_client: AsyncClient, organization: dict, payroll: dict):
    resp = await async_client.post(
        _url(organization, payroll), json={"job_title": " Clerk ", "salary": 1800.5}
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["job_title"] == "Clerk"
    assert body["salary"] == 1800.5
    assert body["payroll_id"] == payroll["id"]


@pytest.mark.asyncio
@pytest.mark.parametrize("salary", [0, -10.0])
async def test_create_job_non_positive_salary(
    async_client: AsyncClient, organization: dict, payroll: dict, salary: float
):
    resp = await async_client.post(
        _url(organization, payroll), json={"job_title": "Clerk", "salary": salary}
    )
    assert resp.status_code == 422
    assert resp.json() == {"error": "salary must be greater than zero"}


@pytest.mark.asyncio
async def test_create_job_unknown_payroll(async_client: AsyncClient, organization: dict):
    resp = await async_client.post(
        f"{API}/{organization['id']}/payrolls/{uuid.uuid4()}/jobs",
        json={"job_title": "Clerk", "salary": 100},
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_list_jobs_sorted_by_title(async_client: AsyncClient, organization: dict, payroll: dict):
    url = _url(organization, payroll)
    for title in ("Manager", "Analyst", "Driver"):
        await async_client.post(url, json={"job_title": title, "salary": 1000})
    resp = await async_client.get(url)
    assert resp.status_code == 200
    assert [j["job_title"] for j in resp.json()] == ["Analyst", "Driver", "Manager"]


@pytest.mark.asyncio
async def test_get_job_through_other_payroll(async_client: AsyncClient, organization: dict, job: dict):
    resp = await async_client.post(
        f"{API}/{organization['id']}/payrolls", json={"name": "Weekly", "description": "d"}
    )
    other_payroll = resp.json()
    resp = await async_client.get(f"{_url(organization, other_payroll)}/{job['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_job_salary(async_client: AsyncClient, organization: dict, payroll: dict, job: dict):
    resp = await async_client.put(f"{_url(organization, payroll)}/{job['id']}", json={"salary": 3000})
    assert resp.status_code == 200
    body = resp.json()
    assert body["salary"] == 3000
    assert body["job_title"] == job["job_title"]


@pytest.mark.asyncio
async def test_update_job_invalid_salary(async_client: AsyncClient, organization: dict, payroll: dict, job: dict):
    resp = await async_client.put(f"{_url(organization, payroll)}/{job['id']}", json={"salary": 0})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_update_job_no_fields(async_client: AsyncClient, organization: dict, payroll: dict, job: dict):
    resp = await async_client.put(f"{_url(organization, payroll)}/{job['id']}", json={})
    assert resp.status_code == 422
    assert resp.json() == {"error": "no fields supplied for update"}


@pytest.mark.asyncio
async def test_delete_job(async_client: AsyncClient, organization: dict, payroll: dict, job: dict):
    url = f"{_url(organization, payroll)}/{job['id']}"
    assert (await async_client.delete(url)).status_code == 204
    assert (await async_client.get(url)).status_code == 404
    assert (await async_client.delete(url)).status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("salary", ["NaN", "Infinity", "-Infinity"])
async def test_create_job_non_finite_salary(
    async_client: AsyncClient, organization: dict, payroll: dict, salary: str
):
    resp = await async_client.post(
        _url(organization, payroll),
        content=f'{{"job_title": "Clerk", "salary": {salary}}}',
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "invalid request data"

    resp = await async_client.get(_url(organization, payroll))
    assert resp.json() == []


@pytest.mark.asyncio
async def test_update_job_nan_salary(async_client: AsyncClient, organization: dict, payroll: dict, job: dict):
    resp = await async_client.put(
        f"{_url(organization, payroll)}/{job['id']}",
        content='{"salary": NaN}',
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 422

    resp = await async_client.get(f"{_url(organization, payroll)}/{job['id']}")
    assert resp.json()["salary"] == job["salary"]
