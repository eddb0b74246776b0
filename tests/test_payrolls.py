"""Payroll endpoint tests: payrolls are only visible under their own organization."""
import uuid

import pytest
from httpx import AsyncClient

API = "/api/v1/organizations"


async def _create_org(client: AsyncClient, name: str) -> str:
    resp = await client.post(API, json={"name": name})
    return resp.json()["id"]


@pytest.mark.asyncio
async def test_create_payroll(async_client: AsyncClient, organization: dict):
    resp = await async_client.post(
        f"{API}/{organization['id']}/payrolls",
        json={"name": " Weekly ", "description": " Hourly staff "},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["name"] == "Weekly"
    assert body["description"] == "Hourly staff"
    assert body["organization_id"] == organization["id"]


@pytest.mark.asyncio
async def test_create_payroll_unknown_organization(async_client: AsyncClient):
    resp = await async_client.post(
        f"{API}/{uuid.uuid4()}/payrolls", json={"name": "Weekly", "description": "x"}
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_create_payroll_blank_description(async_client: AsyncClient, organization: dict):
    resp = await async_client.post(
        f"{API}/{organization['id']}/payrolls", json={"name": "Weekly", "description": " "}
    )
    assert resp.status_code == 422
    assert resp.json() == {"error": "payroll description cannot be empty"}


@pytest.mark.asyncio
async def test_list_payrolls_scoped_and_sorted(async_client: AsyncClient, organization: dict):
    other = await _create_org(async_client, "Other")
    for name in ("Weekly", "Biweekly"):
        await async_client.post(
            f"{API}/{organization['id']}/payrolls", json={"name": name, "description": "d"}
        )
    await async_client.post(f"{API}/{other}/payrolls", json={"name": "Foreign", "description": "d"})

    resp = await async_client.get(f"{API}/{organization['id']}/payrolls")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["Biweekly", "Weekly"]


@pytest.mark.asyncio
async def test_list_payrolls_unknown_organization(async_client: AsyncClient):
    resp = await async_client.get(f"{API}/{uuid.uuid4()}/payrolls")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_get_payroll_through_other_organization(async_client: AsyncClient, payroll: dict):
    other = await _create_org(async_client, "Other")
    resp = await async_client.get(f"{API}/{other}/payrolls/{payroll['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_payroll_partial(async_client: AsyncClient, organization: dict, payroll: dict):
    resp = await async_client.put(
        f"{API}/{organization['id']}/payrolls/{payroll['id']}", json={"description": "Updated"}
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["description"] == "Updated"
    assert body["name"] == payroll["name"]


@pytest.mark.asyncio
async def test_update_payroll_moves_organization(
    async_client: AsyncClient, organization: dict, payroll: dict
):
    other = await _create_org(async_client, "Other")
    resp = await async_client.put(
        f"{API}/{organization['id']}/payrolls/{payroll['id']}", json={"organization_id": other}
    )
    assert resp.status_code == 200
    assert resp.json()["organization_id"] == other

    assert (await async_client.get(f"{API}/{organization['id']}/payrolls/{payroll['id']}")).status_code == 404
    assert (await async_client.get(f"{API}/{other}/payrolls/{payroll['id']}")).status_code == 200


@pytest.mark.asyncio
async def test_update_payroll_to_unknown_organization(
    async_client: AsyncClient, organization: dict, payroll: dict
):
    resp = await async_client.put(
        f"{API}/{organization['id']}/payrolls/{payroll['id']}",
        json={"organization_id": str(uuid.uuid4())},
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_payroll_no_fields(async_client: AsyncClient, organization: dict, payroll: dict):
    resp = await async_client.put(f"{API}/{organization['id']}/payrolls/{payroll['id']}", json={})
    assert resp.status_code == 422
    assert resp.json() == {"error": "no fields supplied for update"}


@pytest.mark.asyncio
async def test_delete_payroll(async_client: AsyncClient, organization: dict, payroll: dict):
    url = f"{API}/{organization['id']}/payrolls/{payroll['id']}"
    assert (await async_client.delete(url)).status_code == 204
    assert (await async_client.get(url)).status_code == 404
    assert (await async_client.delete(url)).status_code == 404


@pytest.mark.asyncio
async def test_delete_payroll_through_other_organization(async_client: AsyncClient, payroll: dict):
    other = await _create_org(async_client, "Other")
    resp = await async_client.delete(f"{API}/{other}/payrolls/{payroll['id']}")
    assert resp.status_code == 404
