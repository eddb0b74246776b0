"""Bank endpoint tests."""
import uuid

import pytest
from httpx import AsyncClient

API = "/api/v1/organizations"


@pytest.mark.asyncio
async def test_create_bank(async_client: AsyncClient, organization: dict):
    resp = await async_client.post(f"{API}/{organization['id']}/banks", json={"name": " Banco "})
    assert resp.status_code == 201
    body = resp.json()
    assert body["name"] == "Banco"
    assert body["organization_id"] == organization["id"]


@pytest.mark.asyncio
async def test_create_bank_unknown_organization(async_client: AsyncClient):
    resp = await async_client.post(f"{API}/{uuid.uuid4()}/banks", json={"name": "Banco"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_create_bank_blank_name(async_client: AsyncClient, organization: dict):
    resp = await async_client.post(f"{API}/{organization['id']}/banks", json={"name": ""})
    assert resp.status_code == 422
    assert resp.json() == {"error": "bank name cannot be empty"}


@pytest.mark.asyncio
async def test_list_banks_sorted(async_client: AsyncClient, organization: dict):
    url = f"{API}/{organization['id']}/banks"
    for name in ("Zeta Bank", "Alpha Bank"):
        await async_client.post(url, json={"name": name})
    resp = await async_client.get(url)
    assert [b["name"] for b in resp.json()] == ["Alpha Bank", "Zeta Bank"]


@pytest.mark.asyncio
async def test_get_bank_through_other_organization(async_client: AsyncClient, bank: dict):
    other = (await async_client.post(API, json={"name": "Other"})).json()
    resp = await async_client.get(f"{API}/{other['id']}/banks/{bank['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_bank(async_client: AsyncClient, organization: dict, bank: dict):
    url = f"{API}/{organization['id']}/banks/{bank['id']}"
    resp = await async_client.put(url, json={"name": "Renamed"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Renamed"


@pytest.mark.asyncio
async def test_update_bank_no_fields(async_client: AsyncClient, organization: dict, bank: dict):
    resp = await async_client.put(f"{API}/{organization['id']}/banks/{bank['id']}", json={})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_delete_bank(async_client: AsyncClient, organization: dict, bank: dict):
    url = f"{API}/{organization['id']}/banks/{bank['id']}"
    assert (await async_client.delete(url)).status_code == 204
    assert (await async_client.get(url)).status_code == 404
    assert (await async_client.delete(url)).status_code == 404
