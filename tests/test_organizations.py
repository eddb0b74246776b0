"""Organization endpoint tests: the root of the hierarchy."""
import uuid

import pytest
from httpx import AsyncClient

API = "/api/v1/organizations"


@pytest.mark.asyncio
async def test_create_organization(async_client: AsyncClient):
    resp = await async_client.post(API, json={"name": "  Acme Corp  "})
    assert resp.status_code == 201
    body = resp.json()
    assert body["name"] == "Acme Corp"
    uuid.UUID(body["id"])


@pytest.mark.asyncio
async def test_create_organization_blank_name(async_client: AsyncClient):
    resp = await async_client.post(API, json={"name": "   "})
    assert resp.status_code == 422
    assert resp.json() == {"error": "organization name cannot be empty"}


@pytest.mark.asyncio
async def test_create_organization_missing_name(async_client: AsyncClient):
    resp = await async_client.post(API, json={})
    assert resp.status_code == 422
    assert resp.json()["error"] == "invalid request data"


@pytest.mark.asyncio
async def test_list_organizations_empty(async_client: AsyncClient):
    resp = await async_client.get(API)
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_list_organizations_sorted_by_name(async_client: AsyncClient):
    for name in ("Zed", "Acme", "Midway"):
        await async_client.post(API, json={"name": name})
    resp = await async_client.get(API)
    assert [o["name"] for o in resp.json()] == ["Acme", "Midway", "Zed"]


@pytest.mark.asyncio
async def test_get_organization(async_client: AsyncClient, organization: dict):
    resp = await async_client.get(f"{API}/{organization['id']}")
    assert resp.status_code == 200
    assert resp.json() == organization


@pytest.mark.asyncio
async def test_get_unknown_organization(async_client: AsyncClient):
    resp = await async_client.get(f"{API}/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert "not found" in resp.json()["error"]


@pytest.mark.asyncio
async def test_get_organization_malformed_id(async_client: AsyncClient):
    resp = await async_client.get(f"{API}/not-a-uuid")
    assert resp.status_code == 422
    body = resp.json()
    assert body["error"] == "invalid request data"
    assert body["details"][0]["field"] == "path.organization_id"


@pytest.mark.asyncio
async def test_update_organization(async_client: AsyncClient, organization: dict):
    resp = await async_client.put(f"{API}/{organization['id']}", json={"name": " Acme Global "})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Acme Global"

    resp = await async_client.get(f"{API}/{organization['id']}")
    assert resp.json()["name"] == "Acme Global"


@pytest.mark.asyncio
async def test_update_organization_no_fields(async_client: AsyncClient, organization: dict):
    resp = await async_client.put(f"{API}/{organization['id']}", json={})
    assert resp.status_code == 422
    assert resp.json() == {"error": "no fields supplied for update"}


@pytest.mark.asyncio
async def test_update_unknown_organization(async_client: AsyncClient):
    resp = await async_client.put(f"{API}/{uuid.uuid4()}", json={"name": "Ghost"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_organization(async_client: AsyncClient, organization: dict):
    resp = await async_client.delete(f"{API}/{organization['id']}")
    assert resp.status_code == 204

    resp = await async_client.get(f"{API}/{organization['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_unknown_organization(async_client: AsyncClient):
    resp = await async_client.delete(f"{API}/{uuid.uuid4()}")
    assert resp.status_code == 404
