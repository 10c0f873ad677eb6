"""Application-level behaviour: banner, docs and error mapping."""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_banner_and_health(client: AsyncClient) -> None:
    banner = await client.get("/")
    assert banner.status_code == 200
    assert banner.text == "HRMS API is running. Visit /api-docs"

    health = await client.get("/health")
    assert health.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_docs_are_served(client: AsyncClient) -> None:
    assert (await client.get("/api-docs")).status_code == 200
    schema = (await client.get("/openapi.json")).json()
    assert "/departments/{item_id}" in schema["paths"]
    assert "/timesheets/week/{employee_id}" in schema["paths"]


@pytest.mark.asyncio
async def test_missing_required_column_is_a_store_failure(client: AsyncClient) -> None:
    """Handlers do not validate required fields; the NOT NULL constraint does."""

    response = await client.post("/departments", json={})
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert (await client.get("/departments")).json() == []


@pytest.mark.asyncio
async def test_unknown_foreign_key_is_a_store_failure(client: AsyncClient) -> None:
    response = await client.post("/leave_balances", json={"employee_id": 9999, "leave_type": "Annual", "balance": 1})
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


@pytest.mark.asyncio
async def test_non_numeric_id_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/projects/abc")
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_out_of_range_id_is_a_store_failure(client: AsyncClient) -> None:
    """An id that parses as int but overflows the column still gets the JSON error body."""

    response = await client.get("/departments/99999999999999999999")
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"error": "Internal server error"}


@pytest.mark.asyncio
async def test_out_of_range_body_value_is_a_store_failure(client: AsyncClient) -> None:
    response = await client.post("/leave_policies", json={"policy_name": "Annual", "max_leaves": 2**70})
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert (await client.get("/leave_policies")).json() == []
