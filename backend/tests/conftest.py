"""Test fixtures for the backend."""
import os
from pathlib import Path
from typing import Any

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES", "false")

from hrms.config import Settings  # noqa: E402
from hrms.database import DataStore  # noqa: E402
from hrms.main import create_app  # noqa: E402


@pytest_asyncio.fixture
async def store(tmp_path: Path) -> DataStore:
    """A data store bound to a fresh SQLite file with the schema created."""

    settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test_backend.db'}")
    store = DataStore.from_settings(settings)
    await store.create_all()
    yield store
    await store.drop_all()
    await store.dispose()


@pytest_asyncio.fixture
async def client(store: DataStore) -> AsyncClient:
    """Provide an HTTP client for integration tests."""

    app = create_app(Settings(create_tables=False), store=store)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def employee(client: AsyncClient) -> dict[str, Any]:
    """An employee row created through the API."""

    response = await client.post(
        "/employees", json={"name": "Ada Lovelace", "email": "ada@example.com", "phone": "+123456789"}
    )
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def project(client: AsyncClient) -> dict[str, Any]:
    response = await client.post("/projects", json={"name": "Payroll revamp", "client": "Acme"})
    assert response.status_code == 201
    return response.json()
