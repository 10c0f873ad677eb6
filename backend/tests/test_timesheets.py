"""Daily and weekly timesheet views."""
import pytest
from httpx import AsyncClient


async def _log(client: AsyncClient, employee_id: int, project_id: int, day: str, hours: float) -> dict:
    response = await client.post(
        "/timesheets",
        json={"employee_id": employee_id, "project_id": project_id, "log_date": day, "hours": hours},
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_week_covers_start_plus_six_days(client: AsyncClient, employee: dict, project: dict) -> None:
    other = (await client.post("/employees", json={"name": "Grace", "email": "grace@x.com"})).json()
    for day in ("2023-12-31", "2024-01-01", "2024-01-04", "2024-01-07", "2024-01-08"):
        await _log(client, employee["id"], project["id"], day, 8)
    await _log(client, other["id"], project["id"], "2024-01-03", 6)

    response = await client.get(f"/timesheets/week/{employee['id']}", params={"start": "2024-01-01"})
    assert response.status_code == 200
    assert sorted(row["log_date"] for row in response.json()) == ["2024-01-01", "2024-01-04", "2024-01-07"]


@pytest.mark.asyncio
async def test_day_view(client: AsyncClient, employee: dict, project: dict) -> None:
    await _log(client, employee["id"], project["id"], "2024-01-02", 3)
    await _log(client, employee["id"], project["id"], "2024-01-02", 4.5)
    await _log(client, employee["id"], project["id"], "2024-01-03", 8)

    response = await client.get(f"/timesheets/day/{employee['id']}", params={"date": "2024-01-02"})
    assert response.status_code == 200
    assert sorted(row["hours"] for row in response.json()) == [3, 4.5]


@pytest.mark.asyncio
async def test_week_requires_start(client: AsyncClient, employee: dict) -> None:
    response = await client.get(f"/timesheets/week/{employee['id']}")
    assert response.status_code == 422
