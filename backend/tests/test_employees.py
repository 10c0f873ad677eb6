"""Integration tests for the employee API."""
import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from hrms.database import DataStore
from hrms.models import Employee


@pytest.mark.asyncio
async def test_department_and_employee_flow(client: AsyncClient) -> None:
    """A department and an unlinked employee can be created and listed."""

    department = await client.post("/departments", json={"name": "Engineering"})
    assert department.status_code == 201
    assert department.json() == {"id": 1, "name": "Engineering"}

    created = await client.post("/employees", json={"name": "Ada", "email": "ada@x.com"})
    assert created.status_code == 201
    employee = created.json()
    assert employee["department_id"] is None
    assert employee["status"] == "Active"
    assert employee["pf_applicable"] is True
    assert employee["esi_applicable"] is True
    assert employee["created_at"] is not None

    members = await client.get("/departments/1/employees")
    assert members.status_code == 200
    assert members.json() == []

    # department_id is not part of the editable fields
    update = await client.put(
        f"/employees/{employee['id']}",
        json={"name": "Ada Lovelace", "phone": "+44 20 7946 0000", "department_id": 1},
    )
    assert update.status_code == 200
    assert update.json()["name"] == "Ada Lovelace"
    assert update.json()["phone"] == "+44 20 7946 0000"
    assert update.json()["department_id"] is None
    assert (await client.get("/departments/1/employees")).json() == []

    employees = (await client.get("/employees")).json()
    assert len(employees) == 1
    assert employees[0]["email"] == "ada@x.com"


@pytest.mark.asyncio
async def test_department_lists_linked_employees(client: AsyncClient) -> None:
    engineering = (await client.post("/departments", json={"name": "Engineering"})).json()
    sales = (await client.post("/departments", json={"name": "Sales"})).json()
    await client.post(
        "/employees", json={"name": "Grace", "email": "grace@x.com", "department_id": engineering["id"]}
    )
    await client.post("/employees", json={"name": "Linus", "email": "linus@x.com", "department_id": sales["id"]})

    response = await client.get(f"/departments/{engineering['id']}/employees")
    assert response.status_code == 200
    assert [row["name"] for row in response.json()] == ["Grace"]


@pytest.mark.asyncio
async def test_update_unknown_employee_returns_null(client: AsyncClient) -> None:
    response = await client.put("/employees/9999", json={"name": "Nobody", "phone": None})
    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_delete_employee_answers_no_content(client: AsyncClient, employee: dict) -> None:
    response = await client.delete(f"/employees/{employee['id']}")
    assert response.status_code == 204
    assert response.content == b""

    missing = await client.get(f"/employees/{employee['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Employee not found"}

    again = await client.delete(f"/employees/{employee['id']}")
    assert again.status_code == 204


@pytest.mark.asyncio
async def test_duplicate_email_is_a_store_failure(client: AsyncClient, employee: dict, store: DataStore) -> None:
    response = await client.post("/employees", json={"name": "Ada Again", "email": employee["email"]})
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}

    count = await store.query(select(func.count().label("n")).select_from(Employee.__table__))
    assert count.first() == {"n": 1}


@pytest.mark.asyncio
async def test_employee_lookups(client: AsyncClient, employee: dict, project: dict) -> None:
    """Per-employee lookups return only that employee's rows."""

    other = (await client.post("/employees", json={"name": "Grace", "email": "grace@x.com"})).json()
    emp_id, other_id = employee["id"], other["id"]

    await client.post("/leave_balances", json={"employee_id": emp_id, "leave_type": "Annual", "balance": 12})
    await client.post("/leave_balances", json={"employee_id": other_id, "leave_type": "Annual", "balance": 3})
    await client.post("/leaves", json={"employee_id": emp_id, "type": "Sick", "start_date": "2024-02-01"})
    await client.post("/timesheets", json={"employee_id": emp_id, "project_id": project["id"], "hours": 4})
    await client.post("/timesheets", json={"employee_id": other_id, "project_id": project["id"], "hours": 2})
    await client.post("/feedbacks", json={"from_employee": emp_id, "to_employee": other_id, "message": "Thanks"})
    await client.post("/feedbacks", json={"from_employee": other_id, "to_employee": emp_id, "message": "Welcome"})
    await client.post("/feedbacks", json={"from_employee": other_id, "to_employee": other_id, "message": "Note"})

    balances = (await client.get(f"/employees/{emp_id}/leave-balances")).json()
    assert [row["balance"] for row in balances] == [12]

    leaves = (await client.get(f"/employees/{emp_id}/leaves")).json()
    assert [row["type"] for row in leaves] == ["Sick"]

    timesheets = (await client.get(f"/employees/{emp_id}/timesheets")).json()
    assert [row["hours"] for row in timesheets] == [4]

    feedbacks = (await client.get(f"/employees/{emp_id}/feedbacks")).json()
    assert sorted(row["message"] for row in feedbacks) == ["Thanks", "Welcome"]

    assert (await client.get("/employees/9999/leaves")).json() == []


@pytest.mark.asyncio
async def test_employee_attendance_range_is_inclusive(client: AsyncClient, employee: dict) -> None:
    for day in ("2024-01-31", "2024-02-01", "2024-02-10", "2024-02-11"):
        await client.post(
            "/attendance_logs", json={"employee_id": employee["id"], "date": day, "check_in": "09:00:00"}
        )

    response = await client.get(
        f"/employees/{employee['id']}/attendance", params={"start": "2024-02-01", "end": "2024-02-10"}
    )
    assert response.status_code == 200
    assert sorted(row["date"] for row in response.json()) == ["2024-02-01", "2024-02-10"]


@pytest.mark.asyncio
async def test_employee_attendance_requires_range(client: AsyncClient, employee: dict) -> None:
    response = await client.get(f"/employees/{employee['id']}/attendance", params={"start": "2024-02-01"})
    assert response.status_code == 422
