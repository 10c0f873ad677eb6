"""Department endpoints."""
from typing import Any

from fastapi import Depends
from sqlalchemy import select

from ..crud import CrudResource, build_crud_router
from ..database import DataStore
from ..dependencies import get_store
from ..models import Department, Employee
from ..schemas import DepartmentRead, DepartmentWrite, EmployeeRead

resource = CrudResource(
    entity="Department",
    table=Department.__table__,
    create_schema=DepartmentWrite,
    update_schema=DepartmentWrite,
    read_schema=DepartmentRead,
)

router = build_crud_router(resource, prefix="/departments", tags=["departments"])


@router.get("/{department_id}/employees", response_model=list[EmployeeRead])
async def list_department_employees(
    department_id: int, store: DataStore = Depends(get_store)
) -> list[dict[str, Any]]:
    """Return the employees that belong to a department."""

    employees = Employee.__table__
    result = await store.query(select(employees).where(employees.c.department_id == department_id))
    return result.rows
