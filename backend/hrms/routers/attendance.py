"""Attendance log endpoints and the missing-attendance report."""
from datetime import date
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy import select

from ..crud import CrudResource, build_crud_router
from ..database import DataStore
from ..dependencies import get_store
from ..models import AttendanceLog, Employee
from ..schemas import AttendanceLogCreate, AttendanceLogRead, AttendanceLogUpdate, EmployeeRead

resource = CrudResource(
    entity="Attendance log",
    table=AttendanceLog.__table__,
    create_schema=AttendanceLogCreate,
    update_schema=AttendanceLogUpdate,
    read_schema=AttendanceLogRead,
)

router = build_crud_router(resource, prefix="/attendance_logs", tags=["attendance"])

report_router = APIRouter(prefix="/attendance", tags=["attendance"])


@report_router.get("/missing/{day}", response_model=list[EmployeeRead])
async def list_missing_attendance(day: date, store: DataStore = Depends(get_store)) -> list[dict[str, Any]]:
    """Employees without any attendance log on ``day``.

    A log with only a check-in still counts as present.
    """

    employees = Employee.__table__
    logs = AttendanceLog.__table__
    # NOT IN over a NULL yields no rows at all, so unassigned logs are skipped.
    present = select(logs.c.employee_id).where(logs.c.date == day, logs.c.employee_id.is_not(None))
    result = await store.query(select(employees).where(employees.c.id.not_in(present)))
    return result.rows
