"""Employee endpoints and the per-employee lookups."""
from datetime import date
from typing import Any

from fastapi import Depends, status
from sqlalchemy import or_, select

from ..crud import CrudResource, build_crud_router
from ..database import DataStore
from ..dependencies import get_store
from ..models import AttendanceLog, Employee, Feedback, Leave, LeaveBalance, Timesheet
from ..schemas import (
    AttendanceLogRead,
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
    FeedbackRead,
    LeaveBalanceRead,
    LeaveRead,
    TimesheetRead,
)

# Employees keep their historical contract: delete answers 204 whether or not
# the row existed and update answers 200 with null for a missing id.
# TODO: confirm with HR whether these should report 404 like other resources.
resource = CrudResource(
    entity="Employee",
    table=Employee.__table__,
    create_schema=EmployeeCreate,
    update_schema=EmployeeUpdate,
    read_schema=EmployeeRead,
    delete_status=status.HTTP_204_NO_CONTENT,
    check_existence_on_update=False,
    check_existence_on_delete=False,
)

router = build_crud_router(resource, prefix="/employees", tags=["employees"])


@router.get("/{employee_id}/leave-balances", response_model=list[LeaveBalanceRead])
async def list_employee_leave_balances(
    employee_id: int, store: DataStore = Depends(get_store)
) -> list[dict[str, Any]]:
    balances = LeaveBalance.__table__
    result = await store.query(select(balances).where(balances.c.employee_id == employee_id))
    return result.rows


@router.get("/{employee_id}/attendance", response_model=list[AttendanceLogRead])
async def list_employee_attendance(
    employee_id: int,
    start: date,
    end: date,
    store: DataStore = Depends(get_store),
) -> list[dict[str, Any]]:
    """Attendance logs of an employee between ``start`` and ``end`` inclusive."""

    logs = AttendanceLog.__table__
    result = await store.query(
        select(logs).where(logs.c.employee_id == employee_id, logs.c.date.between(start, end))
    )
    return result.rows


@router.get("/{employee_id}/leaves", response_model=list[LeaveRead])
async def list_employee_leaves(
    employee_id: int, store: DataStore = Depends(get_store)
) -> list[dict[str, Any]]:
    leaves = Leave.__table__
    result = await store.query(select(leaves).where(leaves.c.employee_id == employee_id))
    return result.rows


@router.get("/{employee_id}/feedbacks", response_model=list[FeedbackRead])
async def list_employee_feedbacks(
    employee_id: int, store: DataStore = Depends(get_store)
) -> list[dict[str, Any]]:
    """Feedback the employee gave or received."""

    feedbacks = Feedback.__table__
    result = await store.query(
        select(feedbacks).where(
            or_(feedbacks.c.from_employee == employee_id, feedbacks.c.to_employee == employee_id)
        )
    )
    return result.rows


@router.get("/{employee_id}/timesheets", response_model=list[TimesheetRead])
async def list_employee_timesheets(
    employee_id: int, store: DataStore = Depends(get_store)
) -> list[dict[str, Any]]:
    timesheets = Timesheet.__table__
    result = await store.query(select(timesheets).where(timesheets.c.employee_id == employee_id))
    return result.rows
