"""Timesheet endpoints with daily and weekly views."""
from datetime import date, timedelta
from typing import Any

from fastapi import Depends, Query
from sqlalchemy import select

from ..crud import CrudResource, build_crud_router
from ..database import DataStore
from ..dependencies import get_store
from ..models import Timesheet
from ..schemas import TimesheetRead, TimesheetWrite

WEEK_SPAN = timedelta(days=6)

resource = CrudResource(
    entity="Timesheet",
    table=Timesheet.__table__,
    create_schema=TimesheetWrite,
    update_schema=TimesheetWrite,
    read_schema=TimesheetRead,
)

router = build_crud_router(resource, prefix="/timesheets", tags=["timesheets"])

timesheets = Timesheet.__table__


@router.get("/week/{employee_id}", response_model=list[TimesheetRead])
async def list_week_timesheets(
    employee_id: int, start: date, store: DataStore = Depends(get_store)
) -> list[dict[str, Any]]:
    """Entries logged from ``start`` through the sixth day after it."""

    statement = select(timesheets).where(
        timesheets.c.employee_id == employee_id,
        timesheets.c.log_date.between(start, start + WEEK_SPAN),
    )
    result = await store.query(statement)
    return result.rows


@router.get("/day/{employee_id}", response_model=list[TimesheetRead])
async def list_day_timesheets(
    employee_id: int,
    day: date = Query(alias="date"),
    store: DataStore = Depends(get_store),
) -> list[dict[str, Any]]:
    statement = select(timesheets).where(
        timesheets.c.employee_id == employee_id,
        timesheets.c.log_date == day,
    )
    result = await store.query(statement)
    return result.rows
