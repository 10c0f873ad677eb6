"""Leave request endpoints and the approval workflow."""
from typing import Any

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import delete, select, update

from ..crud import CrudResource, build_crud_router
from ..database import DataStore
from ..dependencies import get_store
from ..models import Leave
from ..schemas import LeaveCreate, LeaveRead, LeaveUpdate

APPROVED = "Approved"
REJECTED = "Rejected"

resource = CrudResource(
    entity="Leave",
    table=Leave.__table__,
    create_schema=LeaveCreate,
    update_schema=LeaveUpdate,
    read_schema=LeaveRead,
)

router = build_crud_router(resource, prefix="/leaves", tags=["leaves"])

# Workflow actions do not look at the current status and do not check that
# the leave exists: they always answer 200 with an empty body.
workflow_router = APIRouter(prefix="/leave", tags=["leave workflow"])

leaves = Leave.__table__


@workflow_router.get("/requests/{employee_id}", response_model=list[LeaveRead])
async def list_leave_requests(
    employee_id: int, store: DataStore = Depends(get_store)
) -> list[dict[str, Any]]:
    """Every leave request filed by an employee."""

    result = await store.query(select(leaves).where(leaves.c.employee_id == employee_id))
    return result.rows


@workflow_router.delete("/cancel/{leave_id}", response_class=Response)
async def cancel_leave(leave_id: int, store: DataStore = Depends(get_store)) -> Response:
    """Withdraw a leave request by deleting it."""

    await store.query(delete(leaves).where(leaves.c.id == leave_id))
    return Response(status_code=status.HTTP_200_OK)


async def _set_status(store: DataStore, leave_id: int, new_status: str) -> None:
    await store.query(update(leaves).where(leaves.c.id == leave_id).values(status=new_status))


@workflow_router.put("/approve/{leave_id}", response_class=Response)
async def approve_leave(leave_id: int, store: DataStore = Depends(get_store)) -> Response:
    await _set_status(store, leave_id, APPROVED)
    return Response(status_code=status.HTTP_200_OK)


@workflow_router.put("/reject/{leave_id}", response_class=Response)
async def reject_leave(leave_id: int, store: DataStore = Depends(get_store)) -> Response:
    await _set_status(store, leave_id, REJECTED)
    return Response(status_code=status.HTTP_200_OK)
