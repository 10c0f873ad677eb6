"""Project endpoints."""
from typing import Any

from fastapi import Depends
from sqlalchemy import select

from ..crud import CrudResource, build_crud_router
from ..database import DataStore
from ..dependencies import get_store
from ..models import Project, ProjectAssignment
from ..schemas import ProjectRead, ProjectWrite

resource = CrudResource(
    entity="Project",
    table=Project.__table__,
    create_schema=ProjectWrite,
    update_schema=ProjectWrite,
    read_schema=ProjectRead,
)

router = build_crud_router(resource, prefix="/projects", tags=["projects"])


@router.get("/assigned/{employee_id}", response_model=list[ProjectRead])
async def list_assigned_projects(
    employee_id: int, store: DataStore = Depends(get_store)
) -> list[dict[str, Any]]:
    """Projects an employee is assigned to through ``project_assignments``."""

    projects = Project.__table__
    assignments = ProjectAssignment.__table__
    statement = (
        select(projects)
        .join(assignments, assignments.c.project_id == projects.c.id)
        .where(assignments.c.employee_id == employee_id)
    )
    result = await store.query(statement)
    return result.rows
