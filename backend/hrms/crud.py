"""Router factory implementing the CRUD contract shared by every resource."""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy import Table, delete, insert, select, update

from .database import DataStore
from .dependencies import get_store
from .errors import NotFoundError
from .schemas import ErrorRead, MessageRead

logger = logging.getLogger(__name__)

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {404: {"model": ErrorRead}}


@dataclass(frozen=True)
class CrudResource:
    """How one table is exposed through the five CRUD endpoints.

    ``entity`` is the human label used in ``"<entity> not found"`` and
    ``"<entity> deleted successfully"``. The three trailing flags carry the
    per-resource deviations: the status code of a successful delete and
    whether update/delete answer 404 when no row was affected.
    """

    entity: str
    table: Table
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    read_schema: type[BaseModel]
    delete_status: int = status.HTTP_200_OK
    check_existence_on_update: bool = True
    check_existence_on_delete: bool = True

    @property
    def slug(self) -> str:
        return self.table.name

    def not_found(self) -> NotFoundError:
        return NotFoundError(self.entity)

    def deleted_message(self) -> dict[str, str]:
        return {"message": f"{self.entity} deleted successfully"}


def create_values(payload: BaseModel) -> dict[str, Any]:
    """Columns to insert; omitted and null fields fall back to store defaults."""

    return payload.model_dump(exclude_none=True)


def update_values(payload: BaseModel) -> dict[str, Any]:
    """Columns to overwrite; every declared field is written, nulls included."""

    return payload.model_dump()


def build_crud_router(resource: CrudResource, prefix: str, tags: list[str]) -> APIRouter:
    """Return a router with list/get/create/update/delete for ``resource``."""

    router = APIRouter(prefix=prefix, tags=tags)
    table = resource.table
    read_schema = resource.read_schema
    create_schema = resource.create_schema
    update_schema = resource.update_schema
    update_model = read_schema if resource.check_existence_on_update else Optional[read_schema]
    delete_model = None if resource.delete_status == status.HTTP_204_NO_CONTENT else MessageRead

    @router.get(
        "",
        response_model=list[read_schema],
        name=f"list_{resource.slug}",
        summary=f"List every {resource.entity.lower()}",
    )
    async def list_rows(store: DataStore = Depends(get_store)) -> list[dict[str, Any]]:
        result = await store.query(select(table))
        return result.rows

    @router.get(
        "/{item_id}",
        response_model=read_schema,
        responses=NOT_FOUND_RESPONSE,
        name=f"get_{resource.slug}",
        summary=f"Get a {resource.entity.lower()} by id",
    )
    async def get_row(item_id: int, store: DataStore = Depends(get_store)) -> dict[str, Any]:
        result = await store.query(select(table).where(table.c.id == item_id))
        row = result.first()
        if row is None:
            raise resource.not_found()
        return row

    @router.post(
        "",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{resource.slug}",
        summary=f"Create a {resource.entity.lower()}",
    )
    async def create_row(payload: create_schema, store: DataStore = Depends(get_store)) -> dict[str, Any]:
        statement = insert(table)
        values = create_values(payload)
        if values:
            statement = statement.values(**values)
        result = await store.query(statement.returning(*table.c))
        row = result.first()
        logger.info("Created %s %s", resource.entity.lower(), row["id"] if row else None)
        return row

    @router.put(
        "/{item_id}",
        response_model=update_model,
        responses=NOT_FOUND_RESPONSE if resource.check_existence_on_update else None,
        name=f"update_{resource.slug}",
        summary=f"Update a {resource.entity.lower()}",
    )
    async def update_row(
        item_id: int,
        payload: update_schema,
        store: DataStore = Depends(get_store),
    ) -> dict[str, Any] | None:
        statement = (
            update(table)
            .where(table.c.id == item_id)
            .values(**update_values(payload))
            .returning(*table.c)
        )
        result = await store.query(statement)
        if result.rowcount == 0 and resource.check_existence_on_update:
            raise resource.not_found()
        return result.first()

    @router.delete(
        "/{item_id}",
        response_model=delete_model,
        status_code=resource.delete_status,
        responses=NOT_FOUND_RESPONSE if resource.check_existence_on_delete else None,
        name=f"delete_{resource.slug}",
        summary=f"Delete a {resource.entity.lower()}",
    )
    async def delete_row(item_id: int, store: DataStore = Depends(get_store)) -> Any:
        result = await store.query(delete(table).where(table.c.id == item_id).returning(table.c.id))
        if result.rowcount == 0 and resource.check_existence_on_delete:
            raise resource.not_found()
        logger.info("Deleted %s %s", resource.entity.lower(), item_id)
        if delete_model is None:
            return Response(status_code=resource.delete_status)
        return resource.deleted_message()

    return router
