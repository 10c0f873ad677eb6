"""Async data store adapter shared by every request handler."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.sql import Executable

from .config import Settings
from .models import Base

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    """Rows returned by one statement plus the number of rows it touched."""

    rows: list[dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0

    def first(self) -> dict[str, Any] | None:
        return self.rows[0] if self.rows else None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class DataStore:
    """Executes single statements against a pooled async engine.

    Every call to :meth:`query` checks out its own connection and runs in its
    own transaction, committed when the statement succeeds. Store errors are
    propagated unchanged; mapping them to HTTP responses is the job of the
    application's exception handlers.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "DataStore":
        is_sqlite = settings.database_url.startswith("sqlite+")
        connect_args = {"check_same_thread": False} if is_sqlite else {}
        engine = create_async_engine(
            settings.database_url,
            future=True,
            echo=settings.sql_echo,
            connect_args=connect_args,
        )
        if is_sqlite:
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return cls(engine)

    async def query(self, statement: Executable) -> QueryResult:
        """Run one statement and return its rows and affected-row count."""

        logger.debug("Executing %s", statement)
        async with self.engine.begin() as conn:
            result = await conn.execute(statement)
            if result.returns_rows:
                rows = [dict(row) for row in result.mappings().all()]
                return QueryResult(rows=rows, rowcount=len(rows))
            return QueryResult(rowcount=result.rowcount)

    async def create_all(self) -> None:
        """Create any missing tables declared on the ORM metadata."""

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
