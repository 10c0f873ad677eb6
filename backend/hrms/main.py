"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import make_url

from .config import Settings, configure_logging, get_settings
from .database import DataStore
from .errors import register_error_handlers
from .routers import (
    attendance,
    departments,
    employees,
    feedbacks,
    leave_balances,
    leave_policies,
    leaves,
    projects,
    timesheets,
)

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: DataStore | None = None) -> FastAPI:
    """Build the application and wire the data store into it."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)
    store = store or DataStore.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Using database %s", make_url(settings.database_url).render_as_string(hide_password=True)
        )
        if settings.create_tables:
            await store.create_all()
        yield
        await store.dispose()

    app = FastAPI(
        title="HRMS API",
        version="1.0.0",
        description="API for HRMS system with employees, departments, leaves, attendance and timesheets.",
        docs_url="/api-docs",
        lifespan=lifespan,
    )
    app.state.store = store
    register_error_handlers(app)

    app.include_router(departments.router)
    app.include_router(employees.router)
    app.include_router(leave_policies.router)
    app.include_router(leaves.router)
    app.include_router(leaves.workflow_router)
    app.include_router(leave_balances.router)
    app.include_router(attendance.router)
    app.include_router(attendance.report_router)
    app.include_router(feedbacks.router)
    app.include_router(projects.router)
    app.include_router(timesheets.router)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def index() -> str:
        return "HRMS API is running. Visit /api-docs"

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        """Simple readiness probe for uptime checks."""

        return {"status": "ok"}

    return app


app = create_app()
