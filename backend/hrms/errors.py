"""Exception types and the handlers that turn them into JSON responses."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """Raised when a lookup, update or delete targets a missing row."""

    def __init__(self, entity: str) -> None:
        self.entity = entity
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.entity} not found"


def fail(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return fail(exc.message, status.HTTP_404_NOT_FOUND)

    # Constraint violations, bad casts and connection failures all land here.
    @app.exception_handler(SQLAlchemyError)
    async def _store_failure(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return fail("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    # The driver raises this unwrapped when an integer does not fit a column.
    @app.exception_handler(OverflowError)
    async def _bind_overflow(request: Request, exc: OverflowError) -> JSONResponse:
        logger.exception("Parameter out of range on %s %s", request.method, request.url.path, exc_info=exc)
        return fail("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)
