"""Reusable FastAPI dependencies."""
from fastapi import Request

from .database import DataStore


def get_store(request: Request) -> DataStore:
    """Return the data store the application was wired with."""

    return request.app.state.store
