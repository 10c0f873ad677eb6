"""Application settings and configuration helpers."""
from functools import lru_cache
import logging
import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    database_url: str = Field(
        default="sqlite+aiosqlite:///./hrms.db", alias="DATABASE_URL"
    )
    sql_echo: bool = Field(default=False, alias="SQL_ECHO")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    create_tables: bool = Field(default=True, alias="CREATE_TABLES")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings(
        database_url=os.getenv("DATABASE_URL", Settings.model_fields["database_url"].default),
        sql_echo=_env_flag("SQL_ECHO", False),
        log_level=os.getenv("LOG_LEVEL", Settings.model_fields["log_level"].default),
        create_tables=_env_flag("CREATE_TABLES", True),
    )


def configure_logging(level: str) -> None:
    """Install a stream handler on the root logger once."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level.upper())
