# app/config.py
import os
from dataclasses import dataclass

# The store lives in a single SQLite file next to the process by default.
DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./database.db"


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    database_url: str
    api_base_url: str
    sql_echo: bool
    log_level: str


def get_settings() -> Settings:
    """Read settings from the environment.

    Called at startup rather than import time so tests can point
    DATABASE_URL somewhere else before the app starts.
    """
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3001")),
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        api_base_url=os.getenv("API_BASE_URL", "/products"),
        sql_echo=os.getenv("SQL_ECHO", "0") == "1",
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
