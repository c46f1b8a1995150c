"""
Database engine construction.
Engines are built explicitly and handed to whoever needs them; nothing here
connects at import time.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def _is_in_memory_sqlite(database_url: str) -> bool:
    return database_url in {"sqlite://", "sqlite:///:memory:"} or "mode=memory" in database_url


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str) -> Engine:
    """Create an engine; SQLite gets FK enforcement and in-memory DBs share one connection."""

    if not database_url:
        raise RuntimeError("DATABASE_URL is required to create a database engine.")

    if not _is_sqlite(database_url):
        return create_engine(database_url, pool_pre_ping=True, future=True)

    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}, "future": True}
    if _is_in_memory_sqlite(database_url):
        kwargs["poolclass"] = StaticPool
    engine = create_engine(database_url, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def test_connection(engine: Engine) -> bool:
    """Return True if the database can be reached and queried."""

    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False
