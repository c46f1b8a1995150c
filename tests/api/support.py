# This file provides shared helpers for API endpoint tests.
# Each test gets its own in-memory SQLite store injected through dependency overrides,
# so no test touches a real database or sees another test's rows.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from src.api.api_config import ApiConfig
from src.api.app import app
from src.api.db_access import DatabaseClient
from src.api.dependencies import get_config, get_database_client


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test News API",
        "host": "0.0.0.0",
        "port": 8000,
        "environment": "test",
        "database_url": "sqlite://",
        "default_page_size": 10,
        "max_page_size": 100,
        "max_news_offset": 100_000,
        "auto_create_schema": True,
        "allowed_origins": [],
        "app_version": "0.1.0",
    }
    values.update(overrides)
    return ApiConfig(**values)


def build_test_db() -> DatabaseClient:
    """Fresh in-memory store with both tables created."""

    db = DatabaseClient(database_url="sqlite://")
    db.create_schema()
    return db


def count_rows(db: DatabaseClient, table_name: str) -> int:
    return int(db.fetch_scalar(f"SELECT COUNT(*) FROM {table_name}"))


def insert_author(db: DatabaseClient, *, name: str, email: str) -> int:
    row = db.execute_returning(
        "INSERT INTO author (name, email) VALUES (:name, :email) RETURNING id",
        {"name": name, "email": email},
    )
    assert row is not None
    return int(row["id"])


def insert_news(
    db: DatabaseClient,
    *,
    slug: str,
    author_id: int,
    title: str = "Title",
    published: bool = False,
) -> int:
    row = db.execute_returning(
        """
        INSERT INTO news (slug, title, excerpt, content, published, author_id)
        VALUES (:slug, :title, 'Excerpt', 'Content', :published, :author_id)
        RETURNING id
        """,
        {"slug": slug, "title": title, "published": published, "author_id": author_id},
    )
    assert row is not None
    return int(row["id"])


class FailingDBClient:
    """DB stand-in whose queries always fail, for 500 masking tests."""

    def __init__(self, error: Exception) -> None:
        self._error = error

    def can_connect(self) -> bool:
        return True

    def create_schema(self) -> None:
        return None

    def schema_ready(self) -> bool:
        return True

    def _fail(self, *_: Any, **__: Any) -> Any:
        raise self._error

    fetch_all = _fail
    fetch_one = _fail
    fetch_scalar = _fail
    execute = _fail
    execute_returning = _fail


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()
    resolved_db = db_client if db_client is not None else build_test_db()

    app.dependency_overrides[get_config] = lambda: resolved_config
    app.dependency_overrides[get_database_client] = lambda: resolved_db

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
