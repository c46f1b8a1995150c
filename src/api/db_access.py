# This file wraps database access so API services can run parameterized SQL safely.
# It exists to keep SQL execution details out of router code and make testing easier.
# Constraint violations are reported as a portable StoreErrorKind so callers never
# inspect driver-specific error codes.

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from src.common.db import create_db_engine, test_connection
from src.common.schema import AUTHOR_TABLE, NEWS_TABLE, metadata

_PG_UNIQUE_VIOLATION = "23505"
_PG_FOREIGN_KEY_VIOLATION = "23503"


class StoreErrorKind(enum.Enum):
    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    OTHER = "other"


class StoreError(Exception):
    """Constraint failure raised by the store, classified by kind."""

    def __init__(self, kind: StoreErrorKind, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}")


def classify_integrity_error(exc: IntegrityError) -> StoreErrorKind:
    """Map a driver integrity error onto a StoreErrorKind."""

    orig = exc.orig
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate == _PG_UNIQUE_VIOLATION:
        return StoreErrorKind.UNIQUE_VIOLATION
    if sqlstate == _PG_FOREIGN_KEY_VIOLATION:
        return StoreErrorKind.FOREIGN_KEY_VIOLATION

    message = str(orig).lower()
    if "unique constraint failed" in message:
        return StoreErrorKind.UNIQUE_VIOLATION
    if "foreign key constraint failed" in message:
        return StoreErrorKind.FOREIGN_KEY_VIOLATION
    return StoreErrorKind.OTHER


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for API read/write access."""

    def __init__(self, *, database_url: str | None = None, engine: Engine | None = None) -> None:
        if engine is None:
            if database_url is None:
                raise ValueError("DatabaseClient needs either database_url or engine.")
            engine = create_db_engine(database_url)
        self._engine: Engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def can_connect(self) -> bool:
        return test_connection(self._engine)

    def table_exists(self, table_name: str) -> bool:
        return inspect(self._engine).has_table(table_name)

    def schema_ready(self) -> bool:
        return all(self.table_exists(name) for name in (AUTHOR_TABLE, NEWS_TABLE))

    def create_schema(self) -> None:
        metadata.create_all(self._engine)

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._engine.connect() as connection:
            rows = connection.execute(text(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, query: str, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        with self._engine.connect() as connection:
            row = connection.execute(text(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def fetch_scalar(self, query: str, params: Mapping[str, Any] | None = None) -> Any:
        with self._engine.connect() as connection:
            return connection.execute(text(query), dict(params or {})).scalar_one()

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> int:
        """Run a write statement in its own transaction and return the affected row count."""

        try:
            with self._engine.begin() as connection:
                result = connection.execute(text(query), dict(params or {}))
                return result.rowcount
        except IntegrityError as exc:
            raise StoreError(classify_integrity_error(exc), str(exc.orig)) from exc

    def execute_returning(
        self, query: str, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Run a write statement with a RETURNING clause and commit it."""

        try:
            with self._engine.begin() as connection:
                row = connection.execute(text(query), dict(params or {})).mappings().first()
                return dict(row) if row is not None else None
        except IntegrityError as exc:
            raise StoreError(classify_integrity_error(exc), str(exc.orig)) from exc
