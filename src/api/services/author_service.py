# This file implements the authors resource on top of the injected DatabaseClient.
# Email uniqueness is enforced by the store; a duplicate surfaces as a ConflictError.

from __future__ import annotations

from typing import Any

from src.api.db_access import DatabaseClient, StoreError, StoreErrorKind
from src.api.error_handlers import ConflictError, NotFoundError, ReferentialError
from src.api.pagination import PagingSpec
from src.api.schemas.author_schemas import AuthorInput
from src.common.schema import AUTHOR_TABLE

DUPLICATE_EMAIL_MESSAGE = "email already exists"
AUTHOR_HAS_NEWS_MESSAGE = "author has news"


class AuthorService:
    """CRUD operations for authors."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db
        self.table = AUTHOR_TABLE

    def list_authors(self, *, paging: PagingSpec) -> dict[str, Any]:
        rows = self.db.fetch_all(
            f"""
            SELECT id, name, email
            FROM {self.table}
            ORDER BY id DESC
            LIMIT :limit OFFSET :offset
            """,
            paging.as_params(),
        )
        total = int(self.db.fetch_scalar(f"SELECT COUNT(*) FROM {self.table}"))
        return {"rows": rows, "total": total}

    def find_author(self, author_id: int) -> dict[str, Any] | None:
        return self.db.fetch_one(
            f"SELECT id, name, email FROM {self.table} WHERE id = :id",
            {"id": author_id},
        )

    def author_exists(self, author_id: int) -> bool:
        row = self.db.fetch_one(
            f"SELECT 1 AS ok FROM {self.table} WHERE id = :id LIMIT 1",
            {"id": author_id},
        )
        return row is not None

    def get_author(self, author_id: int) -> dict[str, Any]:
        author = self.find_author(author_id)
        if author is None:
            raise NotFoundError()
        return author

    def create_author(self, payload: AuthorInput) -> dict[str, Any]:
        try:
            row = self.db.execute_returning(
                f"""
                INSERT INTO {self.table} (name, email)
                VALUES (:name, :email)
                RETURNING id, name, email
                """,
                {"name": payload.name, "email": payload.email},
            )
        except StoreError as exc:
            if exc.kind is StoreErrorKind.UNIQUE_VIOLATION:
                raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from exc
            raise
        if row is None:
            raise RuntimeError("Failed to create author.")
        return row

    def update_author(self, author_id: int, payload: AuthorInput) -> dict[str, Any]:
        if not self.author_exists(author_id):
            raise NotFoundError()

        try:
            row = self.db.execute_returning(
                f"""
                UPDATE {self.table}
                SET name = :name, email = :email
                WHERE id = :id
                RETURNING id, name, email
                """,
                {"id": author_id, "name": payload.name, "email": payload.email},
            )
        except StoreError as exc:
            if exc.kind is StoreErrorKind.UNIQUE_VIOLATION:
                raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from exc
            raise
        if row is None:
            # Deleted between the existence check and the update.
            raise NotFoundError()
        return row

    def delete_author(self, author_id: int) -> None:
        if not self.author_exists(author_id):
            raise NotFoundError()

        try:
            self.db.execute(f"DELETE FROM {self.table} WHERE id = :id", {"id": author_id})
        except StoreError as exc:
            if exc.kind is StoreErrorKind.FOREIGN_KEY_VIOLATION:
                raise ReferentialError(AUTHOR_HAS_NEWS_MESSAGE) from exc
            raise
