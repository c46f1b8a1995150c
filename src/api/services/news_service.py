# This file implements the news resource on top of the injected DatabaseClient.
# Free-text fields are sanitized and slugs normalized before any write.
# The author pre-check gives a friendly error; the store's foreign key and unique
# constraints remain the final authority when concurrent writes race the check.

from __future__ import annotations

from typing import Any

from src.api.db_access import DatabaseClient, StoreError, StoreErrorKind
from src.api.error_handlers import (
    APIError,
    ConflictError,
    NotFoundError,
    ReferentialError,
    ValidationError,
)
from src.api.pagination import PagingSpec
from src.api.schemas.news_schemas import NewsCreateInput, NewsUpdateInput
from src.api.services.author_service import AuthorService
from src.api.text_utils import sanitize_text, slugify
from src.common.schema import AUTHOR_TABLE, NEWS_TABLE

DUPLICATE_SLUG_MESSAGE = "slug already exists"
AUTHOR_NOT_FOUND_MESSAGE = "author not found"

SANITIZED_FIELDS = ("title", "excerpt", "content")

# Column widths that sanitized text must still fit.
SANITIZED_MAX_LENGTHS: dict[str, int] = {"title": 200, "excerpt": 500}

# Input attribute -> news column.
UPDATABLE_COLUMNS: dict[str, str] = {
    "title": "title",
    "excerpt": "excerpt",
    "content": "content",
    "published": "published",
    "author_id": "author_id",
    "slug": "slug",
}


def _nest_author(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": row["id"],
        "slug": row["slug"],
        "title": row["title"],
        "excerpt": row["excerpt"],
        "content": row["content"],
        "published": bool(row["published"]),
        "author_id": row["author_id"],
        "author": {
            "id": row["author_ref_id"],
            "name": row["author_name"],
            "email": row["author_email"],
        },
    }


def _sanitize_field(name: str, value: str) -> str:
    cleaned = sanitize_text(value)
    if not cleaned:
        raise ValidationError(
            "invalid request",
            details=[{"field": name, "message": f"{name} is empty after removing markup"}],
        )
    max_length = SANITIZED_MAX_LENGTHS.get(name)
    if max_length is not None and len(cleaned) > max_length:
        raise ValidationError(
            "invalid request",
            details=[{"field": name, "message": f"{name} must be at most {max_length} characters"}],
        )
    return cleaned


def _normalize_slug(value: str) -> str:
    slug = slugify(value)
    if not slug:
        raise ValidationError(
            "invalid request",
            details=[{"field": "slug", "message": "slug must contain at least one letter or digit"}],
        )
    return slug


class NewsService:
    """CRUD operations for news items, always returned joined with their author."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db
        self.table = NEWS_TABLE
        self.authors = AuthorService(db=db)

    @property
    def _joined_select(self) -> str:
        return f"""
        SELECT
            n.id,
            n.slug,
            n.title,
            n.excerpt,
            n.content,
            n.published,
            n.author_id,
            a.id AS author_ref_id,
            a.name AS author_name,
            a.email AS author_email
        FROM {self.table} n
        JOIN {AUTHOR_TABLE} a ON a.id = n.author_id
        """

    def list_news(self, *, paging: PagingSpec) -> dict[str, Any]:
        rows = self.db.fetch_all(
            f"""
            {self._joined_select}
            ORDER BY n.id DESC
            LIMIT :limit OFFSET :offset
            """,
            paging.as_params(),
        )
        total = int(self.db.fetch_scalar(f"SELECT COUNT(*) FROM {self.table}"))
        return {"rows": [_nest_author(row) for row in rows], "total": total}

    def find_news(self, slug: str) -> dict[str, Any] | None:
        row = self.db.fetch_one(f"{self._joined_select} WHERE n.slug = :slug", {"slug": slug})
        return _nest_author(row) if row is not None else None

    def get_news(self, slug: str) -> dict[str, Any]:
        news = self.find_news(slug)
        if news is None:
            raise NotFoundError()
        return news

    def news_exists(self, slug: str) -> bool:
        row = self.db.fetch_one(
            f"SELECT 1 AS ok FROM {self.table} WHERE slug = :slug LIMIT 1",
            {"slug": slug},
        )
        return row is not None

    def create_news(self, payload: NewsCreateInput) -> dict[str, Any]:
        values = {name: _sanitize_field(name, getattr(payload, name)) for name in SANITIZED_FIELDS}
        values["slug"] = _normalize_slug(payload.slug if payload.slug else values["title"])
        values["published"] = payload.published
        values["author_id"] = payload.author_id

        if not self.authors.author_exists(payload.author_id):
            raise ReferentialError(AUTHOR_NOT_FOUND_MESSAGE)

        try:
            created = self.db.execute_returning(
                f"""
                INSERT INTO {self.table} (slug, title, excerpt, content, published, author_id)
                VALUES (:slug, :title, :excerpt, :content, :published, :author_id)
                RETURNING slug
                """,
                values,
            )
        except StoreError as exc:
            translated = self._translate_write_error(exc)
            if translated is None:
                raise
            raise translated from exc
        if created is None:
            raise RuntimeError("Failed to create news item.")
        return self.get_news(str(created["slug"]))

    def update_news(self, slug: str, payload: NewsUpdateInput) -> dict[str, Any]:
        changes = payload.supplied_fields()
        for name in SANITIZED_FIELDS:
            if name in changes:
                changes[name] = _sanitize_field(name, str(changes[name]))
        if "slug" in changes:
            changes["slug"] = _normalize_slug(str(changes["slug"]))

        if not self.news_exists(slug):
            raise NotFoundError()

        if "author_id" in changes and not self.authors.author_exists(int(changes["author_id"])):
            raise ReferentialError(AUTHOR_NOT_FOUND_MESSAGE)

        if not changes:
            return self.get_news(slug)

        set_sql = ", ".join(f"{UPDATABLE_COLUMNS[name]} = :{name}" for name in sorted(changes))
        params = dict(changes)
        params["current_slug"] = slug
        try:
            updated = self.db.execute_returning(
                f"""
                UPDATE {self.table}
                SET {set_sql}
                WHERE slug = :current_slug
                RETURNING slug
                """,
                params,
            )
        except StoreError as exc:
            translated = self._translate_write_error(exc)
            if translated is None:
                raise
            raise translated from exc
        if updated is None:
            # Deleted between the existence check and the update.
            raise NotFoundError()
        return self.get_news(str(updated["slug"]))

    def delete_news(self, slug: str) -> None:
        if not self.news_exists(slug):
            raise NotFoundError()
        self.db.execute(f"DELETE FROM {self.table} WHERE slug = :slug", {"slug": slug})

    @staticmethod
    def _translate_write_error(exc: StoreError) -> APIError | None:
        if exc.kind is StoreErrorKind.UNIQUE_VIOLATION:
            return ConflictError(DUPLICATE_SLUG_MESSAGE)
        if exc.kind is StoreErrorKind.FOREIGN_KEY_VIOLATION:
            return ReferentialError(AUTHOR_NOT_FOUND_MESSAGE)
        return None
