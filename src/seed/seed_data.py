# This module populates the store with four authors and eleven news items.
# Rows are upserted on their natural keys (author email, news slug), so reruns
# reset mutable fields to the seed values instead of creating duplicates.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from src.api.db_access import DatabaseClient
from src.common.schema import AUTHOR_TABLE, NEWS_TABLE

LOGGER = logging.getLogger("seed")

NEWS_ITEM_COUNT = 11


@dataclass(frozen=True)
class SeedAuthor:
    email: str
    name: str


@dataclass(frozen=True)
class SeedNews:
    slug: str
    title: str
    excerpt: str
    content: str
    published: bool
    author_index: int

    def to_params(self, author_id: int) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "excerpt": self.excerpt,
            "content": self.content,
            "published": self.published,
            "author_id": author_id,
        }


SEED_AUTHORS: tuple[SeedAuthor, ...] = (
    SeedAuthor(email="author1@example.org", name="author one"),
    SeedAuthor(email="author2@example.org", name="author two"),
    SeedAuthor(email="author3@example.org", name="author three"),
    SeedAuthor(email="author4@example.org", name="author four"),
)


def build_seed_news(count: int = NEWS_ITEM_COUNT) -> list[SeedNews]:
    """Even-numbered items are published; authors are assigned round-robin."""

    items: list[SeedNews] = []
    for index in range(count):
        number = index + 1
        items.append(
            SeedNews(
                slug=f"news-{number}",
                title=f"News title {number}",
                excerpt=f"This is the excerpt for news {number}.",
                content=f"This is the full content for news {number}. Lorem ipsum dolor sit amet...",
                published=number % 2 == 0,
                author_index=index % len(SEED_AUTHORS),
            )
        )
    return items


def upsert_author(db: DatabaseClient, author: SeedAuthor) -> int:
    row = db.execute_returning(
        f"""
        INSERT INTO {AUTHOR_TABLE} (email, name)
        VALUES (:email, :name)
        ON CONFLICT (email) DO UPDATE
        SET name = excluded.name
        RETURNING id
        """,
        {"email": author.email, "name": author.name},
    )
    if row is None:
        raise RuntimeError(f"Failed to upsert author {author.email!r}.")
    return int(row["id"])


def upsert_news(db: DatabaseClient, item: SeedNews, author_id: int) -> None:
    db.execute(
        f"""
        INSERT INTO {NEWS_TABLE} (slug, title, excerpt, content, published, author_id)
        VALUES (:slug, :title, :excerpt, :content, :published, :author_id)
        ON CONFLICT (slug) DO UPDATE
        SET title = excluded.title,
            excerpt = excluded.excerpt,
            content = excluded.content,
            published = excluded.published,
            author_id = excluded.author_id
        """,
        item.to_params(author_id),
    )


def run_seed(db: DatabaseClient, *, create_schema: bool = True) -> dict[str, int]:
    """Seed the store and return how many authors and news items were written."""

    if create_schema:
        db.create_schema()

    author_ids = [upsert_author(db, author) for author in SEED_AUTHORS]
    LOGGER.info("seeded authors count=%s", len(author_ids))

    news_items = build_seed_news()
    for item in news_items:
        upsert_news(db, item, author_ids[item.author_index])
    LOGGER.info("seeded news count=%s", len(news_items))

    return {"authors": len(author_ids), "news": len(news_items)}
