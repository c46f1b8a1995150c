"""
Table metadata for the CMS store.
`author.email` and `news.slug` carry unique constraints; `news.author_id`
references `author.id` and blocks deleting an author that still has news.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, ForeignKey, Integer, MetaData, String, Table, Text, false

metadata = MetaData()

AUTHOR_TABLE = "author"
NEWS_TABLE = "news"

author_table = Table(
    AUTHOR_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("email", String(200), nullable=False, unique=True),
)

news_table = Table(
    NEWS_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("slug", String(200), nullable=False, unique=True),
    Column("title", String(200), nullable=False),
    Column("excerpt", String(500), nullable=False),
    Column("content", Text, nullable=False),
    Column("published", Boolean, nullable=False, server_default=false()),
    Column(
        "author_id",
        Integer,
        ForeignKey(f"{AUTHOR_TABLE}.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    ),
)
