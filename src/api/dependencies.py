# This file provides dependency factories for FastAPI routes.
# Services receive the DatabaseClient explicitly, so tests can swap in an isolated
# store by overriding get_database_client alone.

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from src.api.api_config import ApiConfig, get_api_config
from src.api.db_access import DatabaseClient
from src.api.services.author_service import AuthorService
from src.api.services.news_service import NewsService


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


def get_config() -> ApiConfig:
    return get_api_config()


def get_author_service(
    db: Annotated[DatabaseClient, Depends(get_database_client)],
) -> AuthorService:
    return AuthorService(db=db)


def get_news_service(
    db: Annotated[DatabaseClient, Depends(get_database_client)],
) -> NewsService:
    return NewsService(db=db)
