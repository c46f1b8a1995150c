# This file defines the /news endpoints, addressed externally by slug.
# Handlers validate input, delegate to NewsService, and shape the response.

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request, Response

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_news_service
from src.api.pagination import build_paging_metadata
from src.api.schemas.news_schemas import NewsListResponse, NewsResponse
from src.api.services.news_service import NewsService
from src.api.validation import parse_news_create, parse_news_update, parse_paging, require_valid

router = APIRouter(prefix="/news", tags=["news"])
NewsServiceDep = Annotated[NewsService, Depends(get_news_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
JsonBody = Annotated[Any, Body()]


@router.get("", response_model=NewsListResponse)
def list_news(
    request: Request,
    service: NewsServiceDep,
    config: ConfigDep,
) -> dict[str, object]:
    paging = require_valid(
        parse_paging(
            request.query_params,
            default_limit=config.default_page_size,
            max_limit=config.max_page_size,
            max_offset=config.max_news_offset,
        )
    )
    result = service.list_news(paging=paging)
    return {
        "data": result["rows"],
        "paging": build_paging_metadata(paging=paging, total=result["total"]),
    }


@router.get("/{slug}", response_model=NewsResponse)
def get_news(slug: str, service: NewsServiceDep) -> dict[str, object]:
    return service.get_news(slug)


@router.post("", response_model=NewsResponse, status_code=201)
def create_news(payload: JsonBody, service: NewsServiceDep) -> dict[str, object]:
    return service.create_news(require_valid(parse_news_create(payload)))


@router.put("/{slug}", response_model=NewsResponse)
def update_news(slug: str, payload: JsonBody, service: NewsServiceDep) -> dict[str, object]:
    return service.update_news(slug, require_valid(parse_news_update(payload)))


@router.delete("/{slug}", status_code=204, response_class=Response)
def delete_news(slug: str, service: NewsServiceDep) -> Response:
    service.delete_news(slug)
    return Response(status_code=204)
