# This file defines the /authors endpoints.
# Handlers validate input, delegate to AuthorService, and shape the response.

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request, Response

from src.api.api_config import ApiConfig
from src.api.dependencies import get_author_service, get_config
from src.api.pagination import build_paging_metadata
from src.api.schemas.author_schemas import AuthorListResponse, AuthorResponse
from src.api.services.author_service import AuthorService
from src.api.validation import parse_author_input, parse_paging, require_valid

router = APIRouter(prefix="/authors", tags=["authors"])
AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
JsonBody = Annotated[Any, Body()]


@router.get("", response_model=AuthorListResponse)
def list_authors(
    request: Request,
    service: AuthorServiceDep,
    config: ConfigDep,
) -> dict[str, object]:
    paging = require_valid(
        parse_paging(
            request.query_params,
            default_limit=config.default_page_size,
            max_limit=config.max_page_size,
        )
    )
    result = service.list_authors(paging=paging)
    return {
        "data": result["rows"],
        "paging": build_paging_metadata(paging=paging, total=result["total"]),
    }


@router.get("/{author_id}", response_model=AuthorResponse)
def get_author(author_id: int, service: AuthorServiceDep) -> dict[str, object]:
    return service.get_author(author_id)


@router.post("", response_model=AuthorResponse, status_code=201)
def create_author(payload: JsonBody, service: AuthorServiceDep) -> dict[str, object]:
    return service.create_author(require_valid(parse_author_input(payload)))


@router.put("/{author_id}", response_model=AuthorResponse)
def update_author(
    author_id: int,
    payload: JsonBody,
    service: AuthorServiceDep,
) -> dict[str, object]:
    return service.update_author(author_id, require_valid(parse_author_input(payload)))


@router.delete("/{author_id}", status_code=204, response_class=Response)
def delete_author(author_id: int, service: AuthorServiceDep) -> Response:
    service.delete_author(author_id)
    return Response(status_code=204)
