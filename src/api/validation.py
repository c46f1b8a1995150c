# This file turns raw query parameters and JSON bodies into validated inputs.
# Each parse_* function is pure: it never raises for bad input and never touches the
# database, it returns Valid(value) or Invalid(errors) for the caller to act on.

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import pydantic
from pydantic import BaseModel

from src.api.error_handlers import ValidationError
from src.api.pagination import PagingSpec
from src.api.schemas.author_schemas import AuthorInput
from src.api.schemas.news_schemas import NewsCreateInput, NewsUpdateInput

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    errors: list[dict[str, str]] = field(default_factory=list)


ParseResult = Valid[T] | Invalid


class _PagingQuery(BaseModel):
    limit: int
    offset: int


def _error_entries(exc: pydantic.ValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors(include_url=False)
    ]


def _value_or_default(value: Any, default: int) -> Any:
    return default if value is None else value


def _parse_model(model: type[M], raw: Any) -> ParseResult[M]:
    try:
        return Valid(model.model_validate(raw))
    except pydantic.ValidationError as exc:
        return Invalid(_error_entries(exc))


def parse_paging(
    raw: Mapping[str, Any],
    *,
    default_limit: int,
    max_limit: int,
    max_offset: int | None = None,
) -> ParseResult[PagingSpec]:
    """Parse `limit`/`offset` query values; omitted values take the defaults."""

    values = {
        "limit": _value_or_default(raw.get("limit"), default_limit),
        "offset": _value_or_default(raw.get("offset"), 0),
    }
    parsed = _parse_model(_PagingQuery, values)
    if isinstance(parsed, Invalid):
        return parsed

    query = parsed.value
    errors: list[dict[str, str]] = []
    if query.limit < 1 or query.limit > max_limit:
        errors.append({"field": "limit", "message": f"limit must be between 1 and {max_limit}"})
    if query.offset < 0:
        errors.append({"field": "offset", "message": "offset must be >= 0"})
    elif max_offset is not None and query.offset > max_offset:
        errors.append({"field": "offset", "message": f"offset must be <= {max_offset}"})
    if errors:
        return Invalid(errors)
    return Valid(PagingSpec(limit=query.limit, offset=query.offset))


def parse_author_input(raw: Any) -> ParseResult[AuthorInput]:
    return _parse_model(AuthorInput, raw)


def parse_news_create(raw: Any) -> ParseResult[NewsCreateInput]:
    return _parse_model(NewsCreateInput, raw)


def parse_news_update(raw: Any) -> ParseResult[NewsUpdateInput]:
    return _parse_model(NewsUpdateInput, raw)


def require_valid(result: ParseResult[T]) -> T:
    """Unwrap a parse result at the HTTP boundary, raising a 400 on failure."""

    if isinstance(result, Invalid):
        raise ValidationError("invalid request", details=result.errors)
    return result.value
