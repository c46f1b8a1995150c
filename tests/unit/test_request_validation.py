"""
Unit tests for the pure request parsers.
"""

import pytest

from src.api.error_handlers import ValidationError
from src.api.pagination import PagingSpec
from src.api.validation import (
    Invalid,
    Valid,
    parse_author_input,
    parse_news_create,
    parse_news_update,
    parse_paging,
    require_valid,
)


def _paging(raw: dict, max_offset: int | None = None):
    return parse_paging(raw, default_limit=10, max_limit=100, max_offset=max_offset)


def test_paging_defaults() -> None:
    assert _paging({}) == Valid(PagingSpec(limit=10, offset=0))


def test_paging_coerces_strings() -> None:
    assert _paging({"limit": "25", "offset": "5"}) == Valid(PagingSpec(limit=25, offset=5))


@pytest.mark.parametrize(
    "raw",
    [
        {"limit": 0},
        {"limit": 101},
        {"offset": -1},
        {"limit": "ten"},
        {"offset": "1.5"},
        {"limit": ""},
        {"offset": ""},
    ],
)
def test_paging_rejects_out_of_range(raw: dict) -> None:
    assert isinstance(_paging(raw), Invalid)


def test_paging_offset_cap_is_optional() -> None:
    assert isinstance(_paging({"offset": 100_001}, max_offset=100_000), Invalid)
    assert isinstance(_paging({"offset": 100_001}), Valid)


def test_author_input_requires_valid_email() -> None:
    assert isinstance(parse_author_input({"name": "Ada", "email": "ada@example.com"}), Valid)
    result = parse_author_input({"name": "Ada", "email": "nope"})
    assert isinstance(result, Invalid)
    assert result.errors[0]["field"] == "email"


def test_author_input_rejects_non_object_body() -> None:
    assert isinstance(parse_author_input(["Ada", "ada@example.com"]), Invalid)


def test_news_create_trims_and_applies_defaults() -> None:
    result = parse_news_create(
        {"title": "  Title  ", "excerpt": "E", "content": "C", "authorId": "3"}
    )
    assert isinstance(result, Valid)
    assert result.value.title == "Title"
    assert result.value.author_id == 3
    assert result.value.published is False
    assert result.value.slug is None


def test_news_create_reports_alias_field_name() -> None:
    result = parse_news_create({"title": "T", "excerpt": "E", "content": "C", "authorId": -1})
    assert isinstance(result, Invalid)
    assert result.errors[0]["field"] == "authorId"


def test_news_update_tracks_only_supplied_fields() -> None:
    result = parse_news_update({"published": False, "authorId": 2})
    assert isinstance(result, Valid)
    assert result.value.supplied_fields() == {"published": False, "author_id": 2}


def test_news_update_rejects_null() -> None:
    assert isinstance(parse_news_update({"slug": None}), Invalid)


def test_require_valid_raises_validation_error() -> None:
    with pytest.raises(ValidationError) as exc_info:
        require_valid(Invalid([{"field": "limit", "message": "bad"}]))
    assert exc_info.value.status_code == 400
    assert exc_info.value.details == [{"field": "limit", "message": "bad"}]
