"""
Unit tests for the per-field cleanup applied before news rows are written.
"""

import pytest

from src.api.error_handlers import ValidationError
from src.api.services import news_service
from src.api.services.news_service import _sanitize_field


def test_sanitized_title_keeps_plain_text() -> None:
    assert _sanitize_field("title", "<em>Tom</em> & Jerry") == "Tom & Jerry"


@pytest.mark.parametrize(("name", "limit"), [("title", 200), ("excerpt", 500)])
def test_sanitized_value_over_column_width_is_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, limit: int
) -> None:
    monkeypatch.setattr(news_service, "sanitize_text", lambda value: value * 2)

    assert _sanitize_field(name, "a" * (limit // 2)) == "a" * limit
    with pytest.raises(ValidationError) as exc_info:
        _sanitize_field(name, "a" * (limit // 2 + 1))

    assert exc_info.value.status_code == 400
    assert exc_info.value.details == [
        {"field": name, "message": f"{name} must be at most {limit} characters"}
    ]


def test_content_has_no_width_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(news_service, "sanitize_text", lambda value: value * 2)

    assert len(_sanitize_field("content", "a" * 1000)) == 2000
