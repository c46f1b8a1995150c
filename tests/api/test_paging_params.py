# This file tests limit/offset parsing on both list endpoints.

from __future__ import annotations

import pytest

from tests.api.support import api_test_client


@pytest.mark.parametrize("path", ["/authors", "/news"])
def test_paging_defaults_when_omitted(path: str) -> None:
    with api_test_client() as client:
        response = client.get(path)

    assert response.status_code == 200
    assert response.json()["paging"] == {"limit": 10, "offset": 0, "total": 0}
    assert response.json()["data"] == []


@pytest.mark.parametrize("path", ["/authors", "/news"])
@pytest.mark.parametrize("query", ["limit=0", "limit=101", "offset=-1", "limit=abc", "limit="])
def test_out_of_range_paging_is_rejected(path: str, query: str) -> None:
    with api_test_client() as client:
        response = client.get(f"{path}?{query}")

    assert response.status_code == 400
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_news_offset_is_capped_but_author_offset_is_not() -> None:
    with api_test_client() as client:
        news = client.get("/news?offset=100001")
        news_at_cap = client.get("/news?offset=100000")
        authors = client.get("/authors?offset=100001")

    assert news.status_code == 400
    assert news_at_cap.status_code == 200
    assert authors.status_code == 200
