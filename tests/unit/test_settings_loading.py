"""
Unit tests for process settings and API configuration loading.
"""

import pytest

from src.api import api_config as api_config_module
from src.common import settings as settings_module


def test_load_settings_success() -> None:
    settings_module.get_settings.cache_clear()
    settings = settings_module.get_settings()
    assert settings.PROJECT_NAME
    assert settings.DATABASE_URL


def test_load_settings_missing_required(monkeypatch: pytest.MonkeyPatch) -> None:
    settings_module.get_settings.cache_clear()
    monkeypatch.delenv("PROJECT_NAME", raising=False)
    with pytest.raises(RuntimeError, match="Missing required environment variables"):
        settings_module.load_settings(load_env=False)


def test_api_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("API_DEFAULT_PAGE_SIZE", "API_MAX_PAGE_SIZE", "API_MAX_NEWS_OFFSET"):
        monkeypatch.delenv(name, raising=False)
    config = api_config_module.load_api_config(load_env=False)
    assert config.default_page_size == 10
    assert config.max_page_size == 100
    assert config.max_news_offset == 100_000


def test_api_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_MAX_PAGE_SIZE", "50")
    monkeypatch.setenv("API_AUTO_CREATE_SCHEMA", "off")
    monkeypatch.setenv("API_ALLOWED_ORIGINS", "http://localhost:5173, http://127.0.0.1:5173")
    config = api_config_module.load_api_config(load_env=False)
    assert config.max_page_size == 50
    assert config.auto_create_schema is False
    assert config.allowed_origins == ["http://localhost:5173", "http://127.0.0.1:5173"]


def test_api_config_requires_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "")
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        api_config_module.load_api_config(load_env=False)


def test_api_config_rejects_bad_boolean(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_AUTO_CREATE_SCHEMA", "maybe")
    with pytest.raises(ValueError, match="boolean-like"):
        api_config_module.load_api_config(load_env=False)
