"""
Core pytest configuration for the test suite.

Shared fixtures:
  - fixed_start / ctx: a deterministic RenderContext so rendered lines can be
    compared byte for byte.
  - settings_factory: builds Settings from keyword overrides without reading the
    developer's environment or .env file.
  - clean_settings_cache: get_settings() is lru_cached; clear it around tests
    that touch the environment.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest

from reqlog.config.settings import Settings, get_settings
from reqlog.formatting import RenderContext

# Keep test output quiet when a test installs the app logging config.
for _name in ("httpx", "asyncio"):
    logging.getLogger(_name).setLevel(logging.WARNING)


@pytest.fixture
def fixed_start() -> datetime:
    return datetime(2024, 3, 9, 14, 5, 7, 123456, tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture
def ctx(fixed_start: datetime) -> RenderContext:
    return RenderContext(
        method="GET",
        uri="http://example.com/items?page=2",
        remote_addr="127.0.0.1:54321",
        request_time=fixed_start,
        response_time_ms=12.5,
        status=200,
    )


@pytest.fixture
def settings_factory(tmp_path, monkeypatch):
    """Return a callable building Settings isolated from the process environment."""
    monkeypatch.chdir(tmp_path)  # no stray .env gets picked up
    for key in (
        "ENV", "LOG_LEVEL", "LOG_FORMAT", "LOG_TO_STDOUT", "LOG_DIR",
        "REQUEST_LOG_TEMPLATE", "REQUEST_LOG_LOGGER",
    ):
        monkeypatch.delenv(key, raising=False)

    def _make(**overrides) -> Settings:
        return Settings(**overrides)

    return _make


@pytest.fixture
def clean_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
