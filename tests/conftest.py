from __future__ import annotations

import pytest

from google_calendar_mcp.api import ToolDispatcher
from google_calendar_mcp.config import get_settings
from google_calendar_mcp.services import InMemoryCalendarAdapter

_ENV_VARS = (
    "GOOGLE_APPLICATION_CREDENTIALS",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "GOOGLE_REFRESH_TOKEN",
    "HOST",
    "PORT",
    "APP_ENV",
    "NODE_ENV",
    "GCAL_MCP_LOG_LEVEL",
    "GCAL_MCP_LOG_DIR",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def memory_adapter() -> InMemoryCalendarAdapter:
    return InMemoryCalendarAdapter()


@pytest.fixture
def dispatcher(memory_adapter: InMemoryCalendarAdapter) -> ToolDispatcher:
    return ToolDispatcher(memory_adapter)


@pytest.fixture
def oauth_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_CLIENT_ID", "client-id")
    monkeypatch.setenv("GOOGLE_CLIENT_SECRET", "client-secret")
    monkeypatch.setenv("GOOGLE_REFRESH_TOKEN", "refresh-token")
    get_settings.cache_clear()
