"""Unit tests for credential resolution."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from google.oauth2.credentials import Credentials

from google_calendar_mcp.config import GoogleAuthSettings
from google_calendar_mcp.errors import ConfigurationError
from google_calendar_mcp.services import auth
from google_calendar_mcp.services.auth import SCOPES, authenticate, load_credentials

pytestmark = pytest.mark.unit


def _settings(**overrides) -> GoogleAuthSettings:
    values = {"credentials_path": None, "client_id": None, "client_secret": None, "refresh_token": None}
    values.update(overrides)
    return GoogleAuthSettings(**values)


def test_nothing_configured_raises() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        load_credentials(_settings())

    assert "GOOGLE_REFRESH_TOKEN" in str(excinfo.value)


def test_partial_oauth_is_not_enough() -> None:
    with pytest.raises(ConfigurationError):
        load_credentials(_settings(client_id="id", client_secret="secret"))


def test_oauth_credentials_carry_refresh_token() -> None:
    credentials, method = load_credentials(_settings(client_id="id", client_secret="secret", refresh_token="refresh"))

    assert method == "oauth"
    assert isinstance(credentials, Credentials)
    assert credentials.refresh_token == "refresh"
    assert credentials.client_id == "id"
    assert credentials.token_uri == "https://oauth2.googleapis.com/token"


def test_service_account_is_preferred(monkeypatch: pytest.MonkeyPatch) -> None:
    sentinel = object()
    loader = MagicMock(return_value=sentinel)
    monkeypatch.setattr(auth.service_account.Credentials, "from_service_account_file", loader)

    credentials, method = load_credentials(
        _settings(credentials_path="/keys/sa.json", client_id="id", client_secret="secret", refresh_token="refresh")
    )

    assert credentials is sentinel
    assert method == "service_account"
    loader.assert_called_once_with("/keys/sa.json", scopes=SCOPES)


def test_unreadable_key_file_raises(tmp_path) -> None:
    missing = tmp_path / "absent.json"

    with pytest.raises(ConfigurationError, match="absent.json"):
        load_credentials(_settings(credentials_path=str(missing)))


def test_authenticate_builds_service_once() -> None:
    service = object()
    builder = MagicMock(return_value=service)

    state = authenticate(_settings(client_id="id", client_secret="secret", refresh_token="refresh"), build_service=builder)

    assert state.service is service
    assert state.method == "oauth"
    builder.assert_called_once()
