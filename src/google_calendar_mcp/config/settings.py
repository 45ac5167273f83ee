from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_log_dir

load_dotenv()

APP_NAME = "google-calendar-mcp"
APP_AUTHOR = "GoogleCalendarMcp"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class GoogleAuthSettings:
    credentials_path: Optional[str]
    client_id: Optional[str]
    client_secret: Optional[str]
    refresh_token: Optional[str]

    @property
    def has_service_account(self) -> bool:
        return bool(self.credentials_path)

    @property
    def has_oauth(self) -> bool:
        return bool(self.client_id and self.client_secret and self.refresh_token)

    @property
    def is_configured(self) -> bool:
        return self.has_service_account or self.has_oauth

    @property
    def missing_env_vars(self) -> list[str]:
        if self.is_configured:
            return []
        missing = []
        if not self.client_id:
            missing.append("GOOGLE_CLIENT_ID")
        if not self.client_secret:
            missing.append("GOOGLE_CLIENT_SECRET")
        if not self.refresh_token:
            missing.append("GOOGLE_REFRESH_TOKEN")
        return missing


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    is_production: bool


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path
    to_file: bool


@dataclass(frozen=True)
class AppSettings:
    google: GoogleAuthSettings
    server: ServerSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _is_production() -> bool:
    environment = os.getenv("APP_ENV") or os.getenv("NODE_ENV") or ""
    return environment.strip().lower() == "production"


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    google = GoogleAuthSettings(
        credentials_path=os.getenv("GOOGLE_APPLICATION_CREDENTIALS") or None,
        client_id=os.getenv("GOOGLE_CLIENT_ID") or None,
        client_secret=os.getenv("GOOGLE_CLIENT_SECRET") or None,
        refresh_token=os.getenv("GOOGLE_REFRESH_TOKEN") or None,
    )

    is_production = _is_production()
    server = ServerSettings(
        host=os.getenv("HOST", "0.0.0.0" if is_production else "127.0.0.1"),
        port=_int_from_env("PORT", DEFAULT_PORT),
        is_production=is_production,
    )

    logging = LoggingSettings(
        level=os.getenv("GCAL_MCP_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("GCAL_MCP_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
        to_file=not is_production,
    )

    return AppSettings(google=google, server=server, logging=logging)
