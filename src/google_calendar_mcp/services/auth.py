from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Tuple, Union

from google.oauth2 import service_account
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from ..config import GoogleAuthSettings
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/calendar"]
TOKEN_URI = "https://oauth2.googleapis.com/token"

MISSING_CREDENTIALS_MESSAGE = (
    "Google Calendar authentication required. Set either:\n"
    "1. GOOGLE_APPLICATION_CREDENTIALS (path to service account key file), or\n"
    "2. GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET, and GOOGLE_REFRESH_TOKEN"
)

ServiceBuilder = Callable[[Any], Any]


@dataclass(frozen=True)
class Unauthenticated:
    """Raw credential configuration awaiting the first provider call."""

    settings: GoogleAuthSettings


@dataclass(frozen=True)
class Authenticated:
    """Ready ``googleapiclient`` calendar resource."""

    service: Any
    method: str


AuthState = Union[Unauthenticated, Authenticated]


def build_calendar_service(credentials: Any) -> Any:
    return build("calendar", "v3", credentials=credentials, cache_discovery=False)


def load_credentials(settings: GoogleAuthSettings) -> Tuple[Any, str]:
    """Resolve credentials, preferring a service-account key file over OAuth2."""

    if settings.has_service_account:
        try:
            credentials = service_account.Credentials.from_service_account_file(
                settings.credentials_path,
                scopes=SCOPES,
            )
        except (OSError, ValueError) as exc:
            raise ConfigurationError(
                f"Could not load service account key file {settings.credentials_path}: {exc}"
            ) from exc
        return credentials, "service_account"

    if settings.has_oauth:
        credentials = Credentials(
            token=None,
            refresh_token=settings.refresh_token,
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            token_uri=TOKEN_URI,
            scopes=SCOPES,
        )
        return credentials, "oauth"

    raise ConfigurationError(MISSING_CREDENTIALS_MESSAGE)


def authenticate(
    settings: GoogleAuthSettings,
    *,
    build_service: ServiceBuilder = build_calendar_service,
) -> Authenticated:
    credentials, method = load_credentials(settings)
    service = build_service(credentials)
    logger.info("Google Calendar client initialized using %s credentials", method)
    return Authenticated(service=service, method=method)


__all__ = [
    "AuthState",
    "Authenticated",
    "MISSING_CREDENTIALS_MESSAGE",
    "SCOPES",
    "ServiceBuilder",
    "Unauthenticated",
    "authenticate",
    "build_calendar_service",
    "load_credentials",
]
