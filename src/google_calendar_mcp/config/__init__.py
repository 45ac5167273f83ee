"""Configuration models and helpers."""

from __future__ import annotations

from .settings import DEFAULT_PORT, AppSettings, GoogleAuthSettings, LoggingSettings, ServerSettings, get_settings

__all__ = ["DEFAULT_PORT", "AppSettings", "GoogleAuthSettings", "LoggingSettings", "ServerSettings", "get_settings"]
