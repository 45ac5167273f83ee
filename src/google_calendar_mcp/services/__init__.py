"""Calendar adapters, authentication and transports."""

from __future__ import annotations

from .base import CalendarAdapter
from .context import ServiceContext
from .google import GoogleCalendarAdapter
from .memory import InMemoryCalendarAdapter

__all__ = ["CalendarAdapter", "GoogleCalendarAdapter", "InMemoryCalendarAdapter", "ServiceContext"]
