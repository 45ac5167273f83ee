"""Domain models for calendar events."""

from __future__ import annotations

from .models import (
    DEFAULT_CALENDAR_ID,
    DEFAULT_MAX_RESULTS,
    DEFAULT_TIME_ZONE,
    UNTITLED_SUMMARY,
    Attendee,
    CalendarEvent,
    EventTime,
)

__all__ = [
    "Attendee",
    "CalendarEvent",
    "DEFAULT_CALENDAR_ID",
    "DEFAULT_MAX_RESULTS",
    "DEFAULT_TIME_ZONE",
    "EventTime",
    "UNTITLED_SUMMARY",
]
