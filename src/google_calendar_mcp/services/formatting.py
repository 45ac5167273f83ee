from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import orjson

from ..domain import CalendarEvent

NO_EVENTS_MESSAGE = "No events found matching the criteria"


def _dumps(payload: Dict[str, Any]) -> str:
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")


def format_event(record: Dict[str, Any]) -> str:
    return _dumps(CalendarEvent.from_provider(record).to_record())


def format_listing(records: Iterable[Dict[str, Any]], next_page_token: Optional[str] = None) -> str:
    events = [CalendarEvent.from_provider(record).to_record() for record in records]
    if not events:
        return NO_EVENTS_MESSAGE
    payload: Dict[str, Any] = {"summary": f"Found {len(events)} event(s)", "events": events}
    if next_page_token:
        payload["nextPageToken"] = next_page_token
    return _dumps(payload)


def format_deleted(event_id: str, calendar_id: str) -> str:
    return f"Event {event_id} has been successfully deleted from calendar {calendar_id}"


__all__ = ["NO_EVENTS_MESSAGE", "format_deleted", "format_event", "format_listing"]
