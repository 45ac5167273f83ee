from __future__ import annotations

import logging
from copy import deepcopy
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from ..api.models import CreateEventArgs, DeleteEventArgs, ListEventsArgs, RescheduleEventArgs
from ..errors import EventNotFoundError
from .base import CalendarAdapter
from .formatting import format_deleted, format_event, format_listing

logger = logging.getLogger(__name__)

MOCK_NEXT_PAGE_TOKEN = "mock-next-page-token"
EVENT_LINK_TEMPLATE = "https://calendar.google.com/event?eid={event_id}"
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _seed_event() -> Dict[str, Any]:
    return {
        "id": "test-event-1",
        "summary": "Existing Test Meeting",
        "description": "This is a test event",
        "start": {"dateTime": "2024-08-24T10:00:00Z", "timeZone": "UTC"},
        "end": {"dateTime": "2024-08-24T11:00:00Z", "timeZone": "UTC"},
        "location": "Test Location",
        "status": "confirmed",
        "htmlLink": EVENT_LINK_TEMPLATE.format(event_id="test-event-1"),
        "attendees": [
            {"email": "test@example.com", "displayName": "Test User", "responseStatus": "accepted"},
        ],
    }


def _parse_instant(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _start_instant(event: Dict[str, Any]) -> Optional[datetime]:
    return _parse_instant((event.get("start") or {}).get("dateTime"))


def _sort_key(event: Dict[str, Any]) -> Tuple[bool, datetime]:
    start = event.get("start") or {}
    instant = _parse_instant(start.get("dateTime")) or _parse_instant(start.get("date"))
    return instant is None, instant or _EPOCH


def _matches_query(event: Dict[str, Any], query: str) -> bool:
    needle = query.lower()
    return any(needle in (event.get(key) or "").lower() for key in ("summary", "description", "location"))


def _within_window(event: Dict[str, Any], time_min: Optional[str], time_max: Optional[str]) -> bool:
    # Only start.dateTime is compared; all-day events carry no dateTime and always pass.
    start = _start_instant(event)
    if start is None:
        return True
    lower = _parse_instant(time_min)
    upper = _parse_instant(time_max)
    if lower is not None and start < lower:
        return False
    if upper is not None and start > upper:
        return False
    return True


class InMemoryCalendarAdapter(CalendarAdapter):
    """Calendar adapter backed by a process-local dictionary.

    Seeded with one event at construction. All calendar ids share one store,
    so ``calendarId`` only appears in delete confirmations. Mutations are not synchronized, so
    concurrent callers must not share an instance.
    """

    name = "memory"

    def __init__(self, *, seed: bool = True) -> None:
        self._events: Dict[str, Dict[str, Any]] = {}
        self._counter = 0
        if seed:
            self._store(_seed_event())

    def _store(self, event: Dict[str, Any]) -> None:
        self._events[event["id"]] = event

    def _lookup(self, event_id: str) -> Dict[str, Any]:
        event = self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _consume_id(self) -> str:
        self._counter += 1
        return f"mock-event-{self._counter}"

    @property
    def event_ids(self) -> List[str]:
        return list(self._events)

    async def create_event(self, args: CreateEventArgs) -> str:
        event_id = self._consume_id()
        attendees = None
        if args.attendees is not None:
            attendees = [
                {
                    "email": attendee.email,
                    "displayName": attendee.display_name,
                    "responseStatus": attendee.response_status or "needsAction",
                }
                for attendee in args.attendees
            ]
        event = {
            "id": event_id,
            "summary": args.summary,
            "description": args.description,
            "start": args.start.to_provider(),
            "end": args.end.to_provider(),
            "location": args.location,
            "status": "confirmed",
            "htmlLink": EVENT_LINK_TEMPLATE.format(event_id=event_id),
            "attendees": attendees,
        }
        self._store(event)
        logger.debug("Stored mock event %s", event_id)
        return format_event(event)

    async def reschedule_event(self, args: RescheduleEventArgs) -> str:
        event = self._lookup(args.event_id)
        event["start"] = args.start.to_provider()
        event["end"] = args.end.to_provider()
        return format_event(event)

    async def delete_event(self, args: DeleteEventArgs) -> str:
        self._lookup(args.event_id)
        del self._events[args.event_id]
        return format_deleted(args.event_id, args.resolved_calendar_id)

    async def list_events(self, args: ListEventsArgs) -> str:
        events = [deepcopy(event) for event in self._events.values()]
        if args.q:
            events = [event for event in events if _matches_query(event, args.q)]
        if args.time_min or args.time_max:
            events = [event for event in events if _within_window(event, args.time_min, args.time_max)]
        events.sort(key=_sort_key)

        limit = args.resolved_max_results
        next_page_token = MOCK_NEXT_PAGE_TOKEN if len(events) > limit else None
        return format_listing(events[:limit], next_page_token)
