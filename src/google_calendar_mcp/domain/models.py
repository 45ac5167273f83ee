from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEFAULT_CALENDAR_ID = "primary"
DEFAULT_TIME_ZONE = "UTC"
DEFAULT_MAX_RESULTS = 50
UNTITLED_SUMMARY = "No title"


def _compact(record: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in record.items() if value is not None}


@dataclass(slots=True)
class EventTime:
    date_time: Optional[str] = None
    date: Optional[str] = None
    time_zone: Optional[str] = None

    @classmethod
    def from_record(cls, record: Optional[Dict[str, Any]]) -> "EventTime":
        record = record or {}
        return cls(
            date_time=record.get("dateTime") or None,
            date=record.get("date") or None,
            time_zone=record.get("timeZone") or None,
        )

    def to_record(self) -> Dict[str, Any]:
        return _compact({"dateTime": self.date_time, "date": self.date, "timeZone": self.time_zone})


@dataclass(slots=True)
class Attendee:
    email: str
    display_name: Optional[str] = None
    response_status: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Attendee":
        return cls(
            email=record.get("email") or "",
            display_name=record.get("displayName") or None,
            response_status=record.get("responseStatus") or None,
        )

    def to_record(self) -> Dict[str, Any]:
        return _compact(
            {
                "email": self.email,
                "displayName": self.display_name,
                "responseStatus": self.response_status,
            }
        )


@dataclass(slots=True)
class CalendarEvent:
    """Normalized projection of a provider event."""

    id: str
    summary: str
    start: EventTime
    end: EventTime
    description: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None
    html_link: Optional[str] = None
    attendees: Optional[List[Attendee]] = field(default=None)

    @classmethod
    def from_provider(cls, record: Dict[str, Any]) -> "CalendarEvent":
        attendees = record.get("attendees")
        return cls(
            id=record.get("id") or "",
            summary=record.get("summary") or UNTITLED_SUMMARY,
            description=record.get("description") or None,
            start=EventTime.from_record(record.get("start")),
            end=EventTime.from_record(record.get("end")),
            location=record.get("location") or None,
            status=record.get("status") or None,
            html_link=record.get("htmlLink") or None,
            attendees=[Attendee.from_record(item) for item in attendees] if attendees is not None else None,
        )

    def to_record(self) -> Dict[str, Any]:
        return _compact(
            {
                "id": self.id,
                "summary": self.summary,
                "description": self.description,
                "start": self.start.to_record(),
                "end": self.end.to_record(),
                "location": self.location,
                "status": self.status,
                "htmlLink": self.html_link,
                "attendees": [attendee.to_record() for attendee in self.attendees]
                if self.attendees is not None
                else None,
            }
        )
