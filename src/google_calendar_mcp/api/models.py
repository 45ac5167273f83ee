from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import DEFAULT_CALENDAR_ID, DEFAULT_MAX_RESULTS, DEFAULT_TIME_ZONE


class _ArgumentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class EventTimeArgs(_ArgumentModel):
    date_time: str = Field(alias="dateTime")
    time_zone: Optional[str] = Field(default=None, alias="timeZone")

    def to_provider(self) -> Dict[str, str]:
        return {"dateTime": self.date_time, "timeZone": self.time_zone or DEFAULT_TIME_ZONE}


class AttendeeArgs(_ArgumentModel):
    email: str
    display_name: Optional[str] = Field(default=None, alias="displayName")
    response_status: Optional[str] = Field(default=None, alias="responseStatus")


class _CalendarScoped(_ArgumentModel):
    calendar_id: Optional[str] = Field(default=None, alias="calendarId")

    @property
    def resolved_calendar_id(self) -> str:
        return self.calendar_id or DEFAULT_CALENDAR_ID


class CreateEventArgs(_CalendarScoped):
    summary: str
    description: Optional[str] = Field(default=None)
    start: EventTimeArgs
    end: EventTimeArgs
    attendees: Optional[List[AttendeeArgs]] = Field(default=None)
    location: Optional[str] = Field(default=None)


class RescheduleEventArgs(_CalendarScoped):
    event_id: str = Field(alias="eventId")
    start: EventTimeArgs
    end: EventTimeArgs


class DeleteEventArgs(_CalendarScoped):
    event_id: str = Field(alias="eventId")


class ListEventsArgs(_CalendarScoped):
    time_min: Optional[str] = Field(default=None, alias="timeMin")
    time_max: Optional[str] = Field(default=None, alias="timeMax")
    max_results: Optional[int] = Field(default=None, alias="maxResults")
    q: Optional[str] = Field(default=None)

    @property
    def resolved_max_results(self) -> int:
        return self.max_results or DEFAULT_MAX_RESULTS


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Uniform envelope returned for every tool call."""

    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def success(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)], is_error=False)

    @classmethod
    def failure(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)], is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
