from __future__ import annotations

from typing import TYPE_CHECKING

from .models import CreateEventArgs, DeleteEventArgs, ListEventsArgs, RescheduleEventArgs
from .registry import register_tool
from .schemas import CREATE_EVENT_SCHEMA, DELETE_EVENT_SCHEMA, LIST_EVENTS_SCHEMA, RESCHEDULE_EVENT_SCHEMA
from .validation import (
    CREATE_EVENT_TOOL,
    DELETE_EVENT_TOOL,
    LIST_EVENTS_TOOL,
    RESCHEDULE_EVENT_TOOL,
    parse_create_event_args,
    parse_delete_event_args,
    parse_list_events_args,
    parse_reschedule_event_args,
)

if TYPE_CHECKING:
    from ..services.base import CalendarAdapter


@register_tool(
    CREATE_EVENT_TOOL,
    description=(
        "Creates a new event in Google Calendar. Requires summary, start time, and end time. "
        "Optionally accepts description, location, attendees, and calendar ID."
    ),
    input_schema=CREATE_EVENT_SCHEMA,
    parser=parse_create_event_args,
    action="creating calendar event",
)
async def create_event(adapter: CalendarAdapter, args: CreateEventArgs) -> str:
    return await adapter.create_event(args)


@register_tool(
    RESCHEDULE_EVENT_TOOL,
    description=(
        "Reschedules an existing calendar event by updating its start and end times. "
        "Requires the event ID and new start/end times."
    ),
    input_schema=RESCHEDULE_EVENT_SCHEMA,
    parser=parse_reschedule_event_args,
    action="rescheduling calendar event",
)
async def reschedule_event(adapter: CalendarAdapter, args: RescheduleEventArgs) -> str:
    return await adapter.reschedule_event(args)


@register_tool(
    DELETE_EVENT_TOOL,
    description="Deletes an existing calendar event. Requires the event ID.",
    input_schema=DELETE_EVENT_SCHEMA,
    parser=parse_delete_event_args,
    action="deleting calendar event",
)
async def delete_event(adapter: CalendarAdapter, args: DeleteEventArgs) -> str:
    return await adapter.delete_event(args)


@register_tool(
    LIST_EVENTS_TOOL,
    description="Lists calendar events with optional filtering by time range, search query, and calendar ID.",
    input_schema=LIST_EVENTS_SCHEMA,
    parser=parse_list_events_args,
    action="listing calendar events",
)
async def list_events(adapter: CalendarAdapter, args: ListEventsArgs) -> str:
    return await adapter.list_events(args)
