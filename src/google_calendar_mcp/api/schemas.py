from __future__ import annotations

from typing import Any, Dict

JsonSchema = Dict[str, Any]


def _time_schema(label: str, example: str) -> JsonSchema:
    return {
        "type": "object",
        "properties": {
            "dateTime": {
                "type": "string",
                "description": f"{label} date and time in ISO 8601 format (e.g., '{example}')",
            },
            "timeZone": {
                "type": "string",
                "description": "Time zone (e.g., 'America/New_York'). Defaults to UTC",
            },
        },
        "required": ["dateTime"],
    }


CREATE_EVENT_SCHEMA: JsonSchema = {
    "type": "object",
    "properties": {
        "summary": {"type": "string", "description": "Title/summary of the event"},
        "description": {"type": "string", "description": "Detailed description of the event"},
        "start": _time_schema("Start", "2024-01-15T10:00:00"),
        "end": _time_schema("End", "2024-01-15T11:00:00"),
        "location": {"type": "string", "description": "Location of the event"},
        "attendees": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "email": {"type": "string", "description": "Email address of the attendee"},
                    "displayName": {"type": "string", "description": "Display name of the attendee"},
                },
                "required": ["email"],
            },
            "description": "List of attendees to invite",
        },
        "calendarId": {
            "type": "string",
            "description": "ID of the calendar to create the event in. Defaults to 'primary'",
        },
    },
    "required": ["summary", "start", "end"],
}

RESCHEDULE_EVENT_SCHEMA: JsonSchema = {
    "type": "object",
    "properties": {
        "eventId": {"type": "string", "description": "ID of the event to reschedule"},
        "start": _time_schema("New start", "2024-01-15T10:00:00"),
        "end": _time_schema("New end", "2024-01-15T11:00:00"),
        "calendarId": {
            "type": "string",
            "description": "ID of the calendar containing the event. Defaults to 'primary'",
        },
    },
    "required": ["eventId", "start", "end"],
}

DELETE_EVENT_SCHEMA: JsonSchema = {
    "type": "object",
    "properties": {
        "eventId": {"type": "string", "description": "ID of the event to delete"},
        "calendarId": {
            "type": "string",
            "description": "ID of the calendar containing the event. Defaults to 'primary'",
        },
    },
    "required": ["eventId"],
}

LIST_EVENTS_SCHEMA: JsonSchema = {
    "type": "object",
    "properties": {
        "calendarId": {
            "type": "string",
            "description": "ID of the calendar to list events from. Defaults to 'primary'",
        },
        "timeMin": {
            "type": "string",
            "description": "Lower bound (inclusive) for events to list in ISO 8601 format (e.g., '2024-01-15T00:00:00Z')",
        },
        "timeMax": {
            "type": "string",
            "description": "Upper bound (exclusive) for events to list in ISO 8601 format (e.g., '2024-01-16T00:00:00Z')",
        },
        "maxResults": {
            "type": "number",
            "description": "Maximum number of events to return (1-2500). Defaults to 50",
        },
        "q": {"type": "string", "description": "Free text search terms to find events that match"},
    },
}
