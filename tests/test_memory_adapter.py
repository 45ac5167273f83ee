"""Unit tests for InMemoryCalendarAdapter filtering, ordering and bookkeeping."""

from __future__ import annotations

import json

import pytest

from google_calendar_mcp.api.models import CreateEventArgs, DeleteEventArgs, ListEventsArgs, RescheduleEventArgs
from google_calendar_mcp.errors import EventNotFoundError
from google_calendar_mcp.services import InMemoryCalendarAdapter
from google_calendar_mcp.services.memory import MOCK_NEXT_PAGE_TOKEN

pytestmark = pytest.mark.unit


def _create_args(summary: str, start: str, end: str, **extra) -> CreateEventArgs:
    return CreateEventArgs.model_validate(
        {"summary": summary, "start": {"dateTime": start}, "end": {"dateTime": end}, **extra}
    )


async def _list(adapter: InMemoryCalendarAdapter, **fields) -> list[dict]:
    text = await adapter.list_events(ListEventsArgs.model_validate(fields))
    if text == "No events found matching the criteria":
        return []
    return json.loads(text)["events"]


async def test_seeded_event_is_listed(memory_adapter: InMemoryCalendarAdapter) -> None:
    events = await _list(memory_adapter)

    assert [event["id"] for event in events] == ["test-event-1"]
    assert events[0]["attendees"] == [
        {"email": "test@example.com", "displayName": "Test User", "responseStatus": "accepted"}
    ]


async def test_unseeded_store_is_empty() -> None:
    adapter = InMemoryCalendarAdapter(seed=False)

    assert await _list(adapter) == []


async def test_create_assigns_sequential_ids_and_links(memory_adapter: InMemoryCalendarAdapter) -> None:
    first = json.loads(await memory_adapter.create_event(_create_args("A", "2024-08-26T09:00:00Z", "2024-08-26T10:00:00Z")))
    second = json.loads(await memory_adapter.create_event(_create_args("B", "2024-08-27T09:00:00Z", "2024-08-27T10:00:00Z")))

    assert first["id"] == "mock-event-1"
    assert second["id"] == "mock-event-2"
    assert first["htmlLink"] == "https://calendar.google.com/event?eid=mock-event-1"


async def test_attendees_default_to_needs_action(memory_adapter: InMemoryCalendarAdapter) -> None:
    args = _create_args(
        "Kickoff",
        "2024-08-26T09:00:00Z",
        "2024-08-26T10:00:00Z",
        attendees=[{"email": "ops@example.com"}, {"email": "pm@example.com", "responseStatus": "accepted"}],
    )

    event = json.loads(await memory_adapter.create_event(args))

    assert event["attendees"] == [
        {"email": "ops@example.com", "responseStatus": "needsAction"},
        {"email": "pm@example.com", "responseStatus": "accepted"},
    ]


async def test_query_matches_description_and_location_case_insensitively(
    memory_adapter: InMemoryCalendarAdapter,
) -> None:
    await memory_adapter.create_event(
        _create_args("Lunch", "2024-08-26T12:00:00Z", "2024-08-26T13:00:00Z", location="Cafe ROMA")
    )

    by_location = await _list(memory_adapter, q="roma")
    by_description = await _list(memory_adapter, q="THIS IS A TEST")

    assert [event["summary"] for event in by_location] == ["Lunch"]
    assert [event["id"] for event in by_description] == ["test-event-1"]


async def test_time_window_compares_start_inclusively(memory_adapter: InMemoryCalendarAdapter) -> None:
    inside = await _list(memory_adapter, timeMin="2024-08-24T10:00:00Z", timeMax="2024-08-24T10:00:00Z")
    too_late = await _list(memory_adapter, timeMin="2024-08-24T10:00:01Z")
    too_early = await _list(memory_adapter, timeMax="2024-08-24T09:59:59Z")

    assert [event["id"] for event in inside] == ["test-event-1"]
    assert too_late == []
    assert too_early == []


async def test_all_day_events_ignore_time_window(memory_adapter: InMemoryCalendarAdapter) -> None:
    memory_adapter._store(
        {
            "id": "holiday",
            "summary": "Company holiday",
            "start": {"date": "2030-01-01"},
            "end": {"date": "2030-01-02"},
        }
    )

    events = await _list(memory_adapter, timeMax="2020-01-01T00:00:00Z")

    assert [event["id"] for event in events] == ["holiday"]
    assert events[0]["start"] == {"date": "2030-01-01"}


async def test_listing_is_ordered_by_start(memory_adapter: InMemoryCalendarAdapter) -> None:
    await memory_adapter.create_event(_create_args("Later", "2024-09-10T09:00:00Z", "2024-09-10T10:00:00Z"))
    await memory_adapter.create_event(_create_args("Earlier", "2024-08-01T09:00:00Z", "2024-08-01T10:00:00Z"))

    events = await _list(memory_adapter)

    assert [event["summary"] for event in events] == ["Earlier", "Existing Test Meeting", "Later"]


async def test_max_results_truncates_and_sets_page_token(memory_adapter: InMemoryCalendarAdapter) -> None:
    await memory_adapter.create_event(_create_args("Second", "2024-09-10T09:00:00Z", "2024-09-10T10:00:00Z"))

    payload = json.loads(await memory_adapter.list_events(ListEventsArgs.model_validate({"maxResults": 1})))

    assert payload["summary"] == "Found 1 event(s)"
    assert payload["nextPageToken"] == MOCK_NEXT_PAGE_TOKEN
    full = json.loads(await memory_adapter.list_events(ListEventsArgs()))
    assert "nextPageToken" not in full


async def test_calendar_id_does_not_partition_events(memory_adapter: InMemoryCalendarAdapter) -> None:
    await memory_adapter.create_event(
        _create_args("Standup", "2024-08-26T09:00:00Z", "2024-08-26T09:15:00Z", calendarId="team")
    )

    listed_elsewhere = await _list(memory_adapter, calendarId="other")
    rescheduled = json.loads(
        await memory_adapter.reschedule_event(
            RescheduleEventArgs.model_validate(
                {
                    "eventId": "test-event-1",
                    "calendarId": "other",
                    "start": {"dateTime": "2024-09-01T09:00:00Z"},
                    "end": {"dateTime": "2024-09-01T10:00:00Z"},
                }
            )
        )
    )
    message = await memory_adapter.delete_event(
        DeleteEventArgs.model_validate({"eventId": "test-event-1", "calendarId": "other"})
    )

    assert [event["summary"] for event in listed_elsewhere] == ["Existing Test Meeting", "Standup"]
    assert rescheduled["start"]["dateTime"] == "2024-09-01T09:00:00Z"
    assert message == "Event test-event-1 has been successfully deleted from calendar other"
    assert memory_adapter.event_ids == ["mock-event-1"]

async def test_reschedule_unknown_event_raises(memory_adapter: InMemoryCalendarAdapter) -> None:
    args = RescheduleEventArgs.model_validate(
        {"eventId": "nope", "start": {"dateTime": "2024-09-01T09:00:00Z"}, "end": {"dateTime": "2024-09-01T10:00:00Z"}}
    )

    with pytest.raises(EventNotFoundError) as excinfo:
        await memory_adapter.reschedule_event(args)

    assert excinfo.value.event_id == "nope"
    assert str(excinfo.value) == "Event with ID nope not found"


async def test_delete_removes_event(memory_adapter: InMemoryCalendarAdapter) -> None:
    message = await memory_adapter.delete_event(DeleteEventArgs.model_validate({"eventId": "test-event-1"}))

    assert message == "Event test-event-1 has been successfully deleted from calendar primary"
    assert memory_adapter.event_ids == []
