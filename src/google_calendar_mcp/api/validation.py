"""Parse-or-fail boundary between raw tool arguments and typed models.

Each parser returns either :class:`Parsed` holding the validated model or
:class:`Invalid` naming the offending field. Only shape is checked: date-time
strings, e-mail addresses and numeric ranges pass through untouched and are
left to the calendar backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .models import CreateEventArgs, DeleteEventArgs, ListEventsArgs, RescheduleEventArgs

CREATE_EVENT_TOOL = "google_calendar_create_event"
RESCHEDULE_EVENT_TOOL = "google_calendar_reschedule_event"
DELETE_EVENT_TOOL = "google_calendar_delete_event"
LIST_EVENTS_TOOL = "google_calendar_list_events"

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class Parsed(Generic[ModelT]):
    value: ModelT


@dataclass(frozen=True, slots=True)
class Invalid:
    tool: str
    field: str
    message: str

    def describe(self) -> str:
        return f"Invalid arguments for {self.tool}: {self.field}: {self.message}"


ParseResult = Union[Parsed[ModelT], Invalid]
ArgumentParser = Callable[[Any], "ParseResult[Any]"]


def _first_error(tool: str, exc: ValidationError) -> Invalid:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return Invalid(tool=tool, field=location or "arguments", message=error.get("msg", "invalid value"))


def _parse(tool: str, model: Type[ModelT], raw: Any) -> ParseResult[ModelT]:
    if not isinstance(raw, dict):
        return Invalid(tool=tool, field="arguments", message="Input should be an object")
    try:
        return Parsed(model.model_validate(raw))
    except ValidationError as exc:
        return _first_error(tool, exc)


def _parse_required(tool: str, model: Type[ModelT], raw: Any) -> ParseResult[ModelT]:
    if raw is None:
        return Invalid(tool=tool, field="arguments", message="No arguments provided")
    return _parse(tool, model, raw)


def parse_create_event_args(raw: Any) -> ParseResult[CreateEventArgs]:
    return _parse_required(CREATE_EVENT_TOOL, CreateEventArgs, raw)


def parse_reschedule_event_args(raw: Any) -> ParseResult[RescheduleEventArgs]:
    return _parse_required(RESCHEDULE_EVENT_TOOL, RescheduleEventArgs, raw)


def parse_delete_event_args(raw: Any) -> ParseResult[DeleteEventArgs]:
    return _parse_required(DELETE_EVENT_TOOL, DeleteEventArgs, raw)


def parse_list_events_args(raw: Any) -> ParseResult[ListEventsArgs]:
    # every field is optional, so missing arguments mean "list with defaults"
    if raw is None:
        return Parsed(ListEventsArgs())
    return _parse(LIST_EVENTS_TOOL, ListEventsArgs, raw)


__all__ = [
    "ArgumentParser",
    "CREATE_EVENT_TOOL",
    "DELETE_EVENT_TOOL",
    "Invalid",
    "LIST_EVENTS_TOOL",
    "ParseResult",
    "Parsed",
    "RESCHEDULE_EVENT_TOOL",
    "parse_create_event_args",
    "parse_delete_event_args",
    "parse_list_events_args",
    "parse_reschedule_event_args",
]
