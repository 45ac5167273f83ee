from __future__ import annotations

from abc import ABC, abstractmethod

from ..api.models import CreateEventArgs, DeleteEventArgs, ListEventsArgs, RescheduleEventArgs


class CalendarAdapter(ABC):
    """Four calendar operations, each returning caller-facing text."""

    name: str = "calendar"

    @abstractmethod
    async def create_event(self, args: CreateEventArgs) -> str:
        ...

    @abstractmethod
    async def reschedule_event(self, args: RescheduleEventArgs) -> str:
        ...

    @abstractmethod
    async def delete_event(self, args: DeleteEventArgs) -> str:
        ...

    @abstractmethod
    async def list_events(self, args: ListEventsArgs) -> str:
        ...
