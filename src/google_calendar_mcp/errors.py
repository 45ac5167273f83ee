from __future__ import annotations


class CalendarError(RuntimeError):
    """Base class for failures surfaced to tool callers as error responses."""


class ConfigurationError(CalendarError):
    """Raised when no usable Google credentials are configured."""


class EventNotFoundError(CalendarError):
    """Raised when an event id does not exist in the target calendar."""

    def __init__(self, event_id: str) -> None:
        super().__init__(f"Event with ID {event_id} not found")
        self.event_id = event_id


class ProviderError(CalendarError):
    """Raised when the calendar provider rejects a request."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status
