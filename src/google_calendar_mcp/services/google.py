from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from ..api.models import CreateEventArgs, DeleteEventArgs, ListEventsArgs, RescheduleEventArgs
from ..config import GoogleAuthSettings
from ..errors import EventNotFoundError, ProviderError
from .auth import AuthState, Authenticated, ServiceBuilder, Unauthenticated, authenticate, build_calendar_service
from .base import CalendarAdapter
from .formatting import format_deleted, format_event, format_listing

logger = logging.getLogger(__name__)

SEND_UPDATES = "all"
_MISSING_STATUSES = (404, 410)


def _provider_error(exc: HttpError) -> ProviderError:
    status = getattr(exc.resp, "status", None)
    status_code = int(status) if status else None
    reason = getattr(exc, "reason", None) or str(exc)
    return ProviderError(f"Google Calendar API error ({status_code}): {reason}", status=status_code)


def _drop_none(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


class GoogleCalendarAdapter(CalendarAdapter):
    """Calendar adapter backed by the Google Calendar v3 API."""

    name = "google"

    def __init__(
        self,
        settings: GoogleAuthSettings,
        *,
        build_service: ServiceBuilder = build_calendar_service,
    ) -> None:
        self._auth: AuthState = Unauthenticated(settings)
        self._build_service = build_service

    @property
    def is_authenticated(self) -> bool:
        return isinstance(self._auth, Authenticated)

    def _service(self) -> Any:
        state = self._auth
        if isinstance(state, Authenticated):
            return state.service
        authenticated = authenticate(state.settings, build_service=self._build_service)
        self._auth = authenticated
        return authenticated.service

    async def _execute(self, request: Any, *, event_id: Optional[str] = None) -> Dict[str, Any]:
        # googleapiclient is blocking; keep the event loop free while the request runs
        try:
            response = await asyncio.to_thread(request.execute)
        except HttpError as exc:
            error = _provider_error(exc)
            if event_id is not None and error.status in _MISSING_STATUSES:
                raise EventNotFoundError(event_id) from exc
            raise error from exc
        except GoogleAuthError as exc:
            raise ProviderError(f"Google authentication failed: {exc}") from exc
        return response or {}

    async def create_event(self, args: CreateEventArgs) -> str:
        service = self._service()
        calendar_id = args.resolved_calendar_id
        body = _drop_none(
            {
                "summary": args.summary,
                "description": args.description,
                "start": args.start.to_provider(),
                "end": args.end.to_provider(),
                "location": args.location,
                "attendees": [
                    _drop_none({"email": attendee.email, "displayName": attendee.display_name})
                    for attendee in args.attendees
                ]
                if args.attendees is not None
                else None,
            }
        )
        logger.debug("Inserting event into calendar %s", calendar_id)
        created = await self._execute(
            service.events().insert(calendarId=calendar_id, body=body, sendUpdates=SEND_UPDATES)
        )
        if not created.get("id"):
            raise ProviderError("Failed to create event - no event ID returned")
        return format_event(created)

    async def reschedule_event(self, args: RescheduleEventArgs) -> str:
        service = self._service()
        calendar_id = args.resolved_calendar_id
        existing = await self._execute(
            service.events().get(calendarId=calendar_id, eventId=args.event_id),
            event_id=args.event_id,
        )
        if not existing:
            raise EventNotFoundError(args.event_id)

        updated = {**existing, "start": args.start.to_provider(), "end": args.end.to_provider()}
        logger.debug("Rescheduling event %s in calendar %s", args.event_id, calendar_id)
        response = await self._execute(
            service.events().update(
                calendarId=calendar_id,
                eventId=args.event_id,
                body=updated,
                sendUpdates=SEND_UPDATES,
            ),
            event_id=args.event_id,
        )
        return format_event(response)

    async def delete_event(self, args: DeleteEventArgs) -> str:
        service = self._service()
        calendar_id = args.resolved_calendar_id
        logger.debug("Deleting event %s from calendar %s", args.event_id, calendar_id)
        await self._execute(
            service.events().delete(calendarId=calendar_id, eventId=args.event_id, sendUpdates=SEND_UPDATES),
            event_id=args.event_id,
        )
        return format_deleted(args.event_id, calendar_id)

    async def list_events(self, args: ListEventsArgs) -> str:
        service = self._service()
        params: Dict[str, Any] = {
            "calendarId": args.resolved_calendar_id,
            "maxResults": args.resolved_max_results,
            "singleEvents": True,
            "orderBy": "startTime",
        }
        params.update(_drop_none({"timeMin": args.time_min, "timeMax": args.time_max, "q": args.q}))
        response = await self._execute(service.events().list(**params))
        return format_listing(response.get("items") or [], response.get("nextPageToken"))
