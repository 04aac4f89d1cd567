"""Gated calendar access: create and list events."""

from __future__ import annotations

import asyncio
import logging

from workspace_bridge.calendar.models import CalendarEvent, build_event_body
from workspace_bridge.config import DEFAULT_TIMEZONE
from workspace_bridge.exceptions import CalendarError
from workspace_bridge.session import Session

logger = logging.getLogger(__name__)


class CalendarService:
    """Creates and lists events through the session's provider.

    Args:
        session: Credential store; every call requires it to be authorized.
        timezone: Fixed timezone applied to created events.
        calendar_id: Calendar to use.
        default_limit: Listing size used when none is given.
    """

    def __init__(
        self,
        session: Session,
        timezone: str = DEFAULT_TIMEZONE,
        calendar_id: str = "primary",
        default_limit: int = 10,
    ):
        self.session = session
        self.timezone = timezone
        self.calendar_id = calendar_id
        self.default_limit = default_limit

    async def create_event(self, summary: str, start: str, end: str) -> str:
        """Create an event and return its id.

        Datetimes are passed through unchecked; the provider rejects bad ones.
        """
        client = self.session.require_client()
        body = build_event_body(summary, start, end, self.timezone)
        created = await asyncio.to_thread(client.insert_event, self.calendar_id, body)
        event_id = created.get("id")
        if not event_id:
            raise CalendarError("Provider did not return an event id")
        logger.info(f"Created event {event_id}")
        return event_id

    async def list_upcoming(self, limit: int | None = None) -> list[CalendarEvent]:
        """Return single (expanded) events ordered by start time."""
        client = self.session.require_client()
        items = await asyncio.to_thread(
            client.list_events,
            self.calendar_id,
            limit or self.default_limit,
            True,
            "startTime",
        )
        return [CalendarEvent.from_api(event) for event in items]
