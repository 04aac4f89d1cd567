"""Calendar event creation and listing."""

from workspace_bridge.calendar.models import CalendarEvent, build_event_body
from workspace_bridge.calendar.service import CalendarService

__all__ = ["CalendarEvent", "CalendarService", "build_event_body"]
