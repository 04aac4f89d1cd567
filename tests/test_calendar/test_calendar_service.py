"""Tests for gated calendar access."""

import asyncio

import pytest

from workspace_bridge.calendar.models import CalendarEvent, build_event_body
from workspace_bridge.calendar.service import CalendarService
from workspace_bridge.exceptions import CalendarError, UnauthorizedError


def test_build_event_body():
    body = build_event_body("Lunch", "2024-01-15T12:00:00", "2024-01-15T13:00:00", "UTC")
    assert body == {
        "summary": "Lunch",
        "start": {"dateTime": "2024-01-15T12:00:00", "timeZone": "UTC"},
        "end": {"dateTime": "2024-01-15T13:00:00", "timeZone": "UTC"},
    }


def test_create_requires_authorization(session, provider):
    with pytest.raises(UnauthorizedError):
        asyncio.run(CalendarService(session).create_event("x", "a", "b"))
    assert provider.calls == []


def test_list_requires_authorization(session, provider):
    with pytest.raises(UnauthorizedError):
        asyncio.run(CalendarService(session).list_upcoming(5))
    assert provider.calls == []


def test_create_event_uses_fixed_timezone(authorized_session, provider):
    service = CalendarService(authorized_session, timezone="America/New_York")
    event_id = asyncio.run(
        service.create_event("Standup", "2024-01-01T09:00:00", "2024-01-01T09:15:00")
    )
    assert event_id
    assert len(provider.calls) == 1
    method, (calendar_id, event) = provider.calls[0]
    assert method == "insert_event"
    assert calendar_id == "primary"
    assert event["start"]["timeZone"] == "America/New_York"
    assert event["end"]["timeZone"] == "America/New_York"


def test_create_event_provider_error(authorized_session, provider):
    provider.insert_error = CalendarError("Failed to create event: bad datetime")
    with pytest.raises(CalendarError, match="bad datetime"):
        asyncio.run(CalendarService(authorized_session).create_event("x", "nope", "nope"))


def test_list_upcoming_projects_fields(authorized_session, provider):
    provider.events = [
        {
            "id": "evt1",
            "summary": "Team Meeting",
            "start": {"dateTime": "2024-01-15T09:00:00-05:00"},
            "end": {"dateTime": "2024-01-15T10:00:00-05:00"},
            "status": "confirmed",
            "attendees": [{"email": "a@example.com"}],
        }
    ]
    events = asyncio.run(CalendarService(authorized_session, calendar_id="work").list_upcoming(3))
    assert events == [
        CalendarEvent(
            id="evt1",
            summary="Team Meeting",
            start={"dateTime": "2024-01-15T09:00:00-05:00"},
            end={"dateTime": "2024-01-15T10:00:00-05:00"},
        )
    ]
    assert provider.calls == [("list_events", ("work", 3, True, "startTime"))]


def test_list_upcoming_default_limit(authorized_session, provider):
    asyncio.run(CalendarService(authorized_session, default_limit=7).list_upcoming())
    assert provider.calls == [("list_events", ("primary", 7, True, "startTime"))]
