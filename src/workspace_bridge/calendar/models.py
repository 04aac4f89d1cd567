"""Data models for the calendar module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class CalendarEvent:
    """Projection of a provider event: id, summary and start/end as given."""

    id: str | None
    summary: str | None
    start: dict[str, Any] | None
    end: dict[str, Any] | None

    @classmethod
    def from_api(cls, event: dict) -> "CalendarEvent":
        return cls(
            id=event.get("id"),
            summary=event.get("summary"),
            start=event.get("start"),
            end=event.get("end"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "summary": self.summary,
            "start": self.start,
            "end": self.end,
        }


def build_event_body(summary: str, start: str, end: str, timezone: str) -> dict:
    """Outbound event resource; both ends share the configured timezone."""
    return {
        "summary": summary,
        "start": {"dateTime": start, "timeZone": timezone},
        "end": {"dateTime": end, "timeZone": timezone},
    }
