"""Data models for the mail module."""

from __future__ import annotations

from dataclasses import dataclass

NO_SUBJECT = "(No Subject)"
UNKNOWN_SENDER = "(Unknown Sender)"


@dataclass
class NormalizedEmail:
    """Flat representation of a Gmail message."""

    id: str
    subject: str = NO_SUBJECT
    sender: str = UNKNOWN_SENDER
    snippet: str | None = None
    body: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "subject": self.subject,
            "from": self.sender,
            "snippet": self.snippet,
            "body": self.body,
        }
