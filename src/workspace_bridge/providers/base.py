"""Abstract interface for the mail and calendar provider."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from workspace_bridge.config import DetailLevel


@dataclass(frozen=True)
class TokenSet:
    """Access/refresh token pair returned by a code exchange."""

    access_token: str
    refresh_token: str | None = None
    expiry: datetime | None = None
    scopes: tuple[str, ...] = ()


class Provider(ABC):
    """Capability surface consumed by the mail and calendar services.

    Implementations are synchronous; services run calls in worker threads.
    """

    @abstractmethod
    def list_messages(self, query: str, max_results: int) -> list[dict]:
        """Return message references (``{"id": ...}``) matching ``query``."""
        ...

    @abstractmethod
    def get_message(
        self,
        message_id: str,
        detail_level: DetailLevel,
        metadata_headers: list[str] | None = None,
    ) -> dict:
        """Return the message resource; ``payload`` holds the part tree."""
        ...

    @abstractmethod
    def insert_event(self, calendar_id: str, event: dict) -> dict:
        """Insert an event and return the created resource."""
        ...

    @abstractmethod
    def list_events(
        self,
        calendar_id: str,
        max_results: int,
        single_events: bool = True,
        order_by: str = "startTime",
    ) -> list[dict]:
        """Return raw event resources."""
        ...

    @abstractmethod
    def exchange_code(self, code: str) -> TokenSet:
        """Trade a one-time authorization code for a token pair."""
        ...
