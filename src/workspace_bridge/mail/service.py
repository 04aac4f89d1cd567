"""Gated mail access: list message ids and fetch normalized messages."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from workspace_bridge.config import BatchPolicy, DetailLevel
from workspace_bridge.exceptions import ProviderError
from workspace_bridge.mail.models import NormalizedEmail
from workspace_bridge.mail.parser import normalize_message
from workspace_bridge.session import Session

logger = logging.getLogger(__name__)

METADATA_HEADERS = ["Subject", "From"]


class MailService:
    """Lists and fetches messages through the session's provider.

    Args:
        session: Credential store; every call requires it to be authorized.
        default_query: Search query used when none is given.
        default_limit: Listing size used when none is given.
        default_detail: Fetch granularity used when none is given.
        batch_policy: ``ALL_OR_NOTHING`` aborts a batch on the first failed
            fetch; ``PARTIAL`` drops failed messages and keeps the rest.
    """

    def __init__(
        self,
        session: Session,
        default_query: str = "in:inbox",
        default_limit: int = 10,
        default_detail: DetailLevel = DetailLevel.FULL,
        batch_policy: BatchPolicy = BatchPolicy.ALL_OR_NOTHING,
    ):
        self.session = session
        self.default_query = default_query
        self.default_limit = default_limit
        self.default_detail = default_detail
        self.batch_policy = batch_policy

    async def list_recent_messages(self, query: str, limit: int) -> list[dict]:
        """Return ``{"id": ...}`` references matching ``query``."""
        client = self.session.require_client()
        messages = await asyncio.to_thread(client.list_messages, query, limit)
        logger.info(f"Listed {len(messages)} messages for query {query!r}")
        return [{"id": m["id"]} for m in messages]

    async def fetch_normalized(
        self,
        ids: Sequence[str],
        detail_level: DetailLevel = DetailLevel.FULL,
    ) -> list[NormalizedEmail]:
        """Fetch and normalize each message; output order follows ``ids``."""
        client = self.session.require_client()
        detail_level = DetailLevel(detail_level)
        headers = METADATA_HEADERS if detail_level == DetailLevel.METADATA else None

        async def fetch_one(message_id: str) -> NormalizedEmail:
            message = await asyncio.to_thread(
                client.get_message, message_id, detail_level, headers
            )
            return normalize_message(message, detail_level)

        tasks = [fetch_one(message_id) for message_id in ids]

        if self.batch_policy == BatchPolicy.ALL_OR_NOTHING:
            return list(await asyncio.gather(*tasks))

        results = await asyncio.gather(*tasks, return_exceptions=True)
        emails: list[NormalizedEmail] = []
        for message_id, result in zip(ids, results):
            if isinstance(result, ProviderError):
                logger.warning(f"Failed to fetch message {message_id}: {result}")
                continue
            if isinstance(result, BaseException):
                raise result
            emails.append(result)
        return emails

    async def get_recent_emails(
        self,
        query: str | None = None,
        limit: int | None = None,
        detail_level: DetailLevel | None = None,
    ) -> list[NormalizedEmail]:
        """List then fetch, falling back to the configured defaults."""
        refs = await self.list_recent_messages(
            query or self.default_query,
            limit or self.default_limit,
        )
        return await self.fetch_normalized(
            [ref["id"] for ref in refs],
            detail_level or self.default_detail,
        )
