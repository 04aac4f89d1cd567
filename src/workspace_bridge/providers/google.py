"""Gmail and Google Calendar provider backed by google-api-python-client."""

from __future__ import annotations

import logging
import threading
from typing import Any

import httplib2
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build, Resource
from googleapiclient.http import HttpRequest

from workspace_bridge.config import ClientConfig, DetailLevel
from workspace_bridge.exceptions import (
    AuthExchangeError,
    CalendarError,
    MailError,
    UnauthorizedError,
)
from workspace_bridge.providers.base import Provider, TokenSet

logger = logging.getLogger(__name__)


class GoogleProvider(Provider):
    """Google implementation of the provider capability.

    Args:
        client_config: OAuth client registration.
        tokens: Token pair from a completed exchange. Without it only
            ``exchange_code`` is usable.
    """

    def __init__(self, client_config: ClientConfig, tokens: TokenSet | None = None):
        self._client_config = client_config
        self._tokens = tokens
        self._creds: Credentials | None = None
        self._gmail: Resource | None = None
        self._calendar: Resource | None = None
        self._lock = threading.Lock()

    def _credentials(self) -> Credentials:
        if self._tokens is None:
            raise UnauthorizedError("No tokens available. Complete authorization first.")
        with self._lock:
            if self._creds is None:
                self._creds = Credentials(
                    token=self._tokens.access_token,
                    refresh_token=self._tokens.refresh_token,
                    token_uri=self._client_config.token_uri,
                    client_id=self._client_config.client_id,
                    client_secret=self._client_config.client_secret,
                    scopes=list(self._tokens.scopes) or None,
                    expiry=self._tokens.expiry,
                )
            return self._creds

    def _service(self, attr: str, api: str, version: str) -> Resource:
        creds = self._credentials()
        with self._lock:
            service = getattr(self, attr)
            if service is None:
                service = build(api, version, credentials=creds, cache_discovery=False)
                setattr(self, attr, service)
            return service

    @property
    def gmail(self) -> Resource:
        return self._service("_gmail", "gmail", "v1")

    @property
    def calendar(self) -> Resource:
        return self._service("_calendar", "calendar", "v3")

    def _execute(self, request: HttpRequest) -> dict:
        # httplib2.Http is not thread-safe; batch fetches run in worker
        # threads, so every request gets its own authorized transport.
        http = AuthorizedHttp(self._credentials(), http=httplib2.Http())
        return request.execute(http=http)

    # ---- Mail ----

    def list_messages(self, query: str, max_results: int) -> list[dict]:
        service = self.gmail
        try:
            response = self._execute(
                service.users()
                .messages()
                .list(userId="me", q=query, maxResults=max_results)
            )
        except Exception as e:
            raise MailError(f"Failed to list messages: {e}") from e
        return response.get("messages", [])

    def get_message(
        self,
        message_id: str,
        detail_level: DetailLevel,
        metadata_headers: list[str] | None = None,
    ) -> dict:
        service = self.gmail
        kwargs: dict[str, Any] = {
            "userId": "me",
            "id": message_id,
            "format": DetailLevel(detail_level).value,
        }
        if detail_level == DetailLevel.METADATA and metadata_headers:
            kwargs["metadataHeaders"] = metadata_headers
        try:
            return self._execute(service.users().messages().get(**kwargs))
        except Exception as e:
            raise MailError(f"Failed to fetch message {message_id}: {e}") from e

    # ---- Calendar ----

    def insert_event(self, calendar_id: str, event: dict) -> dict:
        service = self.calendar
        try:
            return self._execute(
                service.events().insert(calendarId=calendar_id, body=event)
            )
        except Exception as e:
            raise CalendarError(f"Failed to create event: {e}") from e

    def list_events(
        self,
        calendar_id: str,
        max_results: int,
        single_events: bool = True,
        order_by: str = "startTime",
    ) -> list[dict]:
        service = self.calendar
        try:
            result = self._execute(
                service.events().list(
                    calendarId=calendar_id,
                    maxResults=max_results,
                    singleEvents=single_events,
                    orderBy=order_by,
                )
            )
        except Exception as e:
            raise CalendarError(f"Failed to list events: {e}") from e
        return result.get("items", [])

    # ---- OAuth ----

    def exchange_code(self, code: str) -> TokenSet:
        # Scopes are left unset so the granted set in the token response is
        # accepted as-is instead of being compared against the request.
        flow = Flow.from_client_config(
            self._client_config.to_client_secrets(),
            scopes=None,
            redirect_uri=self._client_config.redirect_uri,
            autogenerate_code_verifier=False,
        )
        try:
            flow.fetch_token(code=code)
            creds = flow.credentials
        except Exception as e:
            raise AuthExchangeError(f"Token exchange failed: {e}") from e

        if not creds.token:
            raise AuthExchangeError("Token exchange did not return an access token")

        granted = getattr(creds, "granted_scopes", None) or creds.scopes or ()
        return TokenSet(
            access_token=creds.token,
            refresh_token=creds.refresh_token,
            expiry=creds.expiry,
            scopes=tuple(granted),
        )
