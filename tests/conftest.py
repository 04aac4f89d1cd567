"""Shared fixtures: an in-memory provider that records every call."""

import time

import pytest

from workspace_bridge.config import ClientConfig, Settings
from workspace_bridge.exceptions import AuthExchangeError, MailError
from workspace_bridge.providers.base import Provider, TokenSet
from workspace_bridge.session import Session


class FakeProvider(Provider):
    """Provider double. ``calls`` logs (method, args) in call order."""

    def __init__(self, client_config=None, tokens=None):
        self.client_config = client_config
        self.tokens = tokens
        self.calls = []
        self.messages = {}
        self.delays = {}
        self.failing_ids = set()
        self.events = []
        self.valid_codes = {"valid-code"}
        self.insert_error = None

    def list_messages(self, query, max_results):
        self.calls.append(("list_messages", (query, max_results)))
        return [{"id": msg_id} for msg_id in list(self.messages)[:max_results]]

    def get_message(self, message_id, detail_level, metadata_headers=None):
        self.calls.append(("get_message", (message_id, detail_level, metadata_headers)))
        time.sleep(self.delays.get(message_id, 0))
        if message_id in self.failing_ids:
            raise MailError(f"Failed to fetch message {message_id}: 404")
        return self.messages[message_id]

    def insert_event(self, calendar_id, event):
        self.calls.append(("insert_event", (calendar_id, event)))
        if self.insert_error is not None:
            raise self.insert_error
        return {"id": f"evt-{len(self.calls)}", **event}

    def list_events(self, calendar_id, max_results, single_events=True, order_by="startTime"):
        self.calls.append(("list_events", (calendar_id, max_results, single_events, order_by)))
        return self.events[:max_results]

    def exchange_code(self, code):
        self.calls.append(("exchange_code", (code,)))
        if code not in self.valid_codes:
            raise AuthExchangeError("Token exchange failed: invalid_grant")
        return TokenSet(access_token="access-123", refresh_token="refresh-456")


class FakeProviderFactory:
    """Returns one shared FakeProvider so tests can inspect its calls."""

    def __init__(self):
        self.provider = FakeProvider()
        self.builds = []

    def __call__(self, client_config, tokens):
        self.builds.append(tokens)
        self.provider.client_config = client_config
        self.provider.tokens = tokens
        return self.provider


@pytest.fixture
def client_config():
    return ClientConfig(
        client_id="client-abc.apps.googleusercontent.com",
        client_secret="s3cret",
        redirect_uri="http://localhost:3000/oauth2callback",
    )


@pytest.fixture
def settings(client_config):
    return Settings(client=client_config)


@pytest.fixture
def factory():
    return FakeProviderFactory()


@pytest.fixture
def provider(factory):
    return factory.provider


@pytest.fixture
def session(client_config, factory):
    return Session(client_config, factory)


@pytest.fixture
def authorized_session(session):
    session.set_tokens(TokenSet(access_token="access-123", refresh_token="refresh-456"))
    return session
