"""Wires the session, authorization flow and services for one process."""

from __future__ import annotations

from dataclasses import dataclass

from workspace_bridge.auth import AuthorizationFlow
from workspace_bridge.calendar.service import CalendarService
from workspace_bridge.config import Settings
from workspace_bridge.mail.service import MailService
from workspace_bridge.session import ProviderFactory, Session


@dataclass
class Broker:
    """Everything a request handler needs, built once at startup."""

    settings: Settings
    session: Session
    auth: AuthorizationFlow
    mail: MailService
    calendar: CalendarService

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        provider_factory: ProviderFactory | None = None,
    ) -> "Broker":
        if provider_factory is None:
            from workspace_bridge.providers.google import GoogleProvider
            provider_factory = GoogleProvider

        session = Session(settings.client, provider_factory)
        return cls(
            settings=settings,
            session=session,
            auth=AuthorizationFlow(session, prompt=settings.prompt),
            mail=MailService(
                session,
                default_query=settings.mail_query,
                default_limit=settings.mail_max_results,
                default_detail=settings.detail_level,
                batch_policy=settings.batch_policy,
            ),
            calendar=CalendarService(
                session,
                timezone=settings.timezone,
                calendar_id=settings.calendar_id,
                default_limit=settings.events_max_results,
            ),
        )

    def authorization_url(self) -> str:
        return self.auth.build_authorization_url(self.settings.scopes)
