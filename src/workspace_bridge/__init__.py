"""OAuth-gated HTTP bridge to one user's Gmail and Google Calendar.

Heavy imports are deferred. Use explicit imports:
    from workspace_bridge.api.app import create_app
    from workspace_bridge.providers.google import GoogleProvider
"""

from workspace_bridge.config import BatchPolicy, ClientConfig, DetailLevel, Settings
from workspace_bridge.exceptions import (
    AuthExchangeError,
    CalendarError,
    ConfigError,
    MailError,
    ProviderError,
    UnauthorizedError,
    WorkspaceBridgeError,
)
from workspace_bridge.providers.base import Provider, TokenSet
from workspace_bridge.session import Session

__all__ = [
    "AuthExchangeError",
    "BatchPolicy",
    "CalendarError",
    "ClientConfig",
    "ConfigError",
    "DetailLevel",
    "MailError",
    "Provider",
    "ProviderError",
    "Session",
    "Settings",
    "TokenSet",
    "UnauthorizedError",
    "WorkspaceBridgeError",
]
