"""Unified exception hierarchy for workspace-bridge."""


class WorkspaceBridgeError(Exception):
    """Base exception for all workspace-bridge errors."""


class ConfigError(WorkspaceBridgeError):
    """Missing or invalid configuration value."""


# Authorization
class UnauthorizedError(WorkspaceBridgeError):
    """A gated operation was attempted before authorization completed."""


class AuthExchangeError(WorkspaceBridgeError):
    """The provider rejected the authorization code exchange."""


# Provider
class ProviderError(WorkspaceBridgeError):
    """Base exception for downstream provider failures."""


class MailError(ProviderError):
    """Failed to list or fetch mail data."""


class CalendarError(ProviderError):
    """Failed to create or list calendar events."""
