"""Environment-backed settings, loaded once at startup."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from workspace_bridge.exceptions import ConfigError

GOOGLE_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

GMAIL_MODIFY_SCOPE = "https://www.googleapis.com/auth/gmail.modify"
CALENDAR_SCOPE = "https://www.googleapis.com/auth/calendar"

DEFAULT_SCOPES = (GMAIL_MODIFY_SCOPE, CALENDAR_SCOPE)
DEFAULT_TIMEZONE = "America/New_York"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class DetailLevel(str, Enum):
    """Requested fetch granularity for a message."""

    METADATA = "metadata"
    FULL = "full"


class BatchPolicy(str, Enum):
    """What a batch fetch does when a single message fetch fails."""

    ALL_OR_NOTHING = "all_or_nothing"
    PARTIAL = "partial"


@dataclass(frozen=True)
class ClientConfig:
    """OAuth client registration for the provider."""

    client_id: str
    client_secret: str
    redirect_uri: str
    auth_uri: str = GOOGLE_AUTH_URI
    token_uri: str = GOOGLE_TOKEN_URI

    def to_client_secrets(self) -> dict:
        """Return the ``client_secrets.json`` shape google-auth-oauthlib expects."""
        return {
            "web": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uris": [self.redirect_uri],
                "auth_uri": self.auth_uri,
                "token_uri": self.token_uri,
            }
        }


@dataclass(frozen=True)
class Settings:
    """Process configuration. Immutable once built."""

    client: ClientConfig
    host: str = "127.0.0.1"
    port: int = 3000
    timezone: str = DEFAULT_TIMEZONE
    calendar_id: str = "primary"
    scopes: tuple[str, ...] = DEFAULT_SCOPES
    prompt: str | None = None
    mail_query: str = "in:inbox"
    mail_max_results: int = 10
    events_max_results: int = 10
    detail_level: DetailLevel = DetailLevel.FULL
    batch_policy: BatchPolicy = BatchPolicy.ALL_OR_NOTHING
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Raises:
            ConfigError: A required variable is missing or a value is invalid.
        """
        env = os.environ if environ is None else environ

        missing = [
            name for name in ("CLIENT_ID", "CLIENT_SECRET", "REDIRECT_URI")
            if not env.get(name)
        ]
        if missing:
            raise ConfigError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        client = ClientConfig(
            client_id=env["CLIENT_ID"],
            client_secret=env["CLIENT_SECRET"],
            redirect_uri=env["REDIRECT_URI"],
        )

        return cls(
            client=client,
            host=env.get("HOST", "127.0.0.1"),
            port=_int(env, "PORT", 3000),
            timezone=env.get("TIMEZONE", DEFAULT_TIMEZONE),
            calendar_id=env.get("CALENDAR_ID", "primary"),
            scopes=_scopes(env.get("OAUTH_SCOPES")),
            prompt=env.get("OAUTH_PROMPT") or None,
            mail_query=env.get("MAIL_QUERY", "in:inbox"),
            mail_max_results=_int(env, "MAIL_MAX_RESULTS", 10),
            events_max_results=_int(env, "EVENTS_MAX_RESULTS", 10),
            detail_level=_enum(env, "MAIL_DETAIL_LEVEL", DetailLevel, DetailLevel.FULL),
            batch_policy=_enum(
                env, "BATCH_POLICY", BatchPolicy, BatchPolicy.ALL_OR_NOTHING
            ),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def _enum(env: Mapping[str, str], name: str, enum_cls, default):
    raw = env.get(name)
    if not raw:
        return default
    try:
        return enum_cls(raw.strip().lower())
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConfigError(f"{name} must be one of: {allowed}; got {raw!r}") from e


def _scopes(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_SCOPES
    scopes = tuple(s for s in re.split(r"[,\s]+", raw) if s)
    if not scopes:
        raise ConfigError("OAUTH_SCOPES is set but contains no scopes")
    return scopes


def configure_logging(level: str = "INFO") -> None:
    """Install the root log handler."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
