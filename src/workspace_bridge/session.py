"""In-memory credential store for the single authenticated session."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from workspace_bridge.config import ClientConfig
from workspace_bridge.exceptions import UnauthorizedError
from workspace_bridge.providers.base import Provider, TokenSet

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[ClientConfig, Optional[TokenSet]], Provider]


class Session:
    """Holds the OAuth client configuration and the current token pair.

    Tokens start absent, are written by a successful authorization and
    overwritten by the next one. Nothing is persisted.

    Args:
        client_config: OAuth client registration, fixed for the process.
        provider_factory: Builds a provider handle from the client config
            and the current tokens (``None`` before authorization).
    """

    def __init__(self, client_config: ClientConfig, provider_factory: ProviderFactory):
        self.client_config = client_config
        self._provider_factory = provider_factory
        self._tokens: TokenSet | None = None
        self._client: Provider | None = None

    @property
    def tokens(self) -> TokenSet | None:
        return self._tokens

    def is_authorized(self) -> bool:
        return self._tokens is not None

    def set_tokens(self, tokens: TokenSet) -> None:
        """Replace the current tokens; the cached provider handle is dropped."""
        self._tokens = tokens
        self._client = None
        logger.info("Session authorized (refresh token: %s)", bool(tokens.refresh_token))

    def get_client(self) -> Provider:
        """Return the provider handle for the current token state."""
        if self._client is None:
            self._client = self._provider_factory(self.client_config, self._tokens)
        return self._client

    def require_client(self) -> Provider:
        """Return the provider handle, or raise if not yet authorized."""
        if not self.is_authorized():
            raise UnauthorizedError("Not authenticated yet.")
        return self.get_client()
