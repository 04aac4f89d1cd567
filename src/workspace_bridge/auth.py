"""OAuth2 authorization-code flow for the single session."""

from __future__ import annotations

import logging
from typing import Iterable
from urllib.parse import urlencode

from workspace_bridge.exceptions import AuthExchangeError, WorkspaceBridgeError
from workspace_bridge.providers.base import TokenSet
from workspace_bridge.session import Session

logger = logging.getLogger(__name__)


class AuthorizationFlow:
    """Builds consent URLs and completes the code exchange.

    The session is either unauthenticated or authenticated; the browser
    round-trip between the two is not tracked here.

    Args:
        session: Credential store populated on success.
        prompt: Optional ``prompt`` parameter for the consent screen
            (e.g. ``"consent"`` to force a new refresh token).
    """

    def __init__(self, session: Session, prompt: str | None = None):
        self.session = session
        self.prompt = prompt

    def build_authorization_url(self, scopes: Iterable[str]) -> str:
        """Return the provider consent URL requesting offline access."""
        config = self.session.client_config
        params = {
            "client_id": config.client_id,
            "redirect_uri": config.redirect_uri,
            "response_type": "code",
            "scope": " ".join(sorted(set(scopes))),
            "access_type": "offline",
        }
        if self.prompt:
            params["prompt"] = self.prompt
        return f"{config.auth_uri}?{urlencode(params)}"

    def complete_authorization(self, code: str) -> TokenSet:
        """Exchange ``code`` for tokens and store them in the session.

        Raises:
            AuthExchangeError: The exchange failed. The session is unchanged.
        """
        if not code:
            raise AuthExchangeError("Missing authorization code")

        try:
            tokens = self.session.get_client().exchange_code(code)
        except AuthExchangeError:
            raise
        except WorkspaceBridgeError as e:
            raise AuthExchangeError(f"Token exchange failed: {e}") from e

        self.session.set_tokens(tokens)
        return tokens
