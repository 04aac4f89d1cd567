"""Provider capability and its Google implementation.

The Google client libraries are imported lazily:
    from workspace_bridge.providers.google import GoogleProvider
"""

from workspace_bridge.providers.base import Provider, TokenSet


def __getattr__(name):
    """Lazy import for the Google-backed provider."""
    if name == "GoogleProvider":
        from workspace_bridge.providers.google import GoogleProvider
        return GoogleProvider
    raise AttributeError(f"module 'workspace_bridge.providers' has no attribute {name!r}")


__all__ = ["Provider", "TokenSet", "GoogleProvider"]
