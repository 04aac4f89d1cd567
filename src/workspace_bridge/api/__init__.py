"""FastAPI request handlers.

    from workspace_bridge.api.app import create_app
"""

from workspace_bridge.api.app import create_app, main

__all__ = ["create_app", "main"]
