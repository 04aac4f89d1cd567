"""
workspace-bridge HTTP service - FastAPI application

Usage:
    workspace-bridge

    Or run directly:
    python -m workspace_bridge.api.app
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from workspace_bridge.api.routes import router
from workspace_bridge.broker import Broker
from workspace_bridge.config import Settings, configure_logging
from workspace_bridge.exceptions import ConfigError, UnauthorizedError
from workspace_bridge.session import ProviderFactory

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings,
    provider_factory: ProviderFactory | None = None,
) -> FastAPI:
    """Build the application around a fresh, unauthorized session."""
    app = FastAPI(title="workspace-bridge")
    app.state.broker = Broker.from_settings(settings, provider_factory)
    app.include_router(router)

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError):
        logger.info(f"Rejected {request.method} {request.url.path}: not authenticated")
        return PlainTextResponse("Not authenticated yet.", status_code=401)

    return app


def main() -> None:
    """Load configuration from the environment and serve."""
    import uvicorn
    from dotenv import load_dotenv

    load_dotenv()
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        raise SystemExit(1) from e

    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
