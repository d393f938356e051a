"""
GameLayer Dev Server Entry Point

Long-running FastAPI application for local development: serves the dashboard
files and proxies /api/v0/* to GameLayer so the browser never hits CORS.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from gamelayer_proxy.api import DashboardStaticFiles, proxy_router
from gamelayer_proxy.api.handlers import register_exception_handlers
from gamelayer_proxy.config import Settings, get_settings
from gamelayer_proxy.logging_config import setup_logging
from gamelayer_proxy.proxy.forwarder import ProxyForwarder

logger = logging.getLogger(__name__)

# Initialize logging configuration
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application Lifecycle Management

    Announce the dev server on startup, release the upstream client on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info("Dev server: http://localhost:%s", settings.DEV_SERVER_PORT)
    logger.info("Serving static files from %s", settings.STATIC_ROOT)
    logger.info("API requests to /api/v0/* are proxied to GameLayer (no CORS).")
    yield
    await app.state.forwarder.close()


def create_app(
    settings: Optional[Settings] = None,
    forwarder: Optional[ProxyForwarder] = None,
) -> FastAPI:
    """
    Create the dev server application

    Args:
        settings: Application settings, defaults to get_settings()
        forwarder: Forwarding core, defaults to one built from settings
    """
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.APP_NAME,
        description="GameLayer dashboard dev server with same-origin API proxy",
        version="0.1.0",
        lifespan=lifespan,
        # Every non-API path belongs to the static surface
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.forwarder = forwarder or ProxyForwarder(settings)

    register_exception_handlers(app)

    # Proxy first: the static mount must not shadow /api/v0
    app.include_router(proxy_router)
    app.mount("/", DashboardStaticFiles(directory=settings.STATIC_ROOT, html=True), name="static")
    return app


app = create_app()


def run() -> None:
    """Run the dev server with uvicorn"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "gamelayer_proxy.main:app",
        host=settings.DEV_SERVER_HOST,
        port=settings.DEV_SERVER_PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    run()
