"""
GameLayer Serverless Handler

On-demand ASGI application for serverless hosting. The routing layer may
deliver the literal /api/v0/... path, or rewrite it and pass the captured
sub-path in the "path" query parameter; both reach the same forwarding core.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from gamelayer_proxy.api.deps import ForwarderDep
from gamelayer_proxy.api.handlers import register_exception_handlers
from gamelayer_proxy.api.proxy import PROXY_METHODS, handle_proxy_request
from gamelayer_proxy.config import Settings, get_settings
from gamelayer_proxy.domain.request import API_PREFIX
from gamelayer_proxy.logging_config import setup_logging
from gamelayer_proxy.proxy.forwarder import ProxyForwarder

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.forwarder.close()


def create_app(
    settings: Optional[Settings] = None,
    forwarder: Optional[ProxyForwarder] = None,
) -> FastAPI:
    """
    Create the on-demand proxy application

    Args:
        settings: Application settings, defaults to get_settings()
        forwarder: Forwarding core, defaults to one built from settings
    """
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.APP_NAME,
        description="GameLayer API proxy (serverless handler)",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.forwarder = forwarder or ProxyForwarder(settings)

    register_exception_handlers(app)

    @app.api_route(API_PREFIX, methods=PROXY_METHODS)
    @app.api_route(API_PREFIX + "/{path:path}", methods=PROXY_METHODS)
    async def proxy_mounted(request: Request, forwarder: ForwarderDep):
        """Literal /api/v0/... request, sub-path also captured as a route param"""
        return await handle_proxy_request(request, forwarder, route_params=request.path_params)

    @app.api_route("/{rest:path}", methods=PROXY_METHODS)
    async def proxy_rewritten(request: Request, forwarder: ForwarderDep):
        """Rewritten request, sub-path taken from the "path" query parameter"""
        return await handle_proxy_request(request, forwarder)

    return app


app = create_app()
