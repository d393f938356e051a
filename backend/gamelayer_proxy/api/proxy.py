"""
GameLayer Proxy API

Thin Starlette adapter around the forwarding core, plus the dev-server router.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import Response
from starlette.requests import ClientDisconnect

from gamelayer_proxy.api.deps import ForwarderDep
from gamelayer_proxy.common.errors import TransportError
from gamelayer_proxy.common.proxy_headers import build_client_response_headers
from gamelayer_proxy.domain.request import API_PREFIX, InboundRequest, ProxyResponse
from gamelayer_proxy.proxy.forwarder import (
    BODYLESS_METHODS,
    ProxyForwarder,
    transport_error_response,
)

logger = logging.getLogger(__name__)

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

router = APIRouter(tags=["Proxy - GameLayer"])


def raw_url_of(request: Request) -> str:
    """
    Raw request target (path + "?query") as received, without percent-decoding
    """
    raw_path: bytes = request.scope.get("raw_path") or request.url.path.encode("utf-8")
    path = raw_path.split(b"?", 1)[0].decode("latin-1")
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


async def read_inbound(
    request: Request,
    route_params: Optional[Mapping[str, Any]] = None,
) -> InboundRequest:
    """
    Build an InboundRequest, buffering the whole body for non-GET/HEAD methods

    Raises:
        TransportError: The client went away before the body was read
    """
    method = request.method.upper()
    body = None
    if method not in BODYLESS_METHODS:
        try:
            body = await request.body()
        except ClientDisconnect as e:
            raise TransportError("Client disconnected before the request body was read") from e

    return InboundRequest(
        method=method,
        raw_url=raw_url_of(request),
        headers=request.headers,
        body=body,
        route_params=route_params,
    )


def to_response(proxy_response: ProxyResponse) -> Response:
    """Convert a ProxyResponse to a Starlette response, body untouched"""
    return Response(
        content=proxy_response.body,
        status_code=proxy_response.status_code,
        headers=build_client_response_headers(proxy_response),
    )


async def handle_proxy_request(
    request: Request,
    forwarder: ProxyForwarder,
    route_params: Optional[Mapping[str, Any]] = None,
) -> Response:
    """
    Handle generic proxy request logic
    """
    try:
        inbound = await read_inbound(request, route_params)
    except TransportError as e:
        logger.error("[GameLayer proxy] %s %s: %s", request.method, request.url.path, e.message)
        return to_response(transport_error_response(e))

    return to_response(await forwarder.forward(inbound))


@router.api_route(API_PREFIX, methods=PROXY_METHODS)
@router.api_route(API_PREFIX + "/{sub_path:path}", methods=PROXY_METHODS)
async def proxy_gamelayer(request: Request, forwarder: ForwarderDep):
    """
    GameLayer API Proxy

    Forwards /api/v0/* to the configured GameLayer origin.
    """
    return await handle_proxy_request(request, forwarder)
