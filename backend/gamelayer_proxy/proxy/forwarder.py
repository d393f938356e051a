"""
Request Forwarder

The single forwarding core shared by both hosting adapters: builds the
outbound request, performs one upstream call and maps transport failures
to the fixed 502 envelope.
"""

import json
import logging
from typing import Optional

import httpx

from gamelayer_proxy.common.errors import TransportError
from gamelayer_proxy.config import Settings, get_settings
from gamelayer_proxy.domain.request import (
    DEFAULT_CONTENT_TYPE,
    InboundRequest,
    OutboundRequest,
    ProxyResponse,
    RequestBody,
)
from gamelayer_proxy.proxy.target import resolve_target

logger = logging.getLogger(__name__)

# Methods that never carry a request body upstream
BODYLESS_METHODS = frozenset({"GET", "HEAD"})


def build_upstream_headers(
    inbound: InboundRequest,
    default_api_key: Optional[str] = None,
) -> dict[str, str]:
    """
    Build the forwarded headers

    Only Content-Type, Accept and api-key are sent, each defaulted independently.
    """
    return {
        "Content-Type": inbound.header("content-type") or DEFAULT_CONTENT_TYPE,
        "Accept": inbound.header("accept") or DEFAULT_CONTENT_TYPE,
        "api-key": inbound.header("api-key") or default_api_key or "",
    }


def encode_body(method: str, body: RequestBody) -> Optional[bytes]:
    """
    Encode the body to forward

    Args:
        method: HTTP method
        body: Raw bytes, a string, or an already parsed JSON value

    Returns:
        Optional[bytes]: Body bytes, or None when nothing must be sent
    """
    if method.upper() in BODYLESS_METHODS or body is None:
        return None
    if isinstance(body, (bytes, bytearray)):
        content = bytes(body)
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return content or None


def transport_error_response(exc: TransportError) -> ProxyResponse:
    """Map a transport failure to the locally synthesized 502 response"""
    return ProxyResponse(
        status_code=exc.status_code,
        content_type=DEFAULT_CONTENT_TYPE,
        body=json.dumps(exc.to_dict()).encode("utf-8"),
    )


class ProxyForwarder:
    """
    GameLayer Forwarding Core

    Holds one lazily created httpx.AsyncClient for connection reuse;
    no per-request state is shared.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize forwarder

        Args:
            settings: Application settings, defaults to get_settings()
            transport: Optional httpx transport (used by tests)
        """
        self.settings = settings or get_settings()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.HTTP_TIMEOUT),
                follow_redirects=False,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP Client"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_outbound(self, inbound: InboundRequest) -> OutboundRequest:
        """Resolve target, headers and body for an inbound request"""
        target = resolve_target(inbound.raw_url, inbound.route_params)
        method = inbound.method.upper()
        return OutboundRequest(
            method=method,
            url=target.url(self.settings.GAMELAYER_ORIGIN),
            headers=build_upstream_headers(inbound, self.settings.GAMELAYER_API_KEY),
            content=encode_body(method, inbound.body),
        )

    async def send(self, outbound: OutboundRequest) -> ProxyResponse:
        """
        Perform the upstream call

        Raises:
            TransportError: The call could not be completed
        """
        logger.debug("Forwarding: method=%s url=%s", outbound.method, outbound.url)
        try:
            response = await self._get_client().request(
                method=outbound.method,
                url=outbound.url,
                headers=outbound.headers,
                content=outbound.content,
            )
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        return ProxyResponse(
            status_code=response.status_code,
            content_type=response.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
            body=response.content,
        )

    async def forward(self, inbound: InboundRequest) -> ProxyResponse:
        """
        Forward an inbound request to GameLayer

        Upstream statuses (including 4xx/5xx) pass through unchanged; only a
        transport failure produces a local 502 response. No retries.
        """
        outbound = self.build_outbound(inbound)
        try:
            proxy_response = await self.send(outbound)
        except TransportError as e:
            logger.error("[GameLayer proxy] %s %s: %s", outbound.method, outbound.url, e.message)
            return transport_error_response(e)

        if not proxy_response.is_success:
            logger.info(
                "Upstream returned %s for %s %s",
                proxy_response.status_code,
                outbound.method,
                outbound.url,
            )
        return proxy_response
