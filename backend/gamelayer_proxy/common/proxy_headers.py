"""
Proxy response header utilities.

Every response returned to the browser, whether relayed from GameLayer or
synthesized locally, carries a permissive CORS header.
"""

from __future__ import annotations

from gamelayer_proxy.domain.request import ProxyResponse

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


def build_client_response_headers(response: ProxyResponse) -> dict[str, str]:
    """
    Headers for the response handed back to the inbound caller.

    Only the content type is relayed from upstream; framing headers
    (Content-Length, Transfer-Encoding, Content-Encoding) are recomputed
    by the server since httpx hands us the decoded body.
    """
    return {"Content-Type": response.content_type, **CORS_HEADERS}
