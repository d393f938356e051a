"""
Request/Response Domain Model

Defines the transient values that flow through one proxied request.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

# Mount prefix under which the proxy accepts requests, and the upstream version segment
API_PREFIX = "/api/v0"

DEFAULT_CONTENT_TYPE = "application/json"

# Body forms accepted by the forwarder:
# - bytes: raw inbound stream, fully buffered
# - str / dict / list / other JSON values: already parsed by an upstream layer
RequestBody = Union[bytes, str, dict, list, int, float, bool, None]


@dataclass
class InboundRequest:
    """
    Inbound Request Data Class

    Encapsulates the request received by a hosting adapter.
    """

    # HTTP Method
    method: str
    # Raw path plus optional "?query", not percent-decoded
    raw_url: str
    # Request Headers (lookup is case-insensitive, see header())
    headers: Mapping[str, str] = field(default_factory=dict)
    # Request Body
    body: RequestBody = None
    # Route values captured by the hosting framework, if any
    route_params: Optional[Mapping[str, Any]] = None

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup, empty values count as missing"""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted and value:
                return value
        return None


@dataclass
class UpstreamTarget:
    """
    Resolved upstream location

    sub_path carries no leading or trailing slash, query is "" or starts with "?".
    """

    sub_path: str
    query: str = ""

    def url(self, origin: str) -> str:
        return f"{origin.rstrip('/')}{API_PREFIX}/{self.sub_path}{self.query}"


@dataclass
class OutboundRequest:
    """
    Outbound Request Data Class

    Exactly what is sent upstream.
    """

    method: str
    url: str
    headers: dict[str, str]
    content: Optional[bytes] = None


@dataclass
class ProxyResponse:
    """
    Proxy Response Data Class

    Status, content type and raw body returned to the inbound caller.
    """

    # HTTP Status Code
    status_code: int
    # Response Content-Type
    content_type: str = DEFAULT_CONTENT_TYPE
    # Raw body, never re-parsed
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        """Whether the upstream answered with a 2xx/3xx status"""
        return 200 <= self.status_code < 400
