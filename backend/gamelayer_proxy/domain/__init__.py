"""
Domain Model Module Initialization
"""

from gamelayer_proxy.domain.request import (
    API_PREFIX,
    InboundRequest,
    OutboundRequest,
    ProxyResponse,
    UpstreamTarget,
)

__all__ = [
    "API_PREFIX",
    "InboundRequest",
    "OutboundRequest",
    "ProxyResponse",
    "UpstreamTarget",
]
