"""
Forwarding Core
"""

from gamelayer_proxy.proxy.forwarder import ProxyForwarder
from gamelayer_proxy.proxy.target import resolve_target

__all__ = [
    "ProxyForwarder",
    "resolve_target",
]
