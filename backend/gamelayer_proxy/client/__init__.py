"""
GameLayer API Client Module
"""

from gamelayer_proxy.client.gamelayer import ClientConfig, GameLayerAPI

__all__ = [
    "ClientConfig",
    "GameLayerAPI",
]
