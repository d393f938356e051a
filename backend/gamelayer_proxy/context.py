"""
Application Context

Explicitly constructed container for the shared collaborators (settings,
API client, event bus, dashboard), passed to whoever needs them.
"""

from dataclasses import dataclass
from typing import Optional

import httpx

from gamelayer_proxy.client.gamelayer import ClientConfig, GameLayerAPI
from gamelayer_proxy.config import Settings, get_settings
from gamelayer_proxy.events import EventBus
from gamelayer_proxy.services.dashboard import Dashboard


@dataclass
class AppContext:
    settings: Settings
    api: GameLayerAPI
    events: EventBus
    dashboard: Dashboard

    async def aclose(self) -> None:
        await self.api.aclose()


def create_app_context(
    settings: Optional[Settings] = None,
    config: Optional[ClientConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AppContext:
    """
    Build an AppContext

    Args:
        settings: Application settings, defaults to get_settings()
        config: API client configuration, defaults to one built from settings
        transport: Optional httpx transport for the API client (used by tests)
    """
    settings = settings or get_settings()
    api = GameLayerAPI(
        config or ClientConfig.from_settings(settings),
        timeout=settings.HTTP_TIMEOUT,
        transport=transport,
    )
    events = EventBus()
    return AppContext(
        settings=settings,
        api=api,
        events=events,
        dashboard=Dashboard(api, events),
    )
